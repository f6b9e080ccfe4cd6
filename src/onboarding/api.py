"""
Onboarding API Endpoints.

Separate router for the first-run household profile wizard.
The frontend mounts the wizard with GET /onboarding, edits it step by step,
and follows ``redirect_to`` whenever a response carries one.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ValidationError

from ecolar.db.profiles import SupabaseProfileStore
from ecolar.web.auth import AuthenticatedUser, get_current_user, get_optional_user
from ecolar.web.routes import RecordingNavigator

from .errors import (
    OnboardingError,
    SubmissionError,
    SubmissionInProgressError,
    WizardNavigationError,
)
from .guard import ProfileStore
from .options import get_form_options
from .wizard import OnboardingWizard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/onboarding", tags=["onboarding"])

# Active wizards (keyed by user_id). A wizard lives from mount until it
# redirects or the page unmounts it.
wizards: dict[str, OnboardingWizard] = {}


# =============================================================================
# Request/Response Models
# =============================================================================


class FieldUpdateRequest(BaseModel):
    """Set one form field."""
    field: str
    value: Any = None


class WizardResponse(BaseModel):
    """Either a view to draw or a page to go to."""
    view: dict | None = None
    redirect_to: str | None = None


# =============================================================================
# Dependencies & Helpers
# =============================================================================


async def get_profile_store(
    user: AuthenticatedUser | None = Depends(get_optional_user),
) -> ProfileStore:
    """Profile store acting as the signed-in user."""
    return SupabaseProfileStore(access_token=user.access_token if user else None)


def get_active_wizard(user_id: str) -> OnboardingWizard:
    wizard = wizards.get(user_id)
    if wizard is None or wizard.state is None:
        raise HTTPException(status_code=404, detail="No onboarding in progress")
    return wizard


def discard_wizard(user_id: str) -> None:
    wizard = wizards.pop(user_id, None)
    if wizard is not None:
        wizard.unmount()


def _respond(wizard: OnboardingWizard, navigator: RecordingNavigator, user_id: str) -> WizardResponse:
    if navigator.redirect_to:
        if wizards.get(user_id) is wizard:
            discard_wizard(user_id)
        return WizardResponse(redirect_to=navigator.redirect_to)
    return WizardResponse(view=wizard.render())


# =============================================================================
# Endpoints: Lifecycle
# =============================================================================


@router.get("", response_model=WizardResponse)
async def open_onboarding(
    user: AuthenticatedUser | None = Depends(get_optional_user),
    store: ProfileStore = Depends(get_profile_store),
) -> WizardResponse:
    """
    Mount the wizard.

    Signed-out users are sent to login, onboarded users to the dashboard;
    everyone else gets a fresh step-1 view.
    """
    navigator = RecordingNavigator()
    wizard = OnboardingWizard(user, store, navigator)

    if user is not None:
        discard_wizard(user.id)
        wizards[user.id] = wizard

    await wizard.mount()

    if navigator.redirect_to:
        if user is not None:
            discard_wizard(user.id)
        logger.info(f"Onboarding redirect -> {navigator.redirect_to}")
        return WizardResponse(redirect_to=navigator.redirect_to)

    return WizardResponse(view=wizard.render())


@router.get("/view", response_model=WizardResponse)
async def get_view(user: AuthenticatedUser = Depends(get_current_user)) -> WizardResponse:
    """
    Current view of the active wizard.

    While the mount-time check is still running this is the loading view.
    """
    wizard = wizards.get(user.id)
    if wizard is not None and wizard.loading and wizard.mounted:
        return WizardResponse(view=wizard.render())
    return WizardResponse(view=get_active_wizard(user.id).render())


@router.delete("")
async def close_onboarding(user: AuthenticatedUser = Depends(get_current_user)):
    """Unmount the wizard and forget its answers."""
    discard_wizard(user.id)
    return {"success": True}


@router.get("/options")
async def get_onboarding_options():
    """Option catalogs (label + icon) for every choice field."""
    return get_form_options()


# =============================================================================
# Endpoints: Editing & Navigation
# =============================================================================


@router.patch("/fields", response_model=WizardResponse)
async def update_field(
    request: FieldUpdateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
) -> WizardResponse:
    """Set a single form field."""
    wizard = get_active_wizard(user.id)
    try:
        wizard.set_field(request.field, request.value)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except OnboardingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return WizardResponse(view=wizard.render())


@router.post("/toggle/{field}", response_model=WizardResponse)
async def toggle_field(field: str, user: AuthenticatedUser = Depends(get_current_user)) -> WizardResponse:
    """Flip has_garden or has_solar_panels."""
    wizard = get_active_wizard(user.id)
    try:
        wizard.toggle(field)
    except OnboardingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return WizardResponse(view=wizard.render())


@router.post("/next", response_model=WizardResponse)
async def next_step(user: AuthenticatedUser = Depends(get_current_user)) -> WizardResponse:
    wizard = get_active_wizard(user.id)
    try:
        wizard.next()
    except WizardNavigationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return WizardResponse(view=wizard.render())


@router.post("/back", response_model=WizardResponse)
async def previous_step(user: AuthenticatedUser = Depends(get_current_user)) -> WizardResponse:
    wizard = get_active_wizard(user.id)
    try:
        wizard.back()
    except WizardNavigationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return WizardResponse(view=wizard.render())


# =============================================================================
# Endpoints: Submission
# =============================================================================


@router.post("/finish", response_model=WizardResponse)
async def finish_onboarding(user: AuthenticatedUser = Depends(get_current_user)) -> WizardResponse:
    """
    Save the profile.

    On success the response redirects to the dashboard. A failed save
    answers 502 and leaves the wizard on the last step, ready to try again.
    """
    wizard = get_active_wizard(user.id)
    navigator = RecordingNavigator()

    try:
        await wizard.finish(navigate=navigator)
    except SubmissionInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except WizardNavigationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SubmissionError as e:
        raise HTTPException(status_code=502, detail=f"Failed to save onboarding: {e}")

    return _respond(wizard, navigator, user.id)
