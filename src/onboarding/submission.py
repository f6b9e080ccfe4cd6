"""
Onboarding submission.

Builds the payload from a complete wizard and writes it in one upsert.
There is no retry: a failed save leaves the wizard as it was, with the
Finish control usable again.
"""

import logging

from .errors import NotAuthenticatedError, SubmissionInProgressError, WizardNavigationError
from .guard import CurrentUser, ProfileStore
from .payload import OnboardingPayload, build_payload
from .state import LAST_STEP, WizardState

logger = logging.getLogger(__name__)


async def submit_onboarding(
    state: WizardState,
    user: CurrentUser | None,
    store: ProfileStore,
) -> OnboardingPayload:
    """
    Save the wizard's answers to the user's profile.

    Sets ``state.pending`` for the duration of the write. Store errors
    propagate unchanged after the pending flag is cleared.
    """
    if state.pending:
        raise SubmissionInProgressError("Onboarding is already being saved")
    if state.step != LAST_STEP:
        raise WizardNavigationError("Finish is only available on the last step")

    payload = build_payload(state.form)

    if user is None:
        raise NotAuthenticatedError("Usuário não autenticado")

    state.pending = True
    try:
        await store.upsert_profile(user.id, payload.to_dict())
    finally:
        state.pending = False

    logger.info(f"Onboarding saved for user {user.id}")
    return payload
