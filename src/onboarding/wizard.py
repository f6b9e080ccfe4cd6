"""
Onboarding wizard component.

Ties the guard, step state, rendering and submission together behind the
calls a page makes: mount, edit, next/back, finish, unmount. The signed-in
user, the profile store and the navigate function are handed in, so the
whole flow can run without a web server.
"""

import logging
from typing import Any

from ecolar.web.routes import Navigate, page_url

from .errors import OnboardingError, SubmissionError
from .forms import FormData, TOGGLE_FIELDS
from .guard import CancelToken, CurrentUser, GuardDecision, GuardResult, ProfileStore, check_onboarding_access
from .payload import OnboardingPayload
from .render import render_loading, render_wizard
from .state import WizardState, WizardStep, advance, go_back
from .submission import submit_onboarding

logger = logging.getLogger(__name__)


class OnboardingWizard:
    def __init__(self, user: CurrentUser | None, store: ProfileStore, navigate: Navigate):
        self.user = user
        self.store = store
        self.navigate = navigate
        self.state: WizardState | None = None
        self.loading = True
        self.mounted = False
        self._token: CancelToken | None = None

    @property
    def pending(self) -> bool:
        return self.state is not None and self.state.pending

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def mount(self) -> GuardResult | None:
        """
        Run the guard and either redirect or start an empty form.

        Returns None if unmount() happened while the guard was pending.
        """
        self.mounted = True
        self.loading = True
        token = self._token = CancelToken()

        result = await check_onboarding_access(self.user, self.store, token)
        if result is None or token.cancelled:
            return None

        if result.decision == GuardDecision.LOGIN:
            self.navigate(page_url("Login"))
        elif result.decision == GuardDecision.DASHBOARD:
            self.navigate(page_url("Dashboard"))
        else:
            self.state = WizardState(user_infos=result.user_infos, form=FormData())

        self.loading = False
        return result

    def unmount(self) -> None:
        """Drop the form and ignore any guard check still in flight."""
        if self._token is not None:
            self._token.cancel()
        self.mounted = False
        self.state = None

    # -------------------------------------------------------------------------
    # Editing & navigation
    # -------------------------------------------------------------------------

    def _require_state(self) -> WizardState:
        if self.state is None:
            raise OnboardingError("Onboarding wizard is not ready")
        return self.state

    def set_field(self, field: str, value: Any) -> None:
        """Assign one form field. Invalid values raise pydantic's ValidationError."""
        state = self._require_state()
        if field not in FormData.model_fields:
            raise OnboardingError(f"Unknown field: {field}")
        setattr(state.form, field, value)

    def toggle(self, field: str) -> bool:
        """Flip a yes/no field and return its new value."""
        state = self._require_state()
        if field not in TOGGLE_FIELDS:
            raise OnboardingError(f"Not a toggle: {field}")
        value = not getattr(state.form, field)
        setattr(state.form, field, value)
        return value

    def next(self) -> WizardStep:
        return advance(self._require_state())

    def back(self) -> WizardStep:
        return go_back(self._require_state())

    async def finish(self, navigate: Navigate | None = None) -> OnboardingPayload:
        """
        Save the profile, then go to the dashboard.

        ``navigate`` overrides the wizard's own navigate for this call only.
        A failed save leaves the wizard on the last step and re-raises.
        """
        state = self._require_state()
        try:
            payload = await submit_onboarding(state, self.user, self.store)
        except SubmissionError as e:
            logger.warning(f"Onboarding save failed: {e}")
            raise

        (navigate or self.navigate)(page_url("Dashboard"))
        self.state = None
        return payload

    def render(self) -> dict:
        if self.loading or self.state is None:
            return render_loading()
        return render_wizard(self.state)
