"""
Onboarding route guard.

Decides, before anything is rendered, whether the user belongs on the
onboarding page at all:

- not signed in              -> Login
- profile lookup failed      -> Login (logged)
- onboarding already done    -> Dashboard
- otherwise                  -> allow, with the existing row (if any)

The check is cancellable: once the wizard unmounts, the outcome is dropped.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class ProfileStore(Protocol):
    """Persistence the onboarding wizard needs."""

    async def fetch_onboarding_status(self, user_id: str) -> dict[str, Any] | None:
        """Return the user's row, None when there is no row, raise ProfileLookupError otherwise."""
        ...

    async def upsert_profile(self, user_id: str, payload: dict[str, Any]) -> None:
        """Insert or update the user's row; raise SubmissionError on failure."""
        ...


class CurrentUser(Protocol):
    id: str


class GuardDecision(Enum):
    ALLOW = "allow"
    LOGIN = "login"
    DASHBOARD = "dashboard"


@dataclass
class GuardResult:
    decision: GuardDecision
    user_infos: dict[str, Any] | None = None

    @property
    def allowed(self) -> bool:
        return self.decision == GuardDecision.ALLOW


class CancelToken:
    """Set once the owner goes away; pending work checks it before acting."""

    def __init__(self):
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


async def check_onboarding_access(
    user: CurrentUser | None,
    store: ProfileStore,
    token: CancelToken | None = None,
) -> GuardResult | None:
    """
    Run the guard.

    Returns None when the token was cancelled while the lookup was pending.
    """
    if user is None:
        logger.info("Onboarding guard: no authenticated user")
        return GuardResult(GuardDecision.LOGIN)

    try:
        user_infos = await store.fetch_onboarding_status(user.id)
    except Exception as e:
        # Any failure other than "no row" counts as a lookup failure
        if token is not None and token.cancelled:
            return None
        logger.error(f"Error checking onboarding status for {user.id}: {e}")
        return GuardResult(GuardDecision.LOGIN)

    if token is not None and token.cancelled:
        logger.debug(f"Onboarding guard for {user.id} resolved after unmount; ignored")
        return None

    if user_infos and user_infos.get("onboarding_completed"):
        logger.info(f"User {user.id} already onboarded")
        return GuardResult(GuardDecision.DASHBOARD, user_infos=user_infos)

    return GuardResult(GuardDecision.ALLOW, user_infos=user_infos)
