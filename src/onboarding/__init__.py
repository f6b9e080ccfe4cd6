"""
EcoLar Onboarding.

First-run wizard that collects the household profile in four steps and
saves it to the user's profile row:

1. Home - name, household size, residence size, garden
2. Transport - main transportation mode
3. Energy - heating type, solar panels
4. Habits - recycling, then finish

A guard runs first: signed-out users go to login, users who already
finished go to the dashboard.
"""

from .state import WizardState, WizardStep
from .payload import OnboardingPayload, build_payload
from .wizard import OnboardingWizard

__all__ = [
    "WizardState",
    "WizardStep",
    "OnboardingPayload",
    "build_payload",
    "OnboardingWizard",
]
