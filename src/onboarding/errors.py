"""Onboarding error types."""


class OnboardingError(Exception):
    """Base class for onboarding failures."""


class NotAuthenticatedError(OnboardingError):
    """No signed-in user where one is required."""


class ProfileLookupError(OnboardingError):
    """The onboarding status query failed for a reason other than "no row"."""


class SubmissionError(OnboardingError):
    """The profile upsert failed."""


class SubmissionInProgressError(OnboardingError):
    """Finish was triggered while a save is still in flight."""


class WizardNavigationError(OnboardingError):
    """A step transition that the current state does not allow."""
