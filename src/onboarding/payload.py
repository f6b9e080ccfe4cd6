"""
Onboarding Payload Definition.

The OnboardingPayload is the snapshot written to the profile table when
the user finishes the wizard.
"""

from pydantic import BaseModel, ConfigDict

from .forms import (
    FormData,
    HeatingType,
    RecyclingHabit,
    ResidenceSize,
    TransportationType,
    is_step_valid,
    parse_household_size,
)
from .errors import WizardNavigationError


class OnboardingPayload(BaseModel):
    """
    Complete output from the onboarding flow.

    Immutable once built. The store adds user_id when writing.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    household_size: int
    transportation_type: TransportationType
    has_solar_panels: bool
    heating_type: HeatingType
    residence_size: ResidenceSize
    has_garden: bool
    recycling_habit: RecyclingHabit
    onboarding_completed: bool = True
    has_seen_intro: bool = True

    def to_dict(self) -> dict:
        """Serialize to dict for the upsert."""
        return self.model_dump()


def build_payload(form: FormData) -> OnboardingPayload:
    """
    Snapshot the form into a payload.

    Every step must be complete; household_size must parse as a positive
    whole number.
    """
    incomplete = [step for step in (1, 2, 3, 4) if not is_step_valid(form, step)]
    if incomplete:
        raise WizardNavigationError(
            f"Cannot submit: step(s) {', '.join(map(str, incomplete))} incomplete"
        )

    return OnboardingPayload(
        name=form.name.strip(),
        household_size=parse_household_size(form.household_size),
        transportation_type=form.transportation_type,
        has_solar_panels=form.has_solar_panels,
        heating_type=form.heating_type,
        residence_size=form.residence_size,
        has_garden=form.has_garden,
        recycling_habit=form.recycling_habit,
    )
