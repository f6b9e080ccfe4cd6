"""
Onboarding Forms - household profile data.

FormData is edited in place as the user moves through the wizard.
Categorical fields hold "" until the user picks an option; assigning a
value outside the option set is rejected by pydantic.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator


ResidenceSize = Literal["", "small", "medium", "large"]
TransportationType = Literal[
    "",
    "car_gasoline",
    "car_electric",
    "car_hybrid",
    "motorcycle",
    "public_transport",
    "bicycle",
    "walk",
    "mixed",
]
HeatingType = Literal["", "electric", "gas", "solar", "none"]
RecyclingHabit = Literal["", "always", "sometimes", "rarely", "never"]

TOGGLE_FIELDS = ("has_garden", "has_solar_panels")

# Required fields gating forward progress from each step
STEP_REQUIRED_FIELDS: dict[int, tuple[str, ...]] = {
    1: ("name", "household_size", "residence_size"),
    2: ("transportation_type",),
    3: ("heating_type",),
    4: ("recycling_habit",),
}


# =============================================================================
# Form Model
# =============================================================================

class FormData(BaseModel):
    """
    In-progress household profile.

    household_size stays text (as typed) and is only coerced to a number
    when the payload is built.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    household_size: str = ""
    residence_size: ResidenceSize = ""
    has_garden: bool = False
    transportation_type: TransportationType = ""
    heating_type: HeatingType = ""
    has_solar_panels: bool = False
    recycling_habit: RecyclingHabit = ""

    @field_validator("household_size", mode="before")
    @classmethod
    def household_size_as_text(cls, v):
        """Accept numbers from JSON clients; keep the text form."""
        if v is None:
            return ""
        if isinstance(v, bool):
            raise ValueError("household_size must be text or a number")
        if isinstance(v, (int, float)):
            return str(int(v)) if float(v).is_integer() else str(v)
        return v


def parse_household_size(text: str) -> int | None:
    """
    Parse the household size input.

    Returns None unless the text is a positive whole number.
    """
    text = text.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not value.is_integer() or value < 1:
        return None
    return int(value)


def is_field_set(form: FormData, field: str) -> bool:
    """Whether a required field counts as filled in."""
    if field == "name":
        return bool(form.name.strip())
    if field == "household_size":
        return parse_household_size(form.household_size) is not None
    return bool(getattr(form, field))


def missing_fields(form: FormData, step: int) -> list[str]:
    """Required fields for a step that are still unset."""
    return [f for f in STEP_REQUIRED_FIELDS.get(step, ()) if not is_field_set(form, f)]


def is_step_valid(form: FormData, step: int) -> bool:
    """True when every required field for the step is set."""
    if step not in STEP_REQUIRED_FIELDS:
        return False
    return not missing_fields(form, step)
