"""
Onboarding State Management.

Tracks the current wizard step and the form being filled in. The wizard is
strictly linear: HOME -> TRANSPORT -> ENERGY -> HABITS, one step at a time.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any
import json

from .errors import WizardNavigationError
from .forms import FormData, is_step_valid


class WizardStep(IntEnum):
    """Wizard steps, numbered as shown to the user."""
    HOME = 1        # Name, household, residence, garden
    TRANSPORT = 2   # Main transportation mode
    ENERGY = 3      # Heating, solar panels
    HABITS = 4      # Recycling; final step


TOTAL_STEPS = len(WizardStep)
FIRST_STEP = WizardStep.HOME
LAST_STEP = WizardStep.HABITS


@dataclass
class WizardState:
    """
    In-progress onboarding session.

    Lives only as long as the wizard is mounted.
    """
    step: WizardStep = FIRST_STEP
    form: FormData = field(default_factory=FormData)

    # Existing profile row found by the guard (None when the user has none)
    user_infos: dict[str, Any] | None = None

    # True while the final upsert is in flight
    pending: bool = False

    def to_dict(self) -> dict:
        """Serialize state to dict for JSON storage."""
        return {
            "step": int(self.step),
            "form": self.form.model_dump(),
            "user_infos": self.user_infos,
            "pending": self.pending,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WizardState":
        """Deserialize state from dict."""
        data = dict(data)
        if "step" in data:
            data["step"] = WizardStep(data["step"])
        if isinstance(data.get("form"), dict):
            data["form"] = FormData(**data["form"])
        return cls(**data)

    def to_json(self) -> str:
        """Serialize state to JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, json_str: str) -> "WizardState":
        """Deserialize state from JSON string."""
        return cls.from_dict(json.loads(json_str))


def can_advance(state: WizardState) -> bool:
    """Next is offered on steps 1-3 and only once the step is filled in."""
    return state.step < LAST_STEP and is_step_valid(state.form, state.step)


def can_go_back(state: WizardState) -> bool:
    return state.step > FIRST_STEP


def can_finish(state: WizardState) -> bool:
    """Finish lives on the last step, gated like Next and by the pending save."""
    return (
        state.step == LAST_STEP
        and is_step_valid(state.form, state.step)
        and not state.pending
    )


def advance(state: WizardState) -> WizardStep:
    """Move one step forward. Raises WizardNavigationError if not allowed."""
    if state.step == LAST_STEP:
        raise WizardNavigationError("Already on the last step; use finish")
    if not can_advance(state):
        raise WizardNavigationError(f"Step {int(state.step)} is incomplete")
    state.step = WizardStep(state.step + 1)
    return state.step


def go_back(state: WizardState) -> WizardStep:
    """Move one step back. Raises WizardNavigationError on the first step."""
    if not can_go_back(state):
        raise WizardNavigationError("Already on the first step")
    state.step = WizardStep(state.step - 1)
    return state.step


def progress_value(step: int) -> float:
    """Progress bar value in [0, 100]."""
    return step / TOTAL_STEPS * 100


def progress_percent(step: int) -> str:
    """Progress rounded to a whole percent, e.g. "75%"."""
    return f"{progress_value(step):.0f}%"


def progress_label(step: int) -> str:
    return f"Passo {step} de {TOTAL_STEPS}"
