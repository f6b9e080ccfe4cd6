"""
Onboarding view models.

Each wizard step has its own render function producing the panel the
frontend draws: header, inputs, option grids and toggles. The shared
layout (title, progress bar, navigation buttons) wraps whichever panel is
active. Views are plain dicts so they serialize straight to JSON.
"""

from typing import Callable

from .forms import FormData
from .options import (
    HEATING_OPTIONS,
    RECYCLING_OPTIONS,
    RESIDENCE_SIZE_OPTIONS,
    TRANSPORT_OPTIONS,
)
from .state import (
    LAST_STEP,
    TOTAL_STEPS,
    WizardState,
    WizardStep,
    can_advance,
    can_finish,
    can_go_back,
    progress_label,
    progress_percent,
    progress_value,
)

PAGE_TITLE = "Vamos personalizar seu EcoLar"
PAGE_SUBTITLE = "Conte um pouco sobre a casa para receber insights sob medida."


# =============================================================================
# Field Helpers
# =============================================================================

def _text_input(field_id: str, field: str, label: str, value: str, placeholder: str) -> dict:
    return {
        "type": "text",
        "id": field_id,
        "field": field,
        "label": label,
        "value": value,
        "placeholder": placeholder,
    }


def _choice_grid(field: str, label: str | None, options: list[dict], selected: str, columns: int) -> dict:
    return {
        "type": "choice",
        "field": field,
        "label": label,
        "columns": columns,
        "choices": [
            {**option, "selected": option["value"] == selected}
            for option in options
        ],
    }


def _toggle(field: str, active: bool, icon: str, suffix: str) -> dict:
    """Toggle button reading "Tenho <suffix>" / "Não tenho <suffix>"."""
    return {
        "type": "toggle",
        "field": field,
        "active": active,
        "icon": icon,
        "label": f"{'Tenho' if active else 'Não tenho'} {suffix}",
    }


def _panel(step: WizardStep, icon: str, title: str, description: str, fields: list[dict], note: dict | None = None) -> dict:
    panel = {
        "key": f"step-{int(step)}",
        "step": int(step),
        "icon": icon,
        "title": title,
        "description": description,
        "fields": fields,
    }
    if note:
        panel["note"] = note
    return panel


# =============================================================================
# Step Panels
# =============================================================================

def render_home_step(form: FormData) -> dict:
    """Step 1: who lives here and what the house is like."""
    return _panel(
        WizardStep.HOME,
        icon="home",
        title="Sua casa",
        description="Comece contando quem você é e os detalhes da residência.",
        fields=[
            _text_input("onb-name", "name", "Seu nome", form.name, "Ex: Ana Silva"),
            {
                **_text_input("onb-household", "household_size", "Pessoas na casa", form.household_size, "Ex: 3"),
                "type": "number",
                "min": 1,
            },
            _choice_grid(
                "residence_size",
                "Tamanho da residência",
                RESIDENCE_SIZE_OPTIONS,
                form.residence_size,
                columns=3,
            ),
            _toggle("has_garden", form.has_garden, icon="droplets", suffix="jardim/ horta"),
        ],
    )


def render_transport_step(form: FormData) -> dict:
    """Step 2: main way of getting around."""
    return _panel(
        WizardStep.TRANSPORT,
        icon="car",
        title="Transporte",
        description="Qual o meio de transporte mais frequente?",
        fields=[
            _choice_grid("transportation_type", None, TRANSPORT_OPTIONS, form.transportation_type, columns=2),
        ],
    )


def render_energy_step(form: FormData) -> dict:
    """Step 3: water heating and solar panels."""
    return _panel(
        WizardStep.ENERGY,
        icon="zap",
        title="Energia",
        description="Sobre o aquecimento de água e painéis solares.",
        fields=[
            _choice_grid("heating_type", None, HEATING_OPTIONS, form.heating_type, columns=2),
            _toggle("has_solar_panels", form.has_solar_panels, icon="☀️", suffix="painéis solares"),
        ],
    )


def render_habits_step(form: FormData) -> dict:
    """Step 4: recycling, plus the closing note."""
    return _panel(
        WizardStep.HABITS,
        icon="recycle",
        title="Hábitos",
        description="Conte como a casa lida com reciclagem.",
        fields=[
            _choice_grid("recycling_habit", None, RECYCLING_OPTIONS, form.recycling_habit, columns=2),
        ],
        note={
            "title": "✨ Tudo pronto!",
            "text": "Usaremos essas informações para personalizar suas recomendações e métricas.",
        },
    )


STEP_RENDERERS: dict[WizardStep, Callable[[FormData], dict]] = {
    WizardStep.HOME: render_home_step,
    WizardStep.TRANSPORT: render_transport_step,
    WizardStep.ENERGY: render_energy_step,
    WizardStep.HABITS: render_habits_step,
}


# =============================================================================
# Shared Layout
# =============================================================================

def render_progress(step: int) -> dict:
    return {
        "step": step,
        "total": TOTAL_STEPS,
        "label": progress_label(step),
        "value": progress_value(step),
        "percent": progress_percent(step),
    }


def render_controls(state: WizardState) -> dict:
    """
    Navigation buttons.

    Back is absent on the first step; the last step swaps Next for Finish.
    """
    controls: dict = {"back": None, "next": None, "finish": None}

    if can_go_back(state):
        controls["back"] = {"label": "Voltar", "enabled": True}

    if state.step < LAST_STEP:
        controls["next"] = {"label": "Próximo", "enabled": can_advance(state)}
    else:
        controls["finish"] = {
            "label": "Salvando..." if state.pending else "Finalizar",
            "enabled": can_finish(state),
            "loading": state.pending,
        }

    return controls


def render_loading() -> dict:
    """Placeholder shown while the guard is still checking."""
    return {"loading": True}


def render_wizard(state: WizardState) -> dict:
    """Full page view for the current step."""
    return {
        "loading": False,
        "title": PAGE_TITLE,
        "subtitle": PAGE_SUBTITLE,
        "progress": render_progress(int(state.step)),
        "panel": STEP_RENDERERS[state.step](state.form),
        "controls": render_controls(state),
    }
