"""
Onboarding option catalogs.

Display metadata (label + icon) for every categorical field, in the order
the frontend shows them.
"""

RESIDENCE_SIZE_OPTIONS = [
    {"value": "small", "label": "Pequena (até 50m²)", "icon": "🏠"},
    {"value": "medium", "label": "Média (50-100m²)", "icon": "🏡"},
    {"value": "large", "label": "Grande (+100m²)", "icon": "🏘️"},
]

TRANSPORT_OPTIONS = [
    {"value": "car_gasoline", "label": "Carro (Gasolina)", "icon": "🚗"},
    {"value": "car_electric", "label": "Carro elétrico", "icon": "⚡"},
    {"value": "car_hybrid", "label": "Carro híbrido", "icon": "🔋"},
    {"value": "motorcycle", "label": "Moto", "icon": "🏍️"},
    {"value": "public_transport", "label": "Transporte público", "icon": "🚌"},
    {"value": "bicycle", "label": "Bicicleta", "icon": "🚴"},
    {"value": "walk", "label": "A pé", "icon": "🚶"},
    {"value": "mixed", "label": "Misto", "icon": "🔄"},
]

HEATING_OPTIONS = [
    {"value": "electric", "label": "Elétrico", "icon": "⚡"},
    {"value": "gas", "label": "Gás", "icon": "🔥"},
    {"value": "solar", "label": "Solar", "icon": "☀️"},
    {"value": "none", "label": "Não tenho", "icon": "❌"},
]

RECYCLING_OPTIONS = [
    {"value": "always", "label": "Sempre", "icon": "♻️"},
    {"value": "sometimes", "label": "Às vezes", "icon": "🔄"},
    {"value": "rarely", "label": "Raramente", "icon": "⚠️"},
    {"value": "never", "label": "Nunca", "icon": "❌"},
]

# Field name -> catalog
FIELD_OPTIONS = {
    "residence_size": RESIDENCE_SIZE_OPTIONS,
    "transportation_type": TRANSPORT_OPTIONS,
    "heating_type": HEATING_OPTIONS,
    "recycling_habit": RECYCLING_OPTIONS,
}


def get_form_options() -> dict:
    """
    Get all option catalogs for frontend rendering.

    Returns dict keyed by form field name.
    """
    return {field: list(options) for field, options in FIELD_OPTIONS.items()}
