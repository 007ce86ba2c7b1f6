from decimal import Decimal
from typing import Dict, List, Union

from app.errors import UnknownActivityType
from app.models import ActivityType

# Base emission factors, kg CO2e per unit of amount
EMISSION_FACTORS = {
    ActivityType.TRAVEL: 0.14,  # per km
    ActivityType.ENERGY: 0.5,   # per kWh
    ActivityType.FOOD: 5.0,     # per serving
}

# Modes not listed fall back to DEFAULT_MODE_MULTIPLIERS
MODE_MULTIPLIERS = {
    ActivityType.TRAVEL: {"Car": 1.0, "Flight": 2.5},
    ActivityType.FOOD: {"Beef": 3.0, "Poultry": 1.0},
    ActivityType.ENERGY: {},
}

DEFAULT_MODE_MULTIPLIERS = {
    ActivityType.TRAVEL: 0.5,  # Bus, Train
    ActivityType.FOOD: 0.1,    # Vegetarian
    ActivityType.ENERGY: 1.0,
}

# What the log form offers for each category. The first mode is the default.
ACTIVITY_TYPES: Dict[ActivityType, Dict[str, Union[str, List[str]]]] = {
    ActivityType.TRAVEL: {
        "modes": ["Car", "Bus", "Train", "Flight"],
        "unit": "km",
        "amount_label": "Distance Travelled",
    },
    ActivityType.ENERGY: {
        "modes": ["Electricity"],
        "unit": "kWh",
        "amount_label": "Amount Used",
    },
    ActivityType.FOOD: {
        "modes": ["Beef", "Poultry", "Vegetarian"],
        "unit": "serving",
        "amount_label": "Number of Servings",
    },
}


def resolve_activity_type(activity_type: Union[str, ActivityType]) -> ActivityType:
    try:
        return ActivityType(activity_type)
    except ValueError:
        raise UnknownActivityType(f"Unknown activity type: {activity_type!r}") from None


def get_mode_multiplier(activity_type: Union[str, ActivityType], mode: str) -> float:
    activity_type = resolve_activity_type(activity_type)
    return MODE_MULTIPLIERS[activity_type].get(mode, DEFAULT_MODE_MULTIPLIERS[activity_type])


def estimate_carbon_footprint(activity_type: Union[str, ActivityType], mode: str, amount: float) -> float:
    """
    Estimates the footprint (kg CO2e) of an activity as
    amount x base factor x mode multiplier.

    The amount is not checked here; callers reject amounts <= 0 first.
    Raises UnknownActivityType for a type outside Travel/Energy/Food.
    """
    activity_type = resolve_activity_type(activity_type)
    factor = EMISSION_FACTORS[activity_type]
    multiplier = get_mode_multiplier(activity_type, mode)
    # Decimal keeps 100 x 0.14 at exactly 14.0
    result = Decimal(str(amount)) * Decimal(str(factor)) * Decimal(str(multiplier))
    return float(result)


def list_activity_types() -> List[Dict[str, object]]:
    return [
        {
            "type": activity_type,
            "modes": list(info["modes"]),
            "unit": info["unit"],
            "amount_label": info["amount_label"],
            "factor": EMISSION_FACTORS[activity_type],
        }
        for activity_type, info in ACTIVITY_TYPES.items()
    ]
