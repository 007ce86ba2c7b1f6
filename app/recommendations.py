from typing import Dict, Iterable, Optional

from app.models import ActivityType
from app.schemas import DashboardSummary

EMPTY_RECOMMENDATION = "Start logging your activities to see your carbon footprint!"
TRAVEL_RECOMMENDATION = (
    "Travel is your biggest footprint area. "
    "Consider biking, walking, or public transport for short trips!"
)
FOOD_RECOMMENDATION = "Your diet has a high footprint. Try one meatless meal per week."
GENERIC_RECOMMENDATION = "Keep tracking! You are making a difference."


def _type_name(activity_type) -> str:
    return activity_type.value if isinstance(activity_type, ActivityType) else str(activity_type)


def top_category(breakdown: Dict[str, float]) -> Optional[str]:
    """Largest category; equal totals go to the alphabetically first name."""
    if not breakdown:
        return None
    return min(breakdown, key=lambda name: (-breakdown[name], name))


def recommend(breakdown: Dict[str, float]) -> str:
    top = top_category(breakdown)
    if top is None:
        return EMPTY_RECOMMENDATION
    if top == ActivityType.TRAVEL.value:
        return TRAVEL_RECOMMENDATION
    if top == ActivityType.FOOD.value:
        return FOOD_RECOMMENDATION
    return GENERIC_RECOMMENDATION


def summarize(activities: Iterable) -> DashboardSummary:
    """
    Aggregates activities for the dashboard.

    Works on anything exposing `type` and `carbon_footprint`: stored
    Activity rows on the server, ActivityRead objects in the UI.
    """
    total = 0.0
    breakdown: Dict[str, float] = {}
    for activity in activities:
        name = _type_name(activity.type)
        total += activity.carbon_footprint
        breakdown[name] = breakdown.get(name, 0.0) + activity.carbon_footprint

    return DashboardSummary(
        total=total,
        breakdown=breakdown,
        recommendation=recommend(breakdown),
        top_category=top_category(breakdown),
    )
