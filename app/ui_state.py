from dataclasses import dataclass, field, replace
from datetime import date as DateType
from enum import Enum
from typing import Optional

from app.carbon_model import ACTIVITY_TYPES, estimate_carbon_footprint
from app.errors import NetworkError, ValidationError
from app.models import ActivityType
from app.schemas import ActivityCreate, ActivityDetails

# Seconds the success message stays up before going back to the dashboard
SUCCESS_REDIRECT_DELAY = 1.5

# Smallest amount the store accepts
MIN_AMOUNT = 0.1


class Page(str, Enum):
    DASHBOARD = "dashboard"
    LOG = "log"


NAV_ITEMS = [
    ("Dashboard", Page.DASHBOARD),
    ("Log Activity", Page.LOG),
]


def navigate(target) -> Page:
    """Returns the page to show; anything unknown lands on the dashboard."""
    try:
        return Page(target)
    except ValueError:
        return Page.DASHBOARD


@dataclass(frozen=True)
class LogForm:
    type: ActivityType = ActivityType.TRAVEL
    mode: str = "Car"
    distance: Optional[float] = None
    unit: str = "km"
    date: DateType = field(default_factory=DateType.today)

    @classmethod
    def new(cls, today: Optional[DateType] = None) -> "LogForm":
        return cls(date=today or DateType.today()).with_type(ActivityType.TRAVEL)

    @property
    def modes(self):
        return list(ACTIVITY_TYPES[self.type]["modes"])

    @property
    def amount_label(self) -> str:
        return ACTIVITY_TYPES[self.type]["amount_label"]

    def with_type(self, activity_type) -> "LogForm":
        """Switching category resets mode, unit and amount."""
        activity_type = ActivityType(activity_type)
        info = ACTIVITY_TYPES[activity_type]
        return replace(
            self,
            type=activity_type,
            mode=info["modes"][0],
            unit=info["unit"],
            distance=None,
        )

    def with_mode(self, mode: str) -> "LogForm":
        if mode not in self.modes:
            raise ValueError(f"{mode!r} is not a valid mode for {self.type.value}")
        return replace(self, mode=mode)

    def with_distance(self, distance: Optional[float]) -> "LogForm":
        return replace(self, distance=distance)

    def with_date(self, value: DateType, today: Optional[DateType] = None) -> "LogForm":
        # Same cap as the date picker's max
        today = today or DateType.today()
        return replace(self, date=min(value, today))

    def validate(self, today: Optional[DateType] = None) -> Optional[str]:
        """Error message for the user, or None when the form can be submitted."""
        if not self.distance or self.distance <= 0:
            return "Please enter a valid positive distance/amount."
        if self.distance < MIN_AMOUNT:
            return f"The amount must be at least {MIN_AMOUNT} {self.unit}."
        if self.date > (today or DateType.today()):
            return "The date cannot be in the future."
        return None

    def estimate(self) -> float:
        return estimate_carbon_footprint(self.type, self.mode, self.distance)

    def to_payload(self) -> ActivityCreate:
        return ActivityCreate(
            type=self.type,
            details=ActivityDetails(mode=self.mode, distance=self.distance, unit=self.unit),
            carbon_footprint=round(self.estimate(), 2),
            date=self.date,
        )


@dataclass(frozen=True)
class SubmitResult:
    success: bool
    message: str
    next_page: Page
    # Seconds to wait before switching to next_page
    redirect_after: float = 0.0


def submit_activity(form: LogForm, client, today: Optional[DateType] = None) -> SubmitResult:
    """
    Validates the form, estimates the footprint and posts it through `client`.
    On success the caller should return to the dashboard after `redirect_after`.
    """
    error = form.validate(today)
    if error:
        return SubmitResult(False, error, Page.LOG)

    payload = form.to_payload()
    try:
        client.add_activity(payload)
    except ValidationError as e:
        fields = ", ".join(sorted(e.errors)) or "input"
        return SubmitResult(False, f"Failed to log activity. Check {fields}.", Page.LOG)
    except NetworkError as e:
        print(f"ERROR: Logging Error: {e.message}")
        return SubmitResult(
            False,
            f"Failed to log activity. {e.message}",
            Page.LOG,
        )

    return SubmitResult(
        True,
        f"Activity logged successfully! Estimated Footprint: {payload.carbon_footprint:.2f} kg CO₂e",
        Page.DASHBOARD,
        redirect_after=SUCCESS_REDIRECT_DELAY,
    )
