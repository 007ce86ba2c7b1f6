# EcoAction-Tracker/app/models.py
from datetime import date as DateType, datetime, timezone
from enum import Enum
from typing import Any, Dict
from uuid import uuid4

from sqlalchemy import Column
from sqlmodel import Field, SQLModel, JSON


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- Activity categories ---
class ActivityType(str, Enum):
    TRAVEL = "Travel"
    ENERGY = "Energy"
    FOOD = "Food"


# --- Activity Model ---
class Activity(SQLModel, table=True):
    id: str = Field(default_factory=lambda: uuid4().hex, primary_key=True)
    user_id: str = Field(index=True)
    type: ActivityType
    # {"mode": str, "distance": float, "unit": str}
    details: Dict[str, Any] = Field(sa_column=Column(JSON, nullable=False))
    carbon_footprint: float
    date: DateType = Field(index=True)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
