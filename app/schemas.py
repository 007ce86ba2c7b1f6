# EcoAction-Tracker/app/schemas.py
from datetime import date as DateType, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models import ActivityType


# Wire format is camelCase, Python attributes stay snake_case
class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        # Infinity/NaN would be stored and serialized back as null
        allow_inf_nan=False,
    )


# --- Activity Schemas ---

class ActivityDetails(CamelModel):
    mode: str = Field(min_length=1)
    distance: float = Field(ge=0.1)
    unit: str = Field(min_length=1)


class ActivityCreate(CamelModel):
    type: ActivityType
    details: ActivityDetails
    carbon_footprint: float = Field(ge=0)
    date: DateType


class ActivityRead(ActivityCreate):
    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime


# --- Catalog Schemas ---

class ActivityTypeInfo(CamelModel):
    type: ActivityType
    modes: List[str]
    unit: str
    amount_label: str
    factor: float


# --- Dashboard Schemas ---

class DashboardSummary(CamelModel):
    total: float
    breakdown: Dict[str, float]
    recommendation: str
    top_category: Optional[str] = None


# --- Error Schemas ---

class ValidationErrorResponse(BaseModel):
    message: str
    errors: Dict[str, str]


class ErrorResponse(BaseModel):
    message: str
