# EcoAction-Tracker/app/routers/activities.py
from fastapi import APIRouter, Depends, status
from typing import List

from app.carbon_model import list_activity_types
from app.recommendations import summarize
from app.schemas import (
    ActivityCreate, ActivityRead, ActivityTypeInfo, DashboardSummary,
    ErrorResponse, ValidationErrorResponse,
)
from app.security import get_current_user_id
from app.store import ActivityStore, get_activity_store

router = APIRouter(tags=["Activities"])

STORAGE_ERROR = {500: {"model": ErrorResponse}}


@router.get("/activities", response_model=List[ActivityRead], responses=STORAGE_ERROR)
def get_activities(
    store: ActivityStore = Depends(get_activity_store),
    user_id: str = Depends(get_current_user_id),
):
    """
    All activities of the current user, newest date first.
    """
    return store.list_by_user(user_id)


@router.post(
    "/activities",
    response_model=ActivityRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}, **STORAGE_ERROR},
)
def add_activity(
    activity: ActivityCreate,
    store: ActivityStore = Depends(get_activity_store),
    user_id: str = Depends(get_current_user_id),
):
    """
    Logs a new activity. The footprint is stored as sent by the client.
    """
    # TODO: recompute carbon_footprint with estimate_carbon_footprint and reject mismatches
    return store.create(user_id, activity)


@router.get("/activities/summary", response_model=DashboardSummary, responses=STORAGE_ERROR)
def get_activity_summary(
    store: ActivityStore = Depends(get_activity_store),
    user_id: str = Depends(get_current_user_id),
):
    """
    Total, per-category breakdown and a tip, the same numbers the dashboard shows.
    """
    return summarize(store.list_by_user(user_id))


@router.get("/activity-types", response_model=List[ActivityTypeInfo])
def get_activity_types():
    return list_activity_types()
