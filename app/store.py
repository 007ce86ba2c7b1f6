from datetime import datetime, timezone
from typing import Any, Dict, List, Union

from fastapi import Depends
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.database import get_db
from app.errors import StorageUnavailable, ValidationError
from app.models import Activity
from app.schemas import ActivityCreate


class ActivityStore:
    """
    Persistence for activity records. The store assigns ids and timestamps;
    records are never updated or deleted once written.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: str, data: Union[ActivityCreate, Dict[str, Any]]) -> Activity:
        """
        Validates and persists one activity for `user_id`.
        Returns only after the commit succeeded.
        """
        if not user_id:
            raise ValidationError({"userId": "Field required"})
        try:
            if isinstance(data, ActivityCreate):
                data = data.model_dump(by_alias=True)
            activity_in = ActivityCreate.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e.errors()) from None

        now = datetime.now(timezone.utc)
        db_activity = Activity(
            user_id=user_id,
            type=activity_in.type,
            details=activity_in.details.model_dump(),
            carbon_footprint=activity_in.carbon_footprint,
            date=activity_in.date,
            created_at=now,
            updated_at=now,
        )

        try:
            self.db.add(db_activity)
            self.db.commit()
            self.db.refresh(db_activity)
        except SQLAlchemyError as e:
            self.db.rollback()
            print(f"ERROR: Failed to save activity to DB: {e}")
            raise StorageUnavailable("Error logging activity", detail=str(e)) from e
        return db_activity

    def list_by_user(self, user_id: str) -> List[Activity]:
        """All activities of `user_id`, newest date first."""
        statement = (
            select(Activity)
            .where(Activity.user_id == user_id)
            .order_by(Activity.date.desc(), Activity.created_at.desc(), Activity.id)
        )
        try:
            return list(self.db.exec(statement).all())
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to fetch activities for {user_id}: {e}")
            raise StorageUnavailable("Error fetching activities", detail=str(e)) from e


def get_activity_store(db: Session = Depends(get_db)) -> ActivityStore:
    return ActivityStore(db)
