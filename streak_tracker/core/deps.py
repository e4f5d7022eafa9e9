# streak_tracker/core/deps.py
from datetime import date
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from streak_tracker.core import calendar
from streak_tracker.database import get_db
from streak_tracker.services.coach import CoachService, get_openai_client
from streak_tracker.services.goals import GoalRegistry
from streak_tracker.services.tracker import StreakTracker
from streak_tracker.services.tracking import TrackingService
from streak_tracker.storage.base import Storage
from streak_tracker.storage.sql import SqlAlchemyStorage


def get_storage(db: AsyncSession = Depends(get_db)) -> Storage:
    return SqlAlchemyStorage(db)


def get_registry(storage: Storage = Depends(get_storage)) -> GoalRegistry:
    return GoalRegistry(storage)


def get_tracker(storage: Storage = Depends(get_storage)) -> StreakTracker:
    return StreakTracker(storage)


def get_tracking(storage: Storage = Depends(get_storage)) -> TrackingService:
    return TrackingService(storage)


def get_coach() -> CoachService:
    return CoachService(get_openai_client())


def get_today() -> date:
    return calendar.today()
