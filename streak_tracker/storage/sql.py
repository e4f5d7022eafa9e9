# streak_tracker/storage/sql.py
from contextlib import asynccontextmanager
from datetime import date
from typing import List, Optional

from sqlalchemy import select, delete, func
from sqlalchemy import exc as sa_exc
from sqlalchemy.ext.asyncio import AsyncSession

from streak_tracker.core.errors import AlreadyCompletedError, StorageError
from streak_tracker.models.goal import Goal
from streak_tracker.models.streak import Streak, DailyCompletion
from streak_tracker.models.tracking import ScreenTimeEntry, FocusSession, Reward, ShameMetrics
from streak_tracker.storage.base import Storage, RecordT


# postgres reports the constraint name, sqlite the columns
DUPLICATE_DAY_MARKERS = ("uq_completion_goal_day", "daily_completions.goal_id")

GOAL_CHILDREN = (DailyCompletion, Streak, ScreenTimeEntry, FocusSession, Reward, ShameMetrics)


def is_duplicate_day(error: sa_exc.IntegrityError) -> bool:
    msg = str(getattr(error, "orig", error))
    return any(marker in msg for marker in DUPLICATE_DAY_MARKERS)


class SqlAlchemyStorage(Storage):
    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def _translate_errors(self):
        try:
            yield
        except sa_exc.IntegrityError as e:
            await self.session.rollback()
            if is_duplicate_day(e):
                raise AlreadyCompletedError() from e
            raise StorageError(f"Constraint violation: {getattr(e, 'orig', e)}") from e
        except sa_exc.SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageError(f"Database error: {e.__class__.__name__}") from e

    async def _scalars(self, query) -> list:
        async with self._translate_errors():
            result = await self.session.execute(query)
            return list(result.scalars().all())

    async def _scalar(self, query):
        async with self._translate_errors():
            result = await self.session.execute(query)
            return result.scalar_one_or_none()

    async def add(self, record: RecordT) -> RecordT:
        async with self._translate_errors():
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        return record

    async def commit(self) -> None:
        async with self._translate_errors():
            await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    # Goals
    async def get_goal(self, goal_id: str) -> Optional[Goal]:
        return await self._scalar(select(Goal).where(Goal.id == goal_id))

    async def list_goals(self) -> List[Goal]:
        return await self._scalars(select(Goal).order_by(Goal.created_at.desc()))

    async def delete_goal(self, goal_id: str) -> bool:
        async with self._translate_errors():
            for model in GOAL_CHILDREN:
                await self.session.execute(delete(model).where(model.goal_id == goal_id))
            result = await self.session.execute(delete(Goal).where(Goal.id == goal_id))
        return result.rowcount > 0

    # Streaks
    async def get_streak(self, goal_id: str) -> Optional[Streak]:
        return await self._scalar(select(Streak).where(Streak.goal_id == goal_id))

    # Completions
    async def get_completion(self, goal_id: str, day: date) -> Optional[DailyCompletion]:
        return await self._scalar(
            select(DailyCompletion)
            .where(DailyCompletion.goal_id == goal_id)
            .where(DailyCompletion.date == day)
        )

    async def list_completions(self, goal_id: str) -> List[DailyCompletion]:
        return await self._scalars(
            select(DailyCompletion)
            .where(DailyCompletion.goal_id == goal_id)
            .order_by(DailyCompletion.date)
        )

    async def latest_completed_day(self, goal_id: str) -> Optional[date]:
        return await self._scalar(
            select(func.max(DailyCompletion.date))
            .where(DailyCompletion.goal_id == goal_id)
            .where(DailyCompletion.completed.is_(True))
        )

    # Screen time
    async def list_screen_time(self, goal_id: str) -> List[ScreenTimeEntry]:
        return await self._scalars(
            select(ScreenTimeEntry)
            .where(ScreenTimeEntry.goal_id == goal_id)
            .order_by(ScreenTimeEntry.date.desc(), ScreenTimeEntry.created_at.desc())
        )

    async def screen_time_minutes(self, goal_id: str, day: date) -> int:
        total = await self._scalar(
            select(func.coalesce(func.sum(ScreenTimeEntry.time_spent_minutes), 0))
            .where(ScreenTimeEntry.goal_id == goal_id)
            .where(ScreenTimeEntry.date == day)
        )
        return int(total or 0)

    # Focus sessions
    async def get_focus_session(self, session_id: str) -> Optional[FocusSession]:
        return await self._scalar(select(FocusSession).where(FocusSession.id == session_id))

    async def list_focus_sessions(self, goal_id: str) -> List[FocusSession]:
        return await self._scalars(
            select(FocusSession)
            .where(FocusSession.goal_id == goal_id)
            .order_by(FocusSession.start_time.desc())
        )

    # Rewards
    async def get_reward(self, reward_id: str) -> Optional[Reward]:
        return await self._scalar(select(Reward).where(Reward.id == reward_id))

    async def list_rewards(self, goal_id: str) -> List[Reward]:
        return await self._scalars(
            select(Reward)
            .where(Reward.goal_id == goal_id)
            .order_by(Reward.unlocked_at.desc())
        )

    # Shame metrics
    async def get_shame_metrics(self, goal_id: str) -> Optional[ShameMetrics]:
        return await self._scalar(select(ShameMetrics).where(ShameMetrics.goal_id == goal_id))
