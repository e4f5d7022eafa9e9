# streak_tracker/services/ledger.py
import logging
from datetime import date, datetime
from typing import List, Optional, Union

from streak_tracker.core.calendar import to_day
from streak_tracker.core.errors import AlreadyCompletedError, NotFoundError, ValidationError
from streak_tracker.models.streak import DailyCompletion
from streak_tracker.storage.base import Storage

logger = logging.getLogger(__name__)


class CompletionLedger:
    def __init__(self, storage: Storage):
        self.storage = storage

    async def get_completion_for_day(
        self, goal_id: str, day: Union[date, datetime]
    ) -> Optional[DailyCompletion]:
        return await self.storage.get_completion(goal_id, to_day(day))

    async def list_completions(self, goal_id: str) -> List[DailyCompletion]:
        return await self.storage.list_completions(goal_id)

    async def record_completion(self, goal_id: str, day: Union[date, datetime]) -> DailyCompletion:
        """
        Marks `day` complete for the goal. Does not commit.

        Raises:
          - NotFoundError → goal does not exist
          - AlreadyCompletedError → the day is already completed
          - ValidationError → the day is before the latest completed day
        """
        day = to_day(day)

        if await self.storage.get_goal(goal_id) is None:
            raise NotFoundError("Goal not found")

        existing = await self.storage.get_completion(goal_id, day)
        if existing is not None and existing.completed:
            logger.warning("Duplicate completion for goal %s on %s", goal_id, day)
            raise AlreadyCompletedError()

        latest = await self.storage.latest_completed_day(goal_id)
        if latest is not None and day < latest:
            raise ValidationError(
                f"Cannot complete {day.isoformat()}: {latest.isoformat()} is already completed"
            )

        if existing is not None:
            # a not-completed row for the day is flipped, never duplicated
            existing.completed = True
            return await self.storage.add(existing)

        return await self.storage.add(DailyCompletion(goal_id=goal_id, date=day, completed=True))
