# streak_tracker/services/goals.py
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from streak_tracker.core.calendar import calendar_zone
from streak_tracker.core.errors import ValidationError
from streak_tracker.models.goal import Goal
from streak_tracker.models.streak import Streak
from streak_tracker.storage.base import Storage

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("name", "deadline", "reason")


def _aware(value: datetime) -> datetime:
    # naive values are wall-clock time in the calendar zone
    if value.tzinfo is None:
        return value.replace(tzinfo=calendar_zone())
    return value


def _clean_name(name: Optional[str]) -> str:
    if name is None or not name.strip():
        raise ValidationError("Goal name must not be empty")
    return name.strip()


class GoalRegistry:
    def __init__(self, storage: Storage):
        self.storage = storage

    async def create_goal(
        self,
        name: str,
        deadline: datetime,
        reason: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Goal:
        """
        Creates the goal together with its zeroed streak in one transaction.
        If either write fails nothing is kept.
        """
        name = _clean_name(name)
        deadline = _aware(deadline)
        now = _aware(now or datetime.now(timezone.utc))
        if deadline <= now:
            raise ValidationError("Deadline must be in the future")

        try:
            goal = await self.storage.add(Goal(name=name, deadline=deadline, reason=reason))
            await self.storage.add(
                Streak(
                    goal_id=goal.id,
                    current_streak=0,
                    best_streak=0,
                    total_completed=0,
                    last_completed_date=None,
                )
            )
            await self.storage.commit()
        except Exception:
            await self.storage.rollback()
            raise

        logger.info("Created goal %s (%s)", goal.id, goal.name)
        return goal

    async def get_goal(self, goal_id: str) -> Optional[Goal]:
        return await self.storage.get_goal(goal_id)

    async def list_goals(self) -> List[Goal]:
        return await self.storage.list_goals()

    async def update_goal(self, goal_id: str, fields: Dict[str, Any]) -> Optional[Goal]:
        """Partial update of name/deadline/reason. The deadline is not re-validated."""
        goal = await self.storage.get_goal(goal_id)
        if goal is None:
            return None

        # validate everything before touching the goal
        changes = {}
        for key, value in fields.items():
            if key not in MUTABLE_FIELDS:
                raise ValidationError(f"Field '{key}' cannot be updated")
            if key == "name":
                value = _clean_name(value)
            elif key == "deadline":
                if value is None:
                    raise ValidationError("Deadline must not be empty")
                value = _aware(value)
            changes[key] = value

        for key, value in changes.items():
            setattr(goal, key, value)

        goal = await self.storage.add(goal)
        await self.storage.commit()
        return goal

    async def delete_goal(self, goal_id: str) -> bool:
        """Deletes the goal with its streak and history. False if there was no such goal."""
        deleted = await self.storage.delete_goal(goal_id)
        if not deleted:
            await self.storage.rollback()
            return False
        await self.storage.commit()
        logger.info("Deleted goal %s", goal_id)
        return True
