# streak_tracker/services/tracking.py
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from streak_tracker.core.calendar import to_day, today
from streak_tracker.core.errors import NotFoundError, ValidationError
from streak_tracker.models.tracking import ScreenTimeEntry, FocusSession, Reward, ShameMetrics
from streak_tracker.storage.base import Storage

REWARD_TYPES = ("streak", "milestone", "surprise", "focus")

FOCUS_SESSION_FIELDS = (
    "end_time",
    "actual_duration_minutes",
    "distraction_events",
    "completion_rate",
)

SHAME_METRICS_FIELDS = (
    "consecutive_skips",
    "total_skips",
    "social_media_minutes_today",
    "opportunity_cost_hours",
    "last_shame_notification",
)


class TrackingService:
    """Screen time, focus sessions, rewards and shame metrics hanging off a goal."""

    def __init__(self, storage: Storage):
        self.storage = storage

    async def _require_goal(self, goal_id: str) -> None:
        if await self.storage.get_goal(goal_id) is None:
            raise NotFoundError("Goal not found")

    async def _save(self, record):
        record = await self.storage.add(record)
        await self.storage.commit()
        return record

    # Screen time
    async def log_screen_time(
        self,
        goal_id: str,
        app_name: str,
        minutes: int,
        day: Optional[Union[date, datetime]] = None,
    ) -> ScreenTimeEntry:
        await self._require_goal(goal_id)
        entry = ScreenTimeEntry(
            goal_id=goal_id,
            app_name=app_name,
            time_spent_minutes=minutes,
            date=to_day(day) if day is not None else today(),
        )
        return await self._save(entry)

    async def list_screen_time(self, goal_id: str) -> List[ScreenTimeEntry]:
        return await self.storage.list_screen_time(goal_id)

    async def screen_time_for_day(
        self, goal_id: str, day: Optional[Union[date, datetime]] = None
    ) -> int:
        return await self.storage.screen_time_minutes(
            goal_id, to_day(day) if day is not None else today()
        )

    # Focus sessions
    async def start_session(self, goal_id: str, **fields) -> FocusSession:
        await self._require_goal(goal_id)
        return await self._save(FocusSession(goal_id=goal_id, **fields))

    async def list_sessions(self, goal_id: str) -> List[FocusSession]:
        return await self.storage.list_focus_sessions(goal_id)

    async def update_session(self, session_id: str, fields: Dict[str, Any]) -> FocusSession:
        session = await self.storage.get_focus_session(session_id)
        if session is None:
            raise NotFoundError("Focus session not found")
        for key, value in fields.items():
            if key not in FOCUS_SESSION_FIELDS:
                raise ValidationError(f"Field '{key}' cannot be updated")
            setattr(session, key, value)
        return await self._save(session)

    # Rewards
    async def grant_reward(
        self,
        goal_id: str,
        reward_type: str,
        points_earned: int = 0,
        badge_name: Optional[str] = None,
    ) -> Reward:
        if reward_type not in REWARD_TYPES:
            raise ValidationError(f"Unknown reward type '{reward_type}'")
        await self._require_goal(goal_id)
        reward = Reward(
            goal_id=goal_id,
            reward_type=reward_type,
            points_earned=points_earned,
            badge_name=badge_name,
            claimed=False,
        )
        return await self._save(reward)

    async def list_rewards(self, goal_id: str) -> List[Reward]:
        return await self.storage.list_rewards(goal_id)

    async def claim_reward(self, reward_id: str) -> Reward:
        reward = await self.storage.get_reward(reward_id)
        if reward is None:
            raise NotFoundError("Reward not found")
        if reward.claimed:
            return reward
        reward.claimed = True
        return await self._save(reward)

    # Shame metrics
    async def get_shame_metrics(self, goal_id: str) -> Optional[ShameMetrics]:
        return await self.storage.get_shame_metrics(goal_id)

    async def update_shame_metrics(self, goal_id: str, fields: Dict[str, Any]) -> ShameMetrics:
        """Creates the goal's zeroed record on first write, then applies `fields`."""
        for key, value in fields.items():
            if key not in SHAME_METRICS_FIELDS:
                raise ValidationError(f"Field '{key}' cannot be updated")
            if value is None and key != "last_shame_notification":
                raise ValidationError(f"Field '{key}' must not be empty")
        await self._require_goal(goal_id)

        metrics = await self.storage.get_shame_metrics(goal_id)
        if metrics is None:
            metrics = ShameMetrics(
                goal_id=goal_id,
                consecutive_skips=0,
                total_skips=0,
                social_media_minutes_today=0,
                opportunity_cost_hours=0,
                last_shame_notification=None,
            )
        for key, value in fields.items():
            setattr(metrics, key, value)
        return await self._save(metrics)
