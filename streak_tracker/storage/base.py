# streak_tracker/storage/base.py
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, TypeVar

from streak_tracker.models.goal import Goal
from streak_tracker.models.streak import Streak, DailyCompletion
from streak_tracker.models.tracking import ScreenTimeEntry, FocusSession, Reward, ShameMetrics

RecordT = TypeVar("RecordT")


class Storage(ABC):
    """Everything the engine needs from a store. Services only see this."""

    @abstractmethod
    async def add(self, record: RecordT) -> RecordT:
        """Stages a new or modified record and flushes it so defaults are populated."""

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass

    # Goals
    @abstractmethod
    async def get_goal(self, goal_id: str) -> Optional[Goal]:
        pass

    @abstractmethod
    async def list_goals(self) -> List[Goal]:
        """Newest first."""

    @abstractmethod
    async def delete_goal(self, goal_id: str) -> bool:
        """Removes the goal and every record that references it."""

    # Streaks
    @abstractmethod
    async def get_streak(self, goal_id: str) -> Optional[Streak]:
        pass

    # Completions
    @abstractmethod
    async def get_completion(self, goal_id: str, day: date) -> Optional[DailyCompletion]:
        pass

    @abstractmethod
    async def list_completions(self, goal_id: str) -> List[DailyCompletion]:
        """Ordered by date."""

    @abstractmethod
    async def latest_completed_day(self, goal_id: str) -> Optional[date]:
        pass

    # Screen time
    @abstractmethod
    async def list_screen_time(self, goal_id: str) -> List[ScreenTimeEntry]:
        pass

    @abstractmethod
    async def screen_time_minutes(self, goal_id: str, day: date) -> int:
        pass

    # Focus sessions
    @abstractmethod
    async def get_focus_session(self, session_id: str) -> Optional[FocusSession]:
        pass

    @abstractmethod
    async def list_focus_sessions(self, goal_id: str) -> List[FocusSession]:
        pass

    # Rewards
    @abstractmethod
    async def get_reward(self, reward_id: str) -> Optional[Reward]:
        pass

    @abstractmethod
    async def list_rewards(self, goal_id: str) -> List[Reward]:
        pass

    # Shame metrics
    @abstractmethod
    async def get_shame_metrics(self, goal_id: str) -> Optional[ShameMetrics]:
        pass
