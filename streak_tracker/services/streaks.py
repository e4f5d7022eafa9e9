# streak_tracker/services/streaks.py
from dataclasses import dataclass, replace
from datetime import date
from typing import Iterable, Optional

from streak_tracker.core.calendar import previous_day, to_day
from streak_tracker.core.errors import NotFoundError
from streak_tracker.models.streak import Streak
from streak_tracker.storage.base import Storage


@dataclass(frozen=True)
class StreakState:
    current_streak: int = 0
    best_streak: int = 0
    total_completed: int = 0
    last_completed_date: Optional[date] = None

    @classmethod
    def of(cls, streak: Streak) -> "StreakState":
        return cls(
            current_streak=streak.current_streak or 0,
            best_streak=streak.best_streak or 0,
            total_completed=streak.total_completed or 0,
            last_completed_date=streak.last_completed_date,
        )


def advance(state: StreakState, day: date) -> StreakState:
    """
    One accepted completion on `day`.
    Consecutive only when the last completed day is exactly the day before;
    anything else (first completion, gap, same or earlier day) restarts at 1.
    """
    if state.last_completed_date is not None and state.last_completed_date == previous_day(day):
        current = state.current_streak + 1
    else:
        current = 1

    return replace(
        state,
        current_streak=current,
        best_streak=max(state.best_streak, current),
        total_completed=state.total_completed + 1,
        last_completed_date=day,
    )


def replay(days: Iterable[date]) -> StreakState:
    """Rebuilds a streak from a chronologically ordered completion history."""
    state = StreakState()
    for day in days:
        state = advance(state, day)
    return state


class StreakAggregator:
    def __init__(self, storage: Storage):
        self.storage = storage

    async def get_streak(self, goal_id: str) -> Optional[Streak]:
        return await self.storage.get_streak(goal_id)

    async def recompute_after_completion(self, goal_id: str, day: date) -> Streak:
        """Applies one completion to the stored streak. Does not commit."""
        streak = await self.storage.get_streak(goal_id)
        if streak is None:
            raise NotFoundError("Streak not found")

        state = advance(StreakState.of(streak), to_day(day))

        streak.current_streak = state.current_streak
        streak.best_streak = state.best_streak
        streak.total_completed = state.total_completed
        streak.last_completed_date = state.last_completed_date
        return await self.storage.add(streak)
