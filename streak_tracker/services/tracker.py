# streak_tracker/services/tracker.py
import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import date, datetime
from typing import Dict, Optional, Union

from streak_tracker.core.calendar import to_day, today
from streak_tracker.models.streak import Streak
from streak_tracker.services.ledger import CompletionLedger
from streak_tracker.services.streaks import StreakAggregator
from streak_tracker.storage.base import Storage

logger = logging.getLogger(__name__)


class GoalLocks:
    """
    One asyncio.Lock per goal id, shared by every request in the process.
    An entry lives only while some caller holds or waits on it.
    """

    def __init__(self):
        self._locks: Dict[str, asyncio.Lock] = {}
        self._holders: Dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, goal_id: str):
        lock = self._locks.setdefault(goal_id, asyncio.Lock())
        self._holders[goal_id] = self._holders.get(goal_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[goal_id] -= 1
            if not self._holders[goal_id]:
                del self._holders[goal_id]
                del self._locks[goal_id]


goal_locks = GoalLocks()


class StreakTracker:
    """
    "Mark a day complete": the ledger check, the insert and the streak
    recompute run under the goal's lock and commit together. The unique
    (goal_id, date) constraint covers writers in other processes.
    """

    def __init__(self, storage: Storage, locks: Optional[GoalLocks] = None):
        self.storage = storage
        self.locks = locks or goal_locks
        self.ledger = CompletionLedger(storage)
        self.aggregator = StreakAggregator(storage)

    async def complete_day(
        self, goal_id: str, day: Optional[Union[date, datetime]] = None
    ) -> Streak:
        day = to_day(day) if day is not None else today()

        async with self.locks.hold(goal_id):
            try:
                await self.ledger.record_completion(goal_id, day)
                streak = await self.aggregator.recompute_after_completion(goal_id, day)
                await self.storage.commit()
            except Exception:
                await self.storage.rollback()
                raise

        logger.info(
            "Goal %s completed %s: current=%s best=%s total=%s",
            goal_id, day, streak.current_streak, streak.best_streak, streak.total_completed,
        )
        return streak
