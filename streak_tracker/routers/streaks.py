from datetime import date
from fastapi import APIRouter, Depends
from typing import List
from streak_tracker.core.deps import get_storage, get_today, get_tracker
from streak_tracker.core.errors import NotFoundError
from streak_tracker.schemas.streak import StreakResponse, CompletionResponse
from streak_tracker.services.ledger import CompletionLedger
from streak_tracker.services.streaks import StreakAggregator
from streak_tracker.services.tracker import StreakTracker
from streak_tracker.storage.base import Storage

router = APIRouter(prefix="/streaks", tags=["streaks"])
completions_router = APIRouter(prefix="/completions", tags=["completions"])

@router.get("/{goal_id}", response_model=StreakResponse)
async def get_streak(goal_id: str, storage: Storage = Depends(get_storage)):
    streak = await StreakAggregator(storage).get_streak(goal_id)
    if not streak:
        raise NotFoundError("Streak not found")
    return streak

@router.post("/{goal_id}/complete", response_model=StreakResponse)
async def complete_today(
    goal_id: str,
    tracker: StreakTracker = Depends(get_tracker),
    today: date = Depends(get_today)
):
    # 400 already_completed on a second call the same day
    return await tracker.complete_day(goal_id, today)

@completions_router.get("/{goal_id}", response_model=List[CompletionResponse])
async def list_completions(goal_id: str, storage: Storage = Depends(get_storage)):
    return await CompletionLedger(storage).list_completions(goal_id)
