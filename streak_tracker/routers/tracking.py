from datetime import date
from fastapi import APIRouter, Depends, status
from typing import List
from streak_tracker.core.deps import get_today, get_tracking
from streak_tracker.core.errors import NotFoundError
from streak_tracker.schemas.tracking import (
    ScreenTimeCreate, ScreenTimeResponse, ScreenTimeTotalResponse,
    FocusSessionCreate, FocusSessionUpdate, FocusSessionResponse,
    RewardCreate, RewardResponse,
    ShameMetricsUpdate, ShameMetricsResponse
)
from streak_tracker.services.tracking import TrackingService

screen_time_router = APIRouter(prefix="/screen-time", tags=["screen-time"])
focus_router = APIRouter(prefix="/focus-sessions", tags=["focus-sessions"])
rewards_router = APIRouter(prefix="/rewards", tags=["rewards"])
shame_router = APIRouter(prefix="/shame-metrics", tags=["shame-metrics"])


@screen_time_router.get("/{goal_id}", response_model=List[ScreenTimeResponse])
async def list_screen_time(goal_id: str, tracking: TrackingService = Depends(get_tracking)):
    return await tracking.list_screen_time(goal_id)

@screen_time_router.get("/{goal_id}/today", response_model=ScreenTimeTotalResponse)
async def get_today_screen_time(
    goal_id: str,
    tracking: TrackingService = Depends(get_tracking),
    today: date = Depends(get_today)
):
    total = await tracking.screen_time_for_day(goal_id, today)
    return ScreenTimeTotalResponse(goal_id=goal_id, date=today, total_minutes=total)

@screen_time_router.post("/{goal_id}", response_model=ScreenTimeResponse, status_code=status.HTTP_201_CREATED)
async def log_screen_time(
    goal_id: str,
    entry_in: ScreenTimeCreate,
    tracking: TrackingService = Depends(get_tracking),
    today: date = Depends(get_today)
):
    return await tracking.log_screen_time(
        goal_id,
        app_name=entry_in.app_name,
        minutes=entry_in.time_spent_minutes,
        day=entry_in.day or today
    )


@focus_router.get("/{goal_id}", response_model=List[FocusSessionResponse])
async def list_focus_sessions(goal_id: str, tracking: TrackingService = Depends(get_tracking)):
    return await tracking.list_sessions(goal_id)

@focus_router.post("/{goal_id}", response_model=FocusSessionResponse, status_code=status.HTTP_201_CREATED)
async def start_focus_session(
    goal_id: str,
    session_in: FocusSessionCreate,
    tracking: TrackingService = Depends(get_tracking)
):
    return await tracking.start_session(goal_id, **session_in.model_dump())

@focus_router.put("/session/{session_id}", response_model=FocusSessionResponse)
async def update_focus_session(
    session_id: str,
    session_in: FocusSessionUpdate,
    tracking: TrackingService = Depends(get_tracking)
):
    return await tracking.update_session(session_id, session_in.model_dump(exclude_unset=True))


@rewards_router.get("/{goal_id}", response_model=List[RewardResponse])
async def list_rewards(goal_id: str, tracking: TrackingService = Depends(get_tracking)):
    return await tracking.list_rewards(goal_id)

@rewards_router.post("/{goal_id}", response_model=RewardResponse, status_code=status.HTTP_201_CREATED)
async def grant_reward(
    goal_id: str,
    reward_in: RewardCreate,
    tracking: TrackingService = Depends(get_tracking)
):
    return await tracking.grant_reward(goal_id, **reward_in.model_dump())

@rewards_router.post("/reward/{reward_id}/claim", response_model=RewardResponse)
async def claim_reward(reward_id: str, tracking: TrackingService = Depends(get_tracking)):
    return await tracking.claim_reward(reward_id)


@shame_router.get("/{goal_id}", response_model=ShameMetricsResponse)
async def get_shame_metrics(goal_id: str, tracking: TrackingService = Depends(get_tracking)):
    metrics = await tracking.get_shame_metrics(goal_id)
    if not metrics:
        raise NotFoundError("Shame metrics not found")
    return metrics

@shame_router.put("/{goal_id}", response_model=ShameMetricsResponse)
async def update_shame_metrics(
    goal_id: str,
    metrics_in: ShameMetricsUpdate,
    tracking: TrackingService = Depends(get_tracking)
):
    # first write creates the record
    return await tracking.update_shame_metrics(goal_id, metrics_in.model_dump(exclude_unset=True))
