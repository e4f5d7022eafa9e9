from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional

class ScreenTimeCreate(BaseModel):
    app_name: str = Field(..., min_length=1, max_length=100)
    time_spent_minutes: int = Field(..., ge=0)
    day: Optional[date] = None  # defaults to today

class ScreenTimeResponse(BaseModel):
    id: str
    goal_id: str
    app_name: str
    time_spent_minutes: int
    date: date
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}

class ScreenTimeTotalResponse(BaseModel):
    goal_id: str
    date: date
    total_minutes: int

class FocusSessionCreate(BaseModel):
    start_time: datetime
    end_time: Optional[datetime] = None
    planned_duration_minutes: int = Field(..., gt=0)
    actual_duration_minutes: Optional[int] = Field(None, ge=0)
    distraction_events: int = Field(0, ge=0)
    completion_rate: int = Field(0, ge=0, le=100)

class FocusSessionUpdate(BaseModel):
    end_time: Optional[datetime] = None
    actual_duration_minutes: Optional[int] = Field(None, ge=0)
    distraction_events: Optional[int] = Field(None, ge=0)
    completion_rate: Optional[int] = Field(None, ge=0, le=100)

    model_config = {"extra": "forbid"}

class FocusSessionResponse(BaseModel):
    id: str
    goal_id: str
    start_time: datetime
    end_time: Optional[datetime]
    planned_duration_minutes: int
    actual_duration_minutes: Optional[int]
    distraction_events: int
    completion_rate: int

    model_config = {"from_attributes": True}

class RewardCreate(BaseModel):
    reward_type: str = Field(..., pattern="^(streak|milestone|surprise|focus)$")
    points_earned: int = Field(0, ge=0)
    badge_name: Optional[str] = None

class RewardResponse(BaseModel):
    id: str
    goal_id: str
    reward_type: str
    points_earned: int
    badge_name: Optional[str]
    unlocked_at: Optional[datetime]
    claimed: bool

    model_config = {"from_attributes": True}

class ShameMetricsUpdate(BaseModel):
    consecutive_skips: Optional[int] = Field(None, ge=0)
    total_skips: Optional[int] = Field(None, ge=0)
    social_media_minutes_today: Optional[int] = Field(None, ge=0)
    opportunity_cost_hours: Optional[int] = Field(None, ge=0)
    last_shame_notification: Optional[datetime] = None

    model_config = {"extra": "forbid"}

class ShameMetricsResponse(BaseModel):
    id: str
    goal_id: str
    consecutive_skips: int
    total_skips: int
    social_media_minutes_today: int
    opportunity_cost_hours: int
    last_shame_notification: Optional[datetime]

    model_config = {"from_attributes": True}
