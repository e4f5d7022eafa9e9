from pydantic import BaseModel
from datetime import date
from typing import Optional

class StreakResponse(BaseModel):
    id: str
    goal_id: str
    current_streak: int
    best_streak: int
    total_completed: int
    last_completed_date: Optional[date]

    model_config = {"from_attributes": True}

class CompletionResponse(BaseModel):
    id: str
    goal_id: str
    date: date
    completed: bool

    model_config = {"from_attributes": True}
