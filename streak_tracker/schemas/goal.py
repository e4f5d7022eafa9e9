from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

class GoalCreate(BaseModel):
    name: str = Field(..., max_length=200)
    deadline: datetime  # must be in the future, checked by the registry
    reason: Optional[str] = None

class GoalUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=200)
    deadline: Optional[datetime] = None
    reason: Optional[str] = None

    model_config = {"extra": "forbid"}

class GoalResponse(BaseModel):
    id: str
    name: str
    deadline: datetime
    reason: Optional[str]
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}
