from pydantic import BaseModel, Field

class CoachRequest(BaseModel):
    goal_id: str
    message: str = Field(..., min_length=1, max_length=2000)

class CoachResponse(BaseModel):
    reply: str
