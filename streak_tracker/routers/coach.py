from fastapi import APIRouter, Depends
from streak_tracker.core.deps import get_coach, get_registry
from streak_tracker.core.errors import NotFoundError
from streak_tracker.schemas.coach import CoachRequest, CoachResponse
from streak_tracker.services.coach import CoachService
from streak_tracker.services.goals import GoalRegistry

router = APIRouter(prefix="/coach", tags=["coach"])

@router.post("", response_model=CoachResponse)
async def ask_coach(
    request_in: CoachRequest,
    registry: GoalRegistry = Depends(get_registry),
    coach: CoachService = Depends(get_coach)
):
    goal = await registry.get_goal(request_in.goal_id)
    if not goal:
        raise NotFoundError("Goal not found")
    reply = await coach.reply(request_in.message, goal.name)
    return CoachResponse(reply=reply)
