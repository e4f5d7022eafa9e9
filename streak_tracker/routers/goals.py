from fastapi import APIRouter, Depends, Response, status
from typing import List
from streak_tracker.core.deps import get_registry
from streak_tracker.core.errors import NotFoundError
from streak_tracker.schemas.goal import GoalCreate, GoalUpdate, GoalResponse
from streak_tracker.services.goals import GoalRegistry

router = APIRouter(prefix="/goals", tags=["goals"])

@router.get("", response_model=List[GoalResponse])
async def list_goals(registry: GoalRegistry = Depends(get_registry)):
    return await registry.list_goals()

@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
async def create_goal(
    goal_in: GoalCreate,
    registry: GoalRegistry = Depends(get_registry)
):
    # goal and its zeroed streak are created together
    return await registry.create_goal(
        name=goal_in.name,
        deadline=goal_in.deadline,
        reason=goal_in.reason
    )

@router.get("/{goal_id}", response_model=GoalResponse)
async def get_goal(goal_id: str, registry: GoalRegistry = Depends(get_registry)):
    goal = await registry.get_goal(goal_id)
    if not goal:
        raise NotFoundError("Goal not found")
    return goal

@router.put("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: str,
    goal_in: GoalUpdate,
    registry: GoalRegistry = Depends(get_registry)
):
    goal = await registry.update_goal(goal_id, goal_in.model_dump(exclude_unset=True))
    if not goal:
        raise NotFoundError("Goal not found")
    return goal

@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(goal_id: str, registry: GoalRegistry = Depends(get_registry)):
    if not await registry.delete_goal(goal_id):
        raise NotFoundError("Goal not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
