from uuid import UUID
from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from nextstep.core.database import get_db
from nextstep.core.dependency import get_current_profile, require_admin
from nextstep.goals.schemas import (
    GoalCreate,
    GoalProgressResponse,
    GoalResponse,
    StepCreate,
    StepResponse,
    StepStatusToggle,
)
from nextstep.goals.service import (
    add_step,
    create_goal,
    get_goal,
    get_goal_progress,
    get_step,
    get_user_goals,
    list_all_goals,
    toggle_step_status,
)
from nextstep.profiles.models import Profile

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])
admin_router = APIRouter(prefix="/admin/goals", tags=["Admin"])
logger = logging.getLogger(__name__)


@router.get(
    "/goals",
    response_model=List[GoalResponse],
    summary="Get all user goals",
    description="Retrieve the caller's goals, newest first.",
    responses={
        200: {"description": "Goals retrieved successfully."},
        401: {"description": "Unauthorized."},
        500: {"description": "Failed to retrieve goals."},
    },
)
def read_user_goals_route(
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> List[GoalResponse]:
    try:
        return get_user_goals(db, profile.id)
    except Exception as e:
        logger.error(f"Failed to fetch goals for profile {profile.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve goals")


@router.post(
    "/goals",
    response_model=GoalResponse,
    summary="Create a new goal",
    responses={
        200: {"description": "Goal created successfully."},
        400: {"description": "Missing title."},
        401: {"description": "Unauthorized."},
        500: {"description": "Goal creation failed."},
    },
)
def create_goal_route(
    goal: GoalCreate,
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> GoalResponse:
    try:
        return create_goal(db, goal, profile.id)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create goal for profile {profile.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to create goal.")


@router.get(
    "/goals/{goal_id}/steps",
    response_model=GoalProgressResponse,
    summary="Get the steps and progress of a goal",
    description="Steps ordered by order_index, with the share of done steps.",
    responses={
        200: {"description": "Steps retrieved successfully."},
        401: {"description": "Unauthorized."},
        404: {"description": "Goal not found."},
        500: {"description": "Failed to retrieve steps."},
    },
)
def read_goal_steps_route(
    goal_id: UUID,
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> GoalProgressResponse:
    if get_goal(db, goal_id, profile.id) is None:
        raise HTTPException(status_code=404, detail="Goal not found")
    try:
        return get_goal_progress(db, goal_id)
    except Exception as e:
        logger.error(f"Failed to fetch steps for goal {goal_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve steps")


@router.post(
    "/steps/{step_id}/toggle",
    response_model=StepResponse,
    summary="Advance a step's status",
    description="pending -> in_progress -> done -> pending.",
    responses={
        200: {"description": "Step updated."},
        401: {"description": "Unauthorized."},
        404: {"description": "Step not found."},
        500: {"description": "Failed to update step."},
    },
)
def toggle_step_status_route(
    step_id: UUID,
    body: StepStatusToggle,
    db: Session = Depends(get_db),
    profile: Profile = Depends(get_current_profile),
) -> StepResponse:
    step = get_step(db, step_id)
    if step is None or get_goal(db, step.goal_id, profile.id) is None:
        raise HTTPException(status_code=404, detail="Step not found")
    try:
        return toggle_step_status(db, step, body.current_status)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to toggle step {step_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update step")


@admin_router.get(
    "",
    response_model=List[GoalResponse],
    summary="List every user's goals",
    responses={
        200: {"description": "Goals retrieved successfully."},
        403: {"description": "Not an admin."},
        500: {"description": "Failed to retrieve goals."},
    },
)
def list_all_goals_route(
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> List[GoalResponse]:
    try:
        return list_all_goals(db)
    except Exception as e:
        logger.error(f"Failed to list goals for admin {admin.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve goals")


@admin_router.get(
    "/{goal_id}/steps",
    response_model=GoalProgressResponse,
    summary="Get the steps of any goal",
    responses={
        200: {"description": "Steps retrieved successfully."},
        403: {"description": "Not an admin."},
        404: {"description": "Goal not found."},
    },
)
def read_any_goal_steps_route(
    goal_id: UUID,
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> GoalProgressResponse:
    if get_goal(db, goal_id) is None:
        raise HTTPException(status_code=404, detail="Goal not found")
    try:
        return get_goal_progress(db, goal_id)
    except Exception as e:
        logger.error(f"Failed to fetch steps for goal {goal_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve steps")


@admin_router.post(
    "/{goal_id}/steps",
    response_model=StepResponse,
    summary="Add a step to a goal",
    description="Appends the step after the goal's current last step.",
    responses={
        200: {"description": "Step added successfully."},
        400: {"description": "Missing title."},
        403: {"description": "Not an admin."},
        404: {"description": "Goal not found."},
        500: {"description": "Failed to create step."},
    },
)
def add_step_route(
    goal_id: UUID,
    step: StepCreate,
    db: Session = Depends(get_db),
    admin: Profile = Depends(require_admin),
) -> StepResponse:
    try:
        return add_step(db, goal_id, step)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to add step to goal {goal_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to create step.")
