import logging
from typing import List, Optional
from uuid import UUID, uuid4

from fastapi import HTTPException
from sqlalchemy.orm import Session

from nextstep.core.ordering import next_order_index
from nextstep.goals.models import Goal, Step
from nextstep.goals.progress import DONE, PENDING, completion_stamp, next_step_status, progress_percentage
from nextstep.goals.schemas import GoalCreate, GoalProgressResponse, StepCreate, StepResponse

logger = logging.getLogger(__name__)


# Goals
def create_goal(db: Session, goal: GoalCreate, profile_id: UUID) -> Goal:
    title = goal.title.strip()
    if not title:
        raise HTTPException(status_code=400, detail="Please enter a goal title.")

    new_goal = Goal(
        id=uuid4(),
        user_id=profile_id,
        title=title,
        description=(goal.description or "").strip() or None,
        target_date=goal.target_date,
    )
    db.add(new_goal)
    db.commit()
    db.refresh(new_goal)
    return new_goal

def get_goal(db: Session, goal_id: UUID, profile_id: Optional[UUID] = None) -> Optional[Goal]:
    query = db.query(Goal).filter(Goal.id == goal_id)
    if profile_id is not None:
        query = query.filter(Goal.user_id == profile_id)
    return query.first()

def get_user_goals(db: Session, profile_id: UUID) -> List[Goal]:
    return db.query(Goal).filter(Goal.user_id == profile_id).order_by(Goal.created_at.desc()).all()

def list_all_goals(db: Session) -> List[Goal]:
    return db.query(Goal).order_by(Goal.created_at.desc()).all()


# Steps
def get_goal_steps(db: Session, goal_id: UUID) -> List[Step]:
    return db.query(Step).filter(Step.goal_id == goal_id).order_by(Step.order_index.asc()).all()

def get_step(db: Session, step_id: UUID) -> Optional[Step]:
    return db.query(Step).filter(Step.id == step_id).first()

def add_step(db: Session, goal_id: UUID, step: StepCreate) -> Step:
    title = step.title.strip()
    if not title:
        raise HTTPException(status_code=400, detail="Please select a goal and enter a step title.")
    if get_goal(db, goal_id) is None:
        raise HTTPException(status_code=404, detail="Goal not found")

    new_step = Step(
        id=uuid4(),
        goal_id=goal_id,
        title=title,
        description=(step.description or "").strip() or None,
        due_date=step.due_date,
        status=PENDING,
        order_index=next_order_index(db, Step.order_index, Step.goal_id == goal_id),
    )
    db.add(new_step)
    db.commit()
    db.refresh(new_step)
    return new_step

def toggle_step_status(db: Session, step: Step, current_status: str) -> Step:
    """Moves a step one position along the status cycle and stamps completion."""
    new_status = next_step_status(current_status)
    step.status = new_status
    step.completed_at = completion_stamp(new_status)
    db.commit()
    db.refresh(step)
    if new_status == DONE:
        logger.info("Step %s completed", step.id)
    return step


# Progress
def get_goal_progress(db: Session, goal_id: UUID) -> GoalProgressResponse:
    steps = get_goal_steps(db, goal_id)
    return GoalProgressResponse(
        goal_id=goal_id,
        steps=[StepResponse.model_validate(s) for s in steps],
        completed_steps=sum(1 for s in steps if s.status == DONE),
        total_steps=len(steps),
        progress=progress_percentage(steps),
    )
