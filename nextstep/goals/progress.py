from datetime import datetime, timezone
from typing import Iterable, Optional

PENDING = "pending"
IN_PROGRESS = "in_progress"
DONE = "done"


def next_step_status(current: str) -> str:
    # pending -> in_progress -> done -> pending; unknown values fall through to done
    if current == DONE:
        return PENDING
    if current == PENDING:
        return IN_PROGRESS
    return DONE


def completion_stamp(status: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """Timestamp to store in completed_at for a step entering ``status``."""
    if status != DONE:
        return None
    return now or datetime.now(timezone.utc)


def progress_percentage(steps: Iterable) -> float:
    """Share of done steps as a percentage, 0.0 for a goal without steps."""
    total = 0
    completed = 0
    for step in steps:
        total += 1
        if step.status == DONE:
            completed += 1
    if total == 0:
        return 0.0
    return completed / total * 100
