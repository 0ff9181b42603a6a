from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session


def next_order_index(db: Session, column: Any, *criteria: Any) -> int:
    """
    Returns the order_index for an item appended to a group.

    The group is every row matching ``criteria`` (no criteria means the whole
    table). An empty group yields 0, otherwise max + 1. Existing gaps are
    left alone and nothing guards against two concurrent appends reading the
    same max.
    """
    current = db.query(func.max(column)).filter(*criteria).scalar()
    if current is None:
        current = -1
    return current + 1
