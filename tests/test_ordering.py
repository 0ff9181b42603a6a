from uuid import uuid4

from nextstep.core.ordering import next_order_index
from nextstep.goals.models import Goal, Step
from nextstep.intake.models import IntakeQuestion


def test_empty_group_starts_at_zero(db):
    assert next_order_index(db, IntakeQuestion.order_index) == 0


def test_appends_after_max(db):
    for index in (0, 2, 1):
        db.add(IntakeQuestion(question_text=f"Q{index}", order_index=index))
    db.commit()
    assert next_order_index(db, IntakeQuestion.order_index) == 3


def test_gaps_are_not_closed(db):
    db.add(IntakeQuestion(question_text="first", order_index=0))
    db.add(IntakeQuestion(question_text="far", order_index=7))
    db.commit()
    assert next_order_index(db, IntakeQuestion.order_index) == 8


def test_steps_are_grouped_per_goal(db):
    owner = uuid4()
    goal_a = Goal(id=uuid4(), user_id=owner, title="A")
    goal_b = Goal(id=uuid4(), user_id=owner, title="B")
    db.add_all([goal_a, goal_b])
    db.add_all([
        Step(goal_id=goal_a.id, title="a0", order_index=0),
        Step(goal_id=goal_a.id, title="a1", order_index=1),
    ])
    db.commit()

    assert next_order_index(db, Step.order_index, Step.goal_id == goal_a.id) == 2
    assert next_order_index(db, Step.order_index, Step.goal_id == goal_b.id) == 0
