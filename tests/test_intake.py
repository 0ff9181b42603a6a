from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from nextstep.intake.models import Answer, IntakeQuestion
from nextstep.intake.service import submit_answers


def create_question(client, headers, text, helper=None):
    resp = client.post("/admin/questions", json={"question_text": text, "helper_text": helper}, headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_blank_answers_never_touch_storage():
    db = MagicMock()
    with pytest.raises(HTTPException) as exc:
        submit_answers(db, uuid4(), {uuid4(): "", uuid4(): "   "})
    assert exc.value.status_code == 400
    assert exc.value.detail == "Please answer at least one question."
    db.query.assert_not_called()
    db.add_all.assert_not_called()
    db.commit.assert_not_called()


def test_submit_replaces_previous_set(db):
    profile_id = uuid4()
    q1, q2, q3 = (IntakeQuestion(id=uuid4(), question_text=t) for t in ("a", "b", "c"))
    db.add_all([q1, q2, q3])
    db.commit()

    submit_answers(db, profile_id, {q1.id: "old one", q2.id: "old two"})
    submit_answers(db, profile_id, {q1.id: "  new one  ", q2.id: " ", q3.id: "three"})

    stored = {a.question_id: a.answer_text for a in db.query(Answer).filter(Answer.user_id == profile_id)}
    assert stored == {q1.id: "new one", q3.id: "three"}


def test_question_order_index_follows_max(client, admin_headers, db):
    for index in range(3):
        db.add(IntakeQuestion(question_text=f"Seed {index}", order_index=index))
    db.commit()

    created = create_question(client, admin_headers, "What is your budget?")
    assert created["order_index"] == 3
    assert created["is_active"] is True


def test_first_question_gets_index_zero(client, admin_headers):
    assert create_question(client, admin_headers, "Why now?")["order_index"] == 0


def test_question_text_required(client, admin_headers):
    resp = client.post("/admin/questions", json={"question_text": "  "}, headers=admin_headers)
    assert resp.status_code == 400


def test_dashboard_lists_only_active_questions(client, admin_headers, user_headers, db):
    create_question(client, admin_headers, "Visible")
    db.add(IntakeQuestion(question_text="Hidden", is_active=False, order_index=9))
    db.commit()

    texts = [q["question_text"] for q in client.get("/dashboard/questions", headers=user_headers).json()]
    assert texts == ["Visible"]
    assert len(client.get("/admin/questions", headers=admin_headers).json()) == 2


def test_answer_round_trip_through_dashboard(client, admin_headers, user_headers):
    q1 = create_question(client, admin_headers, "Goal?")
    q2 = create_question(client, admin_headers, "Timeline?")

    resp = client.put(
        "/dashboard/answers",
        json={"answers": {q1["id"]: "Grow revenue", q2["id"]: ""}},
        headers=user_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["answers"] == {q1["id"]: "Grow revenue"}

    saved = client.get("/dashboard/answers", headers=user_headers).json()
    assert saved["answers"] == {q1["id"]: "Grow revenue"}


def test_all_blank_submission_keeps_existing_answers(client, admin_headers, user_headers):
    q1 = create_question(client, admin_headers, "Goal?")
    client.put("/dashboard/answers", json={"answers": {q1["id"]: "Keep me"}}, headers=user_headers)

    resp = client.put("/dashboard/answers", json={"answers": {q1["id"]: "   "}}, headers=user_headers)
    assert resp.status_code == 400
    assert client.get("/dashboard/answers", headers=user_headers).json()["answers"] == {q1["id"]: "Keep me"}


def test_admin_sees_answers_per_user(client, admin_headers, user_headers):
    q1 = create_question(client, admin_headers, "Goal?")
    client.put("/dashboard/answers", json={"answers": {q1["id"]: "Grow"}}, headers=user_headers)
    me = client.get("/dashboard/profile", headers=user_headers).json()

    data = client.get("/admin/answers", headers=admin_headers).json()["answers"]
    assert list(data) == [me["id"]]
    assert data[me["id"]] == [{"question_id": q1["id"], "answer_text": "Grow", "question_text": "Goal?"}]


def test_failed_insert_keeps_previous_answers(db):
    profile_id = uuid4()
    question = IntakeQuestion(id=uuid4(), question_text="Goal?")
    db.add(question)
    db.commit()
    submit_answers(db, profile_id, {question.id: "keep"})

    with pytest.raises(IntegrityError):
        submit_answers(db, profile_id, {None: "boom"})

    stored = [(a.question_id, a.answer_text) for a in db.query(Answer).filter(Answer.user_id == profile_id)]
    assert stored == [(question.id, "keep")]
