import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from nextstep.core.config import IDENTITY_JWT_ALGORITHM, IDENTITY_JWT_SECRET
from nextstep.core.database import Base, get_db
from nextstep.core.dependency import get_chat_service
from nextstep.profiles.models import Profile, ROLE_ADMIN


class FakeChatService:
    def __init__(self, reply="Happy to help!", error=None):
        self.next_reply = reply
        self.error = error
        self.calls = []

    def reply(self, messages):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return self.next_reply


def make_token(user_id, email=None, name=None):
    claims = {"sub": user_id}
    if email:
        claims["email"] = email
    if name:
        claims["name"] = name
    return jwt.encode(claims, IDENTITY_JWT_SECRET, algorithm=IDENTITY_JWT_ALGORITHM)


def auth_headers(user_id, email=None, name=None):
    return {"Authorization": f"Bearer {make_token(user_id, email, name)}"}


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def chat_service():
    return FakeChatService()


@pytest.fixture
def client(session_factory, chat_service):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_chat_service] = lambda: chat_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_headers(client):
    headers = auth_headers("user-1", email="ada@example.com", name="Ada")
    assert client.get("/auth/me", headers=headers).status_code == 200
    return headers


@pytest.fixture
def admin_headers(client, db):
    headers = auth_headers("admin-1", email="admin@example.com", name="Grace")
    assert client.get("/auth/me", headers=headers).status_code == 200
    profile = db.query(Profile).filter(Profile.user_id == "admin-1").one()
    profile.role = ROLE_ADMIN
    db.commit()
    return headers
