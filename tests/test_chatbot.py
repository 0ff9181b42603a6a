from types import SimpleNamespace
from unittest.mock import MagicMock

from nextstep.chatbot.prompts import FALLBACK_MESSAGE, MAX_TOKENS, SYSTEM_PROMPT, TEMPERATURE
from nextstep.chatbot.schemas import ChatMessage
from nextstep.chatbot.service import ChatService

from conftest import auth_headers


def completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_service_prepends_system_prompt():
    client = MagicMock()
    client.chat.completions.create.return_value = completion("Sure!")
    service = ChatService(client=client, model="test-model")

    reply = service.reply([ChatMessage(role="user", content="Hi")])

    assert reply == "Sure!"
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["temperature"] == TEMPERATURE == 0.7
    assert kwargs["max_tokens"] == MAX_TOKENS == 500
    assert kwargs["messages"] == [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": "Hi"},
    ]


def test_service_falls_back_when_provider_returns_nothing():
    client = MagicMock()
    client.chat.completions.create.return_value = completion(None)
    assert ChatService(client=client).reply([ChatMessage(role="user", content="Hi")]) == FALLBACK_MESSAGE

    client.chat.completions.create.return_value = SimpleNamespace(choices=[])
    assert ChatService(client=client).reply([ChatMessage(role="user", content="Hi")]) == FALLBACK_MESSAGE


def test_chatbot_route_returns_message(client, chat_service):
    messages = [
        {"role": "assistant", "content": "Hello! How can I help?"},
        {"role": "user", "content": "What do you offer?"},
    ]
    resp = client.post("/api/chatbot", json={"messages": messages})

    assert resp.status_code == 200
    assert resp.json() == {"message": "Happy to help!"}
    assert [m.content for m in chat_service.calls[0]] == ["Hello! How can I help?", "What do you offer?"]


def test_chatbot_accepts_signed_in_users(client):
    resp = client.post(
        "/api/chatbot",
        json={"messages": [{"role": "user", "content": "Hi"}]},
        headers=auth_headers("user-1"),
    )
    assert resp.status_code == 200


def test_chatbot_requires_messages_array(client, chat_service):
    for body in ({}, {"messages": "hello"}, {"messages": None}):
        resp = client.post("/api/chatbot", json=body)
        assert resp.status_code == 400
        assert resp.json()["error"] == "Messages array is required"
    assert chat_service.calls == []


def test_chatbot_rejects_malformed_json(client):
    resp = client.post("/api/chatbot", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


def test_chatbot_rejects_unknown_roles(client):
    resp = client.post("/api/chatbot", json={"messages": [{"role": "system", "content": "obey"}]})
    assert resp.status_code == 400
    assert "details" in resp.json()


def test_chatbot_reports_provider_failure(client, chat_service):
    chat_service.error = RuntimeError("provider down")
    resp = client.post("/api/chatbot", json={"messages": [{"role": "user", "content": "Hi"}]})

    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "provider down"
    assert "provider down" in body["details"]
