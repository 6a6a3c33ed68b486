"""
HTTP contract of POST /api/chat.
"""
import pytest
from fastapi.testclient import TestClient

from conftest import completion_body, json_reply, make_settings, text_reply, transport_failure
from portfolio_chat.llm.prompts import POLITE_DECLINE_MESSAGE
from portfolio_chat.services.chat_service import ChatService, reset_chat_service

CHAT_URL = "/api/chat"

DECLINE = (
    "I'm here to help you learn about Swarup Kumar's portfolio, skills, and projects. "
    "Could you please ask me something related to his work, experience, or the portfolio "
    "website? I'd be happy to help with that!"
)


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"message": None},
        {"message": 42},
        {"message": True},
        {"message": ["hi"]},
        {"message": {"text": "hi"}},
        {"message": ""},
        {"text": "What are Swarup's skills?"},
        ["What are Swarup's skills?"],
        "What are Swarup's skills?",
    ],
)
def test_invalid_message_is_rejected_without_outbound_calls(client, upstream, payload):
    response = client.post(CHAT_URL, json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Message is required and must be a string"}
    assert upstream.requests == []


def test_malformed_json_is_internal_error(client, upstream):
    response = client.post(
        CHAT_URL, content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 500
    assert set(response.json()) == {"error"}
    assert response.json()["error"]
    assert upstream.requests == []


class TestMissingCredential:

    @pytest.fixture
    def settings(self):
        return make_settings(groq_api_key=None)

    def test_returns_configuration_error(self, client, upstream):
        response = client.post(CHAT_URL, json={"message": "What are Swarup's skills?"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Groq API key is not configured. "
                     "Please set GROQ_API_KEY in your environment variables."
        }
        assert upstream.requests == []

    def test_validation_runs_before_configuration_check(self, client, upstream):
        response = client.post(CHAT_URL, json={"message": 7})

        assert response.status_code == 400
        assert upstream.requests == []


def test_off_topic_question_is_declined(client, upstream):
    upstream.relevance = json_reply(completion_body("NO"))

    response = client.post(CHAT_URL, json={"message": "What is the capital of France?"})

    assert response.status_code == 200
    assert response.json() == {"content": DECLINE}
    assert DECLINE == POLITE_DECLINE_MESSAGE
    assert len(upstream.relevance_calls) == 1
    assert len(upstream.answer_calls) == 0


@pytest.mark.parametrize("verdict", ["no", "  No \n", "NO."])
def test_non_yes_verdicts_decline(client, upstream, verdict):
    upstream.relevance = json_reply(completion_body(verdict))

    response = client.post(CHAT_URL, json={"message": "Best pizza in Naples?"})

    assert response.json() == {"content": DECLINE}
    assert upstream.answer_calls == []


def test_relevant_question_returns_upstream_content_verbatim(client, upstream):
    upstream.relevance = json_reply(completion_body("YES"))
    upstream.answer = json_reply(completion_body("He knows React, Node.js..."))

    response = client.post(CHAT_URL, json={"message": "What are Swarup's skills?"})

    assert response.status_code == 200
    assert response.json() == {"content": "He knows React, Node.js..."}
    assert len(upstream.relevance_calls) == 1
    assert len(upstream.answer_calls) == 1


@pytest.mark.parametrize(
    "relevance",
    [
        json_reply({"error": {"message": "overloaded"}}, status_code=503),
        json_reply({"error": {"message": "bad key"}}, status_code=401),
        text_reply("<html>gateway</html>"),
        json_reply({"choices": []}),
        json_reply({"unexpected": True}),
        transport_failure(),
    ],
    ids=["503", "401", "non-json", "no-choices", "wrong-shape", "connect-error"],
)
def test_classifier_failure_fails_open(client, upstream, relevance):
    upstream.relevance = relevance
    upstream.answer = json_reply(completion_body("Swarup builds ML dashboards."))

    response = client.post(CHAT_URL, json={"message": "Tell me about his projects"})

    assert response.status_code == 200
    assert response.json() == {"content": "Swarup builds ML dashboards."}
    assert len(upstream.answer_calls) == 1


@pytest.mark.parametrize("status_code", [400, 401, 429, 500, 503])
def test_answer_upstream_error_status_is_mirrored(client, upstream, status_code):
    upstream.answer = json_reply({"error": {"message": "nope"}}, status_code=status_code)

    response = client.post(CHAT_URL, json={"message": "What are Swarup's skills?"})

    assert response.status_code == status_code
    assert response.json() == {"error": f"Groq API error: {status_code}"}
    # No retry
    assert len(upstream.answer_calls) == 1


def test_answer_without_content_uses_fallback(client, upstream):
    upstream.answer = json_reply(completion_body(None))

    response = client.post(CHAT_URL, json={"message": "What are Swarup's skills?"})

    assert response.status_code == 200
    assert response.json() == {"content": "No response from AI"}


def test_answer_transport_failure_is_internal_error(client, upstream):
    upstream.answer = transport_failure()

    response = client.post(CHAT_URL, json={"message": "What are Swarup's skills?"})

    assert response.status_code == 500
    body = response.json()
    assert set(body) == {"error"}
    assert body["error"]


def test_answer_non_json_body_is_internal_error(client, upstream):
    upstream.answer = text_reply("not json at all")

    response = client.post(CHAT_URL, json={"message": "What are Swarup's skills?"})

    assert response.status_code == 500
    assert set(response.json()) == {"error"}


def test_repeated_requests_give_identical_output(client, upstream):
    payload = {"message": "Which databases does Swarup use?"}
    upstream.answer = json_reply(completion_body("PostgreSQL and MongoDB."))

    first = client.post(CHAT_URL, json=payload)
    second = client.post(CHAT_URL, json=payload)

    assert first.status_code == second.status_code == 200
    assert first.json() == second.json() == {"content": "PostgreSQL and MongoDB."}


def test_request_logging_sets_response_time_header(client):
    response = client.post(CHAT_URL, json={"message": "What are Swarup's skills?"})

    assert "x-response-time" in response.headers


def test_unexpected_service_error_uses_exception_message():
    from portfolio_chat.api.main import app

    class BrokenService(ChatService):
        async def reply(self, message):
            raise RuntimeError("kaboom")

    reset_chat_service(BrokenService(settings=make_settings()))
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.post(CHAT_URL, json={"message": "hi"})
    finally:
        reset_chat_service()

    assert response.status_code == 500
    assert response.json() == {"error": "kaboom"}


def test_unexpected_error_without_message_uses_generic_text():
    from portfolio_chat.api.main import app

    class SilentFailure(ChatService):
        async def reply(self, message):
            raise RuntimeError()

    reset_chat_service(SilentFailure(settings=make_settings()))
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.post(CHAT_URL, json={"message": "hi"})
    finally:
        reset_chat_service()

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
