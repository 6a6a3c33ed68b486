"""
Pytest configuration and fixtures.

Groq is never contacted: the SDK is given an httpx client whose
MockTransport routes requests to UpstreamStub, which records every
outbound call and replays a configurable reply per call type.
"""
import json
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from portfolio_chat.core.config import Settings, get_settings
from portfolio_chat.services.chat_service import ChatService, reset_chat_service


def make_settings(**overrides) -> Settings:
    """Settings with a dummy API key and the production sampling defaults."""
    values = dict(
        app_name="PortfolioChatTest",
        app_env="test",
        log_level="INFO",
        groq_api_key="gsk_test_key",
        llm_model="llama-3.3-70b-versatile",
        relevance_temperature=0.1,
        relevance_max_tokens=10,
        answer_temperature=0.7,
        answer_max_tokens=1024,
        cors_origins=("*",),
        enable_request_logging=True,
    )
    values.update(overrides)
    return Settings(**values)


def completion_body(content) -> dict:
    """A chat.completion payload shaped like Groq's."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "llama-3.3-70b-versatile",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 1, "total_tokens": 11},
    }


Reply = Callable[[httpx.Request], httpx.Response]


def json_reply(payload, status_code: int = 200) -> Reply:
    return lambda request: httpx.Response(status_code, json=payload)


def text_reply(text: str, status_code: int = 200) -> Reply:
    return lambda request: httpx.Response(status_code, text=text)


def transport_failure() -> Reply:
    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)
    return _fail


class UpstreamStub:
    """
    Fake Groq endpoint.

    Relevance checks send a single system message; answer calls send a
    system and a user message. That is how calls are told apart.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.bodies: List[dict] = []
        self.relevance: Reply = json_reply(completion_body("YES"))
        self.answer: Reply = json_reply(completion_body("He knows React, Node.js..."))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(request)
        self.bodies.append(body)
        if len(body["messages"]) == 1:
            return self.relevance(request)
        return self.answer(request)

    @property
    def relevance_calls(self) -> List[dict]:
        return [b for b in self.bodies if len(b["messages"]) == 1]

    @property
    def answer_calls(self) -> List[dict]:
        return [b for b in self.bodies if len(b["messages"]) == 2]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def upstream() -> UpstreamStub:
    return UpstreamStub()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def service(settings, upstream) -> ChatService:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    return ChatService(settings=settings, http_client=http_client)


@pytest.fixture
def client(service):
    """TestClient bound to the app, with the stubbed service installed."""
    from portfolio_chat.api.main import app

    reset_chat_service(service)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    reset_chat_service()
