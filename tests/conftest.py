import json
from typing import Any, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from interview_chat.api import deps
from interview_chat.core.engine import InterviewChatEngine
from interview_chat.core.gateway import AIGatewayClient
from interview_chat.core.use_case import InterviewUseCase
from interview_chat.main import app
from interview_chat.storages.session_storage import SessionStorage

GATEWAY_URL = "https://gateway.test/v1/chat/completions"


def completion(content: str | None, usage: Dict[str, int] | None = None) -> httpx.Response:
    body: Dict[str, Any] = {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}
    if usage:
        body["usage"] = usage
    return httpx.Response(200, json=body)


class FakeUpstream:
    """Scripted chat completion gateway. Replies are served in order."""

    def __init__(self):
        self.replies: List[httpx.Response | Exception] = []
        self.requests: List[httpx.Request] = []

    def queue(self, *replies: httpx.Response | Exception) -> None:
        self.replies.extend(replies)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies.pop(0) if self.replies else completion("Hello! I am your interviewer today.")
        if isinstance(reply, Exception):
            raise reply
        return reply

    @property
    def payloads(self) -> List[Dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]

    @property
    def last_payload(self) -> Dict[str, Any]:
        return self.payloads[-1]


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def gateway(upstream) -> AIGatewayClient:
    return AIGatewayClient(
        api_key="test-key",
        url=GATEWAY_URL,
        model="test-model",
        transport=httpx.MockTransport(upstream.handler),
    )


@pytest.fixture
def engine(gateway) -> InterviewChatEngine:
    return InterviewChatEngine(gateway)


@pytest.fixture
def use_case(engine) -> InterviewUseCase:
    return InterviewUseCase(engine, SessionStorage())


@pytest.fixture
def client(engine, use_case):
    app.dependency_overrides[deps.get_engine] = lambda: engine
    app.dependency_overrides[deps.get_use_case] = lambda: use_case
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
