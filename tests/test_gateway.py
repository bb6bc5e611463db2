import asyncio

import httpx
import pytest

from conftest import GATEWAY_URL, completion
from interview_chat.core.gateway import AIGatewayClient
from interview_chat.system.exceptions import (
    ConfigurationError,
    EmptyResponse,
    UpstreamError,
    UpstreamQuotaExceeded,
    UpstreamRateLimited,
)

MESSAGES = [{"role": "system", "content": "be an interviewer"}, {"role": "user", "content": "start"}]


def test_sends_bearer_auth_model_and_limits(gateway, upstream):
    upstream.queue(completion("Welcome!"))

    content = asyncio.run(gateway.complete(MESSAGES, max_tokens=800))

    assert content == "Welcome!"
    request = upstream.requests[0]
    assert request.method == "POST"
    assert str(request.url) == GATEWAY_URL
    assert request.headers["authorization"] == "Bearer test-key"
    assert upstream.last_payload == {
        "model": "test-model",
        "messages": MESSAGES,
        "temperature": 0.7,
        "max_tokens": 800,
    }


@pytest.mark.parametrize("status_code, error, http_status", [
    (429, UpstreamRateLimited, 429),
    (402, UpstreamQuotaExceeded, 402),
    (500, UpstreamError, 500),
    (503, UpstreamError, 500),
    (401, UpstreamError, 500),
])
def test_upstream_failures_are_mapped(gateway, upstream, status_code, error, http_status):
    upstream.queue(httpx.Response(status_code, text="upstream says no"))

    with pytest.raises(error) as exc_info:
        asyncio.run(gateway.complete(MESSAGES, max_tokens=800))

    assert exc_info.value.status_code == http_status


def test_other_failure_mentions_upstream_status(gateway, upstream):
    upstream.queue(httpx.Response(503))

    with pytest.raises(UpstreamError, match="AI Gateway error: 503"):
        asyncio.run(gateway.complete(MESSAGES, max_tokens=800))


@pytest.mark.parametrize("body", [
    {"choices": []},
    {"choices": [{"message": {"content": ""}}]},
    {"choices": [{"message": {}}]},
    {"choices": [{"message": "hello"}]},
    {"choices": ["hello"]},
    {"choices": {"message": {"content": "hi"}}},
    {},
])
def test_missing_content_is_an_empty_response(gateway, upstream, body):
    upstream.queue(httpx.Response(200, json=body))

    with pytest.raises(EmptyResponse):
        asyncio.run(gateway.complete(MESSAGES, max_tokens=800))


def test_transport_failure_is_an_upstream_error(gateway, upstream):
    upstream.queue(httpx.ConnectError("connection refused"))

    with pytest.raises(UpstreamError) as exc_info:
        asyncio.run(gateway.complete(MESSAGES, max_tokens=800))

    assert exc_info.value.status_code == 500


def test_missing_api_key_is_a_configuration_error(upstream):
    gateway = AIGatewayClient(api_key="", transport=httpx.MockTransport(upstream.handler))

    with pytest.raises(ConfigurationError):
        asyncio.run(gateway.complete(MESSAGES, max_tokens=800))
    assert upstream.requests == []


def test_usage_is_recorded_in_metrics(gateway, upstream):
    upstream.queue(completion("Hi", usage={"prompt_tokens": 120, "completion_tokens": 30}))

    asyncio.run(gateway.complete(MESSAGES, max_tokens=800))

    metrics = gateway.stage_logger.get_metrics()
    assert metrics["completions"] == 1
    assert metrics["prompt_tokens"] == 120
    assert metrics["completion_tokens"] == 30
    assert metrics["total_tokens"] == 150


def test_non_numeric_usage_counts_as_zero(gateway, upstream):
    upstream.queue(completion("Hi", usage={"prompt_tokens": "n/a", "completion_tokens": 12, "total_tokens": True}))

    assert asyncio.run(gateway.complete(MESSAGES, max_tokens=800)) == "Hi"

    metrics = gateway.stage_logger.get_metrics()
    assert metrics["prompt_tokens"] == 0
    assert metrics["completion_tokens"] == 12
