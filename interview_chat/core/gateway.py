import logging
import time
from typing import Any, Dict, List

import httpx

from interview_chat.config.settings import settings
from interview_chat.system.exceptions import (
    ConfigurationError,
    EmptyResponse,
    UpstreamError,
    UpstreamQuotaExceeded,
    UpstreamRateLimited,
)
from interview_chat.utils.logger import InterviewChatLogger

logger = logging.getLogger(__name__)


def _token_count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


class AIGatewayClient:
    """Client for the OpenAI-compatible chat completion gateway"""

    def __init__(
        self,
        api_key: str | None = None,
        url: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        stage_logger: InterviewChatLogger | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.AI_GATEWAY_API_KEY
        self.url = url or settings.AI_GATEWAY_URL
        self.model = model or settings.AI_MODEL
        self.temperature = settings.AI_TEMPERATURE if temperature is None else temperature
        self.stage_logger = stage_logger or InterviewChatLogger()
        self.client = httpx.AsyncClient(
            timeout=settings.AI_TIMEOUT if timeout is None else timeout,
            transport=transport,
        )

    async def complete(self, messages: List[Dict[str, str]], max_tokens: int) -> str:
        if not self.api_key:
            raise ConfigurationError()

        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": max_tokens,
        }
        start_time = time.time()
        try:
            response = await self.client.post(
                self.url,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
        except httpx.HTTPError as e:
            logger.error(f"AI Gateway request failed: {e!r}")
            raise UpstreamError(detail=f"AI Gateway error: {e.__class__.__name__}") from e

        latency = (time.time() - start_time) * 1000
        self.stage_logger.log_latency(latency)

        if response.status_code == 429:
            raise UpstreamRateLimited()
        if response.status_code == 402:
            raise UpstreamQuotaExceeded()
        if not response.is_success:
            logger.error(f"AI Gateway error: {response.status_code} {response.text[:500]}")
            raise UpstreamError(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(response.status_code, "AI Gateway returned a non-JSON body") from e
        if not isinstance(data, dict):
            raise EmptyResponse()

        self._record_usage(data.get("usage"))
        content = self._extract_content(data)
        if not content:
            raise EmptyResponse()
        return content

    @staticmethod
    def _extract_content(data: Dict[str, Any]) -> str | None:
        choices = data.get("choices")
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            return None
        message = choices[0].get("message")
        if not isinstance(message, dict):
            return None
        content = message.get("content")
        return content if isinstance(content, str) else None

    def _record_usage(self, usage: Dict[str, Any] | None):
        if not isinstance(usage, dict):
            return
        self.stage_logger.log_tokens(
            _token_count(usage.get("prompt_tokens")),
            _token_count(usage.get("completion_tokens")),
        )

    async def aclose(self):
        await self.client.aclose()
