import logging
from typing import Any

from openai import APIError, AsyncOpenAI

from app.core.config import settings

logger = logging.getLogger(__name__)


class AIGatewayError(Exception):
    """Raised for any provider failure: network, non-2xx, or unusable body."""


def first_text(response: dict[str, Any] | None) -> str:
    """Return ``content[0].text`` of a gateway response, or an empty string."""
    content = (response or {}).get("content") or []
    if not content or not isinstance(content[0], dict):
        return ""
    return content[0].get("text") or ""


class AIGateway:
    """
    Pass-through client to Claude.

    The prompt is sent unmodified as a single user message. The reply is
    returned in the Messages envelope (``content[0].text``) so callers can
    read it without knowing which SDK carried the request. No retries are
    attempted unless LLM_MAX_RETRIES says so.
    """

    def __init__(
        self,
        model_name: str | None = None,
        base_url: str | None = None,
        api_key: str | None = None,
        client: AsyncOpenAI | None = None,
    ):
        self.model_name = model_name or settings.MODEL_DEFAULT
        self.api_key = api_key or settings.LLM_API_KEY
        self.base_url = base_url or settings.LLM_BASE_URL
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise AIGatewayError("LLM_API_KEY is not configured")
            kwargs: dict[str, Any] = {"max_retries": settings.LLM_MAX_RETRIES}
            # Without an explicit bound the SDK default timeout applies
            if settings.LLM_TIMEOUT_SECONDS is not None:
                kwargs["timeout"] = settings.LLM_TIMEOUT_SECONDS
            self._client = AsyncOpenAI(
                base_url=self.base_url,
                api_key=self.api_key,
                **kwargs,
            )
        return self._client

    async def generate(self, prompt: str) -> dict[str, Any]:
        logger.info("Forwarding prompt (%s chars) to model %s", len(prompt), self.model_name)
        try:
            response = await self.client.chat.completions.create(
                model=self.model_name,
                max_tokens=settings.LLM_MAX_TOKENS,
                messages=[{"role": "user", "content": prompt}],
            )
        except APIError as e:
            logger.error("Provider call to %s failed: %s", self.model_name, e)
            raise AIGatewayError(str(e)) from e

        if not getattr(response, "choices", None):
            logger.error("Received 0 choices from %s: %s", self.model_name, response)
            raise AIGatewayError(f"Provider {self.model_name} returned no output")

        choice = response.choices[0]
        message = getattr(choice, "message", None)
        text = getattr(message, "content", None)
        if not isinstance(text, str):
            logger.error("Malformed message from %s: %s", self.model_name, response)
            raise AIGatewayError(f"Provider {self.model_name} returned a malformed message")

        usage = getattr(response, "usage", None)
        logger.info("Received %s chars from %s", len(text), self.model_name)
        return {
            "id": getattr(response, "id", None),
            "type": "message",
            "role": "assistant",
            "model": getattr(response, "model", None) or self.model_name,
            "content": [{"type": "text", "text": text}],
            "stop_reason": getattr(choice, "finish_reason", None),
            "usage": {
                "input_tokens": getattr(usage, "prompt_tokens", None),
                "output_tokens": getattr(usage, "completion_tokens", None),
            },
        }


def get_ai_gateway() -> AIGateway:
    return AIGateway()
