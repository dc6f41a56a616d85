from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from openai import APIConnectionError

from app.ai.gateway import AIGateway, AIGatewayError, first_text


def _mock_client(content="Bonjour", choices=True):
    mock_message = MagicMock()
    mock_message.content = content

    mock_choice = MagicMock()
    mock_choice.message = mock_message
    mock_choice.finish_reason = "stop"

    mock_response = MagicMock()
    mock_response.id = "chatcmpl-1"
    mock_response.model = "claude-test"
    mock_response.choices = [mock_choice] if choices else []
    mock_response.usage.prompt_tokens = 12
    mock_response.usage.completion_tokens = 3

    mock_completions = MagicMock()
    mock_completions.create = AsyncMock(return_value=mock_response)

    mock_chat = MagicMock()
    mock_chat.completions = mock_completions

    mock_client_instance = AsyncMock()
    mock_client_instance.chat = mock_chat
    return mock_client_instance


@pytest.mark.asyncio
async def test_gateway_returns_messages_envelope():
    mock_client_instance = _mock_client('{"hero": {"title": "CRM Pro"}}')

    with patch("app.ai.gateway.AsyncOpenAI", return_value=mock_client_instance) as mock_cls:
        with patch("app.ai.gateway.settings.LLM_API_KEY", "dummy_key"):
            gateway = AIGateway(model_name="claude-test")
            result = await gateway.generate("Rédige une landing page")

    assert result["content"] == [{"type": "text", "text": '{"hero": {"title": "CRM Pro"}}'}]
    assert result["role"] == "assistant"
    assert result["usage"] == {"input_tokens": 12, "output_tokens": 3}
    assert first_text(result) == '{"hero": {"title": "CRM Pro"}}'

    assert mock_cls.call_args.kwargs["max_retries"] == 0
    assert "timeout" not in mock_cls.call_args.kwargs
    create_kwargs = mock_client_instance.chat.completions.create.call_args.kwargs
    assert create_kwargs["messages"] == [{"role": "user", "content": "Rédige une landing page"}]
    assert create_kwargs["model"] == "claude-test"
    mock_client_instance.chat.completions.create.assert_called_once()


@pytest.mark.asyncio
async def test_gateway_network_failure_is_not_retried():
    mock_client_instance = _mock_client()
    mock_client_instance.chat.completions.create = AsyncMock(
        side_effect=APIConnectionError(request=httpx.Request("POST", "https://api.example/v1"))
    )
    gateway = AIGateway(api_key="dummy_key", client=mock_client_instance)

    with pytest.raises(AIGatewayError):
        await gateway.generate("prompt")
    mock_client_instance.chat.completions.create.assert_called_once()


@pytest.mark.asyncio
async def test_gateway_empty_choices():
    gateway = AIGateway(api_key="dummy_key", client=_mock_client(choices=False))
    with pytest.raises(AIGatewayError):
        await gateway.generate("prompt")


@pytest.mark.asyncio
async def test_gateway_malformed_message():
    gateway = AIGateway(api_key="dummy_key", client=_mock_client(content=None))
    with pytest.raises(AIGatewayError):
        await gateway.generate("prompt")


@pytest.mark.asyncio
async def test_gateway_without_api_key():
    with patch("app.ai.gateway.settings.LLM_API_KEY", ""):
        gateway = AIGateway()
        with pytest.raises(AIGatewayError):
            await gateway.generate("prompt")


def test_first_text_handles_missing_content():
    assert first_text(None) == ""
    assert first_text({"content": []}) == ""
    assert first_text({"content": [{"type": "text", "text": "ok"}]}) == "ok"
