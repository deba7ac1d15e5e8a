# tests/unit/llms/test_anthropic.py

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from anthropic import APIConnectionError

from transcript_kit.llms.anthropic import DEFAULT_MAX_TOKENS, AnthropicLLMClient
from transcript_kit.llms.base import Message

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _text_block(text: str) -> MagicMock:
    block = MagicMock()
    block.type = "text"
    block.text = text
    return block


@pytest.fixture
def mock_anthropic_response() -> MagicMock:
    """Create a mock Anthropic message."""
    response = MagicMock()
    response.content = [_text_block("## KEY TAKEAWAYS\n- a")]
    response.stop_reason = "end_turn"
    response.usage.input_tokens = 10
    response.usage.output_tokens = 8
    return response


def _client_with(create: AsyncMock, **kwargs) -> AnthropicLLMClient:
    with patch("transcript_kit.llms.anthropic.AsyncAnthropic") as mock_anthropic:
        mock_sdk = MagicMock()
        mock_sdk.messages.create = create
        mock_anthropic.return_value = mock_sdk
        return AnthropicLLMClient(api_key="test-key", **kwargs)


class TestAnthropicLLMClient:
    @pytest.mark.asyncio
    async def test_complete_basic(self, mock_anthropic_response: MagicMock) -> None:
        client = _client_with(AsyncMock(return_value=mock_anthropic_response))

        response = await client.complete(messages=[Message.user("Hello!")])

        assert response.content == "## KEY TAKEAWAYS\n- a"
        assert response.finish_reason == "stop"
        assert response.usage.prompt_tokens == 10
        assert response.usage.completion_tokens == 8
        assert response.usage.total_tokens == 18

    @pytest.mark.asyncio
    async def test_system_messages_are_passed_separately(
        self, mock_anthropic_response: MagicMock
    ) -> None:
        create = AsyncMock(return_value=mock_anthropic_response)
        client = _client_with(create)

        await client.complete(
            messages=[
                Message.system("Be concise."),
                Message.system("Use markdown."),
                Message.user("Summarize."),
            ]
        )

        kwargs = create.call_args.kwargs
        assert kwargs["system"] == "Be concise.\n\nUse markdown."
        assert kwargs["messages"] == [{"role": "user", "content": "Summarize."}]
        assert kwargs["max_tokens"] == DEFAULT_MAX_TOKENS

    @pytest.mark.asyncio
    async def test_text_blocks_are_concatenated(
        self, mock_anthropic_response: MagicMock
    ) -> None:
        mock_anthropic_response.content = [_text_block("Part one, "), _text_block("part two.")]
        client = _client_with(AsyncMock(return_value=mock_anthropic_response))

        response = await client.complete(messages=[Message.user("Hi")])

        assert response.content == "Part one, part two."

    @pytest.mark.asyncio
    async def test_max_tokens_stop_reason(self, mock_anthropic_response: MagicMock) -> None:
        mock_anthropic_response.stop_reason = "max_tokens"
        client = _client_with(AsyncMock(return_value=mock_anthropic_response))

        response = await client.complete(messages=[Message.user("Hi")], max_tokens=100)

        assert response.finish_reason == "length"

    @pytest.mark.asyncio
    async def test_gives_up_after_max_retries(self) -> None:
        create = AsyncMock(side_effect=APIConnectionError(request=_REQUEST))
        client = _client_with(create, max_retries=2)

        with pytest.raises(APIConnectionError):
            await client.complete(messages=[Message.user("Hi")])

        assert create.await_count == 2
