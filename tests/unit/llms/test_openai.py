# tests/unit/llms/test_openai.py

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from openai import APIConnectionError, BadRequestError

from transcript_kit.llms.base import Message, Role
from transcript_kit.llms.openai import OpenAILLMClient
from transcript_kit.observability import names
from transcript_kit.observability.base import InMemoryMetricsHook

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


@pytest.fixture
def mock_openai_response() -> MagicMock:
    """Create a mock OpenAI chat completion."""
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = "## EXECUTIVE SUMMARY\nShort call."
    response.choices[0].finish_reason = "stop"
    response.usage.prompt_tokens = 10
    response.usage.completion_tokens = 8
    response.usage.total_tokens = 18
    return response


def _client_with(create: AsyncMock, **kwargs) -> OpenAILLMClient:
    with patch("transcript_kit.llms.openai.AsyncOpenAI") as mock_openai:
        mock_sdk = MagicMock()
        mock_sdk.chat.completions.create = create
        mock_openai.return_value = mock_sdk
        return OpenAILLMClient(api_key="test-key", **kwargs)


class TestOpenAILLMClient:
    @pytest.mark.asyncio
    async def test_complete_basic(self, mock_openai_response: MagicMock) -> None:
        create = AsyncMock(return_value=mock_openai_response)
        client = _client_with(create, model="gpt-4o")

        response = await client.complete(messages=[Message.user("Summarize this")])

        assert response.content == "## EXECUTIVE SUMMARY\nShort call."
        assert response.finish_reason == "stop"
        assert response.usage.total_tokens == 18
        assert response.latency_ms >= 0
        create.assert_awaited_once()
        assert create.call_args.kwargs["model"] == "gpt-4o"

    @pytest.mark.asyncio
    async def test_length_finish_reason(self, mock_openai_response: MagicMock) -> None:
        mock_openai_response.choices[0].finish_reason = "length"
        client = _client_with(AsyncMock(return_value=mock_openai_response))

        response = await client.complete(messages=[Message.user("Hi")])

        assert response.finish_reason == "length"

    @pytest.mark.asyncio
    async def test_missing_content_gives_empty_text(
        self, mock_openai_response: MagicMock
    ) -> None:
        mock_openai_response.choices[0].message.content = None
        client = _client_with(AsyncMock(return_value=mock_openai_response))

        response = await client.complete(messages=[Message.user("Hi")])

        assert response.content is None
        assert response.text == ""

    @pytest.mark.asyncio
    async def test_retries_transient_errors(self, mock_openai_response: MagicMock) -> None:
        create = AsyncMock(
            side_effect=[APIConnectionError(request=_REQUEST), mock_openai_response]
        )
        client = _client_with(create, max_retries=3)

        response = await client.complete(messages=[Message.user("Hi")])

        assert response.finish_reason == "stop"
        assert create.await_count == 2

    @pytest.mark.asyncio
    async def test_does_not_retry_bad_requests(self) -> None:
        error = BadRequestError(
            "bad request",
            response=httpx.Response(400, request=_REQUEST),
            body=None,
        )
        create = AsyncMock(side_effect=error)
        hook = InMemoryMetricsHook()
        client = _client_with(create, metrics_hook=hook)

        with pytest.raises(BadRequestError):
            await client.complete(messages=[Message.user("Hi")])

        assert create.await_count == 1
        assert hook.counters[names.LLM_ERRORS_TOTAL] == 1

    @pytest.mark.asyncio
    async def test_records_token_metrics(self, mock_openai_response: MagicMock) -> None:
        hook = InMemoryMetricsHook()
        client = _client_with(AsyncMock(return_value=mock_openai_response), metrics_hook=hook)

        await client.complete(messages=[Message.user("Hi")])

        assert hook.counters[names.LLM_REQUESTS_TOTAL] == 1
        assert hook.counters[names.LLM_TOKENS_TOTAL] == 18
        assert len(hook.latencies[names.LLM_COMPLETION_DURATION]) == 1

    def test_message_conversion(self) -> None:
        client = _client_with(AsyncMock())

        converted = client._convert_messages(
            [
                Message(role=Role.SYSTEM, content="You summarize."),
                Message(role=Role.USER, content="Hello"),
                Message(role=Role.ASSISTANT, content="Hi there!"),
            ]
        )

        assert converted == [
            {"role": "system", "content": "You summarize."},
            {"role": "user", "content": "Hello"},
            {"role": "assistant", "content": "Hi there!"},
        ]
