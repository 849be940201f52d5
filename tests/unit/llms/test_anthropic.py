# tests/unit/llms/test_anthropic.py

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from reader_kit.llms.anthropic import AnthropicLLMClient
from reader_kit.llms.base import Message, Role


@pytest.fixture
def mock_anthropic_response() -> MagicMock:
    """Create a mock Anthropic response."""
    response = MagicMock()

    text_block = MagicMock()
    text_block.type = "text"
    text_block.text = "A short summary."

    response.content = [text_block]
    response.stop_reason = "end_turn"
    response.usage.input_tokens = 10
    response.usage.output_tokens = 8
    return response


class TestAnthropicLLMClient:
    @pytest.mark.asyncio
    async def test_complete_basic(self, mock_anthropic_response: MagicMock) -> None:
        """Test basic completion."""
        with patch("reader_kit.llms.anthropic.AsyncAnthropic") as mock_anthropic:
            mock_client = AsyncMock()
            mock_client.messages.create.return_value = mock_anthropic_response
            mock_anthropic.return_value = mock_client

            client = AnthropicLLMClient(api_key="test-key")
            response = await client.complete(
                messages=[Message(role=Role.USER, content="Summarize this")]
            )

            assert response.content == "A short summary."
            assert response.finish_reason == "stop"
            assert response.usage.total_tokens == 18
            assert response.latency_ms >= 0

    @pytest.mark.asyncio
    async def test_text_blocks_joined(self, mock_anthropic_response: MagicMock) -> None:
        """Test that multiple text blocks form one content string."""
        second = MagicMock()
        second.type = "text"
        second.text = " And more."
        mock_anthropic_response.content.append(second)

        with patch("reader_kit.llms.anthropic.AsyncAnthropic") as mock_anthropic:
            mock_client = AsyncMock()
            mock_client.messages.create.return_value = mock_anthropic_response
            mock_anthropic.return_value = mock_client

            client = AnthropicLLMClient(api_key="test-key")
            response = await client.complete(
                messages=[Message(role=Role.USER, content="Summarize this")]
            )

            assert response.content == "A short summary. And more."

    @pytest.mark.asyncio
    async def test_system_passed_separately(
        self, mock_anthropic_response: MagicMock
    ) -> None:
        """Test that the system message is sent as its own parameter."""
        with patch("reader_kit.llms.anthropic.AsyncAnthropic") as mock_anthropic:
            mock_client = AsyncMock()
            mock_client.messages.create.return_value = mock_anthropic_response
            mock_anthropic.return_value = mock_client

            client = AnthropicLLMClient(api_key="test-key")
            await client.complete(
                messages=[
                    Message(role=Role.SYSTEM, content="You are helpful."),
                    Message(role=Role.USER, content="Hello"),
                ]
            )

            kwargs = mock_client.messages.create.call_args.kwargs
            assert kwargs["system"] == "You are helpful."
            assert kwargs["messages"] == [{"role": "user", "content": "Hello"}]
            assert kwargs["max_tokens"] == 4096

    def test_system_message_extraction(self) -> None:
        """Test that system messages are extracted correctly."""
        with patch("reader_kit.llms.anthropic.AsyncAnthropic"):
            client = AnthropicLLMClient(api_key="test-key")

            messages = [
                Message(role=Role.SYSTEM, content="You are helpful."),
                Message(role=Role.USER, content="Hello"),
            ]

            system, non_system = client._extract_system(messages)

            assert system == "You are helpful."
            assert len(non_system) == 1
            assert non_system[0].role == Role.USER

    @pytest.mark.asyncio
    async def test_metrics_hook_called(
        self, mock_anthropic_response: MagicMock
    ) -> None:
        """Test that metrics hook is called."""
        with patch("reader_kit.llms.anthropic.AsyncAnthropic") as mock_anthropic:
            mock_client = AsyncMock()
            mock_client.messages.create.return_value = mock_anthropic_response
            mock_anthropic.return_value = mock_client

            metrics_hook = MagicMock()
            client = AnthropicLLMClient(api_key="test-key", metrics_hook=metrics_hook)

            await client.complete(messages=[Message(role=Role.USER, content="Hi")])

            metrics_hook.record_latency.assert_called_once()
            call_args = metrics_hook.record_latency.call_args
            assert call_args[0][0] == "llm_completion_duration"

    @pytest.mark.asyncio
    async def test_max_tokens_finish_reason(self) -> None:
        """Test that max_tokens stop reason is mapped correctly."""
        with patch("reader_kit.llms.anthropic.AsyncAnthropic") as mock_anthropic:
            response = MagicMock()
            text_block = MagicMock()
            text_block.type = "text"
            text_block.text = "Truncated..."
            response.content = [text_block]
            response.stop_reason = "max_tokens"
            response.usage.input_tokens = 10
            response.usage.output_tokens = 100

            mock_client = AsyncMock()
            mock_client.messages.create.return_value = response
            mock_anthropic.return_value = mock_client

            client = AnthropicLLMClient(api_key="test-key")
            result = await client.complete(
                messages=[Message(role=Role.USER, content="test")]
            )

            assert result.finish_reason == "length"
