"""Tests for the LLM client with mocked API responses."""

from unittest.mock import MagicMock, patch

import anthropic
import httpx
import pytest

from code_documenter.generators.llm_client import (
    GenerationResult,
    LLMClient,
    LLMClientError,
    TokenUsage,
)
from code_documenter.utils.config import APIConfig


@pytest.fixture
def config() -> APIConfig:
    """Create a test API config."""
    return APIConfig(
        model="claude-sonnet-4-20250514",
        max_tokens=1024,
        temperature=0.1,
    )


@pytest.fixture
def client(config: APIConfig) -> LLMClient:
    """Create an LLMClient with a test config and mock API key."""
    with patch.dict("os.environ", {"ANTHROPIC_API_KEY": "test-key-123"}):
        return LLMClient(config=config)


def _mock_response(
    text: str = "Generated docs.",
    input_tokens: int = 50,
    output_tokens: int = 100,
) -> MagicMock:
    """Create a mock Anthropic API response."""
    response = MagicMock()
    content_block = MagicMock()
    content_block.text = text
    response.content = [content_block]
    response.usage.input_tokens = input_tokens
    response.usage.output_tokens = output_tokens
    response.model = "claude-sonnet-4-20250514"
    response.stop_reason = "end_turn"
    return response


def _status_error(cls: type, status: int, message: str) -> Exception:
    response = MagicMock()
    response.status_code = status
    response.headers = {}
    return cls(
        message=message,
        response=response,
        body={"error": {"message": message}},
    )


class TestTokenUsage:
    """Tests for TokenUsage dataclass."""

    def test_total_tokens(self) -> None:
        usage = TokenUsage(input_tokens=100, output_tokens=50)
        assert usage.total_tokens == 150

    def test_defaults(self) -> None:
        usage = TokenUsage()
        assert usage.total_tokens == 0


class TestLLMClientInit:
    """Tests for LLMClient initialization."""

    def test_default_config(self) -> None:
        with patch.dict("os.environ", {"ANTHROPIC_API_KEY": "test"}):
            client = LLMClient()
        assert client.model == "claude-sonnet-4-20250514"

    def test_model_override(self, config: APIConfig) -> None:
        with patch.dict("os.environ", {"ANTHROPIC_API_KEY": "test"}):
            client = LLMClient(config=config, model="claude-haiku-4-5-20251001")
        assert client.model == "claude-haiku-4-5-20251001"

    def test_missing_api_key_lazy(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            client = LLMClient()
        with pytest.raises(LLMClientError, match="ANTHROPIC_API_KEY"):
            _ = client.client

    def test_missing_api_key_fails_generate(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            client = LLMClient()
        with pytest.raises(LLMClientError):
            client.generate("test")


class TestGenerate:
    """Tests for the generate method with mocked API."""

    def test_basic_generation(self, client: LLMClient) -> None:
        with patch.object(client, "_client") as mock_client:
            mock_client.messages.create.return_value = _mock_response()
            result = client.generate("Document this file.")

        assert isinstance(result, GenerationResult)
        assert result.content == "Generated docs."
        assert result.usage.input_tokens == 50
        assert result.usage.output_tokens == 100

    def test_prompt_sent_as_user_message(self, client: LLMClient) -> None:
        with patch.object(client, "_client") as mock_client:
            mock_client.messages.create.return_value = _mock_response()
            client.generate("Document this file.")

        call_kwargs = mock_client.messages.create.call_args[1]
        assert call_kwargs["messages"] == [
            {"role": "user", "content": "Document this file."}
        ]
        assert call_kwargs["model"] == "claude-sonnet-4-20250514"
        assert call_kwargs["max_tokens"] == 1024
        assert call_kwargs["temperature"] == 0.1
        assert "system" not in call_kwargs

    def test_generation_with_system(self, client: LLMClient) -> None:
        with patch.object(client, "_client") as mock_client:
            mock_client.messages.create.return_value = _mock_response()
            client.generate("Write docs.", system="You are a technical writer.")

        call_kwargs = mock_client.messages.create.call_args[1]
        assert call_kwargs["system"] == "You are a technical writer."

    def test_empty_content(self, client: LLMClient) -> None:
        response = _mock_response()
        response.content = []
        with patch.object(client, "_client") as mock_client:
            mock_client.messages.create.return_value = response
            result = client.generate("test")
        assert result.content == ""

    def test_cumulative_usage(self, client: LLMClient) -> None:
        with patch.object(client, "_client") as mock_client:
            mock_client.messages.create.return_value = _mock_response(
                input_tokens=10, output_tokens=20
            )
            client.generate("First call")
            client.generate("Second call")

        assert client.total_usage.input_tokens == 20
        assert client.total_usage.output_tokens == 40


class TestErrors:
    """Every API failure surfaces once as an LLMClientError."""

    def test_rate_limit_not_retried(self, client: LLMClient) -> None:
        error = _status_error(anthropic.RateLimitError, 429, "Rate limited")
        with patch.object(client, "_client") as mock_client:
            mock_client.messages.create.side_effect = error
            with pytest.raises(LLMClientError, match="429") as exc_info:
                client.generate("test")

        assert mock_client.messages.create.call_count == 1
        assert exc_info.value.__cause__ is error

    def test_server_error_not_retried(self, client: LLMClient) -> None:
        error = _status_error(anthropic.InternalServerError, 500, "Overloaded")
        with patch.object(client, "_client") as mock_client:
            mock_client.messages.create.side_effect = error
            with pytest.raises(LLMClientError, match="500"):
                client.generate("test")

        assert mock_client.messages.create.call_count == 1

    def test_connection_error(self, client: LLMClient) -> None:
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        error = anthropic.APIConnectionError(request=request)
        with patch.object(client, "_client") as mock_client:
            mock_client.messages.create.side_effect = error
            with pytest.raises(LLMClientError, match="request failed"):
                client.generate("test")
