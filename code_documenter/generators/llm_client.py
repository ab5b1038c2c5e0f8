"""Claude API client used to generate file documentation.

Wraps the Anthropic SDK behind a single ``generate`` call. Each call is
one request: there is no retry, and every failure is surfaced to the
caller as an LLMClientError.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Protocol

import anthropic

from code_documenter.utils.config import APIConfig

logger = logging.getLogger(__name__)


class LLMClientError(RuntimeError):
    """Raised when a generation request cannot be completed."""


@dataclass
class TokenUsage:
    """Token usage statistics for a single API call.

    Attributes:
        input_tokens: Number of tokens in the prompt.
        output_tokens: Number of tokens in the response.
    """

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        """Total tokens consumed."""
        return self.input_tokens + self.output_tokens


@dataclass
class GenerationResult:
    """Result of an LLM generation call.

    Attributes:
        content: The generated text content.
        usage: Token usage statistics.
        model: Model that produced the result.
        stop_reason: Reason the generation stopped.
    """

    content: str
    usage: TokenUsage
    model: str
    stop_reason: Optional[str] = None


class TextGenerator(Protocol):
    """Anything that turns a prompt into a GenerationResult."""

    def generate(self, prompt: str) -> GenerationResult: ...


class LLMClient:
    """Client for the Anthropic Claude API.

    Sends one request per prompt and tracks cumulative token usage.
    """

    def __init__(
        self, config: Optional[APIConfig] = None, model: Optional[str] = None
    ) -> None:
        """Initialize the LLM client.

        Args:
            config: API configuration. Uses defaults if not provided.
            model: Model name overriding the configured one.
        """
        self.config = config or APIConfig()
        self.model = model or self.config.model
        self._api_key = os.getenv("ANTHROPIC_API_KEY", "")
        self._client: Optional[anthropic.Anthropic] = None
        self._total_usage = TokenUsage()

    @property
    def client(self) -> anthropic.Anthropic:
        """Lazily initialize the Anthropic client.

        Raises:
            LLMClientError: If ANTHROPIC_API_KEY is not set.
        """
        if self._client is None:
            if not self._api_key:
                raise LLMClientError(
                    "ANTHROPIC_API_KEY environment variable is not set. "
                    "Set it before making API calls."
                )
            kwargs: dict = {"api_key": self._api_key}
            if self.config.timeout is not None:
                kwargs["timeout"] = self.config.timeout
            self._client = anthropic.Anthropic(**kwargs)
        return self._client

    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> GenerationResult:
        """Generate text using the Claude API.

        Args:
            prompt: The user message prompt.
            system: Optional system prompt for context.
            max_tokens: Maximum tokens to generate. Uses config default.
            temperature: Sampling temperature. Uses config default.

        Returns:
            A GenerationResult with the generated content and usage.

        Raises:
            LLMClientError: If the API key is missing or the request fails.
        """
        kwargs: dict = {
            "model": self.model,
            "max_tokens": max_tokens or self.config.max_tokens,
            "temperature": temperature
            if temperature is not None
            else self.config.temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system

        try:
            response = self.client.messages.create(**kwargs)
        except anthropic.APIStatusError as e:
            raise LLMClientError(
                f"Claude API returned status {e.status_code}: {e.message}"
            ) from e
        except anthropic.APIError as e:
            raise LLMClientError(f"Claude API request failed: {e}") from e

        content = ""
        if response.content:
            content = response.content[0].text

        usage = TokenUsage(
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )
        self._total_usage.input_tokens += usage.input_tokens
        self._total_usage.output_tokens += usage.output_tokens

        logger.info(
            "Generated %d tokens (input: %d, output: %d)",
            usage.total_tokens,
            usage.input_tokens,
            usage.output_tokens,
        )

        return GenerationResult(
            content=content,
            usage=usage,
            model=response.model,
            stop_reason=response.stop_reason,
        )

    @property
    def total_usage(self) -> TokenUsage:
        """Cumulative token usage across all calls."""
        return self._total_usage
