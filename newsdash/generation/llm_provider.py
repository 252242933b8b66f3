"""LLM provider interface and implementations."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import anthropic
from openai import OpenAI
from rich.console import Console

console = Console()

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_ANTHROPIC_MODEL = "claude-sonnet-4-20250514"


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    name: str = "unknown"

    @abstractmethod
    def generate_text(self, prompt: str, max_tokens: int = 500) -> str:
        """
        Generate a completion for a single user prompt.

        Args:
            prompt: Full prompt text
            max_tokens: Upper bound on generated tokens

        Returns:
            Generated text, stripped
        """

    @abstractmethod
    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""


class OpenAIProvider(LLMProvider):
    """OpenAI implementation of LLM provider."""

    name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_OPENAI_MODEL,
        base_url: Optional[str] = None,
    ) -> None:
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Model name to use
            base_url: Custom base URL (for proxies or testing)
        """
        self.client = OpenAI(api_key=api_key, base_url=base_url)
        self.model = model
        self.total_tokens = 0
        self.api_calls = 0

    def generate_text(self, prompt: str, max_tokens: int = 500) -> str:
        """Generate text using the chat completions API."""
        self.api_calls += 1
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=0.4,
            max_tokens=max_tokens,
        )

        if response.usage:
            self.total_tokens += response.usage.total_tokens

        return (response.choices[0].message.content or "").strip()

    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        return {
            "total_tokens": self.total_tokens,
            "api_calls": self.api_calls,
            "model": self.model,
        }


class AnthropicProvider(LLMProvider):
    """Anthropic implementation of LLM provider."""

    name = "anthropic"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_ANTHROPIC_MODEL,
        base_url: Optional[str] = None,
    ) -> None:
        self.client = anthropic.Anthropic(api_key=api_key, base_url=base_url)
        self.model = model
        self.total_tokens = 0
        self.api_calls = 0

    def generate_text(self, prompt: str, max_tokens: int = 500) -> str:
        """Generate text using the messages API."""
        self.api_calls += 1
        response = self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            temperature=0.4,
            messages=[{"role": "user", "content": prompt}],
        )

        if response.usage:
            self.total_tokens += response.usage.input_tokens + response.usage.output_tokens

        return "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        ).strip()

    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        return {
            "total_tokens": self.total_tokens,
            "api_calls": self.api_calls,
            "model": self.model,
        }


class MockLLMProvider(LLMProvider):
    """Mock LLM provider for testing and offline use."""

    name = "mock"

    def __init__(self) -> None:
        """Initialize mock provider."""
        self.calls: List[str] = []

    def generate_text(self, prompt: str, max_tokens: int = 500) -> str:
        """Echo a canned draft."""
        self.calls.append(prompt)
        return "[Mock draft] Interesting read worth sharing with the team."

    def get_usage_stats(self) -> Dict:
        """Get mock usage statistics."""
        return {
            "total_tokens": len(self.calls) * 100,
            "api_calls": len(self.calls),
            "model": "mock",
        }


def get_llm_provider(llm_config: Dict[str, Any]) -> LLMProvider:
    """Build the configured provider, falling back to the mock without an API key."""
    provider = (llm_config.get("provider") or "openai").lower()
    api_key = llm_config.get("api_key")

    if provider not in ("openai", "anthropic"):
        console.print(f"[yellow]Warning: Unknown LLM provider '{provider}'. Using mock provider.[/yellow]")
        return MockLLMProvider()

    if not api_key:
        console.print(f"[yellow]Warning: No {provider} API key found. Using mock LLM provider.[/yellow]")
        return MockLLMProvider()

    if provider == "anthropic":
        return AnthropicProvider(
            api_key=api_key,
            model=llm_config.get("model") or DEFAULT_ANTHROPIC_MODEL,
            base_url=llm_config.get("base_url"),
        )

    return OpenAIProvider(
        api_key=api_key,
        model=llm_config.get("model") or DEFAULT_OPENAI_MODEL,
        base_url=llm_config.get("base_url"),
    )
