"""Provider interface shared by the hosted LLM backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class LLMResponse:
    """One completion plus the usage figures recorded in the LLM call log."""

    content: str  # a single JSON object when JSON output was requested
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    finish_reason: str
    model: str  # model reported by the API, may differ from the requested one
    duration_ms: float
    raw_response: Any = None


class LLMProvider(ABC):
    """A hosted model the insights generator can ask for JSON answers.

    Provider errors propagate; the generator turns them into fallbacks.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Short identifier written to the call log ('openai', 'anthropic')."""
        ...

    @property
    @abstractmethod
    def model_name(self) -> str:
        ...

    @abstractmethod
    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = 2000,
        temperature: float = 0.3,
        json_schema: dict[str, Any] | None = None,
    ) -> LLMResponse:
        """Send one system/user exchange and return the reply.

        When ``json_schema`` is given the reply content must be a single JSON
        object; how that is enforced is up to the provider.
        """
        ...

    @abstractmethod
    def calculate_cost(self, prompt_tokens: int, completion_tokens: int) -> float:
        """Estimated USD cost of a call, for the call log."""
        ...
