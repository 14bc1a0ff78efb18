"""OpenAI chat completions backend for claim insights."""

import logging
import time
from typing import Any

from openai import AsyncOpenAI

from claimdesk.providers.base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


# USD per 1M tokens; unknown models are billed at the gpt-4o rate
OPENAI_PRICING = {
    "gpt-4o": {"input": 2.50, "output": 10.00},
    "gpt-4o-mini": {"input": 0.15, "output": 0.60},
    "gpt-4-turbo": {"input": 10.00, "output": 30.00},
    "default": {"input": 2.50, "output": 10.00},
}


class OpenAIProvider(LLMProvider):
    """Chat completions through ``AsyncOpenAI``, in JSON mode when a schema is given."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        timeout: float = 60.0,
    ):
        if not api_key:
            raise ValueError("OpenAI API key is required")

        # The SDK timeout backs up the generator's own deadline
        self.client = AsyncOpenAI(api_key=api_key, timeout=timeout)
        self._model = model
        logger.info(f"OpenAI provider ready: model={model}, timeout={timeout}s")

    @property
    def provider_name(self) -> str:
        return "openai"

    @property
    def model_name(self) -> str:
        return self._model

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = 2000,
        temperature: float = 0.3,
        json_schema: dict[str, Any] | None = None,
    ) -> LLMResponse:
        """Run one chat completion.

        Raises:
            openai.OpenAIError: On transport, authentication or API errors
        """
        start_time = time.time()

        request_params: dict[str, Any] = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        if json_schema is not None:
            request_params["response_format"] = {"type": "json_object"}

        response = await self.client.chat.completions.create(**request_params)
        duration_ms = (time.time() - start_time) * 1000

        content = response.choices[0].message.content or ""

        usage = response.usage
        prompt_tokens = usage.prompt_tokens if usage else 0
        completion_tokens = usage.completion_tokens if usage else 0
        total_tokens = usage.total_tokens if usage else 0

        return LLMResponse(
            content=content,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=total_tokens,
            finish_reason=response.choices[0].finish_reason or "unknown",
            model=response.model,
            duration_ms=duration_ms,
            raw_response=response,
        )

    def calculate_cost(self, prompt_tokens: int, completion_tokens: int) -> float:
        pricing = OPENAI_PRICING.get(self._model, OPENAI_PRICING["default"])

        input_cost = prompt_tokens * (pricing["input"] / 1_000_000)
        output_cost = completion_tokens * (pricing["output"] / 1_000_000)

        return input_cost + output_cost
