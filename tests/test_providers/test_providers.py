"""Tests for LLM provider implementations."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock, patch

import pytest

from claimdesk.config import Settings
from claimdesk.providers import (
    LLMResponse,
    create_provider,
    get_available_providers,
    provider_from_settings,
)
from claimdesk.providers.anthropic_provider import (
    ANTHROPIC_PRICING,
    JSON_INSTRUCTION,
    AnthropicProvider,
)
from claimdesk.providers.openai_provider import OPENAI_PRICING, OpenAIProvider


def _openai_completion(content: str, finish_reason: str = "stop"):
    return SimpleNamespace(
        choices=[
            SimpleNamespace(
                message=SimpleNamespace(content=content),
                finish_reason=finish_reason,
            )
        ],
        usage=SimpleNamespace(prompt_tokens=120, completion_tokens=80, total_tokens=200),
        model="gpt-4o-2024-08-06",
    )


def _anthropic_message(text: str):
    return SimpleNamespace(
        content=[SimpleNamespace(type="text", text=text)],
        usage=SimpleNamespace(input_tokens=90, output_tokens=30),
        stop_reason="end_turn",
        model="claude-3-5-sonnet-20241022",
    )


class TestLLMResponse:
    """Tests for LLMResponse dataclass."""

    def test_create_response(self):
        """Test creating an LLMResponse."""
        response = LLMResponse(
            content='{"insights": []}',
            prompt_tokens=100,
            completion_tokens=50,
            total_tokens=150,
            finish_reason="stop",
            model="gpt-4o",
            duration_ms=1234.5,
        )

        assert response.content == '{"insights": []}'
        assert response.total_tokens == 150
        assert response.raw_response is None


class TestProviderFactory:
    """Tests for provider factory functions."""

    def test_get_available_providers(self):
        """Test listing available providers."""
        assert get_available_providers() == ["openai", "anthropic"]

    @patch("claimdesk.providers.openai_provider.AsyncOpenAI")
    def test_create_openai_provider(self, mock_openai_class: Mock):
        """Test creating OpenAI provider."""
        provider = create_provider(
            provider_type="openai", api_key="sk-test-key", model="gpt-4o-mini"
        )

        assert isinstance(provider, OpenAIProvider)
        assert provider.provider_name == "openai"
        assert provider.model_name == "gpt-4o-mini"
        mock_openai_class.assert_called_once_with(api_key="sk-test-key", timeout=60.0)

    @patch("claimdesk.providers.anthropic_provider.AsyncAnthropic")
    def test_create_anthropic_provider(self, mock_anthropic_class: Mock):
        """Test creating Anthropic provider with default model."""
        provider = create_provider(provider_type="anthropic", api_key="sk-ant-test")

        assert isinstance(provider, AnthropicProvider)
        assert provider.model_name == "claude-3-5-sonnet-20241022"

    @patch("claimdesk.providers.openai_provider.AsyncOpenAI")
    def test_create_provider_default_model(self, mock_openai_class: Mock):
        """Test provider creation with default model."""
        provider = create_provider(provider_type="openai", api_key="sk-test-key")

        assert provider.model_name == "gpt-4o"

    def test_create_provider_invalid_type(self):
        """Test error on invalid provider type."""
        with pytest.raises(ValueError, match="Unknown provider type"):
            create_provider(provider_type="invalid", api_key="test-key")  # type: ignore

    def test_create_provider_missing_key(self):
        """Test error on empty API key."""
        with pytest.raises(ValueError, match="API key is required"):
            create_provider(provider_type="openai", api_key="")

    def test_provider_from_settings_without_key(self):
        """Test that a missing key yields no provider."""
        assert provider_from_settings(Settings(openai_api_key="")) is None

    @patch("claimdesk.providers.anthropic_provider.AsyncAnthropic")
    def test_provider_from_settings_anthropic(self, mock_anthropic_class: Mock):
        """Test that the configured provider type and model are honored."""
        config = Settings(
            llm_provider="anthropic",
            anthropic_api_key="sk-ant-test",
            anthropic_model="claude-3-5-haiku-20241022",
            insights_timeout_seconds=15.0,
        )

        provider = provider_from_settings(config)

        assert isinstance(provider, AnthropicProvider)
        assert provider.model_name == "claude-3-5-haiku-20241022"
        mock_anthropic_class.assert_called_once_with(api_key="sk-ant-test", timeout=15.0)


class TestOpenAIProvider:
    """Tests for OpenAIProvider."""

    def test_requires_api_key(self):
        with pytest.raises(ValueError, match="OpenAI API key is required"):
            OpenAIProvider(api_key="")

    @pytest.mark.asyncio
    @patch("claimdesk.providers.openai_provider.AsyncOpenAI")
    async def test_complete_json_mode(self, mock_openai_class: Mock):
        """Test that JSON mode is requested and the response is unpacked."""
        mock_client = Mock()
        mock_client.chat.completions.create = AsyncMock(
            return_value=_openai_completion('{"summaryText": "ok"}')
        )
        mock_openai_class.return_value = mock_client

        provider = OpenAIProvider(api_key="sk-test")
        response = await provider.complete(
            system_prompt="system",
            user_prompt="user",
            max_tokens=2000,
            temperature=0.3,
            json_schema={"type": "object"},
        )

        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["max_tokens"] == 2000
        assert kwargs["temperature"] == 0.3
        assert kwargs["messages"] == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ]
        assert response.content == '{"summaryText": "ok"}'
        assert response.prompt_tokens == 120
        assert response.completion_tokens == 80
        assert response.finish_reason == "stop"
        assert response.duration_ms >= 0

    @pytest.mark.asyncio
    @patch("claimdesk.providers.openai_provider.AsyncOpenAI")
    async def test_complete_plain_text(self, mock_openai_class: Mock):
        """Test that no response_format is sent without a schema."""
        mock_client = Mock()
        mock_client.chat.completions.create = AsyncMock(
            return_value=_openai_completion("hello")
        )
        mock_openai_class.return_value = mock_client

        provider = OpenAIProvider(api_key="sk-test")
        await provider.complete(system_prompt="s", user_prompt="u")

        assert "response_format" not in mock_client.chat.completions.create.call_args.kwargs

    @pytest.mark.asyncio
    @patch("claimdesk.providers.openai_provider.AsyncOpenAI")
    async def test_null_content_becomes_empty(self, mock_openai_class: Mock):
        mock_client = Mock()
        mock_client.chat.completions.create = AsyncMock(
            return_value=_openai_completion(None)
        )
        mock_openai_class.return_value = mock_client

        response = await OpenAIProvider(api_key="sk-test").complete("s", "u")

        assert response.content == ""

    @pytest.mark.asyncio
    @patch("claimdesk.providers.openai_provider.AsyncOpenAI")
    async def test_errors_propagate(self, mock_openai_class: Mock):
        """Test that SDK errors are not swallowed by the provider."""
        mock_client = Mock()
        mock_client.chat.completions.create = AsyncMock(
            side_effect=ConnectionError("network down")
        )
        mock_openai_class.return_value = mock_client

        with pytest.raises(ConnectionError):
            await OpenAIProvider(api_key="sk-test").complete("s", "u")

    @patch("claimdesk.providers.openai_provider.AsyncOpenAI")
    def test_calculate_cost(self, mock_openai_class: Mock):
        provider = OpenAIProvider(api_key="sk-test", model="gpt-4o-mini")

        cost = provider.calculate_cost(1_000_000, 1_000_000)

        pricing = OPENAI_PRICING["gpt-4o-mini"]
        assert cost == pytest.approx(pricing["input"] + pricing["output"])

    @patch("claimdesk.providers.openai_provider.AsyncOpenAI")
    def test_calculate_cost_unknown_model(self, mock_openai_class: Mock):
        provider = OpenAIProvider(api_key="sk-test", model="gpt-unknown")

        cost = provider.calculate_cost(1_000_000, 0)

        assert cost == pytest.approx(OPENAI_PRICING["default"]["input"])


class TestAnthropicProvider:
    """Tests for AnthropicProvider."""

    @pytest.mark.asyncio
    @patch("claimdesk.providers.anthropic_provider.AsyncAnthropic")
    async def test_complete_strips_code_fence(self, mock_anthropic_class: Mock):
        """Test that fenced JSON is unwrapped when a schema is requested."""
        mock_client = Mock()
        mock_client.messages.create = AsyncMock(
            return_value=_anthropic_message('```json\n{"likelyOutcome": "approved"}\n```')
        )
        mock_anthropic_class.return_value = mock_client

        provider = AnthropicProvider(api_key="sk-ant-test")
        response = await provider.complete(
            system_prompt="system",
            user_prompt="user",
            json_schema={"type": "object"},
        )

        kwargs = mock_client.messages.create.call_args.kwargs
        assert kwargs["system"] == "system" + JSON_INSTRUCTION
        assert kwargs["messages"] == [{"role": "user", "content": "user"}]
        assert response.content == '{"likelyOutcome": "approved"}'
        assert response.total_tokens == 120
        assert response.finish_reason == "end_turn"

    @pytest.mark.asyncio
    @patch("claimdesk.providers.anthropic_provider.AsyncAnthropic")
    async def test_complete_without_schema(self, mock_anthropic_class: Mock):
        mock_client = Mock()
        mock_client.messages.create = AsyncMock(return_value=_anthropic_message("plain"))
        mock_anthropic_class.return_value = mock_client

        response = await AnthropicProvider(api_key="sk-ant-test").complete("s", "u")

        assert mock_client.messages.create.call_args.kwargs["system"] == "s"
        assert response.content == "plain"

    @patch("claimdesk.providers.anthropic_provider.AsyncAnthropic")
    def test_calculate_cost_prefix_match(self, mock_anthropic_class: Mock):
        provider = AnthropicProvider(
            api_key="sk-ant-test", model="claude-3-5-haiku-20241022-v2"
        )

        cost = provider.calculate_cost(1_000_000, 1_000_000)

        pricing = ANTHROPIC_PRICING["claude-3-5-haiku-20241022"]
        assert cost == pytest.approx(pricing["input"] + pricing["output"])
