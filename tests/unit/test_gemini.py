"""Unit tests for the Gemini provider response handling"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
import pytest
from google.genai import types
from debt_coach.domain.exceptions import ContentBlockedError, CoachProviderError
from debt_coach.infrastructure.clients.gemini import GeminiProvider, build_generation_config


def make_provider(response) -> GeminiProvider:
    provider = GeminiProvider(api_key="test-key", model="gemini-test")
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=response)
    provider._client = client
    return provider


def make_response(text=None, block_reason=None, finish_reason=None):
    feedback = SimpleNamespace(block_reason=block_reason) if block_reason is not None else None
    candidates = [SimpleNamespace(finish_reason=finish_reason)] if finish_reason is not None else []
    return SimpleNamespace(text=text, prompt_feedback=feedback, candidates=candidates)


def test_generation_config_settings():
    config = build_generation_config()

    assert config.temperature == 0.7
    assert config.max_output_tokens == 8192
    assert config.response_mime_type == "text/plain"
    assert len(config.safety_settings) == 4
    assert all(
        s.threshold == types.HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE
        for s in config.safety_settings
    )
    assert {s.category for s in config.safety_settings} == {
        types.HarmCategory.HARM_CATEGORY_HARASSMENT,
        types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
        types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
        types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
    }


async def test_generate_returns_text_and_sends_prompt():
    provider = make_provider(make_response(text="Pay the card first."))

    assert await provider.generate("my prompt") == "Pay the card first."

    call = provider.client.aio.models.generate_content.call_args
    assert call.kwargs["model"] == "gemini-test"
    assert call.kwargs["contents"] == "my prompt"


async def test_prompt_block_raises_content_blocked():
    provider = make_provider(make_response(block_reason=types.BlockedReason.SAFETY))

    with pytest.raises(ContentBlockedError) as exc_info:
        await provider.generate("prompt")

    assert exc_info.value.reason == "SAFETY"


async def test_safety_finish_without_text_raises_content_blocked():
    provider = make_provider(make_response(finish_reason=types.FinishReason.SAFETY))

    with pytest.raises(ContentBlockedError):
        await provider.generate("prompt")


async def test_empty_reply_raises_provider_error():
    provider = make_provider(make_response(finish_reason=types.FinishReason.MAX_TOKENS))

    with pytest.raises(CoachProviderError):
        await provider.generate("prompt")
