"""Unit tests for provider fault translation in the coach gateway"""

import asyncio
import httpx
import pytest
from debt_coach.domain.models import CoachError, CoachErrorKind, CoachText
from debt_coach.domain.exceptions import ContentBlockedError, CoachProviderError
from debt_coach.infrastructure.clients.coach import CoachGateway


class SlowProvider:
    async def generate(self, prompt: str) -> str:
        await asyncio.sleep(10)
        return "too late"


async def test_complete_returns_text_unmodified(provider):
    provider.reply = "  Line one\n\nLine two  "
    gateway = CoachGateway(provider)

    result = await gateway.complete("prompt")

    assert result == CoachText(text="  Line one\n\nLine two  ")
    assert provider.prompts == ["prompt"]


async def test_safety_block_maps_to_blocked(provider):
    """Test the block reason is preserved verbatim"""
    provider.error = ContentBlockedError("PROHIBITED_CONTENT")
    gateway = CoachGateway(provider)

    result = await gateway.complete("prompt")

    assert result == CoachError(kind=CoachErrorKind.BLOCKED, detail="PROHIBITED_CONTENT")


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("read timed out"),
        CoachProviderError("Empty response from model"),
        RuntimeError("boom"),
    ],
)
async def test_other_faults_map_to_provider_error(provider, error):
    provider.error = error
    gateway = CoachGateway(provider)

    result = await gateway.complete("prompt")

    assert isinstance(result, CoachError)
    assert result.kind == CoachErrorKind.PROVIDER_ERROR
    assert result.detail == str(error)


async def test_timeout_maps_to_provider_error():
    gateway = CoachGateway(SlowProvider(), timeout=0.01)

    result = await gateway.complete("prompt")

    assert result.kind == CoachErrorKind.PROVIDER_ERROR
    assert "timeout" in result.detail


async def test_cancellation_is_not_swallowed():
    gateway = CoachGateway(SlowProvider(), timeout=30)
    task = asyncio.create_task(gateway.complete("prompt"))
    await asyncio.sleep(0)

    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task


async def test_no_retry_on_failure(provider):
    provider.error = RuntimeError("down")
    gateway = CoachGateway(provider)

    await gateway.complete("prompt")

    assert len(provider.prompts) == 1


async def test_explicit_zero_timeout_is_kept():
    gateway = CoachGateway(SlowProvider(), timeout=0)

    result = await gateway.complete("prompt")

    assert gateway.timeout == 0
    assert result.kind == CoachErrorKind.PROVIDER_ERROR


def test_default_timeout_from_settings(provider):
    from debt_coach.config import settings

    assert CoachGateway(provider).timeout == settings.coach_timeout_seconds
