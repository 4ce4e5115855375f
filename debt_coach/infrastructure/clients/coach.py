"""Coach gateway - turns provider calls into CoachText or CoachError"""

import asyncio
import logging
from debt_coach.config import settings
from debt_coach.domain.models import CoachError, CoachErrorKind, CoachResponse, CoachText
from debt_coach.domain.exceptions import ContentBlockedError
from debt_coach.infrastructure.clients.gemini import CompletionProvider

logger = logging.getLogger(__name__)


class CoachGateway:
    """Single-shot access to the completion provider. No retries."""

    def __init__(self, provider: CompletionProvider, timeout: float | None = None):
        self.provider = provider
        self.timeout = settings.coach_timeout_seconds if timeout is None else timeout

    async def complete(self, prompt: str) -> CoachResponse:
        """
        Send one prompt, get one result back.

        Provider faults never escape: a safety block becomes a BLOCKED error
        carrying the provider's reason verbatim, anything else (network, API,
        timeout, empty reply) becomes PROVIDER_ERROR. Task cancellation is
        not a fault and propagates to the caller.
        """
        try:
            text = await asyncio.wait_for(self.provider.generate(prompt), timeout=self.timeout)
        except ContentBlockedError as e:
            logger.warning("Coach reply blocked", extra={"block_reason": e.reason})
            return CoachError(kind=CoachErrorKind.BLOCKED, detail=e.reason)
        except asyncio.TimeoutError:
            logger.error("Coach provider timeout", extra={"timeout_seconds": self.timeout})
            return CoachError(
                kind=CoachErrorKind.PROVIDER_ERROR,
                detail=f"Coach provider timeout after {self.timeout}s",
            )
        except Exception as e:
            logger.error(f"Coach provider error: {e}", extra={"error_type": type(e).__name__})
            return CoachError(kind=CoachErrorKind.PROVIDER_ERROR, detail=str(e) or type(e).__name__)

        return CoachText(text=text)
