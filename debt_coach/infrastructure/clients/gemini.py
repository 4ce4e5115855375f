"""Google Gemini text-completion client"""

from enum import Enum
from typing import Any, Protocol
from google import genai
from google.genai import types
from debt_coach.config import settings
from debt_coach.domain.exceptions import ContentBlockedError, CoachProviderError

SAFETY_CATEGORIES = (
    types.HarmCategory.HARM_CATEGORY_HARASSMENT,
    types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
    types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
    types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
)


class CompletionProvider(Protocol):
    """One prompt in, one text out. Raises ContentBlockedError on a safety block."""

    async def generate(self, prompt: str) -> str:
        ...


def build_generation_config() -> types.GenerateContentConfig:
    """Fixed generation settings: bounded output, moderate temperature, plain text"""
    return types.GenerateContentConfig(
        temperature=settings.temperature,
        top_p=settings.top_p,
        top_k=settings.top_k,
        max_output_tokens=settings.max_output_tokens,
        response_mime_type="text/plain",
        safety_settings=[
            types.SafetySetting(
                category=category,
                threshold=types.HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
            )
            for category in SAFETY_CATEGORIES
        ],
    )


def _reason_text(reason: Any) -> str:
    return reason.value if isinstance(reason, Enum) else str(reason)


class GeminiProvider:
    """Client for the Gemini generate-content API"""

    def __init__(self, api_key: str | None = None, model: str | None = None):
        self.api_key = api_key or settings.gemini_api_key
        self.model = model or settings.gemini_model
        self._client: genai.Client | None = None

    @property
    def client(self) -> genai.Client:
        # Created on first use so the app can start without a key
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str) -> str:
        """
        Send a single prompt and return the full text reply.

        Raises:
            ContentBlockedError: The prompt or the reply tripped a safety filter
            CoachProviderError: The reply carried no text
            google.genai.errors.APIError, httpx errors: Passed through untouched
        """
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=build_generation_config(),
        )

        feedback = response.prompt_feedback
        if feedback is not None and feedback.block_reason is not None:
            raise ContentBlockedError(_reason_text(feedback.block_reason))

        text = response.text
        if text is None:
            candidates = response.candidates or []
            finish_reason = candidates[0].finish_reason if candidates else None
            if finish_reason == types.FinishReason.SAFETY:
                raise ContentBlockedError(_reason_text(finish_reason))
            raise CoachProviderError(f"Empty response from model (finish reason: {finish_reason})")

        return text
