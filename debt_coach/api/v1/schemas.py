"""Pydantic schemas for API request/response validation"""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator

from debt_coach.domain.models import DebtInput, Strategy


class DebtCreateRequest(DebtInput):
    """Request body for POST /api/debts"""

    pass


class DebtSchema(BaseModel):
    """Single debt record"""

    id: int
    name: str
    balance: float
    apr: float
    min_payment: float


class MessageResponse(BaseModel):
    message: str


class ChatRequest(BaseModel):
    """Request body for POST /api/coach/chat"""

    model_config = ConfigDict(populate_by_name=True)

    user_message: str = Field(..., alias="userMessage", min_length=1)
    extra_payment: Any = Field(None, alias="extraPayment", description="Overrides any amount found in the message")

    @field_validator("user_message")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        # Kept verbatim for the prompt; only checked for content
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class ChatResponse(BaseModel):
    """Response for POST /api/coach/chat"""

    model_config = ConfigDict(populate_by_name=True)

    ai_response: str = Field(..., alias="aiResponse")


class ExplainRequest(BaseModel):
    """Request body for POST /api/coach/explain"""

    strategy: Strategy = Field(..., description="'snowball' or 'avalanche'")


class ExplainResponse(BaseModel):
    """Response for POST /api/coach/explain"""

    explanation: str
