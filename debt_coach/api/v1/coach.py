"""/api/coach - chat with the debt coach and ask for strategy explanations"""

import time
import logging
from datetime import date
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from debt_coach.api.v1.schemas import ChatRequest, ChatResponse, ExplainRequest, ExplainResponse
from debt_coach.api.dependencies import get_coach_gateway, get_debt_store, get_request_id, get_today
from debt_coach.config import settings
from debt_coach.domain.exceptions import EmptyStoreError
from debt_coach.domain.models import CoachError, CoachErrorKind, CoachResponse
from debt_coach.domain.parsing import needs_debts_first, resolve_extra_payment
from debt_coach.domain.prompts import EMPTY_STORE_GUIDANCE, build_explain_prompt, build_strategy_prompt
from debt_coach.domain.store import DebtStore
from debt_coach.infrastructure.clients.coach import CoachGateway
from debt_coach.infrastructure.observability.logging import log_coach_exchange
from debt_coach.infrastructure.observability.metrics import coach_latency_histogram, record_coach_outcome

router = APIRouter()

BLOCKED_MESSAGE = "Content blocked by API safety settings. Reason: {reason}"
CHAT_ERROR_MESSAGE = "Error interacting with AI: {detail}"
EXPLAIN_ERROR_MESSAGE = "Failed to get explanation from AI coach."


async def ask_coach(gateway: CoachGateway, prompt: str, endpoint: str, request_id: str) -> CoachResponse:
    """Run one gateway call with logging and metrics around it"""
    logging.debug("Coach prompt", extra={"request_id": request_id, "endpoint": endpoint, "prompt": prompt})
    start_time = time.time()

    with coach_latency_histogram.time():
        result = await gateway.complete(prompt)

    outcome = result.kind.value if isinstance(result, CoachError) else "ok"
    record_coach_outcome(endpoint, outcome)
    log_coach_exchange(request_id, endpoint, outcome, len(prompt), (time.time() - start_time) * 1000)
    return result


def coach_error_response(error: CoachError, provider_message: str) -> JSONResponse:
    """Blocked → 503 with the policy reason, anything else → 500"""
    if error.kind == CoachErrorKind.BLOCKED:
        return JSONResponse(status_code=503, content={"error": BLOCKED_MESSAGE.format(reason=error.detail)})
    return JSONResponse(status_code=500, content={"error": provider_message})


@router.post("/coach/chat", response_model=ChatResponse)
async def chat(
    request_body: ChatRequest,
    request: Request,
    store: DebtStore = Depends(get_debt_store),
    gateway: CoachGateway = Depends(get_coach_gateway),
    today: date = Depends(get_today),
):
    """
    Answer a free-text question about the user's debts.

    Flow:
    1. With no debts and no greeting, reply with fixed guidance (coach not called)
    2. Work out the extra payment (explicit field, else parsed from the message)
    3. Build the strategy prompt and send it to the coach
    """
    request_id = get_request_id(request)
    message = request_body.user_message

    debts = store.list()
    if needs_debts_first(len(debts), message):
        record_coach_outcome("chat", "needs_debts")
        return ChatResponse(ai_response=EMPTY_STORE_GUIDANCE)

    extra_payment = resolve_extra_payment(request_body.extra_payment, message)
    prompt = build_strategy_prompt(debts, extra_payment, message, today, currency=settings.currency_prefix)

    result = await ask_coach(gateway, prompt, "chat", request_id)
    if isinstance(result, CoachError):
        return coach_error_response(result, CHAT_ERROR_MESSAGE.format(detail=result.detail))

    return ChatResponse(ai_response=result.text)


@router.post("/coach/explain", response_model=ExplainResponse)
async def explain(
    request_body: ExplainRequest,
    request: Request,
    store: DebtStore = Depends(get_debt_store),
    gateway: CoachGateway = Depends(get_coach_gateway),
):
    """Explain one strategy and name the debt it would target first"""
    request_id = get_request_id(request)

    debts = store.list()
    if not debts:
        raise EmptyStoreError("Please add at least one debt first before asking for an explanation.")

    prompt = build_explain_prompt(request_body.strategy, debts, currency=settings.currency_prefix)

    result = await ask_coach(gateway, prompt, "explain", request_id)
    if isinstance(result, CoachError):
        return coach_error_response(result, EXPLAIN_ERROR_MESSAGE)

    return ExplainResponse(explanation=result.text)
