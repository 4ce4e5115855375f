"""/api/debts - add, list, clear and export debts"""

import logging
from dataclasses import asdict
from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, Query
from starlette.responses import Response

from debt_coach.api.v1.schemas import DebtCreateRequest, DebtSchema, MessageResponse
from debt_coach.api.dependencies import get_debt_store
from debt_coach.domain.store import DebtStore, sort_debts
from debt_coach.domain.report import format_report
from debt_coach.infrastructure.observability.metrics import record_debt_count

router = APIRouter()

REPORT_FILENAME = "debt_report.csv"


@router.get("/debts", response_model=List[DebtSchema])
def list_debts(
    sort: Optional[Literal["name"]] = Query(None, description="Optional presentation order"),
    store: DebtStore = Depends(get_debt_store),
):
    """Current debts, insertion order unless sort=name"""
    return [DebtSchema(**asdict(d)) for d in sort_debts(store.list(), sort)]


@router.post("/debts", response_model=DebtSchema, status_code=201)
def add_debt(request_body: DebtCreateRequest, store: DebtStore = Depends(get_debt_store)):
    """
    Add a debt.

    Returns:
        The stored record with its assigned id. Invalid fields give a 400
        listing each offending field.
    """
    debt = store.add(
        name=request_body.name,
        balance=request_body.balance,
        apr=request_body.apr,
        min_payment=request_body.min_payment,
    )
    record_debt_count(len(store))
    logging.info("Added debt", extra={"debt_id": debt.id, "debt_name": debt.name})
    return DebtSchema(**asdict(debt))


@router.delete("/debts", response_model=MessageResponse)
def clear_debts(store: DebtStore = Depends(get_debt_store)):
    store.clear()
    record_debt_count(0)
    logging.info("Cleared all debts")
    return MessageResponse(message="All debts cleared.")


@router.get("/debts/report")
def download_report(store: DebtStore = Depends(get_debt_store)):
    """CSV export of the current debts; header-only when there are none"""
    return Response(
        content=format_report(store.list()),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"'},
    )
