"""Dependency injection for FastAPI endpoints"""

from datetime import date
from fastapi import Request
from debt_coach.domain.store import DebtStore
from debt_coach.infrastructure.clients.coach import CoachGateway


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_debt_store(request: Request) -> DebtStore:
    """The app-wide debt store created in create_app()"""
    return request.app.state.debt_store


def get_coach_gateway(request: Request) -> CoachGateway:
    """The app-wide coach gateway created in create_app()"""
    return request.app.state.coach_gateway


def get_today() -> date:
    """Current wall-clock date for prompt building"""
    return date.today()
