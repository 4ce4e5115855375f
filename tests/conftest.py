"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import List
from fastapi.testclient import TestClient
from debt_coach.api.main import create_app
from debt_coach.api.dependencies import get_coach_gateway, get_today
from debt_coach.domain.models import Debt
from debt_coach.domain.store import DebtStore
from debt_coach.domain.exceptions import ContentBlockedError
from debt_coach.infrastructure.clients.coach import CoachGateway

FIXED_TODAY = date(2024, 1, 1)


class FakeProvider:
    """Completion provider double: records prompts, returns a reply or raises"""

    def __init__(self, reply: str = "Sure, let's look at your debts.", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def blocked_provider() -> FakeProvider:
    return FakeProvider(error=ContentBlockedError("SAFETY"))


@pytest.fixture
def store() -> DebtStore:
    """Fresh, empty debt store"""
    return DebtStore()


@pytest.fixture
def client(provider: FakeProvider) -> TestClient:
    """FastAPI test client with the fake provider and a fixed date"""
    app = create_app()
    gateway = CoachGateway(provider, timeout=5.0)

    app.dependency_overrides[get_coach_gateway] = lambda: gateway
    app.dependency_overrides[get_today] = lambda: FIXED_TODAY
    return TestClient(app)


@pytest.fixture
def sample_debts() -> List[Debt]:
    """Two debts with different lowest-balance and highest-APR winners"""
    return [
        Debt(id=0, name="Credit Card", balance=50000.0, apr=36.0, min_payment=2500.0),
        Debt(id=1, name="Personal Loan", balance=12000.5, apr=14.25, min_payment=1000.0),
    ]
