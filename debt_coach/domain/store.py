"""In-memory debt store - the single mutable resource of the service"""

import threading
from typing import Any, List
import pydantic
from debt_coach.domain.models import Debt, DebtInput
from debt_coach.domain.exceptions import ValidationError


class DebtStore:
    """
    Ordered debts plus the next-id counter.

    Every operation holds the same lock, so list() never sees a half-applied
    add/clear and concurrent adds never share an id.
    """

    INITIAL_ID = 0

    def __init__(self):
        self._lock = threading.Lock()
        self._debts: List[Debt] = []
        self._next_id = self.INITIAL_ID

    def list(self) -> List[Debt]:
        """Current debts in insertion order"""
        with self._lock:
            return list(self._debts)

    def add(self, name: Any, balance: Any, apr: Any, min_payment: Any) -> Debt:
        """
        Validate and append a debt.

        Raises:
            ValidationError: listing every missing, negative or non-numeric field.
                The store is left unmodified.
        """
        try:
            fields = DebtInput(name=name, balance=balance, apr=apr, min_payment=min_payment)
        except pydantic.ValidationError as e:
            raise ValidationError.from_errors(e.errors()) from e

        with self._lock:
            debt = Debt(id=self._next_id, **fields.model_dump())
            self._next_id += 1
            self._debts.append(debt)
            return debt

    def clear(self) -> None:
        """Drop all debts and reset the id counter together"""
        with self._lock:
            self._debts = []
            self._next_id = self.INITIAL_ID

    def __len__(self) -> int:
        with self._lock:
            return len(self._debts)


def sort_debts(debts: List[Debt], key: str | None = None) -> List[Debt]:
    """Presentation-only ordering; the store itself keeps insertion order"""
    if key == "name":
        return sorted(debts, key=lambda d: d.name.lower())
    return list(debts)
