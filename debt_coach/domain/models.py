"""Domain models - dataclasses for business entities, pydantic for raw input"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Union
from pydantic import BaseModel, Field, StringConstraints, field_validator

NonEmptyName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Amount = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class DebtInput(BaseModel):
    """Raw debt fields as supplied by a caller, checked before a Debt is created"""

    name: NonEmptyName = Field(..., description="Creditor name")
    balance: Amount = Field(..., description="Current balance, non-negative")
    apr: Amount = Field(..., description="Annual percentage rate, non-negative")
    min_payment: Amount = Field(..., description="Minimum monthly payment, non-negative")

    @field_validator("balance", "apr", "min_payment", mode="before")
    @classmethod
    def reject_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value


@dataclass(frozen=True)
class Debt:
    """One creditor obligation held by the debt store"""

    id: int
    name: str
    balance: float
    apr: float  # annual percentage rate, e.g. 19.99
    min_payment: float


class Strategy(str, Enum):
    """Repayment strategies the coach is allowed to discuss"""

    SNOWBALL = "snowball"  # lowest balance first
    AVALANCHE = "avalanche"  # highest APR first


class CoachErrorKind(str, Enum):
    """Closed set of failures the coach gateway can report"""

    BLOCKED = "blocked"
    PROVIDER_ERROR = "provider_error"


@dataclass(frozen=True)
class CoachText:
    """Successful completion: the provider's text, unmodified"""

    text: str


@dataclass(frozen=True)
class CoachError:
    """Failed completion, already translated out of provider-specific shapes"""

    kind: CoachErrorKind
    detail: str


CoachResponse = Union[CoachText, CoachError]
