"""Free-text parsing for chat messages"""

import math
import re
from typing import Any

# "extra" + rupee marker + amount, e.g. "extra Rs. 500", "extra rs250.75".
# Negative amounts and thousands separators are not recognised.
EXTRA_PAYMENT_PATTERN = re.compile(r"\bextra\s*rs\.?\s*(\d+(?:\.\d+)?)", re.IGNORECASE)

GREETING_PATTERN = re.compile(r"\b(?:hello|hi|hey)\b", re.IGNORECASE)


def extract_extra_payment(message: str) -> float | None:
    """
    Find the first "extra Rs. <amount>" mention in a message.

    Returns:
        The amount as a float, or None when there is no match.
    """
    match = EXTRA_PAYMENT_PATTERN.search(message or "")
    if not match:
        return None
    try:
        amount = float(match.group(1))
    except ValueError:
        return None
    # Digit runs too long for a float overflow to inf
    return amount if math.isfinite(amount) else None


def is_greeting(message: str) -> bool:
    """True when the message contains a greeting word"""
    return bool(GREETING_PATTERN.search(message or ""))


def needs_debts_first(debt_count: int, message: str) -> bool:
    """Chat with an empty store only reaches the coach for greetings"""
    return debt_count == 0 and not is_greeting(message)


def resolve_extra_payment(explicit: Any, message: str) -> float | None:
    """An explicitly supplied numeric amount wins; otherwise look in the message"""
    if explicit is not None and not isinstance(explicit, bool):
        try:
            amount = float(explicit)
        except (TypeError, ValueError):
            amount = None
        if amount is not None and math.isfinite(amount):
            return amount
    return extract_extra_payment(message)
