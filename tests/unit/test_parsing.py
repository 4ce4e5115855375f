"""Unit tests for chat message parsing"""

import pytest
from debt_coach.domain.parsing import (
    extract_extra_payment,
    is_greeting,
    needs_debts_first,
    resolve_extra_payment,
)


@pytest.mark.parametrize(
    "message, expected",
    [
        ("I can pay extra Rs. 500 this month", 500.0),
        ("extra rs250.75 please", 250.75),
        ("What if I pay an extra Rs. 500 per month?", 500.0),
        ("EXTRA RS 1200", 1200.0),
        ("extra Rs.99.5 and later extra Rs. 10", 99.5),
    ],
)
def test_extract_extra_payment_matches(message, expected):
    assert extract_extra_payment(message) == expected


@pytest.mark.parametrize(
    "message",
    [
        "no extra payment",
        "extra 500",
        "I can pay Rs. 500",
        "extra Rs. -500",
        "",
    ],
)
def test_extract_extra_payment_no_match(message):
    assert extract_extra_payment(message) is None


def test_extract_extra_payment_is_deterministic():
    message = "extra Rs. 42.10 each month"
    assert extract_extra_payment(message) == extract_extra_payment(message) == 42.10


@pytest.mark.parametrize("message", ["hello", "Hi there", "hey, coach!", "Well HELLO"])
def test_is_greeting(message):
    assert is_greeting(message) is True


@pytest.mark.parametrize("message", ["what should I pay", "which debt first?", "this is hard", "highest apr"])
def test_is_not_greeting(message):
    """Test greeting words only count as whole words"""
    assert is_greeting(message) is False


def test_needs_debts_first():
    assert needs_debts_first(0, "what should I pay") is True
    assert needs_debts_first(0, "hello") is False
    assert needs_debts_first(2, "what should I pay") is False


def test_resolve_extra_payment_prefers_explicit_amount():
    assert resolve_extra_payment(300, "extra Rs. 500") == 300.0
    assert resolve_extra_payment("150.5", "no amount here") == 150.5


def test_resolve_extra_payment_falls_back_to_message():
    assert resolve_extra_payment(None, "extra Rs. 500") == 500.0
    assert resolve_extra_payment("abc", "extra Rs. 500") == 500.0
    assert resolve_extra_payment(True, "nothing") is None


def test_extract_extra_payment_overflowing_amount_is_no_match():
    """Test a digit run too long for a float is treated as malformed"""
    message = "extra Rs. " + "9" * 400

    assert extract_extra_payment(message) is None
    assert resolve_extra_payment(None, message) is None
