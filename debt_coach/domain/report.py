"""CSV report of the current debts"""

import csv
import io
from typing import Sequence
from debt_coach.domain.models import Debt

REPORT_HEADER = (
    "Creditor Name",
    "Current Balance",
    "Interest Rate (APR %)",
    "Minimum Monthly Payment",
)


def format_report(debts: Sequence[Debt]) -> str:
    """
    Render debts as CSV with a header row.

    An empty sequence gives a header-only report.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(REPORT_HEADER)
    for debt in debts:
        writer.writerow([
            debt.name,
            f"{debt.balance:.2f}",
            f"{debt.apr:.2f}",
            f"{debt.min_payment:.2f}",
        ])
    return buffer.getvalue()
