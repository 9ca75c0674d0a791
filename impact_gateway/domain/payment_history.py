"""Payment pattern decoding for tradeline history"""

from datetime import date
from typing import Dict, List

from impact_gateway.domain.models import PaymentHistorySummary, PaymentMonth
from impact_gateway.utils.date_utils import shift_months

# code -> (status, severity)
PAYMENT_CODES: Dict[str, tuple[str, str]] = {
    "C": ("Current", "current"),
    "1": ("30 days late", "late_30"),
    "2": ("60 days late", "late_60"),
    "3": ("90 days late", "late_90_plus"),
    "4": ("120 days late", "late_90_plus"),
    "5": ("150 days late", "late_90_plus"),
    "6": ("180 days late", "late_90_plus"),
    "7": ("210+ days late", "late_90_plus"),
}
NO_DATA = ("No data", "unknown")

# Worst first
SEVERITY_ORDER = ["late_90_plus", "late_60", "late_30", "unknown", "current"]


def decode_payment_pattern(pattern: str, as_of: date) -> List[PaymentMonth]:
    """
    Expand a payment pattern into one entry per month, oldest first.

    The last character of the pattern is the as_of month; each earlier
    character steps one month back.
    """
    codes = list(pattern or "")
    months = []
    for i, code in enumerate(codes):
        months_ago = len(codes) - 1 - i
        status, severity = PAYMENT_CODES.get(code.upper(), NO_DATA)
        months.append(
            PaymentMonth(
                month=shift_months(as_of, -months_ago),
                code=code,
                status=status,
                severity=severity,
            )
        )
    return months


def summarize_payment_history(pattern: str, as_of: date) -> PaymentHistorySummary:
    """Decode a pattern and count months per severity"""
    months = decode_payment_pattern(pattern, as_of)

    severity_counts = {severity: 0 for severity in SEVERITY_ORDER}
    for month in months:
        severity_counts[month.severity] += 1

    worst = next(
        (severity for severity in SEVERITY_ORDER if severity_counts[severity] > 0),
        "unknown",
    )

    return PaymentHistorySummary(
        months=months,
        severity_counts=severity_counts,
        worst_severity=worst,
    )
