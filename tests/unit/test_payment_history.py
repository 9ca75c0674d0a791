"""Unit tests for payment pattern decoding"""

from datetime import date
from impact_gateway.domain.accounts import account_type_display
from impact_gateway.domain.payment_history import decode_payment_pattern, summarize_payment_history


def test_decode_pattern_oldest_first():
    """Last character is the as-of month; earlier ones step back a month each"""
    months = decode_payment_pattern("C12", date(2024, 2, 15))

    assert [m.month for m in months] == [date(2023, 12, 1), date(2024, 1, 1), date(2024, 2, 1)]
    assert [m.status for m in months] == ["Current", "30 days late", "60 days late"]
    assert [m.severity for m in months] == ["current", "late_30", "late_60"]


def test_decode_unknown_codes_as_no_data():
    months = decode_payment_pattern("X-9", date(2024, 6, 1))

    assert all(m.status == "No data" for m in months)
    assert all(m.severity == "unknown" for m in months)
    assert [m.code for m in months] == ["X", "-", "9"]


def test_empty_pattern_has_no_months():
    assert decode_payment_pattern("", date(2024, 6, 1)) == []


def test_summary_counts_and_worst_severity():
    summary = summarize_payment_history("CC1239", date(2024, 6, 15))

    assert len(summary.months) == 6
    assert summary.severity_counts == {
        "late_90_plus": 1,
        "late_60": 1,
        "late_30": 1,
        "unknown": 1,
        "current": 2,
    }
    assert summary.worst_severity == "late_90_plus"


def test_summary_for_clean_history():
    summary = summarize_payment_history("CCCC", date(2024, 6, 15))

    assert summary.worst_severity == "current"
    assert summary.severity_counts["current"] == 4


def test_summary_for_missing_history():
    summary = summarize_payment_history("", date(2024, 6, 15))

    assert summary.months == []
    assert summary.worst_severity == "unknown"


def test_account_type_display():
    assert account_type_display("Revolving") == "Credit Card"
    assert account_type_display("Installment") == "Loan"
    assert account_type_display("OpenAccount") == "Open Account"
    assert account_type_display("LineOfCredit") == "LineOfCredit"
