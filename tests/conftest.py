"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Callable
from fastapi.testclient import TestClient

from impact_gateway.api.main import create_app
from impact_gateway.api.dependencies import get_today
from impact_gateway.domain.models import Account, CreditReport

TODAY = date(2024, 7, 1)


@pytest.fixture
def today() -> date:
    """Fixed reference date so inquiry windows are deterministic"""
    return TODAY


@pytest.fixture
def client(today: date) -> TestClient:
    """Create FastAPI test client with a pinned clock"""
    app = create_app()
    app.dependency_overrides[get_today] = lambda: today
    return TestClient(app)


def _make_account(**overrides) -> Account:
    fields = dict(
        creditor_name="Test Bank",
        account_identifier="ACC-1",
        account_type="Installment",
        status_type="Open",
        opened_date=date(2014, 1, 1),
    )
    fields.update(overrides)
    return Account(**fields)


@pytest.fixture
def make_account() -> Callable[..., Account]:
    """Factory for a clean, seasoned installment account unless overridden"""
    return _make_account


@pytest.fixture
def seasoned_clean_report(today: date) -> CreditReport:
    """Ten-year-old accounts, low utilization, no inquiries"""
    return CreditReport(
        accounts=[
            _make_account(account_identifier="LOAN-1"),
            _make_account(
                account_identifier="CARD-1",
                account_type="Revolving",
                balance=100,
                credit_limit=5000,
            ),
        ],
        inquiries=[],
        report_date=today,
    )


@pytest.fixture
def bureau_document() -> dict:
    """CREDIT_RESPONSE document as delivered by the report loader"""
    return {
        "CREDIT_RESPONSE": {
            "@CreditReportFirstIssuedDate": "2024-06-15",
            "CREDIT_LIABILITY": [
                {
                    "@_AccountIdentifier": "CO-100",
                    "@_AccountType": "Revolving",
                    "@_AccountStatusType": "Closed",
                    "@IsClosedIndicator": "Y",
                    "@IsChargeoffIndicator": "Y",
                    "@_PastDueAmount": "2400",
                    "@_ChargeOffDate": "2022-03-01",
                    "_CREDITOR": {"@_Name": "Capital Card"},
                    "_CURRENT_RATING": {"@_Code": "9"},
                    "BalanceAmount": "2400",
                    "@_CreditLimitAmount": "2500",
                    "AccountOpenedDate": "2015-05-01",
                    "_PAYMENT_PATTERN": {"@_Data": "CC1239"},
                },
                {
                    "@_AccountIdentifier": "CC-200",
                    "@_AccountType": "Revolving",
                    "@_AccountStatusType": "Open",
                    "_CREDITOR": {"@_Name": "Main Street Visa"},
                    "_CURRENT_RATING": {"@_Code": "1"},
                    "BalanceAmount": "950",
                    "@_CreditLimitAmount": "1000",
                    "AccountOpenedDate": "2016-02-10",
                    "_PAYMENT_PATTERN": {"@_Data": "CCCC"},
                },
                {
                    "@_AccountIdentifier": "AUTO-300",
                    "@_AccountType": "Installment",
                    "@_AccountStatusType": "Open",
                    "_CREDITOR": {"@_Name": "Auto Finance"},
                    "_CURRENT_RATING": {"@_Code": "4"},
                    "BalanceAmount": "8000",
                    "AccountOpenedDate": "2017-09-20",
                },
            ],
            "CREDIT_INQUIRY": [
                {"@CreditFileID": "EA01", "@_Name": "Lender A", "@_Date": "2024-01-10", "@CreditBusinessType": "Finance"},
                {"@CreditFileID": "RA01", "@_Name": "Lender B", "@_Date": "2023-11-02"},
                {"@CreditFileID": "TA01", "@_Name": "Lender C", "@_Date": "2023-05-20"},
                {"@CreditFileID": "TA01", "@_Name": "Old Lender", "@_Date": "2020-01-01"},
                {"@CreditFileID": "ZZ99", "@_Name": "Unknown Bureau", "@_Date": "2024-02-01"},
            ],
        }
    }
