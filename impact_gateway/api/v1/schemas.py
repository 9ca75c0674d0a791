"""Pydantic schemas for API request/response validation"""

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ReportRequest(BaseModel):
    """Request body carrying a bureau credit report document"""

    credit_report: Dict[str, Any] = Field(..., description="Bureau document with a CREDIT_RESPONSE section")
    as_of: Optional[date] = Field(None, description="Reference date for inquiry recency (default: today)")


class CategorySchema(BaseModel):
    """One impact category"""

    category: str
    count: int
    impacts: List[int]
    avg_impact: int
    total_impact: int
    impact_level: str


class ImpactResponse(BaseModel):
    """Response for POST /v1/impact"""

    status: str
    total_potential_gain: int
    categories: List[CategorySchema]


class PaymentMonthSchema(BaseModel):
    month: date
    code: str
    status: str
    severity: str


class PaymentHistorySchema(BaseModel):
    months: List[PaymentMonthSchema]
    severity_counts: Dict[str, int]
    worst_severity: str


class AccountSummarySchema(BaseModel):
    """One tradeline with derived figures"""

    creditor_name: str
    account_identifier: str
    account_type: str
    account_type_display: str
    balance: int
    credit_limit: int
    utilization: Optional[float] = None
    is_derogatory: bool
    payment_history: PaymentHistorySchema


class AccountsResponse(BaseModel):
    """Response for POST /v1/accounts/summary"""

    status: str
    accounts: List[AccountSummarySchema]
