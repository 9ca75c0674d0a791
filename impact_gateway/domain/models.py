"""Domain models - pure Python dataclasses representing credit report entities"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional


@dataclass
class Account:
    """Tradeline reported by a bureau"""

    creditor_name: str
    account_identifier: str
    account_type: str  # "Revolving", "Installment", "Mortgage", "OpenAccount"
    status_type: str  # "Open", "Closed", "Paid", ...
    is_closed: bool = False
    is_derogatory: bool = False
    is_collection: bool = False
    is_charge_off: bool = False
    past_due_amount: int = 0
    current_rating_code: Optional[str] = None
    balance: int = 0
    credit_limit: int = 0
    opened_date: Optional[date] = None
    charge_off_date: Optional[date] = None
    payment_pattern: str = ""


@dataclass
class Inquiry:
    """Hard inquiry recorded by one bureau"""

    bureau: str  # "Equifax", "Experian" or "TransUnion"
    requester_name: str = "Unknown Company"
    inquiry_date: Optional[date] = None
    business_type: str = "Unknown"


@dataclass
class CreditReport:
    """Normalized credit report snapshot"""

    accounts: List[Account] = field(default_factory=list)
    inquiries: List[Inquiry] = field(default_factory=list)
    report_date: Optional[date] = None


@dataclass
class CategorySummary:
    """Estimated score impact of one category of negative items"""

    category: str
    count: int
    impacts: List[int]
    impact_level: str  # "High", "Medium" or "Low"

    @property
    def total_impact(self) -> int:
        return sum(self.impacts)

    @property
    def avg_impact(self) -> int:
        if not self.impacts:
            return 0
        # Half-up rounding; impacts are never negative
        return int(self.total_impact / len(self.impacts) + 0.5)


@dataclass
class ImpactAnalysis:
    """Output of the derogatory-impact analysis"""

    status: str  # "impact_found", "no_impact" or "not_analyzed"
    categories: List[CategorySummary] = field(default_factory=list)

    @property
    def total_potential_gain(self) -> int:
        return sum(c.total_impact for c in self.categories)


@dataclass
class PaymentMonth:
    """One month of a tradeline payment pattern"""

    month: date  # First day of the month
    code: str
    status: str
    severity: str


@dataclass
class PaymentHistorySummary:
    """Decoded payment pattern with per-severity counts"""

    months: List[PaymentMonth]
    severity_counts: Dict[str, int]
    worst_severity: str
