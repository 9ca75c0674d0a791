"""Derogatory-impact engine - estimates score points recoverable per category of negative items"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from impact_gateway.domain.models import Account, CategorySummary, CreditReport, ImpactAnalysis
from impact_gateway.utils.date_utils import age_in_years, subtract_years

HIGH = "High"
MEDIUM = "Medium"
LOW = "Low"

_LEVEL_RANK = {LOW: 0, MEDIUM: 1, HIGH: 2}

DEROGATORY_RATING_CODES = {"2", "3", "4", "5", "6", "7", "8", "9"}

UTILIZATION_THRESHOLD = 30.0
INQUIRY_LOOKBACK_YEARS = 2

LIMITED_HISTORY = "Limited Credit History"
HIGH_UTILIZATION = "High Credit Utilization"
HARD_INQUIRIES = "Hard Inquiries"


@dataclass
class _CategoryAccumulator:
    count: int = 0
    impacts: List[int] = field(default_factory=list)
    level: str = LOW


class ImpactAnalyzer:
    """
    Classify the negative items of a credit report and estimate the score
    points each category costs.

    Each call to analyze() builds its own category map, so one instance can
    serve any number of reports.
    """

    def __init__(self, today: Optional[date] = None):
        self.today = today

    def analyze(self, report: Optional[CreditReport]) -> ImpactAnalysis:
        """
        Run the five analysis passes over a report.

        Returns an ImpactAnalysis whose status is:
        - "not_analyzed" when no report was supplied
        - "no_impact" when nothing negative was found
        - "impact_found" otherwise, with categories ranked by total impact
        """
        if report is None:
            return ImpactAnalysis(status="not_analyzed")

        today = self.today or date.today()
        report_date = report.report_date or today
        categories: Dict[str, _CategoryAccumulator] = {}

        self._analyze_derogatory_accounts(report.accounts, categories)
        self._analyze_utilization(report.accounts, categories)
        self._analyze_inquiries(report, today, categories)
        self._analyze_credit_age(report.accounts, report_date, categories)

        return self._finalize(categories)

    # 1. Derogatory accounts

    def _analyze_derogatory_accounts(
        self, accounts: List[Account], categories: Dict[str, _CategoryAccumulator]
    ) -> None:
        for account in accounts:
            if not is_derogatory(account):
                continue
            category, impact, level = classify_derogatory(account)
            _merge(categories, category, impact, level)

    # 2. Revolving utilization

    def _analyze_utilization(
        self, accounts: List[Account], categories: Dict[str, _CategoryAccumulator]
    ) -> None:
        high_utilization_count = 0
        total_impact = 0
        total_balances = 0
        total_limits = 0

        for account in accounts:
            if not is_open_revolving(account) or account.credit_limit <= 0:
                continue

            total_balances += account.balance
            total_limits += account.credit_limit

            utilization = account_utilization(account)
            if utilization > UTILIZATION_THRESHOLD:
                high_utilization_count += 1
                total_impact += _tier(utilization, (8, 6, 4, 2))

        if total_limits > 0:
            overall = total_balances / total_limits * 100
            if overall > UTILIZATION_THRESHOLD:
                total_impact += _tier(overall, (10, 7, 5, 3))

        if total_impact > 0:
            if total_impact > 15:
                level = HIGH
            elif total_impact > 8:
                level = MEDIUM
            else:
                level = LOW
            categories[HIGH_UTILIZATION] = _CategoryAccumulator(
                count=max(high_utilization_count, 1), impacts=[total_impact], level=level
            )

    # 3. Hard inquiries

    def _analyze_inquiries(
        self, report: CreditReport, today: date, categories: Dict[str, _CategoryAccumulator]
    ) -> None:
        cutoff = subtract_years(today, INQUIRY_LOOKBACK_YEARS)
        recent = [
            inquiry for inquiry in report.inquiries
            if inquiry.inquiry_date is not None and inquiry.inquiry_date > cutoff
        ]
        if not recent:
            return

        if len(recent) == 1:
            impact = 1
        elif len(recent) == 2:
            impact = 2
        else:
            impact = min(len(recent) * 2, 8)

        categories[HARD_INQUIRIES] = _CategoryAccumulator(
            count=len(recent), impacts=[impact], level=MEDIUM if impact > 4 else LOW
        )

    # 4. Credit age

    def _analyze_credit_age(
        self, accounts: List[Account], report_date: date, categories: Dict[str, _CategoryAccumulator]
    ) -> None:
        # An empty file has no history to judge
        if not accounts:
            return

        ages = [
            age_in_years(account.opened_date, report_date)
            for account in accounts
            if account.opened_date is not None
        ]
        avg_age = sum(ages) / len(ages) if ages else 0.0
        new_accounts = sum(1 for age in ages if age < 1)

        if avg_age < 4 or new_accounts > 2:
            impact = min((6 if avg_age < 2 else 4) + new_accounts * 2, 10)
            categories[LIMITED_HISTORY] = _CategoryAccumulator(
                count=new_accounts if new_accounts > 0 else 1,
                impacts=[impact],
                level=MEDIUM if impact > 6 else LOW,
            )

    # 5. Rank categories

    @staticmethod
    def _finalize(categories: Dict[str, _CategoryAccumulator]) -> ImpactAnalysis:
        if not categories:
            return ImpactAnalysis(status="no_impact")

        summaries = [
            CategorySummary(
                category=label,
                count=acc.count,
                impacts=list(acc.impacts),
                impact_level=acc.level,
            )
            for label, acc in categories.items()
        ]
        # sorted() is stable: equal totals keep discovery order
        summaries = sorted(summaries, key=lambda s: s.total_impact, reverse=True)

        return ImpactAnalysis(status="impact_found", categories=summaries)


def is_derogatory(account: Account) -> bool:
    """Whether an account carries any negative signal"""
    return (
        account.is_derogatory
        or account.is_collection
        or account.is_charge_off
        or account.past_due_amount > 0
        or account.current_rating_code in DEROGATORY_RATING_CODES
        or account.charge_off_date is not None
    )


def classify_derogatory(account: Account) -> tuple[str, int, str]:
    """
    Pick the single category a derogatory account falls in.

    Priority (first match wins): charge-off, collection, past due, then the
    current rating code from most to least severe.

    Returns: (category, impact_points, impact_level)
    """
    if account.is_charge_off:
        return "Charge-offs", 12, HIGH
    if account.is_collection:
        return "Collections", 10, HIGH
    if account.past_due_amount > 0:
        if account.past_due_amount > 1000:
            return "Past Due Accounts", 8, MEDIUM
        return "Past Due Accounts", 5, LOW

    rating = account.current_rating_code
    if rating in ("8", "9"):
        return "Serious Delinquencies", 10, HIGH
    if rating in ("6", "7"):
        return "90+ Day Lates", 8, HIGH
    if rating in ("4", "5"):
        return "60+ Day Lates", 6, MEDIUM
    if rating in ("2", "3"):
        return "30+ Day Lates", 4, LOW

    return "Late Payments", 8, LOW


def is_open_revolving(account: Account) -> bool:
    return account.account_type == "Revolving" and (
        account.status_type == "Open" or not account.is_closed
    )


def account_utilization(account: Account) -> Optional[float]:
    """Balance as a percentage of the credit limit; None without a positive limit"""
    if account.credit_limit <= 0:
        return None
    return account.balance / account.credit_limit * 100


def _tier(utilization: float, points: tuple[int, int, int, int]) -> int:
    """Map a utilization over the threshold to points for >90, >70, >50, else"""
    if utilization > 90:
        return points[0]
    if utilization > 70:
        return points[1]
    if utilization > 50:
        return points[2]
    return points[3]


def _merge(categories: Dict[str, _CategoryAccumulator], label: str, impact: int, level: str) -> None:
    """Fold one signal into its category; the level only ever moves up"""
    acc = categories.setdefault(label, _CategoryAccumulator(level=level))
    acc.count += 1
    acc.impacts.append(impact)
    if _LEVEL_RANK[level] > _LEVEL_RANK[acc.level]:
        acc.level = level


def analyze_report(report: Optional[CreditReport], today: Optional[date] = None) -> ImpactAnalysis:
    """Main entry point: run a fresh analyzer over one report"""
    return ImpactAnalyzer(today=today).analyze(report)
