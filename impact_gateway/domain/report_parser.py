"""Normalize a bureau credit report document into domain models"""

import logging
from datetime import date, datetime
from typing import Any, List, Mapping, Optional

from impact_gateway.domain.exceptions import ReportFormatError
from impact_gateway.domain.models import Account, CreditReport, Inquiry

logger = logging.getLogger(__name__)

# @CreditFileID -> bureau
BUREAU_FILE_IDS = {
    "EA01": "Equifax",
    "RA01": "Experian",
    "TA01": "TransUnion",
}


def parse_credit_report(document: Any, default_report_date: Optional[date] = None) -> Optional[CreditReport]:
    """
    Convert a CREDIT_RESPONSE document into a CreditReport.

    Returns None when the response or its liability section is absent, so
    callers can tell "not analyzed" apart from "nothing found".

    Raises:
        ReportFormatError: If the document itself is not a mapping
    """
    if not isinstance(document, Mapping):
        raise ReportFormatError(f"Credit report must be an object, got {type(document).__name__}")

    response = document.get("CREDIT_RESPONSE")
    if not isinstance(response, Mapping) or response.get("CREDIT_LIABILITY") is None:
        return None

    accounts = [
        parse_account(item)
        for item in _as_list(response.get("CREDIT_LIABILITY"))
        if isinstance(item, Mapping)
    ]

    inquiries = []
    for item in _as_list(response.get("CREDIT_INQUIRY")):
        if not isinstance(item, Mapping):
            continue
        bureau = BUREAU_FILE_IDS.get(str(item.get("@CreditFileID") or ""))
        if bureau is None:
            continue
        inquiries.append(parse_inquiry(item, bureau))

    return CreditReport(
        accounts=accounts,
        inquiries=inquiries,
        report_date=parse_date(response.get("@CreditReportFirstIssuedDate")) or default_report_date,
    )


def parse_account(liability: Mapping) -> Account:
    """Map one CREDIT_LIABILITY entry to an Account"""
    creditor = liability.get("_CREDITOR") or {}
    rating = liability.get("_CURRENT_RATING") or {}
    pattern = liability.get("_PAYMENT_PATTERN") or {}

    rating_code = rating.get("@_Code") if isinstance(rating, Mapping) else None

    return Account(
        creditor_name=_text(creditor.get("@_Name") if isinstance(creditor, Mapping) else None, "Unknown Creditor"),
        account_identifier=str(liability.get("@_AccountIdentifier") or ""),
        account_type=str(liability.get("@_AccountType") or ""),
        status_type=str(liability.get("@_AccountStatusType") or ""),
        is_closed=parse_indicator(liability.get("@IsClosedIndicator")),
        is_derogatory=parse_indicator(liability.get("@_DerogatoryDataIndicator")),
        is_collection=parse_indicator(liability.get("@IsCollectionIndicator")),
        is_charge_off=parse_indicator(liability.get("@IsChargeoffIndicator")),
        past_due_amount=parse_amount(liability.get("@_PastDueAmount")),
        current_rating_code=str(rating_code).strip() if rating_code not in (None, "") else None,
        balance=parse_amount(_first_present(liability.get("BalanceAmount"), liability.get("@_UnpaidBalanceAmount"))),
        credit_limit=parse_amount(liability.get("@_CreditLimitAmount")),
        opened_date=parse_date(_first_present(liability.get("AccountOpenedDate"), liability.get("@_AccountOpenedDate"))),
        charge_off_date=parse_date(liability.get("@_ChargeOffDate")),
        payment_pattern=str((pattern.get("@_Data") if isinstance(pattern, Mapping) else None) or ""),
    )


def parse_inquiry(item: Mapping, bureau: str) -> Inquiry:
    """Map one CREDIT_INQUIRY entry to an Inquiry"""
    return Inquiry(
        bureau=bureau,
        requester_name=_text(item.get("@_Name"), "Unknown Company"),
        inquiry_date=parse_date(item.get("@_Date")),
        business_type=_text(item.get("@CreditBusinessType"), "Unknown"),
    )


def parse_indicator(value: Any) -> bool:
    """Bureau Y/N flags; booleans are accepted as-is"""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().upper() == "Y"
    return False


def parse_amount(value: Any) -> int:
    """Whole-dollar amount; absent or malformed values count as zero"""
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        return 0
    try:
        return int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        logger.debug("Ignoring malformed amount %r", value)
        return 0


def parse_date(value: Any) -> Optional[date]:
    """ISO date (optionally with time) or year-month; malformed values are None"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    try:
        return datetime.strptime(text, "%Y-%m").date()
    except ValueError:
        logger.debug("Ignoring malformed date %r", value)
        return None


def _as_list(value: Any) -> List[Any]:
    """Bureau sections hold a single object when there is only one entry"""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _text(value: Any, default: str) -> str:
    """Free-text field as a string; objects, lists and blanks take the default"""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return default
    text = str(value).strip()
    return text or default


def _first_present(*values: Any) -> Any:
    """First value that is neither null nor blank; bureaus fill one of two aliases"""
    for value in values:
        if value is not None and value != "":
            return value
    return None
