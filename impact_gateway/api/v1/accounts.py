"""POST /v1/accounts/summary - per-tradeline figures and payment history"""

from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, Depends

from impact_gateway.api.v1.schemas import AccountSummarySchema, AccountsResponse, PaymentHistorySchema, ReportRequest
from impact_gateway.api.dependencies import get_today
from impact_gateway.config import settings
from impact_gateway.domain.accounts import account_type_display
from impact_gateway.domain.impact import account_utilization, is_derogatory
from impact_gateway.domain.payment_history import summarize_payment_history
from impact_gateway.domain.report_parser import parse_credit_report

router = APIRouter()


@router.post("/accounts/summary", response_model=AccountsResponse)
def summarize_accounts(
    request_body: ReportRequest,
    today: date = Depends(get_today),
):
    """
    List each tradeline with its utilization, derogatory flag and decoded
    payment history (last pattern month = report date).
    """
    report = parse_credit_report(request_body.credit_report, settings.default_report_date)

    if report is None:
        return AccountsResponse(status="not_analyzed", accounts=[])

    as_of = report.report_date or request_body.as_of or today

    accounts = []
    for account in report.accounts:
        history = summarize_payment_history(account.payment_pattern, as_of)
        utilization = account_utilization(account)
        accounts.append(
            AccountSummarySchema(
                creditor_name=account.creditor_name,
                account_identifier=account.account_identifier,
                account_type=account.account_type,
                account_type_display=account_type_display(account.account_type),
                balance=account.balance,
                credit_limit=account.credit_limit,
                utilization=round(utilization, 1) if utilization is not None else None,
                is_derogatory=is_derogatory(account),
                payment_history=PaymentHistorySchema(**asdict(history)),
            )
        )

    return AccountsResponse(status="analyzed", accounts=accounts)
