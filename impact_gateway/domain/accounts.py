"""Tradeline presentation helpers shared by account summaries"""

ACCOUNT_TYPE_DISPLAY = {
    "Revolving": "Credit Card",
    "Installment": "Loan",
    "Mortgage": "Mortgage",
    "OpenAccount": "Open Account",
}


def account_type_display(account_type: str) -> str:
    """Human-readable account type; unknown types pass through"""
    return ACCOUNT_TYPE_DISPLAY.get(account_type, account_type)
