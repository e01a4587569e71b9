"""Text rendering shared by CLI commands."""

from decimal import Decimal

from ledgerly.domain.categories import category_label
from ledgerly.domain.entities import Transaction


def format_amount(amount: Decimal, signed: bool = False) -> str:
    """Format an amount with thousands separators and two decimals."""
    if signed:
        return f"{amount:+,.2f}"
    return f"{amount:,.2f}"


def describe_transaction(txn: Transaction) -> str:
    """One-line label: category (or "Income") plus note or payment."""
    label = category_label(txn.category_key)
    detail = txn.note or txn.payment
    if detail:
        return f"{label} ({detail})"
    return label
