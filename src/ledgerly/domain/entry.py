"""Entry flow: validate user input and build transactions for the store.

The store trusts its callers, so everything that can be wrong with a typed-in
amount or a category choice is rejected here.
"""

from datetime import datetime
from typing import Optional

from ledgerly.domain.categories import (
    DEFAULT_INCOME_SOURCE,
    DEFAULT_PAYMENT_METHOD,
    require_category,
)
from ledgerly.domain.entities import Transaction
from ledgerly.domain.errors import ValidationError, invalid_amount, missing_category
from ledgerly.utils.amount_parser import parse_amount


def can_save_entry(amount_text: str, category_key: Optional[str]) -> bool:
    """Return True when the amount is a positive number and a category is chosen."""
    try:
        amount = parse_amount(amount_text)
    except ValueError:
        return False
    if amount <= 0:
        return False
    return bool(category_key)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


def _validated_amount(amount_text: str, category_key: Optional[str]):
    if not category_key:
        raise ValidationError(missing_category())
    try:
        amount = parse_amount(amount_text)
    except ValueError:
        raise ValidationError(invalid_amount(amount_text))
    if amount <= 0:
        raise ValidationError(invalid_amount(amount_text))
    require_category(category_key)
    return amount


def build_expense(
    amount_text: str,
    category_key: Optional[str],
    date: Optional[datetime] = None,
    note: Optional[str] = None,
    payment: Optional[str] = DEFAULT_PAYMENT_METHOD,
) -> Transaction:
    """Build an expense transaction (negative amount).

    Raises:
        ValidationError: If the amount is not positive or the category is missing
        NotFoundError: If the category key is unknown
    """
    amount = _validated_amount(amount_text, category_key)
    return Transaction(
        date=date or datetime.now(),
        amount=-abs(amount),
        category_key=category_key,
        note=_blank_to_none(note),
        payment=_blank_to_none(payment),
    )


def build_income(
    amount_text: str,
    category_key: Optional[str] = "salary",
    date: Optional[datetime] = None,
    note: Optional[str] = None,
    source: Optional[str] = DEFAULT_INCOME_SOURCE,
) -> Transaction:
    """Build an income transaction (positive amount).

    The income source is kept in the ``payment`` field.

    Raises:
        ValidationError: If the amount is not positive or the category is missing
        NotFoundError: If the category key is unknown
    """
    amount = _validated_amount(amount_text, category_key)
    return Transaction(
        date=date or datetime.now(),
        amount=abs(amount),
        category_key=category_key,
        note=_blank_to_none(note),
        payment=_blank_to_none(source),
    )
