"""Aggregates derived from the transaction list.

Everything here is a pure function of a transaction sequence: views
recompute these whenever the store publishes a new snapshot.
"""

from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Sequence, Union

from dateutil.relativedelta import relativedelta

from ledgerly.domain.entities import MonthSummary, Transaction

ZERO = Decimal("0")


def month_interval(
    reference: Union[date, datetime], offset: int = 0
) -> tuple[datetime, datetime]:
    """Return the half-open [start, end) interval of a calendar month.

    Args:
        reference: Any moment inside the base month
        offset: Months to shift from the base month (-1 is the previous month)

    Returns:
        Tuple of (start, end) where end is the first instant of the next month
    """
    start = datetime(reference.year, reference.month, 1) + relativedelta(months=offset)
    return start, start + relativedelta(months=1)


def transactions_in(
    transactions: Iterable[Transaction], start: datetime, end: datetime
) -> list[Transaction]:
    """Filter transactions dated in [start, end), keeping their order."""
    return [txn for txn in transactions if start <= txn.date < end]


def total_balance(transactions: Iterable[Transaction]) -> Decimal:
    return sum((txn.amount for txn in transactions), ZERO)


def total_income(transactions: Iterable[Transaction]) -> Decimal:
    return sum((txn.amount for txn in transactions if txn.amount > 0), ZERO)


def total_expense(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of expenses as a positive magnitude."""
    return -sum((txn.amount for txn in transactions if txn.amount < 0), ZERO)


def month_summary(
    transactions: Sequence[Transaction],
    reference: Union[date, datetime],
    offset: int = 0,
) -> MonthSummary:
    """Income, expense and balance for one month."""
    start, end = month_interval(reference, offset)
    in_month = transactions_in(transactions, start, end)
    return MonthSummary(
        start=start,
        end=end,
        income=total_income(in_month),
        expense=total_expense(in_month),
    )


def monthly_expense_total(
    transactions: Sequence[Transaction],
    reference: Union[date, datetime],
    offset: int = 0,
) -> Decimal:
    """Total spent in a month, as a positive magnitude."""
    start, end = month_interval(reference, offset)
    return total_expense(transactions_in(transactions, start, end))


def group_by_day(
    transactions: Iterable[Transaction],
) -> list[tuple[date, list[Transaction]]]:
    """Group transactions by calendar day, newest day first.

    Within a day the input order is preserved, so feeding the store snapshot
    keeps the store's ordering.
    """
    grouped: dict[date, list[Transaction]] = defaultdict(list)
    for txn in transactions:
        grouped[txn.date.date()].append(txn)
    return sorted(grouped.items(), key=lambda item: item[0], reverse=True)
