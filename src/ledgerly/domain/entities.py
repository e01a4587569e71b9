"""Domain model entities for ledgerly.

These are pure data classes shared by the store, the aggregates and the
command-line front end. They carry no persistence details; the JSON record
layout lives in ``ledgerly.store.mappers``.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Transaction:
    """A single income (positive amount) or expense (negative amount)."""

    date: datetime
    amount: Decimal
    category_key: Optional[str] = None
    note: Optional[str] = None
    payment: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def is_income(self) -> bool:
        return self.amount > 0

    @property
    def is_expense(self) -> bool:
        return self.amount < 0


@dataclass(frozen=True)
class Category:
    """Static catalog entry."""

    key: str
    label: str
    symbol: str


@dataclass(frozen=True)
class MonthSummary:
    """Income and expense totals for one calendar month.

    ``start`` is inclusive and ``end`` exclusive. ``expense`` is a positive
    magnitude, so ``balance == income - expense``.
    """

    start: datetime
    end: datetime
    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class Profile:
    """Signed-in user (or guest) as remembered on this device."""

    user_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    is_guest: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None or self.is_guest
