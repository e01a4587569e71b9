"""Test helpers shared across test modules."""

import uuid
from datetime import datetime
from decimal import Decimal

from ledgerly.domain.entities import Transaction
from ledgerly.store.storage import JSONFileStorage, StorageError


class RecordingStorage(JSONFileStorage):
    """JSON storage that remembers every snapshot it was asked to save."""

    def __init__(self, path):
        super().__init__(path)
        self.saved: list[tuple[Transaction, ...]] = []

    def save(self, transactions):
        self.saved.append(tuple(transactions))
        super().save(transactions)


class FailingStorage(RecordingStorage):
    """Storage whose writes always fail."""

    def save(self, transactions):
        self.saved.append(tuple(transactions))
        raise StorageError("disk full")


def make_transaction(
    date=datetime(2025, 9, 21, 12, 0),
    amount="-500",
    category_key="food",
    note=None,
    payment=None,
    id=None,
) -> Transaction:
    """Build a transaction with readable defaults."""
    return Transaction(
        id=uuid.UUID(id) if isinstance(id, str) else (id or uuid.uuid4()),
        date=date,
        amount=Decimal(amount),
        category_key=category_key,
        note=note,
        payment=payment,
    )
