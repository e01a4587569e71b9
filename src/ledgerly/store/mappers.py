"""Mapper functions between Transaction entities and JSON records.

This layer isolates the on-disk field layout, so the entity can evolve
without touching the storage backend.

Record layout::

    {"id": "<uuid>", "date": "<ISO 8601>", "amount": -500.25,
     "categoryKey": "food", "note": null, "payment": "Card"}
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping, Union

from dateutil import parser as date_parser

from ledgerly.domain.entities import Transaction


def amount_to_json(amount: Decimal) -> Union[int, Decimal]:
    """Render an amount for the JSON writer.

    Integral amounts become ints. Anything else stays a Decimal, which the
    storage backend writes out digit for digit.
    """
    if not amount.is_finite():
        raise ValueError(f"Amount must be a finite number, got {amount}")
    if amount == amount.to_integral_value():
        return int(amount)
    return amount


def amount_from_json(value: Any) -> Decimal:
    """Read a JSON number back as a Decimal.

    Floats go through ``str`` so that ``-12.5`` becomes ``Decimal("-12.5")``
    rather than its binary expansion.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"Amount must be a number, got {value!r}")
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def date_from_json(value: str) -> datetime:
    """Parse an ISO 8601 timestamp into naive local time.

    Timestamps carrying an offset are converted to local time, so every
    date in the store compares with every other.
    """
    parsed = date_parser.isoparse(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _optional_str(record: Mapping[str, Any], key: str):
    value = record.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"Field '{key}' must be a string or null, got {value!r}")
    return value


def transaction_to_record(txn: Transaction) -> dict[str, Any]:
    """Convert a Transaction entity to a JSON-ready dict."""
    return {
        "id": str(txn.id),
        "date": txn.date.isoformat(),
        "amount": amount_to_json(txn.amount),
        "categoryKey": txn.category_key,
        "note": txn.note,
        "payment": txn.payment,
    }


def transaction_from_record(record: Mapping[str, Any]) -> Transaction:
    """Convert a decoded JSON record to a Transaction entity.

    Optional fields may be null or absent.

    Raises:
        KeyError: If a required field is missing
        ValueError, TypeError: If a field has the wrong shape
    """
    if not isinstance(record, Mapping):
        raise TypeError(f"Transaction record must be an object, got {type(record).__name__}")
    if not isinstance(record["date"], str):
        raise TypeError(f"Field 'date' must be a string, got {record['date']!r}")
    return Transaction(
        id=uuid.UUID(str(record["id"])),
        date=date_from_json(record["date"]),
        amount=amount_from_json(record["amount"]),
        category_key=_optional_str(record, "categoryKey"),
        note=_optional_str(record, "note"),
        payment=_optional_str(record, "payment"),
    )
