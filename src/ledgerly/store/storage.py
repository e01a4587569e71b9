"""Storage backends for the transaction store."""

import contextlib
import json
import os
import tempfile
from abc import ABC, abstractmethod
from decimal import Decimal
from pathlib import Path
from typing import Optional, Sequence

from ledgerly.domain.entities import Transaction
from ledgerly.logging_setup import get_logger
from ledgerly.store.mappers import transaction_from_record, transaction_to_record

_logger = get_logger("ledgerly.store.storage")


def _json_value(value) -> str:
    # Decimal digits are written verbatim as a JSON number
    if isinstance(value, Decimal):
        return str(value)
    return json.dumps(value, ensure_ascii=False)


def dumps_records(records: Sequence[dict]) -> str:
    """Serialize records as a JSON array, one indented object per record."""
    if not records:
        return "[]"
    objects = []
    for record in records:
        fields = ",\n".join(
            f"    {json.dumps(key)}: {_json_value(value)}" for key, value in record.items()
        )
        objects.append("  {\n" + fields + "\n  }")
    return "[\n" + ",\n".join(objects) + "\n]"


class StorageError(Exception):
    """Reading or writing persisted transactions failed."""


class TransactionStorage(ABC):
    """Abstract full-snapshot storage for the transaction list."""

    @abstractmethod
    def load(self) -> Optional[list[Transaction]]:
        """Load the last saved snapshot.

        Returns:
            The stored transactions, or None when nothing was saved yet

        Raises:
            StorageError: If stored data exists but cannot be read or decoded
        """

    @abstractmethod
    def save(self, transactions: Sequence[Transaction]) -> None:
        """Replace the stored snapshot with ``transactions``.

        Raises:
            StorageError: If the snapshot could not be written
        """


class JSONFileStorage(TransactionStorage):
    """Single JSON file holding an array of transaction records.

    Writes go to a temporary file in the same directory which is then
    ``os.replace``-d over the target, so a reader never sees a partial file.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> Optional[list[Transaction]]:
        if not self.path.exists():
            return None
        try:
            raw = self.path.read_bytes()
            data = json.loads(raw, parse_float=Decimal)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e
        if not isinstance(data, list):
            raise StorageError(
                f"Could not read {self.path}: expected a list of transactions, "
                f"got {type(data).__name__}"
            )
        try:
            return [transaction_from_record(record) for record in data]
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            raise StorageError(f"Could not decode transaction in {self.path}: {e!r}") from e

    def save(self, transactions: Sequence[Transaction]) -> None:
        try:
            payload = dumps_records([transaction_to_record(txn) for txn in transactions])
        except (TypeError, ValueError) as e:
            raise StorageError(f"Could not encode transactions: {e}") from e

        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None:
                with contextlib.suppress(FileNotFoundError):
                    os.unlink(tmp_path)
            raise StorageError(f"Could not write {self.path}: {e}") from e

        _logger.debug("Wrote %d transactions to %s", len(transactions), self.path)
