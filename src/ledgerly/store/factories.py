"""Factory functions for creating transaction stores."""

from pathlib import Path
from typing import Optional

from ledgerly.config import transactions_file_path
from ledgerly.store.scheduling import Scheduler
from ledgerly.store.storage import JSONFileStorage
from ledgerly.store.transaction_store import DEFAULT_DEBOUNCE_SECONDS, TransactionRecordStore


def create_transaction_store(
    data_dir: Optional[str | Path] = None,
    scheduler: Optional[Scheduler] = None,
    debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
) -> TransactionRecordStore:
    """Create a JSON-file backed transaction store.

    Args:
        data_dir: Writable storage location (see ``ledgerly.config.resolve_data_dir``)
        scheduler: Scheduler for debounced saves (defaults to ThreadingScheduler)
        debounce_seconds: Quiet interval before a change is written

    Returns:
        TransactionRecordStore; call ``initialize`` on it to load prior state
    """
    storage = JSONFileStorage(transactions_file_path(data_dir))
    return TransactionRecordStore(
        storage=storage, scheduler=scheduler, debounce_seconds=debounce_seconds
    )
