"""Transaction store and its persistence."""

from ledgerly.store.factories import create_transaction_store
from ledgerly.store.scheduling import ManualScheduler, Scheduler, ThreadingScheduler
from ledgerly.store.storage import JSONFileStorage, StorageError, TransactionStorage
from ledgerly.store.transaction_store import Subscription, TransactionRecordStore

__all__ = [
    "create_transaction_store",
    "ManualScheduler",
    "Scheduler",
    "ThreadingScheduler",
    "JSONFileStorage",
    "StorageError",
    "TransactionStorage",
    "Subscription",
    "TransactionRecordStore",
]
