"""In-memory transaction list with debounced persistence.

The store is the single owner of the transaction list. Mutations and reads
happen on the caller's thread and never wait for disk I/O; every change
schedules a save through a ``Scheduler`` after a quiet interval, and a newer
change cancels a save that has not fired yet.
"""

import random
import threading
from datetime import datetime
from decimal import Decimal
from typing import Callable, Iterable, Optional, Sequence

from ledgerly.domain.entities import Transaction
from ledgerly.domain.errors import ConflictError, duplicate_transaction_id
from ledgerly.domain.seed import generate_sample_transactions
from ledgerly.logging_setup import get_logger
from ledgerly.store.scheduling import ScheduledTask, Scheduler, ThreadingScheduler
from ledgerly.store.storage import StorageError, TransactionStorage

DEFAULT_DEBOUNCE_SECONDS = 0.5

Listener = Callable[[tuple[Transaction, ...]], None]

_logger = get_logger("ledgerly.store")


def sort_transactions(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Order transactions newest first, ties broken by ascending id string."""
    by_id = sorted(transactions, key=lambda txn: str(txn.id))
    # sorted() is stable, so equal dates keep the id order from the first pass
    return sorted(by_id, key=lambda txn: txn.date, reverse=True)


class Subscription:
    """Handle returned by ``TransactionRecordStore.subscribe``."""

    def __init__(self, store: "TransactionRecordStore", listener: Listener):
        self._store = store
        self.listener = listener

    def unsubscribe(self) -> None:
        self._store.unsubscribe(self.listener)


class TransactionRecordStore:
    """Authoritative, sorted list of transactions for the running process."""

    def __init__(
        self,
        storage: TransactionStorage,
        scheduler: Optional[Scheduler] = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ):
        """Initialize the store.

        Args:
            storage: Backend the snapshot is persisted to
            scheduler: Runs deferred saves (defaults to a ThreadingScheduler)
            debounce_seconds: Quiet interval before a change is written
        """
        self.storage = storage
        self.scheduler = scheduler if scheduler is not None else ThreadingScheduler()
        self.debounce_seconds = debounce_seconds

        self._transactions: tuple[Transaction, ...] = ()
        self._listeners: list[Listener] = []
        self._pending: Optional[ScheduledTask] = None
        # Guards the list and the pending handle against the timer thread
        self._state_lock = threading.RLock()
        # Serializes writes; snapshots are taken while holding it
        self._write_lock = threading.Lock()

    # Reads
    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Current snapshot, newest first."""
        return self._transactions

    def read(self) -> tuple[Transaction, ...]:
        """Return the current snapshot; same as ``transactions``."""
        return self._transactions

    def __len__(self) -> int:
        return len(self._transactions)

    @property
    def has_pending_save(self) -> bool:
        with self._state_lock:
            return self._pending is not None

    # Lifecycle
    def initialize(
        self,
        seed_if_empty: bool = False,
        rng: Optional[random.Random] = None,
        now: Optional[datetime] = None,
    ) -> bool:
        """Load persisted transactions.

        When nothing usable was loaded and ``seed_if_empty`` is set, the list
        is filled with generated sample data which is saved right away.
        Unreadable data is logged and treated like a first run.

        Args:
            seed_if_empty: Generate sample data when no prior state exists
            rng: Random source for sample data
            now: End of the sample data window

        Returns:
            True if prior state was loaded, False otherwise
        """
        loaded = self._load()
        if loaded is not None:
            self._replace(loaded)
            _logger.info("Loaded %d transactions from storage", len(loaded))
            return True

        if seed_if_empty:
            sample = generate_sample_transactions(rng or random.Random(), now=now)
            _logger.info("Seeding %d sample transactions", len(sample))
            self._replace(sample)
            self._schedule_save(0.0)
        return False

    def _load(self) -> Optional[list[Transaction]]:
        try:
            loaded = self.storage.load()
        except StorageError as e:
            _logger.error("Load transactions error: %s", e)
            return None
        if loaded is None:
            _logger.debug("No saved transactions found")
            return None

        unique: dict[str, Transaction] = {}
        for txn in loaded:
            key = str(txn.id)
            if key in unique:
                _logger.warning("Dropping duplicate transaction id %s from storage", key)
                continue
            unique[key] = txn
        return list(unique.values())

    # Mutations
    def add(self, transaction: Transaction) -> None:
        """Insert a transaction and schedule a debounced save.

        The transaction is visible to readers as soon as this returns.

        Raises:
            ConflictError: If a transaction with the same id is already stored
        """
        with self._state_lock:
            if any(txn.id == transaction.id for txn in self._transactions):
                raise ConflictError(duplicate_transaction_id(transaction.id))
            self._transactions = tuple(sort_transactions(self._transactions + (transaction,)))
            snapshot = self._transactions
            self._schedule_save(self.debounce_seconds)
        self._notify(snapshot)

    def add_income(
        self,
        amount: Decimal,
        note: Optional[str] = None,
        date: Optional[datetime] = None,
    ) -> Transaction:
        """Add an uncategorized income transaction and return it."""
        txn = Transaction(
            date=date or datetime.now(),
            amount=abs(Decimal(amount)),
            category_key=None,
            note=note,
            payment=None,
        )
        self.add(txn)
        return txn

    def reset(self) -> None:
        """Remove all transactions and persist the empty list immediately."""
        with self._state_lock:
            self._transactions = ()
            self._schedule_save(0.0)
        _logger.info("Transactions reset")
        self._notify(())

    def _replace(self, transactions: Sequence[Transaction]) -> None:
        with self._state_lock:
            self._transactions = tuple(sort_transactions(transactions))
            snapshot = self._transactions
        self._notify(snapshot)

    # Observers
    def subscribe(self, listener: Listener) -> Subscription:
        """Call ``listener`` with the new snapshot after every change."""
        with self._state_lock:
            self._listeners.append(listener)
        return Subscription(self, listener)

    def unsubscribe(self, listener: Listener) -> None:
        with self._state_lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _notify(self, snapshot: tuple[Transaction, ...]) -> None:
        with self._state_lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(snapshot)

    # Persistence
    def _schedule_save(self, delay: float) -> None:
        with self._state_lock:
            if self._pending is not None:
                self._pending.cancel()
            task: Optional[ScheduledTask] = None

            def fire() -> None:
                with self._state_lock:
                    if self._pending is task:
                        self._pending = None
                self._save_now()

            task = self.scheduler.schedule(delay, fire)
            self._pending = task

    def _save_now(self) -> None:
        with self._write_lock:
            snapshot = self._transactions
            try:
                self.storage.save(snapshot)
            except StorageError as e:
                # In-memory state stays authoritative; the next change retries
                _logger.error("Save transactions error: %s", e)

    def flush(self) -> None:
        """Cancel any pending save and write the current snapshot now."""
        with self._state_lock:
            pending, self._pending = self._pending, None
        if pending is None:
            return
        pending.cancel()
        self._save_now()

    def close(self) -> None:
        """Flush pending changes and stop the scheduler."""
        self.flush()
        self.scheduler.shutdown(wait=True)
