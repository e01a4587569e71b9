"""One-time cleanup performed on the first launch of an installation."""

from ledgerly.database.base import SettingsStore
from ledgerly.logging_setup import get_logger
from ledgerly.store.transaction_store import TransactionRecordStore

FIRST_CLEAN_DONE_SETTING = "first_clean_done"

_logger = get_logger("ledgerly.first_run")


def is_first_run(settings: SettingsStore) -> bool:
    return settings.get_setting(FIRST_CLEAN_DONE_SETTING) != "1"


def mark_first_run_done(settings: SettingsStore) -> None:
    settings.set_setting(FIRST_CLEAN_DONE_SETTING, "1")


def perform_first_run_cleanup(store: TransactionRecordStore, settings: SettingsStore) -> bool:
    """Reset the store once per installation.

    Returns:
        True if the reset happened on this call
    """
    if not is_first_run(settings):
        return False
    _logger.info("First run: clearing transactions")
    store.reset()
    mark_first_run_done(settings)
    return True
