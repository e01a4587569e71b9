"""Domain layer for ledgerly application."""

from ledgerly.domain.entities import Category, MonthSummary, Profile, Transaction
from ledgerly.domain.profile import ProfileService

__all__ = [
    "Category",
    "MonthSummary",
    "Profile",
    "Transaction",
    "ProfileService",
]
