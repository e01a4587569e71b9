"""Static category catalog.

The catalog is process-wide constant data: the expense grid shown when
logging a spending, and the shorter list of income kinds.
"""

from typing import Optional

from ledgerly.domain.entities import Category
from ledgerly.domain.errors import NotFoundError, category_not_found

EXPENSE_CATEGORIES: tuple[Category, ...] = (
    Category(key="groceries", label="Groceries", symbol="cart"),
    Category(key="food", label="Cafe", symbol="fork.knife"),
    Category(key="transport", label="Transport", symbol="bus"),
    Category(key="car", label="Car", symbol="car"),
    Category(key="home", label="Home", symbol="house"),
    Category(key="health", label="Health", symbol="cross.case"),
    Category(key="games", label="Games", symbol="gamecontroller"),
    Category(key="travel", label="Travel", symbol="airplane"),
    Category(key="phone", label="Phone", symbol="phone"),
    Category(key="savings", label="Savings", symbol="banknote"),
)

INCOME_CATEGORIES: tuple[Category, ...] = (
    Category(key="salary", label="Salary", symbol="banknote"),
    Category(key="bonus", label="Bonus", symbol="gift.fill"),
    Category(key="freelance", label="Freelance", symbol="laptopcomputer"),
    Category(key="investment", label="Investments", symbol="chart.line.uptrend.xyaxis"),
    Category(key="other_income", label="Other", symbol="circle.grid.2x2"),
)

CATEGORIES_BY_KEY: dict[str, Category] = {
    category.key: category for category in EXPENSE_CATEGORIES + INCOME_CATEGORIES
}

PAYMENT_METHODS: tuple[str, ...] = ("Card", "Cash", "Account")
DEFAULT_PAYMENT_METHOD = "Card"

INCOME_SOURCES: tuple[str, ...] = ("Salary", "Bonus", "Freelance", "Investments", "Other")
DEFAULT_INCOME_SOURCE = "Salary"

# Label shown for transactions without a category (plain income).
UNCATEGORIZED_INCOME_LABEL = "Income"


def get_category(key: Optional[str]) -> Optional[Category]:
    """Look up a category by key, returning None for unknown or missing keys."""
    if key is None:
        return None
    return CATEGORIES_BY_KEY.get(key)


def require_category(key: str) -> Category:
    """Look up a category by key.

    Raises:
        NotFoundError: If the key is not in the catalog
    """
    category = get_category(key)
    if category is None:
        raise NotFoundError(category_not_found(key))
    return category


def category_label(key: Optional[str]) -> str:
    """Display label for a transaction's category key."""
    category = get_category(key)
    return category.label if category is not None else UNCATEGORIZED_INCOME_LABEL
