"""Demo data generation.

Used to fill an empty store on first launch of a demo build. The generator
is a pure function of its random source so tests can pass a seeded
``random.Random``.
"""

import random
import uuid
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from ledgerly.domain.categories import DEFAULT_PAYMENT_METHOD, EXPENSE_CATEGORIES
from ledgerly.domain.entities import Transaction

SAMPLE_COUNT = 120
SAMPLE_WINDOW_DAYS = 120
EXPENSE_RANGE = (100, 7000)
INCOME_RANGE = (3000, 40000)
INCOME_NOTE = "Salary"


def generate_sample_transactions(
    rng: random.Random,
    now: Optional[datetime] = None,
    count: int = SAMPLE_COUNT,
    window_days: int = SAMPLE_WINDOW_DAYS,
) -> list[Transaction]:
    """Generate synthetic transactions spread over a trailing window.

    Args:
        rng: Random source; a seeded ``random.Random`` gives reproducible output
        now: End of the window (defaults to the current time)
        count: Number of transactions to generate
        window_days: Length of the trailing window in days

    Returns:
        List of transactions in generation order (not sorted)
    """
    now = now or datetime.now()
    start = now - timedelta(days=window_days)
    generated = []

    for _ in range(count):
        txn_date = start + timedelta(days=rng.randint(0, window_days))
        if rng.random() < 0.5:
            category = rng.choice(EXPENSE_CATEGORIES)
            amount = -Decimal(rng.randint(*EXPENSE_RANGE))
            fields = dict(category_key=category.key, note=None, payment=DEFAULT_PAYMENT_METHOD)
        else:
            amount = Decimal(rng.randint(*INCOME_RANGE))
            fields = dict(category_key=None, note=INCOME_NOTE, payment=None)
        # Derive ids from the rng as well so the whole batch is reproducible
        txn_id = uuid.UUID(int=rng.getrandbits(128), version=4)
        generated.append(Transaction(id=txn_id, date=txn_date, amount=amount, **fields))

    return generated
