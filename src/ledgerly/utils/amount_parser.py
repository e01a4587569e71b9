"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation


def parse_amount(amount_str: str) -> Decimal:
    """Parse a typed-in amount into a Decimal.

    Handles the loose formats a numeric keypad produces:
    - "123.45"
    - "123,45" (comma as decimal separator)
    - "1 234,56" (spaces as group separator)
    - "-123.45" (minus only in leading position)
    - "₽ 99" (any other character is ignored)

    Only the first decimal separator is kept; later ones are dropped.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    normalized = amount_str.strip().replace(" ", "").replace(",", ".")

    has_dot = False
    digits = []
    for i, ch in enumerate(normalized):
        if ch.isdigit():
            digits.append(ch)
        elif ch == ".":
            if has_dot:
                continue
            has_dot = True
            digits.append(ch)
        elif ch == "-" and i == 0:
            digits.append(ch)

    cleaned = "".join(digits)
    if cleaned in ("", "-", ".", "-."):
        raise ValueError(f"Could not parse amount '{amount_str}'")

    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
