"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(value: object) -> Decimal:
    """Parse a JSON number or an amount string into a Decimal.

    Handles:
    - ints and floats as decoded from JSON (100, 12.5)
    - "123.45", "$123.45", "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        value: Raw amount value

    Returns:
        Decimal amount

    Raises:
        ValueError: If the value is not a finite number
    """
    # bool is an int subclass; true/false are never amounts
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Could not parse amount {value!r}")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        # Go through str so 0.1 stays 0.1
        amount = Decimal(str(value))
    elif isinstance(value, str):
        amount = _parse_amount_string(value)
    else:
        raise ValueError(f"Could not parse amount {value!r}")

    if not amount.is_finite():
        raise ValueError(f"Amount must be a finite number, got {value!r}")
    return amount


def _parse_amount_string(amount_str: str) -> Decimal:
    if not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"[$€£¥]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount
