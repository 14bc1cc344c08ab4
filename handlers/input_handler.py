"""
handlers/input_handler.py
-------------------------
Parses raw console input into typed values.
A blank answer always parses to None, meaning "nothing entered".
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

_CENTS = Decimal("0.01")


class InputError(ValueError):
    """The user typed something that cannot be converted."""


def parse_text(raw: Optional[str]) -> Optional[str]:
    """Return the trimmed input, or None if it is blank."""
    if raw is None:
        return None
    text = raw.strip()
    return text or None


def parse_int(raw: Optional[str]) -> Optional[int]:
    """
    Convert input to an int.

    Raises:
        InputError: If the input is not blank and not a whole number.
    """
    text = parse_text(raw)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        raise InputError(f"{text} is not a valid number.") from None


def parse_decimal(raw: Optional[str]) -> Optional[Decimal]:
    """
    Convert input to a Decimal with exactly two decimal places ("10" -> 10.00).

    Trailing zeros are fine ("1.230" -> 1.23); anything that would need
    rounding is not.

    Raises:
        InputError: If the input is not a finite number, needs rounding to
            two places, or is too large to hold two places.
    """
    text = parse_text(raw)
    if text is None:
        return None
    try:
        value = Decimal(text)
        scaled = value.quantize(_CENTS)
    except InvalidOperation:
        raise InputError(f"{text} is not a valid decimal number.") from None
    if not value.is_finite() or scaled != value:
        raise InputError(f"{text} is not a valid decimal number.")
    return scaled
