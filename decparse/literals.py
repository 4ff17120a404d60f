"""Signed decimal literal parsing and the digit checks it is built on.

All three functions are pure. Malformed input is rejected by returning
False/None; nothing here raises for bad text.
"""

from __future__ import annotations

from typing import Optional

from decparse.models import Decimal, DecimalNumber, Sign, Whole


def is_digit(ch: str) -> bool:
    """True iff ``ch`` is a single ASCII character '0'-'9'.

    str.isdigit() is not used: it also accepts non-ASCII digits like '²'.
    """
    return len(ch) == 1 and "0" <= ch <= "9"


def is_number(text: str) -> bool:
    """True iff ``text`` is non-empty and made only of ASCII digits.

    Scans left to right and stops at the first non-digit.
    """
    if not text:
        return False
    return all(is_digit(ch) for ch in text)


def _split_sign(text: str) -> tuple[Sign, str]:
    """Strip at most one leading '+' or '-'."""
    if text.startswith("-"):
        return Sign.NEGATIVE, text[1:]
    if text.startswith("+"):
        return Sign.POSITIVE, text[1:]
    return Sign.POSITIVE, text


def parse_decimal(text: str) -> Optional[DecimalNumber]:
    """Parse a signed integer or fractional literal.

    Args:
        text: Candidate literal, e.g. '-123.45'. Surrounding whitespace is
            not stripped here.

    Returns:
        Whole or Decimal on success, None if the text is not a literal.
        '', '-', '+', '.5', '5.', '12.3.4' and 'abc' are all rejected.
    """
    if not text:
        return None

    sign, body = _split_sign(text)
    if not body:
        return None

    # Only the first '.' splits; any later one lands in the fraction and fails
    whole, dot, fraction = body.partition(".")
    if dot:
        if is_number(whole) and is_number(fraction):
            return Decimal(sign=sign, whole=whole, fraction=fraction)
        return None

    if is_number(body):
        return Whole(sign=sign, value=body)
    return None
