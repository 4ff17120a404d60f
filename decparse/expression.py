"""Two-operand expression parsing.

An operator character only counts as a split point when it is not at
position 0 and is not directly preceded by another operator character.
Those two rules are what tell a leading sign apart from an operator:

    "-25.5 / 5"   position 0 '-' is the sign of the left operand
    "100 - -50"   the second '-' follows an operator, so it is the sign of
                  the right operand

Candidates are tried left to right. A candidate whose operands do not both
parse is passed over and scanning continues; the first candidate whose
operands both parse wins. With no winning candidate, the whole trimmed input
is tried as a single literal.
"""

from __future__ import annotations

from typing import Iterator, Optional

from decparse.literals import parse_decimal
from decparse.models import (
    OPERATOR_CHARS,
    Expression,
    Operation,
    Operator,
    Single,
    SplitAttempt,
)


def iter_split_points(text: str) -> Iterator[tuple[int, Operator]]:
    """Yield (position, operator) for every admissible split point, in order."""
    for i in range(1, len(text)):
        ch = text[i]
        if ch not in OPERATOR_CHARS:
            continue
        if text[i - 1] in OPERATOR_CHARS:
            continue
        yield i, Operator(ch)


def _attempt_split(text: str, position: int, operator: Operator) -> SplitAttempt:
    """Split ``text`` around ``position`` and parse both trimmed operands."""
    left_text = text[:position].strip()
    right_text = text[position + 1:].strip()
    return SplitAttempt(
        position=position,
        operator=operator,
        left_text=left_text,
        right_text=right_text,
        left=parse_decimal(left_text),
        right=parse_decimal(right_text),
    )


def trace_expression(text: str) -> list[SplitAttempt]:
    """List the split attempts parse_expression makes, up to the first success.

    An empty list means no operator candidate exists at all. A list whose
    last entry did not succeed means every candidate was passed over.
    """
    attempts: list[SplitAttempt] = []
    for position, operator in iter_split_points(text):
        attempt = _attempt_split(text, position, operator)
        attempts.append(attempt)
        if attempt.succeeded:
            break
    return attempts


def parse_expression(text: str) -> Optional[Expression]:
    """Parse ``text`` into an Operation, a Single, or None when rejected.

    Examples:
        '10.5 + 20.3' → Operation(Decimal(+,10,5), ADD, Decimal(+,20,3))
        '100 - -50'   → Operation(Whole(+,100), SUB, Whole(-,50))
        ' 123 '       → Single(Whole(+,123))
        '1 + + 2'     → None
    """
    for position, operator in iter_split_points(text):
        attempt = _attempt_split(text, position, operator)
        if attempt.succeeded:
            return Operation(left=attempt.left, operator=operator, right=attempt.right)

    number = parse_decimal(text.strip())
    if number is None:
        return None
    return Single(number=number)
