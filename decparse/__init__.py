"""decparse — signed decimal and two-operand expression parser.

Recognizes literals like '-123.45' and expressions like '100 - -50', keeping
digits as text, and rejects anything malformed with a plain None.

Usage:
    python -m decparse samples                 # Parse the built-in inputs
    python -m decparse decimal 123 -- -45.6    # Decimal literals only
    python -m decparse expr "10.5 + 20.3"      # Two-operand expressions
    python -m decparse check inputs.txt        # One expression per line
    python -m decparse report                  # Write PARSE_REPORT.md
"""

from decparse.expression import iter_split_points, parse_expression, trace_expression
from decparse.literals import is_digit, is_number, parse_decimal
from decparse.models import (
    Decimal,
    DecimalNumber,
    Expression,
    Operation,
    Operator,
    ParseOutcome,
    Sign,
    Single,
    SplitAttempt,
    Whole,
)

__version__ = "0.1.0"

__all__ = [
    "is_digit",
    "is_number",
    "parse_decimal",
    "parse_expression",
    "iter_split_points",
    "trace_expression",
    "Sign",
    "Operator",
    "Whole",
    "Decimal",
    "DecimalNumber",
    "Single",
    "Operation",
    "Expression",
    "ParseOutcome",
    "SplitAttempt",
]
