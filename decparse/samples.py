"""Built-in inputs for the ``samples`` command and the default report."""

from __future__ import annotations

DECIMAL_SAMPLES = [
    "123",
    "-456",
    "+789",
    "123.45",
    "-123.45",
    "+123.45",
    "12.3.4",
    "-",
    "+",
    "abc",
]

EXPRESSION_SAMPLES = [
    "10.5 + 20.3",
    "-15.2 * 3.7",
    "100 - -50",
    "-25.5 / 5",
    "123",
]
