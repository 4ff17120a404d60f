"""Data models for the decparse parser.

Sign and Operator enums, the DecimalNumber variants (Whole, Decimal), the
Expression variants (Single, Operation) and the ParseOutcome/SplitAttempt
records that flow through parser → renderer → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Sign(str, Enum):
    """Sign carried by every parsed decimal literal."""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    @property
    def prefix(self) -> str:
        """Text written in front of the digits ('' or '-')."""
        return "-" if self is Sign.NEGATIVE else ""


class Operator(str, Enum):
    """Binary operators, valued by their literal character."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


OPERATOR_CHARS = frozenset(op.value for op in Operator)


@dataclass(frozen=True)
class Whole:
    """Signed integer literal. Digits are kept as text (leading zeros intact)."""

    sign: Sign
    value: str

    def to_text(self) -> str:
        return f"{self.sign.prefix}{self.value}"

    def to_dict(self) -> dict:
        return {"kind": "whole", "sign": self.sign.value, "value": self.value}


@dataclass(frozen=True)
class Decimal:
    """Signed fractional literal: non-empty whole and fraction digit groups."""

    sign: Sign
    whole: str
    fraction: str

    def to_text(self) -> str:
        return f"{self.sign.prefix}{self.whole}.{self.fraction}"

    def to_dict(self) -> dict:
        return {
            "kind": "decimal",
            "sign": self.sign.value,
            "whole": self.whole,
            "fraction": self.fraction,
        }


DecimalNumber = Union[Whole, Decimal]


@dataclass(frozen=True)
class Single:
    """Expression made of one operand and no operator."""

    number: DecimalNumber

    def to_text(self) -> str:
        return self.number.to_text()

    def to_dict(self) -> dict:
        return {"kind": "single", "number": self.number.to_dict()}


@dataclass(frozen=True)
class Operation:
    """Two operands joined by one binary operator."""

    left: DecimalNumber
    operator: Operator
    right: DecimalNumber

    def to_text(self) -> str:
        return f"{self.left.to_text()} {self.operator.value} {self.right.to_text()}"

    def to_dict(self) -> dict:
        return {
            "kind": "operation",
            "left": self.left.to_dict(),
            "operator": self.operator.value,
            "right": self.right.to_dict(),
        }


Expression = Union[Single, Operation]


def number_from_dict(d: dict) -> DecimalNumber:
    """Deserialize a Whole or Decimal from its to_dict() form."""
    kind = d.get("kind")
    if kind == "whole":
        return Whole(sign=Sign(d["sign"]), value=d["value"])
    if kind == "decimal":
        return Decimal(sign=Sign(d["sign"]), whole=d["whole"], fraction=d["fraction"])
    raise ValueError(f"Not a decimal number kind: {kind!r}")


def expression_from_dict(d: dict) -> Expression:
    """Deserialize a Single or Operation from its to_dict() form."""
    kind = d.get("kind")
    if kind == "single":
        return Single(number=number_from_dict(d["number"]))
    if kind == "operation":
        return Operation(
            left=number_from_dict(d["left"]),
            operator=Operator(d["operator"]),
            right=number_from_dict(d["right"]),
        )
    raise ValueError(f"Not an expression kind: {kind!r}")


@dataclass(frozen=True)
class SplitAttempt:
    """One operator position examined by the expression parser."""

    position: int
    operator: Operator
    left_text: str
    right_text: str
    left: Optional[DecimalNumber] = None
    right: Optional[DecimalNumber] = None

    @property
    def succeeded(self) -> bool:
        return self.left is not None and self.right is not None


@dataclass(frozen=True)
class ParseOutcome:
    """Input text paired with its parsed value, or None when rejected."""

    text: str
    value: Optional[Union[DecimalNumber, Expression]] = None

    @property
    def accepted(self) -> bool:
        return self.value is not None

    @property
    def kind(self) -> str:
        if self.value is None:
            return "rejected"
        return self.value.to_dict()["kind"]

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "input": self.text,
            "accepted": self.accepted,
            "value": self.value.to_dict() if self.value is not None else None,
        }
