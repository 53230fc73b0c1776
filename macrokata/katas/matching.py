"""Telling literals, negative literals, blocks and expressions apart."""

from __future__ import annotations

import operator
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Any

_POSITIVE_LITERAL = re.compile(r"\d[\d_]*")
_NEGATIVE_LITERAL = re.compile(r"-\s*(\d[\d_]*)")

_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)


class NumberKind(Enum):
    """What sort of code produced a number."""

    POSITIVE_NUMBER = "PositiveNumber"
    NEGATIVE_NUMBER = "NegativeNumber"
    UNKNOWN_BECAUSE_BLOCK = "UnknownBecauseBlock"
    UNKNOWN_BECAUSE_EXPR = "UnknownBecauseExpr"


@dataclass(frozen=True)
class NumberType:
    """A number together with the kind of code that wrote it."""

    kind: NumberKind
    value: int

    def __str__(self) -> str:
        return f"{self.kind.value}(\n    {self.value},\n)"

    def show(self) -> str:
        """Print the number in its multi-line debug form and return that text."""
        text = str(self)
        print(text)
        return text


def sum_values(first: Any, *args: Any) -> Any:
    """Add together at least two values, left to right."""
    if not args:
        raise ValueError("sum_values needs at least two values")
    return reduce(operator.add, args, first)


def _from_text(source: str) -> NumberType:
    text = source.strip()
    negative = _NEGATIVE_LITERAL.fullmatch(text)
    if negative:
        value = -int(negative.group(1))
        if value < _I32_MIN:
            raise ValueError(f"literal {text!r} is out of range")
        return NumberType(NumberKind.NEGATIVE_NUMBER, value)
    if _POSITIVE_LITERAL.fullmatch(text):
        value = int(text)
        if value > _U32_MAX:
            raise ValueError(f"literal {text!r} is out of range")
        return NumberType(NumberKind.POSITIVE_NUMBER, value)
    raise ValueError(f"no rule matches {source!r}")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def get_number_type(source: str | Callable[[], int] | int) -> NumberType:
    """Classify what the user wrote.

    A string is literal source text (``"5"`` or ``"-5"``); a callable is a
    block, run to get its value; an integer is the value of an expression.
    """
    if isinstance(source, str):
        return _from_text(source)
    if callable(source):
        value = source()
        if not _is_int(value):
            raise TypeError("a block must produce an integer")
        return NumberType(NumberKind.UNKNOWN_BECAUSE_BLOCK, value)
    if _is_int(source):
        return NumberType(NumberKind.UNKNOWN_BECAUSE_EXPR, source)
    raise TypeError(f"cannot classify {source!r}")


def _block() -> int:
    x = 6
    return x


def demo() -> None:
    """Run exercise nine, printing each classification."""
    get_number_type("5").show()
    get_number_type("-5").show()
    get_number_type(_block).show()
    get_number_type(sum_values(1, 2, 3, 4)).show()
    get_number_type(3 + 5 - 1).show()