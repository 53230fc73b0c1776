"""Building values out of smaller helpers: digits, numbers, pairs and maps."""

from __future__ import annotations

import pprint
from typing import TypeVar

K = TypeVar("K")
V = TypeVar("V")

_DIGITS = {
    "zero": "0",
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
}


def digit(word: str) -> str:
    """Return the digit character spelled by ``word``."""
    try:
        return _DIGITS[word]
    except KeyError:
        raise ValueError(f"no rule matches {word!r}") from None


def number(*args: str) -> str:
    """Concatenate the digits spelled by one or more words."""
    if not args:
        raise ValueError("number needs at least one word")
    return "".join(digit(word) for word in args)


def pair(key: K, value: V) -> tuple[K, V]:
    """Return ``(key, value)``."""
    return (key, value)


def hashmap(*args: tuple[K, V]) -> dict[K, V]:
    """Build a dict from ``(key, value)`` entries; later keys replace earlier ones."""
    return dict(pair(key, value) for key, value in args)


def demo() -> None:
    """Run exercise ten and its archived variant, printing the results."""
    my_number = int(number("nine", "three", "seven", "two", "zero"))
    my_other_number = int(number("one", "two", "four", "six", "eight", "zero"))
    print(my_number + my_other_number)

    print(pprint.pformat(pair("a", 1)))
    value = "value"
    print(pprint.pformat(hashmap(("Hash", "map"), ("Key", value))))