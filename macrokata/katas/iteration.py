"""Nested loops, any-of conditions, map literals and adjacency lists."""

from __future__ import annotations

import pprint
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")

SUCCESS_MESSAGE = "Yay, the if statement worked."


@dataclass
class Coordinate:
    """A point on a grid."""

    x: int
    y: int

    def show(self) -> None:
        """Print the coordinate as ``(x, y)``."""
        print(f"({self.x}, {self.y})")


def for_2d(
    xs: Iterable[Any], ys: Iterable[Any], body: Callable[[Any, Any], R]
) -> list[R]:
    """Call ``body(x, y)`` for every ``y`` within every ``x``; return the results.

    ``ys`` is gathered once, so it may be an iterator and is still walked
    in full for each ``x``.
    """
    inner = tuple(ys)
    return [body(x, y) for x in xs for y in inner]


def if_any(conditions: Iterable[object], block: Callable[[], R]) -> R | None:
    """Run ``block`` if any condition is true and return its result.

    At least one condition is required.
    """
    values = tuple(conditions)
    if not values:
        raise ValueError("if_any needs at least one condition")
    if any(values):
        return block()
    return None


def hashmap(*args: tuple[K, V]) -> dict[K, V]:
    """Build a dict from ``(key, value)`` pairs; later keys replace earlier ones."""
    result: dict[K, V] = {}
    for key, value in args:
        result[key] = value
    return result


def graph(
    adjacency: Mapping[K, Iterable[V]] | Iterable[tuple[K, Iterable[V]]],
) -> list[tuple[K, V]]:
    """Flatten an adjacency list into ``(from, to)`` edges, in order."""
    entries = adjacency.items() if isinstance(adjacency, Mapping) else adjacency
    return [(source, target) for source, targets in entries for target in targets]


def demo() -> None:
    """Run exercises five to eight, printing what each produces."""
    for_2d(range(1, 5), range(2, 7), lambda row, col: Coordinate(x=col, y=row).show())

    values = [1, 3, 5]
    for_2d(values, values, lambda x, y: Coordinate(x=x, y=y).show())

    if_any([False, 0 == 1, True], lambda: print(SUCCESS_MESSAGE))

    value = "my_string"
    print(pprint.pformat(hashmap(("hash", "map"), ("Key", value))))

    my_graph = graph(
        [
            (1, (2, 3, 4, 5)),
            (2, (1, 3)),
            (3, (2,)),
            (4, ()),
            (5, (1, 2, 3)),
        ]
    )
    print(pprint.pformat(my_graph))