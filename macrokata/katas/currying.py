"""Curried functions built one argument at a time."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def _print_curried_argument(value: Any) -> None:
    print(f"Currying value {value!r}.")


def curry(
    arity: int,
    body: Callable[..., Any],
    on_argument: Callable[[Any], Any] | None = _print_curried_argument,
) -> Any:
    """Turn ``body`` of ``arity`` arguments into a chain of one-argument calls.

    Each call passes its argument to ``on_argument`` (by default it is
    printed; ``None`` disables this) and returns the next function in the
    chain. Once all arguments are collected, ``body`` is called with them
    and its result returned. With ``arity`` zero, ``body()`` is returned at
    once. Every function in the chain may be called more than once.
    """
    if arity < 0:
        raise ValueError("arity must not be negative")

    def collect(collected: tuple[Any, ...]) -> Any:
        if len(collected) == arity:
            return body(*collected)

        def take(argument: Any) -> Any:
            if on_argument is not None:
                on_argument(argument)
            return collect((*collected, argument))

        return take

    return collect(())


def get_example_vec() -> list[int]:
    """Return the numbers the exercise filters."""
    return [1, 3, 5, 6, 7, 9]


def _format_numbers(numbers: list[int]) -> str:
    if not numbers:
        return "[]"
    items = "".join(f"    {number},\n" for number in numbers)
    return f"[\n{items}]"


def _print_numbers(numbers: list[int]) -> None:
    print(f"Resulting Numbers: {_format_numbers(numbers)}")


def demo() -> None:
    """Run exercise eleven, printing each curried argument and the results."""
    print("=== defining functions ===")
    is_between = curry(3, lambda low, high, item: low < item < high)

    def filter_between(low: int, high: int, values: list[int]) -> list[int]:
        between = is_between(low)(high)
        return [item for item in values if between(item)]

    curry_filter_between = curry(3, filter_between)

    print("=== create between_3_7 ===")
    between_3_7 = curry_filter_between(3)(7)
    print("=== create between_5_10 ===")
    between_5_10 = curry_filter_between(5)(10)

    my_vec = get_example_vec()

    print("=== call between_3_7 ===")
    _print_numbers(between_3_7(my_vec))

    print("=== call between_5_10 ===")
    _print_numbers(between_5_10(my_vec))