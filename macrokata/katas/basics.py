"""The first exercises: calling a function, matching words, literals and expressions."""

from __future__ import annotations

OUTPUT_MESSAGE = "I should appear as the output."

_NUMBERS = {"one": 1, "two": 2, "three": 3}


def show_output() -> str:
    """Print the message the first exercise expects to see and return it."""
    message = OUTPUT_MESSAGE
    print(message)
    return message


def num(word: str) -> int:
    """Return the number spelled by ``word``; only one, two and three are known."""
    try:
        return _NUMBERS[word]
    except KeyError:
        raise ValueError(f"no rule matches {word!r}") from None


def plus(a, b):
    """Return ``a + b``."""
    return a + b


def square(a):
    """Return ``a * a``."""
    return a * a


def format_result(num: int) -> str:
    """Return the line that reports a result."""
    return f"The result is {num}"


def _print_result(value: int) -> None:
    print(format_result(value))


def demo() -> None:
    """Run the first four exercises, printing what each produces."""
    show_output()
    _print_result(num("one") + num("two") + num("three"))
    _print_result(plus(3, 5))
    _print_result(square(2))
    var = 5
    _print_result(plus(2 * 3, var))
    _print_result(square(var))