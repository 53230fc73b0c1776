"""Building an exercise and comparing its expansion with the solution's."""

from __future__ import annotations

import subprocess
import sys

from .diff import unified_diff


class BuildFailed(Exception):
    """The exercise did not build cleanly."""


def _color() -> str:
    return "always" if sys.stdout.isatty() else "never"


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _expand(binary: str, color: str) -> bytes:
    completed = subprocess.run(
        ["cargo", "expand", "--color", color, "--bin", binary, "main"],
        capture_output=True,
        check=False,
    )
    return completed.stdout


def run_test(exercise: str) -> str:
    """Build the exercise, show both expansions and their diff.

    Returns the diff, which is empty when the exercise is solved. Raises
    ``BuildFailed`` if the build fails or emits any diagnostics.
    """
    color = _color()
    build = subprocess.run(
        ["cargo", "build", "--color", color, "--quiet", "--bin", exercise],
        capture_output=True,
        check=False,
    )
    if build.stderr or build.returncode != 0:
        print("The following errors were encountered:")
        sys.stdout.flush()
        sys.stderr.write(_decode(build.stderr))
        sys.stderr.flush()
        raise BuildFailed("Build failed")

    produced = _expand(exercise, color)
    print()
    print("This is the expansion you produced:")
    print()
    sys.stdout.write(_decode(produced))

    expected = _expand(f"{exercise}_soln", color)
    print("\nThe expansion we expected is:\n")
    sys.stdout.write(_decode(expected))

    difference = unified_diff(_decode(produced), _decode(expected))
    if difference:
        print("\nThe diff is:\n")
        print(difference)
    else:
        print("\nCongratulations! You solved it.\n")
    return difference