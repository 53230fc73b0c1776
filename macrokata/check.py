"""Checking that exercises, solutions and stored diffs agree."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from .diff import unified_diff
from .exercise import discover_exercises, exercise_paths


class CheckError(Exception):
    """An exercise failed its consistency check."""

    def __repr__(self) -> str:
        return type(self).__name__


class MainFileDoesNotExist(CheckError):
    """The exercise's main file could not be read."""


class SolutionFileDoesNotExist(CheckError):
    """The exercise's solution file could not be read."""


class DiffFileDoesNotExist(CheckError):
    """The exercise's stored diff could not be read."""


class DiffFileDoesNotMatch(CheckError):
    """The stored diff differs from the one computed now."""

    def __init__(self, actual: str, expected: str) -> None:
        super().__init__("stored solution diff does not match")
        self.actual = actual
        self.expected = expected

    def __repr__(self) -> str:
        return (
            f"DiffFileDoesNotMatch(actual={self.actual!r}, "
            f"expected={self.expected!r})"
        )


class SolutionFileDoesNotClippy(CheckError):
    """The solution does not pass the linter."""


def run_cargo_command(exercise: str, command: str) -> subprocess.CompletedProcess:
    """Run ``cargo <command>`` on the exercise's solution binary."""
    return subprocess.run(
        ["cargo", command, "--bin", f"{exercise}_soln"],
        capture_output=True,
        check=False,
    )


def _read(path: Path, error: type[CheckError]) -> str:
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise error() from exc


def _passes_clippy(exercise: str) -> bool:
    try:
        return run_cargo_command(exercise, "clippy").returncode == 0
    except OSError:
        return False


def check(exercise: str, root: str | os.PathLike[str] | None = None) -> None:
    """Raise a ``CheckError`` unless the exercise is consistent and lints cleanly."""
    paths = exercise_paths(exercise, root)
    main = _read(paths.main, MainFileDoesNotExist)
    solution = _read(paths.solution, SolutionFileDoesNotExist)
    expected = _read(paths.diff, DiffFileDoesNotExist)

    actual = unified_diff(main, solution)
    if actual != expected:
        raise DiffFileDoesNotMatch(actual=actual, expected=expected)
    if not _passes_clippy(exercise):
        raise SolutionFileDoesNotClippy()


def check_all(root: str | os.PathLike[str] | None = None) -> dict[str, CheckError]:
    """Check every exercise, reporting failures on stderr.

    Returns the failures keyed by exercise name; empty when all pass.
    """
    failures: dict[str, CheckError] = {}
    for name in discover_exercises(root):
        try:
            check(name, root)
        except CheckError as error:
            print(f"Check of {name!r} failed: {error!r}", file=sys.stderr)
            failures[name] = error
    return failures