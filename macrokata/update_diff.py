"""Regenerating the stored solution diff of an exercise."""

from __future__ import annotations

import os

from .diff import unified_diff
from .exercise import exercise_paths


def update_diff(exercise: str, root: str | os.PathLike[str] | None = None) -> str:
    """Write the diff from the exercise to its solution and return it.

    Missing or unreadable files raise the usual ``OSError``.
    """
    paths = exercise_paths(exercise, root)
    before = paths.main.read_bytes().decode("utf-8")
    after = paths.solution.read_bytes().decode("utf-8")
    text = unified_diff(before, after)
    paths.diff.write_bytes(text.encode("utf-8"))
    return text