"""Showing the expansion an exercise is expected to produce."""

from __future__ import annotations

import subprocess


def goal(exercise: str) -> int:
    """Print the expanded ``main`` of the exercise's solution binary.

    The expansion goes straight to the terminal and cargo's diagnostics are
    discarded. Returns cargo's exit status. A missing ``cargo`` raises
    ``FileNotFoundError``.
    """
    completed = subprocess.run(
        ["cargo", "expand", "--bin", f"{exercise}_soln", "main"],
        stderr=subprocess.DEVNULL,
        check=False,
    )
    return completed.returncode