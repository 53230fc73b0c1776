"""Locations of exercise files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

EXERCISES_DIR = "exercises"
MAIN_FILE = "main.rs"
SOLUTIONS_DIR = "solutions"
DIFF_FILE = "solution.diff"


@dataclass(frozen=True)
class ExercisePaths:
    """The starting file, the solution and the stored diff of one exercise."""

    name: str
    main: Path
    solution: Path
    diff: Path


def _root(root: str | os.PathLike[str] | None) -> Path:
    return Path.cwd() if root is None else Path(root)


def exercise_paths(
    exercise: str, root: str | os.PathLike[str] | None = None
) -> ExercisePaths:
    """Return the paths of ``exercise`` under ``root`` (default: current directory)."""
    directory = _root(root) / EXERCISES_DIR / exercise
    solutions = directory / SOLUTIONS_DIR
    return ExercisePaths(
        name=exercise,
        main=directory / MAIN_FILE,
        solution=solutions / MAIN_FILE,
        diff=solutions / DIFF_FILE,
    )


def discover_exercises(root: str | os.PathLike[str] | None = None) -> list[str]:
    """Return the sorted names of exercise directories that hold a main file."""
    exercises = _root(root) / EXERCISES_DIR
    return sorted(path.parent.name for path in exercises.glob(f"*/{MAIN_FILE}"))