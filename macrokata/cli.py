"""Command line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .check import check_all
from .goal import goal
from .runner import BuildFailed, run_test
from .update_diff import update_diff

_EXERCISE_HELP = "The name of the exercise to run."


def _test(args: argparse.Namespace) -> int:
    run_test(args.exercise)
    return 0


def _goal(args: argparse.Namespace) -> int:
    goal(args.exercise)
    return 0


def _update_diff(args: argparse.Namespace) -> int:
    update_diff(args.exercise)
    return 0


def _check_all(args: argparse.Namespace) -> int:
    return 1 if check_all() else 0


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the ``macrokata`` command."""
    parser = argparse.ArgumentParser(
        prog="macrokata",
        description="MacroKata is a set of exercises to learn how to use macros well.",
    )
    commands = parser.add_subparsers(
        dest="command", metavar="COMMAND", help="Choose what MacroKata does."
    )
    commands.required = True

    test = commands.add_parser("test")
    test.add_argument("exercise", help=_EXERCISE_HELP)
    test.set_defaults(handler=_test)

    goal_parser = commands.add_parser("goal")
    goal_parser.add_argument("exercise", help=_EXERCISE_HELP)
    goal_parser.set_defaults(handler=_goal)

    update = commands.add_parser("update-diff")
    update.add_argument(
        "exercise", help="The name of the exercise to create a diff for."
    )
    update.set_defaults(handler=_update_diff)

    check = commands.add_parser("check-all")
    check.set_defaults(handler=_check_all)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except (BuildFailed, OSError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())