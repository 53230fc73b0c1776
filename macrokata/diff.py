"""Unified diffs between an exercise and its solution."""

from __future__ import annotations

import difflib
from collections.abc import Iterator

CONTEXT_LINES = 3


def _split_lines(text: str) -> list[str]:
    """Split text on newlines, keeping each line's terminator."""
    if not text:
        return []
    *complete, last = text.split("\n")
    lines = [line + "\n" for line in complete]
    if last:
        lines.append(last)
    return lines


def _hunks(before: list[str], after: list[str]) -> Iterator[str]:
    matcher = difflib.SequenceMatcher(None, before, after, autojunk=False)
    for group in matcher.get_grouped_opcodes(CONTEXT_LINES):
        _, before_start, _, after_start, _ = group[0]
        _, _, before_end, _, after_end = group[-1]
        yield (
            f"@@ -{before_start + 1},{before_end - before_start} "
            f"+{after_start + 1},{after_end - after_start} @@\n"
        )
        for tag, b1, b2, a1, a2 in group:
            if tag == "equal":
                yield from (" " + line for line in before[b1:b2])
                continue
            yield from ("-" + line for line in before[b1:b2])
            yield from ("+" + line for line in after[a1:a2])


def unified_diff(before: str, after: str) -> str:
    """Return the hunks turning ``before`` into ``after``; empty if they match.

    The output has no file headers: each hunk starts with an
    ``@@ -start,len +start,len @@`` line and carries three lines of context.
    """
    return "".join(_hunks(_split_lines(before), _split_lines(after)))