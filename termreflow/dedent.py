"""Removal of indentation shared by every line."""

from __future__ import annotations

_INDENT_CHARS = " \t"


def _indent_len(line: str) -> int:
    return len(line) - len(line.lstrip(_INDENT_CHARS))


def dedent(text: str) -> str:
    """Strip the longest run of leading spaces/tabs common to all non-empty lines.

    Spaces and tabs each count as one column; empty lines are ignored when
    measuring and kept as they are.
    """
    lines = text.split("\n")
    indents = [_indent_len(line) for line in lines if line]
    if not indents:
        return text
    common = min(indents)
    if common <= 0:
        return text
    return "\n".join(line[common:] for line in lines)
