"""Per-writer configuration with named defaults.

Every writer builds its own :class:`ReflowConfig`; defaults are module
constants and are never mutated at runtime.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

DEFAULT_BREAKPOINTS = frozenset("-")
DEFAULT_NEWLINES = frozenset("\n")
DEFAULT_TAB_WIDTH = 4


def _rune_set(values: Iterable[str], name: str) -> frozenset[str]:
    runes = frozenset(values)
    for rune in runes:
        if not isinstance(rune, str) or len(rune) != 1:
            raise ValueError(f"{name} entries must be single characters, got {rune!r}")
    return runes


@dataclass(frozen=True)
class ReflowConfig:
    """Layout settings shared by the wrapping and truncation writers.

    ``limit`` is the line width in terminal cells; ``0`` disables wrapping.
    ``breakpoints`` and ``newlines`` are sets of single characters.
    ``style_continuity`` closes and reopens the open style around breaks the
    writer inserts itself.
    """

    limit: int = 0
    breakpoints: frozenset[str] = field(default=DEFAULT_BREAKPOINTS)
    newlines: frozenset[str] = field(default=DEFAULT_NEWLINES)
    keep_newlines: bool = True
    preserve_space: bool = False
    hard_wrap: bool = False
    tab_width: int = DEFAULT_TAB_WIDTH
    style_continuity: bool = True
    tail: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 0:
            raise ValueError(f"limit must be a non-negative integer, got {self.limit!r}")
        if isinstance(self.tab_width, bool) or not isinstance(self.tab_width, int) or self.tab_width < 0:
            raise ValueError(f"tab_width must be a non-negative integer, got {self.tab_width!r}")
        object.__setattr__(self, "breakpoints", _rune_set(self.breakpoints, "breakpoints"))
        object.__setattr__(self, "newlines", _rune_set(self.newlines, "newlines"))

    def is_newline(self, cluster: str) -> bool:
        """Return whether a grapheme cluster is an explicit line terminator."""
        if cluster in self.newlines:
            return True
        # CR LF segments as one cluster.
        return cluster == "\r\n" and "\n" in self.newlines

    def is_breakpoint(self, cluster: str) -> bool:
        return cluster in self.breakpoints
