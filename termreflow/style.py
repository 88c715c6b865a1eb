"""Open-style bookkeeping for forced line breaks.

Remembers the most recent SGR (color/attribute) sequence written to the
output so it can be closed before a break and reissued after it.
"""

from __future__ import annotations

from collections.abc import Callable

CSI = "\x1b["
RESET = "\x1b[0m"


def is_sgr(seq: str) -> bool:
    """Return whether ``seq`` is a CSI ... m select-graphic-rendition sequence."""
    return seq.startswith(CSI) and seq.endswith("m")


def is_reset(seq: str) -> bool:
    """Return whether ``seq`` resets every graphic attribute.

    ``ESC [ m``, ``ESC [ 0 m`` and variants whose parameters are all zero
    (``ESC [ 0 ; 00 m``) qualify; ``ESC [ 0 ; 31 m`` does not.
    """
    if not is_sgr(seq):
        return False
    params = seq[len(CSI):-1]
    return all(part.strip("0") == "" for part in params.split(";"))


class StyleTracker:
    """Track the single open style; last write wins.

    ``emit`` receives the sequences produced by :meth:`reset` and
    :meth:`restore`.
    """

    def __init__(self, emit: Callable[[str], object]) -> None:
        self._emit = emit
        self._open = ""

    @property
    def current_style(self) -> str:
        return self._open

    def observe(self, seq: str) -> None:
        """Record a sequence that has been written to the output."""
        if not is_sgr(seq):
            return
        if is_reset(seq):
            self._open = ""
        else:
            self._open = seq

    def reset(self) -> None:
        """Emit a reset iff a style is open. The style stays remembered."""
        if self._open:
            self._emit(RESET)

    def restore(self) -> None:
        """Reissue the open style, if any."""
        if self._open:
            self._emit(self._open)
