"""Incremental escape-sequence scanner.

Classifies text one character at a time as printable or as part of an ANSI
escape sequence. State persists between ``feed`` calls so sequences split
across chunk boundaries are still recognized as a single opaque unit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

log = logging.getLogger(__name__)

MARKER = "\x1b"
BEL = "\a"
STRING_INTRODUCERS = frozenset("P]X^_")


class ScannerState(Enum):
    """Scanner position relative to escape-sequence boundaries."""

    TEXT = "text"
    ESCAPE = "escape"
    NF = "nf"
    CSI = "csi"
    STRING = "string"
    STRING_ESCAPE = "string_escape"


class Classification(Enum):
    """Role of one input character."""

    PRINTABLE = "printable"
    SEQUENCE_START = "sequence_start"
    SEQUENCE_CONTINUATION = "sequence_continuation"
    SEQUENCE_END = "sequence_end"


@dataclass(frozen=True)
class Segment:
    """A run of printable text or one complete (or abandoned) escape sequence."""

    text: str
    is_sequence: bool = False
    terminated: bool = True


def _in_range(ch: str, low: int, high: int) -> bool:
    return low <= ord(ch) <= high


class SequenceScanner:
    """Finite-state recognizer for ESC-introduced control sequences.

    ``step`` classifies a single character. ``feed`` drives ``step`` over a
    chunk and groups the results into :class:`Segment` runs, carrying any
    unfinished sequence over to the next call.
    """

    def __init__(self) -> None:
        self.state = ScannerState.TEXT
        self._pending: list[str] = []

    @property
    def in_sequence(self) -> bool:
        return self.state is not ScannerState.TEXT

    def step(self, ch: str) -> Classification:
        """Advance the state machine by one character and classify it.

        A character that cannot continue the current sequence returns
        ``PRINTABLE`` with the state reset to ``TEXT``; the caller is expected
        to treat whatever was buffered for that sequence as malformed.
        """
        state = self.state
        if state is ScannerState.TEXT:
            if ch == MARKER:
                self.state = ScannerState.ESCAPE
                return Classification.SEQUENCE_START
            return Classification.PRINTABLE

        if state is ScannerState.ESCAPE:
            if ch == MARKER:
                return Classification.SEQUENCE_START
            if ch == "[":
                self.state = ScannerState.CSI
                return Classification.SEQUENCE_CONTINUATION
            if ch in STRING_INTRODUCERS:
                self.state = ScannerState.STRING
                return Classification.SEQUENCE_CONTINUATION
            if _in_range(ch, 0x20, 0x2F):
                self.state = ScannerState.NF
                return Classification.SEQUENCE_CONTINUATION
            if _in_range(ch, 0x30, 0x7E):
                # Fp, Fe and Fs: the byte after ESC is the whole sequence.
                self.state = ScannerState.TEXT
                return Classification.SEQUENCE_END
            self.state = ScannerState.TEXT
            return Classification.PRINTABLE

        if state is ScannerState.NF:
            if ch == MARKER:
                self.state = ScannerState.ESCAPE
                return Classification.SEQUENCE_START
            if _in_range(ch, 0x20, 0x2F):
                return Classification.SEQUENCE_CONTINUATION
            self.state = ScannerState.TEXT
            if _in_range(ch, 0x30, 0x7E):
                return Classification.SEQUENCE_END
            return Classification.PRINTABLE

        if state is ScannerState.CSI:
            if ch == MARKER:
                self.state = ScannerState.ESCAPE
                return Classification.SEQUENCE_START
            if _in_range(ch, 0x40, 0x7E):
                self.state = ScannerState.TEXT
                return Classification.SEQUENCE_END
            if _in_range(ch, 0x20, 0x3F):
                return Classification.SEQUENCE_CONTINUATION
            self.state = ScannerState.TEXT
            return Classification.PRINTABLE

        if state is ScannerState.STRING:
            if ch == BEL:
                self.state = ScannerState.TEXT
                return Classification.SEQUENCE_END
            if ch == MARKER:
                self.state = ScannerState.STRING_ESCAPE
            return Classification.SEQUENCE_CONTINUATION

        # STRING_ESCAPE: only ESC \ (ST) closes the string.
        if ch == "\\":
            self.state = ScannerState.TEXT
            return Classification.SEQUENCE_END
        if ch != MARKER:
            self.state = ScannerState.STRING
        return Classification.SEQUENCE_CONTINUATION

    def feed(self, text: str) -> Iterator[Segment]:
        """Yield printable runs and finished sequences found in ``text``."""
        printable: list[str] = []
        for ch in text:
            kind = self.step(ch)
            if kind is Classification.PRINTABLE:
                if self._pending:
                    yield self._abandon()
                printable.append(ch)
                continue

            if printable:
                yield Segment("".join(printable))
                printable = []

            if kind is Classification.SEQUENCE_START:
                if self._pending:
                    yield self._abandon()
                self._pending.append(ch)
            elif kind is Classification.SEQUENCE_CONTINUATION:
                self._pending.append(ch)
            else:
                self._pending.append(ch)
                yield Segment("".join(self._pending), is_sequence=True)
                self._pending = []

        if printable:
            yield Segment("".join(printable))

    def close(self) -> Segment | None:
        """Return the unterminated sequence left at end of input, if any."""
        self.state = ScannerState.TEXT
        if not self._pending:
            return None
        segment = Segment("".join(self._pending), is_sequence=True, terminated=False)
        self._pending = []
        log.debug("Unterminated escape sequence at end of input: %r", segment.text)
        return segment

    def _abandon(self) -> Segment:
        segment = Segment("".join(self._pending), is_sequence=True, terminated=False)
        self._pending = []
        log.debug("Abandoned malformed escape sequence: %r", segment.text)
        return segment


def split_sequences(text: str) -> list[Segment]:
    """Split a complete string into printable runs and escape sequences."""
    scanner = SequenceScanner()
    segments = list(scanner.feed(text))
    leftover = scanner.close()
    if leftover is not None:
        segments.append(leftover)
    return segments


def strip_sequences(text: str) -> str:
    """Return ``text`` with every escape sequence removed."""
    if MARKER not in text:
        return text
    return "".join(segment.text for segment in split_sequences(text) if not segment.is_sequence)
