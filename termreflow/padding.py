"""Right padding of each line to a fixed cell width."""

from __future__ import annotations

from collections.abc import Callable

from .width import cluster_width
from .writer import Sink, StreamWriter

FillFunc = Callable[[], str]


def is_line_end(cluster: str) -> bool:
    return cluster in ("\n", "\r\n")


class Padding(StreamWriter):
    """Pad every line with spaces (or ``fill()`` output) up to ``width`` cells.

    Lines already at or beyond ``width`` are left alone, as is an empty
    trailing line. The open style is closed before each newline and reissued
    after it.
    """

    def __init__(self, width: int, forward: Sink | None = None, fill: FillFunc | None = None) -> None:
        super().__init__(forward)
        if width < 0:
            raise ValueError(f"width must be a non-negative integer, got {width!r}")
        self.width = width
        self.fill = fill
        self._line_len = 0

    def _passthrough(self) -> bool:
        return self.width == 0

    def _pad(self) -> None:
        missing = self.width - self._line_len
        if missing <= 0:
            return
        if self.fill is None:
            self._emit(" " * missing)
        else:
            self._emit("".join(self.fill() for _ in range(missing)))
        self._line_len = self.width

    def _on_sequence(self, seq: str) -> None:
        self._commit_sequence(seq)

    def _on_cluster(self, cluster: str) -> None:
        if is_line_end(cluster):
            self._pad()
            self._style.reset()
            self._emit(cluster)
            self._line_len = 0
            self._reopen_style()
            return
        self._emit(cluster)
        self._line_len += cluster_width(cluster)

    def _finish(self) -> None:
        if self._line_len > 0:
            self._pad()


def pad(text: str | bytes, width: int, fill: FillFunc | None = None) -> str | bytes:
    """Pad each line of ``text`` to ``width`` cells."""
    writer = Padding(width, fill=fill)
    writer.write(text)
    writer.close()
    if isinstance(text, (bytes, bytearray)):
        return bytes(writer)
    return writer.getvalue()
