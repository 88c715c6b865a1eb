"""Cell-width-limited truncation with an optional tail.

Input that already fits passes through unchanged. Otherwise output is cut at
a grapheme-cluster boundary, any open style is closed, and the tail follows.
"""

from __future__ import annotations

from .options import ReflowConfig
from .width import cluster_width, printable_width
from .writer import Sink, StreamWriter


class Truncate(StreamWriter):
    """Streaming truncation writer.

    Clusters that fit within ``limit - width(tail)`` are written at once.
    Clusters that only fit within ``limit`` are held in a reserve until the
    stream either overflows (reserve dropped, tail appended) or ends (reserve
    written unchanged). Input after the cut point is discarded.
    """

    def __init__(self, limit: int, tail: str = "", forward: Sink | None = None) -> None:
        super().__init__(forward)
        self.config = ReflowConfig(limit=limit, tail=tail)
        self._tail_width = printable_width(tail)
        if self._tail_width > limit:
            # Degenerate: nothing but the tail can be shown once content is cut.
            self._budget = -1
        else:
            self._budget = limit - self._tail_width
        self._used = 0
        self._reserve: list[tuple[str, bool]] = []
        self._reserve_width = 0
        self._cut = False

    @property
    def truncated(self) -> bool:
        return self._cut

    def _on_sequence(self, seq: str) -> None:
        if self._cut:
            return
        if self._reserve or self._budget < 0:
            self._reserve.append((seq, True))
        else:
            self._commit_sequence(seq)

    def _on_cluster(self, cluster: str) -> None:
        if self._cut:
            return
        width = cluster_width(cluster)
        if not self._reserve and self._budget >= 0 and self._used + width <= self._budget:
            self._emit(cluster)
            self._used += width
        elif self._used + self._reserve_width + width <= self.config.limit:
            self._reserve.append((cluster, False))
            self._reserve_width += width
        else:
            self._cut_here()

    def _cut_here(self) -> None:
        if self._budget >= 0:
            self._style.reset()
        self._emit(self.config.tail)
        self._cut = True
        self._reserve = []
        self._reserve_width = 0

    def _finish(self) -> None:
        if self._cut:
            return
        while self._reserve:
            text, is_sequence = self._reserve[0]
            if is_sequence:
                self._commit_sequence(text)
            else:
                self._emit(text)
                width = cluster_width(text)
                self._used += width
                self._reserve_width -= width
            self._reserve.pop(0)


def truncate(text: str | bytes, limit: int, tail: str = "") -> str | bytes:
    """Truncate ``text`` to ``limit`` cells, returning the same type it was given."""
    writer = Truncate(limit, tail)
    writer.write(text)
    writer.close()
    if isinstance(text, (bytes, bytearray)):
        return bytes(writer)
    return writer.getvalue()
