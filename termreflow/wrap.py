"""Hard wrapping at an exact cell width.

Breaks fall between grapheme clusters regardless of word boundaries, and
never inside an escape sequence.
"""

from __future__ import annotations

from .options import ReflowConfig
from .width import cluster_width
from .writer import Sink, StreamWriter

TAB = "\t"


class Wrap(StreamWriter):
    """Streaming hard-wrapping writer.

    Tabs measure ``tab_width`` cells and are written unchanged while they fit
    on the line; a tab a break would land inside is written as spaces. With
    ``preserve_space`` disabled, whitespace that lands at the start of a line
    because of a forced break is dropped.
    """

    def __init__(self, limit: int, forward: Sink | None = None, **options) -> None:
        super().__init__(forward)
        self.config = ReflowConfig(limit=limit, **options)
        self._line_len = 0
        self._forced = False

    def _passthrough(self) -> bool:
        return self.config.limit == 0

    def _break_line(self) -> None:
        continuity = self.config.style_continuity
        if continuity:
            self._style.reset()
        self._emit("\n")
        self._line_len = 0
        self._forced = True
        if continuity:
            self._reopen_style()

    def _on_sequence(self, seq: str) -> None:
        self._commit_sequence(seq)

    def _on_cluster(self, cluster: str) -> None:
        config = self.config
        if config.is_newline(cluster):
            if config.keep_newlines:
                self._emit(cluster)
                self._line_len = 0
                self._forced = False
            return

        if cluster == TAB:
            width = config.tab_width
            if self._line_len + width > config.limit:
                for _ in range(width):
                    self._place(" ", 1)
                return
        else:
            width = cluster_width(cluster)
        self._place(cluster, width)

    def _place(self, cluster: str, width: int) -> None:
        if self._line_len > 0 and self._line_len + width > self.config.limit:
            self._break_line()

        at_line_start = self._line_len == 0
        if at_line_start and self._forced and not self.config.preserve_space and cluster.isspace():
            return
        self._emit(cluster)
        self._line_len += width
        if not at_line_start:
            self._forced = False


def wrap(text: str | bytes, limit: int, **options) -> str | bytes:
    """Hard-wrap ``text`` to ``limit`` cells, returning the same type it was given."""
    writer = Wrap(limit, **options)
    writer.write(text)
    writer.close()
    if isinstance(text, (bytes, bytearray)):
        return bytes(writer)
    return writer.getvalue()
