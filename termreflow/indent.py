"""Left indentation of each line, kept outside of any open style."""

from __future__ import annotations

from .padding import FillFunc, is_line_end
from .writer import Sink, StreamWriter


class Indent(StreamWriter):
    """Prefix every line with ``width`` cells of spaces (or ``fill()`` output).

    The indent is written just before the first character of a line, with
    the open style closed around it so coloring never bleeds into the margin.
    """

    def __init__(self, width: int, forward: Sink | None = None, fill: FillFunc | None = None) -> None:
        super().__init__(forward)
        if width < 0:
            raise ValueError(f"width must be a non-negative integer, got {width!r}")
        self.width = width
        self.fill = fill
        self._line_start = True

    def _passthrough(self) -> bool:
        return self.width == 0

    def _write_indent(self) -> None:
        self._style.reset()
        if self.fill is None:
            self._emit(" " * self.width)
        else:
            self._emit("".join(self.fill() for _ in range(self.width)))
        self._line_start = False
        self._reopen_style()

    def _on_sequence(self, seq: str) -> None:
        self._commit_sequence(seq)

    def _on_cluster(self, cluster: str) -> None:
        if self._line_start:
            self._write_indent()
        self._emit(cluster)
        if is_line_end(cluster):
            self._line_start = True


def indent(text: str | bytes, width: int, fill: FillFunc | None = None) -> str | bytes:
    """Indent each line of ``text`` by ``width`` cells."""
    writer = Indent(width, fill=fill)
    writer.write(text)
    writer.close()
    if isinstance(text, (bytes, bytearray)):
        return bytes(writer)
    return writer.getvalue()
