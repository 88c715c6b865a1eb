"""Margins: indentation chained into right padding."""

from __future__ import annotations

from .indent import Indent
from .padding import FillFunc, Padding
from .writer import ENCODING, ENCODING_ERRORS, Sink


class Margin:
    """Indent each line by ``margin`` cells, then pad it to ``width`` cells.

    The padding width includes the indent. Exposes the same
    ``write``/``close``/``getvalue`` surface as the other writers.
    """

    def __init__(
        self,
        width: int,
        margin: int,
        forward: Sink | None = None,
        fill: FillFunc | None = None,
    ) -> None:
        self._padding = Padding(width, forward, fill)
        self._indent = Indent(margin, self._padding, fill)

    def write(self, chunk: str | bytes) -> int:
        return self._indent.write(chunk)

    def close(self) -> None:
        self._indent.close()
        self._padding.close()

    def getvalue(self) -> str:
        return self._padding.getvalue()

    def __str__(self) -> str:
        return self.getvalue()

    def __bytes__(self) -> bytes:
        return self.getvalue().encode(ENCODING, ENCODING_ERRORS)


def margin(text: str | bytes, width: int, margin: int, fill: FillFunc | None = None) -> str | bytes:
    """Apply a left margin and right padding to each line of ``text``."""
    writer = Margin(width, margin, fill=fill)
    writer.write(text)
    writer.close()
    if isinstance(text, (bytes, bytearray)):
        return bytes(writer)
    return writer.getvalue()
