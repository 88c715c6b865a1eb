"""Terminal cell-width measurement.

Widths are computed per grapheme cluster so combining marks, joiners and
emoji sequences are counted once. Escape sequences are removed before
measuring and never contribute to width.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache

from wcwidth import width as _wc_width
from wcwidth.grapheme import iter_graphemes

from .scanner import split_sequences

# Bytes that failed UTF-8 decoding travel as lone surrogates (surrogateescape).
_SURROGATE_LOW = 0xD800
_SURROGATE_HIGH = 0xDFFF


def _is_undecodable(ch: str) -> bool:
    return _SURROGATE_LOW <= ord(ch) <= _SURROGATE_HIGH


def iter_clusters(text: str) -> Iterator[str]:
    """Yield the grapheme clusters of plain (sequence-free) ``text``."""
    if not text:
        return
    if text.isascii():
        # ASCII never combines except CR LF, which segments as one cluster.
        if "\r\n" not in text:
            yield from text
            return
    yield from iter_graphemes(text)


@lru_cache(maxsize=4096)
def cluster_width(cluster: str) -> int:
    """Return the number of terminal cells one grapheme cluster occupies.

    Control characters, zero-width characters and undecodable bytes measure
    0; East Asian wide and emoji presentation clusters measure 2.
    """
    if not cluster:
        return 0
    if len(cluster) == 1:
        if cluster.isascii():
            return 1 if cluster.isprintable() else 0
        if _is_undecodable(cluster):
            return 0
    elif any(_is_undecodable(ch) for ch in cluster):
        cluster = "".join(ch for ch in cluster if not _is_undecodable(ch))
    return max(0, _wc_width(cluster, control_codes="ignore"))


def plain_width(text: str) -> int:
    """Return the cell width of text known to contain no escape sequences."""
    if text.isascii() and text.isprintable():
        return len(text)
    return sum(cluster_width(cluster) for cluster in iter_clusters(text))


def printable_width(text: str) -> int:
    """Return the cell width of ``text`` with escape sequences counting 0."""
    if "\x1b" not in text:
        return plain_width(text)
    return sum(plain_width(segment.text) for segment in split_sequences(text) if not segment.is_sequence)
