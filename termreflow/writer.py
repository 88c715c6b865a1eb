"""Streaming writer base shared by every layout transform.

Decodes byte chunks incrementally, routes printable grapheme clusters and
escape sequences to subclass hooks, and collects output either internally or
in a caller-supplied sink. The sink is never closed by the writer.
"""

from __future__ import annotations

import codecs
from collections import deque
from typing import Protocol

from .scanner import SequenceScanner
from .style import RESET, StyleTracker
from .width import iter_clusters

ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


class Sink(Protocol):
    """Anything with a text ``write`` method (files, ``io.StringIO``, writers)."""

    def write(self, text: str, /) -> object: ...


class StreamWriter:
    """Incremental ANSI-aware text transform.

    Subclasses implement :meth:`_on_cluster` and :meth:`_on_sequence` and may
    override :meth:`_passthrough` and :meth:`_finish`.
    Output is produced through :meth:`_emit`. Exceptions raised by the sink
    propagate unchanged; the item being handled and everything after it stay
    queued and are delivered by the next ``write`` or ``close``.
    """

    def __init__(self, forward: Sink | None = None) -> None:
        self.forward = forward
        self._chunks: list[str] = []
        self._decoder = codecs.getincrementaldecoder(ENCODING)(errors=ENCODING_ERRORS)
        self._scanner = SequenceScanner()
        self._style = StyleTracker(self._write_out)
        # (text, is_sequence) items scanned but not yet handed to the hooks.
        self._queue: deque[tuple[str, bool]] = deque()
        self._held = ""
        self._reopen = False
        self._reset_at_close = False
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, chunk: str | bytes) -> int:
        """Feed one chunk of input and return how much of it was accepted."""
        if self._closed:
            raise ValueError("write to closed writer")
        if isinstance(chunk, (bytes, bytearray, memoryview)):
            text = self._decoder.decode(bytes(chunk))
        else:
            text = chunk
        self._consume(text)
        self._drain()
        return len(chunk)

    def close(self) -> None:
        """Flush every pending buffer. Must be called before reading output."""
        if self._closed:
            return
        self._consume(self._decoder.decode(b"", final=True))
        if not self._passthrough():
            self._queue_held()
            leftover = self._scanner.close()
            if leftover is not None:
                self._queue.append((leftover.text, True))
                self._reset_at_close = True
        self._drain()
        if not self._passthrough():
            self._finish()
        if self._reset_at_close:
            self._emit(RESET)
            self._reset_at_close = False
        self._closed = True

    def getvalue(self) -> str:
        """Return the output accumulated so far (empty when forwarding)."""
        return "".join(self._chunks)

    def __str__(self) -> str:
        return self.getvalue()

    def __bytes__(self) -> bytes:
        return self.getvalue().encode(ENCODING, ENCODING_ERRORS)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()

    def _consume(self, text: str) -> None:
        if not text:
            return
        if self._passthrough():
            self._queue.append((text, False))
            return
        for segment in self._scanner.feed(text):
            if segment.is_sequence:
                self._queue_held()
                self._queue.append((segment.text, True))
            else:
                self._feed_printable(segment.text)

    def _feed_printable(self, text: str) -> None:
        clusters = list(iter_clusters(self._held + text))
        # The last cluster may still grow (combining marks in the next chunk).
        self._held = clusters.pop() if clusters else ""
        self._queue.extend((cluster, False) for cluster in clusters)

    def _queue_held(self) -> None:
        if self._held:
            self._queue.append((self._held, False))
            self._held = ""

    def _drain(self) -> None:
        passthrough = self._passthrough()
        queue = self._queue
        while queue:
            text, is_sequence = queue[0]
            if passthrough:
                self._emit(text)
            elif is_sequence:
                self._on_sequence(text)
            else:
                self._on_cluster(text)
            queue.popleft()

    def _write_out(self, text: str) -> None:
        if not text:
            return
        if self.forward is not None:
            self.forward.write(text)
        else:
            self._chunks.append(text)

    def _emit(self, text: str) -> None:
        if not text:
            return
        if self._reopen:
            self._write_out(self._style.current_style)
            self._reopen = False
        self._write_out(text)

    def _reopen_style(self) -> None:
        """Reissue the open style before whatever is emitted next."""
        self._reopen = bool(self._style.current_style)

    def _commit_sequence(self, seq: str) -> None:
        """Write an escape sequence to the output and track its style effect."""
        self._emit(seq)
        self._style.observe(seq)

    def _passthrough(self) -> bool:
        """Return True when input should be copied to the output untouched."""
        return False

    def _on_cluster(self, cluster: str) -> None:
        raise NotImplementedError

    def _on_sequence(self, seq: str) -> None:
        raise NotImplementedError

    def _finish(self) -> None:
        """Flush subclass buffers at close."""
