"""Soft word wrapping that ignores escape sequences when measuring.

Lines break at whitespace and breakpoint characters only. Words wider than
the limit overflow on their own line unless ``hard_wrap`` is enabled.
"""

from __future__ import annotations

from .options import ReflowConfig
from .width import cluster_width
from .writer import Sink, StreamWriter


class WordWrap(StreamWriter):
    """Streaming word-wrapping writer.

    Whitespace and the current word are staged until a later character
    decides whether they still fit on the line. Call :meth:`close` before
    reading the result.
    """

    def __init__(self, limit: int, forward: Sink | None = None, **options) -> None:
        super().__init__(forward)
        self.config = ReflowConfig(limit=limit, **options)
        self._line_len = 0
        self._space: list[str] = []
        self._space_width = 0
        # (text, is_sequence) pairs for the word being built.
        self._word: list[tuple[str, bool]] = []
        self._word_width = 0
        self._started = False

    def _passthrough(self) -> bool:
        return self.config.limit == 0

    def _add_space(self) -> None:
        if self._space:
            self._emit("".join(self._space))
            self._line_len += self._space_width
        self._clear_space()

    def _clear_space(self) -> None:
        self._space = []
        self._space_width = 0

    def _add_word(self) -> None:
        if not self._word:
            return
        self._add_space()
        while self._word:
            text, is_sequence = self._word[0]
            if is_sequence:
                self._commit_sequence(text)
            else:
                self._emit(text)
                width = cluster_width(text)
                self._line_len += width
                self._word_width -= width
            self._word.pop(0)
        self._word_width = 0
        self._started = True

    def _break_line(self) -> None:
        """Insert a line break the input did not ask for."""
        if self._line_len == 0:
            # Nothing on this line yet; dropping the staged space is enough.
            self._clear_space()
            return
        continuity = self.config.style_continuity
        if continuity:
            self._style.reset()
        self._emit("\n")
        self._line_len = 0
        self._clear_space()
        if continuity:
            self._reopen_style()

    def _on_sequence(self, seq: str) -> None:
        self._word.append((seq, True))

    def _on_cluster(self, cluster: str) -> None:
        config = self.config
        if config.is_newline(cluster):
            if config.keep_newlines:
                self._explicit_newline(cluster)
                return
            cluster = " "

        if cluster.isspace():
            self._add_word()
            if not self._started and not config.keep_newlines:
                return
            self._space.append(cluster)
            self._space_width += max(1, cluster_width(cluster))
            return

        if config.is_breakpoint(cluster):
            self._add_space()
            self._add_word()
            self._emit(cluster)
            self._line_len += cluster_width(cluster)
            self._started = True
            return

        width = cluster_width(cluster)
        if config.hard_wrap and self._word_width and self._word_width + width > config.limit:
            self._add_word()
            self._break_line()

        word_width = self._word_width + width
        if config.hard_wrap:
            breaking_helps = word_width <= config.limit
        else:
            breaking_helps = word_width < config.limit
        if self._line_len + self._space_width + word_width > config.limit and breaking_helps:
            self._break_line()

        # Staged only once every break above has been written.
        self._word.append((cluster, False))
        self._word_width = word_width

    def _explicit_newline(self, cluster: str) -> None:
        if not self._word:
            if self._line_len + self._space_width > self.config.limit:
                self._line_len = 0
                self._clear_space()
            else:
                self._add_space()
        self._add_word()
        self._emit(cluster)
        self._line_len = 0
        self._clear_space()

    def _finish(self) -> None:
        if self._word:
            self._add_word()
        elif self._space:
            if self.config.keep_newlines and self._line_len + self._space_width <= self.config.limit:
                self._add_space()
            else:
                self._clear_space()


def wrap_words(text: str | bytes, limit: int, **options) -> str | bytes:
    """Word-wrap ``text`` to ``limit`` cells, returning the same type it was given."""
    writer = WordWrap(limit, **options)
    writer.write(text)
    writer.close()
    if isinstance(text, (bytes, bytearray)):
        return bytes(writer)
    return writer.getvalue()
