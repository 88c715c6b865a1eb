"""Source loading and Pygments syntax highlighting for the CLI.

Highlighted output is plain ANSI SGR text, which the wrap engines then lay
out with style continuity across the breaks they insert.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from .config import DEFAULT_STYLE

log = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1; as a final fallback decodes
    raw bytes with UTF-8 replacement semantics.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


@lru_cache(maxsize=None)
def _normalize_style(style: str) -> str:
    """Validate a Pygments style name, falling back to the default style."""
    from pygments.styles import get_style_by_name
    from pygments.util import ClassNotFound

    try:
        get_style_by_name(style)
    except ClassNotFound:
        log.debug("Unknown Pygments style %r, using %r", style, DEFAULT_STYLE)
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=None)
def _formatter_for_style(style: str):
    """Return cached Pygments terminal formatter for style name."""
    from pygments.formatters import Terminal256Formatter

    return Terminal256Formatter(style=style)


def colorize_source(source: str, path: Path | None = None, style: str = DEFAULT_STYLE) -> str:
    """Highlight ``source`` with Pygments, guessing the lexer from ``path``.

    Unknown file types are rendered with the plain text lexer, which leaves
    the source unstyled.
    """
    from pygments import highlight
    from pygments.lexers import TextLexer, get_lexer_for_filename
    from pygments.util import ClassNotFound

    formatter = _formatter_for_style(_normalize_style(style))
    lexer = TextLexer()
    if path is not None:
        try:
            lexer = get_lexer_for_filename(path.name, source)
        except ClassNotFound:
            log.debug("No lexer for %s, rendering as plain text", path.name)

    rendered = highlight(source, lexer, formatter)
    # Pygments always terminates output with a newline; keep the source's ending.
    if not source.endswith("\n") and rendered.endswith("\n"):
        rendered = rendered[:-1]
    return rendered
