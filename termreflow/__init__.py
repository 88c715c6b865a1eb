"""Public package surface for termreflow.

ANSI-aware word wrapping, hard wrapping, truncation and margins for terminal
text. Escape sequences measure zero cells and are never split.
"""

from __future__ import annotations

from .dedent import dedent
from .indent import Indent, indent
from .margin import Margin, margin
from .options import ReflowConfig
from .padding import Padding, pad
from .scanner import SequenceScanner, strip_sequences
from .style import RESET, StyleTracker
from .truncate import Truncate, truncate
from .width import cluster_width, printable_width
from .wordwrap import WordWrap, wrap_words
from .wrap import Wrap, wrap


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Indent",
    "Margin",
    "Padding",
    "RESET",
    "ReflowConfig",
    "SequenceScanner",
    "StyleTracker",
    "Truncate",
    "WordWrap",
    "Wrap",
    "cluster_width",
    "dedent",
    "indent",
    "main",
    "margin",
    "pad",
    "printable_width",
    "strip_sequences",
    "truncate",
    "wrap",
    "wrap_words",
]
