"""Command-line front door for termreflow.

Reads text from a file or stdin, optionally highlights and dedents it, then
streams it through the wrap/truncate engine and the margin writers.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .config import load_cli_defaults, save_width
from .dedent import dedent
from .highlight import colorize_source, read_text
from .indent import Indent
from .padding import Padding
from .truncate import truncate
from .wordwrap import WordWrap
from .wrap import Wrap
from .writer import Sink

MODES = ("word", "hard", "truncate")


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _default_render_width() -> int:
    """Resolve default wrap width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def build_parser() -> argparse.ArgumentParser:
    defaults = load_cli_defaults()
    parser = argparse.ArgumentParser(
        prog="termreflow",
        description="Wrap or truncate ANSI-styled text to a terminal cell width.",
    )
    parser.add_argument("path", nargs="?", default=None, help="File to read. Defaults to stdin.")
    parser.add_argument(
        "-w",
        "--width",
        type=_positive_int,
        default=defaults.width,
        help="Line width in cells (default: config value, then terminal width).",
    )
    parser.add_argument("--mode", choices=MODES, default="word", help="Layout mode (default: word).")
    parser.add_argument("--tail", default=defaults.tail, help="Text appended to truncated lines.")
    parser.add_argument(
        "--tab-width",
        type=_nonnegative_int,
        default=defaults.tab_width,
        help="Spaces per tab in hard mode.",
    )
    parser.add_argument(
        "--breakpoints",
        default=defaults.breakpoints,
        help="Characters after which word mode may break a line.",
    )
    parser.add_argument(
        "--preserve-space",
        action="store_true",
        help="Keep leading whitespace after forced breaks in hard mode.",
    )
    parser.add_argument("--join-lines", action="store_true", help="Treat input newlines as spaces.")
    parser.add_argument("--split-words", action="store_true", help="Break words wider than the width in word mode.")
    parser.add_argument("--indent", type=_nonnegative_int, default=0, help="Indent every line by N cells.")
    parser.add_argument("--pad", type=_nonnegative_int, default=0, help="Pad every line to N cells.")
    parser.add_argument("--dedent", action="store_true", help="Strip indentation common to all lines first.")
    parser.add_argument("--highlight", action="store_true", help="Syntax-highlight the input with Pygments.")
    parser.add_argument("--style", default=defaults.style, help="Pygments style name for --highlight.")
    parser.add_argument("--save", action="store_true", help="Persist --width as the default width.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def _load_source(path_arg: str | None) -> tuple[str, Path | None]:
    if path_arg is None:
        return sys.stdin.read(), None
    path = Path(path_arg)
    if not path.is_file():
        raise SystemExit(f"Path not found: {path}")
    return read_text(path), path


def _truncate_lines(text: str, width: int, tail: str) -> str:
    """Truncate each line independently, keeping line terminators."""
    out: list[str] = []
    for line in text.splitlines(keepends=True):
        body = line.rstrip("\r\n")
        out.append(truncate(body, width, tail))
        out.append(line[len(body):])
    return "".join(out)


def render(text: str, args: argparse.Namespace, width: int, out: Sink) -> None:
    """Lay out ``text`` according to parsed CLI options and write it to ``out``."""
    sink: Sink = out
    stages = []
    if args.pad:
        padding = Padding(args.pad, sink)
        stages.append(padding)
        sink = padding
    if args.indent:
        indenter = Indent(args.indent, sink)
        stages.append(indenter)
        sink = indenter

    if args.mode == "truncate":
        sink.write(_truncate_lines(text, width, args.tail))
    else:
        if args.mode == "hard":
            layout = Wrap(
                width,
                sink,
                keep_newlines=not args.join_lines,
                preserve_space=args.preserve_space,
                tab_width=args.tab_width,
            )
        else:
            layout = WordWrap(
                width,
                sink,
                breakpoints=args.breakpoints,
                keep_newlines=not args.join_lines,
                hard_wrap=args.split_words,
            )
        layout.write(text)
        layout.close()

    # Upstream stages first so their flushed output reaches the next stage.
    for stage in reversed(stages):
        stage.close()


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the laid-out text to stdout."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    width = args.width if args.width is not None else _default_render_width()
    if args.save:
        save_width(width)

    text, path = _load_source(args.path)
    if args.dedent:
        text = dedent(text)
    if args.highlight:
        text = colorize_source(text, path, args.style)

    render(text, args, width, sys.stdout)


if __name__ == "__main__":
    main()
