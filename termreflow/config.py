"""Persistent JSON config helpers.

Stores default CLI layout settings (width, tab width, breakpoints, tail, style).
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .options import DEFAULT_BREAKPOINTS, DEFAULT_TAB_WIDTH

APP_NAME = "termreflow"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_STYLE = "monokai"


@dataclass(frozen=True)
class CliDefaults:
    """Defaults applied to CLI options the user did not pass explicitly."""

    width: int | None = None
    tab_width: int = DEFAULT_TAB_WIDTH
    breakpoints: str = "".join(sorted(DEFAULT_BREAKPOINTS))
    tail: str = ""
    style: str = DEFAULT_STYLE


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep CLI behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _coerce_positive_int(value: object) -> int | None:
    """Accept strictly positive JSON integers; booleans and others are invalid."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def _coerce_nonnegative_int(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 0 else None


def _coerce_str(value: object) -> str | None:
    return value if isinstance(value, str) else None


def load_cli_defaults() -> CliDefaults:
    """Merge persisted values over built-in defaults, dropping invalid entries."""
    data = load_config()
    base = CliDefaults()

    style = _coerce_str(data.get("style"))
    if style is not None:
        style = style.strip() or None

    tab_width = _coerce_nonnegative_int(data.get("tab_width"))
    breakpoints = _coerce_str(data.get("breakpoints"))
    tail = _coerce_str(data.get("tail"))
    return CliDefaults(
        width=_coerce_positive_int(data.get("width")),
        tab_width=base.tab_width if tab_width is None else tab_width,
        breakpoints=base.breakpoints if breakpoints is None else breakpoints,
        tail=base.tail if tail is None else tail,
        style=style or base.style,
    )


def save_width(width: int) -> None:
    """Persist the default wrap width."""
    if width <= 0:
        return
    config = load_config()
    config["width"] = int(width)
    save_config(config)
