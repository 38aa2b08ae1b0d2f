"""Persistent JSON config helpers.

Stores the navigator root, item cap, window size and state directory.
Malformed or missing config values fall back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .directory_model.state import DEFAULT_MAX_ITEMS, DEFAULT_WINDOW_SIZE

APP_NAME = "fsnav"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_ROOT_PATH = "/sdcard"


@dataclass(frozen=True)
class NavigatorConfig:
    """Navigator settings; ``state_dir=None`` selects the platform data dir."""

    root_path: str = DEFAULT_ROOT_PATH
    max_items: int = DEFAULT_MAX_ITEMS
    window_size: int = DEFAULT_WINDOW_SIZE
    state_dir: Path | None = None


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON, creating parent directories."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def _coerce_int(value: object, minimum: int) -> int | None:
    """Accept plain integers at or above ``minimum``; booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= minimum else None


def _coerce_path_text(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_navigator_config(
    root_path: str | None = None,
    *,
    max_items: int | None = None,
    window_size: int | None = None,
    state_dir: Path | str | None = None,
) -> NavigatorConfig:
    """Merge the config file with explicit overrides.

    Explicit arguments win; invalid file values are dropped in favor of
    defaults. ``max_items`` may be 0 (no cap); ``window_size`` must be >= 1.
    """
    data = load_config()

    file_root = _coerce_path_text(data.get("root_path"))
    file_max_items = _coerce_int(data.get("max_items"), 0)
    file_window_size = _coerce_int(data.get("window_size"), 1)
    file_state_dir = _coerce_path_text(data.get("state_dir"))

    resolved_state_dir = state_dir if state_dir is not None else file_state_dir
    return NavigatorConfig(
        root_path=root_path or file_root or DEFAULT_ROOT_PATH,
        max_items=max_items if max_items is not None else (file_max_items if file_max_items is not None else DEFAULT_MAX_ITEMS),
        window_size=window_size if window_size is not None else (file_window_size or DEFAULT_WINDOW_SIZE),
        state_dir=Path(resolved_state_dir) if resolved_state_dir is not None else None,
    )


def save_navigator_config(config: NavigatorConfig) -> None:
    """Persist ``config`` into the JSON config file, keeping unrelated keys."""
    data = load_config()
    data["root_path"] = config.root_path
    data["max_items"] = int(config.max_items)
    data["window_size"] = int(config.window_size)
    if config.state_dir is not None:
        data["state_dir"] = str(config.state_dir)
    else:
        data.pop("state_dir", None)
    save_config(data)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_ROOT_PATH",
    "NavigatorConfig",
    "load_config",
    "save_config",
    "load_navigator_config",
    "save_navigator_config",
]
