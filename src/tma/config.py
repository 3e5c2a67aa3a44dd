"""Layout file loading for tma.

Reads a session layout from TOML (``.tma.toml`` by default) into the
frozen Session/Window/Pane model. Windows are ``[[window]]`` tables and
panes are ``[[window.pane]]`` tables. Unknown keys are ignored.

PUBLIC API:
  - DEFAULT_CONFIG_FILE: Layout file name used when none is given
  - load_session: Read and parse a layout file
  - parse_session: Build a Session from already-decoded TOML data
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError
from .types import Pane, Session, Window

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".tma.toml"

SESSION_KEYS = frozenset(["name", "root", "attach", "pre_window", "window"])
WINDOW_KEYS = frozenset(["name", "root", "pane"])
PANE_KEYS = frozenset(["root", "command", "split"])


def _load_config(path: Path) -> dict:
    """Load raw configuration from file."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ConfigurationError(f"Unable to open configuration file {path}: {e.strerror or e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Unable to load configuration {path}: {e}") from e


def load_session(path: str | Path = DEFAULT_CONFIG_FILE) -> Session:
    """Read a layout file.

    Args:
        path: Layout file, relative to the working directory unless absolute

    Returns:
        The parsed Session

    Raises:
        ConfigurationError: If the file is unreadable, not TOML, or has wrong types
    """
    path = Path(path)
    logger.debug(f"Loading layout from {path}")
    return parse_session(_load_config(path))


def parse_session(data: dict[str, Any]) -> Session:
    """Build a Session from decoded TOML.

    Raises:
        ConfigurationError: If a field has the wrong type
    """
    _log_unknown(data, SESSION_KEYS, "session")
    windows = _table_array(data, "window", "window")
    return Session(
        name=_optional(data, "name", str, "name"),
        root=_optional(data, "root", str, "root"),
        attach=_optional(data, "attach", bool, "attach"),
        pre_window=_optional(data, "pre_window", str, "pre_window"),
        windows=tuple(_parse_window(w, f"window[{i}]") for i, w in enumerate(windows)),
    )


def _parse_window(data: dict[str, Any], where: str) -> Window:
    _log_unknown(data, WINDOW_KEYS, where)
    panes = _table_array(data, "pane", f"{where}.pane")
    return Window(
        name=_optional(data, "name", str, f"{where}.name"),
        root=_optional(data, "root", str, f"{where}.root"),
        panes=tuple(_parse_pane(p, f"{where}.pane[{i}]") for i, p in enumerate(panes)),
    )


def _parse_pane(data: dict[str, Any], where: str) -> Pane:
    _log_unknown(data, PANE_KEYS, where)
    return Pane(
        root=_optional(data, "root", str, f"{where}.root"),
        command=_optional(data, "command", str, f"{where}.command"),
        split=_optional(data, "split", str, f"{where}.split"),
    )


def _optional(data: dict[str, Any], key: str, kind: type, where: str) -> Any:
    value = data.get(key)
    if value is not None and not isinstance(value, kind):
        raise ConfigurationError(f"Invalid '{where}': expected {kind.__name__}, got {type(value).__name__}")
    return value


def _table_array(data: dict[str, Any], key: str, where: str) -> list[dict[str, Any]]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise ConfigurationError(f"Invalid '{where}': expected an array of tables")
    return value


def _log_unknown(data: dict[str, Any], known: frozenset[str], where: str) -> None:
    for key in data.keys() - known:
        logger.debug(f"Ignoring unknown key '{key}' in {where}")
