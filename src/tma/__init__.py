"""tma - build tmux sessions from a declarative TOML layout.

PUBLIC API:
  - Session, Window, Pane: Layout model
  - load_session: Read a layout file
  - SessionBuilder: Start, create or kill a session
  - TmaError: Base of every error tma raises
  - __version__: Package version string
"""

from importlib.metadata import PackageNotFoundError, version

from .config import load_session
from .exceptions import TmaError
from .session import SessionBuilder
from .types import Pane, Session, Window

try:
    __version__ = version("tma")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = ["Session", "Window", "Pane", "load_session", "SessionBuilder", "TmaError", "__version__"]
