"""Argument vectors for every tmux step a layout needs.

Each function maps one orchestration step to the exact arguments tmux
expects. Nothing here runs a process; see ``runner`` for that.

PUBLIC API:
  - has_session: Probe whether a session exists
  - new_session: Create a detached session (window 0 / pane 0 implicit)
  - new_window: Append a window to a session
  - rename_window: Rename the session's current window
  - split_window: Add a pane to a window
  - send_keys: Type a command line into the current pane
  - select_pane: Focus the first pane of the first window
  - attach: Attach the terminal to a session
  - kill_session: Kill a session
"""

from .types import HORIZONTAL, SessionWindowPane, TmuxArgs


def pane_target(session: str, window: int, pane: int) -> SessionWindowPane:
    """Build a session:window.pane target."""
    return f"{session}:{window}.{pane}"


def has_session(name: str) -> TmuxArgs:
    return ["has-session", "-t", name]


def new_session(name: str, root: str) -> TmuxArgs:
    return ["new", "-d", "-s", name, "-c", root]


def new_window(name: str, root: str) -> TmuxArgs:
    return ["new-window", "-t", name, "-c", root]


def rename_window(name: str, new_name: str) -> TmuxArgs:
    return ["rename-window", "-t", name, new_name]


def split_window(name: str, window_index: int, root: str, split: str | None = None) -> TmuxArgs:
    """Split window ``window_index`` of session ``name``.

    Args:
        name: Session name
        window_index: Window to split (0-based)
        root: Working directory of the new pane
        split: "horizontal" for a side-by-side split, anything else stacks

    Returns:
        Argument vector ending in ``-h`` only for horizontal splits
    """
    args = ["split-window", "-t", f"{name}:{window_index}", "-c", root]
    if split == HORIZONTAL:
        args.append("-h")
    return args


def send_keys(command: str) -> TmuxArgs:
    """Type ``command`` followed by a newline into the current pane."""
    return ["send-keys", f"{command}\n"]


def select_pane(name: str) -> TmuxArgs:
    return ["select-pane", "-t", pane_target(name, 0, 0)]


def attach(name: str) -> TmuxArgs:
    return ["attach", "-t", name]


def kill_session(name: str) -> TmuxArgs:
    return ["kill-session", "-t", name]
