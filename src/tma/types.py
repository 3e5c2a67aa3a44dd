"""Type definitions for tma - the session layout model.

A layout is a strict tree: Session -> Window (1..N) -> Pane (0..N).
Window and pane positions are zero-based and double as tmux targets
(``session:window.pane``). Everything is frozen once loaded.
"""

from dataclasses import dataclass, field
from enum import Enum

type SessionWindowPane = str  # e.g., "work:0.0", "work:1.2"
type TmuxArgs = list[str]  # argument vector without the tmux executable

HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Pane:
    """A terminal viewport inside a window."""

    root: str | None = None  # relative to the window root unless absolute
    command: str | None = None  # sent with send-keys once the pane exists
    split: str | None = None  # "horizontal" splits side by side


@dataclass(frozen=True)
class Window:
    """An ordered container of panes."""

    name: str | None = None
    root: str | None = None  # relative to the session root unless absolute
    panes: tuple[Pane, ...] = ()

    @property
    def first_pane(self) -> Pane | None:
        """Pane created implicitly together with the window, if configured."""
        return self.panes[0] if self.panes else None


@dataclass(frozen=True)
class Session:
    """Top-level workspace materialized as one tmux session."""

    name: str | None = None  # defaults to the working directory's base name
    root: str | None = None  # relative to the working directory unless absolute
    attach: bool | None = None  # None means attach
    pre_window: str | None = None  # sent into every pane before its command
    windows: tuple[Window, ...] = field(default_factory=tuple)

    @property
    def should_attach(self) -> bool:
        return True if self.attach is None else self.attach


class Stage(Enum):
    """Progress of one orchestration run."""

    LOADED = "loaded"
    PROBING = "probing"
    CREATING = "creating"
    SELECTING = "selecting"
    ATTACHING = "attaching"
    DONE = "done"
    FAILED = "failed"
