"""Session orchestration - turns a layout into ordered tmux commands.

A run moves through LOADED -> PROBING -> CREATING -> SELECTING and ends
in ATTACHING (the process is replaced by tmux) or DONE. Any failure moves
it to FAILED and propagates. Commands are issued one at a time; later
steps target windows and panes created by earlier ones, so the order is
fixed. Nothing already created is torn down after a failure.

PUBLIC API:
  - SessionBuilder: Start, create or kill the session a layout describes
"""

import logging
from contextlib import contextmanager
from pathlib import Path

from . import tmux
from .exceptions import EmptyConfigurationError, SessionExistsError, TmaError, TmuxCommandError
from .paths import current_directory, default_session_name, path_argument, resolve_root
from .runner import TmuxRunner
from .types import Session, Stage, TmuxArgs, Window

logger = logging.getLogger(__name__)


class SessionBuilder:
    """Drives tmux to materialize one Session.

    Args:
        session: Layout to build
        dry_run: Compute every command but only run the has-session probe
        runner: Process layer, TmuxRunner() by default
        cwd: Base of root resolution, the process working directory by default

    Attributes:
        commands: Every argument vector computed so far, in issue order
        stage: Current Stage of the run
    """

    def __init__(
        self,
        session: Session,
        *,
        dry_run: bool = False,
        runner: TmuxRunner | None = None,
        cwd: Path | None = None,
    ):
        self.session = session
        self.dry_run = dry_run
        self.runner = runner or TmuxRunner()
        self._cwd = cwd
        self._name: str | None = None
        self.commands: list[TmuxArgs] = []
        self.stage = Stage.LOADED

    @property
    def cwd(self) -> Path:
        if self._cwd is None:
            self._cwd = current_directory()
        return self._cwd

    @property
    def name(self) -> str:
        """Configured session name, or the base name of cwd."""
        if self._name is None:
            self._name = self.session.name if self.session.name is not None else default_session_name(self.cwd)
        return self._name

    def start(self) -> list[TmuxArgs]:
        """Create the session unless one with the same name already exists.

        Returns:
            The computed commands (only reached when not attaching)

        Raises:
            EmptyConfigurationError: If the layout has no windows
            SessionExistsError: If has-session reports the session exists
            TmuxCommandError: If any tmux step fails
        """
        with self._tracking():
            self._require_windows()
            name = self.name
            self._enter(Stage.PROBING)
            if self._probe(tmux.has_session(name)):
                raise SessionExistsError(name)
            return self.create()

    def create(self) -> list[TmuxArgs]:
        """Create every window and pane, select pane 0.0, then attach if configured."""
        with self._tracking():
            self._require_windows()
            name = self.name
            self._enter(Stage.CREATING)
            session_root = resolve_root(self.cwd, self.session.root)

            for index, window in enumerate(self.session.windows):
                self._create_window(name, session_root, index, window)
                self._create_panes(name, session_root, index, window)

            self._enter(Stage.SELECTING)
            self._run("pane selection", tmux.select_pane(name))

            if self.session.should_attach:
                if not self.dry_run:
                    self._attach(name)
                    return self.commands
                self.commands.append(tmux.attach(name))
                logger.info(f"Dry run, not attaching to '{name}'")

            self._enter(Stage.DONE)
            return self.commands

    def kill(self) -> list[TmuxArgs]:
        """Kill the session. Exactly one tmux command, never retried."""
        with self._tracking():
            self._run("kill", tmux.kill_session(self.name))
            self._enter(Stage.DONE)
            return self.commands

    def _create_window(self, name: str, session_root: Path, index: int, window: Window) -> None:
        first = window.first_pane
        root = resolve_root(session_root, window.root, first.root if first else None)

        if index == 0:
            self._run("session creation", tmux.new_session(name, path_argument(root)))
        else:
            self._run(f"window {index}", tmux.new_window(name, path_argument(root)))

        if window.name is not None:
            self._run(f"rename of window {index}", tmux.rename_window(name, window.name))

    def _create_panes(self, name: str, session_root: Path, index: int, window: Window) -> None:
        window_root = resolve_root(session_root, window.root)

        for pane_index, pane in enumerate(window.panes):
            if pane_index != 0:
                root = resolve_root(window_root, pane.root)
                self._run(
                    f"pane {index}.{pane_index}",
                    tmux.split_window(name, index, path_argument(root), pane.split),
                )

            # Pane 0 exists as soon as its window does
            for keys in (self.session.pre_window, pane.command):
                if keys is not None:
                    self._run(f"command in pane {index}.{pane_index}", tmux.send_keys(keys))

    def _attach(self, name: str) -> None:
        self._enter(Stage.ATTACHING)
        args = tmux.attach(name)
        self.commands.append(args)
        try:
            self.runner.replace(args)
        except OSError as e:
            raise TmuxCommandError("attach", args, None, str(e)) from e

    def _probe(self, args: TmuxArgs) -> bool:
        """Run a read-only check, in dry run as well. True on exit status 0."""
        self.commands.append(args)
        try:
            code, _, _ = self.runner.run(args)
        except OSError as e:
            raise TmuxCommandError("session probe", args, None, str(e)) from e
        return code == 0

    def _run(self, step: str, args: TmuxArgs) -> None:
        self.commands.append(args)
        if self.dry_run:
            logger.info(f"Dry run, skipping {step}: {self.runner.command_line(args)}")
            return

        try:
            code, _, stderr = self.runner.run(args)
        except OSError as e:
            raise TmuxCommandError(step, args, None, str(e)) from e
        if code != 0:
            raise TmuxCommandError(step, args, code, stderr)

    def _require_windows(self) -> None:
        if not self.session.windows:
            raise EmptyConfigurationError()

    def _enter(self, stage: Stage) -> None:
        logger.info(f"Stage {self.stage.value} -> {stage.value}")
        self.stage = stage

    @contextmanager
    def _tracking(self):
        try:
            yield
        except TmaError:
            self._enter(Stage.FAILED)
            raise
