"""Process layer - the only place tma starts tmux.

PUBLIC API:
  - TmuxRunner: Run tmux commands or hand the process over to tmux
"""

import logging
import os
import shlex
import subprocess
import sys
from typing import NoReturn

from .types import TmuxArgs

logger = logging.getLogger(__name__)

TMUX_ENV_VAR = "TMA_TMUX"


class TmuxRunner:
    """Runs tmux argument vectors against the default server."""

    def __init__(self, executable: str | None = None):
        self.executable = executable or os.environ.get(TMUX_ENV_VAR) or "tmux"

    def command_line(self, args: TmuxArgs) -> str:
        """Shell-quoted form of a tmux invocation, for display."""
        return " ".join(_quote(arg) for arg in [self.executable, *args])

    def run(self, args: TmuxArgs) -> tuple[int, str, str]:
        """Run tmux command, return (returncode, stdout, stderr).

        Raises:
            OSError: If the tmux executable cannot be launched
        """
        cmd = [self.executable, *args]
        logger.debug(f"Running: {self.command_line(args)}")
        result = subprocess.run(cmd, capture_output=True, text=True, errors="replace")
        logger.debug(f"Exit status {result.returncode}")
        return result.returncode, result.stdout, result.stderr

    def replace(self, args: TmuxArgs) -> NoReturn:
        """Replace the current process with tmux. Never returns on success.

        Raises:
            OSError: If the tmux executable cannot be executed
        """
        logger.debug(f"Exec: {self.command_line(args)}")
        sys.stdout.flush()
        sys.stderr.flush()
        os.execvp(self.executable, [self.executable, *args])


def _quote(arg: str) -> str:
    # send-keys arguments end in a newline; keep them on one line as $'...'
    if "\n" not in arg:
        return shlex.quote(arg)
    escaped = arg.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"$'{escaped}'"
