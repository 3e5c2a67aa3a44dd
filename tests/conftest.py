"""Shared fixtures - a recording stand-in for the tmux process layer."""

import pytest

from tma.runner import TmuxRunner


class RecordingRunner(TmuxRunner):
    """Records tmux invocations instead of starting processes.

    Args:
        exists: Exit status 0 for has-session when True
        failures: Subcommand -> exit status for steps that should fail
        missing: Raise FileNotFoundError as if tmux were not installed
    """

    def __init__(self, exists: bool = False, failures: dict[str, int] | None = None, missing: bool = False):
        super().__init__(executable="tmux")
        self.exists = exists
        self.failures = failures or {}
        self.missing = missing
        self.calls: list[list[str]] = []
        self.replaced: list[list[str]] = []

    def run(self, args):
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", "tmux")
        self.calls.append(list(args))
        if args[0] == "has-session":
            if self.exists:
                return 0, "", ""
            return 1, "", "can't find session"
        code = self.failures.get(args[0], 0)
        return code, "", "boom" if code else ""

    def replace(self, args):
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", "tmux")
        self.replaced.append(list(args))


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def make_runner():
    """Factory for runners with custom probe results or failures."""
    return RecordingRunner
