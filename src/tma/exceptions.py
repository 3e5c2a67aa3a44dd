"""Exceptions raised while building a tmux session.

PUBLIC API:
  - TmaError: Base exception for all tma failures
  - ConfigurationError: Layout file unreadable or invalid
  - EmptyConfigurationError: Layout declares no windows
  - WorkspaceEnvironmentError: Working directory unusable
  - SessionExistsError: Target session already exists
  - TmuxCommandError: A tmux invocation failed
"""


class TmaError(Exception):
    """Base exception for all tma failures."""

    pass


class ConfigurationError(TmaError):
    """Raised when the layout file cannot be read or does not describe a session."""

    pass


class EmptyConfigurationError(ConfigurationError):
    """Raised when a session has no windows to create."""

    def __init__(self, message: str = "Please configure at least one window."):
        super().__init__(message)


class WorkspaceEnvironmentError(TmaError):
    """Raised when the working directory cannot be used for path resolution."""

    pass


class SessionExistsError(TmaError):
    """Raised when a session with the target name is already running."""

    def __init__(self, name: str):
        super().__init__(f"Session '{name}' already exists. Please explicitly set a unique name.")
        self.name = name


class TmuxCommandError(TmaError):
    """Raised when tmux cannot be launched or exits with a non-zero status.

    Attributes:
        step: Human-readable orchestration step, e.g. "pane 2.1".
        args_vector: Argument vector passed to tmux.
        returncode: Exit status, or None if tmux could not be launched.
        stderr: Captured error output.
    """

    def __init__(self, step: str, args: list[str], returncode: int | None = None, stderr: str = ""):
        self.step = step
        self.args_vector = list(args)
        self.returncode = returncode
        self.stderr = stderr.strip()

        if returncode is None:
            reason = self.stderr or "tmux could not be executed"
        else:
            reason = f"exit status {returncode}"
            if self.stderr:
                reason = f"{reason}: {self.stderr}"
        super().__init__(f"Failed at {step}: {reason}")
