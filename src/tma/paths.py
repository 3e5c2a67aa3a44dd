"""Working-directory resolution for sessions, windows and panes.

PUBLIC API:
  - resolve_root: Compose root overrides on top of a base directory
  - current_directory: Working directory of the invoking process
  - default_session_name: Session name derived from a directory
  - path_argument: String form of a path for a tmux argument vector
"""

from pathlib import Path

from .exceptions import WorkspaceEnvironmentError


def resolve_root(cwd: Path, *overrides: str | None) -> Path:
    """Join root overrides onto cwd, most general first.

    Absent overrides are skipped. An absolute override discards everything
    accumulated before it.

    Args:
        cwd: Directory the resolution starts from
        *overrides: Session, window and pane root overrides, in that order

    Returns:
        The effective directory

    Examples:
        resolve_root(Path("/r"), "a", None, "c")  # /r/a/c
        resolve_root(Path("/r"), "a", "/abs", "c")  # /abs/c
    """
    root = Path(cwd)
    for override in overrides:
        if override is not None:
            root = root / override
    return root


def current_directory() -> Path:
    """Get the invoking process's working directory.

    Raises:
        WorkspaceEnvironmentError: If the directory is unavailable (e.g. deleted)
    """
    try:
        return Path.cwd()
    except OSError as e:
        raise WorkspaceEnvironmentError(f"Failed to get current directory: {e}") from e


def default_session_name(cwd: Path) -> str:
    """Base name of cwd, used when the layout does not name the session."""
    name = cwd.name
    if not name:
        raise WorkspaceEnvironmentError(f"Failed to get filename of current directory: {cwd}")
    return name


def path_argument(path: Path) -> str:
    """Convert a resolved root to the string passed after ``-c``.

    Raises:
        WorkspaceEnvironmentError: If the path is not valid UTF-8
    """
    text = str(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise WorkspaceEnvironmentError(f"Failed to convert root directory name to string: {path!r}") from e
    return text
