"""Tests for config.py - loading layouts from TOML."""

from pathlib import Path

import pytest

from tma.config import load_session, parse_session
from tma.exceptions import ConfigurationError
from tma.types import Pane, Session, Window

FULL_LAYOUT = """
name = "work"
root = "src"
attach = false
pre_window = "source .venv/bin/activate"

[[window]]
name = "editor"

[[window.pane]]
command = "vim"

[[window.pane]]
split = "horizontal"
root = "tests"
command = "pytest"

[[window]]
root = "/var/log"
"""


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / ".tma.toml"
    path.write_text(content)
    return path


class TestLoadSession:
    def test_full_layout(self, tmp_path: Path):
        session = load_session(_write(tmp_path, FULL_LAYOUT))

        assert session == Session(
            name="work",
            root="src",
            attach=False,
            pre_window="source .venv/bin/activate",
            windows=(
                Window(
                    name="editor",
                    panes=(
                        Pane(command="vim"),
                        Pane(root="tests", command="pytest", split="horizontal"),
                    ),
                ),
                Window(root="/var/log"),
            ),
        )

    def test_defaults(self, tmp_path: Path):
        session = load_session(_write(tmp_path, "[[window]]\n"))

        assert session.name is None
        assert session.root is None
        assert session.should_attach is True
        assert session.windows == (Window(),)
        assert session.windows[0].first_pane is None

    def test_default_path_is_relative_to_cwd(self, tmp_path: Path, monkeypatch):
        _write(tmp_path, 'name = "here"\n[[window]]\n')
        monkeypatch.chdir(tmp_path)

        assert load_session().name == "here"

    def test_missing_windows_load_as_empty(self, tmp_path: Path):
        assert load_session(_write(tmp_path, 'name = "x"\n')).windows == ()

    def test_unknown_keys_are_ignored(self, tmp_path: Path):
        session = load_session(_write(tmp_path, 'colour = "red"\n[[window]]\nlayout = "tiled"\n'))
        assert session.windows == (Window(),)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="Unable to open configuration file"):
            load_session(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="Unable to load configuration"):
            load_session(_write(tmp_path, "name = \n"))


class TestParseSession:
    def test_wrong_scalar_type(self):
        with pytest.raises(ConfigurationError, match="'attach'"):
            parse_session({"attach": "yes", "window": [{}]})

    def test_wrong_nested_type_names_location(self):
        data = {"window": [{}, {"pane": [{"command": 42}]}]}
        with pytest.raises(ConfigurationError, match=r"window\[1\]\.pane\[0\]\.command"):
            parse_session(data)

    def test_window_must_be_table_array(self):
        with pytest.raises(ConfigurationError, match="array of tables"):
            parse_session({"window": "main"})

    def test_pane_must_be_table_array(self):
        with pytest.raises(ConfigurationError, match=r"window\[0\]\.pane"):
            parse_session({"window": [{"pane": ["ls"]}]})

    def test_result_is_immutable(self):
        session = parse_session({"window": [{"pane": [{}]}]})
        with pytest.raises(AttributeError):
            session.name = "other"
        assert isinstance(session.windows, tuple)
        assert isinstance(session.windows[0].panes, tuple)
