"""Shared test fixtures for the cmdhelp test suite."""

import io
import json
import os
from unittest.mock import patch

import pytest

from cmdhelp.lib.log_lib import channels as _channels_mod
from cmdhelp.lib.log_lib import manager as _manager_mod
from cmdhelp.model import Application, Flag, Node, Positional


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: tests that render large generated models")


# ---------------------------------------------------------------------------
# Global state isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_output_state():
    """Restore the OutputManager singleton and channel registry per test.

    cli.main() calls configure_channels() and init_output(), which mutate
    module-level state.
    """
    saved_manager = _manager_mod._manager
    saved_channels = (
        _channels_mod.KNOWN_CHANNELS,
        _channels_mod.CHANNEL_DESCRIPTIONS,
        _channels_mod.OPT_IN_CHANNELS,
    )
    yield
    _manager_mod._manager = saved_manager
    (_channels_mod.KNOWN_CHANNELS,
     _channels_mod.CHANNEL_DESCRIPTIONS,
     _channels_mod.OPT_IN_CHANNELS) = saved_channels


@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.cmdhelp/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch, tmp_config_home):
    """Run in an empty directory with an empty home, no config anywhere."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.delenv("COLUMNS", raising=False)
    return work


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def sink():
    """A StringIO standing in for the application's stdout."""
    return io.StringIO()


@pytest.fixture
def git_like_app(sink):
    """A small git-like application with nested and hidden commands."""
    app = Application(
        name="vcs",
        help="A tiny version control system.",
        flags=[
            Flag("help", short="h", is_bool=True,
                 help="Show context-sensitive help."),
            Flag("repo-dir", placeholder="PATH", help="Repository directory"),
        ],
        stdout=sink,
    )
    app.add(Node("init", help="Create an empty repository"))
    remote = app.add(Node(
        "remote",
        help="Manage remotes",
        flags=[Flag("dry-run", is_bool=True, help="Show what would change")],
    ))
    remote.add(Node(
        "add",
        help="Add a remote",
        positional=[Positional("name", help="Remote name"),
                    Positional("url", help="Remote URL")],
        flags=[Flag("fetch", short="f", is_bool=True,
                    help="Fetch after adding")],
    ))
    app.add(Node("gc", help="Internal housekeeping", hidden=True))
    return app


MODEL_DOC = {
    "name": "app",
    "help": "Builds things.",
    "flags": [
        {"name": "verbose", "short": "v", "bool": True,
         "help": "enable verbose output"},
    ],
    "commands": [
        {"name": "build", "help": "Build the project",
         "positional": [{"name": "target", "required": False}]},
        {"name": "test", "help": "Run tests",
         "flags": [{"name": "filter", "placeholder": "PATTERN",
                    "help": "Only run matching tests"}]},
    ],
}


@pytest.fixture
def model_doc():
    """A model document as a fresh dict."""
    return json.loads(json.dumps(MODEL_DOC))


@pytest.fixture
def model_file(tmp_path, model_doc):
    """Write the model document to a JSON file."""
    path = tmp_path / "app.json"
    path.write_text(json.dumps(model_doc, indent=2), encoding="utf-8")
    return path
