"""Shared test fixtures for cmdhelp test suite."""

import json
import os
from unittest.mock import patch

import pytest

from cmdhelp import styles
from cmdhelp.command import Command, EnvVar, Example, Option
from cmdhelp.lib.log_lib import channels as _channels_mod
from cmdhelp.lib.log_lib import manager as _manager_mod


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: launches the CLI in a subprocess")


# ---------------------------------------------------------------------------
# Global state resets
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_global_state():
    """Restore the color switch, OutputManager singleton and channel sets."""
    color = styles.get_color_enabled()
    manager = _manager_mod._manager
    saved_channels = (
        _channels_mod.KNOWN_CHANNELS,
        _channels_mod.CHANNEL_DESCRIPTIONS,
        _channels_mod.OPT_IN_CHANNELS,
    )
    yield
    styles.set_color_enabled(color)
    _manager_mod._manager = manager
    (_channels_mod.KNOWN_CHANNELS,
     _channels_mod.CHANNEL_DESCRIPTIONS,
     _channels_mod.OPT_IN_CHANNELS) = saved_channels


@pytest.fixture
def plain():
    """Disable styling so rendered text can be compared literally."""
    styles.set_color_enabled(False)


@pytest.fixture
def color():
    """Enable styling."""
    styles.set_color_enabled(True)


# ---------------------------------------------------------------------------
# Temporary directory fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.cmdhelp/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def write_json(tmp_path):
    """Write an object as JSON under tmp_path and return the path."""
    def _write(name, data):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path
    return _write


# ---------------------------------------------------------------------------
# Command fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def sample_command():
    """A command using every help section, no type definitions."""
    return Command(
        name="app",
        version="1.0.0",
        description="Demo tool.",
        options=[
            Option("-h, --help", "Show help."),
            Option("-n, --count", "Repeat count.", default=0),
        ],
        commands=[
            Command(name="run", aliases=["r"], description="Run it.\nDetails."),
        ],
        env_vars=[
            EnvVar(names=["APP_DEBUG"], details="<enable:boolean>",
                   description="Debug mode."),
        ],
        examples=[Example("basic", "app run")],
    )


@pytest.fixture
def sample_definition():
    """A JSON-style command definition with a nested sub-command."""
    return {
        "name": "git-lite",
        "version": "2.1.0",
        "description": "A tiny version control front end.",
        "options": [
            {"flags": "-h, --help", "description": "Show help.", "global": True},
            {"flags": "-C, --cwd", "description": "Run as if started in PATH.",
             "type": "<path:string>", "default": "."},
        ],
        "commands": [
            {
                "name": "remote",
                "description": "Manage remotes.",
                "commands": [
                    {"name": "add", "arguments": "<name> <url>",
                     "aliases": ["a"], "description": "Add a remote."},
                ],
            },
            {"name": "debug", "description": "Internal.", "hidden": True},
        ],
        "env": [
            {"name": "GIT_LITE_TRACE", "details": "<level:number>",
             "description": "Trace level.", "global": True},
        ],
        "examples": [
            {"name": "clone", "description": "git-lite clone <url>"},
        ],
    }
