"""Configuration and command definition loading for cmdhelp.

Render settings use three-layer resolution (highest priority wins):
  1. CLI flags — explicit on the command line
  2. Project config — .cmdhelp.json in the working directory or a parent
  3. Global config — ~/.cmdhelp/config.json (or --config PATH)

Command definitions are JSON files describing a command tree; see
command_from_dict() for the schema.
"""

import json
import os
from pathlib import Path

from cmdhelp.command import UNSET, Command, EnvVar, Example, Option
from cmdhelp.lib.log_lib import get_output, trace


DEFAULT_SETTINGS = {
    "indent": 2,
    "color": True,
}


class DefinitionError(ValueError):
    """A command definition file is missing, unreadable or malformed."""


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.cmdhelp/)."""
    return Path.home() / ".cmdhelp"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .cmdhelp.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / ".cmdhelp.json"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from a file, returning {} on any read error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def resolve_settings(args, start_dir=None):
    """Resolve render settings from CLI args, project and global config.

    ``args`` is an argparse namespace; ``indent`` is taken from it when
    not None, and ``no_color`` forces color off. ``config`` replaces the
    global config path.
    """
    global_path = getattr(args, "config", None) or get_global_config_path()
    global_cfg = load_json(global_path)
    project_path = find_project_config(start_dir)
    project_cfg = load_json(project_path) if project_path else {}

    out = get_output()
    resolved = {}
    for key, default in DEFAULT_SETTINGS.items():
        cli_val = getattr(args, key, None)
        if cli_val is not None:
            resolved[key], source = cli_val, "cli"
        elif key in project_cfg:
            resolved[key], source = project_cfg[key], str(project_path)
        elif key in global_cfg:
            resolved[key], source = global_cfg[key], str(global_path)
        else:
            resolved[key], source = default, "default"
        out.emit(2, "[config] {key} = {value!r} ({source})", channel='config',
                 key=key, value=resolved[key], source=source)

    if getattr(args, "no_color", False):
        resolved["color"] = False
    try:
        resolved["indent"] = max(0, int(resolved["indent"]))
    except (TypeError, ValueError):
        resolved["indent"] = DEFAULT_SETTINGS["indent"]
    resolved["color"] = bool(resolved["color"])
    return resolved


# ---------------------------------------------------------------------------
# Command definitions
# ---------------------------------------------------------------------------
def _as_list(value):
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def _require_object(data, what):
    if not isinstance(data, dict):
        raise DefinitionError(f"{what} must be a JSON object: {data!r}")


def option_from_dict(data):
    _require_object(data, "Option")
    if "flags" not in data:
        raise DefinitionError(f"Option without 'flags': {data!r}")
    return Option(
        flags=data["flags"],
        description=data.get("description", ""),
        type_definition=data.get("type"),
        required=bool(data.get("required", False)),
        default=data["default"] if "default" in data else UNSET,
        depends=_as_list(data.get("depends")),
        conflicts=_as_list(data.get("conflicts")),
        hidden=bool(data.get("hidden", False)),
        is_global=bool(data.get("global", False)),
    )


def env_var_from_dict(data):
    _require_object(data, "Environment variable")
    names = _as_list(data.get("names", data.get("name")))
    if not names:
        raise DefinitionError(f"Environment variable without a name: {data!r}")
    return EnvVar(
        names=names,
        details=data.get("details", ""),
        description=data.get("description", ""),
        hidden=bool(data.get("hidden", False)),
        is_global=bool(data.get("global", False)),
    )


def example_from_dict(data):
    _require_object(data, "Example")
    return Example(name=data.get("name", ""),
                   description=data.get("description", ""))


def command_from_dict(data):
    """Build a Command tree from a decoded JSON definition.

    Keys: name (required), version, description, arguments, aliases,
    hidden, options, commands, env, examples. A "default" key on an
    option is kept even when its value is null, false, 0 or "".
    """
    if not isinstance(data, dict) or not data.get("name"):
        raise DefinitionError("Command definition needs a 'name'")
    command = Command(
        name=data["name"],
        version=data.get("version"),
        description=data.get("description", ""),
        args_definition=data.get("arguments"),
        aliases=_as_list(data.get("aliases")),
        options=[option_from_dict(o) for o in data.get("options", [])],
        env_vars=[env_var_from_dict(e) for e in data.get("env", [])],
        examples=[example_from_dict(e) for e in data.get("examples", [])],
        hidden=bool(data.get("hidden", False)),
    )
    for child in data.get("commands", []):
        command.add_command(command_from_dict(child))
    return command


@trace
def load_command_file(path):
    """Load a JSON command definition file into a Command tree.

    Raises:
        DefinitionError: file missing or unreadable, invalid JSON, or an
            invalid definition.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise DefinitionError(f"Definition file not found: {path}")
    except OSError as e:
        raise DefinitionError(f"Cannot read {path}: {e}")
    except json.JSONDecodeError as e:
        raise DefinitionError(f"Invalid JSON in {path}: {e}")
    return command_from_dict(data)


def load_rows_file(path):
    """Load a JSON list of rows (lists of cells) for the table command."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise DefinitionError(f"Rows file not found: {path}")
    except OSError as e:
        raise DefinitionError(f"Cannot read {path}: {e}")
    except json.JSONDecodeError as e:
        raise DefinitionError(f"Invalid JSON in {path}: {e}")
    if not isinstance(data, list) or not all(isinstance(r, list) for r in data):
        raise DefinitionError(f"{path} must contain a JSON list of rows")
    return data
