"""Tests for cmdhelp.config — settings resolution and definition loading."""

from argparse import Namespace

import pytest

from cmdhelp.command import UNSET
from cmdhelp.config import (
    DEFAULT_SETTINGS,
    DefinitionError,
    command_from_dict,
    find_project_config,
    get_global_config_path,
    load_command_file,
    load_json,
    load_rows_file,
    option_from_dict,
    resolve_settings,
)


def _args(**kwargs):
    values = {"indent": None, "no_color": False, "config": None}
    values.update(kwargs)
    return Namespace(**values)


class TestFindProjectConfig:
    """Test .cmdhelp.json discovery by walking up directories."""

    def test_finds_config_in_cwd(self, tmp_path):
        """Should find .cmdhelp.json in the given directory."""
        cfg_file = tmp_path / ".cmdhelp.json"
        cfg_file.write_text('{"indent": 4}')
        assert find_project_config(str(tmp_path)) == cfg_file

    def test_finds_config_in_parent(self, tmp_path):
        """Should walk upward to find .cmdhelp.json."""
        cfg_file = tmp_path / ".cmdhelp.json"
        cfg_file.write_text('{"indent": 4}')
        child = tmp_path / "subdir" / "deep"
        child.mkdir(parents=True)
        assert find_project_config(str(child)) == cfg_file

    def test_returns_none_when_missing(self, tmp_path):
        """Should return None when no .cmdhelp.json exists."""
        assert find_project_config(str(tmp_path)) is None


class TestLoadJson:
    """Test JSON file loading with error handling."""

    def test_load_valid_json(self, tmp_path):
        f = tmp_path / "test.json"
        f.write_text('{"key": "value"}')
        assert load_json(f) == {"key": "value"}

    def test_load_missing_file(self, tmp_path):
        """Should return {} for missing files."""
        assert load_json(tmp_path / "nope.json") == {}

    def test_load_malformed_json(self, tmp_path):
        """Should return {} for malformed JSON."""
        f = tmp_path / "bad.json"
        f.write_text("{not valid json")
        assert load_json(f) == {}

    def test_load_non_object(self, tmp_path):
        """A JSON list is not a config object."""
        f = tmp_path / "list.json"
        f.write_text("[1, 2]")
        assert load_json(f) == {}


class TestResolveSettings:
    """Test three-layer settings resolution (CLI > project > global)."""

    def test_defaults(self, tmp_config_home, tmp_path):
        assert resolve_settings(_args(), start_dir=tmp_path) == DEFAULT_SETTINGS

    def test_global_config_path(self, tmp_config_home):
        assert get_global_config_path() == tmp_config_home / ".cmdhelp" / "config.json"

    def test_global_config_used(self, tmp_config_home, tmp_path, write_json):
        write_json("home/.cmdhelp/config.json", {"indent": 6, "color": False})
        resolved = resolve_settings(_args(), start_dir=tmp_path)
        assert resolved == {"indent": 6, "color": False}

    def test_project_wins_over_global(self, tmp_config_home, tmp_path, write_json):
        write_json("home/.cmdhelp/config.json", {"indent": 6, "color": False})
        write_json("proj/.cmdhelp.json", {"indent": 3})
        resolved = resolve_settings(_args(), start_dir=tmp_path / "proj")
        assert resolved == {"indent": 3, "color": False}

    def test_cli_wins_over_project(self, tmp_config_home, tmp_path, write_json):
        write_json("proj/.cmdhelp.json", {"indent": 3})
        resolved = resolve_settings(_args(indent=1), start_dir=tmp_path / "proj")
        assert resolved["indent"] == 1

    def test_no_color_forces_off(self, tmp_config_home, tmp_path, write_json):
        write_json("proj/.cmdhelp.json", {"color": True})
        resolved = resolve_settings(_args(no_color=True), start_dir=tmp_path / "proj")
        assert resolved["color"] is False

    def test_explicit_config_replaces_global(self, tmp_config_home, tmp_path, write_json):
        write_json("home/.cmdhelp/config.json", {"indent": 6})
        other = write_json("other.json", {"indent": 8})
        resolved = resolve_settings(_args(config=str(other)), start_dir=tmp_path)
        assert resolved["indent"] == 8

    @pytest.mark.parametrize("value, expected", [
        ("wide", 2), (None, 2), (-3, 0), ("5", 5),
    ])
    def test_indent_coerced(self, tmp_config_home, tmp_path, write_json, value, expected):
        write_json("proj/.cmdhelp.json", {"indent": value})
        resolved = resolve_settings(_args(), start_dir=tmp_path / "proj")
        assert resolved["indent"] == expected


class TestCommandFromDict:
    """Building command trees from decoded JSON."""

    def test_full_tree(self, sample_definition):
        root = command_from_dict(sample_definition)
        assert root.name == "git-lite"
        assert [c.name for c in root.commands] == ["remote", "debug"]
        add = root.get_command("remote").get_command("a")
        assert add.args_definition == "<name> <url>"
        assert add.parent.parent is root
        assert root.get_command("debug").hidden is True

    def test_option_fields(self, sample_definition):
        root = command_from_dict(sample_definition)
        help_opt, cwd = root.options
        assert help_opt.is_global is True
        assert help_opt.default is UNSET
        assert cwd.type_definition == "<path:string>"
        assert cwd.default == "."

    def test_null_default_is_defined(self):
        option = option_from_dict({"flags": "--tag", "default": None})
        assert option.has_default is True
        assert option.default is None

    def test_string_lists_accepted(self):
        option = option_from_dict({"flags": "-a", "depends": "b", "conflicts": ["c"]})
        assert option.depends == ["b"]
        assert option.conflicts == ["c"]

    def test_env_names(self, sample_definition):
        root = command_from_dict(sample_definition)
        assert root.env_vars[0].names == ["GIT_LITE_TRACE"]
        data = {"name": "x", "env": [{"names": ["A", "B"]}]}
        assert command_from_dict(data).env_vars[0].names == ["A", "B"]

    @pytest.mark.parametrize("data", [
        {},
        {"name": ""},
        ["not", "a", "dict"],
        {"name": "x", "options": [{"description": "no flags"}]},
        {"name": "x", "env": [{"description": "no name"}]},
        {"name": "x", "commands": [{"description": "nameless"}]},
        {"name": "x", "options": ["flags"]},
        {"name": "x", "env": ["APP"]},
        {"name": "x", "examples": ["basic"]},
        {"name": "x", "commands": ["sub"]},
    ])
    def test_invalid_definitions(self, data):
        with pytest.raises(DefinitionError):
            command_from_dict(data)


class TestLoadFiles:
    """load_command_file() and load_rows_file() error handling."""

    def test_load_command_file(self, write_json, sample_definition):
        path = write_json("app.json", sample_definition)
        assert load_command_file(path).name == "git-lite"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DefinitionError, match="not found"):
            load_command_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{oops")
        with pytest.raises(DefinitionError, match="Invalid JSON"):
            load_command_file(path)

    def test_rows_file(self, write_json):
        path = write_json("rows.json", [["a", "b"], ["c"]])
        assert load_rows_file(path) == [["a", "b"], ["c"]]

    @pytest.mark.parametrize("data", [{"a": 1}, ["a", "b"], "text"])
    def test_rows_file_shape(self, write_json, data):
        path = write_json("rows.json", data)
        with pytest.raises(DefinitionError, match="list of rows"):
            load_rows_file(path)
