"""Tests for the command line interface."""

import json
import logging

import pytest
import yaml

from compositor.cli.formatters import format_output, format_tree_output
from compositor.cli.main import build_parser, main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run from an empty directory so no stray config file is picked up."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("COMPOSITOR_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def blueprint_file(workdir, toolbar_blueprint):
    path = workdir / "toolbar.yaml"
    path.write_text(yaml.safe_dump(toolbar_blueprint))
    return path


class TestParser:

    def test_assemble_arguments(self):
        args = build_parser().parse_args(
            ["--format", "tree", "assemble", "toolbar.yaml", "--family", "light", "--dispatch", "apply"]
        )
        assert args.resource == "assemble"
        assert args.blueprint == "toolbar.yaml"
        assert args.family == "light"
        assert args.dispatch == "apply"
        assert args.format == "tree"
        assert args.log_level is None


class TestMain:

    def test_no_command_prints_help(self, workdir, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().err

    def test_families_list(self, workdir, capsys):
        assert main(["families", "list"]) == 0
        output = json.loads(capsys.readouterr().out)
        families = {entry["family"]: entry["roles"] for entry in output["families"]}

        assert list(families) == ["dark", "light"]
        assert families["dark"]["drawable"] == ["apply", "draw"]
        assert families["light"]["text"] == ["apply", "count_words"]

    def test_assemble_and_dispatch(self, blueprint_file, capsys):
        code = main(["assemble", str(blueprint_file), "--family", "light", "--dispatch", "apply"])
        assert code == 0

        output = json.loads(capsys.readouterr().out)
        assert output["tree"]["name"] == "window"
        results = [entry["result"] for entry in output["dispatch"]["entries"]]
        assert results[0] == "[light] button 'save' pressed"
        assert results[-1] == "[light] raster square 20x20px"

    def test_assemble_tree_format(self, blueprint_file, capsys):
        assert main(["--format", "tree", "assemble", str(blueprint_file)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "+ window"
        assert "    - save (dark)" in lines

    def test_assemble_yaml_format_uses_config_default(self, blueprint_file, workdir, capsys):
        config = workdir / "compositor.yaml"
        config.write_text("engine:\n  default_family: light\n")

        assert main(["--format", "yaml", "assemble", str(blueprint_file)]) == 0
        output = yaml.safe_load(capsys.readouterr().out)
        logo = output["tree"]["children"][-1]
        assert logo["payload"]["family"] == "light"
        assert logo["payload"]["renderer"] == "raster"

    @pytest.mark.parametrize("extra_args", [
        ["--family", "neon"],
        ["--dispatch", "explode"],
        ["--dispatch", "draw"],
    ])
    def test_compositor_errors_exit_non_zero(self, blueprint_file, capsys, extra_args):
        assert main(["assemble", str(blueprint_file), *extra_args]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_family_name(self, blueprint_file, capsys):
        assert main(["assemble", str(blueprint_file), "--family", "Dark Theme"]) == 1
        assert "not valid" in capsys.readouterr().err

    def test_configured_log_level_is_kept(self, workdir):
        (workdir / "compositor.yaml").write_text("logging:\n  level: ERROR\n")
        assert main(["families", "list"]) == 0
        assert logging.getLogger().level == logging.ERROR

    def test_log_level_flag_overrides_config(self, workdir):
        (workdir / "compositor.yaml").write_text("logging:\n  level: ERROR\n")
        assert main(["--log-level", "DEBUG", "families", "list"]) == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_missing_blueprint_file(self, workdir, capsys):
        assert main(["assemble", str(workdir / "missing.yaml")]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_blueprint_must_be_mapping(self, workdir, capsys):
        path = workdir / "list.json"
        path.write_text(json.dumps(["button"]))
        assert main(["assemble", str(path)]) == 1
        assert "mapping" in capsys.readouterr().err


class TestFormatters:

    def test_tree_output_falls_back_to_json(self):
        assert json.loads(format_tree_output({"families": []})) == {"families": []}

    def test_tree_output_with_dispatch(self):
        data = {
            "tree": {"kind": "composite", "name": "root", "children": [
                {"kind": "leaf", "name": "ok", "payload": {"family": "dark"}},
            ]},
            "dispatch": {"operation": "apply", "entries": [{"path": "root/ok", "result": "pressed"}]},
        }
        assert format_tree_output(data).splitlines() == [
            "+ root",
            "  - ok (dark)",
            "",
            "apply:",
            "  root/ok: pressed",
        ]

    def test_yaml_output(self):
        assert yaml.safe_load(format_output({"a": [1, 2]}, "yaml")) == {"a": [1, 2]}
