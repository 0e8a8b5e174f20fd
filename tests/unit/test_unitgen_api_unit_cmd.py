"""Unit tests for unitgen.api.unit commands."""

from tests.conftest import run_cmd
from unitgen.api.unit.cmd_default import cmd_default
from unitgen.api.unit.cmd_render import cmd_render
from unitgen.api.validate_output import validate_output


def test_cmd_render_success(definition_file):
    result = run_cmd(cmd_render, definition_file)
    assert result.success is True
    assert result.result == "Rendered app.service"
    assert result.output["file_name"] == "app.service"
    assert result.output["text"].startswith("[Unit]\nDescription=My App\n")
    assert "ExecStart=/usr/bin/app --serve\n" in result.output["text"]
    assert result.output["definition"]["service"]["user"] == "app"
    assert result.output["errors"] == []
    assert validate_output(cmd_render, result.output) == result.output


def test_cmd_render_missing_definition(tmp_path):
    result = run_cmd(cmd_render, tmp_path / "missing.json")
    assert result.success is False
    assert result.result.startswith("Error:")
    assert result.output["text"] == ""
    assert "not found" in result.output["errors"][0]


def test_cmd_render_unreadable_definition(tmp_path):
    directory = tmp_path / "dir.json"
    directory.mkdir()
    result = run_cmd(cmd_render, directory)
    assert result.success is False
    assert result.output["text"] == ""
    assert "Cannot read service definition" in result.output["errors"][0]


def test_cmd_default_success():
    result = run_cmd(cmd_default, "app", "My App", "/usr/bin/app")
    assert result.success is True
    assert result.output["name"] == "app"
    assert result.output["text"] == (
        "[Unit]\nDescription=My App\nAfter=network.target\n"
        "\n[Service]\nType=simple\nExecStart=/usr/bin/app\n"
        "\n[Install]\nWantedBy=multi-user.target\n"
    )


def test_cmd_default_rejects_multiline_description():
    result = run_cmd(cmd_default, "app", "My\nApp", "/usr/bin/app")
    assert result.success is False
    assert "single line" in result.output["errors"][0]
