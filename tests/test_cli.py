"""Tests for the pdum_gapi command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from pdum.gapi import __version__, config, directory
from pdum.gapi.cli import app
from pdum.gapi.types import DirectoryItem

FIXTURE = Path(__file__).parent / "fixtures" / "sample_discovery.json"

runner = CliRunner()


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    fixture = FIXTURE
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "get_config_dir", lambda: tmp_path / "user-config")
    return tmp_path, fixture


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_generate_from_file(isolated):
    tmp_path, fixture = isolated

    result = runner.invoke(app, ["generate", "--from-file", str(fixture), "--out", "clients"])

    assert result.exit_code == 0, result.output
    module = tmp_path / "clients" / "widgets_v1.py"
    assert module.exists()
    assert "class Widgets:" in module.read_text(encoding="utf-8")
    assert (tmp_path / "clients" / "__init__.py").exists()


def test_generate_uses_config_output(isolated):
    tmp_path, fixture = isolated
    (tmp_path / config.CONFIG_FILENAME).write_text("output: gen\npackage: false\n", encoding="utf-8")

    result = runner.invoke(app, ["generate", "-f", str(fixture)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "gen" / "widgets_v1.py").exists()
    assert not (tmp_path / "gen" / "__init__.py").exists()


def test_generate_missing_config_fails(isolated):
    tmp_path, _ = isolated

    result = runner.invoke(app, ["generate", "--config", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_generate_broken_document_fails(isolated):
    tmp_path, _ = isolated
    broken = tmp_path / "broken.json"
    broken.write_text('{"version": "v1"}', encoding="utf-8")

    result = runner.invoke(app, ["generate", "-f", str(broken)])

    assert result.exit_code == 1
    assert "missing 'name'" in result.output


def test_lookup(monkeypatch):
    items = [
        DirectoryItem("tagmanager", "v1", "Tag Manager API"),
        DirectoryItem("tagmanager", "v2", "Tag Manager API", preferred=True),
    ]
    monkeypatch.setattr(directory, "list_apis", lambda **kwargs: items)

    result = runner.invoke(app, ["lookup", "Tag Manager"])

    assert result.exit_code == 0
    assert "tagmanager:v2" in result.output


def test_lookup_unknown(monkeypatch):
    monkeypatch.setattr(directory, "list_apis", lambda **kwargs: [])

    result = runner.invoke(app, ["lookup", "ThisDoesNotExist12345"])

    assert result.exit_code == 1


def test_init_config(isolated):
    tmp_path, _ = isolated

    result = runner.invoke(app, ["init-config"])
    assert result.exit_code == 0
    written = config.load_config(tmp_path / config.CONFIG_FILENAME)
    assert "homegraph:v1" in written.apis

    again = runner.invoke(app, ["init-config"])
    assert again.exit_code == 1

    forced = runner.invoke(app, ["init-config", "--force"])
    assert forced.exit_code == 0


@pytest.mark.parametrize(
    "args",
    [["lookup", "homegraph"], ["index"], ["generate", "homegraph"], ["generate", "--all"]],
)
def test_directory_outage_is_reported(isolated, monkeypatch, args):
    def unreachable(**kwargs):
        raise ConnectionError("Discovery directory unreachable")

    monkeypatch.setattr(directory, "list_apis", unreachable)

    result = runner.invoke(app, args)

    assert result.exit_code == 1
    assert "Unexpected error" in result.output
    assert "Discovery directory unreachable" in result.output
    assert not (isolated[0] / "docs").exists()
