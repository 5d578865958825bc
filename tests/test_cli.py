from typer.testing import CliRunner

from verdict import __version__
from verdict.cli import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_settings_table():
    result = runner.invoke(app, ["settings"])
    assert result.exit_code == 0
    assert "repr_limit" in result.stdout
    assert "200" in result.stdout


def test_settings_from_yaml(tmp_path):
    f = tmp_path / "cfg.yml"
    f.write_text("repr_limit: 77\n")
    result = runner.invoke(app, ["settings", "--config", str(f)])
    assert result.exit_code == 0
    assert "77" in result.stdout


def test_settings_missing_file(tmp_path):
    result = runner.invoke(app, ["settings", "--config", str(tmp_path / "nope.yml")])
    assert result.exit_code == 1
    assert "File not found" in result.stdout


def test_settings_invalid_yaml_values(tmp_path):
    f = tmp_path / "cfg.yml"
    f.write_text("repr_limit: -5\n")
    result = runner.invoke(app, ["settings", "-c", str(f)])
    assert result.exit_code == 1


def test_settings_malformed_yaml(tmp_path):
    f = tmp_path / "cfg.yml"
    f.write_text("repr_limit: [\n")
    result = runner.invoke(app, ["settings", "-c", str(f)])
    assert result.exit_code == 1
    assert "Error loading settings" in result.stdout


def test_settings_config_is_directory(tmp_path):
    result = runner.invoke(app, ["settings", "-c", str(tmp_path)])
    assert result.exit_code == 1
    assert "Error loading settings" in result.stdout
