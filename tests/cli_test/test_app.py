# tests/cli_test/test_app.py
"""
Front-end tests — the Typer app driven through ``typer.testing.CliRunner``
with every file redirected into ``tmp_path``.
"""
import json

import pytest
from typer.testing import CliRunner

from condonery.app import app, init_app, load_config
from condonery.config import Config, DEFAULT_USER_PREFS_FILE
from condonery.exceptions import DataConversionError

runner = CliRunner()


@pytest.fixture
def paths(tmp_path):
    """Config and preferences files that keep every path inside ``tmp_path``."""
    portfolio = tmp_path / "data" / "portfolio.json"
    prefs = tmp_path / "preferences.json"
    config = tmp_path / "config.json"
    config.write_text(json.dumps({
        "log_level": "INFO",
        "user_prefs_file_path": str(prefs),
        "log_file": str(tmp_path / "logs" / "condonery.log"),
    }), encoding="utf-8")
    prefs.write_text(json.dumps({
        "window": {"width": 740, "height": 600, "x": None, "y": None},
        "portfolio_file_path": str(portfolio),
    }), encoding="utf-8")
    return {"config": config, "prefs": prefs, "portfolio": portfolio}


def _exec(paths, command_text):
    return runner.invoke(app, ["--config", str(paths["config"]), "exec", command_text])


# ── exec ─────────────────────────────────────────────────────────

def test_exec_success_writes_portfolio(paths):
    result = _exec(paths, "add -c n/Alice Pauline p/94351253 e/alice@example.com a/Jurong West")
    assert result.exit_code == 0, result.output
    assert "New client added" in result.output

    data = json.loads(paths["portfolio"].read_text(encoding="utf-8"))
    assert data["clients"][0]["name"] == "Alice Pauline"


def test_exec_sequence_shares_the_data_file(paths):
    assert _exec(paths, "add -c n/Alice Pauline p/94351253 e/alice@example.com a/Jurong West").exit_code == 0
    assert _exec(paths, "add n/Sunny Villa a/123 Orchard Rd ic/Alice Pauline").exit_code == 0

    result = _exec(paths, "list")
    assert result.exit_code == 0
    assert "Listed all properties" in result.output
    assert "Sunny Villa" in result.output


def test_exec_unknown_command_fails(paths):
    result = _exec(paths, "launch")
    assert result.exit_code == 1
    assert "Unknown command" in result.output


def test_exec_command_error_fails(paths):
    result = _exec(paths, "delete -c 1")
    assert result.exit_code == 1
    assert "The client index provided is invalid" in result.output


def test_exec_help(paths):
    result = _exec(paths, "help")
    assert result.exit_code == 0
    assert "Opened help window." in result.output


def test_corrupt_portfolio_is_fatal(paths):
    paths["portfolio"].parent.mkdir(parents=True)
    paths["portfolio"].write_text("{not json", encoding="utf-8")
    result = _exec(paths, "list")
    assert result.exit_code == 1
    assert "Could not load the portfolio" in result.output


def test_unreadable_portfolio_path_is_fatal(paths):
    paths["portfolio"].mkdir(parents=True)
    result = _exec(paths, "list")
    assert result.exit_code == 1
    assert "Could not load the portfolio" in result.output


def test_log_directory_failure_is_fatal(paths, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    config = json.loads(paths["config"].read_text(encoding="utf-8"))
    config["log_file"] = str(blocker / "condonery.log")
    paths["config"].write_text(json.dumps(config), encoding="utf-8")

    result = _exec(paths, "list")
    assert result.exit_code == 1
    assert "Could not start Condonery" in result.output


# ── Interactive shell ────────────────────────────────────────────

def test_shell_runs_until_exit(paths):
    result = runner.invoke(
        app, ["--config", str(paths["config"])],
        input="add n/Sunny Villa a/123 Orchard Rd t/luxury\nbogus\nexit\nlist\n",
    )
    assert result.exit_code == 0, result.output
    assert "New property added" in result.output
    assert "Unknown command" in result.output
    assert "Exiting Condonery as requested" in result.output
    # Nothing after ``exit`` runs.
    assert "Listed all properties" not in result.output


def test_shell_saves_preferences_on_end_of_input(paths):
    result = runner.invoke(app, ["--config", str(paths["config"])], input="list -c\n")
    assert result.exit_code == 0, result.output

    prefs = json.loads(paths["prefs"].read_text(encoding="utf-8"))
    assert isinstance(prefs["window"]["width"], int)
    assert prefs["portfolio_file_path"] == str(paths["portfolio"])


# ── Bootstrap ────────────────────────────────────────────────────

def test_missing_config_is_created_with_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = load_config(tmp_path / "config.json")
    assert config == Config()
    assert json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))["log_level"] == "INFO"


def test_invalid_config_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": "loud"}), encoding="utf-8")
    assert load_config(path) == Config()


def test_config_path_that_is_a_directory_falls_back_to_defaults(tmp_path):
    assert load_config(tmp_path) == Config()


def test_invalid_preferences_fall_back_to_defaults(paths, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    paths["prefs"].write_text(json.dumps({"window": {"width": "wide"}}), encoding="utf-8")
    application = init_app(paths["config"])
    assert application.workspace.user_prefs.window.width == 740
    # Defaults are written back over the broken file.
    assert json.loads(paths["prefs"].read_text(encoding="utf-8"))["window"]["width"] == 740


def test_init_app_starts_empty_without_data_file(paths):
    application = init_app(paths["config"])
    assert len(application.workspace.properties) == 0
    assert application.storage.portfolio_file_path == paths["portfolio"]


def test_init_app_raises_on_corrupt_data(paths):
    paths["portfolio"].parent.mkdir(parents=True)
    paths["portfolio"].write_text(json.dumps({"clients": [{"name": "Bob"}]}), encoding="utf-8")
    with pytest.raises(DataConversionError):
        init_app(paths["config"])


def test_default_preferences_location():
    assert Config().user_prefs_file_path == DEFAULT_USER_PREFS_FILE
