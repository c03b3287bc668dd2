"""
Tests for the task-list command line.
"""

from unittest.mock import MagicMock, patch

import pytest
import yaml
from click.testing import CliRunner

from task_list import __version__, dependencies
from task_list.cli.main import cli


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    for suffix in ("CONFIG", "DATABASE_URL", "HOST", "PORT", "LOG_LEVEL", "APP_NAME"):
        monkeypatch.delenv(f"TASK_LIST_{suffix}", raising=False)
    dependencies.dispose_database()
    yield
    dependencies.dispose_database()


@pytest.fixture
def runner():
    return CliRunner()


def _config_file(tmp_path, **values):
    path = tmp_path / "task_list.yaml"
    path.write_text(yaml.safe_dump({"task_list": values}), encoding="utf-8")
    return str(path)


class TestCliGroup:

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "run" in result.output
        assert "init-db" in result.output


class TestInitDb:

    def test_creates_schema_and_reports_count(self, runner, tmp_path):
        db_url = f"sqlite:///{tmp_path / 'tasks.db'}"
        config_path = _config_file(tmp_path, database_url=db_url)

        result = runner.invoke(cli, ["init-db", "--config", config_path, "--system-env"])

        assert result.exit_code == 0, result.output
        assert "(0 task(s))" in result.output
        assert (tmp_path / "tasks.db").exists()
        assert dependencies.SessionLocal is None

    def test_requires_a_database_url(self, runner, tmp_path):
        config_path = _config_file(tmp_path, database_url="")

        result = runner.invoke(cli, ["init-db", "--config", config_path, "--system-env"])

        assert result.exit_code == 1
        assert "no database URL configured" in result.output


class TestRun:

    def test_serves_app_with_overrides(self, runner, tmp_path):
        config_path = _config_file(tmp_path, database_url="", port=8100)
        app = MagicMock()

        with patch("uvicorn.run") as mock_run, patch(
            "task_list.main.create_app", return_value=app
        ) as mock_create_app, patch(
            "task_list.cli.commands.run_cmd.setup_colored_logging"
        ):
            result = runner.invoke(
                cli,
                ["run", "--config", config_path, "--host", "0.0.0.0", "--system-env"],
            )

        assert result.exit_code == 0, result.output
        config = mock_create_app.call_args.args[0]
        assert config.host == "0.0.0.0"
        assert config.port == 8100
        assert config.database_url is None
        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args == (app,)
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8100
        assert kwargs["log_config"] is None

    def test_missing_config_file_exits(self, runner, tmp_path):
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(
                cli, ["run", "--config", str(tmp_path / "missing.yaml"), "--system-env"]
            )

        assert result.exit_code == 1
        assert "invalid configuration" in result.output
        mock_run.assert_not_called()
