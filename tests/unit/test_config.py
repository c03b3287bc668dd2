"""
Unit tests for configuration loading.
"""

import logging

import pytest
import yaml
from pydantic import ValidationError as ConfigValidationError

from task_list.config import AppConfig, load_config


def _write_yaml(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestAppConfig:

    def test_defaults(self):
        config = load_config(environ={})

        assert config.app_name == "Task List"
        assert config.database_url == "sqlite:///./tasks.db"
        assert config.host == "127.0.0.1"
        assert config.port == 8000
        assert config.log_level == "INFO"
        assert config.log_level_number == logging.INFO

    def test_blank_database_url_means_in_memory(self):
        assert AppConfig(database_url="  ").database_url is None

    def test_log_level_is_normalized(self):
        config = AppConfig(log_level="debug")

        assert config.log_level == "DEBUG"
        assert config.log_level_number == logging.DEBUG

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ConfigValidationError):
            AppConfig(log_level="chatty")

    @pytest.mark.parametrize("port", [0, 70000])
    def test_port_out_of_range_is_rejected(self, port):
        with pytest.raises(ConfigValidationError):
            AppConfig(port=port)


class TestLoadConfig:

    def test_reads_flat_yaml(self, tmp_path):
        path = _write_yaml(tmp_path / "config.yaml", {"port": 9001, "app_name": "Chores"})

        config = load_config(path, environ={})

        assert config.port == 9001
        assert config.app_name == "Chores"

    def test_reads_nested_yaml(self, tmp_path):
        path = _write_yaml(
            tmp_path / "config.yaml",
            {"task_list": {"database_url": "sqlite:///:memory:", "host": "0.0.0.0"}},
        )

        config = load_config(path, environ={})

        assert config.database_url == "sqlite:///:memory:"
        assert config.host == "0.0.0.0"

    def test_path_from_environment(self, tmp_path):
        path = _write_yaml(tmp_path / "from_env.yaml", {"port": 8123})

        config = load_config(environ={"TASK_LIST_CONFIG": str(path)})

        assert config.port == 8123

    def test_environment_overrides_yaml(self, tmp_path):
        path = _write_yaml(tmp_path / "config.yaml", {"port": 9001, "log_level": "INFO"})

        config = load_config(
            path,
            environ={"TASK_LIST_PORT": "9100", "TASK_LIST_LOG_LEVEL": "warning"},
        )

        assert config.port == 9100
        assert config.log_level == "WARNING"

    def test_empty_database_url_from_environment(self):
        config = load_config(environ={"TASK_LIST_DATABASE_URL": ""})

        assert config.database_url is None

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml", environ={})

    def test_non_mapping_yaml_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_config(path, environ={})

    def test_invalid_value_raises(self):
        with pytest.raises(ConfigValidationError):
            load_config(environ={"TASK_LIST_PORT": "not-a-port"})
