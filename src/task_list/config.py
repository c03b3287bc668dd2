"""
Application configuration.

Values are resolved in order: built-in defaults, an optional YAML file,
then ``TASK_LIST_*`` environment variables. Loading a ``.env`` file into
the environment is the CLI's job (see ``cli.main``).
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

log = logging.getLogger(__name__)

ENV_PREFIX = "TASK_LIST_"
CONFIG_PATH_ENV = f"{ENV_PREFIX}CONFIG"

_ENV_FIELDS = {
    "DATABASE_URL": "database_url",
    "HOST": "host",
    "PORT": "port",
    "LOG_LEVEL": "log_level",
    "APP_NAME": "app_name",
}


class AppConfig(BaseModel):
    """Settings for the web app, its database and the dev server."""

    app_name: str = "Task List"
    database_url: Optional[str] = "sqlite:///./tasks.db"
    host: str = "127.0.0.1"
    port: int = Field(8000, ge=1, le=65535)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @field_validator("database_url")
    @classmethod
    def _blank_url_means_in_memory(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config format in {path} (expected a mapping)")
    # Accept either a flat mapping or one nested under "task_list"
    section = raw.get("task_list", raw)
    if not isinstance(section, dict):
        raise ValueError(f"Invalid 'task_list' section in {path} (expected a mapping)")
    return section


def _read_env(environ: Dict[str, str]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for suffix, field in _ENV_FIELDS.items():
        value = environ.get(f"{ENV_PREFIX}{suffix}")
        if value is not None:
            values[field] = value
    return values


def load_config(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Dict[str, str]] = None,
) -> AppConfig:
    """
    Build the AppConfig from defaults, an optional YAML file and the environment.

    Args:
        path: YAML file to read; falls back to ``TASK_LIST_CONFIG`` when omitted.
        environ: Mapping to read overrides from (defaults to ``os.environ``).

    Raises:
        FileNotFoundError: if an explicit config path does not exist.
        pydantic.ValidationError: if a resolved value is invalid.
    """
    environ = dict(os.environ) if environ is None else environ
    config_path = path or environ.get(CONFIG_PATH_ENV)

    values: Dict[str, Any] = {}
    if config_path:
        config_path = Path(config_path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        values.update(_read_yaml(config_path))
        log.info("Loaded configuration from %s", config_path)

    values.update(_read_env(environ))
    return AppConfig(**values)
