import logging

import click
from pydantic import ValidationError as ConfigValidationError

from ...common.logging_config import setup_colored_logging
from ...config import load_config
from ..utils import error_exit, load_env_file


@click.command(name="run")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML configuration file (defaults to $TASK_LIST_CONFIG).",
)
@click.option("--host", default=None, help="Interface to bind (overrides config).")
@click.option(
    "--port", type=click.IntRange(1, 65535), default=None, help="Port to bind (overrides config)."
)
@click.option(
    "-u",
    "--system-env",
    is_flag=True,
    default=False,
    help="Use system environment variables only; do not load .env file.",
)
def run(config_path, host, port, system_env: bool):
    """
    Serve the task list web application with uvicorn.
    """
    env_path = load_env_file(system_env)

    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError, ConfigValidationError) as e:
        error_exit(f"Error: invalid configuration: {e}")

    updates = {}
    if host:
        updates["host"] = host
    if port:
        updates["port"] = port
    if updates:
        config = config.model_copy(update=updates)

    setup_colored_logging(level=config.log_level_number)
    log = logging.getLogger(__name__)

    if system_env:
        log.warning("Skipping .env file loading due to --system-env flag.")
    elif not env_path:
        log.warning(
            "Warning: .env file not found in the current directory or parent directories. Proceeding without loading .env."
        )
    else:
        log.info("Loaded environment variables from: %s", env_path)

    import uvicorn

    from ...main import create_app

    app = create_app(config)
    log.info("Serving %s on http://%s:%s", config.app_name, config.host, config.port)
    # log_config=None keeps the handlers installed above
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        log_config=None,
    )
