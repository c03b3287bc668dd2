import click
from pydantic import ValidationError as ConfigValidationError

from ...config import load_config
from ..utils import error_exit, load_env_file


@click.command(name="init-db")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML configuration file (defaults to $TASK_LIST_CONFIG).",
)
@click.option(
    "-u",
    "--system-env",
    is_flag=True,
    default=False,
    help="Use system environment variables only; do not load .env file.",
)
def init_db(config_path, system_env: bool):
    """Create the task table if needed and report how many tasks it holds."""
    load_env_file(system_env)

    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError, ConfigValidationError) as e:
        error_exit(f"Error: invalid configuration: {e}")

    if not config.database_url:
        error_exit("Error: no database URL configured; nothing to initialize.")

    from ... import dependencies
    from ...repository import TaskRepository

    dependencies.init_database(config.database_url)
    try:
        db = dependencies.SessionLocal()
        try:
            count = TaskRepository(db).count()
        finally:
            db.close()
    finally:
        dependencies.dispose_database()

    click.echo(f"Database ready at {config.database_url} ({count} task(s)).")
