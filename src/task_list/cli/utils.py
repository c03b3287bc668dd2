import sys

import click
from dotenv import find_dotenv, load_dotenv


def error_exit(message: str, code: int = 1):
    """Print an error message in red and exit."""
    click.echo(click.style(message, fg="red"), err=True)
    sys.exit(code)


def load_env_file(system_env: bool) -> str:
    """
    Load the nearest ``.env`` into the environment unless ``system_env`` is set.

    Returns the path that was loaded, or an empty string.
    """
    if system_env:
        return ""
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(dotenv_path=env_path, override=True)
    return env_path
