import click

from . import __version__
from .commands.init_db_cmd import init_db
from .commands.run_cmd import run


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__, "-v", "--version", help="Show the CLI version and exit."
)
def cli():
    """Task List command line."""
    pass


cli.add_command(run)
cli.add_command(init_db)


def main():
    cli()


if __name__ == "__main__":
    main()
