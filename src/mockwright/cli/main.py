"""Mockwright CLI main entry point."""

import click

from mockwright import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mockwright")
@click.option(
    "--log-level",
    default=None,
    help="Override MOCKWRIGHT_LOG_LEVEL for this run.",
)
def cli(log_level: str | None) -> None:
    """Mockwright - invocation interception and verification for mocks."""
    from mockwright.logging import configure_from_settings

    configure_from_settings(log_level=log_level)


# Import and register subcommands
from mockwright.cli.config_cmd import config  # noqa: E402
from mockwright.cli.explain import explain, matrix  # noqa: E402

cli.add_command(config)
cli.add_command(explain)
cli.add_command(matrix)
