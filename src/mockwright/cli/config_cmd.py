"""Mockwright config command."""

import click

import mockwright.config


@click.command()
def config() -> None:
    """Show the effective configuration as JSON.

    Values reflect MOCKWRIGHT_* environment overrides.
    """
    click.echo(mockwright.config.settings.model_dump_json(indent=2))
