"""
CLI command: config

Configuration inspection commands.
"""

import logging

import click

from researchexport.settings import Settings

logger = logging.getLogger("researchexport.cli.config")


@click.group("config")
def cli():
    """
    Configuration management commands.
    """
    pass


@cli.command("show")
def show_config():
    """
    Show current configuration.
    """
    settings = Settings()

    click.echo("researchexport Configuration")
    click.echo("=" * 30)
    click.echo(f"Root Directory: {settings.root_dir}")
    click.echo(f"Output Directory: {settings.output_dir}")
    click.echo(f"Base URL: {settings.base_url}")
    click.echo(f"Request Timeout: {settings.request_timeout}")
    click.echo(f"Max Workers: {settings.max_workers or 'unbounded'}")
    click.echo(f"Check Status: {settings.check_status}")
    click.echo(f"Default Sink: {settings.default_sink}")
    click.echo(f"JSON Indent: {settings.json_indent}")
    click.echo(f"Log Level: {settings.log_level}")
