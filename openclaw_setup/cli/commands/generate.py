"""Generate command: write .env and the compose override without touching the engine."""

import sys

import click

from openclaw_setup.cli.helpers import get_project_dir, resolve_or_exit
from ...core.generator import ConfigGenerator


@click.command()
@click.option('--project-dir', type=click.Path(file_okay=False), help='Directory to write the files into')
def generate(project_dir):
    """Write .env and docker-compose.extra.yml only"""
    project_dir = get_project_dir(project_dir)
    generator = ConfigGenerator(project_dir)
    config = resolve_or_exit(generator)

    try:
        files = generator.write(config)
    except OSError as e:
        click.echo(f"Error: could not write configuration: {e}", err=True)
        sys.exit(1)

    click.echo(f"Wrote {files.env_file}")
    click.echo(f"Wrote {files.compose_override}")
    if config.container_user:
        click.echo(f"Container user: {config.container_user}")
    if config.bind_mount_options:
        click.echo(f"Bind mount options: {config.bind_mount_options}")
