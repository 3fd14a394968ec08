"""Main CLI entry point for the OpenClaw setup tool."""

import logging

import click

from .commands.detect import detect
from .commands.generate import generate
from .commands.setup import setup


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """OpenClaw Setup - Configure a local Docker or Podman deployment"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


# Register commands
cli.add_command(setup)
cli.add_command(generate)
cli.add_command(detect)


if __name__ == '__main__':
    cli()
