"""CLI helper functions for the OpenClaw setup tool.

These keep error reporting and project resolution consistent across
commands.
"""

import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from openclaw_setup.core.generator import ConfigGenerator
from openclaw_setup.models.config import ResolvedConfig
from openclaw_setup.services.exceptions import SetupError


def get_project_dir(project_dir: Optional[str]) -> Path:
    """Resolve the project directory, defaulting to the current directory."""
    if project_dir:
        return Path(project_dir).resolve()
    return Path.cwd()


def exit_with_error(error: SetupError) -> NoReturn:
    """Report a fatal setup error and exit with its exit code."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(error.exit_code)


def resolve_or_exit(generator: ConfigGenerator) -> ResolvedConfig:
    """Resolve configuration, exiting on configuration errors."""
    try:
        return generator.resolve()
    except SetupError as e:
        exit_with_error(e)
