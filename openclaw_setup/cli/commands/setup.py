"""Setup command: generate config, build the image and start the gateway."""

import sys
from pathlib import Path

import click

from openclaw_setup.cli.helpers import exit_with_error, get_project_dir, resolve_or_exit
from ...core.constants import CLI_SERVICE, GATEWAY_SERVICE, ONBOARD_COMMAND
from ...core.generator import ConfigGenerator
from ...services.engine_service import EngineService
from ...services.exceptions import SetupError


@click.command()
@click.option('--project-dir', type=click.Path(file_okay=False), help='Directory holding Dockerfile and docker-compose.yml')
@click.option('--skip-build', is_flag=True, help='Skip building the image')
@click.option('--skip-onboard', is_flag=True, help='Skip the one-shot onboarding run')
def setup(project_dir, skip_build, skip_onboard):
    """Configure and start the OpenClaw container deployment"""
    project_dir = get_project_dir(project_dir)
    generator = ConfigGenerator(project_dir)
    config = resolve_or_exit(generator)
    engine_name = config.container_engine.value

    try:
        engine = EngineService(config.container_engine, project_dir, generator.env)
        engine.check_compose()
        engine.check_project_files()

        for directory in (config.config_dir, config.workspace_dir):
            click.echo(f"Ensuring directory exists: {directory}")
            _ensure_dir(directory)

        files = generator.write(config)
        click.echo(f"Wrote {files.env_file.name} and {files.compose_override.name}")

        if skip_build:
            click.echo("Skipping image build")
        else:
            click.echo(f"==> Building {engine_name} image: {config.image}")
            engine.build_image(config.image, config.apt_packages)

        if skip_onboard:
            click.echo("Skipping onboarding")
        else:
            click.echo("==> Onboarding")
            engine.compose_run(CLI_SERVICE, *ONBOARD_COMMAND)

        click.echo(f"==> Starting {GATEWAY_SERVICE}")
        engine.compose_up(GATEWAY_SERVICE)
    except SetupError as e:
        exit_with_error(e)
    except OSError as e:
        click.echo(f"Error: could not prepare configuration: {e}", err=True)
        sys.exit(1)

    click.echo("")
    click.echo(f"Gateway running with {engine_name}.")
    click.echo(f"Config: {config.config_dir}")
    click.echo(f"Workspace: {config.workspace_dir}")
    click.echo(f"Token: {config.gateway_token}")


def _ensure_dir(directory: str) -> None:
    Path(directory).expanduser().mkdir(parents=True, exist_ok=True)
