"""Detect command: show the resolved configuration."""

import click
from rich.console import Console
from rich.table import Table

from openclaw_setup.cli.helpers import get_project_dir, resolve_or_exit
from ...core.generator import ConfigGenerator


@click.command()
@click.option('--project-dir', type=click.Path(file_okay=False), help='Project directory')
@click.option('--show-token', is_flag=True, help='Print the gateway token instead of masking it')
def detect(project_dir, show_token):
    """Show the resolved configuration without writing files"""
    console = Console()
    generator = ConfigGenerator(get_project_dir(project_dir))
    config = resolve_or_exit(generator)

    table = Table(title="Resolved Configuration")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Engine", config.container_engine.value)
    table.add_row("Linux host", str(generator.probe.is_linux()))
    table.add_row("SELinux enforcing", str(config.selinux_enforcing))
    table.add_row("Rootless", str(config.is_rootless))
    table.add_row("Bind mount options", config.bind_mount_options or "-")
    table.add_row("Container user", config.container_user or "-")
    table.add_row("Home volume", config.home_volume or "-")
    table.add_row("Extra mounts", ", ".join(m.render() for m in config.extra_mounts) or "-")
    table.add_row("Apt packages", config.apt_packages or "-")
    table.add_row("Config dir", config.config_dir)
    table.add_row("Workspace dir", config.workspace_dir)
    table.add_row("Image", config.image)
    token = config.gateway_token if show_token else "********"
    table.add_row("Gateway token", token)

    console.print(table)
