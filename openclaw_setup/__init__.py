"""OpenClaw Setup - Configure local Docker and Podman deployments of OpenClaw."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
