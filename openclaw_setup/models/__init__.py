"""Models for the OpenClaw setup tool."""

from .config import ContainerEngine, MountSpec, ResolvedConfig
from .probe import ProbeResult

__all__ = [
    'ContainerEngine',
    'MountSpec',
    'ResolvedConfig',
    'ProbeResult'
]
