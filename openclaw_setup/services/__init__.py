"""Service layer for driving the container engine."""

from .engine_service import EngineService
from .exceptions import (
    SetupError,
    MissingDependencyError,
    ConfigurationConflictError,
    SubprocessFailureError,
)

__all__ = [
    "EngineService",
    "SetupError",
    "MissingDependencyError",
    "ConfigurationConflictError",
    "SubprocessFailureError",
]
