"""Custom exceptions for the setup tool."""

from typing import Optional, Sequence


class SetupError(Exception):
    """Base exception for all fatal setup errors."""

    exit_code = 1


class MissingDependencyError(SetupError):
    """Exception raised when a required binary or base file is missing."""

    pass


class ConfigurationConflictError(SetupError):
    """Exception raised for invalid configuration values."""

    pass


class SubprocessFailureError(SetupError):
    """Exception raised when a build or compose command exits non-zero."""

    def __init__(self, command: Sequence[str], returncode: int, message: Optional[str] = None):
        self.command = list(command)
        self.returncode = returncode
        super().__init__(
            message or f"Command failed with exit code {returncode}: {' '.join(self.command)}"
        )

    @property
    def exit_code(self) -> int:
        return self.returncode
