"""Container engine service wrapping the docker/podman command line."""

import logging
import os
import subprocess
from pathlib import Path
from typing import Mapping, Optional

import yaml

from .exceptions import (
    ConfigurationConflictError,
    MissingDependencyError,
    SubprocessFailureError,
)
from ..core.constants import (
    COMPOSE_EXTRA_FILE_NAME,
    COMPOSE_FILE_NAME,
    COMPOSE_SERVICES,
    DOCKERFILE_NAME,
    ENV_APT_PACKAGES,
)
from ..models.config import ContainerEngine
from ..utils.path_finder import PathFinder

logger = logging.getLogger(__name__)


class EngineService:
    """Runs build and compose commands through the engine binary."""

    def __init__(
        self,
        engine: ContainerEngine,
        project_dir: Path,
        env: Optional[Mapping[str, str]] = None,
    ):
        """Locate the engine binary.

        Raises:
            MissingDependencyError: If the engine binary is not on PATH
        """
        self.engine = engine
        self.project_dir = Path(project_dir)
        self.env = dict(os.environ if env is None else env)

        self.binary = PathFinder(self.env).find_executable(engine.value)
        if not self.binary:
            raise MissingDependencyError(f"Missing dependency: {engine.value}")
        logger.debug(f"Using {engine.value} at {self.binary}")

    def check_compose(self) -> None:
        """Ensure the engine's compose subcommand is available.

        Raises:
            MissingDependencyError: If `<engine> compose version` fails
        """
        command = [self.binary, "compose", "version"]
        try:
            result = subprocess.run(command, cwd=self.project_dir, env=self.env, capture_output=True, text=True)
        except OSError as e:
            raise MissingDependencyError(f"Missing dependency: {self.engine.value} compose ({e})") from e
        if result.returncode != 0:
            raise MissingDependencyError(
                f"Missing dependency: {self.engine.value} compose is not available"
            )

    def check_project_files(self) -> None:
        """Ensure the base Dockerfile and compose file exist and declare the services.

        Raises:
            MissingDependencyError: If a base file is missing
            ConfigurationConflictError: If the compose file lacks a required service
        """
        for name in (DOCKERFILE_NAME, COMPOSE_FILE_NAME):
            if not (self.project_dir / name).exists():
                raise MissingDependencyError(f"Missing dependency: {name} not found in {self.project_dir}")

        compose_path = self.project_dir / COMPOSE_FILE_NAME
        try:
            compose_data = yaml.safe_load(compose_path.read_text())
        except yaml.YAMLError as e:
            raise ConfigurationConflictError(f"Invalid {COMPOSE_FILE_NAME}: {e}") from e

        if not isinstance(compose_data, dict) or not compose_data.get('services'):
            raise ConfigurationConflictError(f"Invalid {COMPOSE_FILE_NAME}: no services found")

        services = compose_data['services']
        missing = [name for name in COMPOSE_SERVICES if name not in services]
        if missing:
            raise ConfigurationConflictError(
                f"{COMPOSE_FILE_NAME} is missing service(s): {', '.join(missing)}"
            )

    def build_image(self, tag: str, apt_packages: str = "") -> None:
        """Build the application image with the apt package list as a build arg.

        Raises:
            SubprocessFailureError: If the build exits non-zero
        """
        self._run([
            self.binary, "build",
            "--build-arg", f"{ENV_APT_PACKAGES}={apt_packages}",
            "-t", tag,
            "-f", DOCKERFILE_NAME,
            ".",
        ])

    def compose_up(self, service: str) -> None:
        """Start a compose service in the background."""
        self._run(self._compose_command() + ["up", "-d", service])

    def compose_run(self, service: str, *args: str) -> None:
        """Run a one-shot command in a compose service."""
        self._run(self._compose_command() + ["run", "--rm", service, *args])

    def _compose_command(self) -> list[str]:
        return [
            self.binary, "compose",
            "-f", COMPOSE_FILE_NAME,
            "-f", COMPOSE_EXTRA_FILE_NAME,
        ]

    def _run(self, command: list[str]) -> None:
        logger.info(f"Running: {' '.join(command)}")
        try:
            result = subprocess.run(command, cwd=self.project_dir, env=self.env)
        except OSError as e:
            raise MissingDependencyError(f"Missing dependency: {command[0]} ({e})") from e
        if result.returncode != 0:
            raise SubprocessFailureError(command, result.returncode)
