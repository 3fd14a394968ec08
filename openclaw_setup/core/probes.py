"""Host capability probes for SELinux and rootless engine detection."""

import logging
import os
import platform
import subprocess
from typing import Mapping, Optional

from .constants import (
    FALSY_VALUES,
    GETENFORCE_BINARY,
    PROBE_TIMEOUT,
    ROOTLESS_INFO_FORMAT,
    SELINUX_ENFORCING,
    TRUTHY_VALUES,
)
from ..models.config import ContainerEngine
from ..models.probe import ProbeResult
from ..utils.path_finder import PathFinder

logger = logging.getLogger(__name__)


class HostProbe:
    """Probes the host for capabilities that affect bind mounts and user mapping.

    Every probe returns a ProbeResult; errors never escape. A probe whose
    binary is missing, fails, or prints something unexpected reports
    ProbeResult.UNAVAILABLE.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None, system: Optional[str] = None):
        self.env = dict(os.environ if env is None else env)
        self.system = system or platform.system()
        self.path_finder = PathFinder(self.env)

    def is_linux(self) -> bool:
        return self.system == "Linux"

    def selinux_enforcing(self) -> ProbeResult:
        """Query SELinux enforcement mode via getenforce."""
        if not self.is_linux():
            return ProbeResult.UNAVAILABLE

        binary = self.path_finder.find_executable(GETENFORCE_BINARY)
        if not binary:
            logger.debug("getenforce not found; assuming SELinux is not enforcing")
            return ProbeResult.UNAVAILABLE

        output = self._query([binary])
        if output is None:
            return ProbeResult.UNAVAILABLE
        return ProbeResult.TRUE if output == SELINUX_ENFORCING else ProbeResult.FALSE

    def engine_rootless(self, engine: ContainerEngine) -> ProbeResult:
        """Ask the engine whether it runs rootless. Only Podman is probed."""
        if engine is not ContainerEngine.PODMAN:
            return ProbeResult.UNAVAILABLE

        binary = self.path_finder.find_executable(engine.value)
        if not binary:
            return ProbeResult.UNAVAILABLE

        output = self._query([binary, "info", "--format", ROOTLESS_INFO_FORMAT])
        if output is None:
            return ProbeResult.UNAVAILABLE

        value = output.lower()
        if value in TRUTHY_VALUES:
            return ProbeResult.TRUE
        if value in FALSY_VALUES:
            return ProbeResult.FALSE
        logger.debug(f"Unexpected rootless probe output: {output!r}")
        return ProbeResult.UNAVAILABLE

    def host_user(self) -> str:
        """Return the current user as uid:gid."""
        return f"{os.getuid()}:{os.getgid()}"

    def _query(self, command: list[str]) -> Optional[str]:
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                env=self.env,
                timeout=PROBE_TIMEOUT,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning(f"Probe {command[0]} failed: {e}")
            return None

        if result.returncode != 0:
            logger.debug(f"Probe {' '.join(command)} exited with {result.returncode}")
            return None

        lines = result.stdout.strip().splitlines()
        return lines[-1].strip() if lines else None
