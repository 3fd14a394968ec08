import os
import stat
from pathlib import Path

import pytest
from click.testing import CliRunner
from unittest.mock import Mock

from openclaw_setup.core.probes import HostProbe
from openclaw_setup.models.probe import ProbeResult


ENGINE_STUB = """#!/usr/bin/env bash
set -euo pipefail
log="$DOCKER_STUB_LOG"
if [[ "${1:-}" == "compose" && "${2:-}" == "version" ]]; then
  exit 0
fi
if [[ "${1:-}" == "build" ]]; then
  echo "build $*" >>"$log"
  exit 0
fi
if [[ "${1:-}" == "compose" ]]; then
  echo "compose $*" >>"$log"
  exit 0
fi
echo "unknown $*" >>"$log"
exit 0
"""

ROOTLESS_PODMAN_STUB = """#!/usr/bin/env bash
set -euo pipefail
if [[ "${1:-}" == "info" ]]; then
  echo "%s"
  exit 0
fi
if [[ "${1:-}" == "compose" && "${2:-}" == "version" ]]; then
  exit 0
fi
if [[ "${1:-}" == "build" ]]; then
  echo "build $*" >>"$DOCKER_STUB_LOG"
  exit 0
fi
if [[ "${1:-}" == "compose" ]]; then
  echo "compose $*" >>"$DOCKER_STUB_LOG"
  exit 0
fi
echo "unknown $*" >>"$DOCKER_STUB_LOG"
exit 0
"""

GETENFORCE_STUB = """#!/usr/bin/env bash
set -euo pipefail
echo "%s"
"""

BASE_COMPOSE = "services:\n  openclaw-gateway:\n    image: noop\n  openclaw-cli:\n    image: noop\n"


def write_stub(bin_dir: Path, name: str, content: str) -> Path:
    """Write an executable stub script into bin_dir."""
    bin_dir.mkdir(parents=True, exist_ok=True)
    path = bin_dir / name
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


class SetupSandbox:
    """A project directory with base files and stub engine binaries."""

    def __init__(self, root: Path):
        self.root = root
        self.bin_dir = root / "bin"
        self.log_path = root / "docker-stub.log"

        (root / "Dockerfile").write_text("FROM scratch\n")
        (root / "docker-compose.yml").write_text(BASE_COMPOSE)
        write_stub(self.bin_dir, "docker", ENGINE_STUB)
        self.log_path.write_text("")

    def add_podman(self, rootless=None):
        if rootless is None:
            write_stub(self.bin_dir, "podman", ENGINE_STUB)
        else:
            write_stub(self.bin_dir, "podman", ROOTLESS_PODMAN_STUB % rootless)

    def add_getenforce(self, mode):
        write_stub(self.bin_dir, "getenforce", GETENFORCE_STUB % mode)

    def env(self, **overrides):
        """Environment overrides for CliRunner.invoke.

        OPENCLAW_* variables from the host are removed unless given here;
        a value of None leaves the variable unset.
        """
        env = {key: None for key in os.environ if key.startswith("OPENCLAW_")}
        env.update({
            "PATH": f"{self.bin_dir}{os.pathsep}{os.environ.get('PATH', '')}",
            "DOCKER_STUB_LOG": str(self.log_path),
            "OPENCLAW_GATEWAY_TOKEN": "test-token",
            "OPENCLAW_CONFIG_DIR": str(self.root / "config"),
            "OPENCLAW_WORKSPACE_DIR": str(self.root / "openclaw"),
        })
        env.update(overrides)
        return env

    def stub(self, name, content):
        """Replace or add a stub binary."""
        return write_stub(self.bin_dir, name, content)

    def read(self, name):
        return (self.root / name).read_text()

    @property
    def log(self):
        return self.log_path.read_text()


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def sandbox(tmp_path):
    """Provides a project directory wired with stub engine binaries."""
    return SetupSandbox(tmp_path)


@pytest.fixture
def mock_probe():
    """Provides a host probe for a Linux host with every feature reported absent."""
    probe = Mock(spec=HostProbe)
    probe.is_linux.return_value = True
    probe.selinux_enforcing.return_value = ProbeResult.FALSE
    probe.engine_rootless.return_value = ProbeResult.FALSE
    probe.host_user.return_value = "1000:1000"
    return probe


@pytest.fixture
def base_env(tmp_path):
    """Minimal environment for constructing a ConfigGenerator."""
    return {
        "HOME": str(tmp_path / "home"),
        "PATH": os.environ.get("PATH", ""),
        "OPENCLAW_GATEWAY_TOKEN": "test-token",
        "OPENCLAW_CONFIG_DIR": str(tmp_path / "config"),
        "OPENCLAW_WORKSPACE_DIR": str(tmp_path / "workspace"),
    }
