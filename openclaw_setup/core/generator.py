"""Resolve configuration and generate the .env and compose override files."""

import logging
import os
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .compose_override import build_compose_override, render_compose_override
from .constants import (
    COMPOSE_EXTRA_FILE_NAME,
    DEFAULT_BRIDGE_PORT,
    DEFAULT_ENGINE,
    DEFAULT_GATEWAY_BIND,
    DEFAULT_GATEWAY_PORT,
    DEFAULT_IMAGE,
    ENV_APT_PACKAGES,
    ENV_BIND_MOUNT_OPTIONS,
    ENV_BRIDGE_PORT,
    ENV_CONFIG_DIR,
    ENV_CONTAINER_ENGINE,
    ENV_CONTAINER_USER,
    ENV_EXTRA_MOUNTS,
    ENV_FILE_NAME,
    ENV_GATEWAY_BIND,
    ENV_GATEWAY_PORT,
    ENV_GATEWAY_TOKEN,
    ENV_HOME_VOLUME,
    ENV_IMAGE,
    ENV_WORKSPACE_DIR,
    ROOTLESS_CONTAINER_USER,
    SELINUX_BIND_MOUNT_OPTIONS,
)
from .env_file import read_env_file, write_env_file
from .probes import HostProbe
from ..models.config import ContainerEngine, MountSpec, ResolvedConfig
from ..services.exceptions import ConfigurationConflictError
from ..utils.path_finder import PathFinder

logger = logging.getLogger(__name__)


@dataclass
class GeneratedFiles:
    """Paths written by a generator run."""
    env_file: Path
    compose_override: Path


class ConfigGenerator:
    """Generates the .env and compose override files for a project directory."""

    def __init__(
        self,
        project_dir: Path,
        env: Optional[Mapping[str, str]] = None,
        probe: Optional[HostProbe] = None,
    ):
        self.project_dir = Path(project_dir)
        self.env = dict(os.environ if env is None else env)
        self.probe = probe or HostProbe(self.env)
        self.path_finder = PathFinder(self.env)

    @property
    def env_file_path(self) -> Path:
        return self.project_dir / ENV_FILE_NAME

    @property
    def compose_override_path(self) -> Path:
        return self.project_dir / COMPOSE_EXTRA_FILE_NAME

    def resolve(self) -> ResolvedConfig:
        """Compute the resolved configuration.

        Raises:
            ConfigurationConflictError: If the engine or a mount spec is invalid
        """
        engine = self._resolve_engine()
        is_linux = self.probe.is_linux()
        detect = engine is ContainerEngine.PODMAN and is_linux

        selinux_enforcing = False
        if detect and ENV_BIND_MOUNT_OPTIONS not in self.env:
            selinux_enforcing = self.probe.selinux_enforcing().enabled

        is_rootless = False
        if detect and ENV_CONTAINER_USER not in self.env:
            is_rootless = self.probe.engine_rootless(engine).enabled

        if ENV_BIND_MOUNT_OPTIONS in self.env:
            bind_mount_options = self.env[ENV_BIND_MOUNT_OPTIONS]
        elif selinux_enforcing:
            bind_mount_options = SELINUX_BIND_MOUNT_OPTIONS
        else:
            bind_mount_options = ""

        if ENV_CONTAINER_USER in self.env:
            container_user = self.env[ENV_CONTAINER_USER] or None
        elif not detect:
            container_user = None
        elif is_rootless:
            container_user = ROOTLESS_CONTAINER_USER
        else:
            container_user = self.probe.host_user()

        logger.debug(
            f"Resolved engine={engine.value} linux={is_linux} selinux={selinux_enforcing} "
            f"rootless={is_rootless} bind_options={bind_mount_options!r} user={container_user!r}"
        )

        return ResolvedConfig(
            container_engine=engine,
            apt_packages=self._get(ENV_APT_PACKAGES),
            extra_mounts=self._parse_extra_mounts(self._get(ENV_EXTRA_MOUNTS)),
            home_volume=self._get(ENV_HOME_VOLUME) or None,
            bind_mount_options=bind_mount_options,
            container_user=container_user,
            is_rootless=is_rootless,
            selinux_enforcing=selinux_enforcing,
            config_dir=self._get(ENV_CONFIG_DIR) or str(self.path_finder.default_config_dir()),
            workspace_dir=self._get(ENV_WORKSPACE_DIR) or str(self.path_finder.default_workspace_dir()),
            gateway_port=self._get(ENV_GATEWAY_PORT) or DEFAULT_GATEWAY_PORT,
            bridge_port=self._get(ENV_BRIDGE_PORT) or DEFAULT_BRIDGE_PORT,
            gateway_bind=self._get(ENV_GATEWAY_BIND) or DEFAULT_GATEWAY_BIND,
            gateway_token=self._resolve_gateway_token(),
            image=self._get(ENV_IMAGE) or DEFAULT_IMAGE,
        )

    def write(self, config: ResolvedConfig) -> GeneratedFiles:
        """Write both output files, overwriting previous versions."""
        env_file = write_env_file(self.env_file_path, config)

        document = build_compose_override(config)
        self.compose_override_path.write_text(render_compose_override(document))
        logger.info(f"Wrote {self.compose_override_path}")

        return GeneratedFiles(env_file=env_file, compose_override=self.compose_override_path)

    def generate(self) -> tuple[ResolvedConfig, GeneratedFiles]:
        config = self.resolve()
        return config, self.write(config)

    def _get(self, key: str) -> str:
        return self.env.get(key) or ""

    def _resolve_engine(self) -> ContainerEngine:
        value = self._get(ENV_CONTAINER_ENGINE).strip().lower() or DEFAULT_ENGINE
        try:
            return ContainerEngine(value)
        except ValueError:
            supported = ", ".join(engine.value for engine in ContainerEngine)
            raise ConfigurationConflictError(
                f"Unsupported {ENV_CONTAINER_ENGINE}: {self.env[ENV_CONTAINER_ENGINE]!r} "
                f"(expected one of: {supported})"
            ) from None

    def _parse_extra_mounts(self, raw: str) -> tuple[MountSpec, ...]:
        mounts = []
        for entry in raw.split(","):
            if not entry.strip():
                continue
            try:
                mounts.append(MountSpec.parse(entry))
            except ValueError as e:
                raise ConfigurationConflictError(f"{ENV_EXTRA_MOUNTS}: {e}") from e
        return tuple(mounts)

    def _resolve_gateway_token(self) -> str:
        token = self._get(ENV_GATEWAY_TOKEN)
        if token:
            return token

        # Reuse the token from a previous run so reruns stay idempotent
        existing = read_env_file(self.env_file_path).get(ENV_GATEWAY_TOKEN)
        if existing:
            logger.debug("Reusing gateway token from existing .env")
            return existing

        logger.info("Generated a new gateway token")
        return secrets.token_hex(32)
