"""Resolved configuration models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..core.constants import (
    DEFAULT_BRIDGE_PORT,
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
    ENV_FILE_KEYS,
    ENV_GATEWAY_BIND,
    ENV_GATEWAY_PORT,
    ENV_GATEWAY_TOKEN,
    ENV_HOME_VOLUME,
    ENV_IMAGE,
    ENV_WORKSPACE_DIR,
)


class ContainerEngine(str, Enum):
    """Supported container engines."""
    DOCKER = "docker"
    PODMAN = "podman"


class MountSpec(BaseModel):
    """A single `source:target[:options]` bind mount."""
    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    options: str = ""

    @classmethod
    def parse(cls, raw: str) -> 'MountSpec':
        """Parse a mount spec, raising ValueError if it is malformed."""
        parts = raw.strip().split(":")
        if len(parts) not in (2, 3) or not parts[0] or not parts[1]:
            raise ValueError(f"Invalid mount spec '{raw}': expected source:target[:options]")
        options = parts[2] if len(parts) == 3 else ""
        return cls(source=parts[0], target=parts[1], options=options)

    def render(self) -> str:
        spec = f"{self.source}:{self.target}"
        if self.options:
            spec += f":{self.options}"
        return spec


class ResolvedConfig(BaseModel):
    """Configuration derived once per invocation from env and host probes."""
    model_config = ConfigDict(frozen=True)

    container_engine: ContainerEngine = ContainerEngine.DOCKER
    apt_packages: str = ""
    extra_mounts: tuple[MountSpec, ...] = ()
    home_volume: Optional[str] = None
    bind_mount_options: str = ""
    container_user: Optional[str] = None
    is_rootless: bool = False
    selinux_enforcing: bool = False

    config_dir: str
    workspace_dir: str
    gateway_port: str = DEFAULT_GATEWAY_PORT
    bridge_port: str = DEFAULT_BRIDGE_PORT
    gateway_bind: str = DEFAULT_GATEWAY_BIND
    gateway_token: str = ""
    image: str = DEFAULT_IMAGE

    @property
    def home_volume_is_path(self) -> bool:
        """True when the home volume is a host path rather than a volume name."""
        if not self.home_volume:
            return False
        return "/" in self.home_volume or self.home_volume.startswith(("~", "."))

    def env_values(self) -> dict[str, str]:
        """Values for the .env file, keyed in the fixed output order."""
        values = {
            ENV_CONFIG_DIR: self.config_dir,
            ENV_WORKSPACE_DIR: self.workspace_dir,
            ENV_GATEWAY_PORT: self.gateway_port,
            ENV_BRIDGE_PORT: self.bridge_port,
            ENV_GATEWAY_BIND: self.gateway_bind,
            ENV_GATEWAY_TOKEN: self.gateway_token,
            ENV_IMAGE: self.image,
            ENV_CONTAINER_ENGINE: self.container_engine.value,
            ENV_EXTRA_MOUNTS: ",".join(mount.render() for mount in self.extra_mounts),
            ENV_HOME_VOLUME: self.home_volume or "",
            ENV_APT_PACKAGES: self.apt_packages,
            ENV_BIND_MOUNT_OPTIONS: self.bind_mount_options,
            ENV_CONTAINER_USER: self.container_user or "",
        }
        return {key: values[key] for key in ENV_FILE_KEYS}
