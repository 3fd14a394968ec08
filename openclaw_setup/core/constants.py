"""Constants used throughout the OpenClaw setup tool."""


# Environment variable names
ENV_CONTAINER_ENGINE = "OPENCLAW_CONTAINER_ENGINE"
ENV_APT_PACKAGES = "OPENCLAW_DOCKER_APT_PACKAGES"
ENV_EXTRA_MOUNTS = "OPENCLAW_EXTRA_MOUNTS"
ENV_HOME_VOLUME = "OPENCLAW_HOME_VOLUME"
ENV_BIND_MOUNT_OPTIONS = "OPENCLAW_BIND_MOUNT_OPTIONS"
ENV_CONTAINER_USER = "OPENCLAW_CONTAINER_USER"
ENV_GATEWAY_TOKEN = "OPENCLAW_GATEWAY_TOKEN"
ENV_CONFIG_DIR = "OPENCLAW_CONFIG_DIR"
ENV_WORKSPACE_DIR = "OPENCLAW_WORKSPACE_DIR"
ENV_GATEWAY_PORT = "OPENCLAW_GATEWAY_PORT"
ENV_BRIDGE_PORT = "OPENCLAW_BRIDGE_PORT"
ENV_GATEWAY_BIND = "OPENCLAW_GATEWAY_BIND"
ENV_IMAGE = "OPENCLAW_IMAGE"

# Order of keys in the generated .env file
ENV_FILE_KEYS = [
    ENV_CONFIG_DIR,
    ENV_WORKSPACE_DIR,
    ENV_GATEWAY_PORT,
    ENV_BRIDGE_PORT,
    ENV_GATEWAY_BIND,
    ENV_GATEWAY_TOKEN,
    ENV_IMAGE,
    ENV_CONTAINER_ENGINE,
    ENV_EXTRA_MOUNTS,
    ENV_HOME_VOLUME,
    ENV_APT_PACKAGES,
    ENV_BIND_MOUNT_OPTIONS,
    ENV_CONTAINER_USER,
]

# Defaults
DEFAULT_ENGINE = "docker"
DEFAULT_IMAGE = "openclaw:local"
DEFAULT_GATEWAY_PORT = "18789"
DEFAULT_BRIDGE_PORT = "18790"
DEFAULT_GATEWAY_BIND = "lan"
CONFIG_DIR_NAME = ".openclaw"
WORKSPACE_DIR_NAME = "workspace"

# SELinux / rootless handling
SELINUX_ENFORCING = "Enforcing"
SELINUX_BIND_MOUNT_OPTIONS = ":Z"
ROOTLESS_CONTAINER_USER = "0:0"
ROOTLESS_INFO_FORMAT = "{{.Host.Security.Rootless}}"
TRUTHY_VALUES = ("true", "1", "yes")
FALSY_VALUES = ("false", "0", "no")

# Container layout
CONTAINER_HOME = "/home/node"
CONTAINER_STATE_DIR = f"{CONTAINER_HOME}/{CONFIG_DIR_NAME}"
CONTAINER_WORKSPACE_DIR = f"{CONTAINER_STATE_DIR}/{WORKSPACE_DIR_NAME}"

# Compose services
GATEWAY_SERVICE = "openclaw-gateway"
CLI_SERVICE = "openclaw-cli"
COMPOSE_SERVICES = [GATEWAY_SERVICE, CLI_SERVICE]
ONBOARD_COMMAND = ["onboard", "--no-install-daemon"]

# File names
ENV_FILE_NAME = ".env"
DOCKERFILE_NAME = "Dockerfile"
COMPOSE_FILE_NAME = "docker-compose.yml"
COMPOSE_EXTRA_FILE_NAME = "docker-compose.extra.yml"

# Host probes
GETENFORCE_BINARY = "getenforce"
PROBE_TIMEOUT = 30  # seconds
