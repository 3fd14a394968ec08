"""Compose override document construction and serialization.

The override is built as a plain mapping tree and written with PyYAML.
Empty collections are pruned before dumping so the output never carries
a `volumes:` key without entries.
"""

from typing import Any

import yaml

from .constants import (
    COMPOSE_SERVICES,
    CONTAINER_HOME,
    CONTAINER_STATE_DIR,
    CONTAINER_WORKSPACE_DIR,
)
from ..models.config import ResolvedConfig


class QuotedString(str):
    """A string that is always emitted double-quoted."""


class ComposeDumper(yaml.SafeDumper):
    """SafeDumper that indents block sequences and writes nulls as empty values."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


def _represent_quoted(dumper, data):
    return dumper.represent_scalar('tag:yaml.org,2002:str', str(data), style='"')


def _represent_none(dumper, data):
    return dumper.represent_scalar('tag:yaml.org,2002:null', '')


ComposeDumper.add_representer(QuotedString, _represent_quoted)
ComposeDumper.add_representer(type(None), _represent_none)


def _bind(source: str, target: str, options: str) -> str:
    return f"{source}:{target}{options}"


def service_volumes(config: ResolvedConfig) -> list[str]:
    """Mount entries shared by every service, in output order."""
    volumes = []
    if config.home_volume:
        options = config.bind_mount_options
        volumes.append(_bind(config.home_volume, CONTAINER_HOME, options))
        volumes.append(_bind(config.config_dir, CONTAINER_STATE_DIR, options))
        volumes.append(_bind(config.workspace_dir, CONTAINER_WORKSPACE_DIR, options))
    volumes.extend(mount.render() for mount in config.extra_mounts)
    return volumes


def service_definition(config: ResolvedConfig) -> dict[str, Any]:
    """A fresh service mapping; each service gets its own copy so no YAML aliases appear."""
    service: dict[str, Any] = {'volumes': service_volumes(config)}
    if config.container_user:
        service['user'] = QuotedString(config.container_user)
    return service


def build_compose_override(config: ResolvedConfig) -> dict[str, Any]:
    """Build the override document for the gateway and CLI services."""
    document: dict[str, Any] = {
        'services': {name: service_definition(config) for name in COMPOSE_SERVICES}
    }

    if config.home_volume and not config.home_volume_is_path:
        document['volumes'] = {config.home_volume: None}

    return prune_empty(document)


def prune_empty(document: dict[str, Any]) -> dict[str, Any]:
    """Drop empty `volumes` keys, at any depth.

    A non-empty `volumes` value is kept verbatim; the named-volume mapping
    under it may itself contain a volume called `volumes`.
    """
    pruned = {}
    for key, value in document.items():
        if key == 'volumes':
            if not value:
                continue
        elif isinstance(value, dict):
            value = prune_empty(value)
        pruned[key] = value
    return pruned


def render_compose_override(document: dict[str, Any]) -> str:
    return yaml.dump(
        document,
        Dumper=ComposeDumper,
        default_flow_style=False,
        sort_keys=False,
    )
