"""Reading and writing the compose .env file."""

import logging
from pathlib import Path

from ..models.config import ResolvedConfig

logger = logging.getLogger(__name__)


def render_env_file(config: ResolvedConfig) -> str:
    """Render one KEY=value line per recognized key, values verbatim."""
    lines = [f"{key}={value}" for key, value in config.env_values().items()]
    return "\n".join(lines) + "\n"


def write_env_file(path: Path, config: ResolvedConfig) -> Path:
    """Write the .env file, replacing any previous contents."""
    path.write_text(render_env_file(config))
    logger.info(f"Wrote {path}")
    return path


def read_env_file(path: Path) -> dict[str, str]:
    """Parse an existing .env file. Missing files yield an empty dict."""
    if not path.exists():
        return {}

    values = {}
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, value = line.split('=', 1)
        values[key.strip()] = value
    return values
