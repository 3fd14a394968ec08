"""Utilities for finding paths and executables."""

import os
import shutil
from pathlib import Path
from typing import Mapping, Optional

from ..core.constants import CONFIG_DIR_NAME, WORKSPACE_DIR_NAME


class PathFinder:
    """Utility class for finding paths and executables."""

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        """Initialize with the environment whose PATH and HOME are searched."""
        self.env = os.environ if env is None else env

    def find_executable(self, name: str) -> Optional[str]:
        """Find an executable on the configured PATH."""
        return shutil.which(name, path=self.env.get('PATH', os.defpath))

    def home_dir(self) -> Path:
        """Return the user's home directory."""
        home = self.env.get('HOME')
        if home:
            return Path(home)
        return Path.home()

    def default_config_dir(self) -> Path:
        return self.home_dir() / CONFIG_DIR_NAME

    def default_workspace_dir(self) -> Path:
        return self.default_config_dir() / WORKSPACE_DIR_NAME
