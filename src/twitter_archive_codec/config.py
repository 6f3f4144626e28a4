import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import orjson

logger = logging.getLogger(__name__)


class Config:
    """Settings used when reading archives from a file provider.

    The transcoding functions themselves take every option as an argument
    and never consult this object. It covers:
    - Archive layout (data directory, manifest location and prefix)
    - Text encoding of archive files
    - Output formatting
    - Logging
    """

    def __init__(self):
        # Archive layout
        self.data_dir = "data"
        self._manifest_path = None  # follows data_dir unless set
        self.manifest_prefix = "window.__THAR_CONFIG = "

        # File handling
        self.encoding = "utf-8"

        # Output formatting
        self.indent_output = False  # two-space indentation instead of compact JSON

        # Logging
        self.log_level = logging.INFO
        self.log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def manifest_path(self) -> str:
        return self._manifest_path or f"{self.data_dir}/manifest.js"

    @manifest_path.setter
    def manifest_path(self, value: Optional[str]) -> None:
        self._manifest_path = value

    def load(self, path: Union[str, Path]) -> None:
        """Override settings from a JSON file, keeping defaults on failure."""
        path = Path(path)
        if not path.exists():
            logger.warning(f"No config file at {path}, using defaults")
            return
        try:
            values = orjson.loads(path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as e:
            logger.warning(f"Failed to load config from {path}: {e}")
            return
        if not isinstance(values, dict):
            logger.warning(f"Ignoring config {path}: expected a JSON object")
            return
        self.update(values)

    def update(self, values: Dict[str, Any]) -> None:
        for key, value in values.items():
            if hasattr(self, key):
                setattr(self, key, value)
            else:
                logger.warning(f"Unknown config key: {key}")

    def setup_logging(self) -> None:
        """Configure the root logger from ``log_level`` and ``log_format``."""
        logging.basicConfig(level=self.log_level, format=self.log_format)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return {
            'data_dir': self.data_dir,
            'manifest_path': self._manifest_path,
            'manifest_prefix': self.manifest_prefix,
            'encoding': self.encoding,
            'indent_output': self.indent_output,
            'log_level': self.log_level,
            'log_format': self.log_format,
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create Config instance from dictionary."""
        config = cls()
        config.update(config_dict)
        return config


# Create a global config instance
config = Config()
