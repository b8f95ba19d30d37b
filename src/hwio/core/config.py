"""
Configuration management for hwio.

Handles loading and saving the YAML runtime configuration: which
plugins to load, which platform and providers to prefer, and how to log.
"""

import logging
import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
from pathlib import Path

logger = logging.getLogger(__name__)


# Default configuration paths
CONFIG_PATHS = [
    "/etc/hwio/config.yaml",
    os.path.expanduser("~/.config/hwio/config.yaml"),
    "hwio.yaml",
]

CONFIG_ENV = "HWIO_CONFIG"
LOG_LEVEL_ENV = "HWIO_LOG_LEVEL"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Config:
    """Main configuration class."""
    version: int = 1

    # Plugins to load, as "package.module:ClassName"
    plugins: List[str] = field(default_factory=list)

    # Platform id, or 'auto' to pick the highest-priority enabled platform
    default_platform: str = "auto"

    # Provider id per I/O type ('digital_output', 'digital_input', 'i2c')
    default_providers: Dict[str, str] = field(default_factory=dict)

    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        config = cls()

        if "version" in data:
            config.version = data["version"]

        if "plugins" in data:
            config.plugins = list(data["plugins"] or [])

        if "default_platform" in data:
            config.default_platform = data["default_platform"]

        if "default_providers" in data:
            config.default_providers = dict(data["default_providers"] or {})

        if "logging" in data:
            config.logging = LoggingConfig(**data["logging"])

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            "version": self.version,
            "plugins": list(self.plugins),
            "default_platform": self.default_platform,
            "default_providers": dict(self.default_providers),
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
            },
        }

    def save(self, path: Optional[str] = None):
        """Save configuration to file."""
        if path is None:
            path = CONFIG_PATHS[0]

        # Ensure directory exists
        Path(path).parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)


def load_config(path: Optional[str] = None) -> Config:
    """
    Load configuration from file.

    Args:
        path: Path to config file. If None, uses $HWIO_CONFIG or searches
            default locations.

    Returns:
        Config object with loaded or default settings.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV) or None

    if path is not None:
        paths_to_try = [path]
    else:
        paths_to_try = CONFIG_PATHS

    config = None
    for config_path in paths_to_try:
        if os.path.exists(config_path):
            try:
                with open(config_path) as f:
                    data = yaml.safe_load(f)
                if data and not isinstance(data, dict):
                    logger.warning(
                        f"Ignoring config {config_path}: expected a mapping, got {type(data).__name__}"
                    )
                    continue
                if data:
                    config = Config.from_dict(data)
                    logger.debug(f"Loaded configuration from {config_path}")
                    break
            except Exception as e:
                logger.warning(f"Failed to load config from {config_path}: {e}")

    if config is None:
        config = Config()

    level = os.environ.get(LOG_LEVEL_ENV)
    if level:
        config.logging.level = level.upper()

    return config


def get_config_path() -> Optional[str]:
    """Get the path to the active config file."""
    explicit = os.environ.get(CONFIG_ENV)
    if explicit and os.path.exists(explicit):
        return explicit
    for path in CONFIG_PATHS:
        if os.path.exists(path):
            return path
    return None
