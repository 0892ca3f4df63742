"""
Configuration Management

Loads profiler configuration from defaults, an optional YAML file and
environment variables.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union
from dotenv import load_dotenv

from .utils.file_utils import load_config as load_yaml_config
from .utils.logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = Path('config') / 'profiler_config.yaml'

DEFAULTS: Dict[str, Any] = {
    'profiler': {
        'numeric_threshold': 0.8,
        'date_threshold': 0.8,
        'sample_size': None,
    },
    'charts': {
        'histogram_bins': 10,
        'max_categories': 20,
    },
    'reporting': {
        'sample_rows': 5,
    },
    'logging': {
        'level': 'INFO',
        'file': {
            'enabled': False,
            'path': 'logs/profiler.log',
        },
    },
}

# The date cutoff is only meaningful inside this band
DATE_THRESHOLD_RANGE = (0.6, 0.8)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


class Config:
    """
    Profiler configuration.

    Loads configuration from:
    1. Built-in defaults
    2. YAML file (config/profiler_config.yaml unless another path is given)
    3. Environment variables (.env in the working directory is read first)

    There is no shared instance: create one and pass it to whatever needs it.

    Example:
        >>> config = Config()
        >>> config.get('profiler.date_threshold')
        0.8
    """

    def __init__(
        self,
        config_file: Optional[Union[str, Path]] = None,
        env_file: Optional[Union[str, Path]] = None
    ):
        """
        Initialize configuration.

        Args:
            config_file: Path to YAML config file (optional)
            env_file: Path to a .env file (optional)
        """
        env_path = Path(env_file) if env_file else Path.cwd() / '.env'
        if env_path.exists():
            load_dotenv(env_path)
            logger.info(f"Loaded environment variables from: {env_path}")

        self.config = copy.deepcopy(DEFAULTS)

        if config_file is not None:
            _deep_merge(self.config, load_yaml_config(config_file))
        elif DEFAULT_CONFIG_FILE.exists():
            _deep_merge(self.config, load_yaml_config(DEFAULT_CONFIG_FILE))
        else:
            logger.debug("No config file found, using defaults")

        self._apply_env_overrides()
        self._validate()

    def _apply_env_overrides(self):
        """Apply environment variable overrides to config."""
        if os.getenv('PROFILER_NUMERIC_THRESHOLD'):
            self.set('profiler.numeric_threshold', float(os.getenv('PROFILER_NUMERIC_THRESHOLD')))

        if os.getenv('PROFILER_DATE_THRESHOLD'):
            self.set('profiler.date_threshold', float(os.getenv('PROFILER_DATE_THRESHOLD')))

        if os.getenv('LOG_LEVEL'):
            self.set('logging.level', os.getenv('LOG_LEVEL'))

    def _validate(self):
        numeric = self.get('profiler.numeric_threshold')
        if not 0.0 <= numeric < 1.0:
            raise ValueError(f"profiler.numeric_threshold must be in [0, 1), got {numeric}")

        date = self.get('profiler.date_threshold')
        low, high = DATE_THRESHOLD_RANGE
        if not low <= date <= high:
            raise ValueError(f"profiler.date_threshold must be in [{low}, {high}], got {date}")

        if int(self.get('charts.histogram_bins')) < 1:
            raise ValueError("charts.histogram_bins must be at least 1")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key: Config key (e.g., 'charts.histogram_bins')
            default: Default value if key not found

        Returns:
            Configuration value

        Example:
            >>> config.get('charts.histogram_bins')
            10
            >>> config.get('nonexistent.key', 'default')
            'default'
        """
        value = self.config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """
        Set a configuration value using dot notation.

        Args:
            key: Config key (e.g., 'profiler.date_threshold')
            value: Value to set
        """
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            config = config.setdefault(k, {})

        config[keys[-1]] = value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get one top-level section ('profiler', 'charts', 'reporting', 'logging').
        """
        return dict(self.config.get(section, {}))

    @property
    def log_file(self) -> Optional[str]:
        """Log file path when file logging is enabled, else None."""
        if self.get('logging.file.enabled'):
            return self.get('logging.file.path')
        return None

    def to_dict(self) -> Dict[str, Any]:
        """
        Get the full configuration as a dictionary.

        Returns:
            Deep copy of the configuration
        """
        return copy.deepcopy(self.config)
