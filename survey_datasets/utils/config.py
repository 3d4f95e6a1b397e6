"""Configuration management for survey dataset generation."""

import yaml
from pathlib import Path
from typing import Any, Optional, Union
import logging

logger = logging.getLogger(__name__)

# Directory holding setup.py; relative paths in the config are resolved from here
PROJECT_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "configs" / "default_config.yaml"

_SIZE_KEYS = ('n_rows', 'n_participants', 'id_width')


class Config:
    """Run configuration read from a YAML file.

    Holds the seed, the output location, per-dataset sizes and the
    logging setup. Values are checked when the file is loaded.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Load and check a configuration file.

        Args:
            config_path: Path to configuration file. If None, uses the
                packaged default config.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the seed or a dataset size is not a valid integer
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            self.config = yaml.safe_load(f) or {}

        self.path = config_path
        self._check()
        self._setup_logging()
        logger.info(f"Loaded configuration from {config_path}")

    def _check(self):
        seed = self.config.get('seed')
        if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
            raise ValueError(f"{self.path}: seed must be a non-negative integer, got {seed!r}")

        datasets = self.config.get('datasets', {}) or {}
        if not isinstance(datasets, dict):
            raise ValueError(f"{self.path}: 'datasets' must be a mapping")

        for name, settings in datasets.items():
            if not isinstance(settings, dict):
                raise ValueError(f"{self.path}: settings for {name} must be a mapping")
            for key in _SIZE_KEYS:
                value = settings.get(key)
                if value is None:
                    continue
                if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                    raise ValueError(
                        f"{self.path}: datasets.{name}.{key} must be a positive integer, "
                        f"got {value!r}"
                    )

    def _setup_logging(self):
        """Set up logging based on configuration."""
        log_config = self.config.get('logging', {})
        level = getattr(logging, log_config.get('level', 'INFO'))
        format_str = log_config.get(
            'format',
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        logging.basicConfig(level=level, format=format_str)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-separated key.

        Args:
            key: Dot-separated configuration key (e.g., 'datasets.media_trust_survey.n_rows')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self.config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_path(self, key: str, default: Union[str, Path]) -> Path:
        """Get a path setting, resolving relative paths against the project root."""
        path = Path(self.get(key, default))
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path

    def __repr__(self) -> str:
        return f"Config(path={str(self.path)!r}, keys={list(self.config.keys())})"
