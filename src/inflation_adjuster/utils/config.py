"""
Configuration management for inflation adjustment.
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "INFLATION_ADJUSTER_CONFIG"

class Config:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._load_config()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached instance so the next call reloads from disk."""
        cls._instance = None

    def _load_config(self):
        """Load configuration from YAML file, layered over the defaults."""
        self._config = self._get_default_config()
        config_path = Path(os.environ.get(CONFIG_ENV_VAR, "config.yaml"))
        if not config_path.exists():
            logger.debug(f"No configuration file at {config_path}, using defaults")
            return

        try:
            with open(config_path, "r") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error loading configuration: {e}")
            return

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(self._config.get(section), dict):
                self._config[section].update(values)
            else:
                self._config[section] = values
        logger.info(f"Loaded configuration from {config_path}")

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values."""
        return {
            "conversion": {
                "growth_rate": 0.02,
                "series_id": "CPIAUCSL"
            },
            "data": {
                "table_file": "data/inflation_table.csv",
                "date_column": "date",
                "value_column": "value",
                "output_file": "data/adjusted_prices.csv"
            },
            "fred": {
                "secret_name": "FRED_API_KEY",
                "secret_key": "api_key"
            },
            "visualization": {
                "seaborn_style": "whitegrid",
                "dpi": 300,
                "figure_size": [12, 6],
                "output_file": "data/resolved_index.png"
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        }

    def as_dict(self) -> Dict[str, Any]:
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        try:
            current = self._config
            for k in key.split('.'):
                current = current[k]
            return current
        except (KeyError, TypeError):
            return default
