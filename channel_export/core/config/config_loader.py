"""
Configuration Loader
Loads and validates YAML configuration files
"""

from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from .app_config import AppConfig


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and validates configuration from YAML files.

    Responsibilities:
    - Read YAML configuration file (a missing file yields defaults)
    - Validate types and value ranges
    - Return validated AppConfig instance
    """

    def __init__(self, config_path: Path):
        """
        Initialize ConfigLoader with path to config file.

        Args:
            config_path: Path to YAML configuration file
        """
        self._config_path = config_path

    def load(self) -> AppConfig:
        """
        Load and validate configuration from YAML file.

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigValidationError: If configuration is invalid
        """
        config_data = self._load_yaml()

        output_dir = self._validate_directory(config_data, "output_dir", ".")
        log_dir = self._validate_directory(config_data, "log_dir", "logs")
        max_pages = self._validate_max_pages(config_data)

        return AppConfig(
            output_dir=output_dir,
            max_pages=max_pages,
            log_dir=log_dir
        )

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML file and return parsed data."""
        if not self._config_path.exists():
            return {}

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax: {e}")

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigValidationError(
                "Configuration must be a YAML mapping/dictionary"
            )

        return data

    def _validate_directory(self, config: Dict[str, Any], field: str, default: str) -> str:
        """Validate an optional directory field."""
        if config.get(field) is None:
            return default

        value = config[field]

        if not isinstance(value, str):
            raise ConfigValidationError(
                f"Field '{field}' must be a string, got {type(value).__name__}"
            )

        if not value.strip():
            raise ConfigValidationError(f"Field '{field}' cannot be empty")

        return value.strip()

    def _validate_max_pages(self, config: Dict[str, Any]) -> Optional[int]:
        """Validate max_pages field (optional)."""
        if "max_pages" not in config:
            return None

        max_pages = config["max_pages"]

        # None/null is valid
        if max_pages is None:
            return None

        # bool is a subclass of int
        if isinstance(max_pages, bool) or not isinstance(max_pages, int):
            raise ConfigValidationError(
                f"Field 'max_pages' must be an integer or null, got {type(max_pages).__name__}"
            )

        if max_pages <= 0:
            raise ConfigValidationError(
                f"Field 'max_pages' must be greater than 0 or null, got {max_pages}"
            )

        return max_pages
