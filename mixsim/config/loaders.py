"""
Configuration loading with validation.

Supports YAML and JSON formats with JSON Schema validation, followed by
pydantic model construction.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
import yaml
from pydantic import ValidationError

from mixsim.config.models import ScenarioConfig
from mixsim.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).parent / "schemas" / "mixer_schema_v1.json"


class ConfigLoader:
    """
    Scenario configuration loader with schema validation.

    Example:
        loader = ConfigLoader()
        config = loader.load_yaml("scenarios/two_feeds.yaml")
    """

    def __init__(self, schema_path: Path = None):
        """
        Initialize configuration loader.

        Args:
            schema_path: Path to JSON schema file (uses default if None)
        """
        self.schema_path = Path(schema_path) if schema_path else DEFAULT_SCHEMA_PATH
        self.schema = self._load_schema()

    def _load_schema(self) -> Dict[str, Any]:
        """Load JSON schema from file."""
        try:
            with open(self.schema_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not load schema from {self.schema_path}: {e}") from e

    def load_yaml(self, config_path: Path | str) -> ScenarioConfig:
        """
        Load configuration from YAML file.

        Raises:
            ConfigurationError: If file not found, unparsable or invalid
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to read {config_path}: {e}") from e

        return self.load_dict(config_dict or {})

    def load_json(self, config_path: Path | str) -> ScenarioConfig:
        """
        Load configuration from JSON file.

        Raises:
            ConfigurationError: If file not found, unparsable or invalid
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to read {config_path}: {e}") from e

        return self.load_dict(config_dict)

    def load_dict(self, config_dict: Dict[str, Any]) -> ScenarioConfig:
        """
        Validate a raw dictionary and convert it to ScenarioConfig.

        Raises:
            ConfigurationError: If schema or model validation fails
        """
        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping, got {type(config_dict).__name__}"
            )

        try:
            jsonschema.validate(instance=config_dict, schema=self.schema)
            logger.debug("JSON schema validation passed")
        except jsonschema.ValidationError as e:
            raise ConfigurationError(f"Schema validation failed: {e.message}") from e

        try:
            config = ScenarioConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        logger.info(
            f"Loaded scenario '{config.name}': {len(config.inputs)} feed(s), "
            f"{config.outputs} product(s)"
        )
        return config


def load_scenario_config(config_path: Path | str) -> ScenarioConfig:
    """
    Convenience function to load a scenario configuration.

    Automatically detects YAML or JSON based on file extension.

    Args:
        config_path: Path to configuration file (.yaml, .yml, or .json)

    Returns:
        Validated ScenarioConfig instance
    """
    loader = ConfigLoader()
    config_path = Path(config_path)

    if config_path.suffix in ['.yaml', '.yml']:
        return loader.load_yaml(config_path)
    elif config_path.suffix == '.json':
        return loader.load_json(config_path)
    else:
        raise ConfigurationError(f"Unsupported file format: {config_path.suffix}")
