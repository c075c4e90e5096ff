"""
Scenario loading with validation.

Supports YAML and JSON formats with JSON Schema validation.
"""

import yaml
import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
import jsonschema
import logging

from procflow.config.scenario_config import ScenarioConfig, StreamConfig, DeviceConfig
from procflow.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).parent / "schemas" / "scenario_schema_v1.json"


class ScenarioLoader:
    """
    Scenario loader with schema validation.

    Example:
        loader = ScenarioLoader()
        config = loader.load("scenarios/mixer_demo.yaml")
        scenario = Scenario.from_config(config)
    """

    def __init__(self, schema_path: Optional[Path] = None):
        """
        Initialize scenario loader.

        Args:
            schema_path: Path to JSON schema file (uses default if None)
        """
        self.schema_path = Path(schema_path) if schema_path is not None else DEFAULT_SCHEMA_PATH
        self.schema = self._load_schema()

    def _load_schema(self) -> Dict[str, Any]:
        """Load JSON schema from file."""
        try:
            with open(self.schema_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not load schema from {self.schema_path}: {e}")
            return {}

    def load(self, config_path: Union[Path, str]) -> ScenarioConfig:
        """
        Load a scenario file, choosing the parser from its extension.

        Raises:
            ConfigurationError: If the extension is not .yaml/.yml/.json
        """
        suffix = Path(config_path).suffix.lower()
        if suffix in ('.yaml', '.yml'):
            return self.load_yaml(config_path)
        if suffix == '.json':
            return self.load_json(config_path)
        raise ConfigurationError(f"Unsupported scenario file type: {config_path}")

    def load_yaml(self, config_path: Union[Path, str]) -> ScenarioConfig:
        """
        Load scenario from YAML file.

        Args:
            config_path: Path to YAML scenario file

        Returns:
            ScenarioConfig instance

        Raises:
            ConfigurationError: If file not found or validation fails
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Scenario file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML: {e}") from e

        return self.from_dict(config_dict)

    def load_json(self, config_path: Union[Path, str]) -> ScenarioConfig:
        """
        Load scenario from JSON file.

        Args:
            config_path: Path to JSON scenario file

        Returns:
            ScenarioConfig instance
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Scenario file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse JSON: {e}") from e

        return self.from_dict(config_dict)

    def from_dict(self, config_dict: Any) -> ScenarioConfig:
        """
        Convert dictionary to ScenarioConfig with validation.

        Args:
            config_dict: Scenario dictionary from YAML/JSON

        Returns:
            ScenarioConfig instance

        Raises:
            ConfigurationError: If validation fails
        """
        if not isinstance(config_dict, dict):
            raise ConfigurationError("Scenario must be a mapping at the top level")

        # JSON Schema validation
        if self.schema:
            try:
                jsonschema.validate(instance=config_dict, schema=self.schema)
                logger.debug("JSON schema validation passed")
            except jsonschema.ValidationError as e:
                raise ConfigurationError(f"Schema validation failed: {e.message}") from e

        config = self._build_scenario_config(config_dict)

        # Dataclass validation
        try:
            config.validate()
        except ValueError as e:
            raise ConfigurationError(f"Scenario validation failed: {e}") from e

        logger.info(f"Loaded scenario: {config.name} v{config.version}")
        return config

    def _build_scenario_config(self, d: Dict[str, Any]) -> ScenarioConfig:
        """Build ScenarioConfig from dictionary (manual construction)."""
        streams = [
            StreamConfig(
                name=s.get('name'),
                mass_flow=float(s['mass_flow']) if s.get('mass_flow') is not None else None,
            )
            for s in d.get('streams', [])
        ]
        devices = [
            DeviceConfig(
                id=dev.get('id'),
                type=dev.get('type'),
                params=dict(dev.get('params', {})),
                inputs=list(dev.get('inputs', [])),
                outputs=list(dev.get('outputs', [])),
            )
            for dev in d.get('devices', [])
        ]
        return ScenarioConfig(
            name=d.get('name', 'scenario'),
            version=str(d.get('version', '1.0')),
            streams=streams,
            devices=devices,
        )
