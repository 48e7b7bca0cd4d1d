"""
Scenario configuration loading with validation.

Supports YAML and JSON formats with JSON Schema validation.
"""

import yaml
import json
from pathlib import Path
from typing import Dict, Any, Optional
import jsonschema
import logging

from h2_platform.config.scenario_config import (
    EconomicsConfig,
    ScenarioConfig,
    ScenarioFile,
    StorageConfig,
    TransportConfig,
)
from h2_platform.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).parent / "schemas" / "scenario_schema_v1.json"


class ScenarioLoader:
    """
    Scenario file loader with schema validation.

    Example:
        loader = ScenarioLoader()
        scenarios = loader.load_yaml("scenarios/baseline.yaml")
    """

    def __init__(self, schema_path: Optional[Path] = None):
        """
        Initialize scenario loader.

        Args:
            schema_path: Path to JSON schema file (uses bundled schema if None)
        """
        self.schema_path = Path(schema_path) if schema_path is not None else DEFAULT_SCHEMA_PATH
        self.schema = self._load_schema()

    def _load_schema(self) -> Dict[str, Any]:
        """Load JSON schema from file."""
        try:
            with open(self.schema_path, 'r') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not load schema from {self.schema_path}: {e}")
            return {}

    def load_yaml(self, config_path: Path | str) -> ScenarioFile:
        """
        Load scenarios from YAML file.

        Raises:
            ConfigurationError: If file not found or validation fails
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Scenario file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to read scenario file {config_path}: {e}") from e

        return self.from_dict(config_dict)

    def load_json(self, config_path: Path | str) -> ScenarioFile:
        """
        Load scenarios from JSON file.

        Raises:
            ConfigurationError: If file not found or validation fails
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Scenario file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                config_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to read scenario file {config_path}: {e}") from e

        return self.from_dict(config_dict)

    def from_dict(self, config_dict: Any) -> ScenarioFile:
        """
        Convert a parsed dictionary to a validated ScenarioFile.

        Raises:
            ConfigurationError: If schema or dataclass validation fails
        """
        if not isinstance(config_dict, dict):
            raise ConfigurationError("Scenario file must contain a mapping at the top level")

        if self.schema:
            try:
                jsonschema.validate(instance=config_dict, schema=self.schema)
                logger.debug("JSON schema validation passed")
            except jsonschema.ValidationError as e:
                raise ConfigurationError(f"Schema validation failed: {e.message}")

        try:
            scenario_file = self._build_scenario_file(config_dict)
        except (TypeError, KeyError) as e:
            raise ConfigurationError(f"Failed to build ScenarioFile: {e}")

        try:
            scenario_file.validate()
        except ValueError as e:
            raise ConfigurationError(f"Scenario validation failed: {e}")

        logger.info(
            f"Loaded scenarios: {scenario_file.name} v{scenario_file.version} "
            f"({len(scenario_file.scenarios)} scenario(s))"
        )
        return scenario_file

    def _build_scenario_file(self, d: Dict[str, Any]) -> ScenarioFile:
        """Build ScenarioFile from dictionary (manual construction)."""
        scenarios = []
        for s in d.get('scenarios', []):
            s = dict(s)
            storage_d = s.pop('storage', None)
            transport_d = s.pop('transport', None)
            economics_d = s.pop('economics', None)

            storage = StorageConfig(**storage_d) if storage_d is not None else None
            transport = TransportConfig(**transport_d) if transport_d is not None else None
            economics = EconomicsConfig(**economics_d) if economics_d is not None else None

            scenarios.append(ScenarioConfig(
                **s,
                storage=storage,
                transport=transport,
                economics=economics,
            ))

        return ScenarioFile(
            name=d.get('name', 'H2 Scenarios'),
            version=str(d.get('version', '1.0')),
            description=d.get('description', ''),
            scenarios=scenarios,
        )


def load_scenario_file(config_path: Path | str) -> ScenarioFile:
    """
    Convenience function to load a scenario file.

    Automatically detects YAML or JSON based on file extension.

    Args:
        config_path: Path to scenario file (.yaml, .yml, or .json)

    Returns:
        Validated ScenarioFile instance

    Example:
        scenarios = load_scenario_file("scenarios/baseline.yaml")
    """
    loader = ScenarioLoader()
    config_path = Path(config_path)

    if config_path.suffix in ['.yaml', '.yml']:
        return loader.load_yaml(config_path)
    elif config_path.suffix == '.json':
        return loader.load_json(config_path)
    else:
        raise ConfigurationError(f"Unsupported file format: {config_path.suffix}")
