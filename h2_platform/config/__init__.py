"""Scenario configuration dataclasses and loaders."""

from h2_platform.config.scenario_config import (
    ScenarioConfig,
    ScenarioFile,
    StorageConfig,
    TransportConfig,
    EconomicsConfig,
)
from h2_platform.config.loaders import ScenarioLoader, load_scenario_file

__all__ = [
    "ScenarioConfig",
    "ScenarioFile",
    "StorageConfig",
    "TransportConfig",
    "EconomicsConfig",
    "ScenarioLoader",
    "load_scenario_file",
]
