"""Scenario configuration: dataclasses and YAML/JSON loading."""

from procflow.config.scenario_config import ScenarioConfig, StreamConfig, DeviceConfig
from procflow.config.loaders import ScenarioLoader

__all__ = [
    'ScenarioConfig',
    'StreamConfig',
    'DeviceConfig',
    'ScenarioLoader',
]
