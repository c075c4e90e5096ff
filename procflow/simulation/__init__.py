"""Scenario harness and command-line runner."""

from procflow.simulation.scenario import Scenario
from procflow.simulation.runner import run_scenario_from_config, build_demo_scenario, run_demo

__all__ = [
    'Scenario',
    'run_scenario_from_config',
    'build_demo_scenario',
    'run_demo',
]
