"""
High-Level Scenario Runner Utilities.

Entry Points:
    - `run_scenario_from_config()`: Load, build and evaluate one scenario file.
    - `build_demo_scenario()`: Small built-in mixer/divider/reactor chain.
    - `main()`: CLI entry point for command-line execution.
"""

from pathlib import Path
from typing import Optional, Dict, Any, List, Union
import argparse
import json
import logging
import sys

from procflow.config.loaders import ScenarioLoader
from procflow.core.balance import is_mass_conserved
from procflow.core.exceptions import ProcFlowError
from procflow.devices import Divider, Mixer, Reactor
from procflow.simulation.scenario import Scenario

logger = logging.getLogger(__name__)


def run_scenario_from_config(
    config_path: Union[Path, str],
    output_path: Optional[Path] = None
) -> Dict[str, Any]:
    """
    Run a complete scenario from a configuration file.

    Args:
        config_path (Path | str): Path to scenario YAML/JSON.
        output_path (Path, optional): Where to write the results as JSON.

    Returns:
        Dict[str, Any]: {'scenario': name, 'devices': states, 'streams': [...]}

    Example:
        >>> results = run_scenario_from_config("scenarios/mixer_demo.yaml")
        >>> results['devices']['mixer_1']['outputs'][0]['mass_flow']
        15.0
    """
    logger.info(f"Running scenario from config: {config_path}")

    config = ScenarioLoader().load(config_path)
    scenario = Scenario.from_config(config)
    results = _collect_results(scenario, scenario.run())

    if output_path is not None:
        _write_results(results, Path(output_path))

    return results


def build_demo_scenario() -> Scenario:
    """
    Wire the demonstration chain.

    s1 (10.0) + s2 (5.0) -> mixer -> s3 -> divider(2) -> s4, s5
    s4 -> double reactor -> s6, s7
    """
    scenario = Scenario("demo")
    s1 = scenario.new_stream(10.0)
    s2 = scenario.new_stream(5.0)
    s3 = scenario.new_stream()
    s4 = scenario.new_stream()
    s5 = scenario.new_stream()
    s6 = scenario.new_stream()
    s7 = scenario.new_stream()

    scenario.register("mixer", Mixer(input_capacity=2))
    scenario.connect("mixer", inputs=[s1.name, s2.name], outputs=[s3.name])

    scenario.register("divider", Divider(output_capacity=2))
    scenario.connect("divider", inputs=[s3.name], outputs=[s4.name, s5.name])

    scenario.register("reactor", Reactor(is_double=True))
    scenario.connect("reactor", inputs=[s4.name], outputs=[s6.name, s7.name])

    return scenario


def run_demo() -> Dict[str, Any]:
    """Build and evaluate the demonstration chain."""
    scenario = build_demo_scenario()
    return _collect_results(scenario, scenario.run())


def _collect_results(scenario: Scenario, states: Dict[str, Any]) -> Dict[str, Any]:
    for device_id, device in scenario.list_devices():
        if not is_mass_conserved(device):
            logger.warning(f"Device '{device_id}' does not conserve mass")
    return {
        'scenario': scenario.name,
        'devices': states,
        'streams': [stream.to_dict() for stream in scenario.list_streams()],
        'report': scenario.stream_report(),
    }


def _write_results(results: Dict[str, Any], output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(results, f, indent=2)
    logger.info(f"Results saved to: {output_path}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point for command-line scenario execution.

    Usage:
        procflow-run scenario.yaml --output results.json
        procflow-run --demo
    """
    parser = argparse.ArgumentParser(description="Evaluate a mass-flow device scenario.")
    parser.add_argument("config_file", type=str, nargs="?", help="Path to the scenario YAML/JSON file.")
    parser.add_argument("--demo", action="store_true", help="Run the built-in demonstration scenario.")
    parser.add_argument("--output", type=str, default=None, help="Write results as JSON to this path.")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity.")

    args = parser.parse_args(argv)

    if not args.demo and not args.config_file:
        parser.error("a scenario file is required unless --demo is given")

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        if args.demo:
            results = run_demo()
            if args.output:
                _write_results(results, Path(args.output))
        else:
            results = run_scenario_from_config(
                args.config_file,
                output_path=Path(args.output) if args.output else None
            )
    except ProcFlowError as e:
        logger.error(f"Scenario failed: {e}")
        return 1

    for line in results['report']:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
