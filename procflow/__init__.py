"""
procflow - steady-state mass-flow unit operations.

Named streams carry a scalar mass flow rate between unit-operation devices:
- Mixer: N inputs -> 1 output (sum)
- Divider / Splitter: 1 input -> N outputs (equal split over attached outputs)
- Reactor: 1 input -> 1 or 2 outputs (equal split over declared outputs)

Each device enforces its port capacities and recomputes its outputs in a
single synchronous update_outputs() call.
"""

__version__ = "1.0.0"
__author__ = "Process Flow Team"

from .core import *
from .devices import *
from .config import *
from .simulation import *

__all__ = [
    # Core
    'Stream',
    'StreamCounter',
    'Device',
    'PortKind',
    'DeviceKind',
    'DeviceState',
    'MIXER_OUTPUTS',
    'POSSIBLE_ERROR',

    # Errors
    'ProcFlowError',
    'DeviceError',
    'PortLimitExceededError',
    'PrecursorMissingError',
    'PortIndexError',
    'MassBalanceError',
    'ScenarioError',
    'DeviceNotFoundError',
    'DuplicateDeviceError',
    'StreamNotFoundError',
    'ConfigurationError',

    # Mass balance
    'total_input_flow',
    'total_output_flow',
    'mass_balance_residual',
    'is_mass_conserved',
    'assert_mass_conserved',

    # Devices
    'Mixer',
    'Divider',
    'Splitter',
    'Reactor',
    'DEVICE_TYPES',
    'create_device',

    # Configuration
    'ScenarioConfig',
    'StreamConfig',
    'DeviceConfig',
    'ScenarioLoader',

    # Scenario
    'Scenario',
    'run_scenario_from_config',
    'run_demo',
]
