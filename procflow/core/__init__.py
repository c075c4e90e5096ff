"""Core abstractions: streams, the Device base class, errors and enums."""

from procflow.core.constants import MIXER_OUTPUTS, POSSIBLE_ERROR, PortLimits, Tolerances
from procflow.core.enums import PortKind, DeviceKind, DeviceState
from procflow.core.exceptions import (
    ProcFlowError,
    DeviceError,
    PortLimitExceededError,
    PrecursorMissingError,
    PortIndexError,
    MassBalanceError,
    ScenarioError,
    DeviceNotFoundError,
    DuplicateDeviceError,
    StreamNotFoundError,
    ConfigurationError,
)
from procflow.core.stream import Stream, StreamCounter
from procflow.core.device import Device
from procflow.core.balance import (
    total_input_flow,
    total_output_flow,
    mass_balance_residual,
    is_mass_conserved,
    assert_mass_conserved,
)

__all__ = [
    'MIXER_OUTPUTS',
    'POSSIBLE_ERROR',
    'PortLimits',
    'Tolerances',
    'PortKind',
    'DeviceKind',
    'DeviceState',
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
    'Stream',
    'StreamCounter',
    'Device',
    'total_input_flow',
    'total_output_flow',
    'mass_balance_residual',
    'is_mass_conserved',
    'assert_mass_conserved',
]
