"""
Mass balance inspection for a single device.

Conservation holds for Divider and Reactor (sum of outputs equals the input)
and for a Mixer with one output (output equals the sum of inputs).
"""

import numpy as np

from procflow.core.constants import POSSIBLE_ERROR
from procflow.core.device import Device
from procflow.core.exceptions import MassBalanceError
from procflow.core.types import MassFlow, MassFlowArray


def _flows(streams) -> MassFlowArray:
    return np.fromiter((s.mass_flow for s in streams), dtype=np.float64, count=len(streams))


def total_input_flow(device: Device) -> MassFlow:
    """Sum of attached input mass flows (kg/h)."""
    return float(np.sum(_flows(device.inputs)))


def total_output_flow(device: Device) -> MassFlow:
    """Sum of attached output mass flows (kg/h)."""
    return float(np.sum(_flows(device.outputs)))


def mass_balance_residual(device: Device) -> MassFlow:
    """Total input minus total output (kg/h)."""
    return total_input_flow(device) - total_output_flow(device)


def is_mass_conserved(device: Device, tolerance: MassFlow = POSSIBLE_ERROR) -> bool:
    return bool(np.isclose(total_input_flow(device), total_output_flow(device),
                           rtol=0.0, atol=tolerance))


def assert_mass_conserved(device: Device, tolerance: MassFlow = POSSIBLE_ERROR) -> None:
    """
    Check that outputs carry the same total mass flow as inputs.

    Raises:
        MassBalanceError: If the absolute residual exceeds tolerance
    """
    if not is_mass_conserved(device, tolerance):
        raise MassBalanceError(mass_balance_residual(device), tolerance, device.device_id)
