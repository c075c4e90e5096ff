"""
Divider (Splitter) Device.

This module implements a device that divides a single input stream equally
between all attached output streams.
"""

from procflow.core.constants import PortLimits
from procflow.core.device import Device
from procflow.core.enums import DeviceKind
from procflow.core.exceptions import PrecursorMissingError


class Divider(Device):
    """
    Splits one input stream into N output streams with equal mass flow.

    Physics:
        - Mass Balance: m_in = sum(m_out_i)
        - Split: m_out_i = m_in / n_attached

    The split uses the number of outputs currently attached, not the declared
    output_capacity, so a partially wired divider still conserves mass.

    Configuration:
        output_capacity (int): Number of output ports.
    """

    kind = DeviceKind.DIVIDER

    def __init__(self, output_capacity: int, **kwargs) -> None:
        super().__init__(
            input_capacity=PortLimits.DIVIDER_INPUTS,
            output_capacity=output_capacity,
            **kwargs
        )

    def update_outputs(self) -> None:
        """
        Divide the input mass flow equally between attached outputs.

        Raises:
            PrecursorMissingError: If the input or every output is missing.
        """
        if not self.inputs or not self.outputs:
            raise PrecursorMissingError(
                "divider must have an input and outputs before update", self.device_id
            )

        input_mass = self.inputs[0].mass_flow
        self._write_outputs(input_mass / len(self.outputs))


# Common process-engineering name for the same unit
Splitter = Divider
