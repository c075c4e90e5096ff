"""
Mixer Device.

Combines any number of input streams into a single output stream.
"""

from procflow.core.constants import MIXER_OUTPUTS
from procflow.core.device import Device
from procflow.core.enums import DeviceKind
from procflow.core.exceptions import PrecursorMissingError


class Mixer(Device):
    """
    Merges N input streams into one output stream.

    Physics:
        - Mass Balance: m_out = sum(m_in_i)

    The total is divided by the number of attached outputs so the algorithm
    stays correct for any output capacity, although a Mixer always has
    exactly MIXER_OUTPUTS (1) output port.

    Configuration:
        input_capacity (int): Number of input ports.
    """

    kind = DeviceKind.MIXER

    def __init__(self, input_capacity: int, **kwargs) -> None:
        super().__init__(input_capacity=input_capacity, output_capacity=MIXER_OUTPUTS, **kwargs)

    def update_outputs(self) -> None:
        """
        Write the summed input mass flow to the output.

        With no inputs attached the output becomes 0.0.

        Raises:
            PrecursorMissingError: If no output stream is attached.
        """
        total = sum(stream.mass_flow for stream in self.inputs)

        if not self.outputs:
            raise PrecursorMissingError("outputs must be set before update", self.device_id)

        self._write_outputs(total / len(self.outputs))
