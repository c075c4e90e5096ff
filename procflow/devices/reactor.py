"""
Reactor Device.

A single-input reactor with one product stream, or two for a double reactor.
"""

from procflow.core.constants import PortLimits
from procflow.core.device import Device
from procflow.core.enums import DeviceKind, PortKind
from procflow.core.exceptions import PortIndexError


class Reactor(Device):
    """
    Passes its feed to one output, or splits it evenly between two.

    Physics:
        - Mass Balance: m_in = sum(m_out_i)
        - Split: m_out_i = m_in / output_capacity

    Unlike Divider, the split is over the declared output capacity, so every
    output port must be attached before update_outputs() runs.

    Configuration:
        is_double (bool): Two product streams instead of one.
    """

    kind = DeviceKind.REACTOR

    def __init__(self, is_double: bool = False, **kwargs) -> None:
        # Strings such as "false" from scenario files must not pass by truthiness
        if not isinstance(is_double, bool):
            raise ValueError(f"Reactor is_double must be a bool, got {is_double!r}")
        self.is_double = is_double
        output_capacity = (PortLimits.REACTOR_OUTPUTS_DOUBLE if self.is_double
                           else PortLimits.REACTOR_OUTPUTS_SINGLE)
        super().__init__(
            input_capacity=PortLimits.REACTOR_INPUTS,
            output_capacity=output_capacity,
            **kwargs
        )

    def update_outputs(self) -> None:
        """
        Split the feed evenly over all output ports.

        Raises:
            PortIndexError: If the feed or any output port is not attached.
        """
        if not self.inputs:
            raise PortIndexError(PortKind.INPUT, 0, 0, self.device_id)
        if len(self.outputs) < self.output_capacity:
            raise PortIndexError(
                PortKind.OUTPUT, len(self.outputs), len(self.outputs), self.device_id
            )

        input_mass = self.inputs[0].mass_flow
        self._write_outputs(input_mass / self.output_capacity)

    def get_state(self):
        return {**super().get_state(), "is_double": self.is_double}
