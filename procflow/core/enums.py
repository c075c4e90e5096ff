"""
Integer-based enumerations for devices and ports.

All enums use IntEnum so they compare cheaply. get_state() dictionaries
emit the lower-cased member names ("mixer", "computed") rather than ints.
"""

from enum import IntEnum


class PortKind(IntEnum):
    """
    Direction of a device port.

    Examples:
        try:
            mixer.add_output(stream)
        except PortLimitExceededError as e:
            if e.kind == PortKind.OUTPUT:
                ...
    """
    INPUT = 0
    OUTPUT = 1

    @property
    def label(self) -> str:
        return self.name.lower()


class DeviceKind(IntEnum):
    """
    Closed set of unit operations.

    Every member has exactly one class in procflow.devices.DEVICE_TYPES.
    """
    MIXER = 0    # N inputs -> 1 output
    DIVIDER = 1  # 1 input -> N outputs
    REACTOR = 2  # 1 input -> 1 or 2 outputs


class DeviceState(IntEnum):
    """
    Wiring/computation state of a device.

    Examples:
        divider = Divider(output_capacity=2)
        assert divider.state == DeviceState.UNCONFIGURED
        divider.add_input(feed)
        assert divider.state == DeviceState.PARTIALLY_WIRED
    """
    UNCONFIGURED = 0     # Just constructed, no ports attached
    PARTIALLY_WIRED = 1  # Some ports attached, below capacity
    FULLY_WIRED = 2      # Both port lists at capacity
    COMPUTED = 3         # Last update_outputs() succeeded
