import numpy as np
from procflow.core.enums import DeviceKind, DeviceState, PortKind

def test_enum_integer_values():
    """Test enums have integer values."""
    assert isinstance(DeviceState.UNCONFIGURED.value, int)
    assert DeviceState.UNCONFIGURED == 0
    assert DeviceState.COMPUTED == 3
    assert PortKind.INPUT == 0
    assert PortKind.OUTPUT == 1

def test_enum_numpy_compatibility():
    """Test enums work with NumPy arrays."""
    states = np.array([DeviceState.COMPUTED, DeviceState.FULLY_WIRED, DeviceState.COMPUTED],
                      dtype=np.int32)

    computed_mask = states == DeviceState.COMPUTED
    assert np.array_equal(computed_mask, [True, False, True])

    computed_indices = np.where(states == DeviceState.COMPUTED)[0]
    assert np.array_equal(computed_indices, [0, 2])

def test_port_kind_label():
    assert PortKind.INPUT.label == "input"
    assert PortKind.OUTPUT.label == "output"

def test_device_kind_members():
    assert [k.name for k in DeviceKind] == ["MIXER", "DIVIDER", "REACTOR"]
