import pytest
from procflow.core.enums import PortKind
from procflow.core.exceptions import (
    ConfigurationError,
    DeviceError,
    DeviceNotFoundError,
    DuplicateDeviceError,
    MassBalanceError,
    PortIndexError,
    PortLimitExceededError,
    PrecursorMissingError,
    ProcFlowError,
    ScenarioError,
    StreamNotFoundError,
)


@pytest.mark.parametrize("error", [
    PortLimitExceededError(PortKind.INPUT, 2),
    PrecursorMissingError("no outputs"),
    PortIndexError(PortKind.OUTPUT, 1, 1),
    MassBalanceError(1.0, 0.01),
])
def test_device_errors_share_base(error):
    assert isinstance(error, DeviceError)
    assert isinstance(error, ProcFlowError)

@pytest.mark.parametrize("cls", [DeviceNotFoundError, DuplicateDeviceError, StreamNotFoundError])
def test_scenario_errors_share_base(cls):
    assert issubclass(cls, ScenarioError)
    assert issubclass(cls, ProcFlowError)

def test_configuration_error_is_not_a_device_error():
    assert not issubclass(ConfigurationError, DeviceError)

def test_port_limit_message_names_kind_and_device():
    error = PortLimitExceededError(PortKind.OUTPUT, 1, device_id="mixer_1")
    assert "mixer_1" in str(error)
    assert "output stream limit" in str(error)
    assert error.kind == PortKind.OUTPUT

def test_precursor_missing_keeps_device_id():
    error = PrecursorMissingError("outputs must be set before update", device_id="m")
    assert error.device_id == "m"
    assert "outputs must be set" in str(error)
