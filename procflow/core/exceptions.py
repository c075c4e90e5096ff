"""Custom exception hierarchy for the process flow model."""

from typing import Optional

from procflow.core.enums import PortKind


class ProcFlowError(Exception):
    """Base exception for all procflow errors."""
    pass


class DeviceError(ProcFlowError):
    """Base exception for device-related errors."""
    pass


class PortLimitExceededError(DeviceError):
    """Raised when a stream is attached to a port list that is already full."""

    def __init__(self, kind: PortKind, capacity: int, device_id: Optional[str] = None):
        self.kind = kind
        self.capacity = capacity
        self.device_id = device_id
        super().__init__(
            f"Device {device_id}: {kind.label} stream limit reached "
            f"(capacity {capacity})"
        )


class PrecursorMissingError(DeviceError):
    """Raised by update_outputs() when a required port list is still empty."""

    def __init__(self, message: str, device_id: Optional[str] = None):
        self.device_id = device_id
        super().__init__(f"Device {device_id}: {message}")


class PortIndexError(DeviceError, IndexError):
    """Raised when a port index is outside the attached range."""

    def __init__(self, kind: PortKind, index: int, count: int, device_id: Optional[str] = None):
        self.kind = kind
        self.index = index
        self.count = count
        self.device_id = device_id
        super().__init__(
            f"Device {device_id}: {kind.label} port {index} is not attached "
            f"({count} attached)"
        )


class MassBalanceError(DeviceError):
    """Raised when total output mass flow does not match total input."""

    def __init__(self, residual: float, tolerance: float, device_id: Optional[str] = None):
        self.residual = residual
        self.tolerance = tolerance
        self.device_id = device_id
        super().__init__(
            f"Device {device_id}: mass balance residual {residual:.6g} "
            f"exceeds tolerance {tolerance:.6g}"
        )


class ScenarioError(ProcFlowError):
    """Base exception for scenario lookup errors."""
    pass


class DeviceNotFoundError(ScenarioError):
    """Raised when device ID not found in scenario."""
    pass


class DuplicateDeviceError(ScenarioError):
    """Raised when attempting to register duplicate device ID."""
    pass


class StreamNotFoundError(ScenarioError):
    """Raised when a stream name is not declared in the scenario."""
    pass


class ConfigurationError(ProcFlowError):
    """Raised for configuration loading/validation errors."""
    pass
