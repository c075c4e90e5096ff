"""
Core device abstraction for the process flow model.

This module defines the Device abstract base class that every unit operation
inherits from. A device owns two bounded, ordered lists of Stream references
(inputs and outputs) and a single computational step, update_outputs(),
that reads input mass flows and writes output mass flows in place.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, ClassVar
import logging

from procflow.core.enums import DeviceKind, DeviceState, PortKind
from procflow.core.exceptions import PortLimitExceededError, PortIndexError
from procflow.core.stream import Stream
from procflow.core.types import DeviceStateDict, MassFlow

logger = logging.getLogger(__name__)


class Device(ABC):
    """
    Abstract base class for all unit operations.

    Lifecycle:

    1. Construction fixes input_capacity and output_capacity
    2. add_input()/add_output(): attach streams; port index = attachment order
    3. update_outputs(): recompute every output mass flow from the inputs

    A device holds no state beyond its port lists and capacities, so
    update_outputs() may be called any number of times. It never mutates the
    input streams, and it checks all preconditions before writing any output.

    Streams are referenced, not owned: the same Stream may be attached to
    several devices.

    Attributes:
        kind: DeviceKind of the concrete class
        device_id: Optional identifier (set by Scenario or passed explicitly)
        input_capacity: Maximum number of input streams
        output_capacity: Maximum number of output streams
        inputs: Attached input streams
        outputs: Attached output streams
    """

    kind: ClassVar[DeviceKind]

    def __init__(self, input_capacity: int, output_capacity: int, **kwargs) -> None:
        """
        Initialize device with empty port lists.

        Args:
            input_capacity: Maximum number of input streams (positive int)
            output_capacity: Maximum number of output streams (positive int)
            **kwargs:
                - device_id: Optional explicit ID (for tests/manual wiring)

        Raises:
            ValueError: If a capacity is not a positive integer
        """
        device_id = kwargs.pop("device_id", None)
        if kwargs:
            raise TypeError(f"Unexpected arguments: {sorted(kwargs)}")

        self.device_id: Optional[str] = device_id
        self.input_capacity = self._validate_capacity(input_capacity, PortKind.INPUT)
        self.output_capacity = self._validate_capacity(output_capacity, PortKind.OUTPUT)
        self.inputs: List[Stream] = []
        self.outputs: List[Stream] = []
        self._computed: bool = False

    def _validate_capacity(self, capacity: int, kind: PortKind) -> int:
        # bool is an int subclass; Reactor(True) must not pass as capacity 1
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(
                f"{type(self).__name__} {self.device_id}: {kind.label} capacity "
                f"must be a positive integer, got {capacity!r}"
            )
        return capacity

    def set_device_id(self, device_id: str) -> None:
        """Set device identifier (called by Scenario.register)."""
        self.device_id = device_id

    # --- Wiring ---

    def add_input(self, stream: Stream) -> None:
        """
        Attach a stream to the next free input port.

        Raises:
            PortLimitExceededError: If input_capacity streams are already attached.
                The input list is left unchanged.
        """
        if len(self.inputs) >= self.input_capacity:
            raise PortLimitExceededError(PortKind.INPUT, self.input_capacity, self.device_id)
        self.inputs.append(stream)
        self._computed = False
        logger.debug(f"{self.device_id}: input {len(self.inputs) - 1} <- {stream.name}")

    def add_output(self, stream: Stream) -> None:
        """
        Attach a stream to the next free output port.

        Raises:
            PortLimitExceededError: If output_capacity streams are already attached.
                The output list is left unchanged.
        """
        if len(self.outputs) >= self.output_capacity:
            raise PortLimitExceededError(PortKind.OUTPUT, self.output_capacity, self.device_id)
        self.outputs.append(stream)
        self._computed = False
        logger.debug(f"{self.device_id}: output {len(self.outputs) - 1} -> {stream.name}")

    # --- Computation ---

    @abstractmethod
    def update_outputs(self) -> None:
        """
        Recompute output mass flows from input mass flows.

        Implementations must validate every precondition first and then
        call _write_outputs() exactly once.

        Raises:
            PrecursorMissingError: If a required port list is empty
            PortIndexError: If a required port is not attached
        """

    def _write_outputs(self, mass_flow: MassFlow) -> None:
        """Assign the same mass flow to every attached output."""
        for stream in self.outputs:
            stream.set_mass_flow(mass_flow)
        self._computed = True
        logger.debug(
            f"{self.device_id}: wrote {mass_flow:.6g} kg/h to {len(self.outputs)} output(s)"
        )

    # --- Port accessors ---

    def get_input(self, index: int) -> Stream:
        """
        Return the input stream at a port index.

        Raises:
            PortIndexError: If index is outside 0..input_count()-1
        """
        return self._port(self.inputs, index, PortKind.INPUT)

    def get_output(self, index: int) -> Stream:
        """
        Return the output stream at a port index.

        Raises:
            PortIndexError: If index is outside 0..output_count()-1
        """
        return self._port(self.outputs, index, PortKind.OUTPUT)

    def input_count(self) -> int:
        return len(self.inputs)

    def output_count(self) -> int:
        return len(self.outputs)

    def _port(self, ports: List[Stream], index: int, kind: PortKind) -> Stream:
        # Negative indices are rejected rather than wrapping around; bool and
        # float indices are rejected like any other missing port
        if (isinstance(index, bool) or not isinstance(index, int)
                or not 0 <= index < len(ports)):
            raise PortIndexError(kind, index, len(ports), self.device_id)
        return ports[index]

    # --- State ---

    def is_fully_wired(self) -> bool:
        return (len(self.inputs) == self.input_capacity
                and len(self.outputs) == self.output_capacity)

    @property
    def state(self) -> DeviceState:
        """Current position in the wiring/computation lifecycle."""
        if self._computed:
            return DeviceState.COMPUTED
        if not self.inputs and not self.outputs:
            return DeviceState.UNCONFIGURED
        if self.is_fully_wired():
            return DeviceState.FULLY_WIRED
        return DeviceState.PARTIALLY_WIRED

    def get_state(self) -> DeviceStateDict:
        """
        Return current device state for monitoring.

        Returns:
            JSON-serializable dictionary, e.g.
            {
                "device_id": "mixer_1",
                "kind": "mixer",
                "state": "computed",
                "input_capacity": 2,
                "output_capacity": 1,
                "inputs": [{"name": "s1", "mass_flow": 10.0, "is_set": True}, ...],
                "outputs": [...]
            }
        """
        return {
            "device_id": self.device_id,
            "kind": self.kind.name.lower(),
            "state": self.state.name.lower(),
            "input_capacity": self.input_capacity,
            "output_capacity": self.output_capacity,
            "inputs": [s.to_dict() for s in self.inputs],
            "outputs": [s.to_dict() for s in self.outputs],
        }

    def __repr__(self) -> str:
        return (f"<{type(self).__name__} {self.device_id}: "
                f"{len(self.inputs)}/{self.input_capacity} inputs, "
                f"{len(self.outputs)}/{self.output_capacity} outputs>")
