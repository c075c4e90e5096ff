"""
Scenario: named streams plus registered devices.

The Scenario is the caller-side harness around the device core:
- Stream creation through an explicit StreamCounter
- Device registration and lookup by ID
- Wiring streams to device ports by name
- Evaluating every device once, in registration order

It is not a flowsheet solver. Devices run in the order they were registered;
there is no topological sorting, cycle detection or recycle iteration. When
one stream is the output of one device and the input of another, register
the upstream device first.
"""

from typing import Dict, List, Optional, Sequence
import logging

from procflow.config.scenario_config import ScenarioConfig
from procflow.core.device import Device
from procflow.core.exceptions import (
    DeviceNotFoundError,
    DuplicateDeviceError,
    StreamNotFoundError,
)
from procflow.core.stream import Stream, StreamCounter
from procflow.core.types import DeviceStateDict
from procflow.devices import create_device

logger = logging.getLogger(__name__)


class Scenario:
    """
    Container for the streams and devices of one independent calculation.

    Example:
        scenario = Scenario("mixer_demo")
        s1 = scenario.new_stream(10.0)
        s2 = scenario.new_stream(5.0)
        s3 = scenario.new_stream()
        scenario.register("mixer_1", Mixer(input_capacity=2))
        scenario.connect("mixer_1", inputs=[s1.name, s2.name], outputs=[s3.name])
        scenario.run()
        assert s3.mass_flow == 15.0
    """

    def __init__(self, name: str = "scenario", counter: Optional[StreamCounter] = None) -> None:
        self.name = name
        self.counter = counter if counter is not None else StreamCounter()
        self._streams: Dict[str, Stream] = {}
        self._devices: Dict[str, Device] = {}

    # --- Streams ---

    def new_stream(self, mass_flow: Optional[float] = None) -> Stream:
        """Create the next auto-named stream and add it to the scenario."""
        stream = self.counter.new_stream(mass_flow)
        while stream.name in self._streams:
            stream = self.counter.new_stream(mass_flow)
        return self.add_stream(stream)

    def add_stream(self, stream: Stream) -> Stream:
        """
        Add an existing stream under its name.

        Raises:
            ValueError: If a different stream already uses the name
        """
        existing = self._streams.get(stream.name)
        if existing is not None and existing is not stream:
            raise ValueError(f"Stream name '{stream.name}' already used in scenario '{self.name}'")
        self._streams[stream.name] = stream
        return stream

    def get_stream(self, name: str) -> Stream:
        """
        Retrieve stream by name.

        Raises:
            StreamNotFoundError: If no stream has this name
        """
        if name not in self._streams:
            raise StreamNotFoundError(
                f"Stream '{name}' not found in scenario. "
                f"Available: {list(self._streams.keys())}"
            )
        return self._streams[name]

    def list_streams(self) -> List[Stream]:
        return list(self._streams.values())

    # --- Devices ---

    def register(self, device_id: str, device: Device) -> Device:
        """
        Register a device under a unique ID.

        Raises:
            DuplicateDeviceError: If device_id already registered
            TypeError: If device doesn't inherit from Device
        """
        if device_id in self._devices:
            raise DuplicateDeviceError(f"Device ID '{device_id}' already registered")

        if not isinstance(device, Device):
            raise TypeError(f"Device must inherit from Device ABC, got {type(device)}")

        device.set_device_id(device_id)
        self._devices[device_id] = device
        logger.debug(f"Registered device '{device_id}' ({device.kind.name.lower()})")
        return device

    def get(self, device_id: str) -> Device:
        """
        Retrieve device by ID.

        Raises:
            DeviceNotFoundError: If device_id not found
        """
        if device_id not in self._devices:
            raise DeviceNotFoundError(
                f"Device '{device_id}' not found in scenario. "
                f"Available: {list(self._devices.keys())}"
            )
        return self._devices[device_id]

    def has(self, device_id: str) -> bool:
        return device_id in self._devices

    def list_devices(self) -> List[tuple[str, Device]]:
        """Return (device_id, device) tuples in registration order."""
        return list(self._devices.items())

    def connect(
        self,
        device_id: str,
        inputs: Sequence[str] = (),
        outputs: Sequence[str] = ()
    ) -> None:
        """
        Attach named streams to a device, in port order.

        Raises:
            DeviceNotFoundError: If device_id not registered
            StreamNotFoundError: If a stream name is unknown
            PortLimitExceededError: If the device runs out of ports
        """
        device = self.get(device_id)
        for name in inputs:
            device.add_input(self.get_stream(name))
        for name in outputs:
            device.add_output(self.get_stream(name))

    # --- Evaluation ---

    def run(self) -> Dict[str, DeviceStateDict]:
        """
        Call update_outputs() on every device in registration order.

        Device errors propagate unchanged; devices after the failing one
        are not evaluated.

        Returns:
            Dictionary mapping device IDs to their state dictionaries
        """
        logger.info(f"Running scenario '{self.name}' with {len(self._devices)} device(s)")
        for device_id, device in self._devices.items():
            device.update_outputs()
            logger.debug(f"Updated '{device_id}'")
        return self.get_all_states()

    def get_all_states(self) -> Dict[str, DeviceStateDict]:
        return {
            device_id: device.get_state()
            for device_id, device in self._devices.items()
        }

    def stream_report(self) -> List[str]:
        """Console summary line for every stream, in creation order."""
        return [stream.summary() for stream in self._streams.values()]

    @classmethod
    def from_config(cls, config: ScenarioConfig) -> 'Scenario':
        """
        Build streams and devices from a validated ScenarioConfig.

        Raises:
            ConfigurationError: If a device cannot be constructed
            PortLimitExceededError: If wiring exceeds a device's capacity
        """
        scenario = cls(name=config.name)

        # Streams keep declaration order; auto names skip every declared name
        declared = {s.name for s in config.streams if s.name is not None}
        for stream_cfg in config.streams:
            if stream_cfg.name is not None:
                stream = Stream(name=stream_cfg.name)
            else:
                stream = scenario.counter.new_stream()
                while stream.name in declared or stream.name in scenario._streams:
                    stream = scenario.counter.new_stream()
            if stream_cfg.mass_flow is not None:
                stream.set_mass_flow(stream_cfg.mass_flow)
            scenario.add_stream(stream)

        for device_cfg in config.devices:
            device = create_device(device_cfg.type, **device_cfg.params)
            scenario.register(device_cfg.id, device)
            scenario.connect(device_cfg.id, inputs=device_cfg.inputs, outputs=device_cfg.outputs)

        logger.info(
            f"Built scenario '{scenario.name}': {len(scenario._streams)} stream(s), "
            f"{len(scenario._devices)} device(s)"
        )
        return scenario
