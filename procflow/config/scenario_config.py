"""
Configuration dataclasses for device scenarios.

Provides type-safe, validated configuration structures using Python
dataclasses with JSON Schema validation support.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any

from procflow.devices import resolve_kind


@dataclass
class StreamConfig:
    """Configuration for one named stream."""
    name: Optional[str] = None       # Auto-named from the scenario counter if omitted
    mass_flow: Optional[float] = None  # kg/h; left unset if omitted

    def validate(self) -> None:
        if self.name is not None and not self.name.strip():
            raise ValueError("Stream name must not be blank")


@dataclass
class DeviceConfig:
    """Configuration for one device and its port wiring."""
    id: str
    type: str                        # 'mixer', 'divider', 'splitter', 'reactor'
    params: Dict[str, Any] = field(default_factory=dict)
    inputs: List[str] = field(default_factory=list)   # Stream names, port order
    outputs: List[str] = field(default_factory=list)

    def validate(self) -> None:
        """Validate device configuration."""
        if not self.id:
            raise ValueError("Device id must be specified")
        if not self.type:
            raise ValueError(f"Device '{self.id}': type must be specified")
        resolve_kind(self.type)
        if 'device_id' in self.params:
            raise ValueError(f"Device '{self.id}': set the id field, not params.device_id")


@dataclass
class ScenarioConfig:
    """Top-level scenario configuration."""
    name: str = "scenario"
    version: str = "1.0"
    streams: List[StreamConfig] = field(default_factory=list)
    devices: List[DeviceConfig] = field(default_factory=list)

    def validate(self) -> None:
        """
        Validate all streams and devices, and cross-check names.

        Raises:
            ValueError: On duplicate names/ids or undeclared stream references
        """
        for stream in self.streams:
            stream.validate()
        for device in self.devices:
            device.validate()

        names = [s.name for s in self.streams if s.name is not None]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate stream names: {duplicates}")

        ids = [d.id for d in self.devices]
        duplicate_ids = sorted({i for i in ids if ids.count(i) > 1})
        if duplicate_ids:
            raise ValueError(f"Duplicate device ids: {duplicate_ids}")

        declared = set(names)
        for device in self.devices:
            for ref in device.inputs + device.outputs:
                if ref not in declared:
                    raise ValueError(f"Device '{device.id}' references undeclared stream '{ref}'")
