"""Unit operation devices and the factory over the closed set of kinds."""

from typing import Any, Dict, Type, Union

from procflow.core.device import Device
from procflow.core.enums import DeviceKind
from procflow.core.exceptions import ConfigurationError
from procflow.devices.mixer import Mixer
from procflow.devices.divider import Divider, Splitter
from procflow.devices.reactor import Reactor

DEVICE_TYPES: Dict[DeviceKind, Type[Device]] = {
    DeviceKind.MIXER: Mixer,
    DeviceKind.DIVIDER: Divider,
    DeviceKind.REACTOR: Reactor,
}

# Names accepted in scenario files, in addition to the DeviceKind names
_KIND_ALIASES: Dict[str, DeviceKind] = {
    "splitter": DeviceKind.DIVIDER,
}


def resolve_kind(kind: Union[DeviceKind, str]) -> DeviceKind:
    """
    Map a DeviceKind or its case-insensitive name to a DeviceKind.

    Raises:
        ConfigurationError: If the name is not a known device type
    """
    if isinstance(kind, DeviceKind):
        return kind
    key = str(kind).strip().lower()
    if key in _KIND_ALIASES:
        return _KIND_ALIASES[key]
    try:
        return DeviceKind[key.upper()]
    except KeyError:
        known = sorted([k.name.lower() for k in DeviceKind] + list(_KIND_ALIASES))
        raise ConfigurationError(f"Unknown device type '{kind}'. Known types: {known}") from None


def create_device(kind: Union[DeviceKind, str], **params: Any) -> Device:
    """
    Construct a device of the given kind.

    Args:
        kind: DeviceKind or name ('mixer', 'divider', 'splitter', 'reactor')
        **params: Constructor arguments, e.g. input_capacity=2 for a mixer,
            output_capacity=3 for a divider, is_double=True for a reactor.
            device_id is accepted by every kind.

    Raises:
        ConfigurationError: If the kind is unknown or params are invalid
    """
    cls = DEVICE_TYPES[resolve_kind(kind)]
    try:
        return cls(**params)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid parameters for {cls.__name__}: {e}") from e


__all__ = [
    'Mixer',
    'Divider',
    'Splitter',
    'Reactor',
    'DEVICE_TYPES',
    'resolve_kind',
    'create_device',
]
