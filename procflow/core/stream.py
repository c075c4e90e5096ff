"""
Stream class for mass flow tracking.

Represents a named material flow carrying a single scalar mass flow rate.
Streams are shared by reference: one instance may be the output of one
device and the input of another.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from procflow.core.constants import StreamNaming
from procflow.core.types import MassFlow


@dataclass(eq=False)
class Stream:
    """
    Represents a named material flow.

    Identity is the object itself (eq=False), so two streams with the same
    name and flow are still distinct ports.

    Attributes:
        name: Stream label, e.g. 's1'
        mass_flow: Mass flow rate (kg/h). No sign check is performed.
    """
    name: str
    mass_flow: MassFlow = 0.0
    _is_set: bool = field(default=False, init=False, repr=False)

    @classmethod
    def create(cls, seed: int) -> 'Stream':
        """
        Create a stream named from a counter value.

        The caller owns and increments the counter; see StreamCounter.

        Args:
            seed: Counter value, becomes the numeric suffix of the name

        Returns:
            New Stream named 's<seed>'
        """
        return cls(name=f"{StreamNaming.PREFIX}{seed}")

    def set_name(self, name: str) -> None:
        self.name = name

    def get_name(self) -> str:
        return self.name

    def set_mass_flow(self, mass_flow: MassFlow) -> None:
        """Set mass flow (kg/h). Negative values are accepted as given."""
        self.mass_flow = float(mass_flow)
        self._is_set = True

    def get_mass_flow(self) -> MassFlow:
        return self.mass_flow

    @property
    def is_set(self) -> bool:
        """True once set_mass_flow() has been called."""
        return self._is_set

    def summary(self) -> str:
        """One-line console description."""
        return f"Stream {self.name} flow = {self.mass_flow:g}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "mass_flow": float(self.mass_flow),
            "is_set": self._is_set,
        }


class StreamCounter:
    """
    Explicit naming counter for streams.

    Owned by whoever builds a scenario and reset between independent
    scenarios, instead of a process-wide global.

    Example:
        counter = StreamCounter()
        feed = counter.new_stream(mass_flow=10.0)   # 's1'
        product = counter.new_stream()              # 's2'
        counter.reset()
    """

    def __init__(self, start: int = 0) -> None:
        self._value = start

    @property
    def value(self) -> int:
        return self._value

    def next(self) -> int:
        """Increment the counter and return the new value."""
        self._value += 1
        return self._value

    def reset(self, value: int = 0) -> None:
        self._value = value

    def new_stream(self, mass_flow: Optional[MassFlow] = None) -> Stream:
        """
        Create the next auto-named stream.

        Args:
            mass_flow: Optional initial mass flow (kg/h)
        """
        stream = Stream.create(self.next())
        if mass_flow is not None:
            stream.set_mass_flow(mass_flow)
        return stream

    def __repr__(self) -> str:
        return f"StreamCounter(value={self._value})"
