"""
Fixed port counts and numerical tolerances.
"""

from typing import Final


class PortLimits:
    """Port capacities fixed by the device type."""
    MIXER_OUTPUTS: Final[int] = 1
    DIVIDER_INPUTS: Final[int] = 1
    REACTOR_INPUTS: Final[int] = 1
    REACTOR_OUTPUTS_SINGLE: Final[int] = 1
    REACTOR_OUTPUTS_DOUBLE: Final[int] = 2


class Tolerances:
    """Absolute tolerances for mass flow comparisons (kg/h)."""
    POSSIBLE_ERROR: Final[float] = 0.01


class StreamNaming:
    """Automatic stream naming."""
    PREFIX: Final[str] = 's'


# Module-level aliases for convenience
MIXER_OUTPUTS = PortLimits.MIXER_OUTPUTS
POSSIBLE_ERROR = Tolerances.POSSIBLE_ERROR
