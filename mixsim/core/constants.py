"""
Fixed parameters for stream mixing devices.
"""

from typing import Final


class MixerLimits:
    """Port arity of the mixer device."""
    OUTPUTS: Final[int] = 1  # A mixer always discharges into a single stream


class Tolerances:
    """Numerical tolerances used when comparing flows."""
    FLOW_KG_H: Final[float] = 0.01


class StreamNaming:
    """Naming convention for generated streams."""
    PREFIX: Final[str] = 's'
    FIRST_INDEX: Final[int] = 1


# Module-level aliases
MIXER_OUTPUTS = MixerLimits.OUTPUTS
FLOW_TOLERANCE = Tolerances.FLOW_KG_H
