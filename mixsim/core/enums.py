"""
Integer-based enumerations for device ports.
"""

from enum import IntEnum


class PortKind(IntEnum):
    """
    Direction of a device port.

    Examples:
        if error.kind == PortKind.INPUT:
            mixer = Mixer(input_capacity=mixer.input_capacity + 1)
    """
    INPUT = 0   # Stream consumed by the device
    OUTPUT = 1  # Stream produced by the device

    @property
    def label(self) -> str:
        """Lower-case name used in log messages and port metadata."""
        return self.name.lower()
