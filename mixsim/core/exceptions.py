"""Custom exception hierarchy for the mixing simulation."""

from mixsim.core.enums import PortKind


class MixSimError(Exception):
    """Base exception for all mixsim errors."""
    pass


class DeviceError(MixSimError):
    """Base exception for device-related errors."""
    pass


class CapacityExceededError(DeviceError):
    """Raised when a stream is attached to a port that is already full."""

    def __init__(self, kind: PortKind, capacity: int, device: str = None) -> None:
        self.kind = PortKind(kind)
        self.capacity = capacity
        self.device = device
        owner = f"{device}: " if device else ""
        super().__init__(
            f"{owner}{self.kind.label} stream limit reached "
            f"(capacity={capacity})"
        )


class MissingOutputError(DeviceError):
    """Raised when outputs are recomputed before any output stream is attached."""

    def __init__(self, device: str = None) -> None:
        self.device = device
        owner = f"{device}: " if device else ""
        super().__init__(f"{owner}output streams must be set before update")


class ConfigurationError(MixSimError):
    """Raised for configuration loading/validation errors."""
    pass
