"""Core abstractions: streams, ports, device protocol and errors."""

from mixsim.core.constants import MIXER_OUTPUTS, FLOW_TOLERANCE
from mixsim.core.enums import PortKind
from mixsim.core.exceptions import (
    MixSimError,
    DeviceError,
    CapacityExceededError,
    MissingOutputError,
    ConfigurationError,
)
from mixsim.core.stream import Stream, StreamFactory
from mixsim.core.ports import StreamPort
from mixsim.core.types import Device

__all__ = [
    'MIXER_OUTPUTS',
    'FLOW_TOLERANCE',
    'PortKind',
    'MixSimError',
    'DeviceError',
    'CapacityExceededError',
    'MissingOutputError',
    'ConfigurationError',
    'Stream',
    'StreamFactory',
    'StreamPort',
    'Device',
]
