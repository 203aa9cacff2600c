"""
Bounded stream collections for device ports.

Devices own one StreamPort per direction instead of inheriting protected
list state. A port keeps attachment order and never grows past its
capacity, which is fixed at construction.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from mixsim.core.enums import PortKind
from mixsim.core.exceptions import CapacityExceededError
from mixsim.core.stream import Stream

logger = logging.getLogger(__name__)


class StreamPort:
    """
    Ordered, fixed-capacity set of streams on one side of a device.

    Attributes:
        kind: PortKind.INPUT or PortKind.OUTPUT
        capacity: Maximum number of attached streams
        owner: Optional device name used in error messages
    """

    def __init__(self, kind: PortKind, capacity: int, owner: Optional[str] = None) -> None:
        """
        Initialize an empty port.

        Args:
            kind: Port direction.
            capacity: Maximum number of streams (>= 0).
            owner: Name of the owning device.

        Raises:
            TypeError: If capacity is not an integer.
            ValueError: If capacity is negative.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"{kind.label} capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise ValueError(f"{kind.label} capacity must be non-negative, got {capacity}")

        self.kind = PortKind(kind)
        self.capacity = capacity
        self.owner = owner
        self._streams: List[Stream] = []

    def attach(self, stream: Stream) -> None:
        """
        Append a stream to the port.

        Raises:
            CapacityExceededError: If the port is already full. The port is
                left unchanged.
        """
        if self.is_full:
            logger.warning(
                f"{self.owner}: {self.kind.label} limit ({self.capacity}) reached, "
                f"rejecting stream '{stream.name}'"
            )
            raise CapacityExceededError(self.kind, self.capacity, device=self.owner)

        self._streams.append(stream)
        logger.debug(
            f"{self.owner}: attached {self.kind.label} '{stream.name}' "
            f"({len(self._streams)}/{self.capacity})"
        )

    @property
    def streams(self) -> Tuple[Stream, ...]:
        """Attached streams in attachment order."""
        return tuple(self._streams)

    @property
    def is_full(self) -> bool:
        return len(self._streams) >= self.capacity

    @property
    def is_empty(self) -> bool:
        return not self._streams

    def __len__(self) -> int:
        return len(self._streams)

    def __iter__(self) -> Iterator[Stream]:
        return iter(self._streams)

    def __repr__(self) -> str:
        names = [s.name for s in self._streams]
        return f"StreamPort({self.kind.label}, {len(self._streams)}/{self.capacity}, {names})"
