"""
Stream class for mass flow tracking.

Represents a named material flow carrying a single scalar quantity:
- Mass flow (kg/h)

A Stream is shared by reference. The same object may be the output of one
device and the input of another, so every holder sees the latest value.
Writes are caller-serialized: only the device that owns a stream as an
output (or the caller setting a feed) should assign its flow.
"""

from dataclasses import dataclass
import itertools
import logging
from typing import Iterator

from mixsim.core.constants import StreamNaming

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Stream:
    """
    Represents a material flow identified by name.

    Streams compare by identity; two streams with the same name and flow
    are still distinct carriers.

    Attributes:
        name: Stream label, e.g. 's1'
        mass_flow: Mass flow rate (kg/h). Any real value, including negative.
    """
    name: str
    mass_flow: float = 0.0

    def __post_init__(self):
        self.mass_flow = float(self.mass_flow)

    @classmethod
    def from_index(cls, index: int, mass_flow: float = 0.0) -> 'Stream':
        """Create a stream named from a sequence number ('s<index>')."""
        return cls(name=f"{StreamNaming.PREFIX}{index}", mass_flow=mass_flow)

    def set_name(self, name: str) -> None:
        self.name = name

    def get_name(self) -> str:
        return self.name

    def set_mass_flow(self, value: float) -> None:
        """Replace the mass flow unconditionally."""
        self.mass_flow = float(value)

    def get_mass_flow(self) -> float:
        """Return the last assigned mass flow (0.0 if never set)."""
        return self.mass_flow

    def describe(self) -> str:
        """One-line summary, e.g. 'Stream s3 flow = 15'."""
        return f"Stream {self.name} flow = {self.mass_flow:g}"


class StreamFactory:
    """
    Sequential stream generator.

    Replaces a global creation counter: each factory owns its own sequence,
    so stream names are deterministic within a scenario.

    Example:
        factory = StreamFactory()
        feed_a = factory.create(10.0)   # 's1'
        feed_b = factory.create(5.0)    # 's2'
        product = factory.create()      # 's3'
    """

    def __init__(self, start: int = StreamNaming.FIRST_INDEX) -> None:
        """
        Initialize the factory.

        Args:
            start: Sequence number given to the first created stream.
        """
        self.start = start
        self._counter: Iterator[int] = itertools.count(start)
        self.created = 0

    def next_index(self) -> int:
        """Consume and return the next sequence number."""
        self.created += 1
        return next(self._counter)

    def create(self, mass_flow: float = 0.0) -> Stream:
        """
        Create a new stream named from the next sequence number.

        Args:
            mass_flow: Initial mass flow (kg/h). Default: 0.0.

        Returns:
            Stream: Freshly named stream.
        """
        stream = Stream.from_index(self.next_index(), mass_flow=float(mass_flow))
        logger.debug(f"Created stream '{stream.name}' with flow {stream.mass_flow}")
        return stream

    def reset(self) -> None:
        """Restart the sequence from `start`."""
        self._counter = itertools.count(self.start)
        self.created = 0
