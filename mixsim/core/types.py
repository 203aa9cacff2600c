"""
Type aliases and protocols for static type checking.
"""

from typing import Any, Dict, Protocol, Tuple, TypeAlias, runtime_checkable

import numpy as np
import numpy.typing as npt

from mixsim.core.stream import Stream

# Scalar types
FlowRate: TypeAlias = float      # kg/h

# Array types
FlowArray: TypeAlias = npt.NDArray[np.float64]

# State dictionary type
DeviceState: TypeAlias = Dict[str, Any]


@runtime_checkable
class Device(Protocol):
    """
    Capability shared by every stream-processing device.

    A device consumes a bounded set of input streams and writes a bounded
    set of output streams. New device kinds implement this protocol
    directly; there is no base class to inherit from.
    """

    @property
    def inputs(self) -> Tuple[Stream, ...]: ...

    @property
    def outputs(self) -> Tuple[Stream, ...]: ...

    def add_input(self, stream: Stream) -> None: ...

    def add_output(self, stream: Stream) -> None: ...

    def update_outputs(self) -> None: ...
