"""
Mass Flow Mixer.

Combines N inlet streams into its outlet stream(s) by mass balance.

Principle:
    1. **Mass Balance**: ṁ_total = Σ ṁ_i (empty sum is zero)
    2. **Distribution**: ṁ_out,j = ṁ_total / N_out for every outlet j

The mixer has no internal mode. Each call to `update_outputs()` is a pure
function of the streams attached at call time and of their current flows.
"""

from typing import Any, Dict, Tuple
import logging

import numpy as np

from mixsim.core.constants import MIXER_OUTPUTS
from mixsim.core.enums import PortKind
from mixsim.core.exceptions import MissingOutputError
from mixsim.core.ports import StreamPort
from mixsim.core.stream import Stream
from mixsim.core.types import DeviceState, FlowArray, FlowRate

logger = logging.getLogger(__name__)


class Mixer:
    """
    Multi-inlet mass flow mixer.

    Accepts up to `input_capacity` inlet streams and exactly one outlet
    stream. Outlet flow is the sum of inlet flows. Negative inlet flows are
    not validated and enter the sum as-is.

    Attributes:
        name (str): Device label used in logs and errors.
        input_capacity (int): Maximum number of inlet streams.
        output_capacity (int): Maximum number of outlet streams (always 1).

    Example:
        factory = StreamFactory()
        mixer = Mixer(input_capacity=2)
        mixer.add_input(factory.create(10.0))
        mixer.add_input(factory.create(5.0))
        product = factory.create()
        mixer.add_output(product)
        mixer.update_outputs()
        assert product.mass_flow == 15.0
    """

    def __init__(self, input_capacity: int, name: str = 'mixer') -> None:
        """
        Initialize the mixer.

        Args:
            input_capacity (int): Maximum number of inlet streams (>= 0).
            name (str): Device label. Default: 'mixer'.

        Raises:
            TypeError: If input_capacity is not an integer.
            ValueError: If input_capacity is negative.
        """
        self.name = name
        self._inlets = StreamPort(PortKind.INPUT, input_capacity, owner=name)
        self._outlets = StreamPort(PortKind.OUTPUT, MIXER_OUTPUTS, owner=name)

        # Monitoring
        self.last_total_flow: FlowRate = 0.0
        self.update_count = 0

    @property
    def input_capacity(self) -> int:
        return self._inlets.capacity

    @property
    def output_capacity(self) -> int:
        return self._outlets.capacity

    @property
    def inputs(self) -> Tuple[Stream, ...]:
        return self._inlets.streams

    @property
    def outputs(self) -> Tuple[Stream, ...]:
        return self._outlets.streams

    def add_input(self, stream: Stream) -> None:
        """
        Attach an inlet stream.

        Raises:
            CapacityExceededError: If `input_capacity` inlets are attached
                (kind=PortKind.INPUT).
        """
        self._inlets.attach(stream)

    def add_output(self, stream: Stream) -> None:
        """
        Attach the outlet stream.

        Raises:
            CapacityExceededError: If an outlet is already attached
                (kind=PortKind.OUTPUT).
        """
        self._outlets.attach(stream)

    def total_inlet_flow(self) -> FlowRate:
        """Sum of current inlet mass flows (kg/h)."""
        flows: FlowArray = np.fromiter(
            (s.mass_flow for s in self._inlets),
            dtype=np.float64,
            count=len(self._inlets)
        )
        return float(np.sum(flows))

    def update_outputs(self) -> None:
        """
        Recompute outlet flows from current inlet flows.

        Every outlet receives `total / N_out`, overwriting its previous
        value.

        Raises:
            MissingOutputError: If no outlet is attached. No stream is
                modified in that case.
        """
        total = self.total_inlet_flow()

        if self._outlets.is_empty:
            logger.warning(f"{self.name}: update requested with no outlet attached")
            raise MissingOutputError(device=self.name)

        per_output = total / len(self._outlets)
        for stream in self._outlets:
            stream.set_mass_flow(per_output)

        self.last_total_flow = total
        self.update_count += 1
        logger.debug(
            f"{self.name}: {len(self._inlets)} inlet(s) -> {total} kg/h, "
            f"{per_output} kg/h per outlet"
        )

    def get_state(self) -> DeviceState:
        """
        Return current mixer state for monitoring.
        """
        return {
            "name": self.name,
            "input_capacity": self.input_capacity,
            "output_capacity": self.output_capacity,
            "inputs": [s.name for s in self._inlets],
            "outputs": [s.name for s in self._outlets],
            "total_flow_kg_h": float(self.last_total_flow),
            "update_count": self.update_count,
        }

    def get_ports(self) -> Dict[str, Dict[str, Any]]:
        """Declare ports and their capacities."""
        return {
            'inlet': {'type': PortKind.INPUT.label, 'resource_type': 'stream',
                      'capacity': self.input_capacity},
            'outlet': {'type': PortKind.OUTPUT.label, 'resource_type': 'stream',
                       'capacity': self.output_capacity},
        }

    def __repr__(self) -> str:
        return (
            f"Mixer(name={self.name!r}, inputs={len(self._inlets)}/{self.input_capacity}, "
            f"outputs={len(self._outlets)}/{self.output_capacity})"
        )
