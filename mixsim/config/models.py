"""
Pydantic models for mixing scenario configuration.

A scenario describes one mixer, the feed streams attached to it and the
number of product streams. The defaults reproduce the reference
demonstration: two feeds of 10 and 5 kg/h into a single product.
"""

from typing import List
from pydantic import BaseModel, Field, field_validator

from mixsim.core.constants import MIXER_OUTPUTS


class MixerConfig(BaseModel):
    """Mixer construction parameters."""
    name: str = Field('mixer', min_length=1, description="Device label")
    input_capacity: int = Field(2, ge=0, description="Maximum number of inlet streams")


class StreamConfig(BaseModel):
    """Feed stream definition."""
    mass_flow: float = Field(0.0, description="Initial mass flow (kg/h), negative allowed")


def _default_inputs() -> List[StreamConfig]:
    return [StreamConfig(mass_flow=10.0), StreamConfig(mass_flow=5.0)]


class ScenarioConfig(BaseModel):
    """
    Complete mixing scenario.

    `inputs` and `outputs` are attached in order. Counts larger than the
    mixer capacities are not rejected here; wiring them raises
    CapacityExceededError when the scenario is built.
    """
    name: str = 'mixing_demo'
    mixer: MixerConfig = Field(default_factory=MixerConfig)
    inputs: List[StreamConfig] = Field(default_factory=_default_inputs)
    outputs: int = Field(MIXER_OUTPUTS, ge=0, description="Number of product streams")
    stream_start_index: int = Field(1, description="Sequence number of the first stream")

    @field_validator('inputs', mode='before')
    @classmethod
    def coerce_flows(cls, value):
        """Allow bare numbers as shorthand for {'mass_flow': x}."""
        if isinstance(value, list):
            return [
                {'mass_flow': item} if isinstance(item, (int, float)) else item
                for item in value
            ]
        return value
