"""
Stream Mixing Simulation - Main Package

This package contains a minimal process-simulation toolkit with:
- Named mass-flow streams
- A device protocol with bounded input/output ports
- A mass-balance mixer
- Configuration-driven demonstration runner
"""

__version__ = "1.0.0"

from .core import *
from .components import *
from .config import *

__all__ = [
    # Core
    'Stream',
    'StreamFactory',
    'StreamPort',
    'Device',
    'PortKind',
    'MIXER_OUTPUTS',
    'FLOW_TOLERANCE',

    # Errors
    'MixSimError',
    'DeviceError',
    'CapacityExceededError',
    'MissingOutputError',
    'ConfigurationError',

    # Components
    'Mixer',

    # Configuration
    'MixerConfig',
    'StreamConfig',
    'ScenarioConfig',
    'ConfigLoader',
    'load_scenario_config',
]
