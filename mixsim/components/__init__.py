"""Stream-processing devices."""

from mixsim.components.mixing import Mixer

__all__ = ['Mixer']
