"""Mixing components for combining multiple streams."""

from mixsim.components.mixing.mixer import Mixer

__all__ = ['Mixer']
