"""Scenario configuration models and loaders."""

from mixsim.config.models import MixerConfig, StreamConfig, ScenarioConfig
from mixsim.config.loaders import ConfigLoader, load_scenario_config

__all__ = [
    'MixerConfig',
    'StreamConfig',
    'ScenarioConfig',
    'ConfigLoader',
    'load_scenario_config',
]
