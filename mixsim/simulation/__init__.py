"""Scenario execution helpers."""

from mixsim.simulation.runner import build_scenario, run_scenario, main

__all__ = ['build_scenario', 'run_scenario', 'main']
