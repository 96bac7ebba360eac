"""
Simulation module.

A fixed-step projectile driver built on the tuple type.
"""

from .projectile import (
    Projectile,
    Environment,
    Trajectory,
    format_float,
    tick,
    simulate,
    build_scenario,
    run,
    sweep,
    speed_sweep_configs,
)

__all__ = [
    "Projectile",
    "Environment",
    "Trajectory",
    "format_float",
    "tick",
    "simulate",
    "build_scenario",
    "run",
    "sweep",
    "speed_sweep_configs",
]
