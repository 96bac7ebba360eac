"""
Utility functions for raytracer_challenge.

Includes the shared float comparison, configuration management and
trajectory plotting.
"""

from .compare import (
    approx_equal,
    float_cmp,
)
from .config import SimulationConfig, load_config, save_config
from .visualization import (
    PlotStyle,
    plot_trajectory,
)

__all__ = [
    # Comparison
    "approx_equal",
    "float_cmp",
    # Config
    "SimulationConfig",
    "load_config",
    "save_config",
    # Visualization
    "PlotStyle",
    "plot_trajectory",
]
