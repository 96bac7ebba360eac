"""
Centralized constants for raytracer_challenge.

This module defines the numeric tolerance, the w-markers that tell points
from vectors, and the defaults of the projectile scenario.

Usage:
    from raytracer_challenge.core.constants import EPSILON, POINT_W

    def is_point(w: float) -> bool:
        return abs(w - POINT_W) < EPSILON
"""

import torch

# =============================================================================
# Numeric Constants
# =============================================================================

# All tuple components are 64-bit floats
DEFAULT_DTYPE: torch.dtype = torch.float64

# Machine epsilon for 64-bit floats (2.220446049250313e-16).
# Absolute tolerance only, no relative scaling.
EPSILON: float = torch.finfo(DEFAULT_DTYPE).eps


# =============================================================================
# Tuple Layout
# =============================================================================

NUM_COMPONENTS: int = 4

# Component indices: [x, y, z, w]
IDX_X = 0
IDX_Y = 1
IDX_Z = 2
IDX_W = 3

# w-component markers
POINT_W: float = 1.0
VECTOR_W: float = 0.0


# =============================================================================
# Projectile Defaults
# =============================================================================

DEFAULT_START_POSITION = (0.0, 1.0, 0.0)
DEFAULT_LAUNCH_DIRECTION = (1.0, 1.0, 0.0)
DEFAULT_LAUNCH_SPEED: float = 1.0
DEFAULT_GRAVITY = (0.0, -0.1, 0.0)
DEFAULT_WIND = (-0.01, 0.0, 0.0)

# Seconds to sleep between ticks (0.5 in the command-line driver)
DEFAULT_TICK_DELAY: float = 0.0
CLI_TICK_DELAY: float = 0.5
