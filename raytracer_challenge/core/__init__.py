"""
Core module for raytracer_challenge.

Contains:
- Constants: numeric tolerance, tuple layout and projectile defaults
- Types: type aliases for scalars and coordinate triples
"""

from .constants import (
    # Numeric constants
    DEFAULT_DTYPE,
    EPSILON,
    # Tuple layout
    NUM_COMPONENTS,
    IDX_X,
    IDX_Y,
    IDX_Z,
    IDX_W,
    POINT_W,
    VECTOR_W,
    # Projectile defaults
    DEFAULT_START_POSITION,
    DEFAULT_LAUNCH_DIRECTION,
    DEFAULT_LAUNCH_SPEED,
    DEFAULT_GRAVITY,
    DEFAULT_WIND,
    DEFAULT_TICK_DELAY,
    CLI_TICK_DELAY,
)

from .types import (
    Scalar,
)

__all__ = [
    "DEFAULT_DTYPE",
    "EPSILON",
    "NUM_COMPONENTS",
    "IDX_X",
    "IDX_Y",
    "IDX_Z",
    "IDX_W",
    "POINT_W",
    "VECTOR_W",
    "DEFAULT_START_POSITION",
    "DEFAULT_LAUNCH_DIRECTION",
    "DEFAULT_LAUNCH_SPEED",
    "DEFAULT_GRAVITY",
    "DEFAULT_WIND",
    "DEFAULT_TICK_DELAY",
    "CLI_TICK_DELAY",
    "Scalar",
]
