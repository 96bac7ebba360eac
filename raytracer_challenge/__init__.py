"""
raytracer_challenge: points, vectors and a projectile to throw them at.

A small PyTorch-backed library of homogeneous 4-component tuples
(x, y, z, w) for 3D geometry.

Key Features:
- Points (w = 1) and vectors (w = 0) in one Tuple type
- Operator overloads and free-function forms of every operation
- Approximate equality at float64 machine epsilon
- Batched tuples: any (..., 4) tensor is a batch of tuples
- A fixed-step projectile simulation with JSON configuration and plotting

Example:
    >>> from raytracer_challenge.tuples import point, vector
    >>> p = point(0.0, 1.0, 0.0)
    >>> v = vector(1.0, 1.0, 0.0).normalize()
    >>> (p + v).is_point()
    True
"""

__version__ = "0.1.0"
__author__ = "raytracer_challenge Contributors"

from . import core
from . import utils
from . import tuples
from . import simulation

from .tuples import Tuple, point, vector

__all__ = [
    "core",
    "utils",
    "tuples",
    "simulation",
    "Tuple",
    "point",
    "vector",
]
