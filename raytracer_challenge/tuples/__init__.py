"""
Tuple module.

Implements the homogeneous (x, y, z, w) tuple used for points and vectors,
with operator overloads and free-function forms of every operation.
"""

from .tuple import (
    Tuple,
    point,
    vector,
    stack,
    add,
    sub,
    scale,
    divide,
    negate,
    magnitude,
    normalize,
    dot,
    cross,
)

__all__ = [
    "Tuple",
    "point",
    "vector",
    "stack",
    "add",
    "sub",
    "scale",
    "divide",
    "negate",
    "magnitude",
    "normalize",
    "dot",
    "cross",
]
