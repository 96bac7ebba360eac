"""
Type aliases for raytracer_challenge.

Shape Conventions:
==================

Tuple components live in a tensor of shape (..., 4):
    - Last axis: [x, y, z, w]
    - Leading axes: batch shape, () for a single tuple

Example:
    single: Tensor[4]       # one point or vector
    batch:  Tensor[N, 4]    # N tuples processed together
"""

from typing import Union

import torch


# Scalar operand: Python number or tensor broadcastable to the batch shape
Scalar = Union[int, float, torch.Tensor]

