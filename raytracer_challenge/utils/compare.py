"""
Floating-point comparison shared by the tuple type and its tests.

Two values are equal when their absolute difference is below float64
machine epsilon. There is no relative term, so large magnitudes compare
unequal after any rounding at all.
"""

from typing import Union

import torch

from ..core.constants import DEFAULT_DTYPE, EPSILON


Number = Union[int, float, torch.Tensor]


def approx_equal(a: Number, b: Number) -> torch.Tensor:
    """
    Element-wise epsilon equality.

    Args:
        a: Number or tensor
        b: Number or tensor broadcastable against a

    Returns:
        Boolean tensor of the broadcast shape
    """
    a = torch.as_tensor(a, dtype=DEFAULT_DTYPE)
    b = torch.as_tensor(b, dtype=DEFAULT_DTYPE, device=a.device)
    return torch.abs(a - b) < EPSILON


def float_cmp(a: Number, b: Number) -> bool:
    """True if every element of a is within epsilon of b."""
    return bool(approx_equal(a, b).all())
