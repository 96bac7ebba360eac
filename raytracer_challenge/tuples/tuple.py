"""
Homogeneous 4-component tuples for points and vectors in 3D space.

A tuple is (x, y, z, w) where the w component tells the two kinds apart:
- w = 1: a point, a position in space
- w = 0: a vector, a direction with magnitude and no fixed location

The w value is never validated. Ordinary arithmetic keeps it meaningful:
point - point gives a vector, point + vector gives a point, while
point + point gives w = 2, which is accepted without complaint.

Components are stored as a float64 tensor of shape (..., 4), so a single
tuple has batch shape () and a tensor of shape (N, 4) holds N tuples that
are operated on together.

Component ordering:
[x, y, z, w]
 0  1  2  3
"""

from __future__ import annotations
from typing import Iterable, List, Union

import torch

from ..core.constants import (
    DEFAULT_DTYPE,
    NUM_COMPONENTS,
    IDX_X,
    IDX_Y,
    IDX_Z,
    IDX_W,
    POINT_W,
    VECTOR_W,
)
from ..core.types import Scalar
from ..utils.compare import approx_equal


class Tuple:
    """
    A point or vector in homogeneous coordinates.

    Tuples are values: every operation returns a new Tuple and nothing
    mutates the stored components.

    Supports:
    - Addition, subtraction and negation
    - Multiplication and division by a scalar (scalar on either side)
    - Magnitude, normalization, dot and cross products
    - Approximate equality (absolute difference below float64 epsilon)

    Degenerate input is not checked: dividing by zero, or normalizing a
    zero vector, produces inf/nan components.
    """

    def __init__(self, components: torch.Tensor):
        """
        Initialize a tuple from its components.

        Args:
            components: Tensor of shape (..., 4) ordered [x, y, z, w]
        """
        if components.dim() == 0 or components.shape[-1] != NUM_COMPONENTS:
            got = components.shape[-1] if components.dim() > 0 else 0
            raise ValueError(f"Expected {NUM_COMPONENTS} components, got {got}")
        self.components = components.to(DEFAULT_DTYPE)

    # === Construction ===

    @classmethod
    def new(cls, x: Scalar, y: Scalar, z: Scalar, w: Scalar) -> 'Tuple':
        """Create a tuple from four components (numbers or same-shape tensors)."""
        parts = [torch.as_tensor(c, dtype=DEFAULT_DTYPE) for c in (x, y, z, w)]
        return cls(torch.stack(torch.broadcast_tensors(*parts), dim=-1))

    @classmethod
    def from_tensor(cls, data: Union[torch.Tensor, Iterable[float]]) -> 'Tuple':
        """Create a tuple from a tensor, list or tuple of four numbers."""
        if not isinstance(data, torch.Tensor):
            data = torch.tensor(list(data), dtype=DEFAULT_DTYPE)
        return cls(data)

    # === Tensor plumbing ===

    @property
    def shape(self) -> torch.Size:
        """Batch shape (excluding the 4 components)."""
        return self.components.shape[:-1]

    @property
    def device(self) -> torch.device:
        return self.components.device

    @property
    def dtype(self) -> torch.dtype:
        return self.components.dtype

    def to(self, device: torch.device) -> 'Tuple':
        """Move to specified device."""
        return Tuple(self.components.to(device))

    def clone(self) -> 'Tuple':
        """Create a copy."""
        return Tuple(self.components.clone())

    def detach(self) -> 'Tuple':
        """Detach from computation graph."""
        return Tuple(self.components.detach())

    def to_list(self) -> List:
        """Components as plain Python floats (nested for batches)."""
        return self.components.tolist()

    def __getitem__(self, index) -> 'Tuple':
        """Select tuples from a batch."""
        if self.shape == ():
            raise TypeError("A single Tuple is not subscriptable, use x, y, z or w")
        return Tuple(self.components[index])

    # === Components ===

    @property
    def x(self) -> torch.Tensor:
        return self.components[..., IDX_X]

    @property
    def y(self) -> torch.Tensor:
        return self.components[..., IDX_Y]

    @property
    def z(self) -> torch.Tensor:
        return self.components[..., IDX_Z]

    @property
    def w(self) -> torch.Tensor:
        return self.components[..., IDX_W]

    # === Classification ===

    def _collapse(self, mask: torch.Tensor) -> Union[bool, torch.Tensor]:
        # A single tuple answers with a plain bool, a batch with a mask
        if self.shape == ():
            return bool(mask)
        return mask

    def is_point(self) -> Union[bool, torch.Tensor]:
        """True where w is within epsilon of 1."""
        return self._collapse(approx_equal(self.w, POINT_W))

    def is_vector(self) -> Union[bool, torch.Tensor]:
        """True where w is within epsilon of 0."""
        return self._collapse(approx_equal(self.w, VECTOR_W))

    # === Arithmetic ===

    def __add__(self, other: 'Tuple') -> 'Tuple':
        """Component-wise sum."""
        if isinstance(other, Tuple):
            return Tuple(self.components + other.components)
        return NotImplemented

    def __sub__(self, other: 'Tuple') -> 'Tuple':
        """Component-wise difference."""
        if isinstance(other, Tuple):
            return Tuple(self.components - other.components)
        return NotImplemented

    def __mul__(self, other: Scalar) -> 'Tuple':
        """Multiplication by a scalar."""
        if isinstance(other, (int, float)):
            return Tuple(self.components * other)
        if isinstance(other, torch.Tensor):
            return Tuple(self.components * other.unsqueeze(-1))
        return NotImplemented

    def __rmul__(self, other: Scalar) -> 'Tuple':
        """Right multiplication by scalar."""
        return self.__mul__(other)

    def __truediv__(self, other: Scalar) -> 'Tuple':
        """Division by scalar."""
        if isinstance(other, (int, float)):
            return Tuple(self.components / other)
        if isinstance(other, torch.Tensor):
            return Tuple(self.components / other.unsqueeze(-1))
        return NotImplemented

    def __neg__(self) -> 'Tuple':
        """Negation, same as multiplying by -1."""
        return self * -1.0

    # === Vector operations ===

    def magnitude(self) -> torch.Tensor:
        """
        Euclidean length over all four components.

        For a vector w is 0 and this is the usual 3D length. For other
        tuples w is included as is.
        """
        return torch.sqrt((self.components * self.components).sum(dim=-1))

    def normalize(self) -> 'Tuple':
        """
        Return the tuple scaled to unit magnitude.

        There is no zero check: a zero vector yields nan components.
        """
        return self / self.magnitude()

    def dot(self, other: 'Tuple') -> torch.Tensor:
        """Sum of the pairwise products of all four components."""
        return (self.components * other.components).sum(dim=-1)

    def cross(self, other: 'Tuple') -> 'Tuple':
        """
        3D cross product of the x, y, z parts.

        The w components of both operands are ignored and the result is
        always a vector.
        """
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    # === Equality ===

    def __eq__(self, other: object) -> Union[bool, torch.Tensor]:
        """
        Approximate equality of every component pair.

        Batches whose shapes do not broadcast are simply unequal.
        """
        if not isinstance(other, Tuple):
            return NotImplemented
        try:
            torch.broadcast_shapes(self.shape, other.shape)
        except RuntimeError:
            return False
        mask = approx_equal(self.components, other.components).all(dim=-1)
        if mask.dim() == 0:
            return bool(mask)
        return mask

    def __ne__(self, other: object) -> Union[bool, torch.Tensor]:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        if isinstance(result, bool):
            return not result
        return ~result

    # Approximate equality cannot agree with a hash
    __hash__ = None

    def __repr__(self) -> str:
        if self.shape == ():
            x, y, z, w = self.to_list()
            return f"Tuple(x={x}, y={y}, z={z}, w={w})"
        return f"Tuple(shape={tuple(self.shape)}, device={self.device})"


# === Factory functions ===

def point(x: Scalar, y: Scalar, z: Scalar) -> Tuple:
    """Create a point (w = 1)."""
    return Tuple.new(x, y, z, POINT_W)


def vector(x: Scalar, y: Scalar, z: Scalar) -> Tuple:
    """Create a vector (w = 0)."""
    return Tuple.new(x, y, z, VECTOR_W)


def stack(tuples: Iterable[Tuple]) -> Tuple:
    """Stack tuples of equal batch shape into one batched Tuple."""
    return Tuple(torch.stack([t.components for t in tuples], dim=0))


# === Free-function forms of the operators ===

def add(a: Tuple, b: Tuple) -> Tuple:
    """a + b"""
    return a + b


def sub(a: Tuple, b: Tuple) -> Tuple:
    """a - b"""
    return a - b


def scale(t: Tuple, s: Scalar) -> Tuple:
    """t * s"""
    return t * s


def divide(t: Tuple, s: Scalar) -> Tuple:
    """t / s"""
    return t / s


def negate(t: Tuple) -> Tuple:
    """-t"""
    return -t


def magnitude(t: Tuple) -> torch.Tensor:
    return t.magnitude()


def normalize(t: Tuple) -> Tuple:
    return t.normalize()


def dot(a: Tuple, b: Tuple) -> torch.Tensor:
    return a.dot(b)


def cross(a: Tuple, b: Tuple) -> Tuple:
    return a.cross(b)
