"""
Pytest configuration and fixtures for raytracer_challenge tests.
"""

import pytest
import torch

from raytracer_challenge.tuples import point, vector
from raytracer_challenge.simulation import Projectile, Environment
from raytracer_challenge.utils.config import SimulationConfig


@pytest.fixture
def zero_vector():
    """The vector (0, 0, 0)."""
    return vector(0.0, 0.0, 0.0)


@pytest.fixture
def unit_vectors():
    """Unit vectors along x, y and z."""
    return (
        vector(1.0, 0.0, 0.0),
        vector(0.0, 1.0, 0.0),
        vector(0.0, 0.0, 1.0),
    )


@pytest.fixture
def batch_points():
    """A batch of three points."""
    xs = torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)
    ys = torch.tensor([4.0, 5.0, 6.0], dtype=torch.float64)
    zs = torch.tensor([7.0, 8.0, 9.0], dtype=torch.float64)
    return point(xs, ys, zs)


@pytest.fixture
def quiet_config():
    """Default scenario without output or delay."""
    return SimulationConfig(verbose=False, tick_delay=0.0)


@pytest.fixture
def default_environment():
    """Gravity pulling down and a light headwind."""
    return Environment(
        gravity=vector(0.0, -0.1, 0.0),
        wind=vector(-0.01, 0.0, 0.0),
    )


@pytest.fixture
def default_projectile():
    """Launched from (0, 1, 0) at 45 degrees with unit speed."""
    return Projectile(
        position=point(0.0, 1.0, 0.0),
        velocity=vector(1.0, 1.0, 0.0).normalize(),
    )
