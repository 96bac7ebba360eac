"""
Fixed-step projectile simulation.

A projectile has a position (point) and a velocity (vector). Every tick
moves the position by the velocity, then changes the velocity by the
environment's gravity and wind:

    position <- position + velocity
    velocity <- velocity + gravity + wind

There is no physics beyond that: no time step, no drag, no collision.
The run ends once the position's y component is at or below zero.
"""

import logging
import time
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple as PyTuple

import numpy as np
import torch
from tqdm import tqdm

from ..tuples import Tuple, point, vector, stack
from ..utils.config import SimulationConfig

logger = logging.getLogger(__name__)


@dataclass
class Projectile:
    """A moving body."""
    position: Tuple  # a point
    velocity: Tuple  # a vector


@dataclass
class Environment:
    """Constant forces applied every tick."""
    gravity: Tuple  # a vector
    wind: Tuple     # a vector


@dataclass
class Trajectory:
    """
    Positions recorded by one run.

    Attributes:
        positions: Start position followed by the position after each tick,
                   never empty
        config: Configuration the run was built from
        landed: Whether the run ended with y <= 0 (False if max_ticks cut it short)
    """
    positions: List[Tuple]
    config: Optional[SimulationConfig] = None
    landed: bool = False

    def __post_init__(self):
        if not self.positions:
            raise ValueError("Trajectory needs at least the start position")

    @property
    def ticks(self) -> int:
        """Number of ticks simulated."""
        return len(self.positions) - 1

    @property
    def final_position(self) -> Tuple:
        return self.positions[-1]

    def as_tensor(self) -> torch.Tensor:
        """Positions as a (ticks + 1, 4) tensor."""
        return stack(self.positions).components


def format_float(value) -> str:
    """
    Shortest positional form of a float, without a trailing ".0".

    1.0 -> "1", 0.5 -> "0.5", 1e-7 -> "0.0000001"
    """
    return np.format_float_positional(float(value), trim='-')


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Advance the projectile by one step."""
    position = proj.position + proj.velocity
    velocity = proj.velocity + env.gravity + env.wind
    return Projectile(position, velocity)


def simulate(
    env: Environment,
    proj: Projectile,
    max_ticks: Optional[int] = None,
) -> Iterator[Projectile]:
    """
    Tick the projectile until it reaches the ground.

    Args:
        env: Environment applied every tick
        proj: Starting projectile (single tuples, not a batch)
        max_ticks: Optional cap on the number of ticks

    Yields:
        The projectile after each tick
    """
    ticks = 0
    while proj.position.y > 0.0:
        if max_ticks is not None and ticks >= max_ticks:
            logger.warning(f"Projectile still airborne after {ticks} ticks, stopping")
            return
        proj = tick(env, proj)
        ticks += 1
        logger.debug(f"Tick {ticks}: position={proj.position}, velocity={proj.velocity}")
        yield proj


def build_scenario(config: SimulationConfig) -> PyTuple[Projectile, Environment]:
    """
    Create the starting projectile and environment of a configuration.

    The launch direction is normalized and then scaled by launch_speed.
    """
    velocity = vector(*config.launch_direction).normalize() * config.launch_speed
    projectile = Projectile(
        position=point(*config.start_position),
        velocity=velocity,
    )
    environment = Environment(
        gravity=vector(*config.gravity),
        wind=vector(*config.wind),
    )
    return projectile, environment


def run(config: Optional[SimulationConfig] = None) -> Trajectory:
    """
    Run one simulation and report it on stdout.

    With config.verbose, prints a line per tick
    ("Projectile position: {x} - {y} after {t} ticks") and the final
    "Number of ticks: {t}". Sleeps config.tick_delay seconds after
    every tick.

    Args:
        config: Simulation configuration (defaults to SimulationConfig())

    Returns:
        Recorded trajectory
    """
    config = (config or SimulationConfig()).validate()
    projectile, environment = build_scenario(config)

    trajectory = Trajectory(config=config, positions=[projectile.position])
    for t, projectile in enumerate(simulate(environment, projectile, config.max_ticks), start=1):
        trajectory.positions.append(projectile.position)
        if config.verbose:
            print(
                f"Projectile position: {format_float(projectile.position.x)} - "
                f"{format_float(projectile.position.y)} after {t} ticks"
            )
        if config.tick_delay > 0:
            time.sleep(config.tick_delay)

    trajectory.landed = bool(trajectory.final_position.y <= 0.0)
    if trajectory.landed:
        logger.info(
            f"Landed at x={trajectory.final_position.x.item():.4f} "
            f"after {trajectory.ticks} ticks"
        )
    if config.verbose:
        print(f"Number of ticks: {trajectory.ticks}")
    return trajectory


def sweep(
    configs: Sequence[SimulationConfig],
    show_progress: bool = True,
) -> List[Trajectory]:
    """
    Run several configurations quietly and without delay.

    Args:
        configs: Configurations to run
        show_progress: Show a tqdm progress bar

    Returns:
        One trajectory per configuration, in order
    """
    trajectories = []
    for config in tqdm(configs, desc='Sweep', disable=not show_progress):
        trajectories.append(run(config.update(verbose=False, tick_delay=0.0)))
    return trajectories


def speed_sweep_configs(
    speeds: Sequence[float],
    base: Optional[SimulationConfig] = None,
) -> List[SimulationConfig]:
    """Copies of base that differ only in launch_speed."""
    base = base or SimulationConfig()
    return [base.update(launch_speed=float(s)) for s in speeds]
