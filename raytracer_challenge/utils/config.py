"""
Configuration management for the projectile simulation.

Provides the configuration dataclass and JSON load/save helpers.
"""

import json
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, List
from pathlib import Path

from ..core.constants import (
    DEFAULT_START_POSITION,
    DEFAULT_LAUNCH_DIRECTION,
    DEFAULT_LAUNCH_SPEED,
    DEFAULT_GRAVITY,
    DEFAULT_WIND,
    DEFAULT_TICK_DELAY,
)


@dataclass
class SimulationConfig:
    """
    Configuration for a projectile run.

    Attributes:
        # Projectile
        start_position: Starting point (x, y, z)
        launch_direction: Direction of the initial velocity, normalized before use
        launch_speed: Length of the initial velocity

        # Environment
        gravity: Gravity vector added to the velocity every tick
        wind: Wind vector added to the velocity every tick

        # Driver
        tick_delay: Seconds to sleep between ticks
        max_ticks: Stop after this many ticks even if the projectile is airborne
        verbose: Print one line per tick and the final tick count
    """

    # Projectile
    start_position: List[float] = field(default_factory=lambda: list(DEFAULT_START_POSITION))
    launch_direction: List[float] = field(default_factory=lambda: list(DEFAULT_LAUNCH_DIRECTION))
    launch_speed: float = DEFAULT_LAUNCH_SPEED

    # Environment
    gravity: List[float] = field(default_factory=lambda: list(DEFAULT_GRAVITY))
    wind: List[float] = field(default_factory=lambda: list(DEFAULT_WIND))

    # Driver
    tick_delay: float = DEFAULT_TICK_DELAY
    max_ticks: Optional[int] = None
    verbose: bool = True

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def validate(self) -> 'SimulationConfig':
        """
        Check field values.

        Raises:
            ValueError: On a wrong-length coordinate list, a negative
                tick_delay or a non-positive max_ticks
        """
        for name in ('start_position', 'launch_direction', 'gravity', 'wind'):
            value = getattr(self, name)
            if len(value) != 3:
                raise ValueError(f"{name} should have 3 coordinates, got {len(value)}")
        if self.tick_delay < 0:
            raise ValueError(f"tick_delay must be non-negative, got {self.tick_delay}")
        if self.max_ticks is not None and self.max_ticks <= 0:
            raise ValueError(f"max_ticks must be positive, got {self.max_ticks}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'SimulationConfig':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields and k != 'extra'}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}
        extra_kwargs.update(config_dict.get('extra', {}))

        config = cls(**known_kwargs)
        config.extra = extra_kwargs
        return config

    def update(self, **kwargs) -> 'SimulationConfig':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return SimulationConfig.from_dict(config_dict)


def load_config(filepath: str) -> SimulationConfig:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        Validated SimulationConfig
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    return SimulationConfig.from_dict(config_dict).validate()


def save_config(config: SimulationConfig, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: SimulationConfig to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
