"""
Tests for the projectile simulation.

Covers the tick update rule, the run loop and its stdout report,
the max_ticks cap and speed sweeps.
"""

import pytest
import torch

from raytracer_challenge.tuples import point, vector
from raytracer_challenge.simulation import (
    Projectile,
    Environment,
    Trajectory,
    format_float,
    tick,
    simulate,
    build_scenario,
    run,
    sweep,
    speed_sweep_configs,
)
from raytracer_challenge.utils.compare import float_cmp
from raytracer_challenge.utils.config import SimulationConfig


# =============================================================================
# Tick
# =============================================================================

class TestTick:
    """Tests for a single simulation step."""

    def test_position_moves_by_velocity(self, default_environment):
        """Position advances by the old velocity."""
        proj = Projectile(point(0.0, 1.0, 0.0), vector(1.0, 1.0, 0.0))
        result = tick(default_environment, proj)
        assert result.position == point(1.0, 2.0, 0.0)

    def test_velocity_changes_by_gravity_and_wind(self, default_environment):
        """Velocity picks up gravity and wind."""
        proj = Projectile(point(0.0, 1.0, 0.0), vector(1.0, 1.0, 0.0))
        result = tick(default_environment, proj)
        assert result.velocity == vector(0.99, 0.9, 0.0)

    def test_kinds_are_preserved(self, default_environment, default_projectile):
        """Position stays a point and velocity a vector."""
        result = tick(default_environment, default_projectile)
        assert result.position.is_point()
        assert result.velocity.is_vector()

    def test_tick_does_not_mutate(self, default_environment, default_projectile):
        """The input projectile is left untouched."""
        before = default_projectile.position.clone()
        tick(default_environment, default_projectile)
        assert default_projectile.position == before


# =============================================================================
# Simulate
# =============================================================================

class TestSimulate:
    """Tests for the tick loop."""

    def test_runs_until_ground(self, default_environment, default_projectile):
        """The last position is at or below y=0, the one before above it."""
        states = list(simulate(default_environment, default_projectile))
        assert len(states) > 0
        assert states[-1].position.y <= 0.0
        if len(states) > 1:
            assert states[-2].position.y > 0.0

    def test_grounded_projectile_does_not_move(self, default_environment):
        """A projectile starting at y=0 never ticks."""
        proj = Projectile(point(0.0, 0.0, 0.0), vector(1.0, 1.0, 0.0))
        assert list(simulate(default_environment, proj)) == []

    def test_max_ticks_caps_the_run(self, default_projectile):
        """Without gravity the projectile never lands; max_ticks stops it."""
        env = Environment(gravity=vector(0.0, 0.0, 0.0), wind=vector(0.0, 0.0, 0.0))
        states = list(simulate(env, default_projectile, max_ticks=5))
        assert len(states) == 5
        assert states[-1].position.y > 0.0


# =============================================================================
# Scenario and Run
# =============================================================================

class TestBuildScenario:
    """Tests for turning a config into tuples."""

    def test_default_scenario(self, quiet_config):
        """Defaults launch from (0, 1, 0) at 45 degrees with unit speed."""
        proj, env = build_scenario(quiet_config)
        assert proj.position == point(0.0, 1.0, 0.0)
        assert float_cmp(proj.velocity.x, proj.velocity.y)
        assert abs(proj.velocity.magnitude().item() - 1.0) < 1e-12
        assert env.gravity == vector(0.0, -0.1, 0.0)
        assert env.wind == vector(-0.01, 0.0, 0.0)

    def test_launch_speed_scales_velocity(self, quiet_config):
        """launch_speed is the length of the initial velocity."""
        proj, _ = build_scenario(quiet_config.update(launch_speed=3.0))
        assert abs(proj.velocity.magnitude().item() - 3.0) < 1e-12


class TestTrajectory:
    """Tests for the recorded trajectory."""

    def test_empty_trajectory_raises(self):
        """A trajectory always holds at least the start position."""
        with pytest.raises(ValueError, match="start position"):
            Trajectory(positions=[])

    def test_start_only_trajectory(self):
        """A trajectory holding only the start has zero ticks."""
        trajectory = Trajectory(positions=[point(0.0, 0.0, 0.0)])
        assert trajectory.ticks == 0
        assert trajectory.final_position == point(0.0, 0.0, 0.0)
        assert trajectory.as_tensor().shape == (1, 4)


class TestFormatFloat:
    """Tests for the printed coordinate format."""

    @pytest.mark.parametrize("value, expected", [
        (1.0, "1"),
        (0.5, "0.5"),
        (-2.0, "-2"),
        (1e-7, "0.0000001"),
        (0.1 + 0.2, "0.30000000000000004"),
    ])
    def test_shortest_positional_form(self, value, expected):
        assert format_float(value) == expected

    def test_accepts_tensors(self):
        assert format_float(torch.tensor(3.0, dtype=torch.float64)) == "3"


class TestRun:
    """Tests for the reporting driver."""

    def test_run_lands(self, quiet_config):
        """The default scenario lands after a finite number of ticks."""
        trajectory = run(quiet_config)
        assert isinstance(trajectory, Trajectory)
        assert trajectory.landed
        assert trajectory.ticks == len(trajectory.positions) - 1
        assert trajectory.final_position.y <= 0.0

    def test_trajectory_tensor(self, quiet_config):
        """Positions stack into a (ticks + 1, 4) tensor of points."""
        trajectory = run(quiet_config)
        data = trajectory.as_tensor()
        assert data.shape == (trajectory.ticks + 1, 4)
        assert torch.all(data[:, 3] == 1.0)

    def test_prints_each_tick(self, capsys, quiet_config):
        """Verbose runs print one line per tick plus the tick count."""
        trajectory = run(quiet_config.update(verbose=True))
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == trajectory.ticks + 1
        assert lines[0].startswith("Projectile position: ")
        assert lines[0].endswith(" after 1 ticks")
        assert lines[-1] == f"Number of ticks: {trajectory.ticks}"

    def test_whole_coordinates_print_without_fraction(self, capsys, quiet_config):
        """Whole-number coordinates print as integers ("1", not "1.0")."""
        config = quiet_config.update(
            verbose=True,
            start_position=[0.0, 1.0, 0.0],
            launch_direction=[1.0, 0.0, 0.0],
            gravity=[0.0, -1.0, 0.0],
            wind=[0.0, 0.0, 0.0],
        )
        run(config)
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "Projectile position: 1 - 1 after 1 ticks"
        assert lines[1] == "Projectile position: 2 - 0 after 2 ticks"
        assert lines[-1] == "Number of ticks: 2"

    def test_quiet_run_prints_nothing(self, capsys, quiet_config):
        run(quiet_config)
        assert capsys.readouterr().out == ""

    def test_sleeps_between_ticks(self, monkeypatch, quiet_config):
        """tick_delay is slept after every tick."""
        delays = []
        monkeypatch.setattr(
            "raytracer_challenge.simulation.projectile.time.sleep", delays.append
        )
        trajectory = run(quiet_config.update(tick_delay=0.25))
        assert delays == [0.25] * trajectory.ticks

    def test_max_ticks_marks_not_landed(self, quiet_config):
        """A run cut short by max_ticks has not landed."""
        config = quiet_config.update(gravity=[0.0, 0.0, 0.0], max_ticks=3)
        trajectory = run(config)
        assert trajectory.ticks == 3
        assert not trajectory.landed

    def test_invalid_config_raises(self, quiet_config):
        with pytest.raises(ValueError, match="tick_delay"):
            run(quiet_config.update(tick_delay=-1.0))


class TestSweep:
    """Tests for running several configurations."""

    def test_speed_sweep_configs(self, quiet_config):
        """Configs differ only in launch speed."""
        configs = speed_sweep_configs([0.5, 2.0], base=quiet_config)
        assert [c.launch_speed for c in configs] == [0.5, 2.0]
        assert all(c.gravity == quiet_config.gravity for c in configs)

    def test_sweep_returns_one_trajectory_per_config(self, capsys):
        """Sweeps are quiet and keep order."""
        configs = speed_sweep_configs([0.5, 1.0, 2.0], base=SimulationConfig(tick_delay=0.3))
        trajectories = sweep(configs, show_progress=False)
        assert len(trajectories) == 3
        assert all(t.landed for t in trajectories)
        assert "Projectile position" not in capsys.readouterr().out

    def test_faster_launch_flies_longer(self, quiet_config):
        """A faster launch stays in the air for at least as many ticks."""
        slow, fast = sweep(speed_sweep_configs([0.5, 2.0], base=quiet_config), show_progress=False)
        assert fast.ticks >= slow.ticks
