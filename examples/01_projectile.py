"""
Example 01: Projectile

Demonstrates:
1. Building points and vectors for a projectile and its environment.
2. Ticking the projectile until it hits the ground, printing each position.
3. Sweeping several launch speeds and plotting the trajectories.

Usage:
    $ python examples/01_projectile.py
    $ python examples/01_projectile.py --speed 2.5 --delay 0 --plot out.png
    $ python examples/01_projectile.py --sweep 0.5 1 1.5 2 --plot sweep.png
"""

import argparse
import logging

from raytracer_challenge.core.constants import CLI_TICK_DELAY
from raytracer_challenge.simulation import run, sweep, speed_sweep_configs
from raytracer_challenge.utils.config import SimulationConfig, load_config
from raytracer_challenge.utils.visualization import plot_trajectory


def parse_args():
    parser = argparse.ArgumentParser(description="Fire a projectile and watch it fall.")
    parser.add_argument("--config", type=str, default=None,
                        help="JSON file with SimulationConfig fields")
    parser.add_argument("--speed", type=float, default=None, help="launch speed")
    parser.add_argument("--delay", type=float, default=None,
                        help=f"seconds between ticks (default {CLI_TICK_DELAY}, or the config file's)")
    parser.add_argument("--max-ticks", type=int, default=None)
    parser.add_argument("--sweep", type=float, nargs="+", metavar="SPEED",
                        help="run one quiet simulation per launch speed")
    parser.add_argument("--plot", type=str, default=None, help="save a trajectory plot")
    parser.add_argument("--quiet", action="store_true", help="no per-tick output")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config) if args.config else SimulationConfig(tick_delay=CLI_TICK_DELAY)
    overrides = {'verbose': not args.quiet}
    if args.delay is not None:
        overrides['tick_delay'] = args.delay
    if args.speed is not None:
        overrides['launch_speed'] = args.speed
    if args.max_ticks is not None:
        overrides['max_ticks'] = args.max_ticks
    config = config.update(**overrides)

    if args.sweep:
        trajectories = sweep(speed_sweep_configs(args.sweep, base=config))
        for traj in trajectories:
            print(
                f"speed={traj.config.launch_speed:g}: {traj.ticks} ticks, "
                f"x={traj.final_position.x.item():.4f}"
            )
    else:
        trajectories = [run(config)]

    if args.plot:
        plot_trajectory(trajectories, title="Projectile", save_path=args.plot)
        print(f"Saved plot: {args.plot}")


if __name__ == "__main__":
    main()
