"""
Headless Star Field Runner
==========================

Runs the physics core without a window and prints periodic reports.
Useful for checking parameter sets (collision rates, G ramps) quickly.

Usage:
    python -m tools.headless                       # Default config, 1000 ticks
    python -m tools.headless --ticks 5000 --seed 3
    python -m tools.headless --count 800 --report-every 50
"""

import time
import argparse

from config import starfield as config
from starfield import SimulationSettings, StarSimulation, populate


def build_settings(args) -> SimulationSettings:
    """Settings from config.starfield with command-line overrides."""
    overrides = {}
    if args.count is not None:
        overrides["star_count"] = args.count
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.subdivisions is not None:
        overrides["grid_subdivisions"] = args.subdivisions
    if args.ramp is not None:
        overrides["ramp_rate_per_second"] = args.ramp
    return SimulationSettings.from_config(config.STARS, **overrides)


def format_report(sim: StarSimulation) -> str:
    return (
        f"[Headless] tick {sim.tick:>6}  t={sim.elapsed:8.2f}s  "
        f"live={sim.live_count:>5}/{sim.num_bodies:<5}  "
        f"mass={sim.total_mass():10.2f}  KE={sim.kinetic_energy():12.3f}  "
        f"G={sim.gravitational_constant:+8.3f}  collisions={sim.total_collisions}"
    )


def run(sim: StarSimulation, ticks: int, dt: float, report_every: int):
    """Step ``ticks`` times, printing a report every ``report_every`` ticks."""
    start = time.time()
    print(format_report(sim))

    for _ in range(ticks):
        sim.step(dt)
        if report_every > 0 and sim.tick % report_every == 0:
            print(format_report(sim))

    elapsed = time.time() - start
    rate = ticks / elapsed if elapsed > 0 else float("inf")
    print(f"[Headless] Done: {ticks} ticks in {elapsed:.2f}s ({rate:.0f} ticks/s)")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run the star field simulation without a window",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--ticks", type=int, default=1000, help="Number of physics ticks (default: 1000)")
    parser.add_argument("--dt", type=float, default=config.PHYSICS["fixed_dt"],
                        help="Seconds per tick")
    parser.add_argument("--count", type=int, help="Override star count")
    parser.add_argument("--seed", type=int, help="Spawner seed for reproducible runs")
    parser.add_argument("--subdivisions", type=int, help="Override grid subdivisions")
    parser.add_argument("--ramp", type=float, help="Override G ramp per second")
    parser.add_argument("--report-every", type=int, default=100,
                        help="Ticks between report lines (0 = only start/end)")
    args = parser.parse_args(argv)

    settings = build_settings(args)
    sim = StarSimulation(settings)
    populate(sim)
    run(sim, args.ticks, args.dt, args.report_every)

    if args.report_every <= 0 or sim.tick % args.report_every != 0:
        print(format_report(sim))
    return sim


if __name__ == "__main__":
    main()
