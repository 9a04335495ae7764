# Licensed under the PolyForm Noncommercial License 1.0.0
"""
Command-line interface for the staging calculator.
"""

import argparse
import logging
import sys

from .missions import format_burn_time, max_payloads, reachable_destinations, stage_table
from .vehicles import VEHICLES


def setup_logging(verbose: bool = False):
    """Send log records to stderr, at DEBUG level when verbose."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def print_max_payloads(rocket):
    for capacity in max_payloads(rocket):
        print(f"Max to {capacity.destination.payload_name}: {capacity.payload_mass:.0f}")


def print_stage_table(rocket):
    print(f"{'stage':5}  {'delta-v':>10}  {'wet mass':>10}  {'dry mass':>10}  "
          f"{'Start TWR':>10}  {'End TWR':>10}  {'burn time':>10}")
    for row in stage_table(rocket):
        print(f"{row.index:5}: {row.delta_v:6.0f} m/s  {row.wet_mass:10.0f}  {row.dry_mass:10.0f}  "
              f"{row.twr:>10.2f}  {row.max_g_force:>10.2f}  {format_burn_time(row.burn_time):>10}")
    print("-" * 78)
    print(f"Total: {rocket.delta_v():6.0f} m/s")
    print(f"Max G: {rocket.max_g_force():10.2f}")


def print_where_rocket_can_go(rocket):
    report = reachable_destinations(rocket.delta_v())
    if not report.reaches_orbit:
        print("This rocket will not reach orbit")

    for entry in report.destinations:
        if entry.comfortable:
            print(f"This rocket can go to {entry.destination.name} with {entry.excess_delta_v:.0f} m/s excess dV")
        else:
            print(f"This rocket can go to {entry.destination.name} without safety margins")

    if report.assumes_no_gravity_assists:
        print("Note: Assumes no gravity assists")


def main(argv=None):
    """Print the performance report for one of the built-in vehicles."""
    parser = argparse.ArgumentParser(
        prog="rocketStaging",
        description="Delta-v, TWR and payload capacity of multi-stage rockets",
    )
    parser.add_argument("vehicle", nargs="?", default="atlas-agena", choices=sorted(VEHICLES),
                        help="Vehicle to analyse (default: atlas-agena)")
    parser.add_argument("--payload-mass", type=float, default=0.0,
                        help="Payload above the top stage in kg (default: 0)")
    parser.add_argument("--plot", metavar="PATH", help="Save a flight sequence plot to PATH")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    rocket = VEHICLES[args.vehicle](payload_mass=args.payload_mass)

    print(f"Rocket Staging Calculator: {args.vehicle}")
    print("=" * (len(args.vehicle) + 27))

    print_max_payloads(rocket)
    print()
    print_stage_table(rocket)
    print()
    print()
    print_where_rocket_can_go(rocket)

    if args.plot:
        import matplotlib
        matplotlib.use("Agg")
        from .plotting import plot_flight_sequence

        plot_flight_sequence(rocket, show=False, save_path=args.plot)
        print(f"\nPlot saved to {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
