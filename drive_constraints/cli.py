#!/usr/bin/env python3
"""
Command-line evaluation of the differential drive voltage constraint.

This module builds a feedforward, kinematics and voltage constraint from
command-line parameters (defaulting to config.py), sweeps the acceleration
bounds over a curvature range for several velocities, prints a summary and
optionally saves the grid to CSV and a plot to disk.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import (
    FEEDFORWARD_KA,
    FEEDFORWARD_KS,
    FEEDFORWARD_KV,
    MAX_VOLTAGE,
    SWEEP_MAX_CURVATURE,
    SWEEP_NUM_CURVATURES,
    SWEEP_VELOCITIES,
    TERM_BLUE,
    TERM_ORANGE,
    TERM_RESET,
    TRACK_WIDTH,
)
from .constraint import DifferentialDriveVoltageConstraint
from .feedforward import SimpleMotorFeedforward
from .kinematics import DifferentialDriveKinematics
from .sweep import BoundsGrid, curvature_range, save_bounds_csv, sweep_acceleration_bounds


class CustomFormatter(logging.Formatter):
    """Custom logging formatter that removes timestamps from INFO messages.

    This formatter provides clean console output by showing INFO messages without
    timestamps while preserving full context for WARNING, ERROR, and DEBUG messages.
    """

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return record.getMessage()
        return f"{self.formatTime(record, self.datefmt)} - {record.levelname} - {record.getMessage()}"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbose: If True, show all levels with timestamps. If False, show INFO
                 without timestamps and WARNING/ERROR with timestamps.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(CustomFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
        logger = logging.getLogger()
        logger.setLevel(logging.INFO)
        logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with defaults taken from config.py."""
    parser = argparse.ArgumentParser(
        description="Sweep voltage-limited acceleration bounds of a differential drive",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sweep with the configured drivetrain
  python -m drive_constraints

  # Custom characterization, save CSV and plot
  python -m drive_constraints --ks 0.3 --kv 2.1 --ka 0.25 --csv results/bounds.csv --plot results/bounds.png
""",
    )
    parser.add_argument("--track-width", type=float, default=TRACK_WIDTH,
                        help=f"Track width in meters (default: {TRACK_WIDTH})")
    parser.add_argument("--max-voltage", type=float, default=MAX_VOLTAGE,
                        help=f"Maximum motor voltage in volts (default: {MAX_VOLTAGE})")
    parser.add_argument("--ks", type=float, default=FEEDFORWARD_KS,
                        help=f"Feedforward static gain in volts (default: {FEEDFORWARD_KS})")
    parser.add_argument("--kv", type=float, default=FEEDFORWARD_KV,
                        help=f"Feedforward velocity gain in V/(m/s) (default: {FEEDFORWARD_KV})")
    parser.add_argument("--ka", type=float, default=FEEDFORWARD_KA,
                        help=f"Feedforward acceleration gain in V/(m/s²) (default: {FEEDFORWARD_KA})")
    parser.add_argument("--velocities", type=float, nargs="+", default=SWEEP_VELOCITIES,
                        help="Forward velocities to evaluate in m/s")
    parser.add_argument("--max-curvature", type=float, default=SWEEP_MAX_CURVATURE,
                        help=f"Largest curvature magnitude in rad/m (default: {SWEEP_MAX_CURVATURE})")
    parser.add_argument("--num-curvatures", type=int, default=SWEEP_NUM_CURVATURES,
                        help=f"Number of curvature samples (default: {SWEEP_NUM_CURVATURES})")
    parser.add_argument("--csv", type=str, default=None,
                        help="Save the evaluated grid to this CSV file")
    parser.add_argument("--plot", type=str, default=None,
                        help="Save a bounds-vs-curvature plot to this image file")
    parser.add_argument("--strict", action="store_true",
                        help="Exit with status 1 if any acceleration window is inverted")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose logging with timestamps")
    return parser


def log_bounds_table(grid: BoundsGrid, max_rows: int = 5) -> None:
    """Log a compact table of the bounds at a few curvatures per velocity."""
    step = max(1, len(grid.curvatures) // max_rows)
    columns = list(range(0, len(grid.curvatures), step))

    logging.info(f"{'v (m/s)':>8s} | {'k (rad/m)':>9s} | {'min (m/s²)':>10s} | {'max (m/s²)':>10s}")
    logging.info("-" * 47)
    for i, velocity in enumerate(grid.velocities):
        for j in columns:
            logging.info(
                f"{velocity:8.2f} | {grid.curvatures[j]:9.3f} | "
                f"{grid.min_acceleration[i, j]:10.3f} | {grid.max_acceleration[i, j]:10.3f}"
            )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the bound sweep.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        feedforward = SimpleMotorFeedforward(args.ks, args.kv, args.ka)
        curvatures = curvature_range(args.max_curvature, args.num_curvatures)
    except ValueError as e:
        logging.error(f"Invalid parameters: {e}")
        return 2

    kinematics = DifferentialDriveKinematics(args.track_width)
    constraint = DifferentialDriveVoltageConstraint(feedforward, kinematics, args.max_voltage)

    logging.info(f"{TERM_BLUE}Evaluating {constraint!r}{TERM_RESET}")
    grid = sweep_acceleration_bounds(
        constraint, curvatures, args.velocities, track_width=args.track_width
    )

    log_bounds_table(grid)
    summary = grid.summary()
    color = TERM_BLUE if summary.is_valid else TERM_ORANGE
    logging.info(f"{color}\033[1m→ {summary}{TERM_RESET}")

    if args.csv:
        save_bounds_csv(grid, args.csv)

    if args.plot:
        # pyplot is only imported when plotting
        from .plot_bounds import plot_bounds_vs_curvature

        plot_bounds_vs_curvature(grid, args.plot)

    if args.strict and not summary.is_valid:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
