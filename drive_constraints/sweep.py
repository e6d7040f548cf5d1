"""Acceleration bound sweep over curvature and velocity.

This module evaluates a trajectory constraint across a grid of path
curvatures and forward velocities. It handles:
- Grid evaluation into numpy arrays
- Detection of inverted (min > max) acceleration windows
- Detection of centers of rotation inside the wheelbase
- CSV export of the evaluated grid

The sweep is useful for checking a drivetrain characterization before handing
the constraint to a trajectory generator.
"""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
import numpy.typing as npt

from .constraint import TrajectoryConstraint
from .geometry import Pose2d


@dataclass
class SweepSummary:
    """Aggregated results of a bound sweep."""

    num_points: int
    num_inverted: int
    num_inside_wheelbase: int
    lowest_min_acceleration: float
    highest_max_acceleration: float

    @property
    def is_valid(self) -> bool:
        """A sweep is valid when no acceleration window is inverted."""
        return self.num_inverted == 0

    def __str__(self) -> str:
        """Human-readable representation."""
        status = "VALID" if self.is_valid else "INVALID"
        return (
            f"Points: {self.num_points:5d} | "
            f"Inverted: {self.num_inverted:4d} | "
            f"Inside wheelbase: {self.num_inside_wheelbase:4d} | "
            f"Range: [{self.lowest_min_acceleration:7.3f}, "
            f"{self.highest_max_acceleration:7.3f}] m/s² | "
            f"{status}"
        )


@dataclass
class BoundsGrid:
    """Acceleration bounds evaluated on a velocity × curvature grid.

    Attributes:
        curvatures: Curvature samples (rad/m), shape (K,)
        velocities: Velocity samples (m/s), shape (V,)
        min_acceleration: Minimum chassis acceleration (m/s²), shape (V, K)
        max_acceleration: Maximum chassis acceleration (m/s²), shape (V, K)
        track_width: Track width used to flag inside-wheelbase points (m),
            or None when unknown
    """

    curvatures: npt.NDArray[np.float64]
    velocities: npt.NDArray[np.float64]
    min_acceleration: npt.NDArray[np.float64]
    max_acceleration: npt.NDArray[np.float64]
    track_width: Optional[float] = None

    def inverted_mask(self) -> npt.NDArray[np.bool_]:
        """Points where the minimum bound exceeds the maximum bound."""
        return self.min_acceleration > self.max_acceleration

    def inside_wheelbase_mask(self) -> npt.NDArray[np.bool_]:
        """Points whose center of rotation falls between the wheels."""
        shape = (len(self.velocities), len(self.curvatures))
        if self.track_width is None:
            return np.zeros(shape, dtype=bool)
        inside = self.track_width / 2.0 * np.abs(self.curvatures) > 1.0
        return np.broadcast_to(inside, shape)

    def summary(self) -> SweepSummary:
        """Compute summary statistics for the grid."""
        finite_min = self.min_acceleration[np.isfinite(self.min_acceleration)]
        finite_max = self.max_acceleration[np.isfinite(self.max_acceleration)]

        return SweepSummary(
            num_points=int(self.min_acceleration.size),
            num_inverted=int(np.count_nonzero(self.inverted_mask())),
            num_inside_wheelbase=int(np.count_nonzero(self.inside_wheelbase_mask())),
            lowest_min_acceleration=float(finite_min.min()) if finite_min.size else float("nan"),
            highest_max_acceleration=float(finite_max.max()) if finite_max.size else float("nan"),
        )


def sweep_acceleration_bounds(
    constraint: TrajectoryConstraint,
    curvatures: Sequence[float],
    velocities: Sequence[float],
    pose: Optional[Pose2d] = None,
    track_width: Optional[float] = None,
) -> BoundsGrid:
    """Evaluate a constraint's acceleration window on every grid point.

    Args:
        constraint: Constraint to evaluate
        curvatures: Curvature samples (rad/m)
        velocities: Forward velocity samples (m/s)
        pose: Pose passed to the constraint. Default: origin
        track_width: Track width used to flag inside-wheelbase points (m)

    Returns:
        BoundsGrid with one row per velocity and one column per curvature
    """
    if pose is None:
        pose = Pose2d()

    curvature_array = np.asarray(curvatures, dtype=np.float64)
    velocity_array = np.asarray(velocities, dtype=np.float64)

    min_acc = np.empty((len(velocity_array), len(curvature_array)))
    max_acc = np.empty_like(min_acc)

    for i, velocity in enumerate(velocity_array):
        for j, curvature in enumerate(curvature_array):
            bounds = constraint.min_max_acceleration(pose, float(curvature), float(velocity))
            min_acc[i, j] = bounds.min_acceleration
            max_acc[i, j] = bounds.max_acceleration

    grid = BoundsGrid(curvature_array, velocity_array, min_acc, max_acc, track_width)

    num_inverted = int(np.count_nonzero(grid.inverted_mask()))
    if num_inverted:
        logging.warning(
            f"{num_inverted} of {min_acc.size} grid points have min acceleration above max "
            f"acceleration; check curvature and track width for non-physical combinations"
        )
    logging.debug(f"Swept {min_acc.size} points with {constraint!r}")

    return grid


def curvature_range(max_curvature: float, num_curvatures: int) -> npt.NDArray[np.float64]:
    """Evenly spaced curvatures in [-max_curvature, max_curvature].

    Raises:
        ValueError: If max_curvature is negative or num_curvatures < 1.
    """
    if max_curvature < 0:
        raise ValueError(f"max_curvature must be non-negative, got {max_curvature}")
    if num_curvatures < 1:
        raise ValueError(f"num_curvatures must be at least 1, got {num_curvatures}")
    return np.linspace(-max_curvature, max_curvature, num_curvatures)


def save_bounds_csv(grid: BoundsGrid, csv_path: Union[str, Path]) -> Path:
    """Save an evaluated grid to a CSV file, one row per grid point.

    Args:
        grid: Evaluated bounds
        csv_path: Output file path. Parent directories are created.

    Returns:
        Path of the written file
    """
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)

    inverted = grid.inverted_mask()
    with open(csv_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(
            ["velocity", "curvature", "min_acceleration", "max_acceleration", "inverted"]
        )
        for i, velocity in enumerate(grid.velocities):
            for j, curvature in enumerate(grid.curvatures):
                writer.writerow(
                    [
                        f"{velocity:.6f}",
                        f"{curvature:.6f}",
                        f"{grid.min_acceleration[i, j]:.6f}",
                        f"{grid.max_acceleration[i, j]:.6f}",
                        bool(inverted[i, j]),
                    ]
                )

    logging.info(f"✓ Saved bounds to {csv_path}")
    return csv_path
