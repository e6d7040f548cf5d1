import csv
import logging
import math

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from drive_constraints.cli import main
from drive_constraints.constraint import DifferentialDriveVoltageConstraint, MinMax, TrajectoryConstraint
from drive_constraints.feedforward import SimpleMotorFeedforward
from drive_constraints.kinematics import DifferentialDriveKinematics
from drive_constraints.plot_bounds import plot_bounds_vs_curvature
from drive_constraints.sweep import (
    BoundsGrid,
    curvature_range,
    save_bounds_csv,
    sweep_acceleration_bounds,
)


class InvertedConstraint(TrajectoryConstraint):
    def max_velocity(self, pose, curvature, velocity):
        return math.inf

    def min_max_acceleration(self, pose, curvature, velocity):
        return MinMax(1.0, -1.0)


@pytest.fixture
def constraint():
    return DifferentialDriveVoltageConstraint(
        SimpleMotorFeedforward(0.2, 2.0, 0.25), DifferentialDriveKinematics(0.6), 10.0
    )


class TestSweep:
    def test_grid_shape_and_values(self, constraint):
        grid = sweep_acceleration_bounds(constraint, [-1.0, 0.0, 1.0], [0.0, 2.0], track_width=0.6)

        assert grid.min_acceleration.shape == (2, 3)
        assert grid.max_acceleration.shape == (2, 3)

        direct = constraint.min_max_acceleration(None, 1.0, 2.0)
        assert grid.min_acceleration[1, 2] == direct.min_acceleration
        assert grid.max_acceleration[1, 2] == direct.max_acceleration

    def test_physical_sweep_has_no_inverted_points(self, constraint):
        grid = sweep_acceleration_bounds(constraint, curvature_range(2.0, 9), [-1.0, 0.0, 1.0])

        summary = grid.summary()
        assert summary.num_points == 27
        assert summary.num_inverted == 0
        assert summary.num_inside_wheelbase == 0
        assert summary.is_valid

    def test_inside_wheelbase_points_are_counted(self, constraint):
        grid = sweep_acceleration_bounds(constraint, [-5.0, 0.0, 1.0, 5.0], [1.0, 2.0], track_width=0.6)

        assert grid.inside_wheelbase_mask().tolist() == [[True, False, False, True]] * 2
        assert grid.summary().num_inside_wheelbase == 4

    def test_inverted_points_are_logged(self, caplog):
        with caplog.at_level(logging.WARNING):
            grid = sweep_acceleration_bounds(InvertedConstraint(), [0.0, 1.0], [1.0])

        assert grid.summary().num_inverted == 2
        assert not grid.summary().is_valid
        assert "min acceleration above max" in caplog.text

    def test_summary_ignores_infinite_bounds(self):
        grid = BoundsGrid(
            curvatures=np.array([0.0, 1.0]),
            velocities=np.array([1.0]),
            min_acceleration=np.array([[-2.0, -math.inf]]),
            max_acceleration=np.array([[3.0, 1.0]]),
        )

        summary = grid.summary()
        assert summary.lowest_min_acceleration == -2.0
        assert summary.highest_max_acceleration == 3.0

    def test_curvature_range(self):
        curvatures = curvature_range(2.0, 5)

        assert curvatures.tolist() == [-2.0, -1.0, 0.0, 1.0, 2.0]

    @pytest.mark.parametrize("max_curvature,num", [(-1.0, 5), (1.0, 0)])
    def test_curvature_range_rejects_bad_input(self, max_curvature, num):
        with pytest.raises(ValueError):
            curvature_range(max_curvature, num)


class TestOutputs:
    def test_save_bounds_csv(self, constraint, tmp_path):
        grid = sweep_acceleration_bounds(constraint, [0.0, 0.5], [1.0, 2.0])

        path = save_bounds_csv(grid, tmp_path / "out" / "bounds.csv")

        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 4
        assert float(rows[0]["velocity"]) == 1.0
        assert float(rows[3]["curvature"]) == 0.5
        assert float(rows[3]["max_acceleration"]) == pytest.approx(grid.max_acceleration[1, 1], abs=1e-6)
        assert rows[0]["inverted"] == "False"

    def test_plot_bounds_vs_curvature(self, constraint, tmp_path):
        grid = sweep_acceleration_bounds(constraint, curvature_range(5.0, 11), [1.0, 2.0], track_width=0.6)

        fig = plot_bounds_vs_curvature(grid, tmp_path / "bounds.png")

        assert (tmp_path / "bounds.png").exists()
        assert len(fig.axes[0].lines) == 5
        matplotlib.pyplot.close(fig)


class TestCli:
    def test_main_writes_outputs(self, tmp_path):
        csv_path = tmp_path / "bounds.csv"
        plot_path = tmp_path / "bounds.png"

        status = main(
            [
                "--velocities", "1.0", "2.0",
                "--max-curvature", "1.0",
                "--num-curvatures", "5",
                "--csv", str(csv_path),
                "--plot", str(plot_path),
            ]
        )

        assert status == 0
        assert csv_path.exists()
        assert plot_path.exists()
        matplotlib.pyplot.close("all")

    def test_main_strict_fails_on_inverted_bounds(self):
        # radius 0.25 m at 2.0 m track width gives inverted windows
        status = main(["--track-width", "2.0", "--max-curvature", "4.0", "--num-curvatures", "9", "--strict"])

        assert status == 1

    def test_main_rejects_invalid_feedforward(self):
        assert main(["--ka", "0"]) == 2
