"""Trajectory constraints for path velocity and acceleration profiles.

A trajectory generator walks a path and, at every sample point, asks each
active constraint for a velocity ceiling and an acceleration window. The
results of all constraints are intersected and the profile is shrunk until
every constraint is satisfied everywhere.

This module provides the constraint interface and the differential drive
voltage constraint, which limits chassis acceleration so that neither drive
wheel is asked for more than a fixed maximum voltage.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Iterable, NamedTuple, Optional, Tuple

import numpy as np

from .geometry import Pose2d
from .kinematics import ChassisSpeeds


class MinMax(NamedTuple):
    """Acceleration window at a path point (m/s²).

    The constraint does not enforce min_acceleration <= max_acceleration;
    a non-physical drivetrain configuration may produce an inverted window.
    """

    min_acceleration: float = -math.inf
    max_acceleration: float = math.inf


class TrajectoryConstraint(ABC):
    """Interface shared by all trajectory constraints."""

    @abstractmethod
    def max_velocity(self, pose: Pose2d, curvature: float, velocity: float) -> float:
        """Maximum chassis velocity allowed at the given path point (m/s).

        Args:
            pose: Pose at the path point
            curvature: Signed path curvature (rad/m), positive turns left
            velocity: Candidate forward chassis velocity (m/s)
        """

    @abstractmethod
    def min_max_acceleration(self, pose: Pose2d, curvature: float, velocity: float) -> MinMax:
        """Minimum and maximum chassis acceleration allowed at the given path point.

        Args:
            pose: Pose at the path point
            curvature: Signed path curvature (rad/m), positive turns left
            velocity: Candidate forward chassis velocity (m/s)
        """


class DifferentialDriveVoltageConstraint(TrajectoryConstraint):
    """Keeps every wheel of a differential drive within a voltage budget.

    Ensures that the acceleration of any wheel of the robot while following
    the trajectory is never higher than what can be achieved with the given
    maximum voltage. Velocity is never limited by this constraint.

    The constraint holds references to its collaborators and never mutates
    them, so a single instance may be evaluated concurrently.

    Attributes:
        feedforward: Motor model providing max/min achievable acceleration
        kinematics: Drive geometry providing wheel speeds and track width
        max_voltage: Voltage available to the motors (volts)
    """

    def __init__(self, feedforward, kinematics, max_voltage: float):
        """Initialize the constraint.

        Args:
            feedforward: Object with max_achievable_acceleration(voltage, speed)
                and min_achievable_acceleration(voltage, speed).
            kinematics: Object with to_wheel_speeds(ChassisSpeeds) and a
                track_width attribute.
            max_voltage: Maximum voltage available to the motors while following
                the path. Should be somewhat less than the nominal battery
                voltage (12V) to account for voltage sag due to current draw.
                Not validated.

        Raises:
            ValueError: If feedforward or kinematics is None.
        """
        self.feedforward = _require_not_none(feedforward, "feedforward")
        self.kinematics = _require_not_none(kinematics, "kinematics")
        self.max_voltage = max_voltage

        logging.debug(
            f"DifferentialDriveVoltageConstraint created: {feedforward!r}, "
            f"{kinematics!r}, max_voltage={max_voltage}"
        )

    def max_velocity(self, pose: Pose2d, curvature: float, velocity: float) -> float:
        return math.inf

    def min_max_acceleration(self, pose: Pose2d, curvature: float, velocity: float) -> MinMax:
        """Acceleration window that keeps both wheels within max_voltage.

        Args:
            pose: Pose at the path point (unused)
            curvature: Signed path curvature (rad/m)
            velocity: Candidate forward chassis velocity (m/s)

        Returns:
            MinMax: Chassis acceleration bounds (m/s²)
        """
        wheel_speeds = self.kinematics.to_wheel_speeds(
            ChassisSpeeds(velocity, 0.0, velocity * curvature)
        )

        max_wheel_speed = max(wheel_speeds.left, wheel_speeds.right)
        min_wheel_speed = min(wheel_speeds.left, wheel_speeds.right)

        # Wheel limits from motor dynamics at the fastest and slowest wheel
        max_wheel_acceleration = self.feedforward.max_achievable_acceleration(
            self.max_voltage, max_wheel_speed
        )
        min_wheel_acceleration = self.feedforward.min_achievable_acceleration(
            self.max_voltage, min_wheel_speed
        )

        # Turning on radius R = 1/|k|, the outer wheel runs on R + T/2 and the
        # inner wheel on R - T/2, so A_chassis = A_outer / (1 + |k|T/2) and
        # A_chassis = A_inner / (1 - |k|T/2).
        # sgn(v) swaps the wheels when driving backward: moving forward the max
        # bound belongs to the outer wheel, moving backward to the inner one.
        # sgn(0) is 0, which skips the turning correction at a standstill.
        track_width = self.kinematics.track_width
        direction = float(np.sign(velocity))
        turn_term = track_width * abs(curvature) * direction / 2.0

        # IEEE division: a degenerate geometry yields inf/nan instead of raising
        with np.errstate(divide="ignore", invalid="ignore"):
            max_chassis_acceleration = float(np.float64(max_wheel_acceleration) / (1.0 + turn_term))
            min_chassis_acceleration = float(np.float64(min_wheel_acceleration) / (1.0 - turn_term))

        # Inner wheel runs backward when the center of rotation is inside the wheelbase
        turning_radius = math.inf if curvature == 0 else 1.0 / abs(curvature)
        if track_width / 2.0 > turning_radius:
            logging.debug(
                f"Center of rotation inside wheelbase: curvature={curvature}, "
                f"track_width={track_width}, velocity={velocity}"
            )
            if velocity > 0:
                min_chassis_acceleration = -min_chassis_acceleration
            else:
                max_chassis_acceleration = -max_chassis_acceleration

        return MinMax(min_chassis_acceleration, max_chassis_acceleration)

    def __repr__(self) -> str:
        return (
            f"DifferentialDriveVoltageConstraint(feedforward={self.feedforward!r}, "
            f"kinematics={self.kinematics!r}, max_voltage={self.max_voltage})"
        )


def apply_constraints(
    constraints: Iterable[TrajectoryConstraint],
    pose: Pose2d,
    curvature: float,
    velocity: float,
    max_velocity: float = math.inf,
    acceleration: Optional[MinMax] = None,
) -> Tuple[float, MinMax]:
    """Intersect the limits of several constraints at one path point.

    Args:
        constraints: Constraints to evaluate, in order
        pose: Pose at the path point
        curvature: Signed path curvature (rad/m)
        velocity: Candidate forward chassis velocity (m/s)
        max_velocity: Global velocity ceiling to start from (m/s)
        acceleration: Global acceleration window to start from.
            Default: unbounded

    Returns:
        Tuple of (velocity ceiling, acceleration window). The window may be
        inverted when the constraints are mutually unsatisfiable.
    """
    if acceleration is None:
        acceleration = MinMax()

    min_acceleration, max_acceleration = acceleration
    for constraint in constraints:
        max_velocity = min(max_velocity, constraint.max_velocity(pose, curvature, velocity))
        bounds = constraint.min_max_acceleration(pose, curvature, velocity)
        min_acceleration = max(min_acceleration, bounds.min_acceleration)
        max_acceleration = min(max_acceleration, bounds.max_acceleration)

    return max_velocity, MinMax(min_acceleration, max_acceleration)


def _require_not_none(obj, param_name: str):
    if obj is None:
        raise ValueError(
            f"Parameter {param_name} in DifferentialDriveVoltageConstraint was None "
            f"when it should not have been. Make sure all objects passed to the "
            f"constructor were properly initialized."
        )
    return obj
