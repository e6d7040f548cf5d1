"""
Differential drive kinematic model.

This module provides the forward and inverse kinematics for a differential
drive robot, converting chassis velocities into individual wheel velocities
and back, plus the plain data containers exchanged with the drive motors.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChassisSpeeds:
    """Robot velocity in the chassis frame.

    Attributes:
        vx: Forward velocity along the heading (m/s)
        vy: Lateral velocity (m/s), always 0 for a differential drive
        omega: Angular velocity (rad/s), positive is counter-clockwise
    """

    vx: float = 0.0
    vy: float = 0.0
    omega: float = 0.0


@dataclass(frozen=True)
class DifferentialDriveWheelSpeeds:
    """Left and right wheel ground speeds (m/s)."""

    left: float = 0.0
    right: float = 0.0

    def desaturate(self, max_speed: float) -> "DifferentialDriveWheelSpeeds":
        """Scale both wheel speeds so neither exceeds max_speed in magnitude.

        The ratio between the wheels is preserved, so the commanded curvature
        is unchanged. Speeds already within the limit are returned as-is.

        Args:
            max_speed: Maximum attainable wheel speed (m/s)

        Returns:
            DifferentialDriveWheelSpeeds: Proportionally scaled wheel speeds
        """
        real_max = max(abs(self.left), abs(self.right))
        if real_max <= max_speed:
            return self
        scale = max_speed / real_max
        return DifferentialDriveWheelSpeeds(self.left * scale, self.right * scale)


class DifferentialDriveKinematics:
    """Converts between chassis speeds and differential drive wheel speeds.

    Attributes:
        track_width: Distance between left and right wheel contact points (m)
    """

    def __init__(self, track_width: float):
        self.track_width = track_width

    def to_wheel_speeds(self, chassis_speeds: ChassisSpeeds) -> DifferentialDriveWheelSpeeds:
        """
        Compute wheel velocities from desired linear and angular velocities.

        For a differential drive robot, the relationship between the robot's
        linear velocity (v), angular velocity (omega), and the individual
        wheel velocities is:
            v_left = v - (T/2) * omega
            v_right = v + (T/2) * omega

        where T is the track width. The lateral component is ignored.

        Args:
            chassis_speeds: Desired chassis velocity

        Returns:
            DifferentialDriveWheelSpeeds: Unclamped wheel velocities in m/s

        Example:
            >>> kinematics = DifferentialDriveKinematics(0.5)
            >>> kinematics.to_wheel_speeds(ChassisSpeeds(1.0, 0.0, 0.5))
            DifferentialDriveWheelSpeeds(left=0.875, right=1.125)
        """
        half_track = self.track_width / 2.0
        return DifferentialDriveWheelSpeeds(
            left=chassis_speeds.vx - half_track * chassis_speeds.omega,
            right=chassis_speeds.vx + half_track * chassis_speeds.omega,
        )

    def to_chassis_speeds(self, wheel_speeds: DifferentialDriveWheelSpeeds) -> ChassisSpeeds:
        """Compute the chassis velocity produced by the given wheel speeds.

        Args:
            wheel_speeds: Left and right wheel velocities (m/s)

        Returns:
            ChassisSpeeds: Forward and angular velocity, with zero lateral velocity
        """
        return ChassisSpeeds(
            vx=(wheel_speeds.left + wheel_speeds.right) / 2.0,
            vy=0.0,
            omega=(wheel_speeds.right - wheel_speeds.left) / self.track_width,
        )

    def __repr__(self) -> str:
        return f"DifferentialDriveKinematics(track_width={self.track_width})"


@dataclass
class MecanumDriveMotorVoltages:
    """Motor voltages for a mecanum drivetrain (volts)."""

    front_left: float = 0.0
    front_right: float = 0.0
    rear_left: float = 0.0
    rear_right: float = 0.0

    def __str__(self) -> str:
        return (
            f"MecanumDriveMotorVoltages(Front Left: {self.front_left:.2f} V, "
            f"Front Right: {self.front_right:.2f} V, "
            f"Rear Left: {self.rear_left:.2f} V, "
            f"Rear Right: {self.rear_right:.2f} V)"
        )
