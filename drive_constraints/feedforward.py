"""Motor feedforward model for a permanent-magnet DC drive motor.

This module provides the voltage/velocity/acceleration relation used both to
compute open-loop voltage commands and, inverted, to find the accelerations a
wheel can achieve within a voltage budget.
"""

import logging
import math
from typing import Dict

import numpy as np


class SimpleMotorFeedforward:
    """Static friction, velocity and acceleration feedforward.

    Motor model:
        V = kS * sgn(v) + kV * v + kA * a

    Attributes:
        ks: Static gain (volts)
        kv: Velocity gain (volts per m/s)
        ka: Acceleration gain (volts per m/s²)
    """

    def __init__(self, ks: float, kv: float, ka: float):
        """Initialize the feedforward.

        Args:
            ks: Static gain in volts.
            kv: Velocity gain in volts per m/s. Must be >= 0.
            ka: Acceleration gain in volts per m/s². Must be > 0, since the
                achievable acceleration is obtained by dividing by it.

        Raises:
            ValueError: If kv is negative or ka is not positive.
        """
        if kv < 0.0:
            raise ValueError(f"kV must be a non-negative number, got {kv}")
        if ka <= 0.0:
            raise ValueError(f"kA must be a positive number, got {ka}")

        self.ks = ks
        self.kv = kv
        self.ka = ka

        logging.debug(f"SimpleMotorFeedforward created: kS={ks}, kV={kv}, kA={ka}")

    def calculate(self, velocity: float, acceleration: float = 0.0) -> float:
        """Compute the voltage required for the given velocity and acceleration.

        Args:
            velocity: Wheel velocity (m/s)
            acceleration: Wheel acceleration (m/s²). Default: 0.0

        Returns:
            Required motor voltage (volts)
        """
        return float(self.ks * np.sign(velocity) + self.kv * velocity + self.ka * acceleration)

    def max_achievable_velocity(self, max_voltage: float, acceleration: float) -> float:
        """Maximum velocity reachable while also accelerating at the given rate.

        Assumes the velocity is positive, so static friction opposes it.
        """
        if self.kv == 0.0:
            return math.inf
        return (max_voltage - self.ks - acceleration * self.ka) / self.kv

    def min_achievable_velocity(self, max_voltage: float, acceleration: float) -> float:
        """Most negative velocity reachable while also accelerating at the given rate."""
        if self.kv == 0.0:
            return -math.inf
        return (-max_voltage + self.ks - acceleration * self.ka) / self.kv

    def max_achievable_acceleration(self, max_voltage: float, velocity: float) -> float:
        """Maximum acceleration achievable at the given velocity.

        Args:
            max_voltage: Voltage budget available to the motor (volts)
            velocity: Current wheel velocity (m/s)

        Returns:
            Largest achievable acceleration (m/s²)
        """
        return float((max_voltage - self.ks * np.sign(velocity) - velocity * self.kv) / self.ka)

    def min_achievable_acceleration(self, max_voltage: float, velocity: float) -> float:
        """Minimum (most negative) acceleration achievable at the given velocity.

        Args:
            max_voltage: Voltage budget available to the motor (volts)
            velocity: Current wheel velocity (m/s)

        Returns:
            Smallest achievable acceleration (m/s²)
        """
        return self.max_achievable_acceleration(-max_voltage, velocity)

    def get_diagnostics(self, max_voltage: float, velocity: float) -> Dict[str, float]:
        """Get diagnostic information for logging and debugging.

        Args:
            max_voltage: Voltage budget (volts)
            velocity: Wheel velocity (m/s)

        Returns:
            Dictionary containing the gains and achievable acceleration range
        """
        return {
            "ks": self.ks,
            "kv": self.kv,
            "ka": self.ka,
            "max_voltage": max_voltage,
            "velocity": velocity,
            "max_acceleration": self.max_achievable_acceleration(max_voltage, velocity),
            "min_acceleration": self.min_achievable_acceleration(max_voltage, velocity),
        }

    def __repr__(self) -> str:
        return f"SimpleMotorFeedforward(ks={self.ks}, kv={self.kv}, ka={self.ka})"
