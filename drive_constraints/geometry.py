"""Planar pose representation."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Pose2d:
    """Robot pose on the field (meters, radians)."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0

    def translation_distance(self, other: "Pose2d") -> float:
        """Euclidean distance between the positions of two poses (meters)."""
        return math.hypot(other.x - self.x, other.y - self.y)
