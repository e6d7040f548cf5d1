"""Drive Constraints - Voltage-Limited Acceleration Bounds for Differential Drives

Trajectory constraint evaluation for differential-drive robots. At a single
point along a planned path, the voltage constraint computes the range of
forward chassis acceleration for which neither wheel motor is asked to exceed
a fixed maximum supply voltage.

## Architecture Overview

The constraint combines two collaborators, both fixed at construction:

### Drive Kinematics (kinematics.py)
Converts chassis velocity to left/right wheel velocities.
- Differential drive model (track width from config, 0.6m default)
- v_left = v - (T/2) * omega, v_right = v + (T/2) * omega
- Output: Wheel velocities (v_left, v_right)

### Motor Feedforward (feedforward.py)
Relates voltage, wheel velocity and wheel acceleration.
- V = kS * sgn(v) + kV * v + kA * a
- Inverted to give the max/min achievable acceleration within a voltage budget

### Voltage Constraint (constraint.py)
Translates the wheel-frame limits back into chassis-frame limits.
- Outer wheel: A_chassis = A_wheel / (1 + T|k|/2)
- Inner wheel: A_chassis = A_wheel / (1 - T|k|/2)
- Sign handling for reverse driving and for centers of rotation inside the wheelbase
- Output: Acceleration window (min, max)

## Modules

### Core Modules
- `config.py` - Centralized configuration parameters with documentation
- `geometry.py` - Pose representation
- `kinematics.py` - Differential drive kinematics and motor voltage containers
- `feedforward.py` - Simple motor feedforward model
- `constraint.py` - Constraint interface and the voltage constraint

### Analysis
- `sweep.py` - Bound evaluation over curvature/velocity grids, CSV export
- `plot_bounds.py` - Bounds-vs-curvature visualization
- `cli.py` - Command-line interface

## Quick Start

```python
from drive_constraints import (
    DifferentialDriveKinematics,
    DifferentialDriveVoltageConstraint,
    Pose2d,
    SimpleMotorFeedforward,
)

constraint = DifferentialDriveVoltageConstraint(
    SimpleMotorFeedforward(0.22, 1.98, 0.2),
    DifferentialDriveKinematics(0.6),
    10.0,
)
bounds = constraint.min_max_acceleration(Pose2d(), curvature=0.5, velocity=2.0)
```

Or use the command-line interface:
```bash
python -m drive_constraints --csv results/bounds.csv --plot results/bounds.png
```

## Version

0.1.0 - Initial implementation
"""

__version__ = "0.1.0"

from .constraint import (
    DifferentialDriveVoltageConstraint,
    MinMax,
    TrajectoryConstraint,
    apply_constraints,
)
from .feedforward import SimpleMotorFeedforward
from .geometry import Pose2d
from .kinematics import (
    ChassisSpeeds,
    DifferentialDriveKinematics,
    DifferentialDriveWheelSpeeds,
    MecanumDriveMotorVoltages,
)

__all__ = [
    "ChassisSpeeds",
    "DifferentialDriveKinematics",
    "DifferentialDriveVoltageConstraint",
    "DifferentialDriveWheelSpeeds",
    "MecanumDriveMotorVoltages",
    "MinMax",
    "Pose2d",
    "SimpleMotorFeedforward",
    "TrajectoryConstraint",
    "apply_constraints",
]
