"""Configuration parameters for drive constraint evaluation.

This module centralizes all configuration parameters including:
- Physical drivetrain parameters
- Motor feedforward characterization
- Bound sweep settings
- Visualization settings

All parameters are documented with their purpose, units and valid ranges.
Command-line flags in cli.py override these defaults.
"""

# ============================================================================
# Physical Drivetrain Parameters
# ============================================================================

TRACK_WIDTH = 0.6
"""Distance between left and right wheel contact points (meters).
Fixed by robot hardware design. Use the empirically characterized value when
available, it is usually larger than the measured one due to wheel scrub."""


# ============================================================================
# Voltage Parameters
# ============================================================================

NOMINAL_BATTERY_VOLTAGE = 12.0
"""Nominal supply voltage of the drive battery (volts)."""

MAX_VOLTAGE = 10.0
"""Maximum voltage available to the drive motors while following a path (volts).

Should be somewhat less than NOMINAL_BATTERY_VOLTAGE to account for
voltage sag due to current draw under load.
"""


# ============================================================================
# Motor Feedforward Parameters (V = kS*sgn(v) + kV*v + kA*a)
# ============================================================================

FEEDFORWARD_KS = 0.22
"""Static gain (volts). Voltage needed to overcome static friction."""

FEEDFORWARD_KV = 1.98
"""Velocity gain (volts per m/s). Must be non-negative."""

FEEDFORWARD_KA = 0.2
"""Acceleration gain (volts per m/s²). Must be strictly positive."""


# ============================================================================
# Bound Sweep Configuration
# ============================================================================

SWEEP_MAX_CURVATURE = 5.0
"""Largest curvature magnitude included in a sweep (rad/m).

The sweep covers [-SWEEP_MAX_CURVATURE, SWEEP_MAX_CURVATURE]. With the default
track width, curvatures above 2/TRACK_WIDTH put the center of rotation inside
the wheelbase.
"""

SWEEP_NUM_CURVATURES = 41
"""Number of curvature samples in a sweep. Odd so that zero is included."""

SWEEP_VELOCITIES = [-2.0, -1.0, 0.0, 1.0, 2.0, 3.0]
"""Forward chassis velocities evaluated by a sweep (m/s)."""

RESULTS_DIR = "results"
"""Default directory for sweep CSV files and plots."""


# ============================================================================
# Visualization Colors (Monumental Branding)
# ============================================================================

MONUMENTAL_ORANGE = "#f74823"
"""Primary brand color - used for maximum acceleration bounds."""

MONUMENTAL_BLUE = "#2374f7"
"""Secondary brand color - used for minimum acceleration bounds."""

MONUMENTAL_TAUPE = "#686a5f"
"""Neutral color for guides, grids, and secondary elements."""

MONUMENTAL_YELLOW_ORANGE = "#ffa726"
"""Accent color for highlights such as the inside-wheelbase region."""

# Terminal color codes (ANSI escape sequences)
TERM_ORANGE = "\033[38;2;247;72;35m"
"""Terminal color code for Monumental orange (RGB: 247, 72, 35)."""

TERM_BLUE = "\033[38;2;35;116;247m"
"""Terminal color code for complementary blue (RGB: 35, 116, 247)."""

TERM_RESET = "\033[0m"
"""Terminal color reset code."""
