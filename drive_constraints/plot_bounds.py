"""Visualization of acceleration bound sweeps.

This module provides:
- Shared axis styling (Monumental branding)
- Min/max acceleration versus curvature plots, one curve pair per velocity
- Shading of the curvature region where the center of rotation is inside
  the wheelbase
"""

import logging
from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .config import MONUMENTAL_BLUE, MONUMENTAL_ORANGE, MONUMENTAL_TAUPE, MONUMENTAL_YELLOW_ORANGE
from .sweep import BoundsGrid


def style_axis(ax: Axes, title: str = "", xlabel: str = "", ylabel: str = "", grid: bool = True) -> None:
    """Apply consistent styling to a matplotlib axis.

    Args:
        ax: Matplotlib axis to style.
        title: Plot title (optional).
        xlabel: X-axis label (optional).
        ylabel: Y-axis label (optional).
        grid: Whether to show grid lines (default: True).
    """
    if title:
        ax.set_title(title, fontweight="bold")
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)

    if grid:
        ax.grid(True, alpha=0.3, linestyle="--", linewidth=0.5)


def plot_bounds_vs_curvature(
    grid: BoundsGrid,
    output_path: Optional[Union[str, Path]] = None,
    dpi: int = 150,
) -> Figure:
    """Plot min/max chassis acceleration against path curvature.

    Each velocity of the grid gets one solid (max) and one dashed (min) line,
    darker lines for larger speeds.

    Args:
        grid: Evaluated bounds from sweep_acceleration_bounds
        output_path: Optional path to save the figure
        dpi: Resolution in dots per inch (default: 150)

    Returns:
        The created figure
    """
    fig, ax = plt.subplots(figsize=(12, 7))

    num_velocities = len(grid.velocities)
    for i, velocity in enumerate(grid.velocities):
        # Fade from light to full color with increasing index
        alpha = 0.35 + 0.65 * (i + 1) / num_velocities
        ax.plot(
            grid.curvatures,
            grid.max_acceleration[i],
            color=MONUMENTAL_ORANGE,
            alpha=alpha,
            linewidth=1.5,
            label=f"max @ v={velocity:.2f} m/s",
        )
        ax.plot(
            grid.curvatures,
            grid.min_acceleration[i],
            color=MONUMENTAL_BLUE,
            alpha=alpha,
            linewidth=1.5,
            linestyle="--",
            label=f"min @ v={velocity:.2f} m/s",
        )

    if grid.track_width:
        limit = 2.0 / grid.track_width
        k_max = float(np.max(np.abs(grid.curvatures))) if grid.curvatures.size else 0.0
        if k_max > limit:
            # Center of rotation between the wheels
            ax.axvspan(limit, k_max, color=MONUMENTAL_YELLOW_ORANGE, alpha=0.15)
            ax.axvspan(-k_max, -limit, color=MONUMENTAL_YELLOW_ORANGE, alpha=0.15)

    ax.axhline(0.0, color=MONUMENTAL_TAUPE, linewidth=0.8)
    style_axis(
        ax,
        title="Voltage-limited acceleration bounds",
        xlabel="Curvature (rad/m)",
        ylabel="Chassis acceleration (m/s²)",
    )
    ax.legend(loc="best", framealpha=0.9, edgecolor=MONUMENTAL_TAUPE, fontsize="small", ncol=2)

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
        logging.info(f"✓ Saved figure to {output_path}")

    return fig
