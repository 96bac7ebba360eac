"""
Visualization utilities for raytracer_challenge.

Provides plotting helpers for projectile trajectories in the x-y plane.
"""

import torch
import numpy as np
from typing import Optional, Tuple, Union, Sequence, Any
from dataclasses import dataclass


# =============================================================================
# Configuration and Style
# =============================================================================

@dataclass
class PlotStyle:
    """Global plotting style configuration."""
    figsize: Tuple[int, int] = (10, 6)
    dpi: int = 100
    cmap_sequential: str = 'viridis'
    marker: str = 'o'
    marker_size: float = 3.0
    ground_color: str = '#8d6e63'
    grid_alpha: float = 0.3
    font_size: int = 12


DEFAULT_STYLE = PlotStyle()


def _ensure_matplotlib():
    """Ensure matplotlib is available."""
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for visualization. "
            "Install with: pip install matplotlib"
        )


def _ensure_numpy(tensor: Union[torch.Tensor, np.ndarray]) -> np.ndarray:
    """Convert tensor to numpy array."""
    if isinstance(tensor, torch.Tensor):
        return tensor.detach().cpu().numpy()
    return tensor


# =============================================================================
# Trajectories
# =============================================================================

def plot_trajectory(
    trajectories: Union[Any, Sequence[Any]],
    labels: Optional[Sequence[str]] = None,
    ax: Any = None,
    title: str = None,
    save_path: Optional[str] = None,
    style: PlotStyle = None,
):
    """
    Plot projectile trajectories as y against x.

    Args:
        trajectories: One Trajectory, a sequence of them, or (T, 4) position
                      tensors/arrays
        labels: Legend label per trajectory (defaults to launch speed when known)
        ax: Existing matplotlib axis (creates new figure if None)
        title: Plot title
        save_path: Write the figure to this path
        style: PlotStyle configuration

    Returns:
        Tuple of (figure, axis) or axis if ax was provided
    """
    plt = _ensure_matplotlib()
    style = style or DEFAULT_STYLE

    if not isinstance(trajectories, (list, tuple)):
        trajectories = [trajectories]

    created_fig = ax is None
    if created_fig:
        fig, ax = plt.subplots(figsize=style.figsize, dpi=style.dpi)
    else:
        fig = ax.figure

    cmap = plt.get_cmap(style.cmap_sequential)
    n = len(trajectories)
    for i, traj in enumerate(trajectories):
        data = traj.as_tensor() if hasattr(traj, 'as_tensor') else traj
        data = _ensure_numpy(data)

        if labels is not None:
            label = labels[i]
        elif getattr(traj, 'config', None) is not None:
            label = f"speed={traj.config.launch_speed:g}"
        else:
            label = None

        color = cmap(i / max(n - 1, 1))
        ax.plot(
            data[:, 0], data[:, 1],
            marker=style.marker, markersize=style.marker_size,
            color=color, label=label,
        )

    ax.axhline(0.0, color=style.ground_color, linewidth=1.0)
    ax.set_xlabel('X', fontsize=style.font_size)
    ax.set_ylabel('Y', fontsize=style.font_size)
    ax.grid(True, alpha=style.grid_alpha)
    if title:
        ax.set_title(title, fontsize=style.font_size)
    if any(line.get_label() and not line.get_label().startswith('_') for line in ax.get_lines()):
        ax.legend()

    if save_path is not None:
        fig.savefig(save_path, bbox_inches='tight')

    if created_fig:
        return fig, ax
    return ax
