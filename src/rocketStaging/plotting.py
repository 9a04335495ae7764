# Licensed under the PolyForm Noncommercial License 1.0.0
"""Plotting functions for rocket staging results."""

from typing import Optional
import numpy as np
import matplotlib.pyplot as plt

from .core import Rocket
from .missions import ORBIT, DESTINATIONS


def plot_flight_sequence(rocket: Rocket, show: bool = True, save_path: Optional[str] = None):
    """
    Plot per-segment performance of a rocket's flight sequence.

    Args:
        rocket: Rocket to plot
        show: Whether to display the plot
        save_path: If provided, save the plot to this path

    Returns:
        The matplotlib figure
    """
    stages = rocket.flight_sequence()
    segments = np.arange(len(stages))
    labels = [f"Segment {i + 1}" for i in segments]

    delta_v = np.array([stage.delta_v() for stage in stages])
    wet_mass = np.array([stage.wet_mass() for stage in stages])
    dry_mass = np.array([stage.dry_mass() for stage in stages])
    twr = np.array([stage.twr() for stage in stages])
    max_g = np.array([stage.max_g_force() for stage in stages])

    fig, axes = plt.subplots(1, 3, figsize=(18, 6))

    colors = plt.cm.viridis(np.linspace(0, 1, max(len(stages), 1)))

    # 1. Δv per segment, cumulative Δv against mission budgets
    axes[0].bar(segments, delta_v / 1000, color=colors, label="Segment Δv")
    axes[0].plot(segments, np.cumsum(delta_v) / 1000, color='black', marker='o', label="Cumulative Δv")

    budget_colors = plt.cm.plasma(np.linspace(0, 1, len(DESTINATIONS) + 1))
    for destination, color in zip((ORBIT,) + DESTINATIONS, budget_colors):
        if destination.delta_v <= max(delta_v.sum(), ORBIT.delta_v) * 1.1:
            axes[0].axhline(destination.delta_v / 1000, color=color, ls='--', lw=1, label=destination.name)

    axes[0].set_title(f"Δv per segment (total {delta_v.sum() / 1000:.2f} km/s)")
    axes[0].set_xticks(segments)
    axes[0].set_xticklabels(labels)
    axes[0].set_ylabel("Δv [km/s]")
    axes[0].legend(fontsize='small')

    # 2. Mass at ignition and burnout
    width = 0.4
    axes[1].bar(segments - width / 2, wet_mass / 1000, width, label="Wet mass")
    axes[1].bar(segments + width / 2, dry_mass / 1000, width, label="Dry mass")
    axes[1].set_title("Mass per segment")
    axes[1].set_xticks(segments)
    axes[1].set_xticklabels(labels)
    axes[1].set_ylabel("Mass [t]")
    axes[1].legend()

    # 3. Acceleration at ignition and burnout
    axes[2].plot(segments, twr, marker='o', ls='--', label="TWR at ignition")
    axes[2].plot(segments, max_g, marker='o', ls='-', label="Max g at burnout")
    axes[2].axhline(1.0, color='grey', lw=1)
    axes[2].set_title(f"Acceleration (max {rocket.max_g_force():.2f} g)")
    axes[2].set_xticks(segments)
    axes[2].set_xticklabels(labels)
    axes[2].set_ylabel("Acceleration [g]")
    axes[2].legend()

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')
    if show:
        plt.show()

    return fig
