"""Three-panel figure of a pipeline run."""

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from ._logging import logger
from .core import PipelineResults


def plot_results(results: PipelineResults, save_path: str | Path | None = None, show: bool = False) -> Figure:
    """Plot the noisy ECG, the filtered ECG with R-peaks, and the heart rate.

    The three panels share the time axis.

    Args:
        results: Output of a pipeline run.
        save_path: Optional path to save the figure.
        show: Whether to open an interactive window.

    Returns:
        The matplotlib Figure.
    """
    fig, (ax_noisy, ax_filtered, ax_bpm) = plt.subplots(3, 1, figsize=(14, 9), sharex=True, constrained_layout=True)

    ax_noisy.plot(results.time, results.noisy, "k-", linewidth=0.6)
    ax_noisy.set_title("Noisy ECG")
    ax_noisy.set_ylabel("Amplitude (mV)")

    ax_filtered.plot(results.time, results.filtered, color="tab:blue", linewidth=0.8, label="Filtered")
    if len(results.peaks):
        ax_filtered.plot(
            results.time[results.peaks],
            results.filtered[results.peaks],
            "rx",
            markersize=8,
            label="R-peaks",
        )
    ax_filtered.set_title("Band-pass filtered ECG")
    ax_filtered.set_ylabel("Amplitude (mV)")
    ax_filtered.legend(loc="upper right", fontsize=8, framealpha=0.8)

    if results.estimate.is_sufficient:
        ax_bpm.plot(results.estimate.bpm_times, results.bpm, "o-", color="tab:red")
    else:
        ax_bpm.text(0.5, 0.5, "No heart rate could be estimated", transform=ax_bpm.transAxes, ha="center")
    ax_bpm.set_title("Instantaneous heart rate")
    ax_bpm.set_ylabel("Heart rate (bpm)")
    ax_bpm.set_xlabel("Time (s)")

    for ax in (ax_noisy, ax_filtered, ax_bpm):
        ax.grid(True, alpha=0.3)

    if save_path is not None:
        save_path = Path(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save_path, dpi=150)
        logger.info(f"Saved figure to {save_path}")
    if show:
        plt.show(block=True)
    return fig
