"""Console summary of a pipeline run."""

from .core import PipelineResults
from .heart_rate import InsufficientDataResult


def format_summary(results: PipelineResults) -> list[str]:
    """Return the summary of a run as printable lines.

    The mean heart rate is reported only when at least one rate value exists;
    otherwise the line states that no estimate is available.
    """
    schedule = results.schedule
    lines = [
        f"Duration: {results.duration:.2f} s at {results.fs:g} Hz ({len(results.time)} samples)",
        f"Target heart rate: {schedule.rates[0]:.1f} -> {schedule.rates[-1]:.1f} bpm over {schedule.num_cycles} cycles",
        f"Detected beats: {len(results.peaks)}",
    ]
    estimate = results.estimate
    mean_bpm = estimate.mean_bpm
    if mean_bpm is None:
        reason = estimate.reason if isinstance(estimate, InsufficientDataResult) else "no rate values"
        lines.append(f"Average heart rate: not available ({reason})")
    else:
        lines.append(
            f"Average heart rate: {mean_bpm:.2f} bpm (min {estimate.bpm.min():.1f}, max {estimate.bpm.max():.1f})"
        )
    return lines


def print_summary(results: PipelineResults) -> None:
    print("\n".join(format_summary(results)))
