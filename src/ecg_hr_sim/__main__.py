"""Command line entry point: ``python -m ecg_hr_sim``."""

import argparse
import sys
from pathlib import Path

from ._logging import logger, set_log_file, set_log_level
from .config import ConfigLoader, Settings
from .core import HeartRatePipeline
from .exceptions import ConfigError
from .summary import print_summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecg-hr-sim",
        description="Synthesize a noisy ECG with a rising heart rate and estimate the rate back from it",
    )
    parser.add_argument("--config", type=Path, help="JSON or TOML settings file")
    parser.add_argument("--fs", type=float, help="Sampling frequency in Hz")
    parser.add_argument("--duration", type=float, help="Duration in seconds")
    parser.add_argument("--hr-min", type=float, help="Starting heart rate in bpm")
    parser.add_argument("--hr-max", type=float, help="Final heart rate in bpm")
    parser.add_argument("--noise-amp", type=float, help="Standard deviation of the additive noise")
    parser.add_argument("--method", type=str, help="Peak detection method (global, adaptive, neurokit)")
    parser.add_argument("--seed", type=int, help="Noise seed for reproducible runs")
    parser.add_argument("--plot", action="store_true", help="Show the three-panel figure")
    parser.add_argument("--save", type=Path, help="Save the figure to this path")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=Path, help="Also write the log to this file")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Load settings from ``--config`` (if any) and apply command line overrides."""
    settings = ConfigLoader.from_file(args.config) if args.config else Settings()
    overrides = {
        ("signal", "fs"): args.fs,
        ("signal", "duration"): args.duration,
        ("rate", "hr_min"): args.hr_min,
        ("rate", "hr_max"): args.hr_max,
        ("artifacts", "noise_amp"): args.noise_amp,
        ("peaks", "method"): args.method.strip().lower() if args.method else None,
    }
    for (section, key), value in overrides.items():
        if value is not None:
            setattr(getattr(settings, section), key, value)
    return settings


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    set_log_level(args.log_level)
    if args.log_file:
        set_log_file(args.log_file)

    try:
        settings = settings_from_args(args)
        results = HeartRatePipeline(settings).run(seed=args.seed)
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 2

    print_summary(results)

    if args.plot or args.save:
        from .plotting import plot_results

        plot_results(results, save_path=args.save, show=args.plot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
