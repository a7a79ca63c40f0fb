"""Command-line interface for perfmeasures."""

import argparse
import importlib
import logging
import sys
from collections.abc import Callable
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version
from typing import Any

from perfmeasures.configs import BenchmarkConfig, ConfigManager
from perfmeasures.reporting import export_timings_csv
from perfmeasures.runners import BenchmarkRunner
from perfmeasures.serializer import save_benchmark_result
from perfmeasures.utils.errors import PerfMeasuresError, TargetResolutionError

try:
    PERFMEASURES_CLI_VERSION = package_version("perfmeasures")
except PackageNotFoundError:
    PERFMEASURES_CLI_VERSION = "0.1.0"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def resolve_target(target: str) -> Callable[[], Any]:
    """Import ``package.module:attr.path`` and return the callable it names."""
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise TargetResolutionError(f"Target must look like 'module:callable', got {target!r}")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetResolutionError(f"Cannot import module {module_name!r}: {e}") from e
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetResolutionError(f"{module_name!r} has no attribute {attr_path!r}") from e
    if not callable(obj):
        raise TargetResolutionError(f"Target {target!r} is not callable")
    return obj


def setup_parser() -> argparse.ArgumentParser:
    """Setup command-line argument parser.

    Returns:
        ArgumentParser configured for perfmeasures
    """
    parser = argparse.ArgumentParser(
        prog="perfmeasures",
        description="perfmeasures - time a zero-argument Python callable",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  perfmeasures mypkg.work:compute
  perfmeasures mypkg.work:compute -n 20 --summary
  perfmeasures mypkg.work:compute --config bench.yaml --export out/result.json --export-csv out/timings.csv

Environment Variables:
  PERFMEASURES_CONFIG   Default config file path (YAML/JSON)
        """,
    )
    parser.add_argument("target", help="Callable to benchmark, as 'module:callable'")
    parser.add_argument("--repetitions", "-n", type=int, help="Measured repetitions (must be > 1)")
    parser.add_argument("--warmup", "-w", type=int, help="Warm-up runs discarded before measuring")
    parser.add_argument("--config", help="Path to configuration file (YAML/JSON)")
    parser.add_argument("--export", "-e", metavar="FILE", help="Export result to JSON file")
    parser.add_argument("--export-csv", metavar="FILE", help="Export measured timings to CSV file")
    parser.add_argument("--summary", "-s", action="store_true", help="Also print min/max/percentile summary")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every repetition")
    parser.add_argument(
        "--version",
        action="version",
        version=f"perfmeasures {PERFMEASURES_CLI_VERSION}",
    )
    return parser


def build_benchmark_config(args: argparse.Namespace) -> BenchmarkConfig:
    """Merge defaults, config file and CLI overrides (CLI wins)."""
    config = ConfigManager.load_or_default(args.config)
    overrides: dict[str, Any] = {}
    if args.repetitions is not None:
        overrides["repetitions"] = args.repetitions
    if args.warmup is not None:
        overrides["warmup_runs"] = args.warmup
    if overrides:
        config.update({"benchmark": overrides})
    return BenchmarkConfig.from_config(config)


def _print_summary(summary: dict[str, Any]) -> None:
    print("Timing summary (ms)")
    print("=" * 40)
    for key, value in summary.items():
        if isinstance(value, float):
            print(f"  {key:12} {value:.6f}")
        else:
            print(f"  {key:12} {value}")


def run_benchmark(args: argparse.Namespace) -> int:
    """Execute one benchmark from parsed arguments."""
    bench_config = build_benchmark_config(args)
    computation = resolve_target(args.target)
    runner = BenchmarkRunner.from_config(bench_config)
    result = runner.measure(computation)

    print(result.render())
    if args.summary:
        _print_summary(result.summary())
    if args.export:
        path = save_benchmark_result(result, args.export)
        print(f"[OK] Result saved to {path}")
    if args.export_csv:
        if export_timings_csv(result, args.export_csv):
            print(f"[OK] Timings saved to {args.export_csv}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    try:
        return run_benchmark(args)
    except PerfMeasuresError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
