#!/usr/bin/env python3
"""
Benchmark and verification of the hand-written Fourier transforms.

For every configured length this script measures:
  1. Transform time (ms) for the direct, radix-2, mixed-radix and array backends
  2. Maximum error against numpy.fft
  3. Round-trip error of forward followed by inverse
  4. Parseval deviation (relative)

Usage:
    python scripts/benchmark_transforms.py [--config CONFIG_PATH] [--sizes 64 100 ...]
"""

import sys
import argparse
import time
from pathlib import Path
from dataclasses import dataclass, asdict
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Rich imports
from rich.console import Console
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TaskProgressColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.panel import Panel
from rich import box

# Project imports
from src.fourier import (
    dft,
    fft_radix2,
    forward_transform,
    inverse_transform,
    fft_array,
    energy,
    max_abs_error,
    to_numpy,
    from_numpy,
)
from src.utils.config import BenchmarkConfig, load_config
from src.utils.logging import setup_logging, log_config

console = Console()


@dataclass
class SizeResult:
    """Benchmark results for a single transform length."""
    size: int
    output_size_radix2: int  # Radix-2 pads to the next power of two
    direct_ms: Optional[float]
    radix2_ms: float
    mixed_radix_ms: float
    array_ms: float
    max_error: float  # Mixed-radix vs numpy.fft
    round_trip_error: float
    parseval_deviation: float

    def to_dict(self) -> Dict:
        return asdict(self)


def time_call(fn: Callable, repeats: int) -> Tuple[float, object]:
    """Mean wall time (ms) over repeats, plus the last result."""
    result = None
    start = time.perf_counter()
    for _ in range(repeats):
        result = fn()
    elapsed = (time.perf_counter() - start) * 1000 / repeats
    return elapsed, result


def benchmark_size(n: int, config: BenchmarkConfig, rng: np.random.Generator) -> SizeResult:
    """Run every transform on one random complex signal of length n."""
    signal = rng.standard_normal(n) + 1j * rng.standard_normal(n)
    x = from_numpy(signal)
    reference = np.fft.fft(signal)

    direct_ms = None
    if n <= config.direct_max_size:
        direct_ms, _ = time_call(lambda: dft(x), config.repeats)

    radix2_ms, radix2_result = time_call(lambda: fft_radix2(x), config.repeats)
    mixed_ms, spectrum = time_call(lambda: forward_transform(x), config.repeats)

    fft_array(signal)  # JIT warm-up
    array_ms, _ = time_call(lambda: fft_array(signal), config.repeats)

    max_error = float(np.abs(to_numpy(spectrum) - reference).max())
    round_trip_error = max_abs_error(inverse_transform(spectrum), x)

    time_energy = energy(x)
    parseval_deviation = abs(time_energy - energy(spectrum) / n) / time_energy

    return SizeResult(
        size=n,
        output_size_radix2=len(radix2_result),
        direct_ms=direct_ms,
        radix2_ms=radix2_ms,
        mixed_radix_ms=mixed_ms,
        array_ms=array_ms,
        max_error=max_error,
        round_trip_error=round_trip_error,
        parseval_deviation=parseval_deviation,
    )


def run_benchmark(config: BenchmarkConfig, logger) -> List[SizeResult]:
    rng = np.random.default_rng(config.seed)
    results = []

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Benchmarking transforms", total=len(config.sizes))
        for n in config.sizes:
            progress.update(task, description=f"N={n}")
            result = benchmark_size(n, config, rng)
            logger.info(f"N={n}: {result.to_dict()}")
            if result.max_error > config.tolerance:
                logger.warning(f"N={n}: max error {result.max_error:.2e} exceeds {config.tolerance:.0e}")
            results.append(result)
            progress.advance(task)

    return results


def display_results_table(results: List[SizeResult], config: BenchmarkConfig):
    """Display results in a formatted table."""
    table = Table(
        title="[bold]Transform Benchmark (ms per call)[/bold]",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan"
    )

    table.add_column("N", justify="right", style="bold")
    table.add_column("Direct", justify="right")
    table.add_column("Radix-2", justify="right")
    table.add_column("Mixed", justify="right")
    table.add_column("Array", justify="right")
    table.add_column("Max err", justify="right")
    table.add_column("Round trip", justify="right")
    table.add_column("Parseval", justify="right")

    for r in results:
        direct = f"{r.direct_ms:.3f}" if r.direct_ms is not None else "-"
        radix2 = f"{r.radix2_ms:.3f}"
        if r.output_size_radix2 != r.size:
            radix2 += f" (→{r.output_size_radix2})"
        status = "green" if r.max_error <= config.tolerance else "red"

        table.add_row(
            str(r.size),
            direct,
            radix2,
            f"{r.mixed_radix_ms:.3f}",
            f"{r.array_ms:.3f}",
            f"[{status}]{r.max_error:.2e}[/{status}]",
            f"{r.round_trip_error:.2e}",
            f"{r.parseval_deviation:.2e}",
        )

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Fourier Transform Benchmark")
    parser.add_argument(
        '--config',
        type=str,
        default=str(PROJECT_ROOT / 'configs' / 'benchmark.yaml'),
        help='Path to configuration file'
    )
    parser.add_argument(
        '--sizes',
        type=int,
        nargs='+',
        default=None,
        help='Override the configured transform lengths'
    )
    args = parser.parse_args()

    config = load_config(args.config)
    if args.sizes:
        config = BenchmarkConfig(**{**config.to_dict(), 'sizes': args.sizes})

    log_file = config.log_file
    if log_file is not None and not Path(log_file).is_absolute():
        log_file = str(PROJECT_ROOT / log_file)
    logger = setup_logging(log_file=log_file, name='benchmark')
    log_config(logger, config.to_dict())

    try:
        results = run_benchmark(config, logger)
        console.print("\n")
        display_results_table(results, config)

        failed = [r.size for r in results if r.max_error > config.tolerance]
        if failed:
            console.print(Panel.fit(
                f"[bold red]Tolerance exceeded for N = {failed}[/bold red]",
                border_style="red"
            ))
            sys.exit(1)

        console.print(Panel.fit(
            "[bold green]All transforms within tolerance[/bold green]",
            border_style="green"
        ))

    except Exception as e:
        logger.exception("Benchmark failed")
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise


if __name__ == '__main__':
    main()
