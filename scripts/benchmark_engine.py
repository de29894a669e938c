#!/usr/bin/env python3
"""
Benchmark and cross-check the direct and fast transform paths.

For every working size, both paths are run on the same random signal, the
maximum coefficient difference is reported together with per-call timings.

Usage:
    python scripts/benchmark_engine.py
    python scripts/benchmark_engine.py --config configs/default.yaml --sizes 64 256 1024
    python scripts/benchmark_engine.py --provider numpy --n-iter 20
"""

import sys
import time
import argparse
from pathlib import Path

# Add src to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

import numpy as np
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from fourier_engine import FourierEngine, available_providers, load_config
from fourier_engine.utils.logging import setup_logging

console = Console()


def time_call(fn, samples, n_iter: int) -> float:
    """Mean wall time of fn(samples) in ms."""
    start = time.time()
    for _ in range(n_iter):
        fn(samples)
    return (time.time() - start) / n_iter * 1000


def main():
    parser = argparse.ArgumentParser(description='Direct vs fast transform benchmark')
    parser.add_argument('--config', type=str, default=None, help='YAML config (provider, logging)')
    parser.add_argument('--provider', type=str, default=None, choices=available_providers())
    parser.add_argument('--sizes', type=int, nargs='+', default=[64, 128, 256, 512, 1000])
    parser.add_argument('--n-iter', type=int, default=10)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    provider = 'radix2'
    log_level, log_file = 'WARNING', None
    if args.config is not None:
        config = load_config(args.config)
        provider, log_level, log_file = config.provider, config.log_level, config.log_file
    if args.provider is not None:
        provider = args.provider
    setup_logging(log_file=log_file, level=log_level)

    console.print(Panel.fit(
        f"[bold]Fourier engine benchmark[/bold]\nprovider: {provider}, iterations: {args.n_iter}",
        border_style="blue",
    ))

    rng = np.random.default_rng(args.seed)

    table = Table(title="Direct vs Fast Transform", box=box.ROUNDED)
    table.add_column("Length", justify="right")
    table.add_column("N", justify="right")
    table.add_column("DFT (ms)", justify="right")
    table.add_column("FFT (ms)", justify="right")
    table.add_column("Speedup", justify="right")
    table.add_column("Max error", justify="right")

    for length in args.sizes:
        engine = FourierEngine(length, provider=provider)
        x = rng.standard_normal(length)

        # Warm up JIT
        engine.dft(x)
        X_dft = engine.fourier_coefficients()
        engine.fft(x)
        X_fft = engine.fourier_coefficients()
        error = np.abs(X_dft - X_fft).max()

        time_dft = time_call(engine.dft, x, args.n_iter)
        time_fft = time_call(engine.fft, x, args.n_iter)

        status = "green" if error < 1e-10 else "red"
        table.add_row(
            str(length),
            str(engine.size()),
            f"{time_dft:.3f}",
            f"{time_fft:.3f}",
            f"{time_dft / max(time_fft, 1e-9):.1f}x",
            f"[{status}]{error:.2e}[/{status}]",
        )

    console.print(table)


if __name__ == '__main__':
    main()
