"""
Benchmarks: dot strategies on square random matrices.

For every size we time the direct, transposed and column strategies on the
pure Python kernels and, for the strategies that have one, on the numba
kernels. Timings are averaged and plotted.
"""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List

os.environ.setdefault("JAX_PLATFORMS", "cpu")

import matplotlib.pyplot as plt

# Ensure we import the in-repo version
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from matweave import DotStrategy, Matrix, NormalSampler, Session, dot

RUNS = 5
SIZES = (8, 16, 32, 64)
SAVE_DIR = Path("benchmarks")


def _time_runs(fn: Callable[[], object], runs: int = RUNS) -> float:
    """Run fn `runs` times and return average duration in seconds."""
    # Warm-up, also triggers numba compilation
    fn()
    start = time.perf_counter()
    for _ in range(runs):
        fn()
    duration = time.perf_counter() - start
    return duration / runs


def run() -> Dict[str, List[float]]:
    sampler = NormalSampler.from_seed(0)
    results: Dict[str, List[float]] = {}
    for size in SIZES:
        lhs = Matrix.random((size, size), sampler=sampler)
        rhs = Matrix.random((size, size), sampler=sampler)
        for use_jit in (False, True):
            for strategy in DotStrategy:
                if use_jit and strategy is DotStrategy.COLUMNS:
                    continue
                label = f"{strategy.value}{' (jit)' if use_jit else ''}"
                with Session(use_jit=use_jit):
                    elapsed = _time_runs(lambda: dot(lhs, rhs, strategy))
                results.setdefault(label, []).append(elapsed)
                print(f"{size:>4} {label:<18} {elapsed * 1e3:9.3f} ms")
    return results


def plot(results: Dict[str, List[float]]) -> None:
    SAVE_DIR.mkdir(exist_ok=True)
    fig, ax = plt.subplots(figsize=(7, 4))
    for label, timings in results.items():
        ax.plot(SIZES, [t * 1e3 for t in timings], marker="o", label=label)
    ax.set_xlabel("matrix size (n x n)")
    ax.set_ylabel("time per product [ms]")
    ax.set_yscale("log")
    ax.legend()
    fig.tight_layout()
    fig.savefig(SAVE_DIR / "dot_strategies.png", dpi=150)


if __name__ == "__main__":
    plot(run())
