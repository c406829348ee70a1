"""System information and performance measurements."""

from __future__ import annotations

import functools
import math
import os
import platform
import sys
import time

import psutil

NUM_TESTS = 1_000_000
OPERATIONS_PER_ITERATION = 4  # sin, add, multiply, divide
NUM_REPEATS = 5

_BYTES_PER_GB = 1000.0 * 1000.0 * 1000.0


def _detected_cores() -> int | None:
    """Logical cores usable by this process, or None if they cannot be found."""
    try:
        return len(os.sched_getaffinity(0)) or None
    except (AttributeError, OSError):
        return os.cpu_count()


def num_cores() -> int:
    """Number of logical cores available on the machine (at least 1)."""
    return _detected_cores() or 1


def cpu_stats() -> tuple[int, int]:
    """Return (logical_cores, frequency_MHz) using the first CPU's reported clock."""
    logical_cores = num_cores()
    try:
        frequencies = psutil.cpu_freq(percpu=True)
    except (NotImplementedError, OSError, AttributeError):
        frequencies = None
    if not frequencies:
        return logical_cores, 0
    first = frequencies[0] if isinstance(frequencies, list) else frequencies
    return logical_cores, int(first.current or 0)


def flops_per_cycle_per_core() -> int:
    """Theoretical double-precision operations per clock cycle for one core."""
    if platform.machine().lower() in {"x86_64", "amd64"}:
        # SSE2 is the x86-64 baseline: 128-bit vectors, 4 FP64 ops.
        return 4
    return 1


def estimate_peak_gflops(num_provers: int) -> float:
    """Estimate peak GFLOP/s from the number of prover threads and clock speed."""
    _cores, mhz = cpu_stats()
    return (num_provers * mhz * flops_per_cycle_per_core()) / 1000.0


def _measure_gflops(cores: int, num_tests: int, repeats: int) -> float:
    """Time a floating-point loop and return the average GFLOP/s over the repeats."""
    sin = math.sin
    total_rate = 0.0
    for _ in range(repeats):
        start = time.perf_counter()
        total_flops = 0
        for _ in range(cores):
            x = 1.0
            for _ in range(num_tests):
                x = (sin(x) + 1.0) * 0.5 / 1.1
            total_flops += num_tests * OPERATIONS_PER_ITERATION
        elapsed = max(time.perf_counter() - start, sys.float_info.min)
        total_rate += total_flops / elapsed
    return (total_rate / repeats) / 1e9


@functools.lru_cache(maxsize=None)
def measure_gflops() -> float:
    """Measure the machine's GFLOP/s once; later calls return the cached value."""
    cores = _detected_cores()
    if cores is None:
        print(
            "Warning: Unable to determine the number of logical cores. Defaulting to 1.",
            file=sys.stderr,
        )
        cores = 1
    return _measure_gflops(cores, NUM_TESTS, NUM_REPEATS)


def bytes_to_mb(num_bytes: int) -> int:
    """Convert bytes to thousandths of a MiB, rounded to the nearest integer."""
    return math.floor(num_bytes * 1000.0 / 1_048_576.0 + 0.5)


def get_memory_info() -> tuple[int, int]:
    """Memory of this process and total system memory, both in thousandths of a MiB."""
    program_bytes = psutil.Process(os.getpid()).memory_info().rss
    total_bytes = psutil.virtual_memory().total
    return bytes_to_mb(program_bytes), bytes_to_mb(total_bytes)


def total_memory_gb() -> float:
    """Total memory of the machine in GB."""
    return psutil.virtual_memory().total / _BYTES_PER_GB


def process_memory_gb() -> float:
    """Memory used by the current process in GB."""
    return psutil.Process(os.getpid()).memory_info().rss / _BYTES_PER_GB