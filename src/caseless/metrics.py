"""Timing collection and aggregation for the match modes."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

import numpy as np

from .config import BenchConfig
from .matching import get_matcher

DEFAULT_BENCH_PAIRS: list[tuple[str, str]] = [
    ("STRASSE", "straße"),
    ("ΣΊΣΥΦΟΣ", "σίσυφος"),
    ("Éclair", "éclair"),
    ("ℌello ①", "hello 1"),
]


@dataclass
class TimingStats:
    """Summary statistics for one match mode, in microseconds per comparison."""

    mode: str
    calls: int = 0
    matched: int = 0
    mean_us: float | None = None
    p50_us: float | None = None
    p95_us: float | None = None
    p99_us: float | None = None

    def to_dict(self) -> dict:
        return {k: v for k, v in self.__dict__.items() if v is not None}


def time_calls(func: Callable[[], object], iterations: int, warmup: int = 0) -> list[float]:
    """Call ``func`` repeatedly and return each call's duration in seconds."""
    for _ in range(warmup):
        func()
    durations = []
    for _ in range(iterations):
        start = time.perf_counter()
        func()
        durations.append(time.perf_counter() - start)
    return durations


def aggregate_timings(mode: str, durations: list[float], matched: int = 0) -> TimingStats:
    """Compute summary statistics from per-call durations given in seconds."""
    stats = TimingStats(mode=mode, calls=len(durations), matched=matched)
    if not durations:
        return stats
    arr = np.array(durations) * 1e6
    stats.mean_us = float(np.mean(arr))
    stats.p50_us = float(np.percentile(arr, 50))
    stats.p95_us = float(np.percentile(arr, 95))
    stats.p99_us = float(np.percentile(arr, 99))
    return stats


def run_bench(pairs: list[tuple[str, str]], config: BenchConfig) -> list[TimingStats]:
    """Time every configured match mode over ``pairs``."""
    results = []
    for mode in config.modes:
        key = get_matcher(mode)
        durations: list[float] = []
        matched = 0
        for a, b in pairs:
            if key(a, config.options) == key(b, config.options):
                matched += 1
            durations.extend(
                time_calls(
                    lambda a=a, b=b: key(a, config.options) == key(b, config.options),
                    config.iterations,
                    config.warmup,
                )
            )
        results.append(aggregate_timings(mode, durations, matched))
    return results
