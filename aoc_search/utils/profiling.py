"""Timing and cProfile helpers for comparing two search implementations."""

from __future__ import annotations

import cProfile
import logging
import pstats
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Sized

from .observer import record_search

logger = logging.getLogger(__name__)


@dataclass
class SearchComparison:
    """Mean run times of a baseline search and a candidate search.

    ``ratio`` is candidate time over baseline time, so values below 1.0 mean
    the candidate is faster.
    """

    baseline_name: str
    candidate_name: str
    baseline_times: List[float]
    candidate_times: List[float]
    results_match: bool
    stats: pstats.Stats

    @property
    def baseline_mean(self) -> float:
        return sum(self.baseline_times) / len(self.baseline_times)

    @property
    def candidate_mean(self) -> float:
        return sum(self.candidate_times) / len(self.candidate_times)

    @property
    def ratio(self) -> float:
        if self.baseline_mean == 0:
            return float("inf") if self.candidate_mean > 0 else 1.0
        return self.candidate_mean / self.baseline_mean


def _result_size(result: Any) -> Any:
    return len(result) if isinstance(result, Sized) else result


def compare_searches(
    n: int,
    baseline: Callable[[], Any],
    candidate: Callable[[], Any],
    out_path: str | Path = "search.prof",
    names: tuple[str, str] = ("baseline", "candidate"),
    timer: Callable[[], float] = time.perf_counter,
) -> SearchComparison:
    """Run ``baseline`` and ``candidate`` ``n`` times each under cProfile.

    Runs alternate so both see the same machine state. Candidate durations
    go to the observer history. Results are compared by length (paths) so
    equally cheap paths through different positions still match.
    """

    if n <= 0:
        raise ValueError("n must be positive")

    baseline_times: List[float] = []
    candidate_times: List[float] = []
    results_match = True

    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        started = timer()
        expected = baseline()
        baseline_times.append(timer() - started)

        started = timer()
        actual = candidate()
        duration = timer() - started
        candidate_times.append(duration)
        record_search(duration)

        if _result_size(expected) != _result_size(actual):
            results_match = False
    profiler.disable()

    path = Path(out_path)
    profiler.dump_stats(str(path))

    comparison = SearchComparison(
        baseline_name=names[0],
        candidate_name=names[1],
        baseline_times=baseline_times,
        candidate_times=candidate_times,
        results_match=results_match,
        stats=pstats.Stats(profiler),
    )
    logger.info(
        "%s: %.3f ms, %s: %.3f ms, ratio %.2f",
        comparison.baseline_name,
        comparison.baseline_mean * 1000,
        comparison.candidate_name,
        comparison.candidate_mean * 1000,
        comparison.ratio,
    )
    if not results_match:
        logger.warning("%s and %s returned different results", *names)
    return comparison


__all__ = ["SearchComparison", "compare_searches"]
