"""Logging bootstrap and search benchmark entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional, Tuple

from .config import CONFIG, Config, load_config
from .search.astar import a_star
from .search.reference import a_star_linear
from .utils.profiling import SearchComparison, compare_searches

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

Coord = Tuple[int, int]


def configure_logging(config: Config = CONFIG) -> None:
    """Apply the global and per-module log levels from ``config``."""

    numeric_level = getattr(logging, config.logging.global_level, logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    for module_name, level_str in config.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def _open_grid(size: int) -> Iterator[Coord]:
    for row in range(size):
        for col in range(size):
            yield (row, col)


def run_benchmark(config: Config = CONFIG, out_path: Optional[str | Path] = None) -> SearchComparison:
    """Time the linear-scan search against the heap search on an open grid.

    Both run corner to corner on a ``grid_size`` square grid; the linear
    scan is the baseline.
    """

    size = config.benchmark.grid_size
    if size <= 0:
        raise ValueError("benchmark.grid_size must be positive")
    goal = (size - 1, size - 1)
    nodes = list(_open_grid(size))

    def neighbors(pos: Coord) -> Iterator[Coord]:
        row, col = pos
        for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if 0 <= r < size and 0 <= c < size:
                yield (r, c)

    def estimate(pos: Coord) -> int:
        return abs(pos[0] - goal[0]) + abs(pos[1] - goal[1])

    search_args = (
        nodes,
        (0, 0),
        lambda pos: pos == goal,
        neighbors,
        lambda a, b: 1,
        estimate,
        size * size + 1,
    )

    path = Path(out_path or config.benchmark.profile_path)
    logger.info(
        "Comparing %d searches on a %dx%d grid -> %s",
        config.benchmark.iterations,
        size,
        size,
        path,
    )
    return compare_searches(
        config.benchmark.iterations,
        lambda: a_star_linear(*search_args),
        lambda: a_star(*search_args),
        path,
        names=("a_star_linear", "a_star"),
    )


def main(config_path: str | Path = Path("config.yaml")) -> None:
    cfg = load_config(Path(config_path))
    configure_logging(cfg)
    comparison = run_benchmark(cfg)
    print(
        f"{comparison.baseline_name}: {comparison.baseline_mean * 1000:.2f} ms | "
        f"{comparison.candidate_name}: {comparison.candidate_mean * 1000:.2f} ms | "
        f"ratio {comparison.ratio:.2f}"
    )
    comparison.stats.sort_stats("cumulative").print_stats(10)


if __name__ == "__main__":
    main()
