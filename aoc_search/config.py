"""Simple configuration loader for aoc_search."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

TIE_BREAKS = ("fifo", "lifo")


@dataclass
class HeapConfig:
    """Configuration values for the heap section."""

    default_capacity: int = 10
    check_invariants: bool = False


@dataclass
class SearchConfig:
    """Configuration values for the search section."""

    tie_break: str = "fifo"
    check_costs: bool = False


@dataclass
class BenchmarkConfig:
    """Settings for ``python -m aoc_search.main``."""

    grid_size: int = 64
    iterations: int = 5
    profile_path: str = "search.prof"


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    heap: HeapConfig
    search: SearchConfig
    benchmark: BenchmarkConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    heap_data = data.get("heap") or {}
    heap = HeapConfig(
        default_capacity=int(heap_data.get("default_capacity", 10)),
        check_invariants=bool(heap_data.get("check_invariants", False)),
    )
    if heap.default_capacity < 0:
        raise ValueError("heap.default_capacity must not be negative")

    search_data = data.get("search") or {}
    search = SearchConfig(
        tie_break=str(search_data.get("tie_break", "fifo")).lower(),
        check_costs=bool(search_data.get("check_costs", False)),
    )
    if search.tie_break not in TIE_BREAKS:
        raise ValueError(f"Unknown search.tie_break: {search.tie_break}")

    bench_data = data.get("benchmark") or {}
    benchmark = BenchmarkConfig(
        grid_size=int(bench_data.get("grid_size", 64)),
        iterations=int(bench_data.get("iterations", 5)),
        profile_path=str(bench_data.get("profile_path", "search.prof")),
    )

    log_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(log_data.get("global_level", "INFO")).upper(),
        module_levels=dict(log_data.get("module_levels") or {}),
    )

    return Config(heap=heap, search=search, benchmark=benchmark, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "HeapConfig",
    "SearchConfig",
    "BenchmarkConfig",
    "LoggingConfig",
    "TIE_BREAKS",
    "load_config",
]
