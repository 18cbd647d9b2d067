"""Naive A* kept as a reference for cross-checking :func:`a_star`.

The open set is a plain ``set`` and every pop scans it for the lowest
estimated cost, so a search is O(n^2). Use :mod:`aoc_search.search.astar`
for real work.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterable, List, TypeVar

from .astar import _reconstruct

P = TypeVar("P", bound=Hashable)
C = TypeVar("C")


def a_star_linear(
    nodes: Iterable[P],
    start: P,
    is_goal: Callable[[P], bool],
    neighbors: Callable[[P], Iterable[P]],
    step_cost: Callable[[P, P], C],
    estimate: Callable[[P], C],
    infinity: C,
    *,
    zero: Any = 0,
) -> List[P]:
    """Same contract as :func:`aoc_search.search.astar.a_star`."""

    open_set = {start}
    came_from: Dict[P, P] = {}

    min_path_costs: Dict[P, Any] = {pos: infinity for pos in nodes}
    min_path_costs[start] = zero

    estimated_total: Dict[P, Any] = {start: zero + estimate(start)}

    while open_set:
        current = min(open_set, key=lambda pos: estimated_total[pos])

        if is_goal(current):
            return _reconstruct(came_from, current)

        open_set.remove(current)

        for neighbor in neighbors(current):
            cost_to_neighbor = min_path_costs[current] + step_cost(current, neighbor)
            if cost_to_neighbor < min_path_costs.get(neighbor, infinity):
                came_from[neighbor] = current
                min_path_costs[neighbor] = cost_to_neighbor
                estimated_total[neighbor] = cost_to_neighbor + estimate(neighbor)
                open_set.add(neighbor)

    return []


__all__ = ["a_star_linear"]
