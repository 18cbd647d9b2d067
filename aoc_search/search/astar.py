"""Generic A* best-path search over caller-defined graphs."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, TypeVar

from ..config import CONFIG, TIE_BREAKS
from ..core.heap.binary_heap import BinaryHeap

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Hashable)
C = TypeVar("C")


@dataclass(order=True)
class _OpenEntry:
    """Open-set record ordered by estimated total cost, then insertion order."""

    f: Any
    seq: int
    position: Any = field(compare=False)


def _reconstruct(came_from: Dict[Any, Any], current: Any) -> List[Any]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def _check_non_negative(value: Any, zero: Any, what: str, *where: Any) -> None:
    if value < zero:
        raise ValueError(f"negative {what} {value!r} at {where!r}")


def a_star(
    nodes: Iterable[P],
    start: P,
    is_goal: Callable[[P], bool],
    neighbors: Callable[[P], Iterable[P]],
    step_cost: Callable[[P, P], C],
    estimate: Callable[[P], C],
    infinity: C,
    *,
    zero: Any = 0,
    tie_break: Optional[str] = None,
) -> List[P]:
    """Return the cheapest path from ``start`` to the first goal position found.

    Parameters
    ----------
    nodes:
        All known positions. Their cost is initialised to ``infinity``.
    start:
        First position of the path; its cost is ``zero``.
    is_goal:
        Checked for every position taken from the open set before it is
        expanded.
    neighbors:
        Called once each time a position is expanded.
    step_cost:
        Cost of moving between two adjacent positions. Must not be negative.
    estimate:
        Admissible estimate of the remaining cost to a goal.
    infinity:
        A cost greater than any real path cost.
    zero:
        Cost of the empty path.
    tie_break:
        ``"fifo"`` or ``"lifo"`` ordering for entries with equal estimated
        cost. Defaults to ``CONFIG.search.tie_break``.

    Returns
    -------
    list
        Positions from ``start`` to the goal, both inclusive, or an empty list
        if no goal is reachable.
    """

    if tie_break is None:
        tie_break = CONFIG.search.tie_break
    tie_break = tie_break.lower()
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"Unknown tie_break: {tie_break}")
    direction = 1 if tie_break == "fifo" else -1
    check_costs = CONFIG.search.check_costs
    counter = itertools.count()

    came_from: Dict[P, P] = {}
    min_path_costs: Dict[P, Any] = {pos: infinity for pos in nodes}
    min_path_costs[start] = zero

    pos_in_open_set: Dict[P, int] = {}

    def track(entry: _OpenEntry, index: int) -> None:
        pos_in_open_set[entry.position] = index

    open_set: BinaryHeap[_OpenEntry] = BinaryHeap(on_move=track)

    # start is the only entry, so its estimate never decides an ordering
    open_set.insert(_OpenEntry(zero, direction * next(counter), start))

    logger.debug("A* search from %r (tie_break=%s)", start, tie_break)
    expanded = 0

    while open_set.count > 0:
        entry = open_set.extract_min()
        current = entry.position
        del pos_in_open_set[current]

        if is_goal(current):
            path = _reconstruct(came_from, current)
            logger.debug(
                "A* reached goal %r after expanding %d positions; path has %d positions",
                current,
                expanded,
                len(path),
            )
            return path

        expanded += 1
        current_cost = min_path_costs[current]

        for neighbor in neighbors(current):
            cost = step_cost(current, neighbor)
            if check_costs:
                _check_non_negative(cost, zero, "step cost", current, neighbor)
            cost_to_neighbor = current_cost + cost

            if cost_to_neighbor < min_path_costs.get(neighbor, infinity):
                # better path to neighbor than all previous ones
                came_from[neighbor] = current
                min_path_costs[neighbor] = cost_to_neighbor

                remaining = estimate(neighbor)
                if check_costs:
                    _check_non_negative(remaining, zero, "estimate", neighbor)
                f = cost_to_neighbor + remaining

                index = pos_in_open_set.get(neighbor)
                if index is None:
                    open_set.insert(_OpenEntry(f, direction * next(counter), neighbor))
                else:
                    seq = open_set[index].seq
                    open_set.decrease_element(index, _OpenEntry(f, seq, neighbor))

    logger.debug("A* found no path from %r after expanding %d positions", start, expanded)
    return []


def a_star_to(
    nodes: Iterable[P],
    start: P,
    goal: P,
    neighbors: Callable[[P], Iterable[P]],
    step_cost: Callable[[P, P], C],
    estimate: Callable[[P], C],
    infinity: C,
    **kwargs: Any,
) -> List[P]:
    """Return the cheapest path from ``start`` to the fixed position ``goal``."""

    return a_star(
        nodes,
        start,
        lambda pos: pos == goal,
        neighbors,
        step_cost,
        estimate,
        infinity,
        **kwargs,
    )


def path_cost(path: List[P], step_cost: Callable[[P, P], C], zero: Any = 0) -> Any:
    """Sum ``step_cost`` over consecutive positions of ``path``."""

    total = zero
    for a, b in zip(path, path[1:]):
        total = total + step_cost(a, b)
    return total


__all__ = ["a_star", "a_star_to", "path_cost"]
