"""search package."""

from .astar import a_star, a_star_to, path_cost
from .reference import a_star_linear

__all__ = ["a_star", "a_star_to", "path_cost", "a_star_linear"]
