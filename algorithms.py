"""
Algorithm interfaces for the route games.

Keeps graph algorithms separate from request handling and game rules.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from graph import Graph

# Out-of-band cost returned when the target cannot be reached.
UNREACHABLE = -1


class ShortestPathEngine(ABC):
    """
    Interface for single-source, single-target shortest-path computation.
    """

    @abstractmethod
    def shortest_cost(self, graph: Graph, start: int, end: int) -> int:
        """
        Compute the minimal total weight from start to end.

        Returns:
            The integer cost, or UNREACHABLE if no path exists.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_path(self, graph: Graph, start: int, end: int) -> Tuple[int, List[int]]:
        """
        Compute the minimal cost plus the node indices along one optimal path.

        Returns:
            (cost, path) where path runs start..end, or (UNREACHABLE, []).
        """
        raise NotImplementedError
