"""
Route Master: the player walks a path edge by edge and is judged against Dijkstra.
"""

from enum import Enum
from typing import List, Optional
import logging

from adjacency_list_graph import IndexedGraph
from dijkstra_service import DijkstraService, build_graph
from route_levels import RouteLevel

logger = logging.getLogger(__name__)


class Verdict(Enum):
    """
    Outcome of a finished attempt.

    WIN: the player's cost matches (or beats) the optimum.
    LOSE: the player's route is more expensive than the optimum.
    """

    WIN = "win"
    LOSE = "lose"


class RouteAttempt:
    """
    One player's walk across a level, starting at the level's start node.

    Moves are only accepted along existing edges and never revisit a node.
    """

    def __init__(self, level: RouteLevel) -> None:
        self._level = level
        self._graph: IndexedGraph = build_graph(level.as_request())
        self.path: List[str] = [level.start]
        self.cost = 0

    @property
    def current(self) -> str:
        return self.path[-1]

    @property
    def finished(self) -> bool:
        return self.current == self._level.end

    def step(self, node_id: str) -> bool:
        """
        Move to an adjacent, unvisited node.

        Returns False (and leaves the attempt unchanged) for non-neighbours,
        revisits, or moves after the end has been reached.
        """
        if self.finished or node_id in self.path:
            return False
        weight = self._graph.edge_weight(self.current, node_id)
        if weight is None:
            return False
        self.path.append(node_id)
        self.cost += weight
        return True

    def undo(self) -> Optional[str]:
        """Step back one node; returns the removed id, or None at the start."""
        if len(self.path) <= 1:
            return None
        removed = self.path.pop()
        self.cost -= self._graph.edge_weight(self.current, removed) or 0
        return removed

    def judge(self, service: Optional[DijkstraService] = None) -> Verdict:
        """
        Compare this attempt's cost with the optimum.

        An unfinished attempt always loses.
        """
        service = service or DijkstraService()
        result = service.compute(self._level.as_request())
        won = self.finished and 0 <= result.optimal_cost and self.cost <= result.optimal_cost
        verdict = Verdict.WIN if won else Verdict.LOSE
        logger.info(
            "Level %d attempt %s: cost %d vs optimal %d -> %s",
            self._level.level_id, "->".join(self.path), self.cost, result.optimal_cost, verdict.value,
        )
        return verdict
