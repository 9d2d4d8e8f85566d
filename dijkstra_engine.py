"""
Heap-based Dijkstra engine for the route games.

Uses Python's heapq to compute the shortest path between two nodes of any
Graph implementation that satisfies the Graph interface.
"""

from typing import Dict, List, Tuple
import heapq
import logging
import math

from algorithms import UNREACHABLE, ShortestPathEngine
from graph import Graph

logger = logging.getLogger(__name__)


class SimpleDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra using a binary heap, stopping at the target.

    Complexity:
        O(E log V) over the nodes reachable from the source.
    """

    def shortest_cost(self, graph: Graph, start: int, end: int) -> int:
        """
        Compute only the cost from start to end.
        """
        cost, _ = self._search(graph, start, end, track=False)
        return cost

    def shortest_path(self, graph: Graph, start: int, end: int) -> Tuple[int, List[int]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        The predecessor map omits the source itself because it has no parent,
        so walking back from end stops once the source is reached.
        """
        cost, prev = self._search(graph, start, end, track=True)
        if cost == UNREACHABLE:
            return UNREACHABLE, []

        path = [end]
        while path[-1] != start:
            path.append(prev[path[-1]])
        path.reverse()
        return cost, path

    def _search(
        self, graph: Graph, start: int, end: int, track: bool
    ) -> Tuple[int, Dict[int, int]]:
        dist: List[float] = [math.inf] * len(graph)
        prev: Dict[int, int] = {}
        dist[start] = 0
        pq = [(0, start)]  # priority queue of (distance, node)
        popped = 0

        while pq:
            d_u, u = heapq.heappop(pq)
            popped += 1

            # Skip outdated entries
            if d_u > dist[u]:
                continue

            # Extraction order is non-decreasing for non-negative weights.
            if u == end:
                logger.debug("Reached target %d at cost %d after %d pops", end, d_u, popped)
                return d_u, prev

            for v, w in graph.neighbours(u):
                alt = d_u + w
                if alt < dist[v]:
                    dist[v] = alt
                    if track:
                        prev[v] = u
                    heapq.heappush(pq, (alt, v))

        logger.debug("Target %d unreachable from %d", end, start)
        return UNREACHABLE, prev
