"""
Shortest-path service used to judge route attempts.

Turns a request payload into an IndexedGraph, runs the engine, and maps the
result back to node ids.
"""

from typing import Any, Iterable, Mapping, Optional, Union
import logging

from adjacency_list_graph import IndexedGraph
from algorithms import UNREACHABLE, ShortestPathEngine
from dijkstra_engine import SimpleDijkstraEngine
from errors import InputValidationError
from nodes import Location
from schemas import ComputeRequest, ComputeResponse, EdgeDto, NodeDto, parse_payload

logger = logging.getLogger(__name__)


def build_graph(request: ComputeRequest) -> IndexedGraph:
    """Graph for a request; labels and positions are carried but unused."""
    return IndexedGraph.from_lists(
        (Location(n.id, n.label, n.x, n.y) for n in request.nodes),
        ((e.u, e.v, e.weight) for e in request.edges),
    )


class DijkstraService:
    """
    Request-level entry point for the shortest-path engine.
    """

    def __init__(self, engine: Optional[ShortestPathEngine] = None) -> None:
        self._engine = engine or SimpleDijkstraEngine()

    def compute(self, request: Union[ComputeRequest, Mapping[str, Any]]) -> ComputeResponse:
        """
        Solve one request.

        Raises InputValidationError for malformed payloads, an empty node list
        or unknown start/end/edge ids. An unreachable end is not an error: the
        response carries UNREACHABLE and an empty path.
        """
        req = parse_payload(ComputeRequest, request)
        try:
            graph = build_graph(req)
            start = graph.index_of(req.start)
            end = graph.index_of(req.end)
        except InputValidationError as exc:
            logger.warning("Rejected shortest-path request: %s", exc)
            raise

        cost, path = self._engine.shortest_path(graph, start, end)
        if cost == UNREACHABLE:
            logger.info("No route from %s to %s", req.start, req.end)
        return ComputeResponse(
            optimal_cost=cost,
            optimal_path=[graph.node_at(i).id for i in path],
        )

    def shortest_cost(
        self,
        nodes: Iterable[Union[NodeDto, Mapping[str, Any]]],
        edges: Iterable[Union[EdgeDto, Mapping[str, Any]]],
        start: str,
        end: str,
    ) -> int:
        req = parse_payload(
            ComputeRequest,
            {"nodes": list(nodes), "edges": list(edges), "start": start, "end": end},
        )
        graph = build_graph(req)
        return self._engine.shortest_cost(graph, graph.index_of(req.start), graph.index_of(req.end))


_default_service = DijkstraService()


def compute_shortest_cost(
    nodes: Iterable[Union[NodeDto, Mapping[str, Any]]],
    edges: Iterable[Union[EdgeDto, Mapping[str, Any]]],
    start: str,
    end: str,
) -> int:
    """Minimal total weight from start to end, or UNREACHABLE (-1)."""
    return _default_service.shortest_cost(nodes, edges, start, end)


def compute(request: Union[ComputeRequest, Mapping[str, Any]]) -> ComputeResponse:
    """Cost plus optimal path for a full request payload."""
    return _default_service.compute(request)
