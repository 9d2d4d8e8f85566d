"""
Concrete undirected, weighted graph for the route games.

Implements the Graph interface with a node-id -> index map and an
index-addressed adjacency list.
"""

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from errors import (
    DuplicateNodeError,
    EmptyGraphError,
    NegativeWeightError,
    UnknownNodeError,
)
from graph import Graph
from nodes import Node

logger = logging.getLogger(__name__)


class IndexedGraph(Graph):
    """
    Undirected graph backed by an id -> index map plus per-index adjacency lists.
    """

    def __init__(self) -> None:
        self._index: Dict[str, int] = {}
        self._nodes: List[Node] = []
        self._adj: List[List[Tuple[int, int]]] = []

    @classmethod
    def from_lists(
        cls, nodes: Iterable[Node], edges: Iterable[Tuple[str, str, int]]
    ) -> "IndexedGraph":
        """
        Build a graph from a node list and (u, v, weight) edge triples.

        Nodes get dense indices in input order. Every edge is inserted into
        both endpoints' adjacency lists.
        """
        g = cls()
        for node in nodes:
            g.add_node(node)
        if not g._nodes:
            raise EmptyGraphError("Graph must contain at least one node.")
        for u, v, weight in edges:
            g.add_edge(u, v, weight)
        logger.debug("Built graph with %d nodes", len(g))
        return g

    # --- Mutation API --------------------------------------------------------

    def add_node(self, node: Node) -> int:
        """Register a node and return its dense index."""
        if node.id in self._index:
            raise DuplicateNodeError(node.id)
        idx = len(self._nodes)
        self._index[node.id] = idx
        self._nodes.append(node)
        self._adj.append([])
        return idx

    def add_edge(self, u: str, v: str, weight: int) -> None:
        """
        Add an undirected edge u <-> v.

        Unlike the node API, endpoints are never auto-added: an edge to an
        undeclared node is an input error.
        """
        if weight < 0:
            raise NegativeWeightError(u, v, weight)
        ui = self._lookup(u, "edge")
        vi = self._lookup(v, "edge")
        self._adj[ui].append((vi, weight))
        self._adj[vi].append((ui, weight))

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> Iterable[Node]:
        return list(self._nodes)

    def index_of(self, node_id: str) -> int:
        return self._lookup(node_id, "lookup")

    def node_at(self, index: int) -> Node:
        return self._nodes[index]

    def neighbours(self, index: int) -> Sequence[Tuple[int, int]]:
        return tuple(self._adj[index])

    def __len__(self) -> int:
        return len(self._nodes)

    def edge_weight(self, u: str, v: str) -> int | None:
        """Cheapest direct edge between two ids, or None when not adjacent."""
        ui = self._lookup(u, "lookup")
        vi = self._lookup(v, "lookup")
        weights = [w for n, w in self._adj[ui] if n == vi]
        return min(weights) if weights else None

    def _lookup(self, node_id: str, context: str) -> int:
        try:
            return self._index[node_id]
        except KeyError:
            raise UnknownNodeError(node_id, context) from None
