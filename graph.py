"""
Undirected, weighted graph abstraction for the route games.

Nodes are addressed by a dense zero-based index assigned in insertion order.
Edges are undirected with non-negative integer weights.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Sequence, Tuple

from nodes import Node


class Graph(ABC):
    """Weighted graph over dense node indices."""

    @abstractmethod
    def nodes(self) -> Iterable[Node]:
        """Return all nodes in index order."""
        raise NotImplementedError

    @abstractmethod
    def index_of(self, node_id: str) -> int:
        """
        Dense index for a node id.

        Raises: UnknownNodeError if the id was never added.
        """
        raise NotImplementedError

    @abstractmethod
    def node_at(self, index: int) -> Node:
        """Node stored at a dense index."""
        raise NotImplementedError

    @abstractmethod
    def neighbours(self, index: int) -> Sequence[Tuple[int, int]]:
        """
        Adjacent nodes and edge weights for a given index.

        Returns: sequence of (neighbour_index, weight)
        """
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError
