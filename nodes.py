"""
Node abstraction for the route graphs.

Level datasets and request payloads both produce concrete nodes; the engines
only ever look at the stable identifier.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Node(ABC):
    """Abstract graph node."""

    @property
    @abstractmethod
    def id(self) -> str:
        """
        Stable identifier within one graph.
        """
        raise NotImplementedError


@dataclass(frozen=True)
class Location(Node):
    """
    Named place on a route map.

    label, x and y are presentation-only and never used by the search.
    """

    _id: str
    label: str = ""
    x: float = field(default=0.0, compare=False)
    y: float = field(default=0.0, compare=False)

    @property
    def id(self) -> str:
        return self._id
