"""
Client-input errors raised by the graph and tree engines.

Every error here is a ValueError so callers at the request boundary can map
them to a "bad input" response. Rule violations in the tree puzzle and an
unreachable shortest-path target are results, not errors.
"""


class InputValidationError(ValueError):
    """Base class for malformed or inconsistent client input."""


class EmptyGraphError(InputValidationError):
    """Raised when a graph is submitted without any nodes."""


class UnknownNodeError(InputValidationError):
    """Raised when an edge or a start/end references a node id that does not exist."""

    def __init__(self, node_id: str, context: str = "graph") -> None:
        super().__init__(f"Unknown node '{node_id}' referenced by {context}.")
        self.node_id = node_id


class DuplicateNodeError(InputValidationError):
    """Raised when the same node id is declared twice."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node '{node_id}' is declared more than once.")
        self.node_id = node_id


class NegativeWeightError(InputValidationError):
    """Raised for edges with a negative weight."""

    def __init__(self, u: str, v: str, weight: int) -> None:
        super().__init__(f"Edge {u}-{v} has negative weight {weight}.")
        self.weight = weight


class DuplicateKeyError(InputValidationError):
    """Raised when a key already present in the red-black tree is inserted again."""

    def __init__(self, key: int) -> None:
        super().__init__(f"Key {key} is already in the tree.")
        self.key = key


class UnknownTreeNodeError(InputValidationError):
    """Raised when a tree node id does not belong to the tree."""

    def __init__(self, node_id: int) -> None:
        super().__init__(f"Tree node {node_id} does not exist.")
        self.node_id = node_id
