"""Request and response payloads exchanged with the game frontend.

Pydantic models for the shapes the browser sends and renders. Field names on
the wire follow the frontend (``w`` for an edge weight, camelCase in
responses); Python code uses the snake_case attribute names.
"""

from typing import Any, Literal, Mapping, Type, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from errors import InputValidationError

M = TypeVar("M", bound=BaseModel)


class NodeDto(BaseModel):
    """A place on the route map. x/y only position it in the UI."""
    id: str
    label: str = ""
    x: float = 0.0
    y: float = 0.0


class EdgeDto(BaseModel):
    """An undirected, weighted road between two places."""
    model_config = ConfigDict(populate_by_name=True)

    u: str
    v: str
    weight: int = Field(validation_alias=AliasChoices("w", "weight"))


class ComputeRequest(BaseModel):
    """Graph plus the start/end pair to solve."""
    nodes: list[NodeDto]
    edges: list[EdgeDto]
    start: str
    end: str


class ComputeResponse(BaseModel):
    """Optimal cost (-1 when unreachable) and the node ids along one optimal path."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    optimal_cost: int
    optimal_path: list[str] = []


class TreeNodeView(BaseModel):
    """One tower in the rendered tree."""
    id: int
    key: int
    color: Literal["RED", "BLACK"]
    x: float
    y: float


class TreeEdgeView(BaseModel):
    """Link from a parent tower to one of its children."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    parent_id: int
    child_id: int


class TreeSnapshot(BaseModel):
    """Complete tree drawing, nodes in pre-order."""
    nodes: list[TreeNodeView] = []
    edges: list[TreeEdgeView] = []


def parse_payload(model: Type[M], raw: Any) -> M:
    """Validate a raw JSON-like payload, reporting failures as client input errors."""
    if isinstance(raw, model):
        return raw
    if not isinstance(raw, Mapping):
        raise InputValidationError("Request body must be a JSON object")
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise InputValidationError(f"Invalid {model.__name__}: {details}") from exc
