"""
Built-in Route Master levels.

Each level is a small undirected map with a start and an end; the player tries
to match the optimal cost computed by the shortest-path service.
"""

from dataclasses import dataclass
from typing import Dict, Sequence

from schemas import ComputeRequest, EdgeDto, NodeDto


@dataclass(frozen=True)
class RouteLevel:
    """Map, endpoints and flavour text for one level."""

    level_id: int
    title: str
    description: str
    unit: str
    nodes: Sequence[NodeDto]
    edges: Sequence[EdgeDto]
    start: str
    end: str

    def as_request(self) -> ComputeRequest:
        return ComputeRequest(
            nodes=list(self.nodes), edges=list(self.edges), start=self.start, end=self.end
        )


def _nodes(*rows) -> tuple:
    return tuple(NodeDto(id=i, label=label, x=x, y=y) for i, label, x, y in rows)


def _edges(*rows) -> tuple:
    return tuple(EdgeDto(u=u, v=v, weight=w) for u, v, w in rows)


PAKISTAN_RALLY = RouteLevel(
    level_id=1,
    title="Pakistan Rally",
    description="Navigate Pakistan! Find the cheapest fuel route.",
    unit="L",
    nodes=_nodes(
        ("isb", "Islamabad", 65, 15),
        ("pes", "Peshawar", 45, 10),
        ("lhr", "Lahore", 75, 35),
        ("mul", "Multan", 55, 50),
        ("que", "Quetta", 20, 55),
        ("suk", "Sukkur", 35, 65),
        ("khi", "Karachi", 30, 85),
    ),
    edges=_edges(
        ("pes", "isb", 15),
        ("isb", "lhr", 25),
        ("isb", "mul", 45),
        ("lhr", "mul", 30),
        ("lhr", "suk", 80),
        ("mul", "suk", 40),
        ("mul", "que", 55),
        ("que", "suk", 25),
        ("suk", "khi", 45),
        ("que", "khi", 70),
    ),
    start="isb",
    end="khi",
)

UET_BLUEPRINT = RouteLevel(
    level_id=2,
    title="UET Blueprint",
    description="Late for class? Find the fastest path on campus.",
    unit="Min",
    nodes=_nodes(
        ("gate", "Main Gate", 50, 90),
        ("audi", "Auditorium", 30, 70),
        ("lib", "Library", 70, 65),
        ("admin", "Admin", 50, 50),
        ("cs", "CS Dept", 20, 35),
        ("cafe", "SSC Cafe", 80, 35),
        ("mech", "Mech Dept", 50, 20),
    ),
    edges=_edges(
        ("gate", "audi", 5),
        ("gate", "lib", 8),
        ("gate", "admin", 10),
        ("audi", "cs", 6),
        ("audi", "admin", 4),
        ("admin", "lib", 3),
        ("admin", "mech", 7),
        ("lib", "cafe", 5),
        ("cafe", "mech", 6),
        ("cs", "mech", 5),
    ),
    start="gate",
    end="mech",
)

GLOBAL_NETWORK = RouteLevel(
    level_id=3,
    title="Global Network",
    description="Complex! Connect Sydney to London. Beware of expensive flights!",
    unit="$",
    nodes=_nodes(
        ("syd", "Sydney", 90, 85),
        ("sin", "Singapore", 75, 65),
        ("tok", "Tokyo", 85, 35),
        ("pek", "Beijing", 70, 30),
        ("dxb", "Dubai", 55, 45),
        ("mos", "Moscow", 50, 20),
        ("par", "Paris", 40, 25),
        ("lon", "London", 35, 20),
        ("nyc", "New York", 20, 35),
        ("lax", "Los Angeles", 10, 40),
        ("rio", "Rio", 25, 75),
        ("cpt", "Cape Town", 50, 80),
    ),
    edges=_edges(
        ("syd", "tok", 800),
        ("syd", "lax", 1200),
        ("tok", "lax", 600),
        ("lax", "nyc", 400),
        ("nyc", "lon", 500),
        ("syd", "sin", 400),
        ("sin", "dxb", 350),
        ("sin", "pek", 500),
        ("tok", "pek", 300),
        ("pek", "mos", 450),
        ("mos", "par", 300),
        ("par", "lon", 150),
        ("dxb", "lon", 600),
        ("dxb", "par", 550),
        ("dxb", "cpt", 700),
        ("cpt", "rio", 400),
        ("rio", "nyc", 800),
    ),
    start="syd",
    end="lon",
)

LEVELS: Dict[int, RouteLevel] = {
    lvl.level_id: lvl for lvl in (PAKISTAN_RALLY, UET_BLUEPRINT, GLOBAL_NETWORK)
}


def get_level(level_id: int) -> RouteLevel:
    try:
        return LEVELS[level_id]
    except KeyError:
        raise ValueError(f"No route level with id {level_id}.") from None
