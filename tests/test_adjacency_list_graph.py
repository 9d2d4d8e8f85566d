"""
Unit tests for IndexedGraph.
"""

import pytest

from adjacency_list_graph import IndexedGraph
from errors import (
    DuplicateNodeError,
    EmptyGraphError,
    InputValidationError,
    NegativeWeightError,
    UnknownNodeError,
)
from nodes import Location


def test_nodes_get_dense_indices_in_input_order():
    g = IndexedGraph.from_lists(
        [Location("A"), Location("B"), Location("C")],
        [("A", "B", 1), ("A", "C", 2), ("B", "C", 3)],
    )

    assert [n.id for n in g.nodes()] == ["A", "B", "C"]
    assert g.index_of("A") == 0
    assert g.index_of("C") == 2
    assert len(g) == 3


def test_edges_are_inserted_in_both_directions():
    g = IndexedGraph.from_lists(
        [Location("A"), Location("B"), Location("C")],
        [("A", "B", 1), ("B", "C", 3)],
    )

    assert list(g.neighbours(0)) == [(1, 1)]
    assert list(g.neighbours(1)) == [(0, 1), (2, 3)]
    assert list(g.neighbours(2)) == [(1, 3)]
    assert g.edge_weight("C", "B") == 3
    assert g.edge_weight("A", "C") is None


def test_neighbours_returns_copy():
    g = IndexedGraph.from_lists([Location("A"), Location("B")], [("A", "B", 1)])

    out = list(g.neighbours(0))
    out.clear()

    # internal structure must remain intact
    assert list(g.neighbours(0)) == [(1, 1)]


def test_label_is_presentation_only():
    assert Location("lhr", "Lahore", 75, 35) == Location("lhr", "Lahore", 1, 2)


def test_empty_node_list_rejected():
    with pytest.raises(EmptyGraphError):
        IndexedGraph.from_lists([], [])


def test_edge_to_unknown_node_rejected():
    with pytest.raises(UnknownNodeError) as exc:
        IndexedGraph.from_lists([Location("A")], [("A", "Z", 4)])
    assert exc.value.node_id == "Z"


def test_duplicate_and_negative_input_rejected():
    with pytest.raises(DuplicateNodeError):
        IndexedGraph.from_lists([Location("A"), Location("A")], [])
    with pytest.raises(NegativeWeightError):
        IndexedGraph.from_lists([Location("A"), Location("B")], [("A", "B", -2)])


def test_input_errors_are_value_errors():
    g = IndexedGraph()
    g.add_node(Location("A"))
    with pytest.raises(InputValidationError):
        g.index_of("missing")
    with pytest.raises(ValueError):
        g.index_of("missing")
