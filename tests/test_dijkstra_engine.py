"""
Unit tests for SimpleDijkstraEngine using IndexedGraph.
"""

import itertools

from adjacency_list_graph import IndexedGraph
from algorithms import UNREACHABLE
from dijkstra_engine import SimpleDijkstraEngine
from nodes import Location


def _graph(ids, edges):
    return IndexedGraph.from_lists([Location(i) for i in ids], edges)


def test_dijkstra_prefers_two_hop_path_in_triangle():
    # A - B (1), B - C (2), A - C (4)
    g = _graph("ABC", [("A", "B", 1), ("B", "C", 2), ("A", "C", 4)])
    engine = SimpleDijkstraEngine()

    assert engine.shortest_cost(g, g.index_of("A"), g.index_of("C")) == 3
    # Undirected: the reverse direction costs the same
    assert engine.shortest_cost(g, g.index_of("C"), g.index_of("A")) == 3


def test_dijkstra_start_equals_end_costs_zero():
    g = _graph("AB", [("A", "B", 5)])
    engine = SimpleDijkstraEngine()

    assert engine.shortest_cost(g, 1, 1) == 0
    assert engine.shortest_path(g, 1, 1) == (0, [1])


def test_dijkstra_unreachable_returns_sentinel():
    g = _graph("ABC", [("A", "B", 2)])  # C is isolated
    engine = SimpleDijkstraEngine()

    assert engine.shortest_cost(g, 0, 2) == UNREACHABLE
    assert engine.shortest_path(g, 0, 2) == (UNREACHABLE, [])


def test_dijkstra_path_reconstruction():
    g = _graph("ABCD", [("A", "B", 1), ("B", "C", 1), ("C", "D", 1), ("A", "D", 10)])
    engine = SimpleDijkstraEngine()

    cost, path = engine.shortest_path(g, 0, 3)

    assert cost == 3
    assert path == [0, 1, 2, 3]


def test_dijkstra_handles_zero_weights_and_parallel_edges():
    g = _graph("ABC", [("A", "B", 0), ("A", "B", 7), ("B", "C", 0)])
    engine = SimpleDijkstraEngine()

    assert engine.shortest_cost(g, 0, 2) == 0


def _brute_force(ids, edges, start, end):
    weight = {}
    for u, v, w in edges:
        for key in ((u, v), (v, u)):
            weight[key] = min(w, weight.get(key, w))
    best = None
    inner = [i for i in ids if i not in (start, end)]
    for r in range(len(inner) + 1):
        for mid in itertools.permutations(inner, r):
            route = (start, *mid, end)
            hops = list(zip(route, route[1:]))
            if all(h in weight for h in hops):
                cost = sum(weight[h] for h in hops)
                best = cost if best is None else min(best, cost)
    return best


def test_dijkstra_matches_exhaustive_enumeration():
    ids = "ABCDE"
    edges = [
        ("A", "B", 4), ("A", "C", 1), ("C", "B", 2), ("B", "D", 5),
        ("C", "D", 8), ("C", "E", 10), ("D", "E", 2),
    ]
    g = _graph(ids, edges)
    engine = SimpleDijkstraEngine()

    for start, end in itertools.permutations(ids, 2):
        expected = _brute_force(ids, edges, start, end)
        assert engine.shortest_cost(g, g.index_of(start), g.index_of(end)) == expected
