import math
import networkx as nx
import pytest
from fxgraph.arbitrage_graph import CurrencyIndex, build_weighted_graph, rates_to_weights
from fxgraph.bellman_ford import (ARBITRAGE, OK, UNREACHABLE, bellman_ford, best_conversions,
                                  conversion_path)
from fxgraph.floyd_warshall import ArbitrageFinder


def weighted(names, rates):
    return build_weighted_graph(rates_to_weights(rates), CurrencyIndex(names), rates)


def test_unknown_source_rejected(consistent_table):
    g = weighted(*consistent_table)
    with pytest.raises(ValueError):
        bellman_ford(g, "JPY")


def test_matches_all_pairs_row(consistent_table):
    names, rates = consistent_table
    g = weighted(names, rates)
    finder = ArbitrageFinder(rates_to_weights(rates), names)
    for source in names:
        result = bellman_ford(g, source)
        assert not result.negative_cycle
        for dest in names:
            assert result.distances[dest] == pytest.approx(finder.shortest_distance(source, dest))


def test_last_edges_and_paths(consistent_table):
    names, rates = consistent_table
    result = bellman_ford(weighted(names, rates), "AUD")
    assert result.distances["AUD"] == 0.0
    assert result.last_edges["AUD"] is None
    # every direct rate beats a two-hop route once the spread is paid twice
    assert result.last_edges["USD"] == ("AUD", "USD")
    path = conversion_path(result, "USD")
    assert path.path == ["AUD", "USD"]
    assert path.status == OK
    assert conversion_path(result, "AUD").path == ["AUD"]


def test_multi_hop_path():
    g = nx.DiGraph()
    g.add_edge("A", "B", weight=1.0)
    g.add_edge("B", "C", weight=-0.5)
    g.add_edge("A", "C", weight=1.0)
    g.add_node("Z")
    result = bellman_ford(g, "A")
    assert result.distances["C"] == 0.5
    assert conversion_path(result, "C").path == ["A", "B", "C"]
    unreachable = conversion_path(result, "Z")
    assert unreachable.status == UNREACHABLE
    assert unreachable.path == []
    assert result.distances["Z"] == math.inf


def test_negative_cycle_flagged(triangle_table):
    result = bellman_ford(weighted(*triangle_table), "A")
    assert result.negative_cycle
    for c in best_conversions(result):
        if c.destination == "D":
            assert c.status == UNREACHABLE
        else:
            assert c.status == ARBITRAGE
            assert len(c.path) <= 5


def test_source_outside_cycle_keeps_trivial_path(triangle_table):
    # D feeds the cycle but nothing on it leads back to D
    result = bellman_ford(weighted(*triangle_table), "D")
    assert result.negative_cycle
    assert conversion_path(result, "D").status == OK


def test_best_conversions_skip_source(sample_table):
    names, rates = sample_table
    result = bellman_ford(weighted(names, rates), "NZD")
    conversions = best_conversions(result)
    assert [c.destination for c in conversions] == [n for n in names if n != "NZD"]
    assert all(c.source == "NZD" for c in conversions)
