import math
from typing import Dict, Hashable, List, NamedTuple, Optional, Tuple
import networkx as nx

Edge = Tuple[Hashable, Hashable]  # (u, v) of a directed graph edge

# conversion path status
OK = "ok"
UNREACHABLE = "unreachable"
ARBITRAGE = "arbitrage - no well-defined shortest path"

class ShortestPaths(NamedTuple):
    source: Hashable
    distances: Dict[Hashable, float]
    last_edges: Dict[Hashable, Optional[Edge]]
    negative_cycle: bool  # some edge still relaxed after |V|-1 passes

class ConversionPath(NamedTuple):
    source: Hashable
    destination: Hashable
    path: List[Hashable]
    status: str

def _relaxes(distances: Dict[Hashable, float], u, v, w: float) -> bool:
    return distances[u] + w < distances[v]

def bellman_ford(graph: nx.DiGraph, source, weight: str = "weight") -> ShortestPaths:
    """
    Single-source shortest paths over a graph that may carry negative weights.
    Performs |V|-1 passes over every edge, then one more pass only to flag a
    negative cycle reachable from the source.
    """
    if source not in graph:
        raise ValueError(f"source vertex {source!r} not in graph")
    distances: Dict[Hashable, float] = {v: math.inf for v in graph.nodes}
    last_edges: Dict[Hashable, Optional[Edge]] = {v: None for v in graph.nodes}
    distances[source] = 0.0
    edges = list(graph.edges(data=weight))

    for _ in range(graph.number_of_nodes() - 1):
        for u, v, w in edges:
            if _relaxes(distances, u, v, w):
                distances[v] = distances[u] + w
                last_edges[v] = (u, v)

    negative_cycle = any(_relaxes(distances, u, v, w) for u, v, w in edges)
    return ShortestPaths(source, distances, last_edges, negative_cycle)

def conversion_path(result: ShortestPaths, destination) -> ConversionPath:
    # walk last edges back from the destination; a repeat means a negative cycle sits on the way
    if destination not in result.last_edges:
        raise ValueError(f"destination vertex {destination!r} not in graph")
    source = result.source
    # a source with a last edge was itself improved by a cycle, so reaching it ends nothing
    source_relaxed = result.last_edges[source] is not None
    if destination == source and not source_relaxed:
        return ConversionPath(source, destination, [source], OK)
    if result.last_edges[destination] is None:
        return ConversionPath(source, destination, [], UNREACHABLE)

    backwards = [destination]
    seen = {destination}
    v = destination
    while v != source or source_relaxed:
        v = result.last_edges[v][0]
        backwards.append(v)
        if v in seen:
            return ConversionPath(source, destination, list(reversed(backwards)), ARBITRAGE)
        seen.add(v)
    return ConversionPath(source, destination, list(reversed(backwards)), OK)

def best_conversions(result: ShortestPaths) -> List[ConversionPath]:
    return [conversion_path(result, v) for v in result.last_edges if v != result.source]
