from typing import Dict, Hashable, List
import networkx as nx
from .dfs import DepthFirstSearch, Edge, VertexState

def _same_edge(a: Edge, b: Edge) -> bool:
    # undirected: (u, v) and (v, u) are the same edge
    return a == b or (a[0] == b[1] and a[1] == b[0])

class BridgeFinder(DepthFirstSearch):
    """
    Collects discovery numbers d[v] and low-link values m[v] during a depth-first
    search, then reports the tree edges (u, v) with m[v] > d[u]: nothing below v
    reaches back to u or above, so removing the edge cuts v's subtree off.
    """

    def __init__(self, graph: nx.Graph):
        if graph.is_directed():
            raise ValueError("bridge finding needs an undirected graph")
        super().__init__(graph)
        self.discovered: Dict[Hashable, int] = {}
        self.low: Dict[Hashable, int] = {}
        self.visited_edges: List[Edge] = []
        self.parent_edges: List[Edge] = []
        self.bridges: List[Edge] = []
        self._next_discovery = 0

    def vertex_discovered(self, vertex) -> None:
        self.discovered[vertex] = self._next_discovery
        self._next_discovery += 1

    def edge_traversed(self, edge: Edge) -> None:
        self.visited_edges.append(edge)
        self.parent_edges.append(edge)

    def vertex_finished(self, vertex) -> None:
        parent_edge = self.parent_edges[-1] if self.parent_edges else None
        candidates = [self.discovered[vertex]]
        for edge in self.graph.edges(vertex):
            adjacent = edge[1]
            state = self.states[adjacent]
            if state is VertexState.ACTIVE:
                if parent_edge is not None and _same_edge(edge, parent_edge):
                    continue
                candidates.append(self.discovered[adjacent])
            elif state is VertexState.DONE and adjacent in self.low:
                candidates.append(self.low[adjacent])
        self.low[vertex] = min(candidates)
        if self.parent_edges:
            self.parent_edges.pop()

    def find_bridges(self, start) -> List[Edge]:
        self.search(start)
        self.bridges = [(u, v) for u, v in self.visited_edges if self.low[v] > self.discovered[u]]
        return self.bridges

def find_bridges(graph: nx.Graph, start=None) -> List[Edge]:
    # start defaults to the first vertex of the graph
    if start is None:
        if graph.number_of_nodes() == 0:
            raise ValueError("graph has no vertices")
        start = next(iter(graph.nodes))
    return BridgeFinder(graph).find_bridges(start)
