from enum import Enum
from typing import Dict, Hashable, Tuple
import networkx as nx

Edge = Tuple[Hashable, Hashable]

class VertexState(Enum):
    UNVISITED = "unvisited"
    ACTIVE = "active"  # discovered, still has incident edges to process
    DONE = "done"

class DepthFirstSearch:
    """
    Depth-first search over any networkx graph. Subclasses hook into the traversal
    through vertex_discovered, edge_traversed and vertex_finished, which are called
    in the same order a recursive search would call them. The traversal itself
    keeps an explicit stack so deep graphs do not hit the recursion limit.
    """

    def __init__(self, graph: nx.Graph):
        self.graph = graph
        self.states: Dict[Hashable, VertexState] = {v: VertexState.UNVISITED for v in graph.nodes}

    def search(self, start) -> None:
        if start not in self.graph:
            raise ValueError(f"vertex {start!r} not in graph")
        self._visit(start)
        stack = [(start, iter(self.graph.edges(start)))]
        while stack:
            vertex, incident = stack[-1]
            for edge in incident:
                adjacent = edge[1]
                if self.states[adjacent] is VertexState.UNVISITED:
                    self.edge_traversed(edge)
                    self._visit(adjacent)
                    stack.append((adjacent, iter(self.graph.edges(adjacent))))
                    break
            else:
                stack.pop()
                self.states[vertex] = VertexState.DONE
                self.vertex_finished(vertex)

    def _visit(self, vertex) -> None:
        self.states[vertex] = VertexState.ACTIVE
        self.vertex_discovered(vertex)

    def vertex_discovered(self, vertex) -> None:
        pass

    def vertex_finished(self, vertex) -> None:
        pass

    def edge_traversed(self, edge: Edge) -> None:
        pass
