import math
from typing import Dict, Iterable, List, NamedTuple
from .arbitrage_graph import CurrencyIndex, WeightTable, check_square

NO_PREDECESSOR = -1  # best path at this level is the direct edge
UNREACHABLE = -2

CYCLE_MARKER = "... (cycle)"

class ArbitrageCycle(NamedTuple):
    currency: str
    value: float
    path: List[str]  # predecessor walk from the origin, last entry repeats an earlier one
    closed: bool  # True if the walk came back to the origin, False if it looped elsewhere

    def describe(self) -> str:
        text = " -> ".join(self.path)
        if not self.closed:
            text += " " + CYCLE_MARKER
        return text

class AllPairsShortestPaths:
    """
    Floyd-Warshall keeping every layer: d[k][i][j] is the shortest i->j weight using
    only the first k vertices as intermediates and p[k][i][j] the intermediate vertex
    that produced it (NO_PREDECESSOR for the direct edge, UNREACHABLE for no path).
    """

    def __init__(self, weights: WeightTable):
        self.n = check_square(weights, "weight table")
        self.weights = [list(map(float, row)) for row in weights]
        self.d: List[List[List[float]]] = []
        self.p: List[List[List[int]]] = []
        self.relax()

    def _initial_layers(self):
        n = self.n
        d0 = [row[:] for row in self.weights]
        p0 = [[UNREACHABLE] * n for _ in range(n)]
        for i in range(n):
            # staying put costs nothing unless the table says otherwise
            if d0[i][i] == math.inf:
                d0[i][i] = 0.0
            for j in range(n):
                if d0[i][j] != math.inf:
                    p0[i][j] = NO_PREDECESSOR
        return d0, p0

    def relax(self) -> None:
        n = self.n
        d0, p0 = self._initial_layers()
        self.d = [d0]
        self.p = [p0]
        # layer k admits vertex k-1 as an intermediate; each layer reads only the previous one
        for k in range(1, n + 1):
            via = k - 1
            dk_1, pk_1 = self.d[k - 1], self.p[k - 1]
            dk = [[0.0] * n for _ in range(n)]
            pk = [[UNREACHABLE] * n for _ in range(n)]
            for i in range(n):
                d_iv = dk_1[i][via]
                for j in range(n):
                    detour = d_iv + dk_1[via][j]
                    if detour < dk_1[i][j]:
                        dk[i][j] = detour
                        pk[i][j] = via
                    else:
                        dk[i][j] = dk_1[i][j]
                        pk[i][j] = pk_1[i][j]
            self.d.append(dk)
            self.p.append(pk)

    def distance_matrix(self) -> List[List[float]]:
        return self.d[self.n]

    def predecessor_matrix(self) -> List[List[int]]:
        return self.p[self.n]

    def distance(self, i: int, j: int) -> float:
        return self.d[self.n][i][j]

class ArbitrageFinder(AllPairsShortestPaths):
    """
    Runs the all-pairs relaxation and reports every currency whose shortest
    round trip is negative, i.e. sits on a cycle of rates multiplying above 1.
    """

    def __init__(self, weights: WeightTable, currencies: Iterable[str]):
        self.index = currencies if isinstance(currencies, CurrencyIndex) else CurrencyIndex(currencies)
        self.index.check_size(check_square(weights, "weight table"))
        super().__init__(weights)
        self.arbitrage_values: Dict[str, float] = {}
        self.arbitrage_paths: Dict[str, str] = {}
        self.arbitrage_cycles: Dict[str, ArbitrageCycle] = {}
        self._detect_arbitrage()

    def shortest_distance(self, src: str, dst: str) -> float:
        return self.distance(self.index.index_of(src), self.index.index_of(dst))

    def _detect_arbitrage(self) -> None:
        final = self.d[self.n]
        for i in range(self.n):
            if final[i][i] < 0:
                self._record(i, final[i][i])

    def _record(self, i: int, value: float) -> None:
        # a later record for the same origin replaces the earlier one
        currency = self.index.currency_at(i)
        cycle = self._reconstruct_cycle(i, value)
        self.arbitrage_values[currency] = value
        self.arbitrage_cycles[currency] = cycle
        self.arbitrage_paths[currency] = cycle.describe()

    def _previous(self, i: int, j: int) -> int:
        prev = self.p[self.n][i][j]
        if prev == NO_PREDECESSOR:
            return i
        if prev == UNREACHABLE:
            raise RuntimeError(f"predecessor walk from {i} hit unreachable vertex {j}")
        return prev

    def _reconstruct_cycle(self, i: int, value: float) -> ArbitrageCycle:
        """
        Walk the predecessor row of i backwards from (i, i). Negative cycles make the
        chain circular, so the walk stops at the first repeated vertex instead of
        waiting to reach i again.
        """
        walk = [i]
        seen = {i}
        r = self._previous(i, i)
        closed = False
        while True:
            walk.append(r)
            if r == i:
                closed = True
                break
            if r in seen:
                break
            seen.add(r)
            r = self._previous(i, r)
        path = [self.index.currency_at(v) for v in walk]
        return ArbitrageCycle(self.index.currency_at(i), value, path, closed)
