import math
from typing import Dict, Iterable, Iterator, List, Sequence
import networkx as nx
import pandas as pd

RateTable = Sequence[Sequence[float]]
WeightTable = List[List[float]]

# rates that carry no conversion information; 1 is the self-rate filler of the sample tables
NO_EDGE_RATES = (0.0, 1.0)

class MalformedTableError(ValueError):
    pass

def check_square(table: Sequence[Sequence[float]], what: str = "table") -> int:
    n = len(table)
    if n == 0:
        raise MalformedTableError(f"{what} is empty")
    for i, row in enumerate(table):
        if len(row) != n:
            raise MalformedTableError(f"{what} is not square: row {i} has {len(row)} entries, expected {n}")
    return n

class CurrencyIndex:
    """Fixed mapping between currency identifiers and table row/column positions."""

    def __init__(self, currencies: Iterable[str]):
        self._currencies = tuple(currencies)
        if not self._currencies:
            raise MalformedTableError("currency ordering is empty")
        self._positions: Dict[str, int] = {c: i for i, c in enumerate(self._currencies)}
        if len(self._positions) != len(self._currencies):
            raise MalformedTableError(f"duplicate currency in ordering {list(self._currencies)}")

    def index_of(self, currency: str) -> int:
        return self._positions[currency]

    def currency_at(self, i: int) -> str:
        return self._currencies[i]

    def check_size(self, n: int) -> None:
        if len(self) != n:
            raise MalformedTableError(f"currency ordering has {len(self)} entries but the table is {n}x{n}")

    def __contains__(self, currency) -> bool:
        return currency in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self._currencies)

    def __len__(self) -> int:
        return len(self._currencies)

    def __repr__(self) -> str:
        return f"CurrencyIndex({list(self._currencies)})"

def rates_to_weights(rates: RateTable) -> WeightTable:
    # weight = ln(1/rate); a negative-weight cycle is a product of rates above 1
    check_square(rates, "rate table")
    weights: WeightTable = []
    for i, row in enumerate(rates):
        for j, r in enumerate(row):
            if float(r) < 0:
                raise MalformedTableError(f"rate table has negative rate {r} at row {i}, column {j}")
        weights.append([math.log(1.0 / float(r)) if float(r) not in NO_EDGE_RATES else math.inf for r in row])
    return weights

def build_weighted_graph(weights: WeightTable, index: CurrencyIndex, rates: RateTable = None) -> nx.DiGraph:
    n = check_square(weights, "weight table")
    index.check_size(n)
    g = nx.DiGraph()
    g.add_nodes_from(index)
    for i, row in enumerate(weights):
        for j, w in enumerate(row):
            if w == math.inf:
                continue
            attrs = {"weight": w}
            if rates is not None:
                attrs["rate"] = float(rates[i][j])
            g.add_edge(index.currency_at(i), index.currency_at(j), **attrs)
    return g

def build_connectivity_graph(rates: RateTable, index: CurrencyIndex) -> nx.Graph:
    # undirected: one edge per pair that trades in either direction, any non-zero rate counts
    n = check_square(rates, "rate table")
    index.check_size(n)
    g = nx.Graph()
    g.add_nodes_from(index)
    for i in range(n):
        for j in range(n):
            if i == j or float(rates[i][j]) == 0.0:
                continue
            g.add_edge(index.currency_at(i), index.currency_at(j))
    return g

def load_rate_table(path: str):
    """Read a rate table CSV; header row and first column both list the currencies."""
    df = pd.read_csv(path, index_col=0)
    df.columns = [str(c).strip() for c in df.columns]
    df.index = [str(c).strip() for c in df.index]
    if list(df.columns) != list(df.index):
        raise MalformedTableError(f"{path}: header {list(df.columns)} does not match rows {list(df.index)}")
    df = df.apply(pd.to_numeric, errors="raise").fillna(0.0)
    rates = df.values.astype(float).tolist()
    check_square(rates, path)
    return list(df.index), rates
