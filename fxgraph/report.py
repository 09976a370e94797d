import math
from typing import List
import pandas as pd
from .bellman_ford import ConversionPath, ShortestPaths
from .dfs import Edge
from .floyd_warshall import NO_PREDECESSOR, UNREACHABLE, ArbitrageFinder

def arbitrage_frame(finder: ArbitrageFinder) -> pd.DataFrame:
    rows = []
    for currency, cycle in finder.arbitrage_cycles.items():
        # weight -> rate: product of rates around the cycle is exp(-value)
        rows.append({
            "currency": currency,
            "value": cycle.value,
            "profit_pct": round((math.exp(-cycle.value) - 1.0) * 100.0, 4),
            "path": finder.arbitrage_paths[currency],
        })
    return pd.DataFrame(rows, columns=["currency", "value", "profit_pct", "path"])

def conversion_frame(result: ShortestPaths, conversions: List[ConversionPath]) -> pd.DataFrame:
    rows = []
    for c in conversions:
        cost = result.distances[c.destination]
        rows.append({
            "source": c.source,
            "destination": c.destination,
            "cost": cost,
            "rate": math.exp(-cost) if cost != math.inf else 0.0,
            "path": " -> ".join(str(v) for v in c.path),
            "status": c.status,
        })
    return pd.DataFrame(rows, columns=["source", "destination", "cost", "rate", "path", "status"])

def bridge_frame(bridges: List[Edge]) -> pd.DataFrame:
    return pd.DataFrame([{"from": u, "to": v} for u, v in bridges], columns=["from", "to"])

def distance_frame(finder: ArbitrageFinder) -> pd.DataFrame:
    labels = list(finder.index)
    return pd.DataFrame(finder.distance_matrix(), index=labels, columns=labels)

def predecessor_frame(finder: ArbitrageFinder) -> pd.DataFrame:
    labels = list(finder.index)

    def label(p: int):
        if p == NO_PREDECESSOR:
            return "-"
        if p == UNREACHABLE:
            return None
        return finder.index.currency_at(p)

    rows = [[label(p) for p in row] for row in finder.predecessor_matrix()]
    return pd.DataFrame(rows, index=labels, columns=labels)
