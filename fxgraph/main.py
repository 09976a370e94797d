import os
import sys
import argparse
import networkx as nx
import pandas as pd
from .arbitrage_graph import (CurrencyIndex, build_connectivity_graph, build_weighted_graph,
                              load_rate_table, rates_to_weights)
from .bellman_ford import bellman_ford, best_conversions
from .bridges import find_bridges
from .config import load_settings
from .floyd_warshall import ArbitrageFinder
from .report import arbitrage_frame, bridge_frame, conversion_frame, distance_frame, predecessor_frame
from .samples import SAMPLES

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Best conversions, arbitrage cycles and bridge exchanges in a currency rate table.")
    p.add_argument('--rates', type=str, default=None, help='CSV rate table (header row and first column list the currencies)')
    p.add_argument('--sample', choices=sorted(SAMPLES), default=None, help='Use a built-in sample table instead of --rates')
    p.add_argument('--source', type=str, default=None, help='Source currency for best conversions (default from .env, else the first currency)')
    p.add_argument('--bridge-source', type=str, default=None, help='Start vertex of the bridge search (default: first currency)')
    p.add_argument('--show-matrices', action='store_true', help='Print the all-pairs distance and predecessor matrices')
    p.add_argument('--export-dir', type=str, default=None, help='Directory to export report CSVs into')
    return p.parse_args(argv)

def show(title: str, df: pd.DataFrame, empty: str) -> None:
    print(f"\n{title}")
    if df.empty:
        print(f"[i] {empty}")
    else:
        print(df.to_string(index=False))

def export(df: pd.DataFrame, export_dir: str, name: str) -> None:
    os.makedirs(export_dir, exist_ok=True)
    path = os.path.join(export_dir, name)
    df.to_csv(path, index=False)
    print(f"[i] Exported {path}")

def run(argv=None) -> int:
    settings = load_settings()
    args = parse_args(argv)

    rates_csv = args.rates or settings.rates_csv
    if args.sample or not rates_csv:
        sample = args.sample or 'currencies'
        currencies, rates = SAMPLES[sample]
        print(f"[i] Using sample table '{sample}' ({len(currencies)} currencies)")
    else:
        currencies, rates = load_rate_table(rates_csv)
        print(f"[i] Loaded {len(currencies)} currencies from {rates_csv}")

    index = CurrencyIndex(currencies)
    weights = rates_to_weights(rates)
    graph = build_weighted_graph(weights, index, rates)
    print(f"[i] Weighted graph: {graph.number_of_nodes()} currencies, {graph.number_of_edges()} conversions")

    source = args.source or settings.source_currency or index.currency_at(0)
    if source not in index:
        raise ValueError(f"source currency {source!r} not in table {list(index)}")
    result = bellman_ford(graph, source)
    if result.negative_cycle:
        print(f"[!] Negative cycle reachable from {source}: some best conversions are undefined")
    conversions = conversion_frame(result, best_conversions(result))
    show(f"Best conversions from {source}:", conversions, "No other currencies.")

    finder = ArbitrageFinder(weights, index)
    if args.show_matrices or settings.show_matrices:
        show("Shortest path weights:", distance_frame(finder).reset_index(), "Empty table.")
        show("Previous vertices on shortest paths:", predecessor_frame(finder).reset_index(), "Empty table.")
    arbitrage = arbitrage_frame(finder)
    show("Arbitrage found:", arbitrage, "No arbitrage cycles in this table.")

    connectivity = build_connectivity_graph(rates, index)
    if not nx.is_connected(connectivity):
        print(f"[!] Currencies form {nx.number_connected_components(connectivity)} separate groups: bridges only cover the group holding the search start")
    bridge_source = args.bridge_source or settings.bridge_source or index.currency_at(0)
    bridges = bridge_frame(find_bridges(connectivity, bridge_source))
    show(f"Bridges (depth-first search from {bridge_source}):", bridges, "No bridges.")

    export_dir = args.export_dir or settings.export_dir
    if export_dir:
        export(conversions, export_dir, 'conversions.csv')
        export(arbitrage, export_dir, 'arbitrage.csv')
        export(bridges, export_dir, 'bridges.csv')
    return 0

def main():
    try:
        sys.exit(run())
    except (ValueError, OSError) as e:
        print(f"[!] {e}")
        sys.exit(1)

if __name__ == '__main__':
    main()
