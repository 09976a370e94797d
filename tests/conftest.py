import pytest
from fxgraph.samples import BRIDGE_RATES, BRIDGE_VERTICES, CURRENCIES, EXCHANGE_RATES

SPREAD = 0.99
PRICES = {"AUD": 0.65, "EUR": 1.10, "NZD": 0.60, "USD": 1.00}


@pytest.fixture
def consistent_table():
    """Rates derived from one price per currency minus a spread: every cycle loses money."""
    names = list(PRICES)
    rates = [[1.0 if a == b else PRICES[a] / PRICES[b] * SPREAD for b in names] for a in names]
    return names, rates


@pytest.fixture
def triangle_table():
    # A -> B -> C -> A doubles each time; D only sells into A and is on no cycle
    names = ["A", "B", "C", "D"]
    rates = [
        [0.0, 2.0, 0.0, 0.0],
        [0.0, 0.0, 2.0, 0.0],
        [2.0, 0.0, 0.0, 0.0],
        [0.5, 0.0, 0.0, 0.0],
    ]
    return names, rates


@pytest.fixture
def sample_table():
    return list(CURRENCIES), [row[:] for row in EXCHANGE_RATES]


@pytest.fixture
def bridge_table():
    return list(BRIDGE_VERTICES), [row[:] for row in BRIDGE_RATES]
