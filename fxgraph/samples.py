# rate[i][j] = units of currency j bought by one unit of currency i
CURRENCIES = ["AUD", "EUR", "MXN", "NZD", "USD"]
EXCHANGE_RATES = [
    [1.0, 0.61, 0.0, 1.08, 0.72],
    [1.64, 1.0, 0.0, 1.77, 1.18],
    [0.0, 0.0, 1.0, 0.0, 0.047],
    [0.92, 0.56, 0.0, 1.0, 0.67],
    [1.39, 0.85, 21.19, 1.5, 1.0],
]

# connectivity only: 1.0 = the two currencies can be exchanged
BRIDGE_VERTICES = list("abcdefghijklm")
BRIDGE_RATES = [
    # a    b    c    d    e    f    g    h    i    j    k    l    m
    [0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0],  # a
    [1.0, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0],  # b
    [0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0],  # c
    [0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0],  # d
    [0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 0.0, 1.0, 0.0, 1.0, 0.0, 0.0, 0.0],  # e
    [0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0],  # f
    [0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0],  # g
    [0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0],  # h
    [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0],  # i
    [0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0],  # j
    [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 1.0, 0.0],  # k
    [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0, 1.0],  # l
    [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 1.0, 0.0],  # m
]

SAMPLES = {
    "currencies": (CURRENCIES, EXCHANGE_RATES),
    "bridges": (BRIDGE_VERTICES, BRIDGE_RATES),
}
