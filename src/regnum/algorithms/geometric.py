# -----------------------------------------------------------------------------
#  geometric.py
#  Nth regular number from the lattice-point count below a log2 threshold
# -----------------------------------------------------------------------------
"""
The number of regular numbers below N is close to

           (log2(N * sqrt(30)))^3
    n  =  -----------------------
           6 * log2(3) * log2(5)

(the volume of the tetrahedron i + j*log2(3) + k*log2(5) <= log2(N), with a
boundary correction). Solving for log2(N) estimates the Nth term:

    estval = (6 * log2(3) * log2(5) * n)^(1/3) - log2(sqrt(30))

and the term is reported to lie within estval +- 1/estval. Counting every
triple below the top of that band tells us how far below the top the Nth term
sits, so only the triples inside the band need sorting.
"""

from __future__ import annotations

import math

from regnum.registry import algorithm
from regnum.utility import LB3, LB5, console_error, console_note, report_invalid_ordinal

_LOG2_SQRT30 = math.log2(math.sqrt(30.0))


def estimate_band(n: int) -> tuple[float, float, float]:
    """Return (estval, low, high) in log2 space for ordinal n >= 1."""
    estval = (6.0 * LB3 * LB5 * n) ** (1.0 / 3.0) - _LOG2_SQRT30
    high = estval + 1.0 / estval
    low = 2.0 * estval - high
    return estval, low, high


def band_candidates(low: float, high: float) -> tuple[int, list[tuple[float, list[int]]]]:
    """
    Walk every (j, k) column under `high` and take its largest i.

    Returns (count, kept): `count` is the number of triples with log2 <= high,
    `kept` the column tops with log2 >= low as (log2, [i, j, k]).
    """
    count = 0
    kept: list[tuple[float, list[int]]] = []
    kmax = int(high / LB5) + 1
    for k in range(kmax):
        fives = LB5 * k
        jmax = int((high - fives) / LB3) + 1
        for j in range(jmax):
            threes = fives + j * LB3
            twos = high - threes
            candidate = threes + math.floor(twos)
            count += int(twos) + 1
            if candidate >= low:
                kept.append((candidate, [int(twos), j, k]))
    return count, kept


@algorithm(
    label="get_regular_fast_geometric",
    selector=6,
    kind="triple",
    description="Estimate log2 of the Nth term, then count lattice points in a narrow band",
)
def get_regular_fast_geometric(n: int) -> tuple[float, list[int]]:
    if n < 1:
        report_invalid_ordinal()
        return -1.0, [0, 0, 0]
    if n < 2:
        console_note("Special inclusion of 1 as first member of series")
        return 0.0, [0, 0, 0]
    if n < 3:
        return 1.0, [1, 0, 0]

    _, low, high = estimate_band(n)
    count, kept = band_candidates(low, high)

    # ensure value came from within search band
    if n > count:
        console_error("high estimate needs to be higher")
        return 0.0, [0, 0, 0]

    # target index of solution when sorted in descending order
    target = count - n
    if target >= len(kept):
        console_error("low estimate needs to be lower")
        return 0.0, [0, 0, 0]

    kept.sort(key=lambda item: item[0], reverse=True)
    log2_value, coef = kept[target]
    return log2_value, coef
