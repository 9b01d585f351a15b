# -----------------------------------------------------------------------------
#  compact.py
#  Three multiplier lineages reading back into one sliding series buffer
# -----------------------------------------------------------------------------

from __future__ import annotations

from regnum.registry import algorithm
from regnum.utility import (
    LOG2_BASES,
    log2_close,
    report_invalid_ordinal,
    resolve_compact_at,
    resolve_tolerance,
    window_exhausted,
)


@algorithm(
    label="get_regular_compact",
    selector=4,
    kind="log2",
    description="Three candidates (x2, x3, x5) with cursors into a compacted log2 series",
)
def get_regular_compact(n: int, *, tol: float | None = None, compact_at: int | None = None) -> float:
    """
    Single loop over n. Each lineage (x2, x3, x5) holds one candidate: the
    product of its base with the series term under its cursor. The smallest
    candidate is the next term; every lineage that produced it moves on.

    The series buffer only has to reach back to the slowest cursor (the x5
    lineage), so the prefix below it is dropped once `window_exhausted` says
    so and all cursors are rebased.
    """
    if n < 1:
        report_invalid_ordinal()
        return -1.0
    if n == 1:
        return 0.0
    tol = resolve_tolerance(tol)
    compact_at = resolve_compact_at(compact_at)

    # children of the first term (1) seed the lineages; series starts at term 2
    candidates = list(LOG2_BASES)
    cursors = [0, 0, 0]
    series: list[float] = []

    while n != 1:
        lowest = min(cursors)
        if window_exhausted(lowest, len(series), compact_at):
            del series[:lowest]
            cursors = [c - lowest for c in cursors]

        current = min(candidates)
        series.append(current)
        for i, base in enumerate(LOG2_BASES):
            if log2_close(candidates[i], current, tol):
                candidates[i] = series[cursors[i]] + base
                cursors[i] += 1
        n -= 1
    return series[-1]
