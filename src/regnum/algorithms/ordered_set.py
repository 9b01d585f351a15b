# -----------------------------------------------------------------------------
#  ordered_set.py
#  Frontier generation: pop the smallest candidate, push its x2, x3, x5
# -----------------------------------------------------------------------------

from __future__ import annotations

import heapq

from regnum.registry import algorithm
from regnum.runtime import CFG
from regnum.utility import (
    LB3,
    LB5,
    UINT64_MAX,
    console_warning,
    log2_lt,
    report_invalid_ordinal,
    resolve_tolerance,
)


@algorithm(
    label="get_regular_set",
    selector=2,
    kind="int",
    description="Ordered frontier of exact integers seeded with 1",
)
def get_regular_set(n: int) -> int:
    """
    Start from 1 and repeatedly replace the smallest candidate by its three
    children. The heap may hold the same child twice (6 = 2*3 = 3*2); equal
    entries are dropped when they reach the top, which keeps the popped
    sequence unique and ascending.
    """
    if n < 1:
        report_invalid_ordinal()
        return 0

    frontier = [1]
    while n != 1:
        smallest = heapq.heappop(frontier)
        while frontier and frontier[0] == smallest:
            heapq.heappop(frontier)
        heapq.heappush(frontier, smallest * 2)
        heapq.heappush(frontier, smallest * 3)
        heapq.heappush(frontier, smallest * 5)
        n -= 1

    result = frontier[0]
    if result > UINT64_MAX and CFG("ALGORITHMS.WARN_UINT64", True):
        console_warning(
            f"result needs {result.bit_length()} bits and would overflow an unsigned 64-bit integer."
        )
    return result


@algorithm(
    label="get_regular_log_set",
    selector=3,
    kind="log2",
    description="Ordered frontier of log2 values with a relative tie tolerance",
)
def get_regular_log_set(n: int, *, tol: float | None = None) -> float:
    """
    Same frontier as get_regular_set, but every value is its log2, so nothing
    overflows. Two values closer than `tol` (relative) are one number reached
    along different multiplication orders.
    """
    if n < 1:
        report_invalid_ordinal()
        return -1.0
    tol = resolve_tolerance(tol)

    frontier = [0.0]
    while n != 1:
        smallest = heapq.heappop(frontier)
        while frontier and not log2_lt(smallest, frontier[0], tol):
            heapq.heappop(frontier)
        heapq.heappush(frontier, smallest + 1.0)
        heapq.heappush(frontier, smallest + LB3)
        heapq.heappush(frontier, smallest + LB5)
        n -= 1
    return frontier[0]
