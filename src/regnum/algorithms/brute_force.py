# -----------------------------------------------------------------------------
#  brute_force.py
#  Nth regular number by trial factoring every integer
# -----------------------------------------------------------------------------

from __future__ import annotations

from regnum.registry import algorithm
from regnum.runtime import CFG
from regnum.utility import DEFAULT_BRUTE_FORCE_LIMIT, console_warning, report_invalid_ordinal, strip_smooth


@algorithm(
    label="get_regular_factor",
    selector=1,
    kind="int",
    description="Scan 1, 2, 3, ... and keep the numbers whose factors are all 2, 3 or 5",
    limit=DEFAULT_BRUTE_FORCE_LIMIT,
    limit_setting="ALGORITHMS.BRUTE_FORCE_LIMIT",
)
def get_regular_factor(n: int, *, limit: int | None = None) -> int:
    """
    Simplest method: test every integer by stripping its 2s, 3s and 5s.

    Work grows with the *value* of the Nth term, not with n, so ordinals above
    `limit` (profile ALGORITHMS.BRUTE_FORCE_LIMIT) are refused with a warning
    and the sentinel 0.
    """
    if limit is None:
        limit = int(CFG("ALGORITHMS.BRUTE_FORCE_LIMIT", DEFAULT_BRUTE_FORCE_LIMIT))
    if n < 1:
        report_invalid_ordinal()
        return 0
    if n > limit:
        console_warning(f"Run with n <= {limit} or computer will be too hot.")
        return 0

    series = [1]
    num = 2
    while len(series) < n:
        if strip_smooth(num) == 1:
            series.append(num)
        num += 1
    # last value placed into series
    return series[-1]
