# -----------------------------------------------------------------------------
#  divide_conquer.py
#  Exact exponent triples from two nested two-way merges
# -----------------------------------------------------------------------------

from __future__ import annotations

from regnum.registry import algorithm
from regnum.utility import coef2log2, report_invalid_ordinal, resolve_compact_at, window_exhausted

Triple = tuple[int, int, int]


@algorithm(
    label="get_regular_divide_conquer",
    selector=5,
    kind="triple",
    description="Merge 2*(all terms) with the 3,5-only terms, themselves a merge of 3*(3,5-only terms) and 5^k",
)
def get_regular_divide_conquer(n: int, *, compact_at: int | None = None) -> tuple[float, list[int]]:
    """
    Return (log2, [i, j, k]) of the Nth regular number.

    Every regular number is either 2 * (a regular number) or has no factor 2.
    The numbers without a factor 2 ("jk terms") are in turn either
    3 * (a jk term) or a pure power of 5. So two binary merges replace the
    three-way frontier:

      series     = merge(2 * series,    jk_series)
      jk_series  = merge(3 * jk_series, 5^k)

    Triples are exact integers; log2 values are only used to compare heads,
    so the result is exact for any n the exponents can count to.
    """
    if n < 1:
        report_invalid_ordinal()
        return -1.0, [0, 0, 0]
    if n == 1:
        return 0.0, [0, 0, 0]
    compact_at = resolve_compact_at(compact_at)

    # heads of each chain; both buffers start after their seed term
    coef_ijk: Triple = (1, 0, 0)     # 2 * series[ii]
    coef_jk: Triple = (0, 2, 0)      # 3 * jk_series[jj]
    coef_k: Triple = (0, 0, 1)       # 5^k
    coef_minjk: Triple = (0, 1, 0)   # smallest jk term not yet emitted
    series: list[Triple] = []
    jk_series: list[Triple] = []

    log_ijk = coef2log2(coef_ijk)
    log_jk = coef2log2(coef_jk)
    log_k = coef2log2(coef_k)
    min_jk = coef2log2(coef_minjk)

    ii = jj = 0
    while n != 1:
        if window_exhausted(ii, len(series), compact_at):
            del series[:ii]
            ii = 0

        if log_ijk < min_jk:
            series.append(coef_ijk)
            i, j, k = series[ii]
            ii += 1
            coef_ijk = (i + 1, j, k)
            log_ijk = coef2log2(coef_ijk)
        else:
            series.append(coef_minjk)
            if log_jk < log_k:
                coef_minjk = coef_jk
                i, j, k = jk_series[jj]
                jj += 1
                coef_jk = (i, j + 1, k)
                log_jk = coef2log2(coef_jk)
            else:
                coef_minjk = coef_k
                coef_k = (0, 0, coef_k[2] + 1)
                log_k = coef2log2(coef_k)

            if window_exhausted(jj, len(jk_series), compact_at):
                del jk_series[:jj]
                jj = 0
            jk_series.append(coef_minjk)
            min_jk = coef2log2(coef_minjk)
        n -= 1

    last = series[-1]
    return coef2log2(last), list(last)
