from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from time import perf_counter
from typing import Any

from colorama import Style

from regnum.registry import Index
from regnum.runtime import current as _rt_current
from regnum.utility import UserInputError

# ---------- Data models -------------------------------------------------------


@dataclass
class Outcome:
    label: str
    selector: int
    n: int
    value: Any      # int | float | (float, [i, j, k]) as returned by the algorithm
    kind: str       # "int" | "log2" | "triple"
    elapsed: float  # seconds

    @property
    def log2(self) -> float | None:
        if self.kind == "log2":
            return float(self.value)
        if self.kind == "triple":
            return float(self.value[0])
        return None

    @property
    def triple(self) -> list[int] | None:
        return list(self.value[1]) if self.kind == "triple" else None


# ---------- Helpers -----------------------------------------------------------

def timed_call(fn: Callable[[int], Any], n: int) -> tuple[Any, float]:
    """Call fn(n) and return (answer, wall-clock seconds)."""
    t1 = perf_counter()
    ans = fn(n)
    t2 = perf_counter()
    return ans, t2 - t1


def _print_debug_timing(label: str, elapsed: float) -> None:
    sys.stderr.write(f"{Style.DIM}[{elapsed * 1000:9.3f} ms]{Style.RESET_ALL} {label}\n")
    sys.stderr.flush()


# ---------- Public API --------------------------------------------------------

def run_algorithm(index: Index, selector: int, n: int) -> Outcome:
    fn = index.get(selector)
    if fn is None:
        valid = ", ".join(str(s) for s in index.selectors)
        raise UserInputError(f"unknown algorithm {selector}; choose one of {valid}.")

    ans, elapsed = timed_call(fn, n)
    if _rt_current().debug:
        _print_debug_timing(index.labels[selector], elapsed)
    return Outcome(
        label=index.labels[selector],
        selector=selector,
        n=n,
        value=ans,
        kind=index.kinds[selector],
        elapsed=elapsed,
    )


def run_all(
    index: Index,
    n: int,
    selectors: Sequence[int] | None = None,
    *,
    before: Callable[[int], None] | None = None,
    after: Callable[[Outcome], None] | None = None,
) -> list[Outcome]:
    """
    Run `selectors` (default: every discovered algorithm) in order.
    `before(selector)` fires ahead of each run, `after(outcome)` as it completes.
    """
    outcomes = []
    for sel in index.selectors if selectors is None else selectors:
        if before is not None:
            before(sel)
        outcome = run_algorithm(index, sel, n)
        if after is not None:
            after(outcome)
        outcomes.append(outcome)
    return outcomes
