# -----------------------------------------------------------------------------
#  Utility functions
# -----------------------------------------------------------------------------

from __future__ import annotations

import math
from collections.abc import Sequence

import gmpy2
from colorama import Fore, Style
from sympy import factorint

from regnum.runtime import CFG

# log2 of the three prime bases, computed once
LB3 = math.log2(3.0)
LB5 = math.log2(5.0)
LOG2_BASES = (1.0, LB3, LB5)

UINT64_MAX = 2**64 - 1

# Fallbacks when no profile provides ALGORITHMS.*
DEFAULT_LOG_TOLERANCE = 1e-15
DEFAULT_COMPACT_AT = 32768
DEFAULT_BRUTE_FORCE_LIMIT = 1500


class UserInputError(Exception):
    pass


# --- Console messages ---------------------------------------------------------

def console_warning(msg: str) -> None:
    print(f"{Fore.YELLOW}{Style.BRIGHT}Warning:{Style.RESET_ALL} {msg}")


def console_error(msg: str) -> None:
    print(f"{Fore.RED}{Style.BRIGHT}Error:{Style.RESET_ALL} {msg}")


def console_note(msg: str) -> None:
    print(f"{Style.DIM}{msg}{Style.RESET_ALL}")


def report_invalid_ordinal() -> None:
    console_error("N must be an integer > 0")


# --- Settings with keyword overrides -----------------------------------------

def resolve_tolerance(tol: float | None) -> float:
    """Explicit tolerance wins; otherwise the profile value."""
    if tol is not None:
        return float(tol)
    return float(CFG("ALGORITHMS.LOG_TOLERANCE", DEFAULT_LOG_TOLERANCE))


def resolve_compact_at(compact_at: int | None) -> int:
    if compact_at is not None:
        return max(1, int(compact_at))
    return max(1, int(CFG("ALGORITHMS.COMPACT_AT", DEFAULT_COMPACT_AT)))


# --- Shared helpers for the algorithms ---------------------------------------

def coef2log2(coef: Sequence[int]) -> float:
    """log2 of 2^i * 3^j * 5^k for coef = (i, j, k)."""
    return coef[0] + coef[1] * LB3 + coef[2] * LB5


def strip_smooth(val: int) -> int:
    """Divide out every factor 2, then 3, then 5; 1 means val was regular."""
    while val % 2 == 0:
        val //= 2
    while val % 3 == 0:
        val //= 3
    while val % 5 == 0:
        val //= 5
    return val


def log2_close(a: float, b: float, tol: float) -> bool:
    """Relative-epsilon equality, scaled by b."""
    return abs(a - b) < tol * b


def log2_lt(a: float, b: float, tol: float) -> bool:
    """Strict order: a sorts before b only when they are not within tolerance."""
    return (b - a) > tol * a


def window_exhausted(consumed: int, size: int, threshold: int) -> bool:
    """
    True when a series buffer should drop its consumed prefix.

    `consumed` is the lowest live cursor; the prefix below it is dead. Dropping
    it only pays once it is large and outweighs the live tail, so every
    compaction copies fewer items than were appended since the last one.
    """
    return consumed >= threshold and 2 * consumed > size


# --- Exact verification ------------------------------------------------------

def triple_to_int(coef: Sequence[int]) -> gmpy2.mpz:
    """Exact 2^i * 3^j * 5^k (arbitrary precision)."""
    i, j, k = (int(c) for c in coef)
    return gmpy2.mpz(2) ** i * gmpy2.mpz(3) ** j * gmpy2.mpz(5) ** k


def is_regular(value: int) -> bool:
    """True if value >= 1 has no prime factor above 5."""
    value = int(value)
    if value < 1:
        return False
    if value == 1:
        return True
    return set(factorint(value)) <= {2, 3, 5}


def verify_triple(log2_value: float, coef: Sequence[int], rel_tol: float = 1e-9) -> bool:
    """
    Check a (log2, triple) result: the exact value rebuilt from the triple must
    have the reported log2 and be a regular number.
    """
    if len(coef) != 3 or any(int(c) < 0 for c in coef):
        return False
    exact = triple_to_int(coef)
    rebuilt = float(gmpy2.log2(gmpy2.mpfr(exact)))
    if not math.isclose(rebuilt, log2_value, rel_tol=rel_tol, abs_tol=1e-12):
        return False
    return is_regular(int(exact))
