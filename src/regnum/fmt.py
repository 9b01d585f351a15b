# src/regnum/fmt.py
from __future__ import annotations

from collections.abc import Sequence

from regnum.runtime import CFG


def dec_digits(n: int) -> int:
    """Exact decimal digit count without str(); handles n >= 0."""
    n = abs(int(n))
    if n == 0:
        return 1
    # floor(log10(n)) ~= floor(bitlen*log10(2)), 0.30103 ~ log10(2)
    est = int((n.bit_length() * 30103) // 100000)
    # bring into correct decade with at most a couple of steps
    p10 = 10 ** est
    if n < p10:
        while n < p10:
            est -= 1
            p10 //= 10
    else:
        p10 *= 10
        while n >= p10:
            est += 1
            p10 *= 10
    return est + 1


def abbr_int_fast(n: int, head: int = 10, tail: int = 10, threshold: int = 35, ellipsis: str = "…") -> str:
    """Abbreviate very large ints as first<head>…last<tail> without str(n)."""
    n = int(n)
    if n == 0:
        return "0"

    sign = "-" if n < 0 else ""
    a = -n if n < 0 else n

    # If not long enough, fall back to normal str()
    d = dec_digits(a)
    if d <= threshold or head + tail >= d:
        return sign + str(a)

    first = a // 10 ** (d - head)
    last = a % 10 ** tail
    # zero-pad last block to width 'tail'
    return f"{sign}{first}{ellipsis}{last:0{tail}d}"


def abbr_int_cfg(n: int) -> str:
    """abbr_int_fast with the DISPLAY.* settings of the active profile."""
    return abbr_int_fast(
        n,
        head=int(CFG("DISPLAY.NUM_ABBR_HEAD", 10)),
        tail=int(CFG("DISPLAY.NUM_ABBR_TAIL", 10)),
        threshold=int(CFG("DISPLAY.NUM_ABBR_THRESHOLD", 35)),
        ellipsis=str(CFG("DISPLAY.ELLIPSIS", "…")),
    )


def format_log2(value: float, precision: int | None = None) -> str:
    """log2 value with `precision` significant digits (DISPLAY.PRECISION, default 15)."""
    if precision is None:
        precision = int(CFG("DISPLAY.PRECISION", 15))
    return f"{value:.{precision}g}"


def format_triple(coef: Sequence[int]) -> str:
    """Exponents separated by two spaces, e.g. '5  2  1'."""
    return "  ".join(str(int(c)) for c in coef)


def format_seconds(seconds: float) -> str:
    return f"{seconds:.6g}"
