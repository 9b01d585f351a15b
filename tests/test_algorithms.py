# tests/test_algorithms.py
"""
Tests for the six Nth-regular-number algorithms.

Run: pytest -v
"""

from __future__ import annotations

import math

import pytest

from regnum import (
    get_regular_compact,
    get_regular_divide_conquer,
    get_regular_factor,
    get_regular_fast_geometric,
    get_regular_log_set,
    get_regular_set,
)
from regnum.algorithms import geometric
from regnum.algorithms.geometric import band_candidates, estimate_band
from regnum.runtime import APPLY
from regnum.utility import coef2log2

CANONICAL = [1, 2, 3, 4, 5, 6, 8, 9, 10, 12, 15, 16, 18, 20, 24]

EXACT = [get_regular_factor, get_regular_set]
LOG2 = [get_regular_log_set, get_regular_compact]
TRIPLE = [get_regular_divide_conquer, get_regular_fast_geometric]

# (n, [i, j, k]) with 2^i * 3^j * 5^k the Nth regular number
KNOWN_TRIPLES = [
    (1000, [14, 0, 5]),        # 51200000
    (1691, [5, 12, 3]),        # 2125764000
]

# ---------- helpers -----------------------------------------------------------


def _value(coef) -> int:
    i, j, k = coef
    return 2**i * 3**j * 5**k


# ---------- canonical prefix --------------------------------------------------


@pytest.mark.parametrize("fn", EXACT, ids=lambda f: f.__name__)
@pytest.mark.parametrize("n", range(1, 16))
def test_exact_methods_match_canonical_prefix(fn, n):
    assert fn(n) == CANONICAL[n - 1]


@pytest.mark.parametrize("fn", LOG2, ids=lambda f: f.__name__)
@pytest.mark.parametrize("n", range(1, 16))
def test_log2_methods_match_canonical_prefix(fn, n):
    assert fn(n) == pytest.approx(math.log2(CANONICAL[n - 1]), rel=1e-12, abs=1e-12)


@pytest.mark.parametrize("fn", TRIPLE, ids=lambda f: f.__name__)
@pytest.mark.parametrize("n", range(1, 16))
def test_triple_methods_match_canonical_prefix(fn, n):
    log2_value, coef = fn(n)
    assert _value(coef) == CANONICAL[n - 1]
    assert log2_value == pytest.approx(math.log2(CANONICAL[n - 1]), rel=1e-12, abs=1e-12)


# ---------- boundaries --------------------------------------------------------


def test_first_term_is_one_everywhere(capsys):
    assert get_regular_factor(1) == 1
    assert get_regular_set(1) == 1
    assert get_regular_log_set(1) == 0.0
    assert get_regular_compact(1) == 0.0
    assert get_regular_divide_conquer(1) == (0.0, [0, 0, 0])
    assert get_regular_fast_geometric(1) == (0.0, [0, 0, 0])
    # the geometric method says why 1 is special-cased
    assert "Special inclusion of 1" in capsys.readouterr().out


def test_second_term_is_two_everywhere():
    assert get_regular_factor(2) == 2
    assert get_regular_set(2) == 2
    assert get_regular_log_set(2) == 1.0
    assert get_regular_compact(2) == 1.0
    assert get_regular_divide_conquer(2) == (1.0, [1, 0, 0])
    assert get_regular_fast_geometric(2) == (1.0, [1, 0, 0])


@pytest.mark.parametrize("n,coef", KNOWN_TRIPLES, ids=[str(n) for n, _ in KNOWN_TRIPLES])
def test_known_terms(n, coef):
    # brute force is checked at 1000 separately, under the slow marker
    value = _value(coef)
    assert get_regular_set(n) == value
    assert get_regular_log_set(n) == pytest.approx(math.log2(value), rel=1e-12)
    assert get_regular_compact(n) == pytest.approx(math.log2(value), rel=1e-12)
    assert get_regular_divide_conquer(n)[1] == coef
    assert get_regular_fast_geometric(n)[1] == coef


@pytest.mark.slow
def test_brute_force_reaches_thousandth_term():
    # walks all 51.2 million integers up to the answer
    assert get_regular_factor(1000) == _value([14, 0, 5])


def test_millionth_term_from_exact_methods():
    expected = [55, 47, 64]
    log2_dc, coef_dc = get_regular_divide_conquer(1_000_000)
    log2_geo, coef_geo = get_regular_fast_geometric(1_000_000)
    assert coef_dc == expected
    assert coef_geo == expected
    assert log2_dc == pytest.approx(coef2log2(expected), rel=1e-12)
    assert log2_geo == pytest.approx(log2_dc, rel=1e-12)


# ---------- error paths -------------------------------------------------------


def test_brute_force_refuses_large_n(capsys):
    assert get_regular_factor(1501) == 0
    out = capsys.readouterr().out
    assert "n <= 1500" in out


def test_brute_force_limit_follows_profile(capsys):
    APPLY({"ALGORITHMS": {"BRUTE_FORCE_LIMIT": 10}})
    assert get_regular_factor(11) == 0
    assert "n <= 10" in capsys.readouterr().out
    assert get_regular_factor(10) == 12


def test_brute_force_agrees_with_frontier_on_small_n():
    # brute force walks every integer up to the answer, so keep the value small
    for n in (100, 250, 400):
        assert get_regular_factor(n) == get_regular_set(n)


@pytest.mark.parametrize("n", [0, -1, -1000])
def test_geometric_rejects_non_positive_ordinal(n, capsys):
    assert get_regular_fast_geometric(n) == (-1.0, [0, 0, 0])
    assert "N must be an integer > 0" in capsys.readouterr().out


@pytest.mark.parametrize("fn,sentinel", [
    (get_regular_factor, 0),
    (get_regular_set, 0),
    (get_regular_log_set, -1.0),
    (get_regular_compact, -1.0),
    (get_regular_divide_conquer, (-1.0, [0, 0, 0])),
], ids=lambda v: getattr(v, "__name__", repr(v)))
def test_non_positive_ordinal_sentinels(fn, sentinel, capsys):
    assert fn(0) == sentinel
    assert "N must be an integer > 0" in capsys.readouterr().out


def test_geometric_band_too_narrow_at_top(capsys):
    # the published band under-covers this ordinal: fewer than n triples lie below `high`
    _, low, high = estimate_band(849)
    count, _ = band_candidates(low, high)
    assert count < 849
    assert get_regular_fast_geometric(849) == (0.0, [0, 0, 0])
    assert "high estimate needs to be higher" in capsys.readouterr().out


def test_geometric_band_too_narrow_at_bottom(monkeypatch, capsys):
    # log2 band [3.9, 4.0]: 12 terms lie at or below 16 but only 16 and 15 sit
    # inside it, so the 10th term (12) falls under the band
    monkeypatch.setattr(geometric, "estimate_band", lambda n: (3.95, 3.9, 4.0))
    count, kept = band_candidates(3.9, 4.0)
    assert count == 12
    assert sorted(coef for _, coef in kept) == [[0, 1, 1], [4, 0, 0]]
    assert get_regular_fast_geometric(10) == (0.0, [0, 0, 0])
    assert "low estimate needs to be lower" in capsys.readouterr().out


def test_set_warns_past_uint64(capsys):
    # the 30000th term is near 2^84, well past the unsigned 64-bit range
    _, coef = get_regular_divide_conquer(30_000)
    value = get_regular_set(30_000)
    assert value == _value(coef)
    assert value > 2**64 - 1
    assert "unsigned 64-bit" in capsys.readouterr().out


def test_set_uint64_warning_can_be_disabled(capsys):
    APPLY({"ALGORITHMS": {"WARN_UINT64": False}})
    get_regular_set(30_000)
    assert "64-bit" not in capsys.readouterr().out


# ---------- buffer compaction -------------------------------------------------


@pytest.mark.parametrize("n", [50, 500, 3000])
def test_compaction_does_not_change_results(n):
    loose = get_regular_compact(n, compact_at=10**9)
    tight = get_regular_compact(n, compact_at=4)
    assert tight == loose

    assert get_regular_divide_conquer(n, compact_at=4) == get_regular_divide_conquer(n, compact_at=10**9)


def test_compaction_threshold_from_profile():
    APPLY({"ALGORITHMS": {"COMPACT_AT": 2}})
    assert get_regular_compact(2000) == pytest.approx(get_regular_log_set(2000), rel=1e-12)
    assert get_regular_divide_conquer(2000)[1] == get_regular_fast_geometric(2000)[1]

