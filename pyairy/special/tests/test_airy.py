import warnings
from concurrent.futures import ThreadPoolExecutor
from math import isfinite, isnan, pi

import mpmath
import numpy as np
from numpy.testing import assert_allclose
import pytest
from scipy import special

from pyairy.options import airy_options
from pyairy.special import (airy, airy_ai, airy_aip, airy_bi, airy_bip,
                            AiryDone, AiryResult, ConvergenceError)
from pyairy.special import _airy_coeffs as cf


# Written by Eric J. Whitney, October 2026.


# ======================================================================

def _mp_airy(x: float) -> tuple[float, float, float, float]:
    """High precision reference values (Ai, Ai', Bi, Bi')."""
    with mpmath.workdps(40):
        x_mp = mpmath.mpf(x)
        return (float(mpmath.airyai(x_mp)),
                float(mpmath.airyai(x_mp, derivative=1)),
                float(mpmath.airybi(x_mp)),
                float(mpmath.airybi(x_mp, derivative=1)))


# Points covering all branches and both sides of each branch point.
_x_all = sorted(set(np.round(np.linspace(-10.0, 10.0, 81), 12)) |
                {-2.09, -2.0899999, 2.0899999, 2.09, 8.3203352,
                 8.3203354})


# -- Known Values ------------------------------------------------------

def test_airy_zero():
    """
    Values at the origin are the defining constants.
    """
    res = airy(0.0)
    assert isinstance(res, AiryResult)
    assert res.status == 0
    assert res.ai == pytest.approx(0.355028053887817, abs=1e-15)
    assert res.aip == pytest.approx(-0.258819403792807, abs=1e-15)
    assert res.bi == pytest.approx(0.614926627446001, abs=1e-15)
    assert res.bip == pytest.approx(0.448288357353826, abs=1e-15)

    assert res.ai == cf.C1
    assert res.aip == -cf.C2
    assert res.bi == cf.SQRT3 * cf.C1
    assert res.bip == cf.SQRT3 * cf.C2


@pytest.mark.parametrize("x", _x_all)
def test_airy_vs_cephes(x: float):
    """
    Compare against the Cephes routine as wrapped by SciPy (used by
    SciPy for real |x| <= 10).
    """
    res = airy(x)
    ref = special.airy(x)
    assert res.status == 0
    assert_allclose(res[:4], ref, rtol=1e-13, atol=1e-14)


@pytest.mark.parametrize("x", _x_all)
def test_airy_vs_mpmath(x: float):
    """
    Check accuracy against high precision values.  Tolerances are a
    little looser than the documented peak errors.
    """
    ai, aip, bi, bip, _ = airy(x)
    ai_ref, aip_ref, bi_ref, bip_ref = _mp_airy(x)

    if x >= 0.0:
        # Ai, Ai' relative criterion for positive x.
        assert ai == pytest.approx(ai_ref, rel=1e-13, abs=0)
        assert aip == pytest.approx(aip_ref, rel=1e-13, abs=0)
    else:
        assert ai == pytest.approx(ai_ref, rel=0, abs=1e-14)
        assert aip == pytest.approx(aip_ref, rel=0, abs=2e-14)

    assert bi == pytest.approx(bi_ref, rel=2e-14, abs=2e-14)
    assert bip == pytest.approx(bip_ref, rel=2e-14, abs=2e-14)


@pytest.mark.parametrize("x", [-10.0, -6.5, -2.09, -1.0, 0.0, 1.0,
                               2.09, 4.0, 8.5])
def test_wronskian(x: float):
    """
    Ai(x) Bi'(x) - Ai'(x) Bi(x) = 1 / π for all x.
    """
    ai, aip, bi, bip, _ = airy(x)
    assert ai * bip - aip * bi == pytest.approx(1 / pi, abs=1e-12)


# -- Branch Points -----------------------------------------------------

def test_airy_pos_branch_continuity():
    """
    No jump between the power series and the asymptotic forms at x =
    2.09 (Ai, Ai') and x = 8.3203353 (Bi, Bi').  Checked using a central
    difference straddling each branch point.
    """
    δ = 1e-6
    for x in (cf.X_POS_ASYMP, cf.X_BI_ASYMP):
        lo, mid, hi = airy(x - δ), airy(x), airy(x + δ)
        jump_ai = (hi.ai - lo.ai) - 2 * δ * mid.aip
        jump_bi = (hi.bi - lo.bi) - 2 * δ * mid.bip
        assert abs(jump_ai) < 1e-10 * max(abs(mid.ai), 1.0)
        assert abs(jump_bi) < 1e-10 * max(abs(mid.bi), 1.0)


def test_airy_series_matches_pos_asymp():
    """
    At x = 2.09 the power series and the asymptotic form of Ai give the
    same result.
    """
    from pyairy.special.airy import _ai_bi_series

    x = 2.09
    f, g = _ai_bi_series(x, x * x * x, 500)
    assert cf.C1 * f - cf.C2 * g == pytest.approx(airy(x).ai, rel=1e-10)

    x = 2.0899999
    f, g = _ai_bi_series(x, x * x * x, 500)
    assert cf.C1 * f - cf.C2 * g == pytest.approx(airy(x).ai, rel=1e-15)


def test_airy_neg_asymp_boundary():
    """
    The asymptotic form for negative x is accurate right up to its
    limit at x = -2.09 (which itself uses the power series).
    """
    from pyairy.special.airy import _airy_neg_asymp

    res_asymp = _airy_neg_asymp(-2.09)
    res_series = airy(-2.09)
    ref = special.airy(-2.09)
    assert_allclose(res_asymp[:4], ref, rtol=0, atol=2e-14)
    assert_allclose(res_asymp[:4], res_series[:4], rtol=0, atol=2e-14)


def test_airy_domain_flags():
    """
    Check which branches compute which values by limiting the power
    series to a single term.  This fails to converge for any x that
    requires the series.
    """
    with airy_options(max_series_terms=1):
        # Fully asymptotic; power series not required.
        for x in (-20.0, -2.1, 8.4, 25.0):
            res = airy(x)
            assert res.status == 0

        # x = 0 converges immediately.
        assert airy(0.0).status == 0

        # Power series required for everything or for Bi, Bi' only.
        for x in (-2.09, -1.0, 1.0, 2.09, 5.0, 8.3203353):
            with pytest.raises(ConvergenceError):
                airy(x)


@pytest.mark.parametrize("x", [2.09, 3.0, 5.0, 7.5, 8.3203353])
def test_airy_fall_through(x: float):
    """
    Between 2.09 and 8.3203353 Ai and Ai' come from the asymptotic form
    and Bi, Bi' from the power series.  All must be finite and
    non-zero.
    """
    res = airy(x)
    assert res.status == 0
    for val in res[:4]:
        assert isfinite(val) and val != 0.0

    assert res.ai > 0.0 and res.aip < 0.0
    assert res.bi > 0.0 and res.bip > 0.0
    assert_allclose(res[:4], special.airy(x), rtol=1e-13)


# -- Range Limits ------------------------------------------------------

def test_airy_overflow():
    """
    Only x > 25.77 is out of range; results are saturated.
    """
    res = airy(np.nextafter(cf.MAXAIRY, np.inf))
    assert res == (0.0, 0.0, cf.MAXNUM, cf.MAXNUM, -1)
    assert res.bi == np.finfo(float).max

    res = airy(cf.MAXAIRY)
    assert res.status == 0
    assert 0.0 < res.ai < 1e-37
    assert res.aip < 0.0
    assert 1e36 < res.bi < cf.MAXNUM
    assert 1e36 < res.bip < cf.MAXNUM

    res = airy(np.inf)
    assert res == (0.0, 0.0, cf.MAXNUM, cf.MAXNUM, -1)


def test_airy_large_negative():
    """
    Large negative arguments remain in the asymptotic branch; values
    decay as |x|^-1/4 (derivatives grow as |x|^1/4).
    """
    for x in (-50.0, -1e3, -1e6):
        ai, aip, bi, bip, status = airy(x)
        assert status == 0
        envelope = (-x) ** -0.25 / np.sqrt(pi)
        assert np.hypot(ai, bi) == pytest.approx(envelope, rel=1e-5)
        assert np.hypot(aip, bip) == pytest.approx(
            (-x) ** 0.25 / np.sqrt(pi), rel=1e-5)


@pytest.mark.parametrize("x", [np.nan, -np.inf, -1e300])
def test_airy_nan(x: float):
    res = airy(x)
    assert res.status == 0
    assert all(isnan(val) for val in res[:4])


def test_airy_args():
    # Numpy and integer scalars are accepted.
    assert airy(np.float64(1.5)) == airy(1.5)
    assert airy(np.array(-3.0)) == airy(-3.0)
    assert airy(2) == airy(2.0)

    # Batched evaluation is not supported.
    with pytest.raises(TypeError):
        airy([1.0, 2.0])
    with pytest.raises(TypeError):
        airy(np.array([1.0]))


# -- Purity ------------------------------------------------------------

def test_airy_repeatable():
    for x in _x_all:
        first = airy(x)
        for _ in range(3):
            assert airy(x) == first


def test_airy_threads():
    expected = [airy(x) for x in _x_all]
    with ThreadPoolExecutor(max_workers=8) as pool:
        for _ in range(5):
            assert list(pool.map(airy, _x_all)) == expected


# -- Single Value Functions --------------------------------------------

def test_airy_single():
    for x in (-4.0, 0.5, 3.0, 12.0):
        ai, aip, bi, bip, _ = airy(x)
        assert airy_ai(x) == ai
        assert airy_aip(x) == aip
        assert airy_bi(x) == bi
        assert airy_bip(x) == bip


def test_airy_single_overflow():
    with pytest.warns(RuntimeWarning, match="saturated"):
        assert airy_ai(30.0) == 0.0
    with pytest.warns(RuntimeWarning):
        assert airy_bip(30.0) == cf.MAXNUM

    with airy_options(warn_overflow=False):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert airy_bi(30.0) == cf.MAXNUM
            assert airy_aip(30.0) == 0.0


# -- Data --------------------------------------------------------------

def test_airy_tables():
    # Sizes match the degree of each approximation.
    sizes = {'AN': 8, 'AD': 8, 'APN': 8, 'APD': 8,
             'BN16': 5, 'BD16': 5, 'BPPN': 5, 'BPPD': 5,
             'AFN': 9, 'AFD': 9, 'AGN': 11, 'AGD': 10,
             'APFN': 9, 'APFD': 9, 'APGN': 11, 'APGD': 10}
    for name, size in sizes.items():
        table = getattr(cf, name)
        assert table.shape == (size,)
        assert table.dtype == np.float64
        with pytest.raises(ValueError):
            table[0] = 0.0  # Read-only.

    # Flag values match the bit layout.
    assert AiryDone.AI.value == 1 and AiryDone.BI.value == 2
    assert AiryDone.AIP.value == 4 and AiryDone.BIP.value == 8
    assert AiryDone.ALL.value == 15
    assert (AiryDone.AI | AiryDone.AIP).value == 5

    # Branch point for Bi corresponds to ζ = 16.
    x = cf.X_BI_ASYMP
    assert 2.0 * x * np.sqrt(x) / 3.0 == pytest.approx(16.0, abs=1e-6)

# ----------------------------------------------------------------------
