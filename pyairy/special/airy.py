"""
Airy Functions (:mod:`pyairy.special.airy`)
============================================

.. currentmodule:: pyairy.special.airy

Airy functions of real argument.  These are the two independent
solutions `Ai(x)` and `Bi(x)` of the differential equation::

    :math:`y''(x) = x y(x)`

together with their first derivatives `Ai'(x)` and `Bi'(x)`.

Evaluation is by power series summation for small `x` and by rational
minimax approximations of the asymptotic expansions for large `|x|`.
This is a port of the Cephes `airy` routine.

Accuracy
--------
Error criterion is absolute when the function <= 1, relative when
the function > 1, except * denotes relative error criterion.  For large
negative `x` the absolute error increases as :math:`x^{1.5}`.  For
large positive `x` the relative error increases as :math:`x^{1.5}`::

    Domain     Function   Trials    Peak        RMS
    -10, 0     Ai         10000     1.6e-15     2.7e-16
      0, 10    Ai         10000     2.3e-14*    1.8e-15*
    -10, 0     Ai'        10000     4.6e-15     7.6e-16
      0, 10    Ai'        10000     1.8e-14*    1.5e-15*
    -10, 10    Bi         30000     4.2e-15     5.3e-16
    -10, 10    Bi'        30000     4.9e-15     7.3e-16

.. autosummary::
    :toctree:

    airy
    airy_ai
    airy_aip
    airy_bi
    airy_bip
    AiryDone
    AiryResult
"""
from __future__ import annotations

import warnings
from enum import Flag
from math import cos, exp, fabs, inf, isfinite, nan, sin, sqrt
from typing import NamedTuple

import numpy as np

from pyairy.numeric.polynomial import eval_poly, eval_poly1
from pyairy.options import get_airy_options
from pyairy.special._airy_coeffs import (
    MAXAIRY, MAXNUM, MACHEP, PI, C1, C2, SQRT3, SQPII,
    X_NEG_ASYMP, X_POS_ASYMP, X_BI_ASYMP,
    AN, AD, APN, APD, BN16, BD16, BPPN, BPPD,
    AFN, AFD, AGN, AGD, APFN, APFD, APGN, APGD)
from pyairy.special.exception import ConvergenceError

# Written by Eric J. Whitney, October 2026.

__all__ = ['airy', 'airy_ai', 'airy_aip', 'airy_bi', 'airy_bip',
           'AiryDone', 'AiryResult']

# Status codes returned by `airy`.
AIRY_OK = 0
AIRY_OVERFLOW = -1


# ======================================================================

class AiryDone(Flag):
    """
    Records which of the four results have already been computed by one
    of the asymptotic branches, so that the power series does not
    overwrite them.
    """
    NONE = 0
    AI = 1
    BI = 2
    AIP = 4
    BIP = 8
    ALL = AI | BI | AIP | BIP


# ----------------------------------------------------------------------

class AiryResult(NamedTuple):
    """
    Values of the Airy functions and derivatives at a single point,
    with a status code.

    Attributes
    ----------
    ai, aip, bi, bip : float
        `Ai(x)`, `Ai'(x)`, `Bi(x)` and `Bi'(x)`.  These are always
        defined, including when the argument was out of range.
    status : int
        ``0`` if successful, ``-1`` if `x` > 25.77 and the results
        have been saturated.
    """
    ai: float
    aip: float
    bi: float
    bip: float
    status: int


# ======================================================================

def airy(x: float) -> AiryResult:
    """
    Compute the Airy functions `Ai(x)`, `Bi(x)` and their derivatives
    `Ai'(x)`, `Bi'(x)` for real `x`.

    Parameters
    ----------
    x : float
        Real argument.

    Returns
    -------
    AiryResult
        Named tuple ``(ai, aip, bi, bip, status)``.  If `x` > 25.77,
        `Bi(x)` would overflow: in this case the results are saturated
        to ``(0, 0, MAXNUM, MAXNUM)`` and ``status = -1``.  Otherwise
        ``status = 0``.

    Raises
    ------
    TypeError
        If `x` is not a scalar.
    ConvergenceError
        If a power series failed to converge within the number of
        terms allowed by the `max_series_terms` option.  This does not
        occur with the default options.

    Notes
    -----
    - Out of range arguments are not an error; check `status`.
    - A `NaN` argument gives `NaN` results.  Negative arguments so
      large that the phase of the oscillation overflows (including
      ``-inf``) also give `NaN` results.

    Examples
    --------
    >>> res = airy(0.0)
    >>> print(f"Ai = {res.ai:.15f}, Bi = {res.bi:.15f}")
    Ai = 0.355028053887817, Bi = 0.614926627446001
    >>> airy(30.0).status
    -1
    """
    if np.ndim(x) != 0:
        raise TypeError(f"Scalar argument required, got ndim = "
                        f"{np.ndim(x)}.")
    x = float(x)

    if x > MAXAIRY:
        return AiryResult(0.0, 0.0, MAXNUM, MAXNUM, AIRY_OVERFLOW)

    if x < X_NEG_ASYMP:
        return _airy_neg_asymp(x)

    done = AiryDone.NONE
    ai = aip = bi = bip = nan

    if x >= X_POS_ASYMP:
        done = AiryDone.AI | AiryDone.AIP
        t = sqrt(x)
        zeta = 2.0 * x * t / 3.0
        g = exp(zeta)
        t = sqrt(t)
        k = 2.0 * t * g
        z = 1.0 / zeta
        f = eval_poly(z, AN) / eval_poly(z, AD)
        ai = SQPII * f / k
        k = -0.5 * SQPII * t / g
        f = eval_poly(z, APN) / eval_poly(z, APD)
        aip = f * k

        if x > X_BI_ASYMP:
            f = z * eval_poly(z, BN16) / eval_poly1(z, BD16)
            k = SQPII * g
            bi = k * (1.0 + f) / t
            f = z * eval_poly(z, BPPN) / eval_poly1(z, BPPD)
            bip = k * t * (1.0 + f)
            return AiryResult(ai, aip, bi, bip, AIRY_OK)

    # Remaining values from the power series.
    max_terms = get_airy_options().max_series_terms
    z = x * x * x

    f, g = _ai_bi_series(x, z, max_terms)
    uf, ug = C1 * f, C2 * g
    if AiryDone.AI not in done:
        ai = uf - ug
    if AiryDone.BI not in done:
        bi = SQRT3 * (uf + ug)

    f, g = _aip_bip_series(x, z, max_terms)
    uf, ug = C1 * f, C2 * g
    if AiryDone.AIP not in done:
        aip = uf - ug
    if AiryDone.BIP not in done:
        bip = SQRT3 * (uf + ug)

    return AiryResult(ai, aip, bi, bip, AIRY_OK)


# ----------------------------------------------------------------------

def airy_ai(x: float) -> float:
    """
    Airy function `Ai(x)`.  See `airy` for details.  If `x` is out of
    range a `RuntimeWarning` is issued (unless disabled using the
    `warn_overflow` option) and zero is returned.
    """
    return _checked_airy(x).ai


def airy_aip(x: float) -> float:
    """
    Derivative of the Airy function `Ai'(x)`.  See `airy_ai`.
    """
    return _checked_airy(x).aip


def airy_bi(x: float) -> float:
    """
    Airy function `Bi(x)`.  See `airy` for details.  If `x` is out of
    range a `RuntimeWarning` is issued (unless disabled using the
    `warn_overflow` option) and `MAXNUM` is returned.
    """
    return _checked_airy(x).bi


def airy_bip(x: float) -> float:
    """
    Derivative of the Airy function `Bi'(x)`.  See `airy_bi`.
    """
    return _checked_airy(x).bip


# ======================================================================

def _airy_neg_asymp(x: float) -> AiryResult:
    """All four values for `x` < -2.09 from the oscillatory asymptotic
    form."""
    t = sqrt(-x)
    zeta = -2.0 * x * t / 3.0
    if not isfinite(zeta):
        # Phase cannot be resolved.
        return AiryResult(nan, nan, nan, nan, AIRY_OK)

    t = sqrt(t)
    k = SQPII / t
    z = 1.0 / zeta
    zz = z * z
    uf = 1.0 + zz * eval_poly(zz, AFN) / eval_poly1(zz, AFD)
    ug = z * eval_poly(zz, AGN) / eval_poly1(zz, AGD)
    theta = zeta + 0.25 * PI
    f = sin(theta)
    g = cos(theta)
    ai = k * (f * uf - g * ug)
    bi = k * (g * uf + f * ug)

    uf = 1.0 + zz * eval_poly(zz, APFN) / eval_poly1(zz, APFD)
    ug = z * eval_poly(zz, APGN) / eval_poly1(zz, APGD)
    k = SQPII * t
    aip = -k * (g * uf + f * ug)
    bip = k * (f * uf - g * ug)

    return AiryResult(ai, aip, bi, bip, AIRY_OK)


# ----------------------------------------------------------------------

def _ai_bi_series(x: float, z: float,
                  max_terms: int) -> tuple[float, float]:
    """
    Sum the two power series in `z` = `x`³ that combine to give `Ai(x)`
    and `Bi(x)`.  Returns ``(f, g)`` where ``Ai = c1 f - c2 g`` and ``Bi
    = √3 (c1 f + c2 g)``.
    """
    f, g = 1.0, x
    uf, ug = 1.0, x
    k = 1.0
    t = 1.0
    for _ in range(max_terms):
        uf *= z
        k += 1.0
        uf /= k
        ug *= z
        k += 1.0
        ug /= k
        uf /= k
        f += uf
        k += 1.0
        ug /= k
        g += ug
        t = fabs(uf / f) if f != 0.0 else inf
        if not t > MACHEP:
            return f, g

    raise ConvergenceError("Ai / Bi power series failed to converge.",
                           x=x, terms=max_terms, ratio=t)


def _aip_bip_series(x: float, z: float,
                    max_terms: int) -> tuple[float, float]:
    """
    As for `_ai_bi_series`, giving the series for `Ai'(x)` and
    `Bi'(x)`.
    """
    k = 4.0
    uf = x * x / 2.0
    ug = z / 3.0
    f = uf
    g = 1.0 + ug
    uf /= 3.0
    t = 1.0
    for _ in range(max_terms):
        uf *= z
        ug /= k
        k += 1.0
        ug *= z
        uf /= k
        f += uf
        k += 1.0
        ug /= k
        uf /= k
        g += ug
        k += 1.0
        t = fabs(ug / g) if g != 0.0 else inf
        if not t > MACHEP:
            return f, g

    raise ConvergenceError("Ai' / Bi' power series failed to converge.",
                           x=x, terms=max_terms, ratio=t)


# ----------------------------------------------------------------------

def _checked_airy(x: float) -> AiryResult:
    res = airy(x)
    if res.status != AIRY_OK and get_airy_options().warn_overflow:
        warnings.warn(f"Airy function argument x = {float(x):.6G} "
                      f"exceeds {MAXAIRY}, result saturated.",
                      RuntimeWarning)
    return res
