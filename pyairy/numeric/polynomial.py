"""
Polynomials (:mod:`pyairy.numeric.polynomial`)
==============================================

.. currentmodule:: pyairy.numeric.polynomial

Scalar polynomial evaluation used by the rational approximations of the
special functions.  Unlike ``np.polyval`` these work on a single float
and use a fixed, documented order of operations so that results are
reproducible to the last bit.
"""

import numpy as np
import numpy.typing as npt


# Written by Eric J. Whitney, October 2026.


# ======================================================================

def eval_poly(z: float, coeffs: npt.ArrayLike) -> float:
    """
    Evaluate the polynomial of degree `n` = ``len(coeffs) - 1`` at `z`
    using Horner's rule::

        :math:`P(z) = c_0 z^n + c_1 z^{n-1} + ... + c_n`

    Parameters
    ----------
    z : float
        Point at which to evaluate the polynomial.
    coeffs : array_like of float, shape (n + 1,)
        Polynomial coefficients, highest degree first.

    Returns
    -------
    float
        Value of the polynomial.

    Raises
    ------
    ValueError
        If `coeffs` is empty or not 1D.

    Notes
    -----
    The order of operations is ``p = c_0`` followed by ``p = p * z +
    c_i`` for each remaining coefficient, identical to the Cephes
    `polevl` routine.

    Examples
    --------
    Evaluate :math:`2z^2 - 3z + 1` at `z` = 3:
    >>> eval_poly(3.0, [2.0, -3.0, 1.0])
    10.0
    """
    coeffs = _check_coeffs(coeffs)
    if len(coeffs) < 1:
        raise ValueError("At least one coefficient required.")

    p = float(coeffs[0])
    for c in coeffs[1:]:
        p = p * z + float(c)

    return p


# ----------------------------------------------------------------------

def eval_poly1(z: float, coeffs: npt.ArrayLike) -> float:
    """
    Evaluate a polynomial of degree `n` = ``len(coeffs)`` at `z`, where
    the leading coefficient is one and is not included in `coeffs`::

        :math:`P(z) = z^n + c_0 z^{n-1} + ... + c_{n-1}`

    This is the usual normalisation for the denominator of a rational
    minimax approximation.

    Parameters
    ----------
    z : float
        Point at which to evaluate the polynomial.
    coeffs : array_like of float, shape (n,)
        Polynomial coefficients, highest degree first, omitting the
        leading unit coefficient.

    Returns
    -------
    float
        Value of the polynomial.  If `coeffs` is empty the result is
        1.0 (the degree zero polynomial).

    Raises
    ------
    ValueError
        If `coeffs` is not 1D.

    Notes
    -----
    The order of operations is ``p = z + c_0`` followed by ``p = p * z +
    c_i`` for each remaining coefficient, identical to the Cephes
    `p1evl` routine.

    Examples
    --------
    Evaluate :math:`z^2 - 3z + 1` at `z` = 3:
    >>> eval_poly1(3.0, [-3.0, 1.0])
    1.0
    """
    coeffs = _check_coeffs(coeffs)
    if len(coeffs) < 1:
        return 1.0

    p = z + float(coeffs[0])
    for c in coeffs[1:]:
        p = p * z + float(c)

    return p


# ----------------------------------------------------------------------

def _check_coeffs(coeffs: npt.ArrayLike) -> np.ndarray:
    """Return `coeffs` as a 1D float array (no copy if already one)."""
    coeffs = np.asarray(coeffs, dtype=float)
    if coeffs.ndim != 1:
        raise ValueError(f"Coefficients must be a 1D sequence, got "
                         f"ndim = {coeffs.ndim}.")
    return coeffs
