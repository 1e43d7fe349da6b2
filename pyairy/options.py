"""
Options (:mod:`pyairy.options`)
===============================

.. currentmodule:: pyairy.options

Package-wide options controlling Airy function evaluation.
"""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace

# Written by Eric J. Whitney, October 2026.

# ======================================================================


@dataclass(frozen=True, kw_only=True)
class AiryOptions:
    """
    Dataclass that holds option flags for Airy function evaluation. See
    `get_airy_options` and `set_airy_options` for full details.
    """
    max_series_terms: int
    warn_overflow: bool

    def __post_init__(self):
        """Check certain values"""
        if self.max_series_terms < 1:
            raise ValueError("Require 'max_series_terms' >= 1.")


# Create single instance and set defaults.
_airy_options = AiryOptions(
    max_series_terms=500,
    warn_overflow=True
)


# ----------------------------------------------------------------------

def get_airy_options() -> AiryOptions:
    """
    Returns
    -------
    airy_options : AiryOptions
        Returns a copy of the `AiryOptions` object containing the
        current options.  For a full description of each option, see
        `set_airy_options`.
    """
    return replace(_airy_options)


# noinspection PyIncorrectDocstring
def set_airy_options(**kwargs):
    """
    Set the current Airy function options.

    Parameters
    ----------
    max_series_terms : int, default = 500
        Maximum number of passes made by each of the power series loops
        used near the origin.  Both series normally converge to machine
        precision in well under 50 passes for the arguments where they
        are used, so this is only a guard against runaway loops.  If
        the limit is reached a `ConvergenceError` is raised.

    warn_overflow : bool, default = True
        If `True`, the single-value functions `airy_ai`, `airy_aip`,
        `airy_bi` and `airy_bip` issue a `RuntimeWarning` when the
        argument is too large and the result has been saturated.
        `airy` itself never warns; check the returned `status` instead.

    Raises
    ------
    TypeError
        If an unknown option is given.
    ValueError
        If an option value is invalid.

    See Also
    --------
    get_airy_options, airy_options

    Examples
    --------
    Silence the overflow warning from the single-value functions:
    >>> from pyairy import airy_bi, set_airy_options
    >>> set_airy_options(warn_overflow=False)
    >>> airy_bi(30.0)
    1.7976931348623157e+308
    >>> set_airy_options(warn_overflow=True)
    """
    global _airy_options
    _airy_options = replace(_airy_options, **kwargs)


# ----------------------------------------------------------------------

@contextmanager
def airy_options(**kwargs) -> Iterator[AiryOptions]:
    """
    Context manager that applies `set_airy_options` on entry and
    restores the previous options on exit, even if an exception occurs.

    Examples
    --------
    >>> from pyairy import airy_ai
    >>> with airy_options(warn_overflow=False):
    ...     airy_ai(100.0)
    0.0
    """
    global _airy_options
    saved = _airy_options
    set_airy_options(**kwargs)
    try:
        yield get_airy_options()
    finally:
        _airy_options = saved
