"""
==========================================
Special Functions (:mod:`pyairy.special`)
==========================================

.. currentmodule:: pyairy.special

Special functions of real argument.  These are included when a specific
evaluation algorithm (with known, reproducible accuracy) is required
rather than the general versions in SciPy.

Functions
---------

.. autosummary::
    :toctree:

    airy
    airy_ai
    airy_aip
    airy_bi
    airy_bip

Types
-----

.. autosummary::
    :toctree:

    AiryDone
    AiryResult

Exceptions
----------

.. autosummary::
    :toctree:

    ConvergenceError

"""

from .airy import (airy, airy_ai, airy_aip, airy_bi, airy_bip,
                   AiryDone, AiryResult)
from .exception import ConvergenceError
