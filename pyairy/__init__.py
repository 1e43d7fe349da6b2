"""
.. This module acts as the top-level API documentation.

.. module: pyairy

Real-argument Airy functions Ai(x), Ai'(x), Bi(x) and Bi'(x), together
with the supporting polynomial evaluators.

.. autosummary::
    :toctree: generated/

    numeric
    special
    options

"""

__version__ = "0.1.0"

import sys

from .options import (AiryOptions, airy_options, get_airy_options,
                      set_airy_options)
from .special import (airy, airy_ai, airy_aip, airy_bi, airy_bip,
                      AiryDone, AiryResult, ConvergenceError)

# Written by Eric J. Whitney, October 2026.

# ======================================================================

assert sys.version_info >= (3, 10)
