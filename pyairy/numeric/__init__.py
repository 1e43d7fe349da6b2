"""
Numeric (:mod:`pyairy.numeric`)
===============================

.. currentmodule:: pyairy.numeric

Core numeric functions used throughout PyAiry.

.. autosummary::
    :toctree:

    polynomial

"""
from .polynomial import eval_poly, eval_poly1
