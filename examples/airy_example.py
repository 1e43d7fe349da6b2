#!/usr/bin/env python3
"""
Example tabulating and plotting the Airy functions and their
derivatives, marking the points where the method of evaluation changes.
"""
import matplotlib.pyplot as plt
import numpy as np

from pyairy import airy


# Written by Eric J. Whitney, October 2026.

# ======================================================================

# Tabulate a few values.
print(f"{'x':>8s} {'Ai(x)':>22s} {'Ai′(x)':>22s} {'Bi(x)':>22s} "
      f"{'Bi′(x)':>22s}")
for x in (-10.0, -5.0, -2.09, 0.0, 1.0, 2.09, 5.0, 10.0, 26.0):
    ai, aip, bi, bip, status = airy(x)
    flag = "" if status == 0 else "  <- OUT OF RANGE"
    print(f"{x:8.3f} {ai:+22.15E} {aip:+22.15E} {bi:+22.15E} "
          f"{bip:+22.15E}{flag}")

# Plot over the oscillatory and growing / decaying regions.
x_plt = np.linspace(-15.0, 4.0, num=400)
vals = np.array([airy(x)[:4] for x in x_plt])

plt.figure()
plt.plot(x_plt, vals[:, 0], '-b', label="$Ai(x)$")
plt.plot(x_plt, vals[:, 1], '--b', label="$Ai'(x)$")
plt.plot(x_plt, vals[:, 2], '-r', label="$Bi(x)$")
plt.plot(x_plt, vals[:, 3], '--r', label="$Bi'(x)$")
for x_branch in (-2.09, 2.09):
    plt.axvline(x_branch, color='k', linestyle=':')
plt.ylim(-1.5, 2.5)
plt.xlabel("$x$")
plt.ylabel("$y$")
plt.grid()
plt.legend(loc='upper left')
plt.show()
