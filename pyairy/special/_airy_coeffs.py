"""
Constants and rational approximation coefficients for the Airy
functions, from the Cephes Math Library Release 2.8 (June 2000),
Copyright 1984, 1987, 1989, 2000 by Stephen L. Moshier.

All tables are read-only ``float64`` arrays ordered highest degree
first.  Tables marked `p1` are used with `eval_poly1` and omit the
leading coefficient of 1.0.
"""

import numpy as np

# Written by Eric J. Whitney, October 2026.

# ======================================================================


def _table(*coeffs: float) -> np.ndarray:
    arr = np.array(coeffs, dtype=np.float64)
    arr.flags.writeable = False
    return arr


# -- Scalar Constants --------------------------------------------------

MAXAIRY = 25.77  # Largest x before Bi(x) overflows.
MAXNUM = 1.79769313486231570815e308  # 2**1024 * (1 - MACHEP)
MACHEP = 1.11022302462515654042e-16  # 2**-53
PI = 3.14159265358979323846

C1 = 0.35502805388781723926  # Ai(0)
C2 = 0.258819403792806798405  # -Ai'(0)
SQRT3 = 1.732050807568877293527
SQPII = 5.64189583547756286948e-1  # 1 / sqrt(π)

# Branch points.
X_NEG_ASYMP = -2.09
X_POS_ASYMP = 2.09
X_BI_ASYMP = 8.3203353  # ζ > 16.

# -- Ai, Ai' for x >= 2.09 ---------------------------------------------

AN = _table(
    3.46538101525629032477e-1,
    1.20075952739645805542e1,
    7.62796053615234516538e1,
    1.68089224934630576269e2,
    1.59756391350164413639e2,
    7.05360906840444183113e1,
    1.40264691163389668864e1,
    9.99999999999999995305e-1,
)
AD = _table(
    5.67594532638770212846e-1,
    1.47562562584847203173e1,
    8.45138970141474626562e1,
    1.77318088145400459522e2,
    1.64234692871529701831e2,
    7.14778400825575695274e1,
    1.40959135607834029598e1,
    1.00000000000000000470e0,
)

APN = _table(
    6.13759184814035759225e-1,
    1.47454670787755323881e1,
    8.20584123476060982430e1,
    1.71184781360976385540e2,
    1.59317847137141783523e2,
    6.99778599330103016170e1,
    1.39470856980481566958e1,
    1.00000000000000000550e0,
)
APD = _table(
    3.34203677749736953049e-1,
    1.11810297306158156705e1,
    7.11727352147859965283e1,
    1.58778084372838313640e2,
    1.53206427475809220834e2,
    6.86752304592780337944e1,
    1.38498634758259442477e1,
    9.99999999999999994502e-1,
)

# -- Bi, Bi' for x > 8.3203353 -----------------------------------------

BN16 = _table(
    -2.53240795869364152689e-1,
    5.75285167332467384228e-1,
    -3.29907036873225371650e-1,
    6.44404068948199951727e-2,
    -3.82519546641336734394e-3,
)
BD16 = _table(  # p1
    -7.15685095054035237902e0,
    1.06039580715664694291e1,
    -5.23246636471251500874e0,
    9.57395864378383833152e-1,
    -5.50828147163549611107e-2,
)

BPPN = _table(
    4.65461162774651610328e-1,
    -1.08992173800493920734e0,
    6.38800117371827987759e-1,
    -1.26844349553102907034e-1,
    7.62487844342109852105e-3,
)
BPPD = _table(  # p1
    -8.70622787633159124240e0,
    1.38993162704553213172e1,
    -7.14116144616431159572e0,
    1.34008595960680518666e0,
    -7.84273211323341930448e-2,
)

# -- Ai, Bi for x < -2.09 ----------------------------------------------

AFN = _table(
    -1.31696323418331795333e-1,
    -6.26456544431912369773e-1,
    -6.93158036036933542233e-1,
    -2.79779981545119124951e-1,
    -4.91900132609500318020e-2,
    -4.06265923594885404393e-3,
    -1.59276496239262096340e-4,
    -2.77649108155232920844e-6,
    -1.67787698489114633780e-8,
)
AFD = _table(  # p1
    1.33560420706553243746e1,
    3.26825032795224613948e1,
    2.67367040941499554804e1,
    9.18707402907259625840e0,
    1.47529146771666414581e0,
    1.15687173795188044134e-1,
    4.40291641615211203805e-3,
    7.54720348287414296618e-5,
    4.51850092970580378464e-7,
)

AGN = _table(
    1.97339932091685679179e-2,
    3.91103029615688277255e-1,
    1.06579897599595591108e0,
    9.39169229816650230044e-1,
    3.51465656105547619242e-1,
    6.33888919628925490927e-2,
    5.85804113048388458567e-3,
    2.82851600836737019778e-4,
    6.98793669997260967291e-6,
    8.11789239554389293311e-8,
    3.41551784765923618484e-10,
)
AGD = _table(  # p1
    9.30892908077441974853e0,
    1.98352928718312140417e1,
    1.55646628932864612953e1,
    5.47686069422975497931e0,
    9.54293611618961883998e-1,
    8.64580826352392193095e-2,
    4.12656523824222607191e-3,
    1.01259085116509135510e-4,
    1.17166733214413521882e-6,
    4.91834570062930015649e-9,
)

# -- Ai', Bi' for x < -2.09 --------------------------------------------

APFN = _table(
    1.85365624022535566142e-1,
    8.86712188052584095637e-1,
    9.87391981747398547272e-1,
    4.01241082318003734092e-1,
    7.10304926289631174579e-2,
    5.90618657995661810071e-3,
    2.33051409401776799569e-4,
    4.08718778289035454598e-6,
    2.48379932900442457853e-8,
)
APFD = _table(  # p1
    1.47345854687502542552e1,
    3.75423933435489594466e1,
    3.14657751203046424330e1,
    1.09969125207298778536e1,
    1.78885054766999417817e0,
    1.41733275753662636873e-1,
    5.44066067017226003627e-3,
    9.39421290654511171663e-5,
    5.65978713036027009243e-7,
)

APGN = _table(
    -3.55615429033082288335e-2,
    -6.37311518129435504426e-1,
    -1.70856738884312371053e0,
    -1.50221872117316635393e0,
    -5.63606665822102676611e-1,
    -1.02101031120216891789e-1,
    -9.48396695961445269093e-3,
    -4.60325307486780994357e-4,
    -1.14300836484517375919e-5,
    -1.33415518685547420648e-7,
    -5.63803833958893494476e-10,
)
APGD = _table(  # p1
    9.85865801696130355144e0,
    2.16401867356585941885e1,
    1.73130776389749389525e1,
    6.17872175280828766327e0,
    1.08848694396321495475e0,
    9.95005543440888479402e-2,
    4.78468199683886610842e-3,
    1.18159633322838625562e-4,
    1.37480673554219441465e-6,
    5.79912514929147598821e-9,
)
