"""IEEE-754 arithmetic on (re, im) pairs of floats.

The Faddeeva kernels are written against C99 semantics: exp() overflows to
Inf, cos(Inf) is NaN, and Annex G fixes the special values of cexp().
Python's math module raises instead (OverflowError from exp, ValueError
from sin/cos of an infinity), so every operation the kernels need is
wrapped here and resolves those cases by explicit branches.

Complex values are passed around as plain ``(re, im)`` tuples inside the
numeric kernels and only turned into ``complex`` at the public boundary.
"""

from __future__ import annotations

import math
from typing import Tuple

Pair = Tuple[float, float]

INF = math.inf
NAN = math.nan

# exp(x) is exact-range safe below this; above it we square exp(x/2)
_EXP_DIRECT_MAX = 709.0
# exp(x/2) itself overflows beyond this
_EXP_SPLIT_MAX = 1400.0


def exp(x: float) -> float:
    """exp(x) that overflows to +Inf instead of raising OverflowError."""
    if x < _EXP_DIRECT_MAX:
        # covers -Inf (-> 0) and NaN (-> NaN)
        return math.exp(x)
    if x > _EXP_SPLIT_MAX:
        return INF
    half = math.exp(0.5 * x)
    return half * half


def cos(x: float) -> float:
    """cos(x) returning NaN for x = +-Inf."""
    if math.isinf(x):
        return NAN
    return math.cos(x)


def sin(x: float) -> float:
    """sin(x) returning NaN for x = +-Inf."""
    if math.isinf(x):
        return NAN
    return math.sin(x)


def cmul(a: Pair, b: Pair) -> Pair:
    """Plain (non-rescaled) complex product a * b."""
    return (a[0] * b[0] - a[1] * b[1], a[0] * b[1] + a[1] * b[0])


def cpolar(r: float, theta: float) -> Pair:
    """r * exp(i * theta)."""
    return (r * cos(theta), r * sin(theta))


def cexp(re: float, im: float) -> Pair:
    """Complex exponential with C99 Annex G special values.

    Parameters
    ----------
    re, im : float
        Real and imaginary part of the exponent.

    Returns
    -------
    pair : tuple of float
        exp(re + i*im) as ``(re, im)``.

    Notes
    -----
    The relevant cases of Annex G:

    - ``im == 0``           -> ``(exp(re), im)``, keeping the sign of zero
    - finite ``im``         -> ``exp(re) * (cos(im), sin(im))``
    - ``re == -Inf``, ``im`` Inf or NaN -> ``(0, 0)``
    - ``re == +Inf``, ``im`` Inf or NaN -> ``(Inf, NaN)``
    - anything else with non-finite ``im`` -> ``(NaN, NaN)``
    """
    if im == 0.0:
        return (exp(re), im)
    if math.isfinite(im):
        scale = exp(re)
        return (scale * math.cos(im), scale * math.sin(im))
    if re == -INF:
        return (0.0, 0.0)
    if re == INF:
        return (INF, NAN)
    return (NAN, NAN)


def exp_cis_mul(log_scale: float, theta: float, w: Pair) -> Pair:
    """exp(log_scale + i*theta) * w without spurious overflow NaNs.

    The unit phasor multiplies ``w`` first and the real scale factor is
    applied last, so an overflowing scale yields +-Inf components rather
    than Inf - Inf. When the scale alone would overflow but the product
    is representable, exp(log_scale) is applied in two halves.
    """
    p_re, p_im = cmul((cos(theta), sin(theta)), w)
    if log_scale > _EXP_DIRECT_MAX:
        half = exp(0.5 * log_scale)
        return (half * (half * p_re), half * (half * p_im))
    scale = exp(log_scale)
    return (scale * p_re, scale * p_im)


def sinc(x: float, sinx: float) -> float:
    """sin(x)/x given a precomputed sin(x), accurate near zero."""
    if abs(x) < 1e-4:
        return 1.0 - 0.1666666666666666666667 * x * x
    return sinx / x


def sinh_taylor(x: float) -> float:
    """sinh(x) by its Taylor series; valid for |x| < 1e-2 or so."""
    return x * (1.0 + (x * x) * (0.1666666666666666666667
                                 + 0.00833333333333333333333 * (x * x)))


def to_complex(pair: Pair) -> complex:
    """Build the public ``complex`` value from an ``(re, im)`` pair."""
    return complex(pair[0], pair[1])
