"""Real-argument kernels used on the coordinate axes.

On the imaginary axis w(iy) = erfcx(y), and on the real axis
Im w(x) = 2/sqrt(pi) * D(x) with D the Dawson integral. Both real functions
come from scipy.special; erf and erfc of a real argument come from the
standard library, which is also the ground truth the complex functions are
validated against.
"""

import math

from scipy.special import dawsn, erfcx

TWO_OVER_SQRT_PI = 1.1283791670955125739  # 2/sqrt(pi)


def erfcx_x(x: float) -> float:
    """Scaled complementary error function exp(x^2) erfc(x) of a real x."""
    return float(erfcx(x))


def dawson_x(x: float) -> float:
    """Dawson integral D(x) of a real x."""
    return float(dawsn(x))


def im_w_of_x(x: float) -> float:
    """Im w(x) for real x, i.e. 2/sqrt(pi) * D(x)."""
    return TWO_OVER_SQRT_PI * dawson_x(x)


def erf_x(x: float) -> float:
    return math.erf(x)


def erfc_x(x: float) -> float:
    return math.erfc(x)
