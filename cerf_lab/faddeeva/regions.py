"""Partition of the complex plane into the numerical regimes of w(z).

Every finite z falls into exactly one :class:`Region`. The core keeps one
kernel per region, so which algorithm evaluates a given point can be
inspected (and tested) without running it.

Regimes, with x = |Re z| and y = Im z:

- ``IMAGINARY_AXIS``: Re z == 0, w(iy) = erfcx(y).
- ``REAL_AXIS``: Im z == 0, w(x) = exp(-x^2) + i Im w(x).
- ``ASYMPTOTIC``: continued-fraction zone with x + |y| > 1e7; one term,
  w = i / (sqrt(pi) z).
- ``LAURENT``: continued-fraction zone with 4000 < x + |y| <= 1e7; two
  terms, w = i z / (sqrt(pi) (z^2 - 1/2)).
- ``CONTINUED_FRACTION``: |y| > 7, or x > 6 away from the real axis
  (|y| > 0.1, or x > 8 and |y| > 1e-10, or x > 28).
- ``SERIES_SMALL_X``: x < 5e-4; Algorithm 916 sums with Taylor-expanded
  exp(+-2ax) and the difference of sums 4 and 5 folded into one sinh sum.
- ``SERIES``: 5e-4 <= x < 10; Algorithm 916 sums.
- ``SERIES_LARGE_X``: x >= 10 (and then |y| <= 1e-10, x <= 28); only the
  sums peaked around n0 = x/a contribute and exp(-x^2) is factored out.

The continued fraction loses relative accuracy in Re w for x around 6 and
small |y|, which is why that strip is left to the series.
"""

from enum import Enum

# Continued fraction for |Im z| above this
CF_MIN_ABS_Y = 7.0
# ... or for |Re z| above this when away from the real axis
CF_MIN_X = 6.0
CF_NEAR_AXIS_Y = 0.1
CF_MID_X = 8.0
CF_MID_Y = 1e-10
CF_ANY_X = 28.0

# Term-count thresholds on x + |y| inside the continued-fraction zone
LAURENT_MIN = 4000.0
ASYMPTOTIC_MIN = 1e7

SERIES_SMALL_X_MAX = 5e-4
SERIES_MAX_X = 10.0


class Region(Enum):
    """Numerical regime used to evaluate w(z)."""

    IMAGINARY_AXIS = "imaginary_axis"
    REAL_AXIS = "real_axis"
    ASYMPTOTIC = "asymptotic"
    LAURENT = "laurent"
    CONTINUED_FRACTION = "continued_fraction"
    SERIES_SMALL_X = "series_small_x"
    SERIES = "series"
    SERIES_LARGE_X = "series_large_x"


def uses_continued_fraction(x: float, ya: float) -> bool:
    """True where the continued fraction is both accurate and faster.

    Args:
        x: |Re z|.
        ya: |Im z|.
    """
    if ya > CF_MIN_ABS_Y:
        return True
    return x > CF_MIN_X and (
        ya > CF_NEAR_AXIS_Y
        or (x > CF_MID_X and ya > CF_MID_Y)
        or x > CF_ANY_X
    )


def classify(re: float, im: float) -> Region:
    """Classify a finite z = re + i*im into its numerical regime.

    Args:
        re: Real part of z (finite).
        im: Imaginary part of z (finite).

    Returns:
        The region whose kernel evaluates w(z).
    """
    if re == 0.0:
        return Region.IMAGINARY_AXIS
    if im == 0.0:
        return Region.REAL_AXIS

    x = abs(re)
    ya = abs(im)

    if uses_continued_fraction(x, ya):
        if x + ya > ASYMPTOTIC_MIN:
            return Region.ASYMPTOTIC
        if x + ya > LAURENT_MIN:
            return Region.LAURENT
        return Region.CONTINUED_FRACTION

    if x < SERIES_SMALL_X_MAX:
        return Region.SERIES_SMALL_X
    if x < SERIES_MAX_X:
        return Region.SERIES
    return Region.SERIES_LARGE_X
