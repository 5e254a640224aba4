"""Exact results for non-finite arguments.

Each ``*_special`` function takes the parts of z and returns the exact value
of the corresponding function when at least one part is +-Inf or NaN, or
``None`` when both parts are finite and the numeric algorithm applies.
erfcx and erfi are rotations of w and erf, so they reuse those tables.

Faddeeva function w(z):

============  ============
z             w(z)
============  ============
(+Inf, 0)     (0, 0)
(-Inf, 0)     (0, -0)
(0, +Inf)     (0, 0)
(0, -Inf)     (+Inf, 0)
(+Inf, +Inf)  (0, 0)
(+Inf, -Inf)  (NaN, NaN)
(NaN, NaN)    (NaN, NaN)
(NaN, 0)      (NaN, NaN)
(0, NaN)      (NaN, 0)
(NaN, +Inf)   (NaN, NaN)
(+Inf, NaN)   (NaN, NaN)
============  ============

Off the axes, any NaN part or Im z = -Inf gives NaN + NaN i (exp(-z^2)
has no limit there); every other infinite argument gives 0.
"""

import math
from typing import Optional

from .complex_ops import INF, NAN

_NAN_NAN = complex(NAN, NAN)


def _finite(x: float, y: float) -> bool:
    return math.isfinite(x) and math.isfinite(y)


def _has_nan(x: float, y: float) -> bool:
    return math.isnan(x) or math.isnan(y)


def faddeeva_special(x: float, y: float) -> Optional[complex]:
    """w(z) for non-finite z = x + iy, else None."""
    if _finite(x, y):
        return None

    # Imaginary axis: w(iy) = erfcx(y), Re z carries the sign of Im w
    if x == 0.0:
        if y == INF:
            return complex(0.0, x)
        if y == -INF:
            return complex(INF, x)
        return complex(NAN, x)

    # Real axis: exp(-x^2) -> 0 and Im w(x) ~ 1/(sqrt(pi) x) -> +-0
    if y == 0.0:
        if math.isnan(x):
            return _NAN_NAN
        return complex(0.0, math.copysign(0.0, x))

    if _has_nan(x, y) or y == -INF:
        return _NAN_NAN
    return complex(0.0, 0.0)


def erf_special(x: float, y: float) -> Optional[complex]:
    """erf(z) for non-finite z = x + iy, else None."""
    if _finite(x, y):
        return None

    if y == 0.0:
        if math.isnan(x):
            return complex(NAN, y)
        return complex(math.copysign(1.0, x), y)

    # erf(iy) = i erfi(y), which runs off to +-Inf
    if x == 0.0:
        return complex(x, y)

    if _has_nan(x, y):
        return _NAN_NAN
    if math.isinf(x) and math.isfinite(y):
        return complex(math.copysign(1.0, x), 0.0)
    return _NAN_NAN


def erfc_special(x: float, y: float) -> Optional[complex]:
    """erfc(z) for non-finite z = x + iy, else None."""
    if _finite(x, y):
        return None

    if x == 0.0:
        if math.isnan(y):
            return complex(1.0, NAN)
        return complex(1.0, -y)

    if y == 0.0:
        if math.isnan(x):
            return complex(NAN, -y)
        return complex(0.0 if x > 0 else 2.0, -y)

    if _has_nan(x, y):
        return _NAN_NAN
    if math.isinf(x) and math.isfinite(y):
        return complex(0.0 if x > 0 else 2.0, 0.0)
    return _NAN_NAN


def dawson_special(x: float, y: float) -> Optional[complex]:
    """Dawson function D(z) for non-finite z = x + iy, else None."""
    if _finite(x, y):
        return None

    # D(x) ~ 1/(2x) -> +-0 along the real axis
    if y == 0.0:
        if math.isnan(x):
            return complex(NAN, -y)
        return complex(math.copysign(0.0, x), -y)

    # D(iy) = i sqrt(pi)/2 erfi(y)
    if x == 0.0:
        return complex(x, y)

    if _has_nan(x, y):
        return _NAN_NAN
    if math.isinf(x) and math.isfinite(y):
        return complex(math.copysign(0.0, x), 0.0)
    if math.isinf(y) and math.isfinite(x):
        # |D| blows up with an undetermined phase
        return complex(NAN, y)
    return _NAN_NAN
