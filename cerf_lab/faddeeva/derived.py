"""Error functions, Dawson function and Voigt profile via w(z).

Identities used (all exact):

- erfcx(z) = exp(z^2) erfc(z) = w(iz)
- erfc(z)  = exp(-z^2) w(iz)             for Re z >= 0
           = 2 - exp(-z^2) w(-iz)        for Re z < 0
- erf(z)   = 1 - erfc(z)                 (same two half planes)
- erfi(z)  = -i erf(iz)
- D(z)     = i sqrt(pi)/2 (exp(-z^2) - w(z))      for Im z >= 0
           = i sqrt(pi)/2 (w(-z) - exp(-z^2))     for Im z < 0

Picking the half plane by the sign of Re z (or Im z for Dawson) keeps w
in the upper half plane where it is bounded, and avoids subtracting two
nearly equal numbers. Near the origin and near the axes, where those
differences still cancel, Taylor expansions take over.
"""

import math
from typing import Callable, Dict

from .complex_ops import INF, cexp, exp, exp_cis_mul, to_complex
from .core import complex_parts, faddeeva, faddeeva_parts
from .real_axis import dawson_x, erf_x, erfc_x, erfcx_x, im_w_of_x
from .special_values import dawson_special, erf_special, erfc_special

SPI2 = 0.8862269254527580136490837416705725913990  # sqrt(pi)/2
S2PI = 2.5066282746310005024157652848110452530070  # sqrt(2*pi)
SQRT2 = 1.4142135623730950488016887242096980785697

# Re(-z^2) below this: exp(-z^2) underflows for any w(z)
_UNDERFLOW_MRE_Z2 = -750.0
# exp(y^2) overflows once y^2 exceeds this on the imaginary axis
_OVERFLOW_Y2 = 720.0


def _erf(x: float, y: float) -> complex:
    special = erf_special(x, y)
    if special is not None:
        return special

    if y == 0.0:
        return complex(erf_x(x), y)
    if x == 0.0:
        # exp(y^2) -> Inf while Im w(y) -> 0, so take the limit by hand
        if y * y > _OVERFLOW_Y2:
            return complex(x, INF if y > 0 else -INF)
        return complex(x, exp(y * y) * im_w_of_x(y))

    mre_z2 = (y - x) * (x + y)  # Re(-z^2), without overflowing x^2
    mim_z2 = -2.0 * x * y  # Im(-z^2)
    if mre_z2 < _UNDERFLOW_MRE_Z2:
        return complex(1.0 if x >= 0 else -1.0, 0.0)

    if abs(x) < 8e-2:
        if abs(y) < 1e-2:
            return _erf_taylor(complex(x, y), complex(mre_z2, mim_z2))
        if abs(mim_z2) < 5e-3 and abs(x) < 5e-3:
            return _erf_taylor_erfi(x, y)

    if x >= 0:
        p_re, p_im = exp_cis_mul(mre_z2, mim_z2, faddeeva_parts(-y, x))
        return complex(1.0 - p_re, -p_im)
    p_re, p_im = exp_cis_mul(mre_z2, mim_z2, faddeeva_parts(y, -x))
    return complex(p_re - 1.0, p_im)


def _erf_taylor(z: complex, mz2: complex) -> complex:
    """erf(z) = 2/sqrt(pi) z (1 - z^2/3 + z^4/10 - z^6/42 + z^8/216)."""
    return z * (1.1283791670955125739
                + mz2 * (0.37612638903183752464
                         + mz2 * (0.11283791670955125739
                                  + mz2 * (0.026866170645131251760
                                           + mz2 * 0.0052239776254421878422))))


def _erf_taylor_erfi(x: float, y: float) -> complex:
    """erf(x + iy) for small |x| and |xy|, expanded around erf(iy).

    erf(x+iy) = erf(iy) + 2 exp(y^2)/sqrt(pi) *
        [ x (1 - x^2 (1+2y^2)/3 + x^4 (3+12y^2+4y^4)/30 + ...)
          - i x^2 y (1 - x^2 (3+2y^2)/6 + ...) ]

    with erf(iy) = i exp(y^2) Im w(y).
    """
    x2 = x * x
    y2 = y * y
    expy2 = exp(y2)
    return complex(
        expy2 * x * (1.1283791670955125739
                     - x2 * (0.37612638903183752464
                             + 0.75225277806367504925 * y2)
                     + x2 * x2 * (0.11283791670955125739
                                  + y2 * (0.45135166683820502956
                                          + 0.15045055561273500986 * y2))),
        expy2 * (im_w_of_x(y)
                 - x2 * y * (1.1283791670955125739
                             - x2 * (0.56418958354775628695
                                     + 0.37612638903183752464 * y2))),
    )


def erf(z) -> complex:
    """Error function erf(z) of a complex argument.

    Args:
        z: Real or complex argument.

    Returns:
        erf(z). On the real axis this is exactly the real erf(x).
    """
    x, y = complex_parts(z)
    return _erf(x, y)


def erfc(z) -> complex:
    """Complementary error function erfc(z) = 1 - erf(z).

    Args:
        z: Real or complex argument.

    Returns:
        erfc(z); exactly 0 (Re z > 0) or 2 (Re z < 0) once exp(-z^2)
        underflows, e.g. ``erfc(88) == 0``.
    """
    x, y = complex_parts(z)
    special = erfc_special(x, y)
    if special is not None:
        return special

    if x == 0.0:
        if y * y > _OVERFLOW_Y2:
            return complex(1.0, -INF if y > 0 else INF)
        return complex(1.0, -exp(y * y) * im_w_of_x(y))
    if y == 0.0:
        return complex(erfc_x(x), -y)

    mre_z2 = (y - x) * (x + y)
    mim_z2 = -2.0 * x * y
    if mre_z2 < _UNDERFLOW_MRE_Z2:
        return complex(0.0 if x >= 0 else 2.0, 0.0)

    if x >= 0:
        return to_complex(exp_cis_mul(mre_z2, mim_z2, faddeeva_parts(-y, x)))
    p_re, p_im = exp_cis_mul(mre_z2, mim_z2, faddeeva_parts(y, -x))
    return complex(2.0 - p_re, -p_im)


def erfcx(z) -> complex:
    """Scaled complementary error function exp(z^2) erfc(z) = w(iz).

    Unlike erfc, this stays finite for large positive Re z, where
    erfcx(z) ~ 1/(sqrt(pi) z).
    """
    x, y = complex_parts(z)
    return to_complex(faddeeva_parts(-y, x))


def erfi(z) -> complex:
    """Imaginary error function erfi(z) = -i erf(iz).

    Real for real z.
    """
    x, y = complex_parts(z)
    e = _erf(-y, x)
    return complex(e.imag, -e.real)


def dawson(z) -> complex:
    """Dawson function D(z) = sqrt(pi)/2 exp(-z^2) erfi(z).

    Args:
        z: Real or complex argument.

    Returns:
        D(z). D is odd and finite on the real axis, D(x) ~ 1/(2x) for
        large |x|.
    """
    x, y = complex_parts(z)
    special = dawson_special(x, y)
    if special is not None:
        return special

    if y == 0.0:
        return complex(dawson_x(x), -y)
    if x == 0.0:
        y2 = y * y
        if y2 < 2.5e-5:
            return complex(x, y * (1.0
                                   + y2 * (0.6666666666666666666666666666666666666667
                                           + y2 * 0.26666666666666666666666666666666666667)))
        if y >= 0:
            return complex(x, SPI2 * (exp(y2) - erfcx_x(y)))
        return complex(x, SPI2 * (erfcx_x(-y) - exp(y2)))

    mre_z2 = (y - x) * (x + y)
    mim_z2 = -2.0 * x * y

    if abs(y) < 5e-3:
        if abs(x) < 5e-3:
            return _dawson_taylor(complex(x, y), complex(mre_z2, mim_z2))
        if abs(mim_z2) < 5e-3:
            return _dawson_taylor_realaxis(x, y)

    if y >= 0:
        e_re, e_im = cexp(mre_z2, mim_z2)
        w_re, w_im = faddeeva_parts(x, y)
        res_re, res_im = e_re - w_re, e_im - w_im
    else:
        w_re, w_im = faddeeva_parts(-x, -y)
        e_re, e_im = cexp(mre_z2, mim_z2)
        res_re, res_im = w_re - e_re, w_im - e_im
    return complex(-SPI2 * res_im, SPI2 * res_re)


def _dawson_taylor(z: complex, mz2: complex) -> complex:
    """D(z) = z - 2/3 z^3 + 4/15 z^5 for small |z|."""
    return z * (1.0
                + mz2 * (0.6666666666666666666666666666666666666667
                         + mz2 * 0.2666666666666666666666666666666666666667))


def _dawson_taylor_realaxis(x: float, y: float) -> complex:
    """D(x + iy) for small |y| and |xy|.

    With D = D(x):

        D(x+iy) = D + y^2 (D + x - 2Dx^2)
                    + y^4 (D/2 + 5x/6 - 2Dx^2 - x^3/3 + 2Dx^4/3)
                  + iy [ (1-2Dx) + 2/3 y^2 (1 - 3Dx - x^2 + 2Dx^3)
                        + y^4/15 (4 - 15Dx - 9x^2 + 20Dx^3 + 2x^4 - 4Dx^5) ]

    For |x| > 40 the leading terms cancel (2Dx -> 1), so D is replaced by
    its continued fraction 0.5/(x - 0.5/(x - 1/(x - 1.5/(x - ...)))):
    six terms for |x| <= 5e7, and one (real part) or two (imaginary part)
    above, which also keeps x^6 from overflowing.
    """
    x2 = x * x
    y2 = y * y
    if x2 > 1600:
        if x2 > 25e14:
            xy2 = (x * y) * (x * y)
            return complex(
                (0.5 + y2 * (0.5 + 0.25 * y2
                             - 0.16666666666666666667 * xy2)) / x,
                y * (-1.0 + y2 * (-0.66666666666666666667
                                  + 0.13333333333333333333 * xy2
                                  - 0.26666666666666666667 * y2))
                / (2.0 * x2 - 1.0),
            )
        scale = 1.0 / (-15.0 + x2 * (90.0 + x2 * (-60.0 + 8.0 * x2)))
        return complex(
            scale * x * (33.0 + x2 * (-28.0 + 4.0 * x2)
                         + y2 * (18.0 - 4.0 * x2 + 4.0 * y2)),
            scale * y * (-15.0 + x2 * (24.0 - 4.0 * x2)
                         + y2 * (4.0 * x2 - 10.0 - 4.0 * y2)),
        )

    d = dawson_x(x)
    return complex(
        d + y2 * (d + x - 2.0 * d * x2)
        + y2 * y2 * (d * (0.5 - x2 * (2.0 - 0.66666666666666666667 * x2))
                     + x * (0.83333333333333333333
                            - 0.33333333333333333333 * x2)),
        y * (1.0 - 2.0 * d * x
             + y2 * 0.66666666666666666667 * (1.0 - x2 - d * x * 3.0
                                              + 2.0 * d * x2 * x)
             + y2 * y2 * (0.26666666666666666667
                          - x2 * (0.6 - 0.13333333333333333333 * x2)
                          - d * x * (1.0 - x2 * (1.3333333333333333333
                                                 - 0.26666666666666666667 * x2)))),
    )


def voigt(x: float, sigma: float, gamma: float) -> float:
    """Voigt profile: convolution of a Gaussian and a Lorentzian.

    V(x; sigma, gamma) = Re w((x + i|gamma|) / (sqrt(2) |sigma|))
                         / (sqrt(2 pi) |sigma|)

    Args:
        x: Distance from the line centre.
        sigma: Standard deviation of the Gaussian part.
        gamma: Half width at half maximum of the Lorentzian part.

    Returns:
        The normalised profile value. With gamma = 0 this is a Gaussian,
        with sigma = 0 a Lorentzian, and with both zero a delta function
        (Inf at x == 0, else 0).
    """
    gam = abs(gamma)
    sig = abs(sigma)

    if gam == 0.0:
        if sig == 0.0:
            return 0.0 if x else INF
        t = x / sig
        return exp(-0.5 * t * t) / (S2PI * sig)

    if sig == 0.0:
        r = x / gam
        return 1.0 / (math.pi * gam * (1.0 + r * r))

    scale = SQRT2 * sig
    w_re, _ = faddeeva_parts(x / scale, gam / scale)
    return w_re / (S2PI * sig)


FUNCTIONS: Dict[str, Callable[[complex], complex]] = {
    "faddeeva": faddeeva,
    "erf": erf,
    "erfc": erfc,
    "erfcx": erfcx,
    "erfi": erfi,
    "dawson": dawson,
}


def get_function(name: str) -> Callable[[complex], complex]:
    """Look up one of the complex functions by name.

    Raises:
        ValueError: If ``name`` is not one of :data:`FUNCTIONS`.
    """
    if name not in FUNCTIONS:
        raise ValueError(
            f"Unknown function: {name}. Available: {list(FUNCTIONS.keys())}"
        )
    return FUNCTIONS[name]
