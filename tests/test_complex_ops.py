"""Tests for the IEEE-safe arithmetic helpers."""

import math

import pytest

from cerf_lab.faddeeva.complex_ops import (
    INF,
    cexp,
    cmul,
    cos,
    cpolar,
    exp,
    exp_cis_mul,
    sin,
    sinc,
    sinh_taylor,
    to_complex,
)


class TestExp:
    """exp() overflows to Inf instead of raising."""

    def test_regular_range(self):
        """Matches math.exp where that does not overflow."""
        for x in [-745.0, -1.0, 0.0, 1.0, 700.0]:
            assert exp(x) == math.exp(x)

    def test_near_overflow_threshold(self):
        """Values just below log(DBL_MAX) stay finite."""
        assert exp(709.5) == pytest.approx(math.exp(709.5), rel=1e-15)

    def test_overflow(self):
        """Large arguments give +Inf."""
        for x in [710.0, 1000.0, 1e5, INF]:
            assert exp(x) == INF

    def test_limits(self):
        """exp(-Inf) = 0 and exp(NaN) = NaN."""
        assert exp(-INF) == 0.0
        assert math.isnan(exp(math.nan))


class TestTrig:
    """cos/sin of an infinity are NaN."""

    def test_infinite_argument(self):
        """No ValueError for +-Inf."""
        for x in [INF, -INF]:
            assert math.isnan(cos(x))
            assert math.isnan(sin(x))

    def test_finite_argument(self):
        """Finite arguments go straight to math."""
        assert cos(1.0) == math.cos(1.0)
        assert sin(1.0) == math.sin(1.0)


class TestComplexHelpers:
    """Pair arithmetic."""

    def test_cmul(self):
        """(1 + 2i)(3 - i) = 5 + 5i."""
        assert cmul((1.0, 2.0), (3.0, -1.0)) == (5.0, 5.0)

    def test_cpolar(self):
        """2 exp(i pi/2) = 2i."""
        re, im = cpolar(2.0, math.pi / 2)
        assert re == pytest.approx(0.0, abs=1e-15)
        assert im == pytest.approx(2.0)

    def test_to_complex(self):
        assert to_complex((1.5, -2.5)) == complex(1.5, -2.5)


class TestCexp:
    """Complex exponential special values."""

    def test_real_exponent_keeps_signed_zero(self):
        """Im exp(x - 0i) = -0."""
        re, im = cexp(1.0, -0.0)
        assert re == math.exp(1.0)
        assert math.copysign(1.0, im) == -1.0

    def test_finite(self):
        """exp(1 + i) against cmath-free evaluation."""
        re, im = cexp(1.0, 1.0)
        assert re == pytest.approx(math.e * math.cos(1.0), rel=1e-15)
        assert im == pytest.approx(math.e * math.sin(1.0), rel=1e-15)

    def test_overflow_keeps_phase(self):
        """An overflowing modulus gives signed infinities, not NaN."""
        re, im = cexp(2000.0, 2.0)
        assert re == -INF
        assert im == INF

    def test_infinite_phase(self):
        """Annex G cases for an infinite imaginary part."""
        assert cexp(-INF, INF) == (0.0, 0.0)
        re, im = cexp(INF, INF)
        assert re == INF and math.isnan(im)
        re, im = cexp(1.0, INF)
        assert math.isnan(re) and math.isnan(im)


class TestExpCisMul:
    """exp(r + i theta) * w without spurious overflow."""

    def test_matches_direct_product(self):
        """Small exponents agree with the naive product."""
        r, theta, w = -1.5, 0.7, (0.3, -0.2)
        scale = math.exp(r)
        expected = cmul((scale * math.cos(theta), scale * math.sin(theta)), w)
        got = exp_cis_mul(r, theta, w)
        assert got[0] == pytest.approx(expected[0], rel=1e-15)
        assert got[1] == pytest.approx(expected[1], rel=1e-15)

    def test_representable_product_of_overflowing_scale(self):
        """exp(1000) * 1e-300 is finite."""
        re, im = exp_cis_mul(1000.0, 0.0, (1e-300, 0.0))
        assert re == pytest.approx(math.exp(1000.0 + math.log(1e-300)), rel=1e-12)
        assert im == 0.0

    def test_overflow_gives_signed_inf(self):
        """Overflow on a nonzero component is +-Inf, never NaN."""
        re, im = exp_cis_mul(1600.0, math.pi / 4, (1.0, 0.0))
        assert re == INF and im == INF

    def test_underflow_gives_zero(self):
        """exp(-Inf) * w = 0."""
        assert exp_cis_mul(-INF, 1.0, (2.0, 3.0)) == (0.0, 0.0)


class TestSeriesHelpers:
    """sinc and sinh Taylor helpers."""

    def test_sinc_small(self):
        """sin(x)/x near zero uses the Taylor form."""
        assert sinc(0.0, 0.0) == 1.0
        assert sinc(1e-5, math.sin(1e-5)) == pytest.approx(1.0 - 1e-10 / 6, rel=1e-16)

    def test_sinc_regular(self):
        assert sinc(2.0, math.sin(2.0)) == math.sin(2.0) / 2.0

    def test_sinh_taylor(self):
        """Accurate for small arguments."""
        for x in [1e-8, 1e-4, -3e-3]:
            assert sinh_taylor(x) == pytest.approx(math.sinh(x), rel=1e-15)
