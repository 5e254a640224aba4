"""Tests for erf, erfc, erfcx, erfi, Dawson and the Voigt profile."""

import math

import numpy as np
import pytest
from scipy.special import erfcx as real_erfcx
from scipy.special import voigt_profile

from cerf_lab.faddeeva import (
    dawson,
    erf,
    erfc,
    erfcx,
    erfi,
    faddeeva,
    get_cases,
    get_function,
    voigt,
)
from cerf_lab.faddeeva.reference import REAL_REFERENCES
from cerf_lab.faddeeva.verification import (
    ERR_BOUND,
    N_SWEEP,
    SWEEP_SCALES,
    limit_check,
    real_axis_sweep,
    relative_error,
)


def assert_close(expected: complex, got: complex, tol: float = 1e-13):
    re_err = relative_error(expected.real, got.real)
    im_err = relative_error(expected.imag, got.imag)
    assert re_err <= tol and im_err <= tol, (
        f"expected {expected!r}, got {got!r} (re/im rel. err. {re_err:.2g}/{im_err:.2g})"
    )


DERIVED = ["erf", "erfi", "erfc", "erfcx", "dawson"]
DERIVED_CASES = [case for name in DERIVED for case in get_cases(name)]


class TestReferenceVectors:
    """Derived functions against Maple values."""

    @pytest.mark.parametrize(
        "case", DERIVED_CASES,
        ids=[f"{c.function}{c.z!r}" for c in DERIVED_CASES],
    )
    def test_reference_value(self, case):
        """Each tabulated value is matched within its tolerance."""
        func = get_function(case.function)
        assert_close(case.expected, func(case.z), case.tolerance)

    def test_erfc_underflow(self):
        """erfc(88) underflows to exactly 0."""
        assert erfc(88.0) == 0

    def test_dawson_far_real_axis(self):
        """D(1e300 + 2.4e-303 i) = 5e-301."""
        d = dawson(complex(1e300, 2.4e-303))
        assert d.real == pytest.approx(5e-301, rel=1e-13)
        assert d.imag == 0.0

    def test_erf_overflow_is_inf_not_nan(self):
        """erf(-4.9e-5 - 50i) overflows to -Inf - Inf i."""
        e = erf(complex(-4.9e-5, -50.0))
        assert e == complex(-math.inf, -math.inf)


class TestIdentities:
    """Relations between the functions."""

    def test_erfcx_is_rotated_w(self, moderate_points):
        """erfcx(z) = w(iz)."""
        for z in moderate_points:
            assert erfcx(z) == faddeeva(1j * z)

    def test_erfi_is_rotated_erf(self, moderate_points):
        """erfi(z) = -i erf(iz)."""
        for z in moderate_points:
            assert_close(-1j * erf(1j * z), erfi(z), 1e-15)

    def test_erf_plus_erfc(self, moderate_points):
        """erf(z) + erfc(z) = 1."""
        for z in moderate_points:
            total = erf(z) + erfc(z)
            assert abs(total - 1.0) <= 1e-13 * max(1.0, abs(erf(z)))

    def test_erfcx_scaling(self):
        """erfcx(z) = exp(z^2) erfc(z) where neither side overflows."""
        for z in [complex(0.5, 0.5), complex(1.2, -0.3), complex(2.0, 1.0)]:
            lhs = erfcx(z)
            rhs = erfc(z) * complex(math.cos(2 * z.real * z.imag), math.sin(2 * z.real * z.imag)) \
                * math.exp(z.real * z.real - z.imag * z.imag)
            assert abs(lhs - rhs) <= 1e-13 * abs(lhs)

    def test_dawson_via_erfi(self):
        """D(z) = sqrt(pi)/2 exp(-z^2) erfi(z) for moderate z."""
        for z in [complex(0.4, 0.3), complex(1.5, -0.5), complex(-0.8, 1.1)]:
            mz2 = -z * z
            scale = math.exp(mz2.real) * complex(math.cos(mz2.imag), math.sin(mz2.imag))
            expected = math.sqrt(math.pi) / 2 * scale * erfi(z)
            assert abs(dawson(z) - expected) <= 1e-13 * abs(expected)


class TestSymmetry:
    """Parity and conjugation, in every region and branch."""

    @pytest.fixture
    def points(self, sample_points, branch_points, moderate_points):
        return sample_points + branch_points + moderate_points

    @pytest.mark.parametrize("func", [erf, erfi, dawson])
    def test_odd(self, func, points):
        """f(-z) = -f(z)."""
        for z in points:
            assert_close(-func(z), func(-z), 1e-13)

    def test_erfc_reflection(self, points):
        """erfc(-z) = 2 - erfc(z)."""
        for z in points:
            assert_close(2.0 - erfc(z), erfc(-z), 1e-13)

    @pytest.mark.parametrize("func", [erf, erfc, erfcx, erfi, dawson])
    def test_conjugate(self, func, points):
        """f(conj z) = conj f(z)."""
        for z in points:
            assert_close(func(z).conjugate(), func(z.conjugate()), 1e-13)


class TestRealAxis:
    """Real arguments reproduce the real-valued functions."""

    @pytest.mark.parametrize("name", DERIVED)
    def test_sweep(self, name):
        """Re f(x) over 1e-300..1e300, both signs, within 1e-13."""
        result = real_axis_sweep(
            name, get_function(name), REAL_REFERENCES[name], SWEEP_SCALES[name], N_SWEEP,
        )
        assert result.passed, result.failures
        assert result.max_error <= ERR_BOUND

    @pytest.mark.parametrize("name", ["erf", "erfc", "dawson"])
    def test_off_axis_sweep(self, name):
        """Re f(x + 1e-20 x i) goes through the complex path and still
        matches the real function."""
        assert SWEEP_SCALES[name] == 1e-20
        result = real_axis_sweep(
            name, get_function(name), REAL_REFERENCES[name], 1e-20, N_SWEEP,
        )
        assert result.passed, result.failures

    def test_erfcx_against_erfc(self):
        """erfcx(x) = exp(x^2) erfc(x) where both factors are representable."""
        for x in np.linspace(-5.0, 10.0, 151):
            x = float(x)
            expected = math.exp(x * x) * math.erfc(x)
            got = erfcx(x)
            assert relative_error(expected, got.real) <= ERR_BOUND, x
            assert got.imag == 0.0

    @pytest.mark.parametrize("name", DERIVED)
    def test_limits(self, name):
        """Re f at +-Inf and NaN matches the real function exactly."""
        result = limit_check(name, get_function(name), REAL_REFERENCES[name])
        assert result.passed
        assert result.max_error == 0.0

    def test_real_results_are_real(self):
        """erf, erfc, erfcx, erfi and D map real x to real values."""
        for x in [-3.0, -0.2, 0.7, 4.0]:
            for func in (erf, erfc, erfcx, erfi, dawson):
                assert func(x).imag == 0.0

    def test_infinite_limits(self):
        """Exact limits of the real functions."""
        assert erf(math.inf) == 1 and erf(-math.inf) == -1
        assert erfc(math.inf) == 0 and erfc(-math.inf) == 2
        assert erfcx(math.inf) == 0 and erfcx(-math.inf).real == math.inf
        assert erfi(math.inf).real == math.inf and erfi(-math.inf).real == -math.inf
        assert dawson(math.inf) == 0
        assert math.copysign(1.0, dawson(-math.inf).real) == -1.0
        for func in (erf, erfc, erfcx, erfi, dawson):
            assert math.isnan(func(math.nan).real)


class TestVoigt:
    """Voigt profile and its Gaussian and Lorentzian limits."""

    def test_gaussian_limit(self):
        """gamma = 0 gives a normal density."""
        for x in [0.0, 0.5, -2.0]:
            expected = math.exp(-0.5 * x * x) / math.sqrt(2.0 * math.pi)
            assert voigt(x, 1.0, 0.0) == pytest.approx(expected, rel=1e-15)

    def test_lorentzian_limit(self):
        """sigma = 0 gives a Cauchy density."""
        for x in [0.0, 0.5, -2.0]:
            expected = 1.0 / (math.pi * 2.0 * (1.0 + (x / 2.0) ** 2))
            assert voigt(x, 0.0, 2.0) == pytest.approx(expected, rel=1e-15)

    def test_delta_limit(self):
        """Both widths zero give a delta function."""
        assert voigt(0.0, 0.0, 0.0) == math.inf
        assert voigt(1.0, 0.0, 0.0) == 0.0

    def test_line_centre(self):
        """V(0; sigma, gamma) = erfcx(gamma / (sqrt(2) sigma)) / (sqrt(2 pi) sigma)."""
        expected = float(real_erfcx(1.0 / math.sqrt(2.0))) / math.sqrt(2.0 * math.pi)
        assert voigt(0.0, 1.0, 1.0) == pytest.approx(expected, rel=1e-13)

    def test_matches_scipy(self):
        """Agrees with scipy.special.voigt_profile."""
        for x, sigma, gamma in [(0.3, 1.0, 0.5), (-2.0, 0.7, 1.3), (10.0, 2.0, 0.1)]:
            assert voigt(x, sigma, gamma) == pytest.approx(
                float(voigt_profile(x, sigma, gamma)), rel=1e-10
            )

    def test_sign_of_widths_ignored(self):
        """Only |sigma| and |gamma| enter."""
        assert voigt(0.4, -1.2, -0.3) == voigt(0.4, 1.2, 0.3)

    def test_even_in_x(self):
        """V(-x) = V(x)."""
        assert voigt(-1.7, 0.8, 0.6) == pytest.approx(voigt(1.7, 0.8, 0.6), rel=1e-15)


class TestLookup:
    """Function registry and argument checking."""

    def test_get_function(self):
        """Names map to the public functions."""
        assert get_function("erf") is erf
        assert get_function("faddeeva") is faddeeva

    def test_get_function_unknown(self):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown function"):
            get_function("gamma")

    @pytest.mark.parametrize("func", [erf, erfc, erfcx, erfi, dawson])
    def test_rejects_non_numbers(self, func):
        """Non-numeric arguments raise TypeError."""
        with pytest.raises(TypeError):
            func("0.5")
