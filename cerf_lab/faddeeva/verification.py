"""Accuracy checks for the complex error functions.

Three kinds of check, each returning an immutable :class:`CheckResult`:

- ``check_values``: tabulated regression vectors, real and imaginary part
  compared separately against the case tolerance.
- ``real_axis_sweep``: Re f(x + i*x*scale) against a real reference for
  x log-spaced over [1e-300, 1e300], both signs. Counts as one test.
- ``limit_check``: Re f at +Inf, -Inf and NaN against the real reference.

Results are folded with :func:`combine`; nothing is accumulated globally.
"""

import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .derived import get_function
from .reference import (
    ERR_BOUND,
    REAL_REFERENCES,
    STRICT_ERR_BOUND,
    SUITES,
    ReferenceCase,
    get_cases,
)

__all__ = [
    "ERR_BOUND",
    "STRICT_ERR_BOUND",
    "N_SWEEP",
    "SWEEP_SCALES",
    "CheckResult",
    "relative_error",
    "combine",
    "check_values",
    "real_axis_sweep",
    "limit_check",
    "run_suite",
    "run_checks",
]

N_SWEEP = 10000

# Imaginary part of the sweep points as a fraction of x. erf, erfc and
# dawson are evaluated slightly off the axis so the complex code path is
# compared with the real function. Off the axis erfi and erfcx overflow to
# infinities whose sign follows the tiny phase, so they stay on it.
SWEEP_SCALES: Dict[str, float] = {
    "erf": 1e-20,
    "erfi": 0.0,
    "erfc": 1e-20,
    "erfcx": 0.0,
    "dawson": 1e-20,
}


def relative_error(expected: float, computed: float) -> float:
    """|computed - expected| / |expected|, extended to Inf and NaN.

    Matching NaNs, or infinities of the same sign, count as zero error;
    any other mismatch in kind is an infinite error. An expected zero
    must be met by an exact zero (of either sign).
    """
    if not (math.isfinite(expected) and math.isfinite(computed)):
        if math.isnan(expected) != math.isnan(computed):
            return math.inf
        if math.isinf(expected) != math.isinf(computed):
            return math.inf
        if math.isinf(expected) and expected * computed < 0:
            return math.inf
        return 0.0
    if expected == 0:
        return 0.0 if computed == 0 else math.inf
    return abs((computed - expected) / expected)


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one group of accuracy tests.

    Attributes:
        name: Label of the group, e.g. ``"erf(z)"``.
        total: Number of tests run.
        failed: Number of tests above their tolerance.
        max_error: Largest relative error seen.
        failures: One description per failing test.
    """

    name: str
    total: int
    failed: int
    max_error: float
    failures: Tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "total": self.total,
            "failed": self.failed,
            "passed": self.passed,
            "max_error": self.max_error,
            "failures": list(self.failures),
        }


def combine(name: str, results: Iterable[CheckResult]) -> CheckResult:
    """Fold several results into one with summed counts."""
    results = list(results)
    return CheckResult(
        name=name,
        total=sum(r.total for r in results),
        failed=sum(r.failed for r in results),
        max_error=max((r.max_error for r in results), default=0.0),
        failures=tuple(f for r in results for f in r.failures),
    )


def _format_case(name: str, z: complex, got: complex, want: complex,
                 re_err: float, im_err: float) -> str:
    return (
        f"{name}({z.real:g}{z.imag:+g}i) = {got.real:g}{got.imag:+g}i "
        f"(vs. {want.real:g}{want.imag:+g}i), "
        f"re/im rel. err. = {re_err:0.2g}/{im_err:0.2g}"
    )


def check_values(
    name: str,
    func: Callable[[complex], complex],
    cases: Sequence[ReferenceCase],
) -> CheckResult:
    """Compare ``func`` against tabulated values.

    Args:
        name: Function name used in the report.
        func: Complex function under test.
        cases: Reference cases; each carries its own tolerance.

    Returns:
        CheckResult with one test per case.
    """
    failures = []
    max_error = 0.0
    for case in cases:
        got = func(case.z)
        re_err = relative_error(case.expected.real, got.real)
        im_err = relative_error(case.expected.imag, got.imag)
        max_error = max(max_error, re_err, im_err)
        if re_err > case.tolerance or im_err > case.tolerance:
            failures.append(
                _format_case(name, case.z, got, case.expected, re_err, im_err)
            )
    return CheckResult(
        name=f"{name}(z)",
        total=len(cases),
        failed=len(failures),
        max_error=max_error,
        failures=tuple(failures),
    )


def real_axis_sweep(
    name: str,
    func: Callable[[complex], complex],
    reference: Callable[[float], float],
    scale: float = 0.0,
    n_points: int = N_SWEEP,
    threshold: float = ERR_BOUND,
) -> CheckResult:
    """Check Re func(x + i*x*scale) against ``reference(x)``.

    x runs over ``n_points`` log-spaced values in [1e-300, 1e300], each
    also with its sign flipped. Only the worst error is kept, so the
    sweep counts as a single test.
    """
    max_error = 0.0
    for x in np.logspace(-300.0, 300.0, n_points):
        x = float(x)
        for xs in (x, -x):
            err = relative_error(reference(xs), func(complex(xs, x * scale)).real)
            if err > max_error:
                max_error = err

    failed = int(max_error > threshold)
    failures = ()
    if failed:
        failures = (f"{name}(x): relative error {max_error:g} too large",)
    return CheckResult(
        name=f"{name}(x)",
        total=1,
        failed=failed,
        max_error=max_error,
        failures=failures,
    )


def limit_check(
    name: str,
    func: Callable[[complex], complex],
    reference: Callable[[float], float],
    threshold: float = ERR_BOUND,
) -> CheckResult:
    """Check Re func at +Inf, -Inf and NaN against ``reference``."""
    max_error = 0.0
    for x in (math.inf, -math.inf, math.nan):
        max_error = max(max_error, relative_error(reference(x), func(complex(x, 0.0)).real))

    failed = int(max_error > threshold)
    failures = ()
    if failed:
        failures = (f"{name}(inf): relative error {max_error:g} too large",)
    return CheckResult(
        name=f"{name}(inf)",
        total=1,
        failed=failed,
        max_error=max_error,
        failures=failures,
    )


def run_suite(name: str, n_sweep: int = N_SWEEP) -> List[CheckResult]:
    """Run every check defined for one function.

    Args:
        name: Suite name, see :data:`cerf_lab.faddeeva.reference.SUITES`.
        n_sweep: Number of sweep points per sign; 0 skips the sweep.

    Raises:
        ValueError: If ``name`` is not a known suite.
    """
    cases = get_cases(name)
    func = get_function(name)
    results = [check_values(name, func, cases)]

    reference = REAL_REFERENCES.get(name)
    if reference is not None:
        if n_sweep > 0:
            results.append(
                real_axis_sweep(name, func, reference, SWEEP_SCALES[name], n_sweep)
            )
        results.append(limit_check(name, func, reference))
    return results


def run_checks(
    suites: Optional[Sequence[str]] = None,
    n_sweep: int = N_SWEEP,
) -> Dict[str, List[CheckResult]]:
    """Run the named suites (all of them by default) in report order."""
    if suites is None:
        suites = list(SUITES.keys())
    return {name: run_suite(name, n_sweep) for name in suites}
