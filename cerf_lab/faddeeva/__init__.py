"""Complex error functions built on the Faddeeva function.

This module evaluates w(z) = exp(-z^2) erfc(-iz) and the functions derived
from it for arbitrary complex arguments, with relative error below 1e-13 in
each component for 1e-300 <= |z| <= 1e300, and exact IEEE results for
infinite and NaN arguments.

Key Features:
- Region dispatch: continued fraction far from the origin, Algorithm 916
  sums near it, dedicated kernels on the coordinate axes
- erf, erfc, erfcx, erfi and Dawson via exact identities with w, with
  Taylor expansions where those identities cancel
- Voigt line profile
- Regression vectors and an accuracy harness (relative error per part)

Note: Results are Python ``complex`` values. Overflow yields +-Inf and
underflow exact 0; no argument raises an arithmetic exception.
"""

# Faddeeva function
from .core import (
    faddeeva,
    evaluate_in_region,
)
from .regions import Region, classify

# Derived functions
from .derived import (
    erf,
    erfc,
    erfcx,
    erfi,
    dawson,
    voigt,
    get_function,
)

# Regression vectors
from .reference import (
    ReferenceCase,
    get_cases,
    get_all_cases,
)

# Accuracy harness
from .verification import (
    ERR_BOUND,
    STRICT_ERR_BOUND,
    CheckResult,
    relative_error,
    combine,
    check_values,
    real_axis_sweep,
    limit_check,
    run_checks,
)

__all__ = [
    # Faddeeva function
    "faddeeva",
    "evaluate_in_region",
    "Region",
    "classify",
    # Derived functions
    "erf",
    "erfc",
    "erfcx",
    "erfi",
    "dawson",
    "voigt",          # Re w scaled to a normalised line profile
    "get_function",
    # Regression vectors
    "ReferenceCase",
    "get_cases",
    "get_all_cases",
    # Accuracy harness
    "ERR_BOUND",
    "STRICT_ERR_BOUND",
    "CheckResult",
    "relative_error",
    "combine",
    "check_values",
    "real_axis_sweep",
    "limit_check",
    "run_checks",
]
