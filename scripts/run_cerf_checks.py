#!/usr/bin/env python3
"""Run the accuracy checks of the complex error functions.

For each function:
  1. Regression vectors (Maple / WolframAlpha values), re and im part each
     within 1e-13 relative error (1e-15 for erfi)
  2. Real-axis sweep: 10000 log-spaced points in [1e-300, 1e300], both signs
  3. Limits at +Inf, -Inf and NaN

Exits with status 0 when every test passes, 1 otherwise.

Usage:
  python scripts/run_cerf_checks.py
  python scripts/run_cerf_checks.py --suite erf dawson
  python scripts/run_cerf_checks.py --sweep-points 1000 --json ./artifacts/cerf_checks.json
"""

import argparse
import json
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from cerf_lab.faddeeva.reference import SUITES
from cerf_lab.faddeeva.verification import N_SWEEP, combine, run_suite


def print_result(result) -> None:
    print(f"############# {result.name} tests #############")
    for failure in result.failures:
        print(f"ERR {failure}")
    status = "SUCCESS" if result.passed else "FAILURE"
    print(
        f"{status}: {result.failed}/{result.total} tests failed "
        f"(max relative error = {result.max_error:g})"
    )


def save_report(results, overall, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "suites": {
            name: [r.to_dict() for r in suite_results]
            for name, suite_results in results.items()
        },
        "overall": overall.to_dict(),
    }
    with open(path, "w") as f:
        json.dump(data, f, indent=2, default=str)
    print(f"  Saved: {path}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Accuracy checks for w(z), erf, erfc, erfcx, erfi and Dawson",
    )
    parser.add_argument(
        "--suite",
        nargs="+",
        choices=list(SUITES.keys()) + ["all"],
        default=["all"],
        help="Which functions to check",
    )
    parser.add_argument(
        "--sweep-points",
        type=int,
        default=N_SWEEP,
        help="Points per sign in the real-axis sweep (0 to skip)",
    )
    parser.add_argument(
        "--json",
        type=Path,
        default=None,
        help="Write a JSON report to this path",
    )
    args = parser.parse_args(argv)

    if "all" in args.suite:
        suites = list(SUITES.keys())
    else:
        suites = args.suite

    results = {}
    for name in suites:
        results[name] = run_suite(name, n_sweep=args.sweep_points)
        for result in results[name]:
            print_result(result)

    overall = combine("overall", (r for rs in results.values() for r in rs))

    print("#####################################")
    if overall.failed:
        print(f"IN TOTAL, FAILURE IN {overall.failed} TESTS")
    else:
        print("OVERALL SUCCESS")

    if args.json is not None:
        save_report(results, overall, args.json)

    return 1 if overall.failed else 0


if __name__ == "__main__":
    sys.exit(main())
