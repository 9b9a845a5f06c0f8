"""Command that solves a sample duct flow for its axial velocity."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

from jetopt.jet_calc import JetCalcProblem
from jetopt.roots import EvaluationError


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the sample duct, print the velocity and the time taken."""
    parser = argparse.ArgumentParser(
        prog="jetopt",
        description="Solve a sample adiabatic duct flow for its axial velocity.",
    )
    parser.parse_args(argv)

    problem = JetCalcProblem()
    start = time.perf_counter()
    try:
        u_a = problem.compute_u_a(0.25, 0.4, 1100, 200, 1.36, 0.01)
    except EvaluationError as exc:
        print("Invalid input to u_a:")
        print(exc)
    else:
        print(f"computed u_a: {u_a:.10g}")
    elapsed = time.perf_counter() - start
    print(f"Time taken: {elapsed * 1e6:g} microseconds")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())