"""Safeguarded Newton-Raphson root finding."""

from __future__ import annotations

import math
import sys
from collections.abc import Callable

_HUGE = sys.float_info.max

ResidualFunction = Callable[[float], "tuple[float, float]"]


class EvaluationError(ArithmeticError):
    """Raised when an iterative evaluation cannot produce a meaningful result."""


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _zero_derivative_step(
    func: ResidualFunction,
    last_f0: float,
    f0: float,
    delta: float,
    result: float,
    lower: float,
    upper: float,
) -> float:
    """Choose a step when the derivative vanishes at the current point."""
    if last_f0 == 0:
        # First iteration: pretend the previous evaluation was at a bound.
        probe = upper if result == lower else lower
        last_f0, _ = func(probe)
        delta = probe - result
    if _sign(last_f0) * _sign(f0) < 0:
        # Crossed the root: move back against the last step.
        return (result - lower) / 2 if delta < 0 else (result - upper) / 2
    return (result - upper) / 2 if delta < 0 else (result - lower) / 2


def newton_raphson_iterate(
    func: ResidualFunction,
    guess: float,
    lower: float,
    upper: float,
    digits: int,
    max_iter: int,
) -> float:
    """Find a root of ``func`` inside ``[lower, upper]`` starting at ``guess``.

    ``func`` returns the value and the first derivative at a point.  The
    iteration stops once the last step is below ``2**(1 - digits)`` relative
    to the estimate, or after ``max_iter`` evaluations.  Steps that leave the
    bracket are replaced by bisection, and :class:`EvaluationError` is raised
    when the bracket no longer encloses a sign change.
    """
    if lower > upper:
        raise EvaluationError(
            f"range arguments in wrong order: lower={lower!r} > upper={upper!r}"
        )
    factor = math.ldexp(1.0, 1 - digits)
    result = float(guess)
    f0 = 0.0
    delta = delta1 = delta2 = _HUGE
    max_range_f = min_range_f = 0.0
    remaining = max_iter

    while True:
        last_f0 = f0
        delta2, delta1 = delta1, delta
        f0, f1 = func(result)
        remaining -= 1
        if f0 == 0:
            break
        if f1 == 0:
            delta = _zero_derivative_step(func, last_f0, f0, delta, result, lower, upper)
        else:
            delta = f0 / f1

        if abs(delta * 2) > abs(delta2):
            # The last two steps have not converged: fall back to bisection.
            shift = (result - lower) / 2 if delta > 0 else (result - upper) / 2
            if result != 0 and abs(shift) > abs(result):
                delta = _sign(delta) * abs(result) * 1.1
            else:
                delta = shift
            delta1 = delta2 = 3 * delta

        guess = result
        result -= delta
        if result <= lower:
            delta = 0.5 * (guess - lower)
            result = guess - delta
            if result == lower or result == upper:
                break
        elif result >= upper:
            delta = 0.5 * (guess - upper)
            result = guess - delta
            if result == lower or result == upper:
                break

        if delta > 0:
            upper = guess
            max_range_f = f0
        else:
            lower = guess
            min_range_f = f0

        if max_range_f * min_range_f > 0:
            raise EvaluationError(
                "there appears to be no root to be found, perhaps there is a "
                f"local minimum near the current best guess of {guess!r}"
            )

        if not (remaining > 0 and abs(result * factor) < abs(delta)):
            break

    return result