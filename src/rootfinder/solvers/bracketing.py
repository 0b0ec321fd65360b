"""
Bracketing root finders.

Both methods keep an interval [a, b] over which f changes sign and shrink it
until either the function value at the trial point or the interval width
drops below tolerance:

- Bisection takes the midpoint, halving the interval every step.
- Regula falsi takes the point where the chord through (a, f(a)) and
  (b, f(b)) crosses zero, which usually gets there faster on curved functions.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from rootfinder.solvers.registry import register
from rootfinder.solvers.result import (
    DEFAULT_MAX_ITER,
    DEFAULT_TOLERANCE,
    FailureKind,
    RootResult,
    check_settings,
)

logger = logging.getLogger(__name__)


def _check_bracket(
    method: str, a: float, b: float, fa: float, fb: float
) -> Optional[RootResult]:
    """Resolve exact-zero endpoints and reject intervals without a sign change."""
    if fa == 0:
        return RootResult.success(method, a, iterations=0, function_calls=2, f_root=fa)
    if fb == 0:
        return RootResult.success(method, b, iterations=0, function_calls=2, f_root=fb)

    if not (math.isfinite(fa) and math.isfinite(fb)) or fa * fb > 0:
        logger.debug(
            "%s: f(%s)=%s and f(%s)=%s do not bracket a root", method, a, fa, b, fb
        )
        return RootResult.failed(
            method, FailureKind.NON_BRACKETING, iterations=0, function_calls=2
        )
    return None


@register("bisection")
def bisection(
    f: Callable[[float], float],
    a: float,
    b: float,
    *,
    tol: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITER,
) -> RootResult:
    """
    Find a root of f in [a, b] by repeated halving.

    An endpoint where f is exactly zero is returned immediately. Otherwise
    f(a) and f(b) must not share a sign.

    Args:
        f: Function for which to find root
        a: One end of the bracket
        b: Other end of the bracket
        tol: Convergence tolerance on both |f(c)| and |b - a| (default 1e-6)
        max_iter: Maximum number of iterations (default 1,000,000)

    Returns:
        RootResult; failure kind is NON_BRACKETING or EXHAUSTED

    Example:
        >>> result = bisection(lambda x: x**2 - 2, 0.0, 2.0)
        >>> abs(result.root - 1.41421356) < 1e-6
        True
    """
    check_settings(tol, max_iter)
    a, b = float(a), float(b)
    fa = float(f(a))
    fb = float(f(b))

    early = _check_bracket("bisection", a, b, fa, fb)
    if early is not None:
        return early

    calls = 2
    for i in range(1, max_iter + 1):
        c = (a + b) / 2.0
        fc = float(f(c))
        calls += 1

        if abs(fc) < tol or abs(b - a) < tol:
            logger.debug("bisection: converged to %s after %d iterations", c, i)
            return RootResult.success(
                "bisection", c, iterations=i, function_calls=calls, f_root=fc
            )

        if fa * fc > 0:
            a, fa = c, fc
        else:
            b = c

    logger.debug("bisection: no convergence within %d iterations", max_iter)
    return RootResult.failed(
        "bisection", FailureKind.EXHAUSTED, iterations=max_iter, function_calls=calls
    )


@register("regula_falsi")
def regula_falsi(
    f: Callable[[float], float],
    a: float,
    b: float,
    *,
    tol: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITER,
) -> RootResult:
    """
    Find a root of f in [a, b] by false position.

    Same bracket rules as :func:`bisection`, including the exact-zero
    endpoint shortcut. The trial point is

        c = a - f(a) * (b - a) / (f(b) - f(a))

    and the run is abandoned as UNSTABLE when f(b) - f(a) vanishes or c is
    not finite, as happens once f returns NaN inside the bracket.

    Returns:
        RootResult; failure kind is NON_BRACKETING, UNSTABLE or EXHAUSTED
    """
    check_settings(tol, max_iter)
    a, b = float(a), float(b)
    fa = float(f(a))
    fb = float(f(b))

    early = _check_bracket("regula_falsi", a, b, fa, fb)
    if early is not None:
        return early

    calls = 2
    for i in range(1, max_iter + 1):
        denom = fb - fa
        c = a - fa * (b - a) / denom if denom != 0 else math.nan
        if not math.isfinite(c):
            logger.debug("regula_falsi: non-finite trial point at iteration %d", i)
            return RootResult.failed(
                "regula_falsi", FailureKind.UNSTABLE, iterations=i, function_calls=calls
            )

        fc = float(f(c))
        calls += 1

        if abs(fc) < tol or abs(b - a) < tol:
            logger.debug("regula_falsi: converged to %s after %d iterations", c, i)
            return RootResult.success(
                "regula_falsi", c, iterations=i, function_calls=calls, f_root=fc
            )

        if fa * fc > 0:
            a, fa = c, fc
        else:
            b, fb = c, fc

    logger.debug("regula_falsi: no convergence within %d iterations", max_iter)
    return RootResult.failed(
        "regula_falsi", FailureKind.EXHAUSTED, iterations=max_iter, function_calls=calls
    )


__all__ = ["bisection", "regula_falsi"]
