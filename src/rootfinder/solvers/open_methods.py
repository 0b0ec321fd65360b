"""
Open root finders.

Newton-Raphson and secant need no sign change, only starting points, and
can therefore wander off. Both are confined to a caller-supplied interval
[a, b]: an iterate that leaves it ends the run as DIVERGED. Convergence is
declared on step size alone, |x_{n+1} - x_n| < tol.
"""

from __future__ import annotations

import logging
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


@register("newton_raphson")
def newton_raphson(
    f: Callable[[float], float],
    g: Callable[[float], float],
    a: float,
    b: float,
    x0: float,
    *,
    tol: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITER,
) -> RootResult:
    """
    Find root of function using Newton-Raphson method.

    The Newton-Raphson method uses the iteration:
        x_{n+1} = x_n - f(x_n) / g(x_n)

    Args:
        f: Function for which to find root
        g: Derivative of f
        a: Lower bound of the confinement interval
        b: Upper bound of the confinement interval
        x0: Initial guess
        tol: Tolerance on step size and on |g(x)| (default 1e-6)
        max_iter: Maximum number of iterations (default 1,000,000)

    Returns:
        RootResult; failure kind is UNSTABLE (|g(x)| < tol), DIVERGED
        (iterate outside [a, b]) or EXHAUSTED

    Example:
        >>> result = newton_raphson(lambda x: x**2 - 2, lambda x: 2 * x, 0.0, 2.0, 1.0)
        >>> abs(result.root - 1.41421356) < 1e-6
        True
    """
    check_settings(tol, max_iter)
    lower, upper = min(a, b), max(a, b)
    x = float(x0)
    calls = 0

    for i in range(1, max_iter + 1):
        fx = float(f(x))
        dfx = float(g(x))
        calls += 1

        if abs(dfx) < tol:
            logger.debug("newton_raphson: derivative %s at x=%s too small", dfx, x)
            return RootResult.failed(
                "newton_raphson", FailureKind.UNSTABLE, iterations=i, function_calls=calls
            )

        x_new = x - fx / dfx

        if not lower <= x_new <= upper:
            logger.debug(
                "newton_raphson: iterate %s left [%s, %s]", x_new, lower, upper
            )
            return RootResult.failed(
                "newton_raphson", FailureKind.DIVERGED, iterations=i, function_calls=calls
            )

        if abs(x_new - x) < tol:
            logger.debug("newton_raphson: converged to %s after %d iterations", x_new, i)
            return RootResult.success(
                "newton_raphson", x_new, iterations=i, function_calls=calls
            )

        x = x_new

    logger.debug("newton_raphson: no convergence within %d iterations", max_iter)
    return RootResult.failed(
        "newton_raphson", FailureKind.EXHAUSTED, iterations=max_iter, function_calls=calls
    )


@register("secant")
def secant(
    f: Callable[[float], float],
    a: float,
    b: float,
    x0: Optional[float] = None,
    *,
    tol: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITER,
) -> RootResult:
    """
    Find root of function using the secant method.

    The slope is estimated from the two most recent iterates, starting from
    ``a`` and ``b`` (or ``a`` and ``x0`` when a guess is given). The original
    [a, b] stays fixed as the confinement interval for the whole run.

    Args:
        f: Function for which to find root
        a: One end of the confinement interval, and the first starting iterate
        b: Other end of the interval, and the second iterate unless ``x0`` is set
        x0: Optional starting guess used in place of ``b``
        tol: Tolerance on step size and on |f(x) - f(prev_x)| (default 1e-6)
        max_iter: Maximum number of iterations (default 1,000,000)

    Returns:
        RootResult; failure kind is UNSTABLE, DIVERGED or EXHAUSTED
    """
    check_settings(tol, max_iter)
    lower, upper = min(a, b), max(a, b)
    prev_x = float(a)
    x = float(b) if x0 is None else float(x0)
    calls = 0

    if x < lower or x > upper:
        logger.debug("secant: starting guess %s outside [%s, %s]", x, lower, upper)
        return RootResult.failed(
            "secant", FailureKind.DIVERGED, iterations=0, function_calls=calls
        )

    fprev = float(f(prev_x))
    calls += 1
    for i in range(1, max_iter + 1):
        fx = float(f(x))
        calls += 1

        if abs(fx - fprev) < tol:
            logger.debug("secant: flat secant between %s and %s", prev_x, x)
            return RootResult.failed(
                "secant", FailureKind.UNSTABLE, iterations=i, function_calls=calls
            )

        x_new = x - fx * (x - prev_x) / (fx - fprev)

        if not lower <= x_new <= upper:
            logger.debug("secant: iterate %s left [%s, %s]", x_new, lower, upper)
            return RootResult.failed(
                "secant", FailureKind.DIVERGED, iterations=i, function_calls=calls
            )

        if abs(x_new - x) < tol:
            logger.debug("secant: converged to %s after %d iterations", x_new, i)
            return RootResult.success("secant", x_new, iterations=i, function_calls=calls)

        prev_x, fprev = x, fx
        x = x_new

    logger.debug("secant: no convergence within %d iterations", max_iter)
    return RootResult.failed(
        "secant", FailureKind.EXHAUSTED, iterations=max_iter, function_calls=calls
    )


__all__ = ["newton_raphson", "secant"]
