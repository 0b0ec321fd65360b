"""
Iterative root finders for scalar functions.

This module provides the four classical methods together with the result
type they share:
- Bisection and regula falsi for bracketed roots
- Newton-Raphson and secant from starting points
"""

from rootfinder.solvers.bracketing import bisection, regula_falsi
from rootfinder.solvers.open_methods import newton_raphson, secant
from rootfinder.solvers.registry import available, find_root, get, register
from rootfinder.solvers.result import (
    DEFAULT_MAX_ITER,
    DEFAULT_TOLERANCE,
    ConvergenceError,
    FailureKind,
    RootResult,
)

__all__ = [
    "DEFAULT_MAX_ITER",
    "DEFAULT_TOLERANCE",
    "ConvergenceError",
    "FailureKind",
    "RootResult",
    "available",
    "bisection",
    "find_root",
    "get",
    "newton_raphson",
    "regula_falsi",
    "register",
    "secant",
]
