"""Classical iterative root finders for scalar functions."""

from __future__ import annotations

from rootfinder.config import SolverSettings, get_config, init_environment, load_config
from rootfinder.solvers import (
    DEFAULT_MAX_ITER,
    DEFAULT_TOLERANCE,
    ConvergenceError,
    FailureKind,
    RootResult,
    available,
    bisection,
    find_root,
    newton_raphson,
    regula_falsi,
    secant,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_ITER",
    "DEFAULT_TOLERANCE",
    "ConvergenceError",
    "FailureKind",
    "RootResult",
    "SolverSettings",
    "available",
    "bisection",
    "find_root",
    "get_config",
    "init_environment",
    "load_config",
    "newton_raphson",
    "regula_falsi",
    "secant",
]
