"""
Result types shared by all root finders.

Solvers never raise for numerical failures. They return a :class:`RootResult`
that is either converged (carrying the root) or failed (carrying a
:class:`FailureKind`). The result unpacks to ``(found, root)`` so the classic
boolean-plus-value calling convention keeps working:

    >>> from rootfinder import bisection
    >>> found, root = bisection(lambda x: x**2 - 2, 0.0, 2.0)
    >>> found and abs(root - 1.41421356) < 1e-6
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

DEFAULT_TOLERANCE = 1e-6
DEFAULT_MAX_ITER = 1_000_000


class FailureKind(Enum):
    """Reason a solver gave up."""

    NON_BRACKETING = "non_bracketing"  # no sign change over [a, b]
    UNSTABLE = "unstable"  # slope too close to zero to divide by
    DIVERGED = "diverged"  # iterate left the bounding interval
    EXHAUSTED = "exhausted"  # iteration budget used up


class ConvergenceError(Exception):
    """Raised when the root of a failed :class:`RootResult` is requested."""

    def __init__(self, result: "RootResult"):
        self.result = result
        self.kind = result.failure
        super().__init__(
            f"{result.method} failed ({result.failure.value}) "
            f"after {result.iterations} iterations"
        )


@dataclass(frozen=True)
class RootResult:
    """Outcome of a single solver call."""

    method: str
    root: Optional[float] = None
    failure: Optional[FailureKind] = None
    iterations: int = 0
    function_calls: int = 0
    f_root: Optional[float] = None

    @classmethod
    def success(
        cls,
        method: str,
        root: float,
        *,
        iterations: int,
        function_calls: int,
        f_root: Optional[float] = None,
    ) -> "RootResult":
        return cls(
            method=method,
            root=float(root),
            iterations=iterations,
            function_calls=function_calls,
            f_root=f_root,
        )

    @classmethod
    def failed(
        cls,
        method: str,
        kind: FailureKind,
        *,
        iterations: int,
        function_calls: int,
    ) -> "RootResult":
        return cls(
            method=method,
            failure=kind,
            iterations=iterations,
            function_calls=function_calls,
        )

    @property
    def converged(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.converged

    def __iter__(self) -> Iterator:
        return iter(self.as_tuple())

    def as_tuple(self) -> Tuple[bool, Optional[float]]:
        """Return ``(found, root)``; ``root`` is ``None`` unless found."""
        return self.converged, self.root

    def unwrap(self) -> float:
        """
        Return the root, raising if the solver failed.

        Raises:
            ConvergenceError: If the result carries a failure kind
        """
        if self.failure is not None:
            raise ConvergenceError(self)
        return self.root


def check_settings(tol: float, max_iter: int) -> None:
    if not tol > 0:
        raise ValueError(f"tol must be strictly positive, got {tol}")
    if max_iter < 1:
        raise ValueError(f"max_iter must be at least 1, got {max_iter}")


__all__ = [
    "DEFAULT_MAX_ITER",
    "DEFAULT_TOLERANCE",
    "ConvergenceError",
    "FailureKind",
    "RootResult",
    "check_settings",
]
