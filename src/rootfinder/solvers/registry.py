"""Name-based lookup for the root finders."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

if TYPE_CHECKING:
    from rootfinder.config.schemas import SolverSettings
    from rootfinder.solvers.result import RootResult

REGISTRY: Dict[str, Callable[..., "RootResult"]] = {}


def register(name=None):
    def deco(obj):
        key = name or obj.__name__
        if key in REGISTRY:
            raise ValueError(f"Duplicate registry key: {key}")
        REGISTRY[key] = obj
        return obj
    return deco


def get(name: str) -> Callable[..., "RootResult"]:
    try:
        return REGISTRY[name]
    except KeyError:
        raise KeyError(
            f"Unknown solver '{name}'. Available solvers: {available()}"
        ) from None


def available():
    return sorted(REGISTRY.keys())


def find_root(
    method: str,
    *args: Any,
    settings: Optional["SolverSettings"] = None,
    **kwargs: Any,
) -> "RootResult":
    """
    Run the solver registered under ``method``.

    Positional and keyword arguments are forwarded unchanged. When
    ``settings`` is given its tolerance and iteration budget are used unless
    ``tol`` / ``max_iter`` are passed explicitly.

    Example:
        >>> from rootfinder.config import SolverSettings
        >>> result = find_root(
        ...     "secant", lambda x: x**2 - 2, 1.0, 2.0,
        ...     settings=SolverSettings(tolerance=1e-10),
        ... )
        >>> abs(result.root - 1.4142135623) < 1e-9
        True
    """
    solver = get(method)
    if settings is not None:
        for key, value in settings.as_kwargs().items():
            kwargs.setdefault(key, value)
    return solver(*args, **kwargs)


__all__ = ["REGISTRY", "available", "find_root", "get", "register"]
