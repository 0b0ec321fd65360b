"""Pydantic-based settings schemas and helpers."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from rootfinder.solvers.result import DEFAULT_MAX_ITER, DEFAULT_TOLERANCE


class SolverSettings(BaseModel):
    """Tolerance and iteration budget shared by every solver."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tolerance: float = Field(
        default=DEFAULT_TOLERANCE,
        gt=0.0,
        description="Absolute tolerance on function values and step/interval widths",
    )
    max_iter: int = Field(
        default=DEFAULT_MAX_ITER, gt=0, description="Maximum number of iterations"
    )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "SolverSettings":
        """Build settings from the ``solver`` section of a runtime config."""
        section = config.get("solver", {}) or {}
        return cls.model_validate(
            {key: section[key] for key in ("tolerance", "max_iter") if key in section}
        )

    def as_kwargs(self) -> dict[str, Any]:
        """Keyword arguments accepted by the solver functions."""
        return {"tol": self.tolerance, "max_iter": self.max_iter}


class LoggingSettings(BaseModel):
    """Logging options applied by :func:`rootfinder.config.init_environment`."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", description="Standard logging level name")

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        canonical = value.upper()
        if not isinstance(logging.getLevelName(canonical), int):
            raise ValueError(f"Unknown logging level '{value}'")
        return canonical


class AppConfig(BaseModel):
    """Top-level configuration container."""

    model_config = ConfigDict(extra="forbid")

    solver: SolverSettings = Field(default_factory=SolverSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _load_yaml(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration at {path} must contain a mapping")
    return data


def load_config(path: Path | str) -> AppConfig:
    """Load a configuration file into an :class:`AppConfig`."""
    target = Path(path)
    payload = _load_yaml(target)
    return AppConfig.model_validate(payload)


__all__ = [
    "AppConfig",
    "LoggingSettings",
    "SolverSettings",
    "load_config",
]
