"""Central configuration access for rootfinder."""

from __future__ import annotations

from .defaults import ConfigDict, get_config, get_default_config, init_environment
from .schemas import AppConfig, LoggingSettings, SolverSettings, load_config

__all__ = [
    "AppConfig",
    "ConfigDict",
    "LoggingSettings",
    "SolverSettings",
    "get_config",
    "get_default_config",
    "init_environment",
    "load_config",
]
