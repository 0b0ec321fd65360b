"""Runtime configuration defaults for rootfinder."""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Mapping, MutableMapping

from ml_collections import ConfigDict

from rootfinder.config.schemas import AppConfig
from rootfinder.solvers.result import DEFAULT_MAX_ITER, DEFAULT_TOLERANCE

__all__ = ["ConfigDict", "get_config", "get_default_config", "init_environment"]


def get_default_config() -> ConfigDict:
    """Return the canonical configuration for the solvers."""
    cfg = ConfigDict()

    cfg.solver = ConfigDict()
    cfg.solver.tolerance = DEFAULT_TOLERANCE
    cfg.solver.max_iter = DEFAULT_MAX_ITER

    cfg.logging = ConfigDict()
    cfg.logging.level = "INFO"
    cfg.logging.format = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    cfg.logging.datefmt = "%Y-%m-%d %H:%M:%S"
    cfg.logging.force = True

    # Double precision for JAX-based objective functions
    cfg.jax = ConfigDict()
    cfg.jax.enable_x64 = True

    return cfg


def get_config(overrides: Mapping[str, Any] | None = None) -> ConfigDict:
    """Create a configuration, optionally applying ``overrides``."""
    cfg = get_default_config()
    if overrides:
        _deep_update(cfg, overrides)
    return cfg


def init_environment(
    config: AppConfig | ConfigDict | Mapping[str, Any] | None = None,
) -> ConfigDict:
    """Configure logging and JAX precision based on ``config``.

    A validated :class:`AppConfig` (for example from ``load_config``) is laid
    over the defaults, so settings it does not model keep their default values.
    """
    if config is None:
        cfg = get_default_config()
    elif isinstance(config, AppConfig):
        cfg = get_config(config.model_dump())
    elif isinstance(config, ConfigDict):
        cfg = config.copy_and_resolve_references()
    else:
        cfg = ConfigDict(deepcopy(dict(config)))

    logging_cfg = cfg.get("logging", {})
    level = logging_cfg.get("level", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=logging_cfg.get("format", None),
        datefmt=logging_cfg.get("datefmt", None),
        force=logging_cfg.get("force", False),
    )

    jax_cfg = cfg.get("jax", {})
    enable_x64 = jax_cfg.get("enable_x64")
    if enable_x64 is not None:
        from jax import config as jax_config

        jax_config.update("jax_enable_x64", bool(enable_x64))

    return cfg


def _deep_update(target: MutableMapping[str, Any], updates: Mapping[str, Any]) -> None:
    for key, value in updates.items():
        if isinstance(value, Mapping):
            if not isinstance(target.get(key), (ConfigDict, MutableMapping)):
                target[key] = ConfigDict()
            _deep_update(target[key], value)
        else:
            target[key] = value
