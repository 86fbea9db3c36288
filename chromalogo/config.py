# chromalogo/config.py
"""
Cache configuration for chromalogo.

Settings are layered, lowest precedence first:

1. :class:`CacheConfig` defaults
2. an optional YAML file with a ``cache:`` mapping
3. environment variables (``CHROMALOGO_CACHE_SIZE``,
   ``CHROMALOGO_GRADIENT_CACHE_SIZE``, ``CHROMALOGO_CACHE_TTL``,
   ``CHROMALOGO_CACHE_REFRESH``)

Out-of-range numbers (infinity included) are clamped rather than rejected;
values that are not numbers at all, or NaN, raise
:class:`InvalidConfigurationError`.

Example YAML::

    cache:
      glyph_cache_size: 2000
      gradient_cache_size: 300
      max_age_seconds: 600
      refresh_age_on_access: false

Python 3.9+ compatible.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Final, Mapping, Optional, Union

import yaml

from .errors import InvalidConfigurationError

__all__ = [
    "CacheConfig",
    "ENV_VARS",
    "SIZE_BOUNDS",
    "AGE_BOUNDS",
    "load_cache_config",
    "load_yaml_config",
    "clamp_config",
    "parse_bool",
]

logger = logging.getLogger("chromalogo.config")

SIZE_BOUNDS: Final = (10, 10_000)
AGE_BOUNDS: Final = (60.0, 3_600.0)  # seconds: one minute .. one hour

ENV_VARS: Final[Dict[str, str]] = {
    "glyph_cache_size": "CHROMALOGO_CACHE_SIZE",
    "gradient_cache_size": "CHROMALOGO_GRADIENT_CACHE_SIZE",
    "max_age_seconds": "CHROMALOGO_CACHE_TTL",
    "refresh_age_on_access": "CHROMALOGO_CACHE_REFRESH",
}

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class CacheConfig:
    """Sizing and expiry policy for the glyph and gradient caches.

    Attributes
    ----------
    glyph_cache_size : int
        Maximum number of generated glyph blocks kept.
    gradient_cache_size : int
        Maximum number of built gradients kept (diagonal rows included).
    max_age_seconds : float
        Time-to-live of an entry.
    refresh_age_on_access : bool
        Sliding expiry (True) or absolute expiry from insertion (False).
    """

    glyph_cache_size: int = 1000
    gradient_cache_size: int = 500
    max_age_seconds: float = 1800.0
    refresh_age_on_access: bool = True


# =============================================================================
# Coercion helpers
# =============================================================================

def parse_bool(option: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    word = str(value).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise InvalidConfigurationError(option, f"expected a boolean, got {value!r}")


def _parse_number(option: str, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidConfigurationError(option, f"expected a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(option, f"expected a number, got {value!r}") from exc


def _clamp(option: str, value: float, bounds) -> float:
    if math.isnan(value):
        raise InvalidConfigurationError(option, "expected a number, got NaN")
    low, high = bounds
    return max(low, min(value, high))


def _coerce(option: str, value: Any) -> Any:
    if option == "refresh_age_on_access":
        return parse_bool(option, value)
    number = _parse_number(option, value)
    if option == "max_age_seconds":
        return _clamp(option, number, AGE_BOUNDS)
    return int(_clamp(option, number, SIZE_BOUNDS))


def clamp_config(config: CacheConfig) -> CacheConfig:
    """Return ``config`` with sizes and age pulled into their sane ranges."""
    clamped = replace(
        config,
        glyph_cache_size=int(_clamp("glyph_cache_size", config.glyph_cache_size, SIZE_BOUNDS)),
        gradient_cache_size=int(_clamp("gradient_cache_size", config.gradient_cache_size, SIZE_BOUNDS)),
        max_age_seconds=float(_clamp("max_age_seconds", config.max_age_seconds, AGE_BOUNDS)),
    )
    if clamped != config:
        logger.debug("Cache config clamped: %s -> %s", config, clamped)
    return clamped


# =============================================================================
# Sources
# =============================================================================

def load_yaml_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Read the ``cache:`` mapping from a YAML file.

    Raises:
        InvalidConfigurationError: If the file is missing or malformed.
    """
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InvalidConfigurationError("config", f"cannot read {config_path}: {exc}") from exc

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise InvalidConfigurationError("config", f"error parsing {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidConfigurationError("config", f"{config_path} must parse to a mapping")
    section = data.get("cache") or {}
    if not isinstance(section, dict):
        raise InvalidConfigurationError("cache", "the 'cache' section must be a mapping")
    logger.debug("Loaded cache config from %s with keys: %s", config_path, list(section))
    return section


def _apply(config: CacheConfig, overrides: Mapping[str, Any], source: str) -> CacheConfig:
    known = {f.name for f in fields(CacheConfig)}
    updates: Dict[str, Any] = {}
    for option, value in overrides.items():
        if option not in known:
            logger.warning("Ignoring unknown cache option '%s' from %s", option, source)
            continue
        updates[option] = _coerce(option, value)
    return replace(config, **updates)


def load_cache_config(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> CacheConfig:
    """Build a clamped :class:`CacheConfig` from defaults, YAML and env.

    Parameters
    ----------
    path : str | Path | None
        Optional YAML file; see the module docstring for its shape.
    environ : Mapping[str, str] | None
        Environment to read; defaults to ``os.environ``.
    """
    env = os.environ if environ is None else environ
    config = CacheConfig()

    if path is not None:
        config = _apply(config, load_yaml_config(path), str(path))

    from_env = {opt: env[var] for opt, var in ENV_VARS.items() if env.get(var, "").strip()}
    if from_env:
        config = _apply(config, from_env, "environment")

    return clamp_config(config)
