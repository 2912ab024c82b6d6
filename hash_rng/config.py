# ==============================================================================
# Файл: hash_rng/config.py
# Назначение: Настройки пакета (проверки предусловий, уровень логов).
# ==============================================================================
from __future__ import annotations
import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, Iterator, Mapping

from .core.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_CHECK_PRECONDITIONS = "HASH_RNG_CHECK_PRECONDITIONS"
ENV_LOG_LEVEL = "HASH_RNG_LOG_LEVEL"

_TRUE_WORDS = ("1", "true", "yes", "on")
_FALSE_WORDS = ("0", "false", "no", "off")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class RngConfig:
    # False = аналог NDEBUG: диапазоны и вероятности не проверяются
    check_preconditions: bool = True
    log_level: str = "WARNING"


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigError(msg)


def validate_config(cfg: RngConfig) -> None:
    """Raises ConfigError on the first failing check."""
    _require(
        isinstance(cfg.check_preconditions, bool),
        "check_preconditions must be a bool",
    )
    _require(
        isinstance(cfg.log_level, str) and cfg.log_level.upper() in _LOG_LEVELS,
        f"log_level must be one of {', '.join(_LOG_LEVELS)}",
    )


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise ConfigError(f"{name} must be one of {_TRUE_WORDS + _FALSE_WORDS}, got {raw!r}")


def config_from_env(environ: Mapping[str, str] | None = None) -> RngConfig:
    """Build a config from HASH_RNG_* environment variables over the defaults."""
    env = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}
    if ENV_CHECK_PRECONDITIONS in env:
        overrides["check_preconditions"] = _parse_bool(
            ENV_CHECK_PRECONDITIONS, env[ENV_CHECK_PRECONDITIONS]
        )
    if ENV_LOG_LEVEL in env:
        overrides["log_level"] = env[ENV_LOG_LEVEL].strip().upper()
    cfg = replace(RngConfig(), **overrides)
    validate_config(cfg)
    return cfg


def _initial_config(environ: Mapping[str, str] | None = None) -> RngConfig:
    """Config used at import time; a malformed environment falls back to defaults."""
    try:
        return config_from_env(environ)
    except ConfigError as e:
        logger.warning(f"Ignoring HASH_RNG_* environment, using defaults: {e}")
        return RngConfig()


_current: RngConfig = _initial_config()


def get_config() -> RngConfig:
    return _current


def set_config(cfg: RngConfig) -> RngConfig:
    """Install `cfg` as the active config and return the previous one."""
    global _current
    if not isinstance(cfg, RngConfig):
        raise TypeError("cfg must be an RngConfig")
    validate_config(cfg)
    previous, _current = _current, cfg
    logger.debug(f"hash_rng config: {cfg}")
    return previous


def configure(**overrides: Any) -> RngConfig:
    """Apply keyword overrides to the active config. Unknown keys raise ConfigError."""
    known = RngConfig.__dataclass_fields__.keys()
    unknown = sorted(set(overrides) - set(known))
    _require(not unknown, f"Unknown config keys: {unknown}")
    cfg = replace(_current, **overrides)
    set_config(cfg)
    return cfg


@contextmanager
def override_config(**overrides: Any) -> Iterator[RngConfig]:
    previous = get_config()
    try:
        yield configure(**overrides)
    finally:
        set_config(previous)
