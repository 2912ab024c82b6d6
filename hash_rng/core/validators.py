# ========================
# file: hash_rng/core/validators.py
# ========================
from __future__ import annotations
import math
from typing import Any, Type

import numpy as np

from .constants import INT32_MAX, INT32_MIN, UINT32_MAX
from .errors import PreconditionError, ProbabilityError, RangeError
from ..config import get_config


def _require(cond: bool, msg: str, error: Type[PreconditionError] = PreconditionError) -> None:
    if not cond:
        raise error(msg)


def checks_enabled() -> bool:
    return get_config().check_preconditions


def _is_int(value: Any) -> bool:
    return isinstance(value, (int, np.integer))


def check_upper_bound(upper_bound: int) -> None:
    if not checks_enabled():
        return
    _require(
        _is_int(upper_bound),
        f"upper_bound must be an integer, got {upper_bound!r}",
        RangeError,
    )
    _require(
        0 <= upper_bound <= UINT32_MAX,
        f"upper_bound must be in [0, {UINT32_MAX}], got {upper_bound}",
        RangeError,
    )


def check_uint_range(low: int, high: int) -> None:
    if not checks_enabled():
        return
    _require(
        _is_int(low) and _is_int(high),
        f"low and high must be integers, got [{low!r}, {high!r}]",
        RangeError,
    )
    _require(low < high, f"low must be < high, got [{low}, {high}]", RangeError)
    _require(
        0 <= low and high <= UINT32_MAX,
        f"uint range must lie in [0, {UINT32_MAX}], got [{low}, {high}]",
        RangeError,
    )


def check_int_range(low: int, high: int) -> None:
    if not checks_enabled():
        return
    _require(
        _is_int(low) and _is_int(high),
        f"low and high must be integers, got [{low!r}, {high!r}]",
        RangeError,
    )
    _require(low < high, f"low must be < high, got [{low}, {high}]", RangeError)
    _require(
        INT32_MIN <= low and high <= INT32_MAX,
        f"int range must lie in [{INT32_MIN}, {INT32_MAX}], got [{low}, {high}]",
        RangeError,
    )


def check_probability(probability: float) -> None:
    if not checks_enabled():
        return
    # NaN не проходит ни одно сравнение
    _require(
        not math.isnan(probability) and 0.0 <= probability <= 1.0,
        f"probability must be in [0, 1], got {probability}",
        ProbabilityError,
    )
