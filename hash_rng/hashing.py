# ==============================================================================
# Файл: hash_rng/hashing.py
# Назначение: Публичные функции над буфером индексов (произвольное число слов).
# ==============================================================================
"""Hash-based random values for an arbitrary index buffer.

Every function here is pure: the same (buffer, seed, ...) always gives the same
value, and any value of the stream can be requested directly by its index.

    >>> hash_int_in_range([130, 23], seed=0, low=0, high=9)  # doctest: +SKIP

Use the range functions instead of ``hash_uint(...) % n``: they are free of
modulo bias. Ranges are closed (both limits included).
"""
from __future__ import annotations
from typing import Any

from .core.bits import IndexBuffer, as_words, i32, parts_to_words, u32
from .core.validators import (
    check_int_range,
    check_probability,
    check_uint_range,
    check_upper_bound,
)
from .numerics import kernels


def hash_uint(buffer: IndexBuffer, seed: int) -> int:
    """Raw 32-bit hash of `buffer` (whole 32-bit words) mixed with `seed`."""
    return int(kernels.hash_words(as_words(buffer), u32(seed)))


def hash_uint_under_limit(buffer: IndexBuffer, seed: int, upper_bound: int) -> int:
    """Unbiased value in [0, upper_bound). Bounds 0 and 1 always give 0."""
    check_upper_bound(upper_bound)
    return int(kernels.under_limit_words(as_words(buffer), u32(seed), u32(upper_bound)))


def _span(low: int, high: int) -> int:
    # 0 = полный диапазон 2^32
    return u32(high - low + 1)


def hash_uint_in_range(buffer: IndexBuffer, seed: int, low: int, high: int) -> int:
    """Unsigned value in the closed range [low, high]."""
    check_uint_range(low, high)
    return int(kernels.in_range_words(as_words(buffer), u32(seed), u32(low), _span(low, high)))


def hash_int_in_range(buffer: IndexBuffer, seed: int, low: int, high: int) -> int:
    """Signed 32-bit value in the closed range [low, high]."""
    check_int_range(low, high)
    raw = kernels.in_range_words(as_words(buffer), u32(seed), u32(low), _span(low, high))
    return i32(raw)


def hash_zero_to_one(buffer: IndexBuffer, seed: int) -> float:
    """Float in [0, 1] on an even grid of 2**24 + 1 points (step 1 / 2**24)."""
    return float(kernels.zero_to_one_words(as_words(buffer), u32(seed)))


def hash_neg_one_to_one(buffer: IndexBuffer, seed: int) -> float:
    """Float in [-1, 1] on an even grid of 2**25 points (step 1 / 2**24).

    -1.0 is reachable, 1.0 is not: the grid stops one step short of it.
    """
    return float(kernels.neg_one_to_one_words(as_words(buffer), u32(seed)))


def chance(buffer: IndexBuffer, seed: int, probability: float) -> bool:
    """True if a draw from [0, 1) falls under `probability`."""
    check_probability(probability)
    return bool(kernels.chance_words(as_words(buffer), u32(seed), float(probability)))


def derive_seed(seed: int, *parts: Any) -> int:
    """Child seed for a sub-system, e.g. derive_seed(world_seed, "forests", region_id)."""
    return hash_uint(parts_to_words(parts), seed)


__all__ = [
    "chance",
    "derive_seed",
    "hash_int_in_range",
    "hash_neg_one_to_one",
    "hash_uint",
    "hash_uint_in_range",
    "hash_uint_under_limit",
    "hash_zero_to_one",
]
