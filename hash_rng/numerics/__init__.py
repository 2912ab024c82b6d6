# ==============================================================================
# Файл: hash_rng/numerics/__init__.py
# Назначение: Numba-ядра и пакетные (сеточные) функции.
# ==============================================================================
from __future__ import annotations

from .batch import (
    chance_many,
    grid_coords,
    hash_int_in_range_many,
    hash_neg_one_to_one_many,
    hash_uint_in_range_many,
    hash_uint_many,
    hash_uint_under_limit_many,
    hash_zero_to_one_many,
    stack_coords,
)

__all__ = [
    "chance_many",
    "grid_coords",
    "hash_int_in_range_many",
    "hash_neg_one_to_one_many",
    "hash_uint_in_range_many",
    "hash_uint_many",
    "hash_uint_under_limit_many",
    "hash_zero_to_one_many",
    "stack_coords",
]
