# ==============================================================================
# Файл: hash_rng/__init__.py
# Назначение: Точка входа: хеш-ГПСЧ без состояния (random access по индексу).
# ==============================================================================
from __future__ import annotations

from .config import RngConfig, configure, get_config, override_config, set_config
from .coords import (
    chance_1d,
    chance_2d,
    chance_3d,
    chance_4d,
    hash_1d_int_in_range,
    hash_1d_neg_one_to_one,
    hash_1d_uint,
    hash_1d_uint_in_range,
    hash_1d_zero_to_one,
    hash_2d_int_in_range,
    hash_2d_neg_one_to_one,
    hash_2d_uint,
    hash_2d_uint_in_range,
    hash_2d_zero_to_one,
    hash_3d_int_in_range,
    hash_3d_neg_one_to_one,
    hash_3d_uint,
    hash_3d_uint_in_range,
    hash_3d_zero_to_one,
    hash_4d_int_in_range,
    hash_4d_neg_one_to_one,
    hash_4d_uint,
    hash_4d_uint_in_range,
    hash_4d_zero_to_one,
)
from .core import (
    BufferAlignmentError,
    ConfigError,
    HashRngError,
    PreconditionError,
    ProbabilityError,
    RangeError,
    count_leading_zero_bits,
    pack_float32,
    text_to_words,
)
from .hashing import (
    chance,
    derive_seed,
    hash_int_in_range,
    hash_neg_one_to_one,
    hash_uint,
    hash_uint_in_range,
    hash_uint_under_limit,
    hash_zero_to_one,
)
from .numerics import (
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
from .setup_logging import setup_logging
from .stream import HashStream

__version__ = "0.5.0"

__all__ = [
    # буфер
    "hash_uint",
    "hash_uint_under_limit",
    "hash_uint_in_range",
    "hash_int_in_range",
    "hash_zero_to_one",
    "hash_neg_one_to_one",
    "chance",
    "derive_seed",
    # координаты
    "hash_1d_uint",
    "hash_2d_uint",
    "hash_3d_uint",
    "hash_4d_uint",
    "hash_1d_uint_in_range",
    "hash_2d_uint_in_range",
    "hash_3d_uint_in_range",
    "hash_4d_uint_in_range",
    "hash_1d_int_in_range",
    "hash_2d_int_in_range",
    "hash_3d_int_in_range",
    "hash_4d_int_in_range",
    "hash_1d_zero_to_one",
    "hash_2d_zero_to_one",
    "hash_3d_zero_to_one",
    "hash_4d_zero_to_one",
    "hash_1d_neg_one_to_one",
    "hash_2d_neg_one_to_one",
    "hash_3d_neg_one_to_one",
    "hash_4d_neg_one_to_one",
    "chance_1d",
    "chance_2d",
    "chance_3d",
    "chance_4d",
    # сетки
    "hash_uint_many",
    "hash_uint_under_limit_many",
    "hash_uint_in_range_many",
    "hash_int_in_range_many",
    "hash_zero_to_one_many",
    "hash_neg_one_to_one_many",
    "chance_many",
    "grid_coords",
    "stack_coords",
    # прочее
    "HashStream",
    "count_leading_zero_bits",
    "pack_float32",
    "text_to_words",
    "RngConfig",
    "configure",
    "get_config",
    "set_config",
    "override_config",
    "setup_logging",
    "BufferAlignmentError",
    "ConfigError",
    "HashRngError",
    "PreconditionError",
    "ProbabilityError",
    "RangeError",
]
