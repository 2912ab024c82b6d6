# ==============================================================================
# Файл: hash_rng/core/__init__.py
# Назначение: Константы, ошибки и работа с 32-битными словами.
# ==============================================================================
from __future__ import annotations

from .bits import (
    as_words,
    count_leading_zero_bits,
    i32,
    pack_float32,
    parts_to_words,
    text_to_words,
    u32,
)
from .errors import (
    BufferAlignmentError,
    ConfigError,
    HashRngError,
    PreconditionError,
    ProbabilityError,
    RangeError,
)

__all__ = [
    "as_words",
    "count_leading_zero_bits",
    "i32",
    "pack_float32",
    "parts_to_words",
    "text_to_words",
    "u32",
    "BufferAlignmentError",
    "ConfigError",
    "HashRngError",
    "PreconditionError",
    "ProbabilityError",
    "RangeError",
]
