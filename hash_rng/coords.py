# ==============================================================================
# Файл: hash_rng/coords.py
# Назначение: Обёртки 1d/2d/3d/4d: координаты (int32) -> слова -> функция буфера.
# ==============================================================================
"""Coordinate forms of the buffer functions.

``hash_2d_uint(x, y, seed)`` is exactly ``hash_uint([x, y], seed)``; coordinates
are signed 32-bit integers packed in argument order.
"""
from __future__ import annotations

from .hashing import (
    chance,
    hash_int_in_range,
    hash_neg_one_to_one,
    hash_uint,
    hash_uint_in_range,
    hash_zero_to_one,
)


# --- Raw uint ---
def hash_1d_uint(x: int, seed: int) -> int:
    return hash_uint((x,), seed)


def hash_2d_uint(x: int, y: int, seed: int) -> int:
    return hash_uint((x, y), seed)


def hash_3d_uint(x: int, y: int, z: int, seed: int) -> int:
    return hash_uint((x, y, z), seed)


def hash_4d_uint(x: int, y: int, z: int, t: int, seed: int) -> int:
    return hash_uint((x, y, z, t), seed)


# --- Unsigned closed range ---
def hash_1d_uint_in_range(x: int, seed: int, low: int, high: int) -> int:
    return hash_uint_in_range((x,), seed, low, high)


def hash_2d_uint_in_range(x: int, y: int, seed: int, low: int, high: int) -> int:
    return hash_uint_in_range((x, y), seed, low, high)


def hash_3d_uint_in_range(x: int, y: int, z: int, seed: int, low: int, high: int) -> int:
    return hash_uint_in_range((x, y, z), seed, low, high)


def hash_4d_uint_in_range(
        x: int, y: int, z: int, t: int, seed: int, low: int, high: int
) -> int:
    return hash_uint_in_range((x, y, z, t), seed, low, high)


# --- Signed closed range ---
def hash_1d_int_in_range(x: int, seed: int, low: int, high: int) -> int:
    return hash_int_in_range((x,), seed, low, high)


def hash_2d_int_in_range(x: int, y: int, seed: int, low: int, high: int) -> int:
    return hash_int_in_range((x, y), seed, low, high)


def hash_3d_int_in_range(x: int, y: int, z: int, seed: int, low: int, high: int) -> int:
    return hash_int_in_range((x, y, z), seed, low, high)


def hash_4d_int_in_range(
        x: int, y: int, z: int, t: int, seed: int, low: int, high: int
) -> int:
    return hash_int_in_range((x, y, z, t), seed, low, high)


# --- [0, 1] ---
def hash_1d_zero_to_one(x: int, seed: int) -> float:
    return hash_zero_to_one((x,), seed)


def hash_2d_zero_to_one(x: int, y: int, seed: int) -> float:
    return hash_zero_to_one((x, y), seed)


def hash_3d_zero_to_one(x: int, y: int, z: int, seed: int) -> float:
    return hash_zero_to_one((x, y, z), seed)


def hash_4d_zero_to_one(x: int, y: int, z: int, t: int, seed: int) -> float:
    return hash_zero_to_one((x, y, z, t), seed)


# --- [-1, 1] ---
def hash_1d_neg_one_to_one(x: int, seed: int) -> float:
    return hash_neg_one_to_one((x,), seed)


def hash_2d_neg_one_to_one(x: int, y: int, seed: int) -> float:
    return hash_neg_one_to_one((x, y), seed)


def hash_3d_neg_one_to_one(x: int, y: int, z: int, seed: int) -> float:
    return hash_neg_one_to_one((x, y, z), seed)


def hash_4d_neg_one_to_one(x: int, y: int, z: int, t: int, seed: int) -> float:
    return hash_neg_one_to_one((x, y, z, t), seed)


# --- Chance ---
def chance_1d(x: int, seed: int, probability: float) -> bool:
    return chance((x,), seed, probability)


def chance_2d(x: int, y: int, seed: int, probability: float) -> bool:
    return chance((x, y), seed, probability)


def chance_3d(x: int, y: int, z: int, seed: int, probability: float) -> bool:
    return chance((x, y, z), seed, probability)


def chance_4d(x: int, y: int, z: int, t: int, seed: int, probability: float) -> bool:
    return chance((x, y, z, t), seed, probability)
