# ==============================================================================
# Файл: hash_rng/numerics/batch.py
# Назначение: Пакетные версии функций для целых сеток координат (numba prange).
# Элемент k результата == скалярная функция от строки k (бит в бит).
# ==============================================================================
from __future__ import annotations
import logging
import time
from typing import Tuple

import numpy as np
from numba import njit, prange

from ..core.bits import u32
from ..core.constants import MASK32
from ..core.validators import (
    check_int_range,
    check_probability,
    check_uint_range,
    check_upper_bound,
)
from .kernels import (
    chance_words,
    hash_words,
    in_range_words,
    neg_one_to_one_words,
    under_limit_words,
    zero_to_one_words,
)

logger = logging.getLogger(__name__)

F32 = np.float32


# =======================================================================
# Ядра: одна строка = один буфер индексов
# =======================================================================
@njit(cache=True, parallel=True)
def _uint_rows(rows: np.ndarray, seed: int) -> np.ndarray:
    n = rows.shape[0]
    out = np.empty(n, dtype=np.uint32)
    for r in prange(n):
        out[r] = hash_words(rows[r], seed)
    return out


@njit(cache=True, parallel=True)
def _under_limit_rows(rows: np.ndarray, seed: int, upper_bound: int) -> np.ndarray:
    n = rows.shape[0]
    out = np.empty(n, dtype=np.uint32)
    for r in prange(n):
        out[r] = under_limit_words(rows[r], seed, upper_bound)
    return out


@njit(cache=True, parallel=True)
def _in_range_rows(rows: np.ndarray, seed: int, low: int, span: int) -> np.ndarray:
    n = rows.shape[0]
    out = np.empty(n, dtype=np.uint32)
    for r in prange(n):
        out[r] = in_range_words(rows[r], seed, low, span)
    return out


@njit(cache=True, parallel=True)
def _zero_to_one_rows(rows: np.ndarray, seed: int) -> np.ndarray:
    n = rows.shape[0]
    out = np.empty(n, dtype=F32)
    for r in prange(n):
        out[r] = zero_to_one_words(rows[r], seed)
    return out


@njit(cache=True, parallel=True)
def _neg_one_to_one_rows(rows: np.ndarray, seed: int) -> np.ndarray:
    n = rows.shape[0]
    out = np.empty(n, dtype=F32)
    for r in prange(n):
        out[r] = neg_one_to_one_words(rows[r], seed)
    return out


@njit(cache=True, parallel=True)
def _chance_rows(rows: np.ndarray, seed: int, probability: float) -> np.ndarray:
    n = rows.shape[0]
    out = np.empty(n, dtype=np.bool_)
    for r in prange(n):
        out[r] = chance_words(rows[r], seed, probability)
    return out


# =======================================================================
# Подготовка входа
# =======================================================================
def _as_rows(coords: np.ndarray) -> Tuple[np.ndarray, Tuple[int, ...]]:
    """(..., D) integer coordinates -> contiguous (N, D) uint32 words + leading shape."""
    arr = np.asarray(coords)
    if arr.dtype.kind not in "iu":
        raise TypeError(f"Coordinates must be an integer array, got dtype {arr.dtype}")
    if arr.ndim == 0:
        raise ValueError("Coordinates need a trailing axis of words, e.g. shape (N, 2)")
    shape = arr.shape[:-1]
    n = int(np.prod(shape, dtype=np.int64))
    flat = arr.reshape(n, arr.shape[-1]).astype(np.int64)
    rows = np.ascontiguousarray((flat & MASK32).astype(np.uint32))
    return rows, shape


def _timed(name: str, n: int, t_start: float) -> None:
    logger.debug(f"{name}: {n} индексов за {(time.perf_counter() - t_start) * 1000:.1f} мс")


def stack_coords(*axes: np.ndarray) -> np.ndarray:
    """Broadcast coordinate axes (xs, ys, ...) and stack them on a trailing axis."""
    if not axes:
        raise ValueError("stack_coords needs at least one axis")
    return np.stack(np.broadcast_arrays(*[np.asarray(a) for a in axes]), axis=-1)


def grid_coords(width: int, height: int, origin_x: int = 0, origin_y: int = 0) -> np.ndarray:
    """(height, width, 2) int64 array with [j, i] = (origin_x + i, origin_y + j)."""
    if width < 0 or height < 0:
        raise ValueError("width and height must be >= 0")
    xs = np.arange(width, dtype=np.int64) + origin_x
    ys = np.arange(height, dtype=np.int64) + origin_y
    gx, gy = np.meshgrid(xs, ys)
    return np.stack((gx, gy), axis=-1)


# =======================================================================
# Публичные пакетные функции
# =======================================================================
def hash_uint_many(coords: np.ndarray, seed: int) -> np.ndarray:
    rows, shape = _as_rows(coords)
    t_start = time.perf_counter()
    out = _uint_rows(rows, u32(seed))
    _timed("hash_uint_many", rows.shape[0], t_start)
    return out.reshape(shape)


def hash_uint_under_limit_many(coords: np.ndarray, seed: int, upper_bound: int) -> np.ndarray:
    check_upper_bound(upper_bound)
    rows, shape = _as_rows(coords)
    t_start = time.perf_counter()
    out = _under_limit_rows(rows, u32(seed), u32(upper_bound))
    _timed("hash_uint_under_limit_many", rows.shape[0], t_start)
    return out.reshape(shape)


def hash_uint_in_range_many(coords: np.ndarray, seed: int, low: int, high: int) -> np.ndarray:
    check_uint_range(low, high)
    rows, shape = _as_rows(coords)
    t_start = time.perf_counter()
    out = _in_range_rows(rows, u32(seed), u32(low), u32(high - low + 1))
    _timed("hash_uint_in_range_many", rows.shape[0], t_start)
    return out.reshape(shape)


def hash_int_in_range_many(coords: np.ndarray, seed: int, low: int, high: int) -> np.ndarray:
    check_int_range(low, high)
    rows, shape = _as_rows(coords)
    t_start = time.perf_counter()
    out = _in_range_rows(rows, u32(seed), u32(low), u32(high - low + 1))
    _timed("hash_int_in_range_many", rows.shape[0], t_start)
    return out.view(np.int32).reshape(shape)


def hash_zero_to_one_many(coords: np.ndarray, seed: int) -> np.ndarray:
    rows, shape = _as_rows(coords)
    t_start = time.perf_counter()
    out = _zero_to_one_rows(rows, u32(seed))
    _timed("hash_zero_to_one_many", rows.shape[0], t_start)
    return out.reshape(shape)


def hash_neg_one_to_one_many(coords: np.ndarray, seed: int) -> np.ndarray:
    rows, shape = _as_rows(coords)
    t_start = time.perf_counter()
    out = _neg_one_to_one_rows(rows, u32(seed))
    _timed("hash_neg_one_to_one_many", rows.shape[0], t_start)
    return out.reshape(shape)


def chance_many(coords: np.ndarray, seed: int, probability: float) -> np.ndarray:
    check_probability(probability)
    rows, shape = _as_rows(coords)
    t_start = time.perf_counter()
    out = _chance_rows(rows, u32(seed), float(probability))
    _timed("chance_many", rows.shape[0], t_start)
    return out.reshape(shape)
