# ==============================================================================
# Файл: hash_rng/numerics/kernels.py
# Назначение: Numba-ядра: хеш по словам, выборка без modulo bias, перевод в float.
# Все операции - 32-битные с переполнением (маскирование вручную, т.к. в numba int64).
# ==============================================================================
from __future__ import annotations
import numpy as np
from numba import njit

from ..core.constants import (
    BIT_NOISE1,
    BIT_NOISE2,
    BIT_NOISE3,
    CHANCE_STEPS,
    MIXING_PRIMES,
    MIXING_PRIMES_LEN,
    NEG_ONE_ONE_STEPS,
    ZERO_ONE_STEPS,
)

_PRIMES = np.array(MIXING_PRIMES, dtype=np.int64)


@njit(inline='always', cache=True)
def _u32(x: int) -> int: return x & 0xFFFFFFFF


@njit(inline='always', cache=True)
def _mul32(a: int, b: int) -> int:
    # a * b mod 2^32, промежуточные значения < 2^49, int64 не переполняется
    lo = a * (b & 0xFFFF)
    hi = (a * (b >> 16)) & 0xFFFF
    return (lo + (hi << 16)) & 0xFFFFFFFF


@njit(inline='always', cache=True)
def clz32(value: int) -> int:
    value = _u32(value)
    if value == 0:
        return 32
    n = 0
    if value <= 0x0000FFFF:
        n += 16; value <<= 16
    if value <= 0x00FFFFFF:
        n += 8; value <<= 8
    if value <= 0x0FFFFFFF:
        n += 4; value <<= 4
    if value <= 0x3FFFFFFF:
        n += 2; value <<= 2
    if value <= 0x7FFFFFFF:
        n += 1
    return n


@njit(cache=True)
def hash_words(words: np.ndarray, seed: int) -> int:
    """Squirrel3-style hash over a uint32 word array.

    Each word is mixed in with a rotating pair of table constants, so the result
    depends on word order and buffer length (trailing zero words change it).
    """
    num = 0
    i = 0
    for k in range(words.shape[0]):
        i_next = (i + 1) % MIXING_PRIMES_LEN
        w = np.int64(words[k])
        num = _u32(num + _mul32(w, _PRIMES[i]) + _PRIMES[i_next])
        i = i_next

    num = _mul32(num, BIT_NOISE1)
    num = _u32(num + _u32(seed))
    num ^= num >> 8
    num = _u32(num + BIT_NOISE2)
    num ^= _u32(num << 8)
    num = _mul32(num, BIT_NOISE3)
    num ^= num >> 8
    return num


@njit(cache=True)
def under_limit_words(words: np.ndarray, seed: int, upper_bound: int) -> int:
    """Uniform value in [0, upper_bound) without modulo bias.

    Tries successive `bits`-wide windows of one hash value, each wide enough for
    the bound; when none fits, bumps the seed and hashes again.
    """
    if upper_bound < 2:
        return 0

    # наименьшее 2^n - 1 >= upper_bound - 1
    zeros = clz32(upper_bound)
    bits = 32 - zeros
    mask = 0xFFFFFFFF >> zeros
    seed = _u32(seed)

    while True:
        value = hash_words(words, seed)
        result = value & mask
        if result < upper_bound:
            return result

        bits_left = zeros
        while bits_left >= bits:
            value >>= bits
            result = value & mask
            if result < upper_bound:
                return result
            bits_left -= bits
        seed = _u32(seed + 1)


@njit(inline='always', cache=True)
def uint_to_zero_one(num: int) -> float:
    # num in [0, 2^24]; 2^24 -> ровно 1.0
    if num >= ZERO_ONE_STEPS:
        return 1.0
    return (num & (ZERO_ONE_STEPS - 1)) / ZERO_ONE_STEPS


@njit(inline='always', cache=True)
def uint_to_neg_one_one(num: int) -> float:
    # num in [0, 2^25); шаг 1/2^24 в обе стороны от нуля
    result = (num & (NEG_ONE_ONE_STEPS - 1)) / NEG_ONE_ONE_STEPS
    return result * 2.0 - 1.0


@njit(cache=True)
def in_range_words(words: np.ndarray, seed: int, low: int, span: int) -> int:
    """low + uniform offset in [0, span), wrapped to 32 bits. span == 0 means 2^32."""
    if span == 0:
        return _u32(hash_words(words, seed) + low)
    return _u32(under_limit_words(words, seed, span) + low)


@njit(cache=True)
def zero_to_one_words(words: np.ndarray, seed: int) -> float:
    return uint_to_zero_one(under_limit_words(words, seed, ZERO_ONE_STEPS + 1))


@njit(cache=True)
def neg_one_to_one_words(words: np.ndarray, seed: int) -> float:
    return uint_to_neg_one_one(under_limit_words(words, seed, NEG_ONE_ONE_STEPS))


@njit(cache=True)
def chance_words(words: np.ndarray, seed: int, probability: float) -> bool:
    # полуоткрытый [0,1): p = 1.0 всегда True, p = 0.0 всегда False
    draw = under_limit_words(words, seed, CHANCE_STEPS) / CHANCE_STEPS
    return draw < probability
