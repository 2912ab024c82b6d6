# ==============================================================================
# Файл: hash_rng/core/constants.py
# Назначение: Константы хеша (таблица смешивания, шумовые константы, сетки float).
# ==============================================================================
from __future__ import annotations
from typing import Tuple

# =======================================================================
# 32-битная арифметика
# =======================================================================
WORD_BITS = 32
WORD_BYTES = 4
MASK32 = 0xFFFFFFFF

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
UINT32_MAX = MASK32

# =======================================================================
# Таблица смешивания: индекс 0 = 1, дальше нечётные константы xxHash.
# =======================================================================
MIXING_PRIMES: Tuple[int, ...] = (
    1,
    0x9E3779B1,  # 0b1001 1110 0011 0111 0111 1001 1011 0001
    0x85EBCA77,  # 0b1000 0101 1110 1011 1100 1010 0111 0111
    0xC2B2AE3D,  # 0b1100 0010 1011 0010 1010 1110 0011 1101
    0x27D4EB2F,  # 0b0010 0111 1101 0100 1110 1011 0010 1111
    0x165667B1,  # 0b0001 0110 0101 0110 0110 0111 1011 0001
)
MIXING_PRIMES_LEN = len(MIXING_PRIMES)

# Avalanche (Squirrel3)
BIT_NOISE1 = 0x68E31DA4
BIT_NOISE2 = 0xB5297A4D
BIT_NOISE3 = 0x1B56C4E9

# =======================================================================
# Сетки для float-результатов
# =======================================================================
ZERO_ONE_STEPS = 1 << 24      # [0,1]: 2^24 + 1 точек
NEG_ONE_ONE_STEPS = 1 << 25   # [-1,1]: 2^25 точек
CHANCE_STEPS = 1 << 24        # [0,1): 2^24 точек
