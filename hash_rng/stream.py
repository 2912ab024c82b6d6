# ==============================================================================
# Файл: hash_rng/stream.py
# Назначение: HashStream - неизменяемая пара (seed, префикс слов) для подсистем.
# ==============================================================================
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Tuple

from .core.bits import parts_to_words, u32
from .hashing import (
    chance,
    hash_int_in_range,
    hash_neg_one_to_one,
    hash_uint,
    hash_uint_in_range,
    hash_uint_under_limit,
    hash_zero_to_one,
)


@dataclass(frozen=True)
class HashStream:
    """A named sub-stream: every value is hashed from ``prefix + coords`` and ``seed``.

    Nothing is advanced between calls; ``stream.zero_to_one(3, 4)`` always returns
    the same float. Use ``fork`` to carve out independent sub-streams:

        trees = HashStream(world_seed).fork("trees", region_id)
        if trees.chance(x, y, probability=0.1): ...
    """

    seed: int
    prefix: Tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", u32(self.seed))
        object.__setattr__(self, "prefix", parts_to_words(self.prefix))

    def fork(self, *parts: Any) -> "HashStream":
        if not parts:
            raise ValueError("fork needs at least one int or text part")
        return HashStream(self.seed, self.prefix + parts_to_words(parts))

    def with_seed(self, seed: int) -> "HashStream":
        return HashStream(seed, self.prefix)

    def words(self, *coords: int) -> Tuple[int, ...]:
        return self.prefix + parts_to_words(coords)

    def uint(self, *coords: int) -> int:
        return hash_uint(self.words(*coords), self.seed)

    def under_limit(self, *coords: int, upper_bound: int) -> int:
        return hash_uint_under_limit(self.words(*coords), self.seed, upper_bound)

    def uint_in_range(self, *coords: int, low: int, high: int) -> int:
        return hash_uint_in_range(self.words(*coords), self.seed, low, high)

    def int_in_range(self, *coords: int, low: int, high: int) -> int:
        return hash_int_in_range(self.words(*coords), self.seed, low, high)

    def zero_to_one(self, *coords: int) -> float:
        return hash_zero_to_one(self.words(*coords), self.seed)

    def neg_one_to_one(self, *coords: int) -> float:
        return hash_neg_one_to_one(self.words(*coords), self.seed)

    def chance(self, *coords: int, probability: float) -> bool:
        return chance(self.words(*coords), self.seed, probability)
