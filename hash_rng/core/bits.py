# ==============================================================================
# Файл: hash_rng/core/bits.py
# Назначение: 32-битные слова: маскирование, упаковка буферов индексов, clz.
# ==============================================================================
from __future__ import annotations
import struct
from typing import Any, Iterable, Tuple, Union

import numpy as np

from .constants import MASK32, WORD_BITS, WORD_BYTES
from .errors import BufferAlignmentError

WORD_DTYPE = np.dtype(np.uint32)
_LE_WORD = np.dtype("<u4")
# строки, структуры и даты/интервалы не хешируются как сырая память
_NON_RAW_KINDS = "USVMm"

IndexBuffer = Union[bytes, bytearray, memoryview, np.ndarray, Iterable[int]]


def u32(n: int) -> int:
    return int(n) & MASK32


def i32(n: int) -> int:
    """Reinterpret the low 32 bits of `n` as a signed integer."""
    n = int(n) & MASK32
    return n - (1 << WORD_BITS) if n & 0x80000000 else n


def count_leading_zero_bits(value: int) -> int:
    """Leading zero bits of `value` as a 32-bit word; 0 maps to 32."""
    return WORD_BITS - u32(value).bit_length()


def _words_from_bytes(raw: bytes) -> np.ndarray:
    if len(raw) % WORD_BYTES != 0:
        raise BufferAlignmentError(
            f"Index buffer length must be a multiple of {WORD_BYTES} bytes, got {len(raw)}"
        )
    return np.frombuffer(raw, dtype=_LE_WORD).astype(WORD_DTYPE)


def _word(value: Any) -> int:
    if isinstance(value, (int, np.integer)):
        return int(value) & MASK32
    raise TypeError(f"Index words must be integers, got {type(value).__name__}")


def as_words(buffer: IndexBuffer) -> np.ndarray:
    """Normalise an index buffer into a contiguous uint32 array.

    Integer sequences, integer numpy arrays and object arrays of integers contribute
    one word per element (values wrapped modulo 2**32, so signed coordinates keep
    their two's complement). Bytes-like objects and numeric non-integer arrays are
    read as raw little-endian words. String, void and datetime arrays raise TypeError.
    """
    if isinstance(buffer, np.ndarray):
        kind = buffer.dtype.kind
        if kind in "iu":
            flat = np.ascontiguousarray(buffer).ravel()
            return (flat.astype(np.int64) & MASK32).astype(WORD_DTYPE)
        if kind == "O":
            # в памяти object-массива лежат указатели, берём сами значения
            return np.array([_word(v) for v in buffer.ravel()], dtype=WORD_DTYPE)
        if kind in _NON_RAW_KINDS:
            raise TypeError(f"Cannot hash numpy array of dtype {buffer.dtype}")
        # float32-позиции и т.п.: хешируем память как есть, но в LE
        le = np.ascontiguousarray(buffer).astype(buffer.dtype.newbyteorder("<"), copy=False)
        return _words_from_bytes(le.tobytes())
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        return _words_from_bytes(bytes(buffer))
    if isinstance(buffer, str):
        raise TypeError("Text is not an index buffer, use text_to_words() first")
    return np.array([_word(v) for v in buffer], dtype=WORD_DTYPE)


def text_to_words(label: str) -> Tuple[int, ...]:
    """UTF-8 label as (byte length, *zero-padded little-endian words)."""
    raw = label.encode("utf-8")
    padded = raw + b"\x00" * (-len(raw) % WORD_BYTES)
    return (len(raw),) + tuple(int(w) for w in _words_from_bytes(padded))


def parts_to_words(parts: Iterable[Any]) -> Tuple[int, ...]:
    """Flatten ints and text labels into one tuple of words."""
    words: list[int] = []
    for part in parts:
        if isinstance(part, str):
            words.extend(text_to_words(part))
        else:
            words.append(_word(part))
    return tuple(words)


def pack_float32(*values: float) -> bytes:
    """Pack float positions as little-endian float32 for use as an index buffer."""
    return struct.pack(f"<{len(values)}f", *values)
