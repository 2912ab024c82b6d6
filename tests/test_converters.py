# ==============================================================================
# Файл: tests/test_converters.py
# Назначение: Тесты производных форм: диапазоны, float-сетки, chance.
# ==============================================================================
import unittest

import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))
sys.path.append(str(Path(__file__).parent))

from hash_rng import (
    ProbabilityError,
    RangeError,
    chance,
    chance_many,
    hash_int_in_range,
    hash_neg_one_to_one,
    hash_neg_one_to_one_many,
    hash_uint,
    hash_uint_in_range,
    hash_zero_to_one,
    hash_zero_to_one_many,
)
from hash_rng.core.bits import i32
from hash_rng.numerics.kernels import uint_to_neg_one_one, uint_to_zero_one
from reference_model import ref_chance, ref_neg_one_to_one, ref_zero_to_one

STEP = 1.0 / (1 << 24)


class TestClosedRanges(unittest.TestCase):

    def test_uint_range_closure_and_reachability(self):
        seen = set()
        for i in range(500):
            v = hash_uint_in_range([i], 11, 10, 17)
            self.assertTrue(10 <= v <= 17)
            seen.add(v)
        self.assertEqual(seen, set(range(10, 18)))

    def test_int_range_closure_and_reachability(self):
        seen = set()
        for i in range(500):
            v = hash_int_in_range([i, 1], 11, -3, 4)
            self.assertTrue(-3 <= v <= 4)
            seen.add(v)
        self.assertEqual(seen, set(range(-3, 5)))

    def test_int_range_fully_negative(self):
        for i in range(100):
            v = hash_int_in_range([i], 5, -1000, -990)
            self.assertTrue(-1000 <= v <= -990)

    def test_uint_range_near_top_of_word(self):
        for i in range(100):
            v = hash_uint_in_range([i], 5, 0xFFFFFFF0, 0xFFFFFFFF)
            self.assertTrue(0xFFFFFFF0 <= v <= 0xFFFFFFFF)

    def test_full_width_spans_use_raw_hash(self):
        for i in range(20):
            h = hash_uint([i], 9)
            self.assertEqual(hash_uint_in_range([i], 9, 0, 0xFFFFFFFF), h)
            self.assertEqual(
                hash_int_in_range([i], 9, -(1 << 31), (1 << 31) - 1),
                i32(h + (1 << 31)),
            )

    def test_empty_or_inverted_range_raises(self):
        with self.assertRaises(RangeError):
            hash_uint_in_range([1], 0, 5, 5)
        with self.assertRaises(RangeError):
            hash_uint_in_range([1], 0, 6, 5)
        with self.assertRaises(RangeError):
            hash_int_in_range([1], 0, 0, -1)

    def test_out_of_type_range_raises(self):
        with self.assertRaises(RangeError):
            hash_uint_in_range([1], 0, -1, 5)
        with self.assertRaises(RangeError):
            hash_uint_in_range([1], 0, 0, 1 << 32)
        with self.assertRaises(RangeError):
            hash_int_in_range([1], 0, -(1 << 31) - 1, 0)
        with self.assertRaises(RangeError):
            hash_int_in_range([1], 0, 0, 1 << 31)

    def test_non_integer_bounds_raise(self):
        with self.assertRaises(RangeError):
            hash_uint_in_range([1], 0, 0.5, 5)
        with self.assertRaises(RangeError):
            hash_uint_in_range([1], 0, 0, 9.9)
        with self.assertRaises(RangeError):
            hash_int_in_range([1], 0, -2.5, 2)
        self.assertEqual(hash_int_in_range([1], 0, np.int32(-2), np.int64(2)),
                         hash_int_in_range([1], 0, -2, 2))


class TestFloatGrids(unittest.TestCase):
    """Равномерная сетка: шаг 1/2^24 по всему отрезку."""

    def test_converter_endpoints(self):
        self.assertEqual(uint_to_zero_one(0), 0.0)
        self.assertEqual(uint_to_zero_one(1), STEP)
        self.assertEqual(uint_to_zero_one(1 << 24), 1.0)
        self.assertEqual(uint_to_neg_one_one(0), -1.0)
        self.assertEqual(uint_to_neg_one_one(1 << 24), 0.0)
        self.assertEqual(uint_to_neg_one_one((1 << 25) - 1), 1.0 - STEP)

    def test_scalar_matches_reference(self):
        for i in range(100):
            self.assertEqual(hash_zero_to_one([i], 3), ref_zero_to_one([i], 3))
            self.assertEqual(hash_neg_one_to_one([i], 3), ref_neg_one_to_one([i], 3))

    def test_zero_to_one_grid_spacing(self):
        print("\n[TEST] Running test_zero_to_one_grid_spacing...")
        coords = np.arange(300000, dtype=np.int64)[:, None]
        values = hash_zero_to_one_many(coords, 2021).astype(np.float64)
        self.assertGreaterEqual(values.min(), 0.0)
        self.assertLessEqual(values.max(), 1.0)
        k = values * (1 << 24)
        np.testing.assert_array_equal(k, np.round(k))
        gaps = np.diff(np.unique(values))
        self.assertEqual(gaps.min(), STEP)
        print("[TEST] test_zero_to_one_grid_spacing: OK")

    def test_values_exact_in_float32(self):
        for i in range(100):
            v = hash_zero_to_one([i, i], 8)
            self.assertEqual(float(np.float32(v)), v)
            w = hash_neg_one_to_one([i, i], 8)
            self.assertEqual(float(np.float32(w)), w)

    def test_neg_one_to_one_grid_and_symmetry(self):
        coords = np.arange(100000, dtype=np.int64)[:, None]
        values = hash_neg_one_to_one_many(coords, 99).astype(np.float64)
        self.assertGreaterEqual(values.min(), -1.0)
        self.assertLess(values.max(), 1.0)
        k = (values + 1.0) * (1 << 24)
        np.testing.assert_array_equal(k, np.round(k))
        negative = int((values < 0.0).sum())
        positive = len(values) - negative
        self.assertLess(abs(negative - positive), 2000)


class TestChance(unittest.TestCase):

    def test_zero_and_one_are_certain(self):
        for i in range(300):
            self.assertFalse(chance([i], 4, 0.0))
            self.assertTrue(chance([i], 4, 1.0))

    def test_half_rate(self):
        coords = np.arange(20000, dtype=np.int64)[:, None]
        rate = float(chance_many(coords, 4, 0.5).mean())
        self.assertAlmostEqual(rate, 0.5, delta=0.02)

    def test_rate_grows_with_probability(self):
        coords = np.arange(20000, dtype=np.int64)[:, None]
        rates = [float(chance_many(coords, 6, p).mean()) for p in (0.1, 0.3, 0.7, 0.9)]
        self.assertEqual(rates, sorted(rates))
        self.assertAlmostEqual(rates[0], 0.1, delta=0.02)
        self.assertAlmostEqual(rates[-1], 0.9, delta=0.02)

    def test_matches_reference(self):
        for i in range(100):
            for p in (0.01, 0.25, 0.5, 0.99):
                self.assertEqual(chance([i], 13, p), ref_chance([i], 13, p))

    def test_probability_outside_unit_interval_raises(self):
        for p in (-0.01, 1.01, float("nan")):
            with self.assertRaises(ProbabilityError):
                chance([1], 0, p)


if __name__ == '__main__':
    unittest.main()
