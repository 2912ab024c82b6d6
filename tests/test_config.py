# ==============================================================================
# Файл: tests/test_config.py
# Назначение: Настройки пакета, отключение проверок, логирование.
# ==============================================================================
import unittest
import logging

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

import hash_rng as hr
from hash_rng.config import _initial_config, config_from_env


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = hr.RngConfig()
        self.assertTrue(cfg.check_preconditions)
        self.assertEqual(cfg.log_level, "WARNING")

    def test_from_env(self):
        cfg = config_from_env({
            "HASH_RNG_CHECK_PRECONDITIONS": "off",
            "HASH_RNG_LOG_LEVEL": "debug",
        })
        self.assertEqual(cfg, hr.RngConfig(check_preconditions=False, log_level="DEBUG"))
        self.assertEqual(config_from_env({}), hr.RngConfig())

    def test_from_env_rejects_garbage(self):
        with self.assertRaises(hr.ConfigError):
            config_from_env({"HASH_RNG_CHECK_PRECONDITIONS": "maybe"})
        with self.assertRaises(hr.ConfigError):
            config_from_env({"HASH_RNG_LOG_LEVEL": "LOUD"})

    def test_import_time_config_falls_back_on_garbage(self):
        """Импорт пакета не падает из-за кривой переменной окружения."""
        env = {"HASH_RNG_CHECK_PRECONDITIONS": "maybe"}
        with self.assertLogs("hash_rng.config", level="WARNING") as cm:
            cfg = _initial_config(env)
        self.assertEqual(cfg, hr.RngConfig())
        self.assertTrue(any("HASH_RNG_CHECK_PRECONDITIONS" in line for line in cm.output))
        self.assertEqual(_initial_config({"HASH_RNG_LOG_LEVEL": "info"}),
                         hr.RngConfig(log_level="INFO"))

    def test_configure_rejects_unknown_keys(self):
        with self.assertRaises(hr.ConfigError):
            hr.configure(no_such_option=True)

    def test_set_config_validates(self):
        with self.assertRaises(hr.ConfigError):
            hr.set_config(hr.RngConfig(log_level="LOUD"))
        with self.assertRaises(TypeError):
            hr.set_config({"check_preconditions": False})

    def test_override_config_restores_previous(self):
        before = hr.get_config()
        with hr.override_config(check_preconditions=False) as cfg:
            self.assertFalse(cfg.check_preconditions)
            self.assertIs(hr.get_config(), cfg)
        self.assertEqual(hr.get_config(), before)

    def test_disabled_checks_skip_preconditions(self):
        with hr.override_config(check_preconditions=False):
            # low == high: диапазон из одного значения
            self.assertEqual(hr.hash_uint_in_range([1], 0, 5, 5), 5)
            self.assertTrue(hr.chance([1], 0, 1.5))
            self.assertFalse(hr.chance([1], 0, -0.5))
        with self.assertRaises(hr.RangeError):
            hr.hash_uint_in_range([1], 0, 5, 5)

    def test_alignment_is_checked_even_when_disabled(self):
        with hr.override_config(check_preconditions=False):
            with self.assertRaises(hr.BufferAlignmentError):
                hr.hash_uint(b"\x00\x01", 0)


class TestSetupLogging(unittest.TestCase):

    def tearDown(self):
        root = logging.getLogger("hash_rng")
        for handler in list(root.handlers):
            root.removeHandler(handler)
        root.setLevel(logging.NOTSET)

    def test_setup_logging_is_idempotent(self):
        hr.setup_logging("debug")
        logger = hr.setup_logging("debug")
        self.assertEqual(logger.name, "hash_rng")
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logging.getLogger("numba").level, logging.WARNING)

    def test_setup_logging_uses_config_level(self):
        with hr.override_config(log_level="INFO"):
            logger = hr.setup_logging()
        self.assertEqual(logger.level, logging.INFO)


if __name__ == '__main__':
    unittest.main()
