#!/usr/bin/env python3
# dev_tests/test_config_logging.py

import logging
import os
import unittest
from unittest import mock

from bytetrie import ByteTrie, ConcurrentModificationError, TrieConfig
from bytetrie import config as bt_config
from bytetrie.logging import get_logger


class TestTrieConfig(unittest.TestCase):
    def setUp(self):
        bt_config.reset_runtime_config()

    def tearDown(self):
        bt_config.reset_runtime_config()

    def test_defaults(self):
        cfg = TrieConfig()
        self.assertEqual(cfg.key_encoding, "utf-8")
        self.assertEqual(cfg.log_level, "WARNING")
        self.assertEqual(cfg.log_level_value, logging.WARNING)
        self.assertFalse(cfg.warn_on_guard)

    def test_normalisation(self):
        cfg = TrieConfig(key_encoding="latin-1", log_level=" debug ")
        self.assertEqual(cfg.key_encoding, "iso8859-1")
        self.assertEqual(cfg.log_level, "DEBUG")

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            TrieConfig(key_encoding="no-such-codec")
        with self.assertRaises(ValueError):
            TrieConfig(log_level="LOUD")

    def test_from_env(self):
        env = {
            "BYTETRIE_KEY_ENCODING": "ascii",
            "BYTETRIE_LOG_LEVEL": "info",
            "BYTETRIE_WARN_ON_GUARD": "yes",
        }
        with mock.patch.dict(os.environ, env):
            cfg = bt_config.runtime_config()
        self.assertEqual(cfg.key_encoding, "ascii")
        self.assertEqual(cfg.log_level, "INFO")
        self.assertTrue(cfg.warn_on_guard)

    def test_runtime_config_is_cached(self):
        with mock.patch.dict(os.environ, {"BYTETRIE_LOG_LEVEL": "ERROR"}):
            first = bt_config.runtime_config()
        with mock.patch.dict(os.environ, {"BYTETRIE_LOG_LEVEL": "DEBUG"}):
            self.assertIs(bt_config.runtime_config(), first)
            bt_config.reset_runtime_config()
            self.assertEqual(bt_config.runtime_config().log_level, "DEBUG")

    def test_unrecognised_bool_falls_back_to_default(self):
        with mock.patch.dict(os.environ, {"BYTETRIE_WARN_ON_GUARD": "maybe"}):
            self.assertFalse(TrieConfig.from_env().warn_on_guard)

    def test_trie_uses_runtime_config(self):
        with mock.patch.dict(os.environ, {"BYTETRIE_KEY_ENCODING": "latin-1"}):
            bt_config.reset_runtime_config()
            t = ByteTrie()
        t.store("é", 1)
        self.assertEqual(list(t.keys()), [b"\xe9"])


class TestLogging(unittest.TestCase):
    def test_logger_respects_config_level(self):
        logger = get_logger("tests.logging", TrieConfig(log_level="DEBUG"))
        self.assertTrue(logger.isEnabledFor(logging.DEBUG))
        self.assertEqual(logger.logger.name, "bytetrie.tests.logging")

    def test_configured_logger_leaves_shared_level_alone(self):
        shared = logging.getLogger("bytetrie.tests.shared")
        shared.setLevel(logging.ERROR)
        quiet = get_logger("tests.shared", TrieConfig(log_level="CRITICAL"))
        loud = get_logger("tests.shared", TrieConfig(log_level="DEBUG"))
        self.assertEqual(shared.level, logging.ERROR)
        self.assertFalse(quiet.isEnabledFor(logging.ERROR))
        self.assertTrue(loud.isEnabledFor(logging.DEBUG))

    def test_process_logger_uses_runtime_config(self):
        bt_config.reset_runtime_config()
        try:
            with mock.patch.dict(os.environ, {"BYTETRIE_LOG_LEVEL": "INFO"}):
                logger = get_logger("tests.process")
            self.assertEqual(logger.level, logging.INFO)
            self.assertEqual(logger.name, "bytetrie.tests.process")
            self.assertEqual(get_logger().name, "bytetrie")
        finally:
            bt_config.reset_runtime_config()

    def test_debug_trie_keeps_logging_after_other_tries(self):
        verbose = ByteTrie(config=TrieConfig(log_level="DEBUG"))
        ByteTrie()
        ByteTrie(config=TrieConfig(log_level="ERROR"))
        with self.assertLogs("bytetrie", level="DEBUG") as cm:
            verbose.batch_store([("a", 1)])
        self.assertTrue(any("batch_store" in line for line in cm.output))

    def test_default_trie_stays_quiet_after_debug_trie(self):
        ByteTrie(config=TrieConfig(log_level="DEBUG"))
        quiet = ByteTrie(config=TrieConfig())
        with self.assertLogs("bytetrie", level="DEBUG") as cm:
            logging.getLogger("bytetrie").warning("marker")
            quiet.batch_store([("a", 1)])
        self.assertEqual(cm.output, ["WARNING:bytetrie:marker"])

    def test_guard_rejection_logged_as_warning(self):
        t = ByteTrie({"a": 1}, config=TrieConfig(warn_on_guard=True))

        def consumer(key):
            with self.assertRaises(ConcurrentModificationError):
                t.store("b", 2)

        with self.assertLogs("bytetrie.trie", level="WARNING") as cm:
            t.each_key(consumer)
        self.assertIn("Rejected store", cm.output[0])

    def test_guard_rejection_logged_at_debug_by_default(self):
        t = ByteTrie({"a": 1}, config=TrieConfig(log_level="DEBUG"))

        def consumer(key):
            with self.assertRaises(ConcurrentModificationError):
                t.delete(key)

        with self.assertLogs("bytetrie.trie", level="DEBUG") as cm:
            t.each_key(consumer)
        self.assertTrue(any(r.levelno == logging.DEBUG and "Rejected delete" in r.getMessage()
                            for r in cm.records))
        self.assertFalse(any(r.levelno >= logging.WARNING for r in cm.records))

    def test_batch_operations_logged(self):
        t = ByteTrie(config=TrieConfig(log_level="DEBUG"))
        with self.assertLogs("bytetrie.trie", level="DEBUG") as cm:
            t.batch_store([("a", 1), ("b", 2)])
            t.batch_delete(["a", "c"])
            t.freeze()
        output = "\n".join(cm.output)
        self.assertIn("2 new keys", output)
        self.assertIn("1 deleted, 1 missing", output)
        self.assertIn("Froze trie holding 1 entries", output)


if __name__ == "__main__":
    unittest.main(verbosity=2)
