#!/usr/bin/env python3
# dev_tests/test_bench.py

import unittest

import numpy as np

from components.bench import OPERATIONS, STRUCTURES, run_benchmark, summarize
from components.work_loads import generate_numeric_keys


class TestBenchmark(unittest.TestCase):
    def test_frame_shape(self):
        df = run_benchmark(generate_numeric_keys(500), repeats=2)
        self.assertEqual(len(df), 2 * len(STRUCTURES) * len(OPERATIONS))
        self.assertEqual(
            list(df.columns),
            ["structure", "operation", "repeat", "n", "seconds", "ops_per_sec"],
        )
        self.assertTrue((df["seconds"] >= 0).all())
        self.assertTrue((df["n"] == 500).all())
        self.assertEqual(set(df["structure"]), set(STRUCTURES))

    def test_summary(self):
        df = run_benchmark(generate_numeric_keys(200), prefix="1")
        table = summarize(df)
        self.assertEqual(list(table.index), list(OPERATIONS))
        self.assertIn("trie_vs_dict", table.columns)
        self.assertTrue(np.all(table["ByteTrie"].to_numpy() >= 0))

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            run_benchmark([], repeats=1)
        with self.assertRaises(ValueError):
            run_benchmark(["a"], repeats=0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
