#!/usr/bin/env python3
"""
Benchmark harness comparing a plain ``dict`` with ``ByteTrie``.

Each run times four operations over the same key list:
- store: insert every key (value = position in the list)
- get: look every key up again
- ordered_iter: enumerate all keys in ascending order (``sorted`` for dict)
- prefix_scan: collect the sorted entries starting with one prefix

Results come back as a long-format ``pandas.DataFrame`` with columns
``structure, operation, repeat, n, seconds, ops_per_sec``.
"""

import sys
from time import perf_counter

import numpy as np
import pandas as pd

from bytetrie import ByteTrie
from bytetrie.logging import get_logger

logger = get_logger("bench")

STRUCTURES = ("dict", "ByteTrie")
OPERATIONS = ("store", "get", "ordered_iter", "prefix_scan")


def _timed(fn):
  t0 = perf_counter()
  fn()
  return perf_counter() - t0


def _dict_ops(keys, prefix):
  h = {}

  def store():
    for i, k in enumerate(keys):
      h[k] = i

  def get():
    for k in keys:
      h.get(k)

  def ordered_iter():
    for _ in sorted(h):
      pass

  def prefix_scan():
    sorted((k, v) for k, v in h.items() if k.startswith(prefix))

  return {"store": store, "get": get, "ordered_iter": ordered_iter, "prefix_scan": prefix_scan}


def _trie_ops(keys, prefix):
  t = ByteTrie()

  def store():
    for i, k in enumerate(keys):
      t[k] = i

  def get():
    for k in keys:
      t.get(k)

  def ordered_iter():
    for _ in t.keys():
      pass

  def prefix_scan():
    list(t.items(prefix))

  return {"store": store, "get": get, "ordered_iter": ordered_iter, "prefix_scan": prefix_scan}


def run_benchmark(keys, repeats=1, prefix=None):
  """Time dict vs. ByteTrie on ``keys``.

  Parameters
  ----------
  keys : list[str]
      Workload keys. Duplicates are allowed; they become overwrites.
  repeats : int, default=1
      Number of independent runs, each on fresh structures.
  prefix : str | None
      Prefix for the scan. Defaults to the first character of the first key.

  Returns
  -------
  pandas.DataFrame
  """
  if repeats < 1:
    raise ValueError("repeats must be at least 1")
  if not keys:
    raise ValueError("keys must not be empty")
  if prefix is None:
    prefix = keys[0][:1]

  logger.info("Benchmarking %d keys x %d repeat(s), prefix=%r", len(keys), repeats, prefix)
  rows = []
  for r in range(repeats):
    for structure, factory in (("dict", _dict_ops), ("ByteTrie", _trie_ops)):
      ops = factory(keys, prefix)
      for op in OPERATIONS:
        rows.append({
          "structure": structure,
          "operation": op,
          "repeat": r,
          "n": len(keys),
          "seconds": _timed(ops[op]),
        })

  df = pd.DataFrame(rows)
  seconds = df["seconds"].to_numpy(dtype=float)
  df["ops_per_sec"] = np.where(seconds > 0, df["n"].to_numpy() / np.where(seconds > 0, seconds, 1.0), np.nan)
  return df


def summarize(df):
  """Mean seconds per operation and structure, plus the trie/dict slowdown ratio."""
  table = df.pivot_table(index="operation", columns="structure", values="seconds", aggfunc="mean")
  table = table.reindex(index=[op for op in OPERATIONS if op in table.index])
  with np.errstate(divide="ignore", invalid="ignore"):
    table["trie_vs_dict"] = np.divide(table["ByteTrie"].to_numpy(), table["dict"].to_numpy())
  return table


if __name__ == "__main__":
  from components.work_loads import generate_numeric_keys

  n = int(sys.argv[1]) if len(sys.argv) > 1 else 100_000
  print(summarize(run_benchmark(generate_numeric_keys(n))))
