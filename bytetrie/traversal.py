"""
Dictionary-order traversal engine.

A single iterative pre-order walk serves every enumeration method: at each
node the node's own entry comes first, then its children in ascending label
order. Because shorter keys are emitted before the longer keys they prefix,
the output follows byte-wise lexicographic key order.

The walk keeps one shared ``bytearray`` holding the key of the node being
visited and only copies it to ``bytes`` at yield time. An explicit stack
replaces recursion, so depth is bounded by heap memory rather than the
interpreter's recursion limit.

While a walk is running it holds the owning trie's guard; ``store`` and
``delete`` on that trie raise ``ConcurrentModificationError`` until the walk
is exhausted, closed, or aborted by an exception.
"""

from contextlib import closing
from enum import Enum


class Mode(Enum):
  VALUES = "values"
  KEYS = "keys"
  PAIRS = "pairs"


class _Stop:
  __slots__ = ()

  def __repr__(self):
    return "STOP"


#: Returned by a consumer to end a traversal early.
STOP = _Stop()


def walk(trie, prefix=b"", mode=Mode.PAIRS):
  """Return a one-shot iterator over the entries under ``prefix``.

  Parameters
  ----------
  trie : ByteTrie
      Trie to enumerate.
  prefix : bytes | str, default=b""
      Restriction prefix. ``b""`` enumerates the whole trie.
  mode : Mode, default=Mode.PAIRS
      What each entry is: the value, the full key, or ``(key, value)``.

  Notes
  -----
  - The prefix is encoded immediately; the walk (and the guard) starts on
    the first ``next()``.
  - Keys are always the full original key, never the suffix past ``prefix``.
    The node reached by ``prefix`` is included when it holds a value.
  - An unknown prefix yields nothing.
  """
  mode = Mode(mode)
  prefix = trie.encode_key(prefix)
  return _walk_from(trie, prefix, mode)


def _entry(mode, buf, node):
  if mode is Mode.VALUES:
    return node.value
  key = bytes(buf)
  if mode is Mode.KEYS:
    return key
  return key, node.value


def _walk_from(trie, prefix, mode):
  start = trie.prefix_search(prefix)
  if start is None:
    return
  with trie.guard.holding():
    buf = bytearray(prefix)
    if start.has_value:
      yield _entry(mode, buf, start)

    # (children iterator, length of buf for the node that owns the iterator)
    stack = [(start.iter_children(), len(buf))]
    while stack:
      it, depth = stack[-1]
      child = next(it, None)
      if child is None:
        stack.pop()
        continue
      del buf[depth:]
      buf.append(child.label)
      if child.has_value:
        yield _entry(mode, buf, child)
      if child.children:
        stack.append((child.iter_children(), depth + 1))


def run(trie, prefix, mode, consumer):
  """Feed every entry under ``prefix`` to ``consumer``, synchronously and in order.

  ``consumer`` is called with ``value``, ``key`` or ``(key, value)`` according
  to ``mode``. Returning ``STOP`` ends the walk early. Exceptions raised by
  the consumer propagate; the guard is released either way.

  Returns
  -------
  int
      Number of entries handed to the consumer.
  """
  mode = Mode(mode)
  delivered = 0
  entries = walk(trie, prefix, mode)
  with closing(entries):
    for entry in entries:
      delivered += 1
      if mode is Mode.PAIRS:
        result = consumer(*entry)
      else:
        result = consumer(entry)
      if result is STOP:
        break
  return delivered
