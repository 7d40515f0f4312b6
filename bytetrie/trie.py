"""
Byte-keyed trie mapping with dictionary-order enumeration.

This module provides `ByteTrie`, an in-memory mapping from byte-sequence keys
to arbitrary caller values, stored as a prefix tree with one node per byte.
Key design choices:
- **Sorted children:** every `TrieNode` keeps its children in ascending label
  order, so enumeration is in byte-wise lexicographic key order for any
  insertion order.
- **Explicit presence:** a node's value slot is tagged present/absent, so
  `None`, `0` and `b""` are storable values.
- **Exact size:** the entry counter only moves on an absent->present or
  present->absent transition; overwrites and misses leave it alone.
- **Mutation guard:** `store` / `delete` raise `ConcurrentModificationError`
  while any traversal over the same trie is running.
- **Batch performance:** `batch_store` and `batch_delete` exploit the Longest
  Common Prefix (LCP) between *adjacent, sorted* keys to minimize retraversal.


Classes
-------
ByteTrie
    Public API: store/get/delete/size, the `each_*` and
    `common_prefix_each_*` callbacks, lazy `keys`/`values`/`items`, batch
    operations and structural stats.


Complexity (typical)
--------------------
- store / get / delete: O(L log d) where L = len(key) and d is the fan-out
- enumerate prefix: O(L + K * avg_suffix_length), where K is entries yielded
- batch store (sorted): ~O(total new bytes created)


Conventions & Notes
-------------------
- **Keys:** `bytes`, `bytearray` and `memoryview` are used as-is; `str` is
  encoded with `TrieConfig.key_encoding`. Keys come back as `bytes`.
- **Deletion semantics:** `delete` clears the value slot only. Nodes are never
  removed, so prefixes of deleted keys stay as structural scaffolding. Memory
  is not reclaimed under churn; `count_nodes` reports it.
- **Empty key:** `b""` resolves to the root and is a regular key.
"""

from . import traversal
from .config import runtime_config
from .errors import FrozenTrieError
from .guard import TraversalGuard
from .logging import get_logger
from .node import TrieNode
from .traversal import Mode


class ByteTrie:
  __slots__ = ("root", "guard", "config", "_size", "_frozen", "_log")

  def __init__(self, items=None, *, config=None):
    self.root = TrieNode()
    self.guard = TraversalGuard()
    self.config = runtime_config() if config is None else config
    self._size = 0
    self._frozen = False
    self._log = get_logger("trie", self.config)
    if items is not None:
      self.batch_store(items.items() if hasattr(items, "items") else items)

  # -------------------------------------------------------------
  # Helpers
  # -------------------------------------------------------------

  def encode_key(self, key):
    """Return ``key`` as ``bytes``.

    Raises
    ------
    TypeError
        If ``key`` is neither a string nor a bytes-like object.
    """
    if isinstance(key, bytes):
      return key
    if isinstance(key, str):
      return key.encode(self.config.key_encoding)
    if isinstance(key, (bytearray, memoryview)):
      return bytes(key)
    raise TypeError(f"trie keys must be str or bytes-like, not {type(key).__name__}")

  def _check_mutable(self, operation):
    if self._frozen:
      raise FrozenTrieError(operation)
    if self.guard.active:
      level = "warning" if self.config.warn_on_guard else "debug"
      getattr(self._log, level)(
        "Rejected %s: %d traversal(s) in progress", operation, self.guard.depth
      )
      self.guard.check(operation)

  def _prepare_batch(self, pairs, presorted=False):
    """Encode, and optionally sort, a batch of ``(key, value)`` pairs.

    Later pairs win over earlier pairs with the same key, as with
    ``dict.update``.

    Parameters
    ----------
    pairs : Iterable[tuple[bytes | str, object]]
    presorted : bool, default=False
        If True, keys already arrive in ascending byte order (after encoding);
        duplicates are collapsed in a single O(n) pass.

    Returns
    -------
    list[tuple[bytes, object]]
    """
    items = ((self.encode_key(k), v) for k, v in pairs)
    if not presorted:
      return sorted(dict(items).items())

    unique = []
    for k, v in items:
      if unique and unique[-1][0] == k:
        unique[-1] = (k, v)
      else:
        unique.append((k, v))
    return unique

  # -------------------------------------------------------------
  # Core Operations
  # -------------------------------------------------------------

  def store(self, key, value):
    """Associate ``value`` with ``key``.

    Returns
    -------
    object | None
        The value previously stored under ``key``, or None if there was none.

    Raises
    ------
    ConcurrentModificationError
        While a traversal over this trie is running. Nothing is changed.
    FrozenTrieError
        After `freeze`. Nothing is changed.
    """
    key = self.encode_key(key)
    self._check_mutable("store")
    node = self.root
    for b in key:
      node, _ = node.child_or_create(b)
    previous, had = node.set_value(value)
    if not had:
      self._size += 1
      return None
    return previous

  def get(self, key, default=None):
    """Return the value stored under ``key``, or ``default``."""
    node = self.prefix_search(key)
    if node is None or not node.has_value:
      return default
    return node.value

  def delete(self, key, fallback=None):
    """Remove the value stored under ``key`` and return it.

    Parameters
    ----------
    key : bytes | str
    fallback : Callable[[bytes], object] | None
        Called with the encoded key when nothing is stored under it; its
        result is returned instead of None.

    Notes
    -----
    Only the value slot is cleared. The node and its ancestors remain.
    """
    key = self.encode_key(key)
    self._check_mutable("delete")
    node = self.prefix_search(key)
    if node is not None and node.has_value:
      previous, _ = node.clear_value()
      self._size -= 1
      return previous
    if fallback is not None:
      return fallback(key)
    return None

  def size(self):
    """Return the number of keys holding a value."""
    return self._size

  length = size

  def prefix_search(self, prefix):
    """Return the node at the end of ``prefix``, or None if the path is missing.

    The node may or may not hold a value.
    """
    node = self.root
    for b in self.encode_key(prefix):
      node = node.child(b)
      if node is None:
        return None
    return node

  def freeze(self):
    """Reject every later mutation with `FrozenTrieError`. Returns the trie."""
    if not self._frozen:
      self._frozen = True
      self._log.debug("Froze trie holding %d entries", self._size)
    return self

  @property
  def frozen(self):
    return self._frozen

  # -------------------------------------------------------------
  # Batch Operations
  # -------------------------------------------------------------

  def batch_store(self, pairs, *, presorted=False):
    """Store many pairs, reusing the path shared with the previous key.

    Returns
    -------
    int
        Number of keys that did not hold a value before.
    """
    self._check_mutable("store")
    pairs = self._prepare_batch(pairs, presorted)

    prev = b""
    path = [self.root]
    added = 0

    for key, value in pairs:
      lp, lk = len(prev), len(key)
      i = 0
      while i < lp and i < lk and prev[i] == key[i]:
        i += 1

      del path[i + 1:]
      node = path[-1]
      for b in key[i:]:
        node, _ = node.child_or_create(b)
        path.append(node)

      _, had = node.set_value(value)
      if not had:
        added += 1
      prev = key

    self._size += added
    self._log.debug("batch_store: %d pairs, %d new keys", len(pairs), added)
    return added

  def batch_delete(self, keys, *, presorted=False):
    """Delete many keys with LCP reuse.

    Returns
    -------
    tuple[int, int]
        (deleted_count, missing_count)
    """
    self._check_mutable("delete")
    keys = [self.encode_key(k) for k in keys]
    if not presorted:
      keys = sorted(set(keys))

    prev = b""
    path = [self.root]
    deleted = 0
    missing = 0

    for key in keys:
      i = 0
      lp, lk = len(prev), len(key)
      while i < lp and i < lk and prev[i] == key[i]:
        i += 1

      del path[i + 1:]
      node = path[-1]
      for b in key[i:]:
        node = node.child(b)
        if node is None:
          break
        path.append(node)

      # only the matched part of the key is reusable by the next one
      prev = key[:len(path) - 1]
      if node is None or not node.has_value:
        missing += 1
        continue
      node.clear_value()
      deleted += 1

    self._size -= deleted
    self._log.debug("batch_delete: %d deleted, %d missing", deleted, missing)
    return deleted, missing

  # -------------------------------------------------------------
  # Traversal
  # -------------------------------------------------------------

  def each_value(self, consumer):
    """Call ``consumer(value)`` for every entry, in dictionary order."""
    traversal.run(self, b"", Mode.VALUES, consumer)
    return self

  def each_key(self, consumer):
    """Call ``consumer(key)`` for every entry, in dictionary order."""
    traversal.run(self, b"", Mode.KEYS, consumer)
    return self

  def each_pair(self, consumer):
    """Call ``consumer(key, value)`` for every entry, in dictionary order.

    Returning ``STOP`` from the consumer ends the traversal early.
    """
    traversal.run(self, b"", Mode.PAIRS, consumer)
    return self

  each = each_pair

  def common_prefix_each_value(self, prefix, consumer):
    traversal.run(self, prefix, Mode.VALUES, consumer)
    return self

  def common_prefix_each_key(self, prefix, consumer):
    """Call ``consumer(key)`` for every key starting with ``prefix``.

    Keys are full keys, ``prefix`` included.
    """
    traversal.run(self, prefix, Mode.KEYS, consumer)
    return self

  def common_prefix_each_pair(self, prefix, consumer):
    """Call ``consumer(key, value)`` for every entry whose key starts with ``prefix``."""
    traversal.run(self, prefix, Mode.PAIRS, consumer)
    return self

  common_prefix_each = common_prefix_each_pair

  def keys(self, prefix=b""):
    """Lazily yield keys starting with ``prefix`` in dictionary order.

    The trie rejects mutation until the iterator is exhausted or closed.
    """
    return traversal.walk(self, prefix, Mode.KEYS)

  def values(self, prefix=b""):
    return traversal.walk(self, prefix, Mode.VALUES)

  def items(self, prefix=b""):
    return traversal.walk(self, prefix, Mode.PAIRS)

  # -------------------------------------------------------------
  # Mapping protocol
  # -------------------------------------------------------------

  def __len__(self):
    return self._size

  def __bool__(self):
    return self._size > 0

  def __contains__(self, key):
    node = self.prefix_search(key)
    return node is not None and node.has_value

  def __getitem__(self, key):
    node = self.prefix_search(key)
    if node is None or not node.has_value:
      raise KeyError(key)
    return node.value

  def __setitem__(self, key, value):
    self.store(key, value)

  def __delitem__(self, key):
    def missing(_):
      raise KeyError(key)
    self.delete(key, missing)

  def __iter__(self):
    return self.keys()

  def __repr__(self):
    return f"{type(self).__name__}({dict(self.items())!r})"

  # -------------------------------------------------------------
  # Stats
  # -------------------------------------------------------------

  def count_nodes(self, get_avg_branch_factor=False):
    """Return total node count, or average branching factor over internal nodes.

    Parameters
    ----------
    get_avg_branch_factor : bool, default=False
        If False, return the total node count (root included).
        If True, return average out-degree over internal nodes only.

    Complexity
    ----------
    O(#nodes) time, O(depth * fan-out) extra space.
    """
    total_nodes = 0
    internal = 0
    total_deg = 0

    stack = [self.root]
    while stack:
      node = stack.pop()
      total_nodes += 1
      children = node.children
      if children:
        total_deg += len(children)
        internal += 1
        stack.extend(children)
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes


__all__ = ["ByteTrie"]
