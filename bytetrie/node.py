"""
Trie node with a sorted, lazily allocated child index.

Each node stands for one key prefix. Its children are kept as two parallel
sequences, ``labels`` (a ``bytearray`` of edge bytes) and ``children`` (the
matching nodes), both in strictly ascending label order. Lookups use binary
search over ``labels``; insertion places a new child at its sorted position,
so ascending iteration order is structural rather than incidental.

Conventions & Notes
-------------------
- ``labels`` / ``children`` are ``None`` for leaves and are created together
  on the first child. Always guard with ``if node.children: ...``.
- Value presence is the ``has_value`` flag. ``value`` is meaningless when the
  flag is False, and a stored ``None``, ``0`` or ``b""`` is still present.
- The root carries the sentinel label ``ROOT_LABEL``.
"""

from bisect import bisect_left

ROOT_LABEL = -1


class TrieNode:
  __slots__ = ("label", "value", "has_value", "labels", "children")

  def __init__(self, label=ROOT_LABEL):
    self.label = label
    self.value = None
    self.has_value = False
    self.labels = None
    self.children = None

  def __repr__(self):
    label = "root" if self.label == ROOT_LABEL else repr(bytes((self.label,)))
    return f"TrieNode({label}, has_value={self.has_value}, degree={self.degree()})"

  def child(self, label):
    """Return the child reached through ``label``, or None."""
    labels = self.labels
    if labels is None:
      return None
    i = bisect_left(labels, label)
    if i < len(labels) and labels[i] == label:
      return self.children[i]
    return None

  def child_or_create(self, label):
    """Return the child reached through ``label``, inserting it in order if missing.

    Returns
    -------
    tuple[TrieNode, bool]
        The child and whether it was created by this call.
    """
    labels = self.labels
    if labels is None:
      nxt = TrieNode(label)
      self.labels = bytearray((label,))
      self.children = [nxt]
      return nxt, True

    i = bisect_left(labels, label)
    if i < len(labels) and labels[i] == label:
      return self.children[i], False
    nxt = TrieNode(label)
    labels.insert(i, label)
    self.children.insert(i, nxt)
    return nxt, True

  def iter_children(self):
    """Iterate children in ascending label order."""
    if not self.children:
      return iter(())
    return iter(self.children)

  def degree(self):
    return 0 if self.children is None else len(self.children)

  def set_value(self, value):
    """Store ``value``; return ``(previous, had_value)``."""
    previous, had = self.value, self.has_value
    self.value = value
    self.has_value = True
    return previous, had

  def clear_value(self):
    """Drop the value slot; return ``(previous, had_value)``. The node itself stays."""
    previous, had = self.value, self.has_value
    self.value = None
    self.has_value = False
    return previous, had
