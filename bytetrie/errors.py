"""Exceptions raised by the trie core.

Lookups never raise: a miss is reported as ``None`` (or a caller default /
fallback). Only structural violations surface as exceptions.
"""


class TrieError(Exception):
  """Base class for every error raised by :mod:`bytetrie`."""


class ConcurrentModificationError(TrieError, RuntimeError):
  """A mutation was attempted while a traversal over the same trie is running."""

  def __init__(self, operation, depth=1):
    self.operation = operation
    self.depth = depth
    super().__init__(
      f"cannot {operation} while {depth} traversal(s) over this trie are in progress"
    )


class FrozenTrieError(TrieError, RuntimeError):
  """A mutation was attempted on a frozen trie."""

  def __init__(self, operation):
    self.operation = operation
    super().__init__(f"cannot {operation} a frozen trie")
