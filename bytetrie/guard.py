"""Reentrancy guard that blocks mutation while a traversal is running."""

from contextlib import contextmanager

from .errors import ConcurrentModificationError


class TraversalGuard:
  __slots__ = ("depth",)

  def __init__(self):
    self.depth = 0

  @property
  def active(self):
    return self.depth > 0

  @contextmanager
  def holding(self):
    """Hold the guard for the duration of the block, releasing it on every exit path."""
    self.depth += 1
    try:
      yield self
    finally:
      self.depth -= 1

  def check(self, operation):
    if self.depth > 0:
      raise ConcurrentModificationError(operation, self.depth)
