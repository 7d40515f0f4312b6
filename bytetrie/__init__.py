"""Byte-keyed trie mapping with ordered and prefix-restricted enumeration."""

from .config import TrieConfig, reset_runtime_config, runtime_config
from .errors import ConcurrentModificationError, FrozenTrieError, TrieError
from .node import TrieNode
from .traversal import STOP, Mode
from .trie import ByteTrie

__all__ = [
  "ByteTrie",
  "TrieNode",
  "Mode",
  "STOP",
  "TrieConfig",
  "runtime_config",
  "reset_runtime_config",
  "TrieError",
  "ConcurrentModificationError",
  "FrozenTrieError",
]

__version__ = "0.1.0"
