from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass
from functools import lru_cache

_SUPPORTED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def _bool_from_env(value: str | None, *, default: bool) -> bool:
  if value is None:
    return default
  value = value.strip().lower()
  if value in {"1", "true", "yes", "on"}:
    return True
  if value in {"0", "false", "no", "off"}:
    return False
  return default


def _normalise_encoding(value: str | None) -> str:
  if value is None or value.strip() == "":
    return "utf-8"
  try:
    return codecs.lookup(value.strip()).name
  except LookupError as exc:
    raise ValueError(f"Unknown key encoding '{value}'") from exc


def _normalise_log_level(value: str | None) -> str:
  if value is None or value.strip() == "":
    return "WARNING"
  value = value.strip().upper()
  if value not in _SUPPORTED_LOG_LEVELS:
    raise ValueError(
      f"Unsupported log level '{value}'. Expected one of {sorted(_SUPPORTED_LOG_LEVELS)}."
    )
  return value


@dataclass(frozen=True)
class TrieConfig:
  """
  Runtime configuration for tries.

      key_encoding: str, codec used to turn ``str`` keys into bytes
      log_level: str, level applied to every ``bytetrie.*`` logger
      warn_on_guard: bool, log rejected mutations at WARNING instead of DEBUG
  """
  key_encoding: str = "utf-8"
  log_level: str = "WARNING"
  warn_on_guard: bool = False

  def __post_init__(self):
    object.__setattr__(self, "key_encoding", _normalise_encoding(self.key_encoding))
    object.__setattr__(self, "log_level", _normalise_log_level(self.log_level))

  @property
  def log_level_value(self) -> int:
    return logging.getLevelName(self.log_level)

  @classmethod
  def from_env(cls) -> "TrieConfig":
    return cls(
      key_encoding=os.getenv("BYTETRIE_KEY_ENCODING", "utf-8"),
      log_level=os.getenv("BYTETRIE_LOG_LEVEL", "WARNING"),
      warn_on_guard=_bool_from_env(os.getenv("BYTETRIE_WARN_ON_GUARD"), default=False),
    )


@lru_cache(maxsize=None)
def runtime_config() -> TrieConfig:
  """Return the process-wide configuration, read from the environment once."""
  return TrieConfig.from_env()


def reset_runtime_config() -> None:
  """Forget the cached configuration so the next access re-reads the environment."""
  runtime_config.cache_clear()


__all__ = ["TrieConfig", "runtime_config", "reset_runtime_config"]
