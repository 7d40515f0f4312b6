"""Project-wide logging utilities that honour `TrieConfig`."""

from __future__ import annotations

import logging
from typing import Optional

from . import config as bt_config


class ConfiguredLogger(logging.LoggerAdapter):
  """View of a shared logger whose threshold comes from one `TrieConfig`.

  The shared logger's own level is never touched, so tries built with
  different configs do not override each other.
  """

  def __init__(self, logger: logging.Logger, config: bt_config.TrieConfig):
    super().__init__(logger, {})
    self.config = config

  def isEnabledFor(self, level: int) -> bool:
    return not self.logger.disabled and level >= self.config.log_level_value

  def log(self, level, msg, *args, exc_info=None, stack_info=False, stacklevel=1, extra=None):
    if not self.isEnabledFor(level):
      return
    fn, lno, func, sinfo = self.logger.findCaller(stack_info, stacklevel + 2)
    record = self.logger.makeRecord(
      self.logger.name, level, fn, lno, msg, args, exc_info, func, extra, sinfo
    )
    self.logger.handle(record)


def get_logger(name: Optional[str] = None, config: Optional[bt_config.TrieConfig] = None):
  """Return a logger configured according to the runtime configuration.

  Without ``config`` the shared logger is returned with its level taken from
  the process-wide `runtime_config()`. With ``config`` a `ConfiguredLogger`
  is returned that filters by that config alone.
  """

  logger_name = "bytetrie" if name is None else f"bytetrie.{name}"
  logger = logging.getLogger(logger_name)
  if config is not None:
    return ConfiguredLogger(logger, config)
  logger.setLevel(bt_config.runtime_config().log_level)
  return logger
