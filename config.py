"""Configuration helpers for the magnet-uri command line tool."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

OUTPUT_FORMATS = ("text", "json")


class ConfigError(RuntimeError):
  """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class LoggingConfig:
  """Logging setup for the command line tool."""

  level: int = logging.WARNING
  format: str = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
  """Top-level configuration for the command line tool."""

  logging: LoggingConfig
  output_format: str = "text"


def parse_log_level(name: str) -> int:
  level = logging.getLevelName(name.strip().upper())
  if not isinstance(level, int):
    raise ConfigError(f"Unknown log level {name!r}.")
  return level


def parse_output_format(name: str) -> str:
  value = name.strip().lower()
  if value not in OUTPUT_FORMATS:
    choices = ", ".join(OUTPUT_FORMATS)
    raise ConfigError(f"Unknown output format {name!r}; expected one of: {choices}.")
  return value


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
  """Load configuration from environment variables."""

  env = os.environ if environ is None else environ

  log_level = parse_log_level(env.get("MAGNET_LOG_LEVEL", "WARNING") or "WARNING")
  output_format = parse_output_format(env.get("MAGNET_OUTPUT_FORMAT", "text") or "text")

  return AppConfig(
    logging=LoggingConfig(level=log_level),
    output_format=output_format,
  )


__all__ = [
  "AppConfig",
  "ConfigError",
  "LoggingConfig",
  "load_config",
  "parse_log_level",
  "parse_output_format",
]
