"""Magnet URI parsing and serialization."""

from .errors import (
  InvalidIndex,
  MagnetURIError,
  MissingSchemaPrefix,
  NoParameters,
  ParameterWithoutPrefix,
  UnknownPrefix,
)
from .parameter import Parameter, Prefix
from .uri import (
  SCHEMA_PREFIX,
  MagnetURI,
  equal,
  parse,
  to_string,
)

__all__ = [
  "InvalidIndex",
  "MagnetURI",
  "MagnetURIError",
  "MissingSchemaPrefix",
  "NoParameters",
  "Parameter",
  "ParameterWithoutPrefix",
  "Prefix",
  "SCHEMA_PREFIX",
  "UnknownPrefix",
  "equal",
  "parse",
  "to_string",
]
