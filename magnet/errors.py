"""Errors raised while parsing or serializing Magnet URIs."""

from __future__ import annotations


class MagnetURIError(ValueError):
  """Base error for malformed Magnet URIs."""


class MissingSchemaPrefix(MagnetURIError):
  """Raised when the input does not start with the schema prefix."""

  def __init__(self, prefix: str) -> None:
    self.prefix = prefix
    super().__init__(f'The string doesn\'t start with the Magnet URI schema prefix "{prefix}"')


class ParameterWithoutPrefix(MagnetURIError):
  """Raised when a parameter fragment has no '=' separator."""

  def __init__(self, parameter: str) -> None:
    self.parameter = parameter
    super().__init__(f'Parameter without prefix: "{parameter}"')


class InvalidIndex(MagnetURIError):
  """Raised when the dotted index of a parameter key is not a positive integer."""

  def __init__(self, key: str, index: str) -> None:
    self.key = key
    self.index = index
    super().__init__(f'Wrong parameter prefix: "{key}"; index "{index}" is not a positive integer')


class UnknownPrefix(MagnetURIError):
  """Raised when a parameter prefix is not one of xt, dn, kt or mt."""

  def __init__(self, prefix: str) -> None:
    self.prefix = prefix
    super().__init__(f'Unknown parameter prefix: "{prefix}"')


class NoParameters(MagnetURIError):
  """Raised when serializing a Magnet URI without parameters."""

  def __init__(self) -> None:
    super().__init__("The Magnet URI has no parameters.")


__all__ = [
  "InvalidIndex",
  "MagnetURIError",
  "MissingSchemaPrefix",
  "NoParameters",
  "ParameterWithoutPrefix",
  "UnknownPrefix",
]
