"""
Parse and serialize Magnet URIs.

See the schema overview at http://magnet-uri.sourceforge.net/magnet-draft-overview.txt
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .errors import (
  InvalidIndex,
  MissingSchemaPrefix,
  NoParameters,
  ParameterWithoutPrefix,
)
from .parameter import Parameter, Prefix

SCHEMA_PREFIX = "magnet:?"
PARAMETER_SEPARATOR = "&"
INDEX_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True, eq=False)
class MagnetURI:
  parameters: Tuple[Parameter, ...] = ()

  def __post_init__(self) -> None:
    object.__setattr__(self, "parameters", tuple(self.parameters))

  # --------------------------------------------------------------------------- #
  # Prefix views
  # --------------------------------------------------------------------------- #
  def parameters_with(self, prefix: Prefix | str) -> List[Parameter]:
    prefix = Prefix.from_token(prefix)
    return [parameter for parameter in self.parameters if parameter.prefix is prefix]

  def exact_topics(self) -> List[Parameter]:
    return self.parameters_with(Prefix.EXACT_TOPIC)

  def display_names(self) -> List[Parameter]:
    return self.parameters_with(Prefix.DISPLAY_NAME)

  def keyword_topics(self) -> List[Parameter]:
    return self.parameters_with(Prefix.KEYWORD_TOPIC)

  def manifest_topics(self) -> List[Parameter]:
    return self.parameters_with(Prefix.MANIFEST_TOPIC)

  # --------------------------------------------------------------------------- #
  # Codec
  # --------------------------------------------------------------------------- #
  @classmethod
  def parse(cls, raw: str) -> "MagnetURI":
    return parse(raw)

  def to_string(self) -> str:
    return to_string(self)

  def to_dict(self) -> Dict[str, Any]:
    return {
      "parameters": [parameter.to_dict() for parameter in self.parameters],
      "exact_topics": [parameter.value for parameter in self.exact_topics()],
      "display_names": [parameter.value for parameter in self.display_names()],
      "keyword_topics": [parameter.value for parameter in self.keyword_topics()],
      "manifest_topics": [parameter.value for parameter in self.manifest_topics()],
    }

  def __eq__(self, other: object) -> bool:
    if not isinstance(other, MagnetURI):
      return NotImplemented
    return equal(self, other)

  def __hash__(self) -> int:
    return hash(frozenset(Counter(self.parameters).items()))


def parse(raw: str) -> MagnetURI:
  """
  Parse a raw Magnet URI string.

  Parsing is all-or-nothing: the first malformed parameter aborts the call and
  nothing parsed before it is returned. Indexed parameters are kept in the order
  they appear, duplicate or missing indices included.
  """
  if not raw.startswith(SCHEMA_PREFIX):
    raise MissingSchemaPrefix(SCHEMA_PREFIX)

  fragments = raw[len(SCHEMA_PREFIX) :].split(PARAMETER_SEPARATOR)
  parameters = [_parse_parameter(fragment) for fragment in fragments]
  return MagnetURI(parameters=tuple(parameters))


def _parse_parameter(fragment: str) -> Parameter:
  key, separator, value = fragment.partition("=")
  if not separator:
    raise ParameterWithoutPrefix(fragment)

  token, index = _split_prefix_index(key)
  return Parameter(prefix=Prefix.from_token(token), index=index, value=value)


def _split_prefix_index(key: str) -> Tuple[str, Optional[int]]:
  token, dot, index_text = key.partition(".")
  if not dot:
    return token, None

  if not INDEX_PATTERN.fullmatch(index_text) or int(index_text) < 1:
    raise InvalidIndex(key, index_text)
  return token, int(index_text)


def to_string(uri: MagnetURI) -> str:
  """Reassemble a MagnetURI into its canonical string form."""
  if not uri.parameters:
    raise NoParameters()

  rendered: List[str] = []
  for prefix in Prefix:
    rendered.extend(_render_group(uri.parameters_with(prefix)))
  return SCHEMA_PREFIX + PARAMETER_SEPARATOR.join(rendered)


def _render_group(group: List[Parameter]) -> List[str]:
  # A lone parameter is written unindexed; larger groups get positional indices.
  if len(group) == 1:
    return [Parameter(group[0].prefix, None, group[0].value).render()]
  return [
    Parameter(parameter.prefix, position, parameter.value).render()
    for position, parameter in enumerate(group, start=1)
  ]


def equal(first: MagnetURI, second: MagnetURI) -> bool:
  """Compare two Magnet URIs as parameter multisets; order is ignored."""
  if len(first.parameters) != len(second.parameters):
    return False
  return Counter(first.parameters) == Counter(second.parameters)
