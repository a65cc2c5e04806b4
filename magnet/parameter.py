from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from .errors import InvalidIndex, UnknownPrefix


class Prefix(str, Enum):
  """Recognized parameter prefixes, in serialization order."""

  EXACT_TOPIC = "xt"
  DISPLAY_NAME = "dn"
  KEYWORD_TOPIC = "kt"
  MANIFEST_TOPIC = "mt"

  @classmethod
  def from_token(cls, token: Union[str, "Prefix"]) -> "Prefix":
    try:
      return cls(token)
    except ValueError:
      raise UnknownPrefix(str(token)) from None

  def __str__(self) -> str:
    return self.value


@dataclass(frozen=True)
class Parameter:
  """A single `prefix[.index]=value` parameter of a Magnet URI."""

  prefix: Prefix
  index: Optional[int]
  value: str

  def __post_init__(self) -> None:
    object.__setattr__(self, "prefix", Prefix.from_token(self.prefix))
    if isinstance(self.index, bool) or not isinstance(self.index, (int, type(None))):
      raise InvalidIndex(self.prefix.value, str(self.index))
    # 0 and None both mean "no explicit index".
    if not self.index:
      object.__setattr__(self, "index", None)
    elif self.index < 0:
      raise InvalidIndex(self.prefix.value, str(self.index))

  def render(self) -> str:
    if self.index:
      return f"{self.prefix.value}.{self.index}={self.value}"
    return f"{self.prefix.value}={self.value}"

  def to_dict(self) -> Dict[str, Any]:
    return {
      "prefix": self.prefix.value,
      "index": self.index,
      "value": self.value,
    }

  def __str__(self) -> str:
    return self.render()


__all__ = ["Parameter", "Prefix"]
