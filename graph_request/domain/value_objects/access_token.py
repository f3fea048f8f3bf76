"""Value object for graph access tokens."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AccessToken:
  """An access token; its string form is what travels with a request."""

  value: str = field(repr=False)

  def __post_init__(self) -> None:
    if not self.value:
      raise ValueError('Access token value is required')

  def __str__(self) -> str:
    return self.value
