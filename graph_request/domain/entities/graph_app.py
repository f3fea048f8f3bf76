"""Domain entity for the application that owns graph requests."""
from __future__ import annotations

from dataclasses import dataclass, field

from graph_request.domain.value_objects.access_token import AccessToken


@dataclass(frozen=True)
class GraphApp:
  """Represents a registered app: its identifier and secret."""

  id: str
  secret: str = field(repr=False)

  def __post_init__(self) -> None:
    if not self.id:
      raise ValueError('App id is required')
    if not self.secret:
      raise ValueError('App secret is required')

  def get_access_token(self) -> AccessToken:
    """Return the app access token built from the id and secret."""
    return AccessToken(f'{self.id}|{self.secret}')
