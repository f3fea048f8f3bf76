"""Errors raised while building graph requests."""
from __future__ import annotations

from typing import Optional


class GraphRequestError(Exception):
  """Base exception for graph request errors."""

  def __init__(self, message: str, field: Optional[str] = None):
    super().__init__(message)
    self.field = field


class AccessTokenMismatch(GraphRequestError):
  """A token found in the endpoint or params differs from the one already set."""

  def __init__(self) -> None:
    super().__init__(
      'Access token mismatch. The access token provided in the request '
      'and the one provided in the URL or POST params do not match.',
      field='access_token',
    )


class MissingAccessToken(GraphRequestError):
  def __init__(self) -> None:
    super().__init__('You must provide an access token.', field='access_token')


class MissingMethod(GraphRequestError):
  def __init__(self) -> None:
    super().__init__('HTTP method not specified.', field='method')


class InvalidMethod(GraphRequestError):
  def __init__(self, method: str, allowed: tuple) -> None:
    super().__init__(
      f'Invalid HTTP method specified: {method!r}. Expected one of {", ".join(allowed)}.',
      field='method',
    )
    self.method = method


class MissingApp(GraphRequestError):
  def __init__(self) -> None:
    super().__init__(
      'An app with a secret is required to sign this request.',
      field='app',
    )
