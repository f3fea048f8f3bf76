"""Output port for handing a described request to a transport."""
from __future__ import annotations

from typing import Any, Protocol

from graph_request.domain.entities.graph_request import GraphRequest


class TransportRequestBuilder(Protocol):
  """Turns a GraphRequest into whatever object a transport sends.

  Implementations must not perform network I/O; sending belongs to the
  transport that consumes the built object.
  """

  def build(self, request: GraphRequest) -> Any:
    ...
