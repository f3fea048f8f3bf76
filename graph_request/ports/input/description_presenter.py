"""Input port for formatting request descriptions."""
from __future__ import annotations

from typing import Any, Protocol

from graph_request.application.queries.request_description import RequestDescription


class DescriptionPresenter(Protocol):
  def present(self, description: RequestDescription) -> Any:
    ...

  def present_error(self, error: Exception) -> Any:
    ...
