"""JSON presenter implementation."""
from __future__ import annotations

import json

from graph_request.application.queries.request_description import RequestDescription
from graph_request.domain.exceptions import GraphRequestError
from graph_request.ports.input.description_presenter import DescriptionPresenter


class JsonPresenter(DescriptionPresenter):
  def present(self, description: RequestDescription) -> str:
    return json.dumps(description.to_dict(), ensure_ascii=False, indent=2, default=str)

  def present_error(self, error: Exception) -> str:
    payload = {'status': 'error', 'error': str(error)}
    if isinstance(error, GraphRequestError) and error.field:
      payload['field'] = error.field
    return json.dumps(payload, ensure_ascii=False, indent=2)
