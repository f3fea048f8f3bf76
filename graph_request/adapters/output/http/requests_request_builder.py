"""Builds unsent requests.PreparedRequest objects from graph requests."""
from __future__ import annotations

import requests

from graph_request.common.config import DEFAULT_BASE_URL
from graph_request.domain.entities.graph_request import GraphRequest, HttpMethod
from graph_request.ports.output.request_builder import TransportRequestBuilder


class RequestsRequestBuilder(TransportRequestBuilder):
  """Prepares requests for a requests.Session without sending them."""

  def __init__(self, base_url: str = DEFAULT_BASE_URL) -> None:
    self._base_url = base_url.rstrip('/')

  def build(self, request: GraphRequest) -> requests.PreparedRequest:
    # get_url() validates the method before anything else is read
    url = f'{self._base_url}{request.get_url()}'
    method = request.get_method()

    prepared = requests.Request(
      method=method,
      url=url,
      headers=request.get_headers(),
      data=request.get_post_params() if method == HttpMethod.POST.value else None,
    )
    return prepared.prepare()
