"""Application handler that turns a command into a request description."""
from __future__ import annotations

import logging
from typing import Optional

from graph_request.application.commands.describe_request_command import DescribeRequestCommand
from graph_request.application.queries.request_description import RequestDescription
from graph_request.domain.entities.graph_app import GraphApp
from graph_request.domain.entities.graph_request import GraphRequest

logger = logging.getLogger(__name__)


class DescribeRequestHandler:
  """Builds a GraphRequest for the configured app and reads its wire form.

  Domain errors (token mismatch, bad method, missing app) propagate to the
  caller untouched.
  """

  def __init__(
    self,
    app: Optional[GraphApp] = None,
    default_access_token: Optional[str] = None,
    default_graph_version: Optional[str] = None,
  ) -> None:
    self._app = app
    self._default_access_token = default_access_token
    self._default_graph_version = default_graph_version

  def build_request(self, command: DescribeRequestCommand) -> GraphRequest:
    request = GraphRequest(
      app=self._app,
      access_token=command.access_token,
      method=command.method,
      endpoint=command.endpoint,
      params=command.params,
      etag=command.etag,
      graph_version=command.graph_version or self._default_graph_version,
    )
    # The configured token only fills in when nothing else supplied one
    if not request.get_access_token() and self._default_access_token:
      request.set_access_token(self._default_access_token)
    return request

  def handle(self, command: DescribeRequestCommand) -> RequestDescription:
    request = self.build_request(command)
    url = request.get_url()
    logger.debug('Described %s %s', request.get_method(), request.get_endpoint())
    return RequestDescription(
      method=request.get_method(),
      url=url,
      endpoint=request.get_endpoint(),
      graph_version=request.get_graph_version(),
      headers=request.get_headers(),
      post_params=request.get_post_params(),
    )
