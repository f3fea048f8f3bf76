"""Implementation of the request service port."""
from __future__ import annotations

from typing import Any, Optional

from graph_request.application.commands.describe_request_command import DescribeRequestCommand
from graph_request.application.handlers.describe_request_handler import DescribeRequestHandler
from graph_request.application.queries.request_description import RequestDescription
from graph_request.ports.input.request_service import RequestService
from graph_request.ports.output.request_builder import TransportRequestBuilder


class RequestServiceImpl(RequestService):
  """Concrete implementation that delegates to the describe handler."""

  def __init__(
    self,
    describe_handler: DescribeRequestHandler,
    transport_builder: Optional[TransportRequestBuilder] = None,
  ) -> None:
    self._describe_handler = describe_handler
    self._transport_builder = transport_builder

  def describe(self, command: DescribeRequestCommand) -> RequestDescription:
    return self._describe_handler.handle(command)

  def prepare(self, command: DescribeRequestCommand) -> Any:
    if self._transport_builder is None:
      raise RuntimeError('No transport builder configured')
    request = self._describe_handler.build_request(command)
    return self._transport_builder.build(request)
