"""Input port defining the request description contract."""
from __future__ import annotations

from typing import Any, Protocol

from graph_request.application.commands.describe_request_command import DescribeRequestCommand
from graph_request.application.queries.request_description import RequestDescription


class RequestService(Protocol):
  def describe(self, command: DescribeRequestCommand) -> RequestDescription:
    ...

  def prepare(self, command: DescribeRequestCommand) -> Any:
    """Build the transport-level request object without sending it."""
    ...
