"""FastAPI adapter exposing HTTP endpoints."""
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from graph_request.application.commands.describe_request_command import DescribeRequestCommand
from graph_request.common.version import VERSION
from graph_request.domain.exceptions import GraphRequestError
from graph_request.ports.input.request_service import RequestService


class DescribeRequestPayload(BaseModel):
  """Payload describing a graph call to be signed and laid out."""
  method: str = Field(..., min_length=1, description='HTTP method: GET, POST or DELETE')
  endpoint: str = Field(..., min_length=1, description='Graph endpoint, e.g. /me')
  params: Dict[str, Any] = Field(default_factory=dict, description='Request parameters')
  access_token: Optional[str] = Field(default=None, description='Access token for the call')
  etag: Optional[str] = Field(default=None, description='ETag for a conditional request')
  graph_version: Optional[str] = Field(default=None, description='Graph version, e.g. v2.2')

  model_config = {
    'json_schema_extra': {
      'examples': [
        {
          'method': 'GET',
          'endpoint': '/me',
          'params': {'fields': 'id,name'},
          'access_token': 'abc123',
        }
      ]
    }
  }


class FastAPIAdapter:
  def __init__(self, request_service: RequestService):
    self._request_service = request_service
    self.app = FastAPI(
      title='Graph Request API',
      version=VERSION,
      description='Builds signed, well-formed graph API request descriptions without sending them.',
    )
    self._configure_routes()

  def _configure_routes(self) -> None:
    @self.app.post('/api/v1/requests/describe', tags=['Requests'])
    def describe_request(payload: DescribeRequestPayload):
      """
      Describe a graph call.

      Returns the versioned URL, headers and POST body. Tokens embedded in the
      endpoint or params are reconciled with the explicit token; a conflict
      is reported as a 400.
      """
      command = DescribeRequestCommand(
        method=payload.method,
        endpoint=payload.endpoint,
        params=payload.params,
        access_token=payload.access_token,
        etag=payload.etag,
        graph_version=payload.graph_version,
      )
      try:
        description = self._request_service.describe(command)
      except GraphRequestError as exc:
        raise HTTPException(
          status_code=400,
          detail={'error': str(exc), 'field': exc.field},
        ) from exc
      return description.to_dict()

    @self.app.get('/health', tags=['Health'])
    def health():
      """Health check endpoint."""
      return {'status': 'healthy'}
