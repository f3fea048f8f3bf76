"""Simple dependency wiring helpers."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from graph_request.adapters.output.http.requests_request_builder import RequestsRequestBuilder
from graph_request.application.handlers.describe_request_handler import DescribeRequestHandler
from graph_request.application.services.request_service_impl import RequestServiceImpl
from graph_request.common.config import Settings, get_settings


def create_request_service(settings: Optional[Settings] = None) -> RequestServiceImpl:
  settings = settings or get_settings()
  handler = DescribeRequestHandler(
    app=settings.build_app(),
    default_access_token=settings.access_token,
    default_graph_version=settings.graph_version,
  )
  return RequestServiceImpl(handler, RequestsRequestBuilder(base_url=settings.base_url))


@lru_cache(maxsize=1)
def create_default_request_service() -> RequestServiceImpl:
  return create_request_service()
