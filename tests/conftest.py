from __future__ import annotations

import pytest

from graph_request.common.config import Settings
from graph_request.domain.entities.graph_app import GraphApp


@pytest.fixture
def app() -> GraphApp:
  return GraphApp(id='123', secret='s3cr3t')


@pytest.fixture
def settings() -> Settings:
  return Settings(app_id='123', app_secret='s3cr3t', base_url='https://graph.example.com')
