"""Application-level configuration utilities."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from os import getenv
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from graph_request.common.version import DEFAULT_GRAPH_VERSION
from graph_request.domain.entities.graph_app import GraphApp

DEFAULT_BASE_URL = 'https://graph.facebook.com'


@dataclass(frozen=True)
class Settings:
  """Immutable application settings loaded from environment variables."""

  app_id: Optional[str] = None
  app_secret: Optional[str] = field(default=None, repr=False)
  graph_version: str = DEFAULT_GRAPH_VERSION
  access_token: Optional[str] = field(default=None, repr=False)
  base_url: str = DEFAULT_BASE_URL
  log_level: str = 'WARNING'

  def build_app(self) -> Optional[GraphApp]:
    """Return the configured app, or None when credentials are incomplete."""
    if not self.app_id or not self.app_secret:
      return None
    return GraphApp(id=self.app_id, secret=self.app_secret)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Load settings from environment variables once per process."""
  env_path = Path(__file__).resolve().parents[2] / '.env'
  if env_path.exists():
    load_dotenv(env_path)
  else:
    load_dotenv()

  return Settings(
    app_id=getenv('GRAPH_APP_ID') or None,
    app_secret=getenv('GRAPH_APP_SECRET') or None,
    graph_version=getenv('GRAPH_API_VERSION') or DEFAULT_GRAPH_VERSION,
    access_token=getenv('GRAPH_ACCESS_TOKEN') or None,
    base_url=getenv('GRAPH_BASE_URL') or DEFAULT_BASE_URL,
    log_level=(getenv('LOG_LEVEL') or 'WARNING').upper(),
  )


def configure_logging(settings: Settings) -> None:
  level = getattr(logging, settings.log_level, logging.WARNING)
  logging.basicConfig(
    level=level,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
  )
