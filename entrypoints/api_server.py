"""API server entrypoint."""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import uvicorn

from graph_request.adapters.input.api.fastapi_adapter import FastAPIAdapter
from graph_request.common.config import configure_logging, get_settings
from graph_request.common.container import create_default_request_service


def get_app():
  configure_logging(get_settings())
  adapter = FastAPIAdapter(create_default_request_service())
  return adapter.app


def main() -> None:
  uvicorn.run(get_app(), host='0.0.0.0', port=8000)


if __name__ == '__main__':
  main()
