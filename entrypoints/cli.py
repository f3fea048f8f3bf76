"""CLI entrypoint for graph-request."""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from graph_request.adapters.input.cli.cli_adapter import CLIAdapter
from graph_request.adapters.presentation.json_presenter import JsonPresenter
from graph_request.adapters.presentation.text_presenter import TextPresenter
from graph_request.common.config import configure_logging, get_settings
from graph_request.common.container import create_default_request_service


def main() -> None:
  configure_logging(get_settings())
  presenters = {'text': TextPresenter(), 'json': JsonPresenter()}
  CLIAdapter(create_default_request_service(), presenters).run()


if __name__ == '__main__':
  main()
