"""Client identity constants shared across the package."""
from __future__ import annotations

VERSION = '0.1.0'
CLIENT_NAME = 'graph-request-py'
DEFAULT_GRAPH_VERSION = 'v2.2'
