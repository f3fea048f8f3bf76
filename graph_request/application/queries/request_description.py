"""Application-level description of a graph call ready for dispatch."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class RequestDescription:
  method: str
  url: str
  endpoint: Optional[str]
  graph_version: str
  headers: Dict[str, str] = field(default_factory=dict)
  post_params: Dict[str, Any] = field(default_factory=dict)

  def to_dict(self) -> Dict[str, Any]:
    return {
      'method': self.method,
      'url': self.url,
      'endpoint': self.endpoint,
      'graph_version': self.graph_version,
      'headers': dict(self.headers),
      'post_params': dict(self.post_params),
    }
