"""Command object representing a request to describe a graph call."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DescribeRequestCommand:
  """Everything a caller can supply about a graph call before it is sent."""
  method: str
  endpoint: str
  params: Dict[str, Any] = field(default_factory=dict)
  access_token: Optional[str] = field(default=None, repr=False)
  etag: Optional[str] = None
  graph_version: Optional[str] = None

  def __post_init__(self) -> None:
    if not self.method:
      raise ValueError('method is required')
    if not self.endpoint:
      raise ValueError('endpoint is required')
