"""URL helpers used to keep graph endpoints free of credentials."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def get_params_as_dict(url: Optional[str]) -> Dict[str, str]:
  """Return the query string of a URL as a dict."""
  if not url:
    return {}
  query = urlsplit(url).query
  if not query:
    return {}
  return dict(parse_qsl(query, keep_blank_values=True))


def remove_params_from_url(url: Optional[str], names: Iterable[str]) -> Optional[str]:
  """Remove the named query parameters, keeping everything else in place."""
  if not url:
    return url
  parts = urlsplit(url)
  if not parts.query:
    return url

  drop = set(names)
  kept = [
    (key, value)
    for key, value in parse_qsl(parts.query, keep_blank_values=True)
    if key not in drop
  ]
  return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(kept), parts.fragment))


def force_slash_prefix(value: Optional[str]) -> str:
  if not value:
    return ''
  return value if value.startswith('/') else f'/{value}'


def append_params_to_url(url: str, params: Optional[Mapping[str, Any]] = None) -> str:
  """Append params as a query string.

  When the URL already carries a query string, its values take precedence
  over the new params and the merged set is sorted by key.
  """
  if not params:
    return url

  if '?' not in url:
    return f'{url}?{_encode(params.items())}'

  path, query = url.split('?', 1)
  merged: Dict[str, Any] = dict(params)
  merged.update(parse_qsl(query, keep_blank_values=True))
  return f'{path}?{_encode(sorted(merged.items()))}'


def _encode(items: Iterable[Tuple[str, Any]]) -> str:
  pairs: List[Tuple[str, str]] = []
  for key, value in items:
    if isinstance(value, (list, tuple)):
      pairs.extend((key, _stringify(item)) for item in value)
    else:
      pairs.append((key, _stringify(value)))
  return urlencode(pairs)


def _stringify(value: Any) -> str:
  if isinstance(value, bool):
    return 'true' if value else 'false'
  if value is None:
    return ''
  return str(value)
