"""Plain text presenter for request descriptions."""
from __future__ import annotations

from graph_request.application.queries.request_description import RequestDescription
from graph_request.ports.input.description_presenter import DescriptionPresenter


class TextPresenter(DescriptionPresenter):
  def present(self, description: RequestDescription) -> str:
    lines = [
      '=' * 60,
      'REQUEST',
      '=' * 60,
      f'{description.method} {description.url}',
      f'- endpoint: {description.endpoint}',
      f'- graph version: {description.graph_version}',
      '',
      '=' * 60,
      'HEADERS',
      '=' * 60,
    ]
    for name, value in description.headers.items():
      lines.append(f'{name}: {value}')

    if description.post_params:
      lines.extend([
        '',
        '=' * 60,
        'BODY',
        '=' * 60,
      ])
      for key, value in description.post_params.items():
        lines.append(f'- {key}: {value}')

    return '\n'.join(lines)

  def present_error(self, error: Exception) -> str:
    return f'ERROR: {error}'
