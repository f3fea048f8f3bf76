"""CLI adapter for describing graph requests."""
from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

import click

from graph_request.application.commands.describe_request_command import DescribeRequestCommand
from graph_request.domain.entities.graph_request import SUPPORTED_METHODS
from graph_request.domain.exceptions import GraphRequestError
from graph_request.ports.input.description_presenter import DescriptionPresenter
from graph_request.ports.input.request_service import RequestService


class CLIAdapter:
  def __init__(
    self,
    request_service: RequestService,
    presenters: Mapping[str, DescriptionPresenter],
    default_format: str = 'text',
  ):
    self._request_service = request_service
    self._presenters = dict(presenters)
    self._default_format = default_format

  def build(self) -> click.Group:
    cli = click.Group()

    @cli.command('describe')
    @click.option('--method', required=True, help=f'HTTP method ({", ".join(SUPPORTED_METHODS)})')
    @click.option('--endpoint', required=True, help='Graph endpoint, e.g. /me')
    @click.option('--param', 'params', multiple=True, help='Parameter as key=value (repeatable)')
    @click.option('--access-token', default=None, help='Access token for the call')
    @click.option('--etag', default=None, help='ETag for a conditional request')
    @click.option('--graph-version', default=None, help='Graph version, e.g. v2.2')
    @click.option(
      '--format', 'output_format',
      type=click.Choice(sorted(self._presenters)),
      default=self._default_format,
    )
    def describe(
      method: str,
      endpoint: str,
      params: Sequence[str],
      access_token: Optional[str],
      etag: Optional[str],
      graph_version: Optional[str],
      output_format: str,
    ) -> None:
      """Print the URL, headers and body a graph call would be sent with.

      Examples:

        cli describe --method GET --endpoint /me --param fields=id,name

        cli describe --method POST --endpoint /me/feed --param message=hi --format json
      """
      presenter = self._presenters[output_format]
      command = DescribeRequestCommand(
        method=method,
        endpoint=endpoint,
        params=_parse_params(params),
        access_token=access_token,
        etag=etag,
        graph_version=graph_version,
      )
      try:
        description = self._request_service.describe(command)
      except GraphRequestError as exc:
        raise click.ClickException(presenter.present_error(exc)) from exc
      click.echo(presenter.present(description))

    @cli.command('prepare')
    @click.option('--method', required=True, help=f'HTTP method ({", ".join(SUPPORTED_METHODS)})')
    @click.option('--endpoint', required=True, help='Graph endpoint, e.g. /me')
    @click.option('--param', 'params', multiple=True, help='Parameter as key=value (repeatable)')
    @click.option('--access-token', default=None, help='Access token for the call')
    @click.option('--etag', default=None, help='ETag for a conditional request')
    @click.option('--graph-version', default=None, help='Graph version, e.g. v2.2')
    def prepare(
      method: str,
      endpoint: str,
      params: Sequence[str],
      access_token: Optional[str],
      etag: Optional[str],
      graph_version: Optional[str],
    ) -> None:
      """Print the fully qualified request line and body, without sending it."""
      command = DescribeRequestCommand(
        method=method,
        endpoint=endpoint,
        params=_parse_params(params),
        access_token=access_token,
        etag=etag,
        graph_version=graph_version,
      )
      try:
        prepared = self._request_service.prepare(command)
      except GraphRequestError as exc:
        raise click.ClickException(str(exc)) from exc
      click.echo(f'{prepared.method} {prepared.url}')
      if prepared.body:
        body = prepared.body.decode('utf-8') if isinstance(prepared.body, bytes) else prepared.body
        click.echo(body)

    return cli

  def run(self) -> None:
    self.build()()


def _parse_params(raw_params: Sequence[str]) -> Dict[str, str]:
  """Parse repeated key=value options into a dict."""
  params: Dict[str, str] = {}
  for raw in raw_params:
    key, sep, value = raw.partition('=')
    if not sep or not key:
      raise click.BadParameter(f'expected key=value, got {raw!r}', param_hint='--param')
    params[key] = value
  return params
