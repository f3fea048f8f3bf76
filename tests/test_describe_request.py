from __future__ import annotations

import json
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from graph_request.adapters.output.http.requests_request_builder import RequestsRequestBuilder
from graph_request.adapters.presentation.json_presenter import JsonPresenter
from graph_request.adapters.presentation.text_presenter import TextPresenter
from graph_request.application.commands.describe_request_command import DescribeRequestCommand
from graph_request.application.handlers.describe_request_handler import DescribeRequestHandler
from graph_request.common.config import Settings
from graph_request.common.container import create_request_service
from graph_request.domain.entities.graph_app import GraphApp
from graph_request.domain.entities.graph_request import GraphRequest
from graph_request.domain.exceptions import AccessTokenMismatch, InvalidMethod, MissingApp
from graph_request.domain.services.secret_proof_signer import SecretProofSigner


def test_command_requires_method_and_endpoint() -> None:
  with pytest.raises(ValueError, match='method'):
    DescribeRequestCommand(method='', endpoint='/me')
  with pytest.raises(ValueError, match='endpoint'):
    DescribeRequestCommand(method='GET', endpoint='')


def test_handler_describes_get_request(app: GraphApp) -> None:
  handler = DescribeRequestHandler(app=app)
  description = handler.handle(DescribeRequestCommand(
    method='get',
    endpoint='/me?access_token=abc123',
    params={'fields': 'id,name'},
    etag='"v1"',
  ))

  assert description.method == 'GET'
  assert description.endpoint == '/me'
  assert description.post_params == {}
  assert description.headers['If-None-Match'] == '"v1"'
  assert urlsplit(description.url).path == '/v2.2/me'
  assert parse_qs(urlsplit(description.url).query)['appsecret_proof'] == [
    SecretProofSigner.sign('abc123', 's3cr3t')
  ]


def test_handler_uses_default_token_and_version(app: GraphApp) -> None:
  handler = DescribeRequestHandler(
    app=app,
    default_access_token='default-token',
    default_graph_version='v2.5',
  )
  description = handler.handle(DescribeRequestCommand(method='POST', endpoint='/me/feed'))

  assert description.url == '/v2.5/me/feed'
  assert description.graph_version == 'v2.5'
  assert description.post_params['access_token'] == 'default-token'


def test_handler_prefers_command_token_over_default(app: GraphApp) -> None:
  handler = DescribeRequestHandler(app=app, default_access_token='default-token')
  request = handler.build_request(
    DescribeRequestCommand(method='GET', endpoint='/me', access_token='mine')
  )
  assert request.get_access_token() == 'mine'


def test_handler_propagates_domain_errors(app: GraphApp) -> None:
  handler = DescribeRequestHandler(app=app)
  with pytest.raises(AccessTokenMismatch):
    handler.handle(DescribeRequestCommand(
      method='GET', endpoint='/me?access_token=a', access_token='b',
    ))
  with pytest.raises(InvalidMethod):
    handler.handle(DescribeRequestCommand(method='PUT', endpoint='/me'))
  with pytest.raises(MissingApp):
    DescribeRequestHandler().handle(
      DescribeRequestCommand(method='GET', endpoint='/me', access_token='a')
    )


def test_requests_builder_prepares_get_without_body(app: GraphApp) -> None:
  request = GraphRequest(app, 'abc123', 'GET', '/me', {'fields': 'id'})
  prepared = RequestsRequestBuilder('https://graph.example.com/').build(request)

  assert isinstance(prepared, requests.PreparedRequest)
  assert prepared.method == 'GET'
  assert prepared.url.startswith('https://graph.example.com/v2.2/me?')
  assert prepared.body is None
  assert prepared.headers['User-Agent'].startswith('graph-request-py-')


def test_requests_builder_prepares_post_form_body(app: GraphApp) -> None:
  request = GraphRequest(app, 'abc123', 'POST', '/me/feed', {'message': 'hi'})
  prepared = RequestsRequestBuilder('https://graph.example.com').build(request)

  assert prepared.url == 'https://graph.example.com/v2.2/me/feed'
  body = parse_qs(prepared.body)
  assert body['message'] == ['hi']
  assert body['access_token'] == ['abc123']
  assert 'appsecret_proof' in body


def test_service_prepare_uses_configured_base_url(settings: Settings) -> None:
  service = create_request_service(settings)
  prepared = service.prepare(DescribeRequestCommand(method='DELETE', endpoint='/42'))

  assert prepared.method == 'DELETE'
  assert prepared.url == 'https://graph.example.com/v2.2/42'


def test_json_presenter(app: GraphApp) -> None:
  description = DescribeRequestHandler(app=app).handle(
    DescribeRequestCommand(method='POST', endpoint='/me/feed', params={'message': 'hi'})
  )
  payload = json.loads(JsonPresenter().present(description))

  assert payload['method'] == 'POST'
  assert payload['url'] == '/v2.2/me/feed'
  assert payload['post_params'] == {'message': 'hi'}

  error = json.loads(JsonPresenter().present_error(AccessTokenMismatch()))
  assert error['status'] == 'error'
  assert error['field'] == 'access_token'


def test_text_presenter(app: GraphApp) -> None:
  description = DescribeRequestHandler(app=app).handle(
    DescribeRequestCommand(method='POST', endpoint='/me/feed', params={'message': 'hi'})
  )
  text = TextPresenter().present(description)

  assert 'POST /v2.2/me/feed' in text
  assert 'Accept-Encoding: *' in text
  assert '- message: hi' in text
  assert TextPresenter().present_error(ValueError('boom')) == 'ERROR: boom'
