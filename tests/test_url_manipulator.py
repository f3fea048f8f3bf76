from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

from graph_request.domain.services.url_manipulator import (
  append_params_to_url,
  force_slash_prefix,
  get_params_as_dict,
  remove_params_from_url,
)


def test_get_params_as_dict() -> None:
  assert get_params_as_dict('/me?access_token=abc&fields=id,name') == {
    'access_token': 'abc',
    'fields': 'id,name',
  }
  assert get_params_as_dict('/me') == {}
  assert get_params_as_dict(None) == {}
  assert get_params_as_dict('/me?flag=') == {'flag': ''}


def test_remove_params_from_url_keeps_other_parts() -> None:
  url = 'https://graph.example.com/me?access_token=abc&fields=id&appsecret_proof=zz#frag'
  cleaned = remove_params_from_url(url, ['access_token', 'appsecret_proof'])
  assert cleaned == 'https://graph.example.com/me?fields=id#frag'


def test_remove_params_from_url_drops_empty_query() -> None:
  assert remove_params_from_url('/me?access_token=abc', ['access_token']) == '/me'
  assert remove_params_from_url('/me', ['access_token']) == '/me'
  assert remove_params_from_url(None, ['access_token']) is None


def test_force_slash_prefix() -> None:
  assert force_slash_prefix('v2.2') == '/v2.2'
  assert force_slash_prefix('/me') == '/me'
  assert force_slash_prefix('') == ''
  assert force_slash_prefix(None) == ''


def test_append_params_without_existing_query() -> None:
  assert append_params_to_url('/me', {}) == '/me'
  assert append_params_to_url('/me', {'limit': 5, 'summary': True}) == '/me?limit=5&summary=true'
  assert append_params_to_url('/me', {'ids': ['1', '2']}) == '/me?ids=1&ids=2'


def test_append_params_prefers_existing_query_values() -> None:
  url = append_params_to_url('/me?fields=id&b=1', {'fields': 'name', 'a': '2'})
  assert url == '/me?a=2&b=1&fields=id'
  assert parse_qs(urlsplit(url).query)['fields'] == ['id']
