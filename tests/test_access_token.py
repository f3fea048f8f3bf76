from __future__ import annotations

import pytest

from graph_request.domain.entities.graph_app import GraphApp
from graph_request.domain.value_objects.access_token import AccessToken


def test_access_token_string_form() -> None:
  assert str(AccessToken('abc123')) == 'abc123'


def test_access_token_requires_value() -> None:
  with pytest.raises(ValueError, match='required'):
    AccessToken('')


def test_access_token_repr_hides_value() -> None:
  assert 'abc123' not in repr(AccessToken('abc123'))


def test_app_access_token() -> None:
  app = GraphApp(id='123', secret='s3cr3t')
  assert str(app.get_access_token()) == '123|s3cr3t'


def test_graph_app_requires_id_and_secret() -> None:
  with pytest.raises(ValueError, match='id'):
    GraphApp(id='', secret='s')
  with pytest.raises(ValueError, match='secret'):
    GraphApp(id='1', secret='')


def test_graph_app_repr_hides_secret() -> None:
  assert 's3cr3t' not in repr(GraphApp(id='123', secret='s3cr3t'))
