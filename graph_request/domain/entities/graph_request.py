"""Domain entity describing a single, not yet sent, graph API call."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Protocol

from graph_request.common.version import CLIENT_NAME, DEFAULT_GRAPH_VERSION, VERSION
from graph_request.domain.exceptions import (
  AccessTokenMismatch,
  InvalidMethod,
  MissingAccessToken,
  MissingApp,
  MissingMethod,
)
from graph_request.domain.services import url_manipulator
from graph_request.domain.services.secret_proof_signer import SecretProofSigner

logger = logging.getLogger(__name__)

ACCESS_TOKEN_PARAM = 'access_token'
APP_SECRET_PROOF_PARAM = 'appsecret_proof'
_CREDENTIAL_PARAMS = (ACCESS_TOKEN_PARAM, APP_SECRET_PROOF_PARAM)


class HttpMethod(str, Enum):
  GET = 'GET'
  POST = 'POST'
  DELETE = 'DELETE'


SUPPORTED_METHODS = tuple(method.value for method in HttpMethod)


class AppLike(Protocol):
  id: str
  secret: str


class GraphRequest:
  """Mutable description of a graph API call.

  The access token is the single source of truth for authentication. Tokens
  found in the endpoint query string or in the params are reconciled against
  it, and the ``access_token`` and ``appsecret_proof`` values are only ever
  synthesized when the URL or params are read.
  """

  def __init__(
    self,
    app: Optional[AppLike] = None,
    access_token: Any = None,
    method: Optional[str] = None,
    endpoint: Optional[str] = None,
    params: Optional[Mapping[str, Any]] = None,
    etag: Optional[str] = None,
    graph_version: Optional[str] = None,
    signer: Optional[SecretProofSigner] = None,
  ) -> None:
    self._app: Optional[AppLike] = None
    self._access_token: Optional[str] = None
    self._method: Optional[str] = None
    self._endpoint: Optional[str] = None
    self._params: Dict[str, Any] = {}
    self._etag: Optional[str] = None
    self._signer = signer or SecretProofSigner()

    self.set_app(app)
    self.set_access_token(access_token)
    self.set_method(method)
    self.set_endpoint(endpoint)
    self.set_params(params or {})
    self.set_etag(etag)
    self._graph_version = graph_version or DEFAULT_GRAPH_VERSION

  def __repr__(self) -> str:
    return (
      f'GraphRequest(method={self._method!r}, endpoint={self._endpoint!r}, '
      f'graph_version={self._graph_version!r})'
    )

  # Access token

  def set_access_token(self, access_token: Any) -> GraphRequest:
    """Set the token, coercing token objects to their string form.

    This is the trusted path and overwrites any existing token.
    """
    if access_token is not None and not isinstance(access_token, str):
      access_token = str(access_token)
    self._access_token = access_token or None
    return self

  def set_access_token_from_params(self, access_token: Any) -> GraphRequest:
    """Adopt a token harvested from the endpoint or params.

    Raises AccessTokenMismatch when a different token is already set.
    """
    if access_token is not None and not isinstance(access_token, str):
      access_token = str(access_token)
    if not access_token:
      return self

    existing = self.get_access_token()
    if not existing:
      logger.debug('Adopting access token found in request endpoint or params')
      self.set_access_token(access_token)
    elif access_token != existing:
      logger.warning('Access token in endpoint or params conflicts with the request token')
      raise AccessTokenMismatch()

    return self

  def get_access_token(self) -> Optional[str]:
    return self._access_token

  def validate_access_token(self) -> None:
    if not self.get_access_token():
      raise MissingAccessToken()

  # App and signing

  def set_app(self, app: Optional[AppLike]) -> GraphRequest:
    self._app = app
    return self

  def get_app(self) -> Optional[AppLike]:
    return self._app

  def get_app_secret_proof(self) -> str:
    """Sign the current access token with the app secret."""
    secret = getattr(self._app, 'secret', None) if self._app is not None else None
    if not secret:
      raise MissingApp()
    self.validate_access_token()
    return self._signer.sign(self._access_token, secret)

  # Method

  def set_method(self, method: Optional[str]) -> GraphRequest:
    self._method = method.upper() if method else None
    return self

  def get_method(self) -> Optional[str]:
    return self._method

  def validate_method(self) -> None:
    if not self._method:
      raise MissingMethod()
    if self._method not in SUPPORTED_METHODS:
      raise InvalidMethod(self._method, SUPPORTED_METHODS)

  # Endpoint

  def set_endpoint(self, endpoint: Optional[str]) -> GraphRequest:
    # Harvest the token before cleaning so it stays in sync
    params = url_manipulator.get_params_as_dict(endpoint)
    if ACCESS_TOKEN_PARAM in params:
      self.set_access_token_from_params(params[ACCESS_TOKEN_PARAM])

    self._endpoint = url_manipulator.remove_params_from_url(endpoint, _CREDENTIAL_PARAMS)
    return self

  def get_endpoint(self) -> Optional[str]:
    """Return the endpoint without credentials, as batch assemblers need it."""
    return self._endpoint

  # Params

  def set_params(self, params: Optional[Mapping[str, Any]] = None) -> GraphRequest:
    params = dict(params or {})
    if ACCESS_TOKEN_PARAM in params:
      self.set_access_token_from_params(params[ACCESS_TOKEN_PARAM])

    for name in _CREDENTIAL_PARAMS:
      params.pop(name, None)

    return self.dangerously_set_params(params)

  def dangerously_set_params(self, params: Optional[Mapping[str, Any]] = None) -> GraphRequest:
    """Merge params without filtering credentials or checking for conflicts.

    Only for trusted callers that already validated the token. Never pass
    user input through here.
    """
    self._params.update(params or {})
    return self

  def get_params(self) -> Dict[str, Any]:
    params = dict(self._params)

    access_token = self.get_access_token()
    if access_token:
      params[ACCESS_TOKEN_PARAM] = access_token
      params[APP_SECRET_PROOF_PARAM] = self.get_app_secret_proof()

    return params

  def get_post_params(self) -> Dict[str, Any]:
    """Return the body params; only POST requests carry any."""
    if self._method == HttpMethod.POST.value:
      return self.get_params()
    return {}

  # Caching and headers

  def set_etag(self, etag: Optional[str]) -> GraphRequest:
    self._etag = etag
    return self

  def get_etag(self) -> Optional[str]:
    return self._etag

  def get_headers(self) -> Dict[str, str]:
    headers = self.get_default_headers()
    if self._etag:
      headers['If-None-Match'] = self._etag
    return headers

  @staticmethod
  def get_default_headers() -> Dict[str, str]:
    return {
      'User-Agent': f'{CLIENT_NAME}-{VERSION}',
      'Accept-Encoding': '*',
    }

  # URL

  def get_graph_version(self) -> str:
    return self._graph_version

  def get_url(self) -> str:
    """Return the versioned path, with params in the query string unless POST."""
    self.validate_method()

    url = (
      url_manipulator.force_slash_prefix(self._graph_version)
      + url_manipulator.force_slash_prefix(self._endpoint)
    )

    if self._method != HttpMethod.POST.value:
      url = url_manipulator.append_params_to_url(url, self.get_params())

    return url
