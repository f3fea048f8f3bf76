"""Domain service that signs access tokens with the app secret."""
from __future__ import annotations

import hashlib
import hmac


class SecretProofSigner:
  """Computes the appsecret_proof sent alongside an access token."""

  @staticmethod
  def sign(access_token: str, app_secret: str) -> str:
    """Return the HMAC-SHA256 hex digest of the token keyed by the secret."""
    return hmac.new(
      app_secret.encode('utf-8'),
      access_token.encode('utf-8'),
      hashlib.sha256,
    ).hexdigest()
