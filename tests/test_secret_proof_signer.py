from __future__ import annotations

from graph_request.domain.services.secret_proof_signer import SecretProofSigner


def test_sign_matches_known_hmac_sha256_vector() -> None:
  proof = SecretProofSigner.sign('The quick brown fox jumps over the lazy dog', 'key')
  assert proof == 'f7bc83f430538424b13298e6aa6fb143ef4d59a14946175997479dbc2d1a3cd8'


def test_sign_is_deterministic() -> None:
  signer = SecretProofSigner()
  assert signer.sign('abc123', 's3cr3t') == signer.sign('abc123', 's3cr3t')


def test_sign_changes_with_token_or_secret() -> None:
  base = SecretProofSigner.sign('abc123', 's3cr3t')
  assert SecretProofSigner.sign('abc124', 's3cr3t') != base
  assert SecretProofSigner.sign('abc123', 's3cr3u') != base
