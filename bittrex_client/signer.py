"""HMAC-SHA512 request signing."""

from __future__ import annotations

import hashlib
import hmac

from bittrex_client.errors import MissingCredentialError


def sign(uri: str, secret: str) -> str:
    """Return the lowercase hex HMAC-SHA512 of ``uri`` keyed by ``secret``."""
    if not secret:
        raise MissingCredentialError(MissingCredentialError.API_SECRET)
    return hmac.new(
        secret.encode("utf-8"),
        uri.encode("utf-8"),
        hashlib.sha512,
    ).hexdigest()
