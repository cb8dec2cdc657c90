"""Signed request construction for the Bittrex v1.1 REST API.

Authenticated requests carry ``nonce`` and ``apikey`` in the query string and
an ``apisign`` header holding the HMAC-SHA512 of the full request URI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
import time
from typing import Any, Protocol
from urllib.parse import urlencode

from bittrex_client.config_loader import ClientConfig
from bittrex_client.signer import sign


LOGGER = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"


class Transport(Protocol):
    def request(
        self,
        method: str,
        host: str,
        path: str,
        headers: dict[str, str] | None = None,
    ) -> Any: ...


@dataclass(slots=True)
class RequestDescriptor:
    path: str
    params: dict[str, Any]
    uri: str
    request_path: str
    nonce: int | None = None
    signature: str | None = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def query_string(self) -> str:
        return urlencode(self.params)


def get_nonce(now: float | None = None) -> int:
    return int(math.floor(time.time() if now is None else now))


def build_request(
    config: ClientConfig,
    path: str,
    params: dict[str, Any] | None = None,
    now: float | None = None,
) -> RequestDescriptor:
    """Merge auth params, build the URI and sign it.

    The caller's mapping is copied, never mutated. Auth params are appended
    after the call params so the signed URI and the sent URI are identical.
    """
    merged: dict[str, Any] = dict(params or {})
    nonce = None
    if config.has_credentials:
        nonce = get_nonce(now)
        merged["nonce"] = nonce
        merged["apikey"] = config.api_key

    query = urlencode(merged)
    request_path = f"/api/{config.version}{path}"
    if query:
        request_path = f"{request_path}?{query}"
    uri = f"{config.protocol}://{config.host}{request_path}"

    headers = {"Content-Type": CONTENT_TYPE}
    signature = None
    if config.has_credentials:
        signature = sign(uri, config.api_secret)
        headers["apisign"] = signature

    return RequestDescriptor(
        path=path,
        params=merged,
        uri=uri,
        request_path=request_path,
        nonce=nonce,
        signature=signature,
        headers=headers,
    )


def build_and_send(
    config: ClientConfig,
    transport: Transport,
    path: str,
    params: dict[str, Any] | None = None,
) -> Any:
    """Build the request and hand it to the transport.

    Transport results and errors are returned or raised unchanged.
    """
    descriptor = build_request(config, path, params)
    LOGGER.debug(
        "GET %s signed=%s nonce=%s",
        path,
        descriptor.signature is not None,
        descriptor.nonce,
    )
    return transport.request(
        "GET",
        config.host,
        descriptor.request_path,
        headers=dict(descriptor.headers),
    )
