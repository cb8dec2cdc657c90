"""HTTP transport backed by requests."""

from __future__ import annotations

import logging
from typing import Any

import requests

from bittrex_client.errors import TransportError


LOGGER = logging.getLogger(__name__)


class RequestsTransport:
    """Performs one HTTP call and returns the decoded JSON body.

    Resolves only on success; everything else raises TransportError.
    """

    def __init__(
        self,
        protocol: str = "https",
        timeout_sec: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.protocol = protocol
        self.timeout_sec = timeout_sec
        self._session = session if session is not None else requests.Session()

    def request(
        self,
        method: str,
        host: str,
        path: str,
        headers: dict[str, str] | None = None,
    ) -> Any:
        url = f"{self.protocol}://{host}{path}"
        try:
            response = self._session.request(
                method=method.upper(),
                url=url,
                headers=headers or {},
                timeout=self.timeout_sec,
            )
        except requests.RequestException as exc:
            LOGGER.warning("%s %s%s failed: %s", method, host, _strip_query(path), exc)
            raise TransportError(f"Request failed: {exc}") from exc
        return self._decode_response(response)

    def close(self) -> None:
        self._session.close()

    @staticmethod
    def _decode_response(response) -> Any:
        if response.status_code >= 400:
            try:
                payload = response.json()
            except ValueError:
                payload = getattr(response, "text", None)
            raise TransportError(
                f"HTTP {response.status_code}: {payload}",
                status_code=response.status_code,
                payload=payload,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                f"HTTP {response.status_code}: invalid JSON body",
                status_code=response.status_code,
                payload=getattr(response, "text", None),
            ) from exc


def _strip_query(path: str) -> str:
    return path.split("?", 1)[0]
