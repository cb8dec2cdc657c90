"""Exception hierarchy for the Bittrex client."""

from __future__ import annotations

from typing import Any


class BittrexError(Exception):
    """Base class for all client errors."""


class MissingCredentialError(BittrexError):
    """Authenticated call attempted without an API key or secret."""

    API_KEY = "apiKey"
    API_SECRET = "apiSecret"

    def __init__(self, kind: str) -> None:
        label = "API key" if kind == self.API_KEY else "API secret"
        super().__init__(f"{label} is required")
        self.kind = kind


class MissingArgumentError(BittrexError):
    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} is required")
        self.argument = argument


class TransportError(BittrexError):
    """Network failure, non-success HTTP status or undecodable body."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload
