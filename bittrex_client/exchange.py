"""Bittrex v1.1 exchange wrapper (public, market and account endpoints)."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from bittrex_client.config_loader import ClientConfig
from bittrex_client.errors import MissingArgumentError, MissingCredentialError
from bittrex_client.request_builder import Transport, build_and_send
from bittrex_client.transport import RequestsTransport


class BittrexExchange:
    """Bittrex API client.

    Endpoint groups:
    1) Public - market data, no credentials needed
    2) Market - order placement and cancellation
    3) Account - balances, deposits and withdrawals

    Every call returns the exchange envelope ``{"success", "message",
    "result"}`` as-is. A ``success: false`` envelope is not raised.
    """

    # Public API endpoints
    PUBLIC_GET_MARKETS = "/public/getmarkets"
    PUBLIC_GET_CURRENCIES = "/public/getcurrencies"
    PUBLIC_GET_TICKER = "/public/getticker"
    PUBLIC_GET_MARKET_SUMMARIES = "/public/getmarketsummaries"
    PUBLIC_GET_MARKET_SUMMARY = "/public/getmarketsummary"
    PUBLIC_GET_ORDER_BOOK = "/public/getorderbook"
    PUBLIC_GET_MARKET_HISTORY = "/public/getmarkethistory"
    # Market API endpoints
    MARKET_BUY_LIMIT = "/market/buylimit"
    MARKET_SELL_LIMIT = "/market/selllimit"
    MARKET_CANCEL = "/market/cancel"
    MARKET_GET_OPEN_ORDERS = "/market/getopenorders"
    # Account API endpoints
    ACCOUNT_GET_BALANCES = "/account/getbalances"
    ACCOUNT_GET_BALANCE = "/account/getbalance"
    ACCOUNT_GET_DEPOSIT_ADDRESS = "/account/getdepositaddress"
    ACCOUNT_WITHDRAW = "/account/withdraw"
    ACCOUNT_GET_ORDER = "/account/getorder"
    ACCOUNT_GET_ORDER_HISTORY = "/account/getorderhistory"
    ACCOUNT_GET_WITHDRAWAL_HISTORY = "/account/getwithdrawalhistory"
    ACCOUNT_GET_DEPOSIT_HISTORY = "/account/getdeposithistory"

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
        api_key: str | None = None,
        api_secret: str | None = None,
        protocol: str | None = None,
        host: str | None = None,
        version: str | None = None,
    ) -> None:
        overrides = {
            key: value
            for key, value in (
                ("api_key", api_key),
                ("api_secret", api_secret),
                ("protocol", protocol),
                ("host", host),
                ("version", version),
            )
            if value is not None
        }
        self.config = replace(config or ClientConfig(), **overrides)
        self.transport = transport or RequestsTransport(
            protocol=self.config.protocol,
            timeout_sec=self.config.timeout_sec,
        )

    def close(self) -> None:
        """Release the transport session, when the transport has one."""
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> BittrexExchange:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    @property
    def private_api_enabled(self) -> bool:
        return self.config.has_credentials

    def connectivity_report(self, sample_market: str = "BTC-LTC") -> dict[str, Any]:
        """Return public/private API connectivity summary."""
        report: dict[str, Any] = {
            "base_url": self.config.base_url,
            "credentials_loaded": self.config.has_credentials,
            "sample_market": sample_market,
            "public_ok": None,
            "private_ok": None,
            "error": None,
        }

        try:
            ticker = self.get_ticker(sample_market)
            report["public_ok"] = bool(isinstance(ticker, dict) and ticker.get("success"))
        except Exception as exc:
            report["error"] = str(exc)
            return report

        if not self.private_api_enabled:
            return report

        try:
            balances = self.get_balances()
            report["private_ok"] = bool(isinstance(balances, dict) and balances.get("success"))
            if not report["private_ok"] and isinstance(balances, dict):
                report["error"] = balances.get("message")
        except Exception as exc:
            report["error"] = str(exc)

        return report

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_markets(self) -> Any:
        """Open and available trading markets along with other meta data."""
        return self._request(self.PUBLIC_GET_MARKETS)

    def get_currencies(self) -> Any:
        """All supported currencies along with other meta data."""
        return self._request(self.PUBLIC_GET_CURRENCIES)

    def get_ticker(self, market: str) -> Any:
        """Current tick values for a market (ex: BTC-LTC)."""
        self._require("market", market)
        return self._request(self.PUBLIC_GET_TICKER, {"market": market})

    def get_market_summaries(self) -> Any:
        """Last 24 hour summary of all active markets."""
        return self._request(self.PUBLIC_GET_MARKET_SUMMARIES)

    def get_market_summary(self, market: str) -> Any:
        """Last 24 hour summary of one market."""
        self._require("market", market)
        return self._request(self.PUBLIC_GET_MARKET_SUMMARY, {"market": market})

    def get_order_book(self, market: str, type: str = "both", depth: int = 20) -> Any:
        """Order book for a market.

        ``type`` is one of buy, sell or both. The exchange caps ``depth`` at
        50; larger values are passed through and left for it to reject.
        """
        self._require("market", market)
        self._require("type", type)
        self._require("depth", depth)
        return self._request(
            self.PUBLIC_GET_ORDER_BOOK,
            {"market": market, "type": type, "depth": depth},
        )

    def get_market_history(self, market: str) -> Any:
        """Latest trades that have occurred for a market."""
        self._require("market", market)
        return self._request(self.PUBLIC_GET_MARKET_HISTORY, {"market": market})

    # ------------------------------------------------------------------
    # Market API
    # ------------------------------------------------------------------

    def buy_limit(self, market: str, quantity: float | str, rate: float | str) -> Any:
        """Place a limit buy order. API key needs trade permission."""
        self._require_credentials()
        self._require("market", market)
        self._require("quantity", quantity)
        self._require("rate", rate)
        return self._request(
            self.MARKET_BUY_LIMIT,
            {"market": market, "quantity": quantity, "rate": rate},
        )

    def sell_limit(self, market: str, quantity: float | str, rate: float | str) -> Any:
        """Place a limit sell order. API key needs trade permission."""
        self._require_credentials()
        self._require("market", market)
        self._require("quantity", quantity)
        self._require("rate", rate)
        return self._request(
            self.MARKET_SELL_LIMIT,
            {"market": market, "quantity": quantity, "rate": rate},
        )

    def cancel_order(self, uuid: str) -> Any:
        """Cancel a buy or sell order by uuid."""
        self._require_credentials()
        self._require("uuid", uuid)
        return self._request(self.MARKET_CANCEL, {"uuid": uuid})

    def get_open_orders(self, market: str | None = "") -> Any:
        """Open orders, for one market or all markets when ``market`` is empty or None."""
        self._require_credentials()
        return self._request(self.MARKET_GET_OPEN_ORDERS, {"market": market or ""})

    # ------------------------------------------------------------------
    # Account API
    # ------------------------------------------------------------------

    def get_balances(self) -> Any:
        self._require_credentials()
        return self._request(self.ACCOUNT_GET_BALANCES)

    def get_balance(self, currency: str) -> Any:
        self._require_credentials()
        self._require("currency", currency)
        return self._request(self.ACCOUNT_GET_BALANCE, {"currency": currency})

    def get_deposit_address(self, currency: str) -> Any:
        """Deposit address for a currency.

        The exchange answers ADDRESS_GENERATING until a new address exists.
        """
        self._require_credentials()
        self._require("currency", currency)
        return self._request(self.ACCOUNT_GET_DEPOSIT_ADDRESS, {"currency": currency})

    def withdraw(
        self,
        currency: str,
        quantity: float | str,
        address: str,
        payment_id: str | None = None,
    ) -> Any:
        """Withdraw funds. ``quantity`` must account for the tx fee.

        ``payment_id`` is the memo field used by CryptoNote style coins and
        is left out of the query entirely when not given.
        """
        self._require_credentials()
        self._require("currency", currency)
        self._require("quantity", quantity)
        self._require("address", address)
        params: dict[str, Any] = {
            "currency": currency,
            "quantity": quantity,
            "address": address,
        }
        if payment_id is not None:
            params["paymentid"] = payment_id
        return self._request(self.ACCOUNT_WITHDRAW, params)

    def get_order(self, uuid: str) -> Any:
        self._require_credentials()
        self._require("uuid", uuid)
        return self._request(self.ACCOUNT_GET_ORDER, {"uuid": uuid})

    def get_order_history(self, market: str | None = None) -> Any:
        self._require_credentials()
        return self._request(self.ACCOUNT_GET_ORDER_HISTORY, self._optional(market=market))

    def get_withdrawal_history(self, currency: str | None = None) -> Any:
        self._require_credentials()
        return self._request(
            self.ACCOUNT_GET_WITHDRAWAL_HISTORY,
            self._optional(currency=currency),
        )

    def get_deposit_history(self, currency: str | None = None) -> Any:
        self._require_credentials()
        return self._request(
            self.ACCOUNT_GET_DEPOSIT_HISTORY,
            self._optional(currency=currency),
        )

    # ------------------------------------------------------------------

    def _request(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return build_and_send(self.config, self.transport, path, params)

    def _require_credentials(self) -> None:
        if not self.config.has_api_key:
            raise MissingCredentialError(MissingCredentialError.API_KEY)
        if not self.config.has_api_secret:
            raise MissingCredentialError(MissingCredentialError.API_SECRET)

    @staticmethod
    def _require(name: str, value: Any) -> None:
        # None, "" and 0 all count as missing.
        if not value:
            raise MissingArgumentError(name)

    @staticmethod
    def _optional(**params: Any) -> dict[str, Any]:
        return {key: value for key, value in params.items() if value is not None}
