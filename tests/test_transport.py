from __future__ import annotations

import unittest
from unittest.mock import Mock

import requests

from bittrex_client.errors import TransportError
from bittrex_client.transport import RequestsTransport


def _response(status_code: int = 200, payload=None, json_error: Exception | None = None) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.text = "<html>"
    if json_error is not None:
        response.json = Mock(side_effect=json_error)
    else:
        response.json = Mock(return_value=payload)
    return response


class RequestsTransportTest(unittest.TestCase):
    def test_request_builds_url_and_returns_json(self) -> None:
        session = Mock()
        session.request = Mock(return_value=_response(payload={"success": True, "result": []}))
        transport = RequestsTransport(protocol="https", timeout_sec=3.0, session=session)

        out = transport.request(
            "get",
            "bittrex.com",
            "/api/v1.1/public/getmarkets",
            headers={"apisign": "abc"},
        )

        self.assertEqual(out, {"success": True, "result": []})
        session.request.assert_called_once_with(
            method="GET",
            url="https://bittrex.com/api/v1.1/public/getmarkets",
            headers={"apisign": "abc"},
            timeout=3.0,
        )

    def test_network_failure_raises_transport_error(self) -> None:
        session = Mock()
        session.request = Mock(side_effect=requests.ConnectionError("refused"))
        transport = RequestsTransport(session=session)

        with self.assertRaises(TransportError) as ctx:
            transport.request("GET", "bittrex.com", "/api/v1.1/public/getmarkets")
        self.assertIsNone(ctx.exception.status_code)
        self.assertIsInstance(ctx.exception.__cause__, requests.ConnectionError)

    def test_http_error_status_raises_transport_error(self) -> None:
        session = Mock()
        session.request = Mock(return_value=_response(status_code=503, payload={"message": "down"}))
        transport = RequestsTransport(session=session)

        with self.assertRaises(TransportError) as ctx:
            transport.request("GET", "bittrex.com", "/api/v1.1/public/getmarkets")
        self.assertEqual(ctx.exception.status_code, 503)
        self.assertEqual(ctx.exception.payload, {"message": "down"})

    def test_http_error_with_html_body_reports_status(self) -> None:
        session = Mock()
        session.request = Mock(
            return_value=_response(status_code=500, json_error=ValueError("no json")),
        )
        transport = RequestsTransport(session=session)

        with self.assertRaises(TransportError) as ctx:
            transport.request("GET", "bittrex.com", "/api/v1.1/public/getmarkets")
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(ctx.exception.payload, "<html>")
        self.assertEqual(str(ctx.exception), "HTTP 500: <html>")

    def test_invalid_json_raises_transport_error(self) -> None:
        session = Mock()
        session.request = Mock(return_value=_response(json_error=ValueError("no json")))
        transport = RequestsTransport(session=session)

        with self.assertRaises(TransportError) as ctx:
            transport.request("GET", "bittrex.com", "/api/v1.1/public/getmarkets")
        self.assertEqual(ctx.exception.status_code, 200)
        self.assertEqual(ctx.exception.payload, "<html>")

    def test_failed_envelope_with_ok_status_is_returned(self) -> None:
        envelope = {"success": False, "message": "APIKEY_INVALID", "result": None}
        session = Mock()
        session.request = Mock(return_value=_response(payload=envelope))
        transport = RequestsTransport(session=session)

        self.assertEqual(transport.request("GET", "bittrex.com", "/api/v1.1/account/getbalances"), envelope)


if __name__ == "__main__":
    unittest.main()
