import logging

import pytest

from roblox_sdk.executor import RequestDescriptor
from roblox_sdk.logging_middleware import LoggingMiddleware
from roblox_sdk.logging_middleware import redact_headers
from tests.fakes import csrf_challenge
from tests.fakes import make_response


class RecordingMiddleware:
    def __init__(self):
        self.calls = []

    async def on_request(self, method, url, headers, params, content):
        self.calls.append(("request", method, headers.get("x-csrf-token")))

    async def on_response(self, response):
        self.calls.append(("response", response.status_code))


def test_redact_headers_hides_secrets_only():
    headers = {
        "Cookie": ".ROBLOSECURITY=abc",
        "X-CSRF-TOKEN": "tok1",
        "User-Agent": "agent",
    }

    assert redact_headers(headers) == {
        "Cookie": "<redacted>",
        "X-CSRF-TOKEN": "<redacted>",
        "User-Agent": "agent",
    }


@pytest.mark.asyncio
async def test_middleware_sees_each_attempt_of_a_csrf_retry(make_client):
    """
    GIVEN: a middleware registered on the client
    WHEN: a protected call is challenged and retried
    THEN: on_request/on_response run for both attempts
    """
    recorder = RecordingMiddleware()
    client, _ = make_client(
        [csrf_challenge("tok1"), make_response(200, {})], middlewares=[recorder]
    )

    await client.request(
        RequestDescriptor.from_json("POST", "https://economy.roblox.com/x", {}, requires_csrf=True)
    )

    assert recorder.calls == [
        ("request", "POST", None),
        ("response", 403),
        ("request", "POST", "tok1"),
        ("response", 200),
    ]


@pytest.mark.asyncio
async def test_logging_middleware_never_logs_credentials(make_client, caplog):
    client, _ = make_client(
        [csrf_challenge("tok-secret"), make_response(200, {})],
        middlewares=[LoggingMiddleware()],
        roblosecurity="cookie-secret",
    )

    with caplog.at_level(logging.DEBUG, logger="roblox_sdk"):
        await client.request(
            RequestDescriptor.from_json(
                "POST", "https://economy.roblox.com/x", {}, requires_csrf=True
            )
        )

    assert "Request: POST https://economy.roblox.com/x" in caplog.text
    assert "Response: 200" in caplog.text
    assert "cookie-secret" not in caplog.text
    assert "tok-secret" not in caplog.text


def test_client_exposes_middlewares(make_client):
    middleware = LoggingMiddleware()
    client, _ = make_client(middlewares=[middleware])

    assert client.middlewares == [middleware]
