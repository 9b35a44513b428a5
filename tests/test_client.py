import pytest

from roblox_sdk.classifier import Outcome
from roblox_sdk.client import RobloxClient
from roblox_sdk.config import RobloxAPISettings
from roblox_sdk.exceptions import AuthRequired
from roblox_sdk.exceptions import PlatformError
from roblox_sdk.exceptions import RateLimited
from roblox_sdk.exceptions import TransportError
from roblox_sdk.executor import RequestDescriptor
from tests.fakes import csrf_challenge
from tests.fakes import make_response

CURRENCY = RequestDescriptor("GET", "https://economy.roblox.com/v1/users/1/currency")


def test_client_builds_transport_with_settings(monkeypatch):
    """
    GIVEN: settings with a proxy, a timeout and a transport name
    WHEN: we construct a client
    THEN: the transport factory receives all of them
    """
    seen = {}

    def fake_get_transport(name, timeout=None, proxy=None):
        seen.update(name=name, timeout=timeout, proxy=proxy)
        return object()

    monkeypatch.setattr("roblox_sdk.client.get_transport", fake_get_transport)
    settings = RobloxAPISettings(
        roblosecurity="abc", proxy="http://proxy.test:8080", timeout=3.0, transport="aiohttp"
    )

    client = RobloxClient(settings)

    assert seen == {"name": "aiohttp", "timeout": 3.0, "proxy": "http://proxy.test:8080"}
    assert client.session.cookie_header() == ".ROBLOSECURITY=abc"


def test_keyword_arguments_override_settings(monkeypatch):
    monkeypatch.setattr("roblox_sdk.client.get_transport", lambda *a, **kw: object())
    settings = RobloxAPISettings(roblosecurity="abc", proxy="http://a.test:1")

    client = RobloxClient(settings, roblosecurity="xyz", proxy="http://b.test:2")

    assert client.session.cookie_header() == ".ROBLOSECURITY=xyz"
    assert client.session.proxy == "http://b.test:2"


@pytest.mark.asyncio
async def test_execute_returns_failures_instead_of_raising(make_client):
    client, _ = make_client([make_response(404, {"errors": [{"code": 1, "message": "nope"}]})])

    result = await client.execute(CURRENCY)

    assert result.outcome is Outcome.PLATFORM_ERROR
    assert result.code == 1


@pytest.mark.asyncio
async def test_request_resolves_csrf_challenge(make_client):
    client, transport = make_client([csrf_challenge("tok1"), make_response(200, {"robux": 100})])
    descriptor = RequestDescriptor.from_json(
        "POST", "https://economy.roblox.com/x", {}, requires_csrf=True
    )

    result = await client.request(descriptor)

    assert result.json() == {"robux": 100}
    assert transport.request_count == 2


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response,exc_type",
    [
        (make_response(401, {}), AuthRequired),
        (make_response(429, headers={"Retry-After": "2"}), RateLimited),
        (make_response(500, content=b"oops"), PlatformError),
    ],
)
async def test_request_raises_typed_errors(make_client, response, exc_type):
    client, transport = make_client([response])

    with pytest.raises(exc_type):
        await client.request(CURRENCY)

    assert transport.request_count == 1


@pytest.mark.asyncio
async def test_transport_errors_are_not_retried_by_default(make_client):
    client, transport = make_client([TransportError("reset")])

    with pytest.raises(TransportError):
        await client.request(CURRENCY)

    assert transport.request_count == 1


@pytest.mark.asyncio
async def test_transport_errors_retried_when_opted_in(make_client):
    """
    GIVEN: a client built with retry_attempts=2
    WHEN: the first attempt fails at the transport level
    THEN: the call is repeated and the second answer is returned
    """
    client, transport = make_client(
        [TransportError("reset"), make_response(200, {"robux": 1})], retry_attempts=2
    )

    result = await client.request(CURRENCY)

    assert result.json() == {"robux": 1}
    assert transport.request_count == 2


@pytest.mark.asyncio
async def test_rate_limit_is_never_retried_even_when_opted_in(make_client):
    client, transport = make_client(
        [make_response(429, headers={"Retry-After": "1"})], retry_attempts=3
    )

    with pytest.raises(RateLimited):
        await client.request(CURRENCY)

    assert transport.request_count == 1


@pytest.mark.asyncio
async def test_async_context_manager_closes_transport(make_client):
    client, transport = make_client()

    async with client:
        pass

    assert transport.closed
