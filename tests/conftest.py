import pytest

from roblox_sdk.client import RobloxClient
from roblox_sdk.config import RobloxAPISettings
from tests.fakes import MockTransport


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep ROBLOX_API_* variables and stray .env files out of the tests."""
    for name in (
        "ROBLOX_API_ROBLOSECURITY",
        "ROBLOX_API_PROXY",
        "ROBLOX_API_TIMEOUT",
        "ROBLOX_API_TRANSPORT",
        "ROBLOX_API_USER_AGENT",
        "ROBLOX_API_RETRY_ATTEMPTS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return RobloxAPISettings(roblosecurity="abc")


@pytest.fixture
def make_client(settings):
    """Create clients wired to a MockTransport instead of the network."""

    def _make(responses=None, handler=None, **kwargs):
        client = RobloxClient(settings, **kwargs)
        transport = MockTransport(responses, handler, proxy=client.session.proxy)
        client.transport = transport
        client.executor.transport = transport
        return client, transport

    return _make
