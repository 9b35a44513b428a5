"""
Session state shared by every call made through one client.

Holds the .ROBLOSECURITY credential (write-once), the lazily learned CSRF
token (read/write) and the proxy URL (write-once). No network I/O happens here.
"""

import logging
import threading
from urllib.parse import urlsplit

import httpx

from roblox_sdk.exceptions import ConfigError

logger = logging.getLogger("roblox_sdk.session")

ROBLOSECURITY_COOKIE = ".ROBLOSECURITY"
SUPPORTED_PROXY_SCHEMES = ("http", "https", "socks5", "socks5h")


def validate_proxy_url(proxy: str) -> str:
    """
    Check the syntax of a proxy URL.

    Raises:
        ConfigError: If the URL does not parse, the scheme is unsupported, the
            host is missing or contains whitespace, or the port is not a valid
            number.
    """
    try:
        parts = urlsplit(proxy)
        # .port raises ValueError for non-numeric or out-of-range ports
        port = parts.port
        # Same parser the transports hand the proxy to; rejects control characters.
        httpx.URL(proxy)
    except (ValueError, httpx.InvalidURL) as err:
        raise ConfigError(f"Invalid proxy URL: {err}") from err

    if parts.scheme.lower() not in SUPPORTED_PROXY_SCHEMES:
        raise ConfigError(
            f"Unsupported proxy scheme {parts.scheme!r}. "
            f"Available: {', '.join(SUPPORTED_PROXY_SCHEMES)}"
        )
    if not parts.hostname:
        raise ConfigError("Invalid proxy URL: missing host")
    if any(char.isspace() for char in parts.netloc):
        raise ConfigError("Invalid proxy URL: whitespace in host")
    if port == 0:
        raise ConfigError("Invalid proxy URL: port 0")
    return proxy


class SessionState:
    """
    Credential, CSRF token and proxy of one client instance.

    The CSRF token is shared mutable state. Reads are lock-free; writes go
    through a small lock so concurrent refreshes resolve last-writer-wins.
    A stale read only costs the reader one extra CSRF retry.

    Args:
        roblosecurity (str | None): Session cookie value supplied by the caller.
        proxy (str | None): Proxy URL every request is routed through.

    Raises:
        ConfigError: If the proxy URL is malformed.
    """

    def __init__(self, roblosecurity: str | None = None, proxy: str | None = None):
        self._roblosecurity = roblosecurity or None
        self._proxy = validate_proxy_url(proxy) if proxy else None
        self._csrf_token: str | None = None
        self._lock = threading.Lock()

    @property
    def has_credential(self) -> bool:
        return self._roblosecurity is not None

    @property
    def proxy(self) -> str | None:
        return self._proxy

    def cookie_header(self) -> str | None:
        """Value of the Cookie header carrying the credential, if any."""
        if self._roblosecurity is None:
            return None
        return f"{ROBLOSECURITY_COOKIE}={self._roblosecurity}"

    def current_csrf_token(self) -> str | None:
        return self._csrf_token

    def set_csrf_token(self, token: str) -> None:
        if not token:
            raise ValueError("CSRF token must be a non-empty string")
        with self._lock:
            self._csrf_token = token
        logger.debug("CSRF token refreshed")

    def __repr__(self) -> str:
        proxy = urlsplit(self._proxy).hostname if self._proxy else None
        return (
            f"SessionState(credential={'set' if self.has_credential else 'unset'}, "
            f"csrf_token={'cached' if self._csrf_token else 'none'}, proxy={proxy!r})"
        )
