"""
Request executor: one HTTP attempt, classified.

The executor attaches the session cookie and (for CSRF-protected endpoints)
the cached x-csrf-token, runs the middleware chain, sends the request through
the client's transport and classifies the result. It never mutates the
session state and never retries; both belong to the callers above it.
"""

import json as jsonlib
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from roblox_sdk.classifier import CSRF_HEADER
from roblox_sdk.classifier import ClassifiedResponse
from roblox_sdk.classifier import classify
from roblox_sdk.classifier import classify_transport_failure
from roblox_sdk.config import DEFAULT_USER_AGENT
from roblox_sdk.exceptions import TransportError
from roblox_sdk.middleware import Middleware
from roblox_sdk.session import SessionState
from roblox_sdk.transport.base import BaseTransport

logger = logging.getLogger("roblox_sdk.executor")

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Everything needed to (re)issue one logical request.

    The body is kept as already-serialized bytes so the CSRF retry resends
    exactly what the first attempt sent.

    Attributes:
        method (str): HTTP method.
        url (str): Absolute target URL.
        content (bytes | None): Serialized request body.
        content_type (str | None): Content-Type of ``content``.
        params (Mapping[str, Any] | None): Query parameters.
        requires_csrf (bool): Attach the CSRF token and allow the CSRF retry.
        timeout (float | None): Per-request timeout in seconds; None defers
            to the client setting.
    """

    method: str
    url: str
    content: bytes | None = None
    content_type: str | None = None
    params: Mapping[str, Any] | None = None
    requires_csrf: bool = False
    timeout: float | None = None

    @classmethod
    def from_json(
        cls,
        method: str,
        url: str,
        payload: Any,
        *,
        requires_csrf: bool = False,
        params: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> "RequestDescriptor":
        """Build a descriptor whose body is ``payload`` serialized as JSON."""
        return cls(
            method=method,
            url=url,
            content=jsonlib.dumps(payload, separators=(",", ":")).encode("utf-8"),
            content_type=JSON_CONTENT_TYPE,
            params=params,
            requires_csrf=requires_csrf,
            timeout=timeout,
        )


class RequestExecutor:
    """
    Performs single attempts for a client.

    Args:
        session (SessionState): Credential and CSRF token source (read only).
        transport (BaseTransport): HTTP backend, already bound to the proxy.
        middlewares (list[Middleware] | None): Hooks run around every attempt.
        user_agent (str): User-Agent header value.
    """

    def __init__(
        self,
        session: SessionState,
        transport: BaseTransport,
        middlewares: list[Middleware] | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.session = session
        self.transport = transport
        self.middlewares = middlewares or []
        self.user_agent = user_agent

    def build_headers(self, descriptor: RequestDescriptor) -> dict[str, str]:
        headers = {"User-Agent": self.user_agent, "Accept": JSON_CONTENT_TYPE}
        cookie = self.session.cookie_header()
        if cookie:
            headers["Cookie"] = cookie
        if descriptor.content_type:
            headers["Content-Type"] = descriptor.content_type
        if descriptor.requires_csrf:
            token = self.session.current_csrf_token()
            if token:
                headers[CSRF_HEADER] = token
        return headers

    async def execute(self, descriptor: RequestDescriptor) -> ClassifiedResponse:
        """
        Send ``descriptor`` once and classify the result.

        Transport failures are returned as TRANSPORT_ERROR outcomes rather
        than raised, so every result reaches the caller the same way.
        """
        headers = self.build_headers(descriptor)
        params = dict(descriptor.params) if descriptor.params else None

        # === MIDDLEWARE: before request ===
        for mw in self.middlewares:
            await mw.on_request(
                method=descriptor.method,
                url=descriptor.url,
                headers=headers,
                params=params,
                content=descriptor.content,
            )

        logger.debug(
            "%s %s (cookie=%s, csrf=%s)",
            descriptor.method,
            descriptor.url,
            "Cookie" in headers,
            CSRF_HEADER in headers,
        )
        try:
            response = await self.transport.request(
                method=descriptor.method,
                url=descriptor.url,
                headers=headers,
                params=params,
                content=descriptor.content,
                timeout=descriptor.timeout,
            )
        except TransportError as err:
            logger.warning("%s %s transport failure: %s", descriptor.method, descriptor.url, err)
            return classify_transport_failure(err)

        # === MIDDLEWARE: after response ===
        for mw in self.middlewares:
            await mw.on_response(response)

        result = classify(response.status_code, response.headers, response.content)
        logger.debug(
            "%s %s -> %s %s",
            descriptor.method,
            descriptor.url,
            response.status_code,
            result.outcome.value,
        )
        return result
