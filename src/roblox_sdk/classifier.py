"""
Response classification for the request engine.

Turns a raw (status, headers, body) triple, or a transport failure, into a
ClassifiedResponse. The mapping is total: every input lands in exactly one
Outcome, and the same input always yields the same Outcome.

Roblox error bodies look like ``{"errors": [{"code": 0, "message": "..."}]}``;
only the first error is considered. A 403 whose first error code is 0 (or whose
body cannot be parsed) is the CSRF challenge.
"""

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from datetime import timezone
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Any

import httpx

from roblox_sdk.exceptions import AuthRequired
from roblox_sdk.exceptions import DecodeError
from roblox_sdk.exceptions import PlatformError
from roblox_sdk.exceptions import RateLimited
from roblox_sdk.exceptions import TransportError

CSRF_HEADER = "x-csrf-token"
CSRF_ERROR_CODE = 0
BODY_SNIPPET_LENGTH = 256


class Outcome(str, Enum):
    SUCCESS = "success"
    AUTH_REQUIRED = "auth_required"
    CSRF_REJECTED = "csrf_rejected"
    RATE_LIMITED = "rate_limited"
    PLATFORM_ERROR = "platform_error"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class ClassifiedResponse:
    """
    Normalized outcome of one HTTP attempt.

    Only the fields relevant to ``outcome`` are populated: ``body`` for
    SUCCESS, ``csrf_token`` for CSRF_REJECTED, ``retry_after`` for
    RATE_LIMITED, ``code``/``message`` for PLATFORM_ERROR and AUTH_REQUIRED,
    ``cause`` for TRANSPORT_ERROR.
    """

    outcome: Outcome
    status_code: int | None = None
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: bytes = b""
    csrf_token: str | None = None
    retry_after: float | None = None
    code: int | None = None
    message: str | None = None
    cause: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    def json(self) -> Any:
        """Parse the success body as JSON, raising DecodeError on garbage."""
        try:
            return json.loads(self.body)
        except ValueError as err:
            raise DecodeError(
                f"Response body is not valid JSON: {err}",
                details=_snippet(self.body),
            ) from err

    def raise_for_error(self) -> "ClassifiedResponse":
        """
        Raise the exception matching a non-success outcome.

        Returns:
            ClassifiedResponse: ``self`` when the outcome is SUCCESS.

        Raises:
            AuthRequired: AUTH_REQUIRED, or a CSRF_REJECTED that reached the caller.
            RateLimited: RATE_LIMITED, with the retry hint.
            PlatformError: PLATFORM_ERROR, with status, code and message.
            TransportError: TRANSPORT_ERROR, chained to the original cause.
        """
        if self.outcome is Outcome.SUCCESS:
            return self
        if self.outcome is Outcome.AUTH_REQUIRED:
            raise AuthRequired(self.message or "Authentication required")
        if self.outcome is Outcome.CSRF_REJECTED:
            raise AuthRequired("CSRF token rejected")
        if self.outcome is Outcome.RATE_LIMITED:
            raise RateLimited("Too many requests", retry_after=self.retry_after)
        if self.outcome is Outcome.PLATFORM_ERROR:
            raise PlatformError(self.status_code or 0, self.message or "", code=self.code)
        if isinstance(self.cause, TransportError):
            raise self.cause
        raise TransportError(self.message or "Transport failure", cause=self.cause) from self.cause


def _snippet(body: bytes) -> str:
    return body[:BODY_SNIPPET_LENGTH].decode("utf-8", errors="replace")


def _first_platform_error(body: bytes) -> tuple[int, str] | None:
    """
    Extract (code, message) of the first entry of a Roblox error body.

    Returns None when the body is not a structured error or lists no errors.
    """
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    errors = payload.get("errors")
    if not isinstance(errors, list) or not errors or not isinstance(errors[0], dict):
        return None
    code = errors[0].get("code")
    if isinstance(code, bool) or not isinstance(code, int):
        return None
    return code, str(errors[0].get("message", ""))


def parse_retry_after(value: str | None) -> float | None:
    """
    Parse a Retry-After header given as delta-seconds or an HTTP-date.

    Returns None when the header is absent, unparseable or not a finite number.
    """
    if value is None:
        return None
    value = value.strip()
    try:
        seconds = float(value)
    except ValueError:
        try:
            when = parsedate_to_datetime(value)
        except (TypeError, ValueError):
            return None
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        seconds = (when - datetime.now(timezone.utc)).total_seconds()
    if not math.isfinite(seconds):
        return None
    return max(seconds, 0.0)


def classify(status: int, headers: Mapping[str, str] | None, body: bytes) -> ClassifiedResponse:
    """
    Map an HTTP response onto exactly one Outcome.

    Args:
        status (int): HTTP status code.
        headers (Mapping[str, str] | None): Response headers (any casing).
        body (bytes): Fully read response body.

    Returns:
        ClassifiedResponse: The classified outcome.
    """
    headers = httpx.Headers(list(headers.items()) if headers else None)

    if 200 <= status < 300:
        return ClassifiedResponse(Outcome.SUCCESS, status, headers, body)

    if status == 401:
        return ClassifiedResponse(
            Outcome.AUTH_REQUIRED, status, headers, message="Invalid or expired .ROBLOSECURITY"
        )

    if status == 403:
        error = _first_platform_error(body)
        if error is not None and error[0] != CSRF_ERROR_CODE:
            return ClassifiedResponse(
                Outcome.PLATFORM_ERROR, status, headers, code=error[0], message=error[1]
            )
        token = headers.get(CSRF_HEADER)
        if token:
            return ClassifiedResponse(Outcome.CSRF_REJECTED, status, headers, csrf_token=token)
        return ClassifiedResponse(
            Outcome.AUTH_REQUIRED, status, headers, message="CSRF challenge without a token"
        )

    if status == 429:
        return ClassifiedResponse(
            Outcome.RATE_LIMITED,
            status,
            headers,
            retry_after=parse_retry_after(headers.get("retry-after")),
        )

    error = _first_platform_error(body)
    if error is not None:
        return ClassifiedResponse(
            Outcome.PLATFORM_ERROR, status, headers, code=error[0], message=error[1]
        )
    return ClassifiedResponse(Outcome.PLATFORM_ERROR, status, headers, message=_snippet(body))


def classify_transport_failure(err: BaseException) -> ClassifiedResponse:
    """Wrap a failure that happened before any status was received."""
    return ClassifiedResponse(Outcome.TRANSPORT_ERROR, message=str(err), cause=err)
