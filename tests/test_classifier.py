"""
Tests for the response classifier.

Covers every row of the status mapping, the Roblox error body parsing, the
Retry-After parsing and the mapping from outcomes to exceptions.
"""

import json
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from email.utils import format_datetime

import pytest

from roblox_sdk.classifier import Outcome
from roblox_sdk.classifier import classify
from roblox_sdk.classifier import classify_transport_failure
from roblox_sdk.classifier import parse_retry_after
from roblox_sdk.exceptions import AuthRequired
from roblox_sdk.exceptions import DecodeError
from roblox_sdk.exceptions import PlatformError
from roblox_sdk.exceptions import RateLimited
from roblox_sdk.exceptions import TransportError


def errors_body(code, message="boom"):
    return json.dumps({"errors": [{"code": code, "message": message}]}).encode()


@pytest.mark.parametrize("status", [200, 201, 204, 299])
def test_2xx_is_success_with_body(status):
    result = classify(status, {}, b'{"robux": 100}')

    assert result.outcome is Outcome.SUCCESS
    assert result.ok
    assert result.body == b'{"robux": 100}'
    assert result.json() == {"robux": 100}


def test_403_with_token_header_is_csrf_rejection():
    result = classify(403, {"X-CSRF-TOKEN": "tok1"}, errors_body(0, "Token Validation Failed"))

    assert result.outcome is Outcome.CSRF_REJECTED
    assert result.csrf_token == "tok1"


@pytest.mark.parametrize("body", [b"", b"<html>nope</html>", b'{"errors": []}'])
def test_403_with_token_header_and_unstructured_body_is_csrf_rejection(body):
    result = classify(403, {"x-csrf-token": "tok1"}, body)

    assert result.outcome is Outcome.CSRF_REJECTED
    assert result.csrf_token == "tok1"


@pytest.mark.parametrize("body", [b"", errors_body(0)])
def test_403_without_token_header_is_auth_required(body):
    result = classify(403, {}, body)

    assert result.outcome is Outcome.AUTH_REQUIRED


def test_403_with_domain_error_code_is_platform_error_even_with_token():
    result = classify(403, {"x-csrf-token": "tok1"}, errors_body(7, "Not allowed"))

    assert result.outcome is Outcome.PLATFORM_ERROR
    assert result.status_code == 403
    assert result.code == 7
    assert result.message == "Not allowed"


def test_401_is_auth_required():
    assert classify(401, {}, b"").outcome is Outcome.AUTH_REQUIRED


def test_429_is_rate_limited_with_retry_hint():
    result = classify(429, {"Retry-After": "5"}, b"")

    assert result.outcome is Outcome.RATE_LIMITED
    assert result.retry_after == 5


def test_429_without_retry_after_has_no_hint():
    result = classify(429, {}, errors_body(0, "Too many requests"))

    assert result.outcome is Outcome.RATE_LIMITED
    assert result.retry_after is None


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_structured_error_body_is_parsed(status):
    result = classify(status, {}, errors_body(11, "Item not found"))

    assert result.outcome is Outcome.PLATFORM_ERROR
    assert result.status_code == status
    assert result.code == 11
    assert result.message == "Item not found"


def test_unparseable_error_body_keeps_a_snippet():
    body = b"Internal Server Error " + b"x" * 1000
    result = classify(500, {}, body)

    assert result.outcome is Outcome.PLATFORM_ERROR
    assert result.code is None
    assert result.message.startswith("Internal Server Error")
    assert len(result.message) == 256


def test_non_2xx_without_special_meaning_is_platform_error():
    assert classify(302, {}, b"").outcome is Outcome.PLATFORM_ERROR


@pytest.mark.parametrize(
    "status,headers,body",
    [
        (200, {}, b"{}"),
        (403, {"x-csrf-token": "t"}, b""),
        (403, {}, b""),
        (429, {"Retry-After": "3"}, b""),
        (404, {}, errors_body(3)),
        (500, {}, b"oops"),
    ],
)
def test_classification_is_deterministic(status, headers, body):
    assert classify(status, headers, body) == classify(status, dict(headers), bytes(body))


def test_transport_failure_is_classified():
    cause = TransportError("connect failed")
    result = classify_transport_failure(cause)

    assert result.outcome is Outcome.TRANSPORT_ERROR
    assert result.status_code is None
    assert result.cause is cause


def test_parse_retry_after_accepts_http_dates():
    when = datetime.now(timezone.utc) + timedelta(seconds=120)

    seconds = parse_retry_after(format_datetime(when, usegmt=True))

    assert 100 < seconds <= 120


@pytest.mark.parametrize("value", [None, "soon", "", "nan", "inf", "-inf"])
def test_parse_retry_after_rejects_garbage(value):
    assert parse_retry_after(value) is None


def test_raise_for_error_returns_success():
    result = classify(200, {}, b"{}")
    assert result.raise_for_error() is result


@pytest.mark.parametrize(
    "result,exc_type",
    [
        (classify(401, {}, b""), AuthRequired),
        (classify(403, {"x-csrf-token": "t"}, b""), AuthRequired),
        (classify(429, {"Retry-After": "5"}, b""), RateLimited),
        (classify(404, {}, errors_body(3, "missing")), PlatformError),
        (classify_transport_failure(TransportError("down")), TransportError),
    ],
)
def test_raise_for_error_maps_outcomes_to_exceptions(result, exc_type):
    with pytest.raises(exc_type):
        result.raise_for_error()


def test_rate_limited_error_carries_retry_hint():
    with pytest.raises(RateLimited) as exc_info:
        classify(429, {"Retry-After": "5"}, b"").raise_for_error()

    assert exc_info.value.retry_after == 5


def test_platform_error_carries_service_detail():
    with pytest.raises(PlatformError) as exc_info:
        classify(400, {}, errors_body(2, "Invalid price")).raise_for_error()

    assert exc_info.value.status_code == 400
    assert exc_info.value.code == 2
    assert exc_info.value.platform_message == "Invalid price"


def test_json_on_garbage_body_raises_decode_error():
    with pytest.raises(DecodeError):
        classify(200, {}, b"<html>").json()


@pytest.mark.parametrize("value", ["nan", "inf"])
def test_non_finite_retry_after_gives_no_hint(value):
    result = classify(429, {"Retry-After": value}, b"")

    assert result.outcome is Outcome.RATE_LIMITED
    assert result.retry_after is None
