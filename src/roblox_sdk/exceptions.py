"""
Custom exceptions for the Roblox SDK.
Provides meaningful error classes for client consumers.

Every failure surfaced by the SDK is a subclass of RobloxAPIError, so callers
can catch the whole family at once or react to a single member:

- ConfigError: bad construction input, raised before any I/O
- TransportError: network/TLS level failure, never retried by the engine
- AuthRequired: no usable session or CSRF token
- RateLimited: service-imposed throttling
- PlatformError: the service rejected the request for domain reasons
- DecodeError: a payload did not match the expected shape
"""

from enum import Enum
from typing import Any, Optional


class RobloxAPIError(Exception):
    """
    Base exception for all SDK-level API failures.

    Args:
        message (str): Short explanation of the error.
        details (Any | None): Optional structured details (e.g., platform error body).
    """

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigError(RobloxAPIError):
    """Invalid client configuration (proxy URL, page limit, ...)."""


class TransportError(RobloxAPIError):
    """
    The request never produced an HTTP status (DNS, connect, TLS, timeout).

    Args:
        message (str): Short explanation of the error.
        cause (BaseException | None): The underlying library exception.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, details={"cause": repr(cause)} if cause else None)
        self.cause = cause


class AuthRequired(RobloxAPIError):
    """No valid session credential, or no usable CSRF token after one retry."""


class RateLimited(RobloxAPIError):
    """
    The platform throttled the request (HTTP 429).

    Args:
        message (str): Short explanation of the error.
        retry_after (float | None): Seconds to wait, when the service said so.
    """

    def __init__(self, message: str, retry_after: Optional[float] = None):
        super().__init__(message, details={"retry_after": retry_after})
        self.retry_after = retry_after


class PlatformError(RobloxAPIError):
    """
    The platform rejected the request for domain reasons.

    Args:
        status_code (int): HTTP status of the rejection.
        message (str): Platform message, or a raw body snippet.
        code (int | None): Platform error code when the body was structured.
    """

    def __init__(self, status_code: int, message: str, code: Optional[int] = None):
        super().__init__(
            f"{status_code}: {message}",
            details={"status_code": status_code, "code": code, "message": message},
        )
        self.status_code = status_code
        self.code = code
        self.platform_message = message


class PurchaseFailureReason(str, Enum):
    """Reasons the economy API gives for a failed limited purchase."""

    PENDING_TRANSACTION = "pending_transaction"
    ITEM_NOT_FOR_SALE = "item_not_for_sale"
    NOT_ENOUGH_ROBUX = "not_enough_robux"
    PRICE_CHANGED = "price_changed"
    CANNOT_BUY_OWN_ITEM = "cannot_buy_own_item"
    UNKNOWN = "unknown"


class PurchaseLimitedError(PlatformError):
    """
    A purchase request was accepted (HTTP 200) but the platform refused it.

    Pending transaction, price changed and unknown reasons are worth retrying;
    the others are final.
    """

    def __init__(self, reason: PurchaseFailureReason, message: str, status_code: int = 200):
        super().__init__(status_code, message)
        self.reason = reason


class DecodeError(RobloxAPIError):
    """A success payload did not match the expected shape."""
