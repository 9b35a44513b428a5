"""
Roblox SDK - Async-first SDK for the Roblox web API.

This SDK provides:
- Async client with an authenticated request engine
- Transparent x-csrf-token challenge handling
- Outbound proxy support
- Typed error taxonomy
- Cursor pagination helpers
- Synchronous wrapper for sync operations
- Multiple HTTP transport support
- Middleware support
"""

from .classifier import ClassifiedResponse
from .classifier import Outcome
from .classifier import classify
from .client import RobloxClient
from .client_sync import RobloxClientSync
from .config import RobloxAPISettings
from .exceptions import AuthRequired
from .exceptions import ConfigError
from .exceptions import DecodeError
from .exceptions import PlatformError
from .exceptions import PurchaseFailureReason
from .exceptions import PurchaseLimitedError
from .exceptions import RateLimited
from .exceptions import RobloxAPIError
from .exceptions import TransportError
from .executor import RequestDescriptor
from .middleware import Middleware
from .pagination import Limit
from .pagination import Page
from .session import SessionState

__version__ = "1.0.0"

__all__ = [
    "RobloxClient",
    "RobloxClientSync",
    "RobloxAPISettings",
    "RequestDescriptor",
    "ClassifiedResponse",
    "Outcome",
    "classify",
    "SessionState",
    "Limit",
    "Page",
    "Middleware",
    "RobloxAPIError",
    "ConfigError",
    "TransportError",
    "AuthRequired",
    "RateLimited",
    "PlatformError",
    "PurchaseLimitedError",
    "PurchaseFailureReason",
    "DecodeError",
]
