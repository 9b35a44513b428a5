"""
Endpoint families of the Roblox SDK.

Each family is a mixin of RobloxClient. Endpoint methods only build a
RequestDescriptor, hand it to the client's request engine and decode the
success payload; authentication, CSRF handling, proxying and error
classification all happen in the engine.
"""

from typing import TYPE_CHECKING

from roblox_sdk.exceptions import AuthRequired

if TYPE_CHECKING:
    from roblox_sdk.classifier import ClassifiedResponse
    from roblox_sdk.executor import RequestDescriptor
    from roblox_sdk.pagination import Limit
    from roblox_sdk.pagination import Page
    from roblox_sdk.session import SessionState


class EndpointMixin:
    """Attributes and methods the endpoint families expect from RobloxClient."""

    session: "SessionState"

    async def request(self, descriptor: "RequestDescriptor") -> "ClassifiedResponse":
        raise NotImplementedError

    async def next_page(
        self,
        descriptor: "RequestDescriptor",
        cursor: str | None = None,
        limit: "Limit | int" = 10,
    ) -> "Page":
        raise NotImplementedError

    def _require_credential(self) -> None:
        """Fail before any I/O when the endpoint needs a session cookie."""
        if not self.session.has_credential:
            raise AuthRequired(".ROBLOSECURITY is not set on this client")
