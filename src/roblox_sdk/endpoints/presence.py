from collections.abc import Iterable

from roblox_sdk.endpoints import EndpointMixin
from roblox_sdk.executor import RequestDescriptor
from roblox_sdk.models import PresenceResponse
from roblox_sdk.models import UserPresence
from roblox_sdk.models import decode_model

PRESENCE_API = "https://presence.roblox.com/v1/presence/users"


class PresenceMixin(EndpointMixin):
    async def presence(self, user_ids: Iterable[int]) -> list[UserPresence]:
        """Online status of each user in ``user_ids``."""
        response = await self.request(
            RequestDescriptor.from_json(
                "POST", PRESENCE_API, {"userIds": list(user_ids)}, requires_csrf=True
            )
        )
        return decode_model(PresenceResponse, response.json()).user_presences
