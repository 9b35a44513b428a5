import logging

from roblox_sdk.endpoints import EndpointMixin
from roblox_sdk.executor import RequestDescriptor
from roblox_sdk.models import UserInformation
from roblox_sdk.models import decode_model

logger = logging.getLogger("roblox_sdk.endpoints.users")

USER_DETAILS_API = "https://users.roblox.com/v1/users/authenticated"


class UsersMixin(EndpointMixin):
    _user_information: UserInformation | None = None

    async def user_information(self) -> UserInformation:
        """
        Grab the account behind the session cookie.

        The result is cached on the client; the account of a session never
        changes.

        Raises:
            AuthRequired: If no .ROBLOSECURITY is set or it is invalid.
        """
        if self._user_information is not None:
            return self._user_information

        self._require_credential()
        response = await self.request(RequestDescriptor("GET", USER_DETAILS_API))
        self._user_information = decode_model(UserInformation, response.json())
        logger.debug("Authenticated as user %s", self._user_information.user_id)
        return self._user_information

    async def user_id(self) -> int:
        return (await self.user_information()).user_id

    async def username(self) -> str:
        return (await self.user_information()).username

    async def display_name(self) -> str:
        return (await self.user_information()).display_name
