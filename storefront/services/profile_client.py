"""User profile client, used to prefill the shipping form"""

from typing import Optional, Union

from ..models.result import Failure, Result
from .api_client import ApiClient

USER_HEADER = "X-User-Id"


class ProfileClient(ApiClient):
    """Client for the user-profile endpoint"""

    async def get_profile(self, user_id: Optional[Union[int, str]]) -> Result:
        """Get one user's profile; the user travels with each request"""
        if user_id is None or user_id == "":
            return Failure(error="Not logged in")

        return await self._call(
            "GET",
            "/user-profile",
            headers={USER_HEADER: str(user_id)},
            default_error="Failed to fetch user profile",
        )
