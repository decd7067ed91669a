"""UserAuthentication façade."""

from ..models import ID, RpcResult
from .base import Service


class AuthService(Service):
    service_name = "UserAuthentication"

    async def register(self, username: str, password: str) -> RpcResult:
        """-> {user}"""
        return await self._gateway.invoke(
            self.endpoint("register"), {"username": username, "password": password}
        )

    async def login(self, username: str, password: str) -> RpcResult:
        """-> {user}"""
        return await self._gateway.invoke(
            self.endpoint("authenticate"), {"username": username, "password": password}
        )

    async def change_photo(self, user: ID, url: str) -> RpcResult:
        return await self._gateway.invoke(
            self.endpoint("changePhoto"), {"user": user, "new_photo": url}
        )

    async def user_exists(self, user: ID) -> RpcResult:
        """-> [{exists}]"""
        return await self._gateway.invoke(self.endpoint("_userExists"), {"user": user})

    async def get_user_by_username(self, username: str) -> RpcResult:
        """-> [{userId}]"""
        return await self._gateway.invoke(
            self.endpoint("_getUserByUsername"), {"username": username}
        )
