"""Groups façade."""

from ..models import ID, RpcResult
from .base import Service


class GroupService(Service):
    service_name = "Groups"

    async def create(self, user: ID, name: str) -> RpcResult:
        """-> {group}"""
        return await self._gateway.invoke(self.endpoint("createGroup"), {"user": user, "name": name})

    async def list_for_user(self, user: ID) -> RpcResult:
        """-> [{groups}]"""
        return await self._gateway.invoke(self.endpoint("_listGroupsForUser"), {"user": user})

    async def list_invitations(self, user: ID) -> RpcResult:
        """-> [{invitations}]"""
        return await self._gateway.invoke(self.endpoint("_listInvitationsForUser"), {"user": user})

    async def get_details(self, group_id: ID) -> RpcResult:
        """-> [{groupName, members, invitedMembers}]"""
        return await self._gateway.invoke(self.endpoint("_getGroupDetails"), {"groupID": group_id})

    async def invite(self, user: ID, group: ID, invitee: ID) -> RpcResult:
        return await self._gateway.invoke(
            self.endpoint("inviteMember"), {"user": user, "group": group, "userToInvite": invitee}
        )

    async def accept(self, user: ID, group: ID) -> RpcResult:
        return await self._gateway.invoke(self.endpoint("acceptInvitation"), {"user": user, "group": group})

    async def decline(self, user: ID, group: ID) -> RpcResult:
        return await self._gateway.invoke(self.endpoint("declineInvitation"), {"user": user, "group": group})

    async def leave(self, user: ID, group: ID) -> RpcResult:
        return await self._gateway.invoke(self.endpoint("leaveGroup"), {"user": user, "group": group})

    async def edit_name(self, user: ID, group: ID, new_name: str) -> RpcResult:
        return await self._gateway.invoke(
            self.endpoint("editGroupName"), {"user": user, "group": group, "new_name": new_name}
        )
