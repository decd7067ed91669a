"""MemoryEntries façade."""

from ..models import ID, RpcResult
from .base import Service


class MemoryService(Service):
    service_name = "MemoryEntries"

    async def create(self, creator: ID, group: ID, title: str) -> RpcResult:
        """-> {memory}"""
        return await self._gateway.invoke(
            self.endpoint("createMemory"), {"creator": creator, "group": group, "title": title}
        )

    async def list_for_group(self, group_id: ID) -> RpcResult:
        """-> [{memories}]"""
        return await self._gateway.invoke(self.endpoint("_listMemoriesForGroup"), {"groupID": group_id})

    async def get(self, memory_id: ID) -> RpcResult:
        """-> [{memory}]"""
        return await self._gateway.invoke(self.endpoint("_getMemory"), {"memoryID": memory_id})

    async def add_contribution(
        self, memory: ID, user: ID, description: str, image_urls: list[str]
    ) -> RpcResult:
        return await self._gateway.invoke(
            self.endpoint("addContribution"),
            {"memory": memory, "user": user, "description": description, "imageUrls": image_urls},
        )

    async def edit_contribution(
        self, memory: ID, contribution_index: int, user: ID, new_description: str
    ) -> RpcResult:
        return await self._gateway.invoke(
            self.endpoint("editContribution"),
            {
                "memory": memory,
                "contributionIndex": contribution_index,
                "user": user,
                "newDescription": new_description,
            },
        )

    async def edit_title(self, memory: ID, user: ID, new_title: str) -> RpcResult:
        return await self._gateway.invoke(
            self.endpoint("editTitle"), {"memory": memory, "user": user, "newTitle": new_title}
        )

    async def delete_memory(self, memory: ID, creator: ID) -> RpcResult:
        return await self._gateway.invoke(self.endpoint("deleteMemory"), {"memory": memory, "creator": creator})
