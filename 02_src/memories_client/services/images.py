"""ImageStorage façade: the two backend legs of an upload."""

from ..models import ID, RpcResult
from .base import Service, compact


class ImageService(Service):
    service_name = "ImageStorage"

    async def request_upload_url(
        self,
        user: ID,
        image_name: str,
        memory: ID | None = None,
        content_type: str | None = None,
        expires_in_seconds: int | None = None,
    ) -> RpcResult:
        """-> {uploadUrl, bucket, object}"""
        return await self._gateway.invoke(
            self.endpoint("requestUploadUrl"),
            compact(
                user=user,
                imageName=image_name,
                memory=memory,
                contentType=content_type,
                expiresInSeconds=expires_in_seconds,
            ),
        )

    async def confirm_upload(
        self,
        user: ID,
        object_key: str,
        content_type: str | None = None,
        size: int | None = None,
        memory: ID | None = None,
    ) -> RpcResult:
        """-> {image, url}"""
        return await self._gateway.invoke(
            self.endpoint("confirmUpload"),
            compact(user=user, object=object_key, contentType=content_type, size=size, memory=memory),
        )
