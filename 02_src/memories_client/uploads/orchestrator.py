"""Three-phase image upload: delegated URL, direct PUT, confirmation."""

import asyncio
import mimetypes
from pathlib import Path
from typing import Any, Protocol

from ..errors import BackendError, ErrorSource, NetworkError, TransportError, UNKNOWN_ERROR, UploadError
from ..event_bus import IEventBus
from ..logging_config import get_logger
from ..models import ID, Topic, UploadedImage, UploadPhase, UploadSession
from ..services import ImageService
from ..transport import ITransport

logger = get_logger(__name__)


class IUploadOrchestrator(Protocol):
    """Uploads one file and returns its durable reference."""

    async def upload(
        self,
        owner_user: ID,
        file_name: str,
        data: bytes,
        *,
        content_type: str | None = None,
        memory: ID | None = None,
        expires_in_seconds: int | None = None,
    ) -> UploadedImage:
        """Run requestUploadUrl -> PUT -> confirmUpload. No retries, no rollback."""
        ...


def _require(result: Any, field: str, endpoint: str) -> Any:
    value = result.get(field) if isinstance(result, dict) else None
    if value is None:
        raise BackendError(f"{endpoint} response missing '{field}'")
    return value


class UploadOrchestrator:
    """Drives the upload state machine, one UploadSession per call.

    Phases run strictly in order and the first error is propagated as-is.
    If confirmation fails after a successful PUT the stored object is left
    orphaned; this layer does not try to delete it.
    """

    def __init__(
        self,
        images: ImageService,
        transport: ITransport,
        event_bus: IEventBus | None = None,
        sign_content_type: bool = False,
    ):
        self._images = images
        self._transport = transport
        self._event_bus = event_bus
        # Sending contentType in phase 1 triggers a CORS preflight on some stores
        self._sign_content_type = sign_content_type

    async def upload(
        self,
        owner_user: ID,
        file_name: str,
        data: bytes,
        *,
        content_type: str | None = None,
        memory: ID | None = None,
        expires_in_seconds: int | None = None,
    ) -> UploadedImage:
        """Run requestUploadUrl -> PUT -> confirmUpload. No retries, no rollback."""
        session = UploadSession(
            owner_user=owner_user,
            file_name=file_name,
            content_type=content_type,
            size_bytes=len(data),
            associated_memory=memory,
        )

        try:
            await self._request_url(session, expires_in_seconds)
            await self._transfer(session, data)
            image = await self._confirm(session)
        except Exception as e:
            self._transition(session, UploadPhase.FAILED, error=str(e))
            raise

        self._transition(session, UploadPhase.COMPLETE, image=image.image_id)
        return image

    async def upload_path(
        self,
        owner_user: ID,
        path: str | Path,
        *,
        content_type: str | None = None,
        memory: ID | None = None,
        expires_in_seconds: int | None = None,
    ) -> UploadedImage:
        """Upload a local file; content type is guessed from its name if not given."""
        file_path = Path(path)
        data = await asyncio.to_thread(file_path.read_bytes)
        if content_type is None:
            content_type, _ = mimetypes.guess_type(file_path.name)
        return await self.upload(
            owner_user,
            file_path.name,
            data,
            content_type=content_type,
            memory=memory,
            expires_in_seconds=expires_in_seconds,
        )

    async def _request_url(self, session: UploadSession, expires_in_seconds: int | None) -> None:
        self._transition(session, UploadPhase.REQUESTING_URL)
        result = await self._images.request_upload_url(
            session.owner_user,
            session.file_name,
            memory=session.associated_memory,
            content_type=session.content_type if self._sign_content_type else None,
            expires_in_seconds=expires_in_seconds,
        )
        endpoint = self._images.endpoint("requestUploadUrl")
        session.delegated_url = _require(result, "uploadUrl", endpoint)
        session.object_key = _require(result, "object", endpoint)
        session.bucket = result.get("bucket")

    async def _transfer(self, session: UploadSession, data: bytes) -> None:
        self._transition(session, UploadPhase.TRANSFERRING)
        try:
            response = await self._transport.put_bytes(session.delegated_url, data)
        except TransportError as e:
            raise NetworkError(
                e.message or UNKNOWN_ERROR,
                status=e.status,
                source=ErrorSource.TRANSFER,
                url=session.delegated_url,
            ) from e

        if not response.ok:
            raise UploadError(response.status, response.reason, url=session.delegated_url)

    async def _confirm(self, session: UploadSession) -> UploadedImage:
        self._transition(session, UploadPhase.CONFIRMING)
        # contentType always goes here so the durable record is accurate
        result = await self._images.confirm_upload(
            session.owner_user,
            session.object_key,
            content_type=session.content_type,
            size=session.size_bytes,
            memory=session.associated_memory,
        )
        endpoint = self._images.endpoint("confirmUpload")
        return UploadedImage(
            image_id=_require(result, "image", endpoint),
            permanent_url=_require(result, "url", endpoint),
            object_key=session.object_key,
        )

    def _transition(self, session: UploadSession, phase: UploadPhase, **details: Any) -> None:
        previous = session.phase
        session.phase = phase
        context = {
            "from": previous.value,
            "to": phase.value,
            "file_name": session.file_name,
            "object_key": session.object_key,
            **details,
        }
        if phase is UploadPhase.FAILED:
            if previous is UploadPhase.CONFIRMING:
                logger.warning(
                    "Upload confirmation failed; object %s is orphaned in bucket %s",
                    session.object_key,
                    session.bucket,
                    extra={"context": context},
                )
            else:
                logger.error("Upload failed during %s", previous.value, extra={"context": context})
        else:
            logger.info("Upload %s -> %s", previous.value, phase.value, extra={"context": context})

        if self._event_bus is not None:
            self._event_bus.publish(Topic.UPLOAD_PHASE, payload=context, source="upload_orchestrator")
