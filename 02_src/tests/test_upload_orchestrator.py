"""Tests for UploadOrchestrator."""

from unittest.mock import AsyncMock

import pytest

from memories_client.errors import BackendError, ErrorSource, NetworkError, TransportError, UploadError
from memories_client.models import Topic, UploadedImage
from memories_client.gateway import RpcGateway
from memories_client.services import ImageService
from memories_client.transport import FixtureResponse, FixtureTransport
from memories_client.uploads import UploadOrchestrator

BASE_URL = "http://h/api"
REQUEST_URL = "/ImageStorage/requestUploadUrl"
CONFIRM = "/ImageStorage/confirmUpload"


def upload_routes() -> dict:
    """Phase 1 and phase 3 answers used by most tests."""
    return {
        REQUEST_URL: lambda body: {"uploadUrl": "https://store/x", "bucket": "b", "object": "o1"},
        CONFIRM: lambda body: {"image": "img1", "url": "https://cdn/img1"},
    }


@pytest.fixture
def storage_routes(fixture_transport):
    """Fixture transport answering both upload RPCs."""
    for endpoint, handler in upload_routes().items():
        fixture_transport.route(endpoint, handler)
    return fixture_transport


def posted(transport, endpoint: str) -> list[dict]:
    return [body for method, url, body in transport.calls if method == "POST" and url.endswith(endpoint)]


class TestUploadSuccess:
    """Tests for the happy path."""

    @pytest.mark.asyncio
    async def test_upload_returns_durable_reference(self, orchestrator, storage_routes):
        """All three phases succeed: image id, url and object key come back."""
        image = await orchestrator.upload("u1", "photo.png", b"\x89PNG", content_type="image/png")

        assert image == UploadedImage(image_id="img1", permanent_url="https://cdn/img1", object_key="o1")

    @pytest.mark.asyncio
    async def test_phases_run_in_order(self, orchestrator, storage_routes):
        """POST, PUT, POST in strict sequence."""
        await orchestrator.upload("u1", "photo.png", b"data")

        assert [(m, u) for m, u, _ in storage_routes.calls] == [
            ("POST", "http://h/api/ImageStorage/requestUploadUrl"),
            ("PUT", "https://store/x"),
            ("POST", "http://h/api/ImageStorage/confirmUpload"),
        ]

    @pytest.mark.asyncio
    async def test_content_type_only_at_confirmation(self, orchestrator, storage_routes):
        """contentType is left out of phase 1 and sent in phase 3."""
        await orchestrator.upload(
            "u1", "photo.png", b"12345", content_type="image/png", memory="m1", expires_in_seconds=600
        )

        assert posted(storage_routes, REQUEST_URL) == [
            {"user": "u1", "imageName": "photo.png", "memory": "m1", "expiresInSeconds": 600}
        ]
        assert posted(storage_routes, CONFIRM) == [
            {"user": "u1", "object": "o1", "contentType": "image/png", "size": 5, "memory": "m1"}
        ]

    @pytest.mark.asyncio
    async def test_sign_content_type(self, fixture_gateway, storage_routes):
        """sign_content_type sends contentType in phase 1 too."""
        orchestrator = UploadOrchestrator(
            ImageService(fixture_gateway), storage_routes, sign_content_type=True
        )

        await orchestrator.upload("u1", "photo.png", b"1", content_type="image/png")

        assert posted(storage_routes, REQUEST_URL)[0]["contentType"] == "image/png"
        assert posted(storage_routes, CONFIRM)[0]["contentType"] == "image/png"

    @pytest.mark.asyncio
    async def test_phase_notifications(self, orchestrator, storage_routes, event_bus):
        """Every transition is published on the upload_phase topic."""
        phases = []
        event_bus.subscribe(Topic.UPLOAD_PHASE, lambda msg: phases.append(msg.payload["to"]))

        await orchestrator.upload("u1", "photo.png", b"1")

        assert phases == ["requesting_url", "transferring", "confirming", "complete"]

    @pytest.mark.asyncio
    async def test_upload_path(self, orchestrator, storage_routes, tmp_path):
        """A local file is read and its content type guessed from the name."""
        path = tmp_path / "beach.jpg"
        path.write_bytes(b"jpeg-bytes")

        image = await orchestrator.upload_path("u1", path)

        assert image.object_key == "o1"
        assert posted(storage_routes, REQUEST_URL)[0]["imageName"] == "beach.jpg"
        confirm = posted(storage_routes, CONFIRM)[0]
        assert confirm["contentType"] == "image/jpeg"
        assert confirm["size"] == len(b"jpeg-bytes")


class TestUploadTransferFailure:
    """Tests for phase 2 failures."""

    @pytest.mark.asyncio
    async def test_put_403_skips_confirmation(self, trace):
        """A rejected PUT raises UploadError and confirmUpload is never called."""
        transport = FixtureTransport(
            BASE_URL, routes=upload_routes(), put_status=403, put_reason="Forbidden"
        )
        gateway = RpcGateway(transport, trace, base_url=BASE_URL)
        orchestrator = UploadOrchestrator(ImageService(gateway), transport)

        with pytest.raises(UploadError) as exc_info:
            await orchestrator.upload("u1", "photo.png", b"data")

        assert exc_info.value.status == 403
        assert exc_info.value.status_text == "Forbidden"
        assert exc_info.value.source == ErrorSource.TRANSFER
        assert "403" in exc_info.value.message
        assert [m for m, _, _ in transport.calls] == ["POST", "PUT"]
        assert posted(transport, CONFIRM) == []

    @pytest.mark.asyncio
    async def test_put_connection_failure(self, orchestrator, storage_routes):
        """A dropped connection during PUT is a NetworkError from the transfer leg."""
        storage_routes.put_bytes = AsyncMock(side_effect=TransportError("Connection reset"))

        with pytest.raises(NetworkError) as exc_info:
            await orchestrator.upload("u1", "photo.png", b"data")

        assert exc_info.value.message == "Connection reset"
        assert exc_info.value.source == ErrorSource.TRANSFER
        assert exc_info.value.url == "https://store/x"
        assert posted(storage_routes, CONFIRM) == []


class TestUploadRpcFailure:
    """Tests for phase 1 and phase 3 failures."""

    @pytest.mark.asyncio
    async def test_request_url_error_stops_before_put(self, orchestrator, fixture_transport):
        """Phase 1 failure: no PUT, no confirmation."""
        fixture_transport.route(REQUEST_URL, lambda body: {"error": "Not a member of this memory"})

        with pytest.raises(BackendError, match="Not a member of this memory"):
            await orchestrator.upload("u1", "photo.png", b"data")

        assert [m for m, _, _ in fixture_transport.calls] == ["POST"]

    @pytest.mark.asyncio
    async def test_malformed_request_url_response(self, orchestrator, fixture_transport):
        """Missing uploadUrl is a BackendError and nothing is transferred."""
        fixture_transport.route(REQUEST_URL, lambda body: {"bucket": "b", "object": "o1"})

        with pytest.raises(BackendError, match="uploadUrl"):
            await orchestrator.upload("u1", "photo.png", b"data")

        assert all(m == "POST" for m, _, _ in fixture_transport.calls)

    @pytest.mark.asyncio
    async def test_confirm_failure_leaves_orphan(self, orchestrator, storage_routes, event_bus):
        """Phase 3 failure propagates after the bytes were stored; no cleanup call."""
        storage_routes.route(CONFIRM, lambda body: FixtureResponse(500, {"error": "confirm failed"}))
        phases = []
        event_bus.subscribe(Topic.UPLOAD_PHASE, lambda msg: phases.append(msg.payload["to"]))

        with pytest.raises(BackendError, match="confirm failed"):
            await orchestrator.upload("u1", "photo.png", b"data")

        assert [m for m, _, _ in storage_routes.calls] == ["POST", "PUT", "POST"]
        assert phases[-2:] == ["confirming", "failed"]

    @pytest.mark.asyncio
    async def test_retry_restarts_from_phase_one(self, orchestrator, storage_routes):
        """Calling upload again after a failure requests a fresh URL."""
        answers = iter([{"error": "try later"}, {"image": "img1", "url": "https://cdn/img1"}])
        storage_routes.route(CONFIRM, lambda body: next(answers))

        with pytest.raises(BackendError):
            await orchestrator.upload("u1", "photo.png", b"data")
        image = await orchestrator.upload("u1", "photo.png", b"data")

        assert image.image_id == "img1"
        assert len(posted(storage_routes, REQUEST_URL)) == 2
