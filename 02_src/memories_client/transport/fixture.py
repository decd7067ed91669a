"""In-process fixture transport returning canned backend responses."""

import itertools
from dataclasses import dataclass
from typing import Any, Callable, Mapping
from urllib.parse import urlsplit

from ..logging_config import get_logger
from .base import TransportResponse, status_failure

logger = get_logger(__name__)

FIXTURE_STORAGE_URL = "https://storage.fixture.invalid/upload"


@dataclass(frozen=True)
class FixtureResponse:
    """Explicit status/body pair a route may return instead of a bare body."""

    status: int = 200
    body: Any = None
    reason: str = "OK"


FixtureHandler = Callable[[dict], Any]


def default_routes() -> dict[str, FixtureHandler]:
    """Canned responses for the endpoints a demo session touches."""
    counter = itertools.count(1)

    def request_upload_url(body: dict) -> dict:
        object_key = f"fixture-object-{next(counter)}-{body.get('imageName', 'file')}"
        return {
            "uploadUrl": f"{FIXTURE_STORAGE_URL}/{object_key}",
            "bucket": "fixture-bucket",
            "object": object_key,
        }

    def confirm_upload(body: dict) -> dict:
        return {
            "image": f"fixture-image-{next(counter)}",
            "url": f"https://picsum.photos/seed/{body.get('object')}/400/300",
        }

    return {
        "/UserAuthentication/authenticate": lambda b: {"user": f"fixture-user-{b.get('username')}"},
        "/UserAuthentication/register": lambda b: {"user": f"fixture-user-{b.get('username')}"},
        "/ImageStorage/requestUploadUrl": request_upload_url,
        "/ImageStorage/confirmUpload": confirm_upload,
        "/Groups/createGroup": lambda b: {"group": f"fixture-group-{next(counter)}"},
        "/Groups/_listGroupsForUser": lambda b: [{"groups": []}],
        "/Groups/_getGroupDetails": lambda b: [
            {"groupName": "Fixture Group", "members": [], "invitedMembers": []}
        ],
        "/MemoryEntries/createMemory": lambda b: {"memory": f"fixture-memory-{next(counter)}"},
    }


class FixtureTransport:
    """Answers RPCs from a route table and accepts every PUT.

    Unknown endpoints answer with an empty object, as an Action would.
    Every exchange is appended to `calls` as (method, url, body).
    """

    def __init__(
        self,
        base_url: str,
        routes: Mapping[str, FixtureHandler] | None = None,
        put_status: int = 200,
        put_reason: str = "OK",
    ):
        self._base_path = urlsplit(base_url).path.rstrip("/")
        self._routes: dict[str, FixtureHandler] = dict(default_routes() if routes is None else routes)
        self._put_status = put_status
        self._put_reason = put_reason
        self.calls: list[tuple[str, str, Any]] = []

    def route(self, endpoint: str, handler: FixtureHandler) -> None:
        """Register or replace the handler for an endpoint."""
        self._routes[endpoint] = handler

    def _endpoint_for(self, url: str) -> str:
        path = urlsplit(url).path
        if self._base_path and path.startswith(self._base_path):
            path = path[len(self._base_path):]
        return path

    async def post_json(self, url: str, payload: Mapping[str, Any]) -> TransportResponse:
        body = dict(payload)
        self.calls.append(("POST", url, body))
        endpoint = self._endpoint_for(url)
        logger.debug("Fixture RPC %s", endpoint, extra={"context": {"payload": body}})

        handler = self._routes.get(endpoint)
        answer = handler(body) if handler is not None else {}
        if isinstance(answer, FixtureResponse):
            response = TransportResponse(answer.status, answer.reason, answer.body, url)
        else:
            response = TransportResponse(200, "OK", answer, url)

        if not response.ok:
            raise status_failure(response)
        return response

    async def put_bytes(self, url: str, data: bytes) -> TransportResponse:
        self.calls.append(("PUT", url, len(data)))
        return TransportResponse(self._put_status, self._put_reason, None, url)

    async def aclose(self) -> None:
        return
