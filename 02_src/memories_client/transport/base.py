"""Transport strategy interface shared by the real and fixture transports."""

from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from ..errors import TransportError


@dataclass(frozen=True)
class TransportResponse:
    """A completed HTTP exchange."""

    status: int
    reason: str
    body: Any  # decoded JSON, raw text, or None when empty
    url: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class ITransport(Protocol):
    """Sends bytes over the wire. Chosen once, at construction time."""

    async def post_json(self, url: str, payload: Mapping[str, Any]) -> TransportResponse:
        """POST a JSON body. Raises TransportError on connection failure or non-2xx."""
        ...

    async def put_bytes(self, url: str, data: bytes) -> TransportResponse:
        """PUT raw bytes without a Content-Type header. Raises only on connection failure."""
        ...

    async def aclose(self) -> None:
        """Release network resources."""
        ...


def status_failure(response: TransportResponse) -> TransportError:
    """Error for a POST that completed with a non-2xx status."""
    return TransportError(
        f"Request failed with status code {response.status}",
        status=response.status,
        body=response.body,
        url=response.url,
    )
