"""HTTP transport backed by httpx."""

from typing import Any, Mapping

import httpx

from ..config import DEFAULT_TIMEOUT
from ..errors import TransportError
from ..logging_config import get_logger
from .base import TransportResponse, status_failure

logger = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpTransport:
    """Real network transport.

    with_credentials mirrors the browser option of the same name: when off,
    the cookie jar is emptied before every RPC so no session cookie leaves
    the process. Redirects are followed, injected clients included.
    """

    def __init__(
        self,
        *,
        with_credentials: bool = False,
        timeout: float | None = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ):
        self._with_credentials = with_credentials
        self._owns_client = client is None
        self._client = (
            client
            if client is not None
            else httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        )

    @property
    def with_credentials(self) -> bool:
        return self._with_credentials

    async def post_json(self, url: str, payload: Mapping[str, Any]) -> TransportResponse:
        """POST a JSON body. Raises TransportError on connection failure or non-2xx."""
        if not self._with_credentials:
            self._client.cookies.clear()

        try:
            response = await self._client.post(
                url, json=dict(payload), headers=JSON_HEADERS, follow_redirects=True
            )
        except httpx.HTTPError as e:
            raise TransportError(str(e), url=url) from e

        result = TransportResponse(
            status=response.status_code,
            reason=response.reason_phrase,
            body=_decode_body(response),
            url=url,
        )
        if not result.ok:
            raise status_failure(result)
        return result

    async def put_bytes(self, url: str, data: bytes) -> TransportResponse:
        """PUT raw bytes without a Content-Type header. Raises only on connection failure."""
        try:
            # content=bytes leaves Content-Type unset; the signed URL fixes it
            response = await self._client.put(url, content=data, follow_redirects=True)
        except httpx.HTTPError as e:
            raise TransportError(str(e), url=url) from e

        return TransportResponse(
            status=response.status_code,
            reason=response.reason_phrase,
            body=None,
            url=url,
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
