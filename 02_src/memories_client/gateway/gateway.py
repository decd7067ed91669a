"""RPC gateway: one POST per call, {error} normalization, traffic trace."""

from typing import Any, Callable, Mapping, Protocol

from ..config import DEFAULT_BASE_URL, join_url
from ..errors import UNKNOWN_ERROR, BackendError, ClientError, NetworkError, TransportError
from ..logging_config import get_logger
from ..models import RpcRequest, RpcResult, TraceEvent, TraceKind, now_ms
from ..trace import IDiagnosticTrace
from ..transport import ITransport

logger = get_logger(__name__)

UNKNOWN_URL = "unknown"


class IRpcGateway(Protocol):
    """Backend calls following the {error} convention."""

    async def invoke(self, endpoint: str, payload: Mapping[str, Any] | None = None) -> RpcResult:
        """Call /<Service>/<name>, return the decoded body or raise ClientError."""
        ...


def _error_field(body: Any) -> Any:
    if isinstance(body, dict):
        return body.get("error")
    return None


def classify_failure(error: TransportError) -> ClientError:
    """Decoded {error} wins over transport text, which wins over the sentinel."""
    backend_message = _error_field(error.body)
    if backend_message is not None:
        return BackendError(str(backend_message), status=error.status, url=error.url)
    return NetworkError(error.message or UNKNOWN_ERROR, status=error.status, url=error.url)


class RpcGateway:
    """Wraps outbound backend calls and records each exchange in the trace."""

    def __init__(
        self,
        transport: ITransport,
        trace: IDiagnosticTrace,
        base_url: str = DEFAULT_BASE_URL,
        method: str = "POST",
        clock: Callable[[], int] = now_ms,
    ):
        self._transport = transport
        self._trace = trace
        self._base_url = base_url
        self._method = method.upper()
        self._clock = clock

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, endpoint: str) -> str:
        """Full URL for an endpoint path."""
        return join_url(self._base_url, endpoint)

    async def invoke(self, endpoint: str, payload: Mapping[str, Any] | None = None) -> RpcResult:
        """Call /<Service>/<name>, return the decoded body or raise ClientError."""
        request = RpcRequest(endpoint, dict(payload or {}))
        url = self.url_for(request.endpoint)

        self._trace.record(
            TraceEvent(kind=TraceKind.REQUEST, method=self._method, url=url, timestamp=self._clock())
        )

        try:
            response = await self._transport.post_json(url, request.payload)
        except TransportError as e:
            self._trace.record(
                TraceEvent(
                    kind=TraceKind.ERROR,
                    url=e.url or url or UNKNOWN_URL,
                    status=e.status,
                    message=e.message,
                    timestamp=self._clock(),
                )
            )
            error = classify_failure(e)
            if error.url is None:
                error.url = url
            self._log_failure(request, error, e.body)
            raise error from e

        self._trace.record(
            TraceEvent(
                kind=TraceKind.RESPONSE,
                url=url,
                status=response.status,
                timestamp=self._clock(),
            )
        )

        backend_message = _error_field(response.body)
        if backend_message is not None:
            error = BackendError(str(backend_message), status=response.status, url=url)
            self._log_failure(request, error, response.body)
            raise error

        # Queries return arrays, Actions return objects
        return response.body

    def _log_failure(self, request: RpcRequest, error: ClientError, body: Any) -> None:
        logger.error(
            "API call failed [%s]: %s",
            request.endpoint,
            error.message,
            extra={
                "context": {
                    **error.to_dict(),
                    "endpoint": request.endpoint,
                    "query": request.is_query,
                    "response": body,
                    "base_url": self._base_url,
                }
            },
        )
