"""Normalized error types raised by the gateway and the upload orchestrator."""

from enum import Enum
from typing import Any

UNKNOWN_ERROR = "Unknown Error"


class ErrorSource(str, Enum):
    """Which leg of the protocol produced the error."""

    RPC = "rpc"
    TRANSFER = "transfer"


class ClientError(Exception):
    """Base exception for every failure surfaced to callers."""

    kind: str = "client"

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        source: ErrorSource = ErrorSource.RPC,
        url: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.source = source
        self.url = url

    def to_dict(self) -> dict[str, Any]:
        """Structured payload for logs and the debug API."""
        return {
            "kind": self.kind,
            "message": self.message,
            "status": self.status,
            "source": self.source.value,
            "url": self.url,
        }


class NetworkError(ClientError):
    """Transport failed to complete (DNS, refused connection, timeout, bad status)."""

    kind = "network"


class BackendError(ClientError):
    """Backend answered with an {"error": ...} body or a malformed result."""

    kind = "backend"


class UploadError(ClientError):
    """Raw storage PUT returned a non-success status."""

    kind = "upload"

    def __init__(
        self,
        status: int,
        status_text: str,
        *,
        url: str | None = None,
    ):
        super().__init__(
            f"Upload failed: {status} {status_text}".rstrip(),
            status=status,
            source=ErrorSource.TRANSFER,
            url=url,
        )
        self.status_text = status_text

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["status_text"] = self.status_text
        return data


class TransportError(Exception):
    """Raised by transports; classified by the gateway, never surfaced as-is."""

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        body: Any = None,
        url: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body
        self.url = url
