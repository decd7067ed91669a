"""memories-client: RPC gateway, diagnostic trace and image uploads."""

from .app import Application, IApplication
from .config import DEFAULT_BASE_URL, ClientSettings
from .errors import (
    BackendError,
    ClientError,
    ErrorSource,
    NetworkError,
    TransportError,
    UploadError,
)
from .event_bus import EventBus, IEventBus
from .gateway import IRpcGateway, RpcGateway
from .models import (
    BusMessage,
    RpcRequest,
    RpcResult,
    Topic,
    TraceEvent,
    TraceKind,
    UploadedImage,
    UploadPhase,
    UploadSession,
    first_result,
)
from .services import AuthService, GroupService, ImageService, MemoryService
from .trace import DiagnosticTrace, IDiagnosticTrace
from .transport import FixtureResponse, FixtureTransport, HttpTransport, ITransport
from .uploads import IUploadOrchestrator, UploadOrchestrator

__all__ = [
    # Application
    "Application",
    "IApplication",
    "ClientSettings",
    "DEFAULT_BASE_URL",
    # Errors
    "ClientError",
    "NetworkError",
    "BackendError",
    "UploadError",
    "ErrorSource",
    "TransportError",
    # Models
    "BusMessage",
    "Topic",
    "TraceEvent",
    "TraceKind",
    "RpcRequest",
    "RpcResult",
    "first_result",
    "UploadPhase",
    "UploadSession",
    "UploadedImage",
    # Components
    "IEventBus",
    "EventBus",
    "IDiagnosticTrace",
    "DiagnosticTrace",
    "ITransport",
    "HttpTransport",
    "FixtureTransport",
    "FixtureResponse",
    "IRpcGateway",
    "RpcGateway",
    "AuthService",
    "GroupService",
    "MemoryService",
    "ImageService",
    "IUploadOrchestrator",
    "UploadOrchestrator",
]
