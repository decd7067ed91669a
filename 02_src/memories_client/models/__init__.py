"""Core data models for memories-client."""

from .bus import BusMessage, Topic
from .rpc import ID, JSONObject, RpcRequest, RpcResult, first_result
from .tracing import TraceEvent, TraceKind, now_ms
from .uploads import UploadedImage, UploadPhase, UploadSession

__all__ = [
    # RPC
    "ID",
    "JSONObject",
    "RpcRequest",
    "RpcResult",
    "first_result",
    # Uploads
    "UploadPhase",
    "UploadSession",
    "UploadedImage",
    # EventBus
    "BusMessage",
    "Topic",
    # Tracing
    "TraceEvent",
    "TraceKind",
    "now_ms",
]
