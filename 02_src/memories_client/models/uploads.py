"""Upload protocol data models."""

from dataclasses import dataclass
from enum import Enum

from .rpc import ID


class UploadPhase(str, Enum):
    """States of one upload run."""

    IDLE = "idle"
    REQUESTING_URL = "requesting_url"
    TRANSFERRING = "transferring"
    CONFIRMING = "confirming"
    COMPLETE = "complete"
    FAILED = "failed"


@dataclass
class UploadSession:
    """Ephemeral state of a single orchestration call. Never persisted."""

    owner_user: ID
    file_name: str
    content_type: str | None = None
    size_bytes: int | None = None
    associated_memory: ID | None = None
    object_key: str | None = None
    bucket: str | None = None
    delegated_url: str | None = None
    phase: UploadPhase = UploadPhase.IDLE


@dataclass(frozen=True)
class UploadedImage:
    """Durable reference returned once confirmation succeeded."""

    image_id: ID
    permanent_url: str
    object_key: str
