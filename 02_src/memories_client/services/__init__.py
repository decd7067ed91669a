"""Per-domain façades over the RPC gateway."""

from .auth import AuthService
from .groups import GroupService
from .images import ImageService
from .memories import MemoryService

__all__ = ["AuthService", "GroupService", "ImageService", "MemoryService"]
