"""Upload orchestration module."""

from .orchestrator import IUploadOrchestrator, UploadOrchestrator

__all__ = ["IUploadOrchestrator", "UploadOrchestrator"]
