"""Debug API routers."""

from . import control, observability

__all__ = ["control", "observability"]
