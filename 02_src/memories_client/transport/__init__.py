"""Transport strategies."""

from .base import ITransport, TransportResponse
from .fixture import FixtureResponse, FixtureTransport
from .http import HttpTransport

__all__ = [
    "FixtureResponse",
    "FixtureTransport",
    "HttpTransport",
    "ITransport",
    "TransportResponse",
]
