"""Shared helpers for the per-domain façades."""

from typing import Any

from ..gateway import IRpcGateway


def compact(**fields: Any) -> dict[str, Any]:
    """Payload without the optional fields that were not given."""
    return {key: value for key, value in fields.items() if value is not None}


class Service:
    """A façade: named methods that map to (endpoint, payload) on the gateway."""

    service_name: str = ""

    def __init__(self, gateway: IRpcGateway):
        self._gateway = gateway

    def endpoint(self, name: str) -> str:
        return f"/{self.service_name}/{name}"
