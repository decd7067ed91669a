"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DEFAULT_BASE_URL = "http://localhost:8000/api"
DEFAULT_TIMEOUT = 30.0

TRANSPORT_HTTP = "http"
TRANSPORT_FIXTURE = "fixture"

_TRUTHY = {"1", "true", "yes", "on"}


def resolve_base_url(env_value: str | None = None) -> str:
    """Resolve the backend base address, falling back to localhost."""
    if not env_value or not env_value.strip():
        return DEFAULT_BASE_URL
    return env_value.strip().rstrip("/")


def join_url(base_url: str, endpoint: str) -> str:
    """Join base address and endpoint path with exactly one slash."""
    if not endpoint:
        return base_url.rstrip("/")
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"


def _parse_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass
class ClientSettings:
    """Settings for the client stack."""

    base_url: str = DEFAULT_BASE_URL
    with_credentials: bool = False
    timeout: float = DEFAULT_TIMEOUT
    transport: str = TRANSPORT_HTTP

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Build settings from API_* environment variables."""
        transport = os.getenv("API_TRANSPORT", TRANSPORT_HTTP).strip().lower()
        if transport not in (TRANSPORT_HTTP, TRANSPORT_FIXTURE):
            raise ValueError(f"Unsupported API_TRANSPORT: {transport!r}")

        timeout_raw = os.getenv("API_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ValueError(f"Invalid API_TIMEOUT: {timeout_raw!r}") from e

        return cls(
            base_url=resolve_base_url(os.getenv("API_BASE_URL")),
            with_credentials=_parse_bool(os.getenv("API_WITH_CREDENTIALS")),
            timeout=timeout,
            transport=transport,
        )
