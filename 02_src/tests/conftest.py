"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

BASE_URL = "http://h/api"


@pytest.fixture
def event_bus():
    """Create a fresh EventBus."""
    from memories_client.event_bus import EventBus

    return EventBus()


@pytest.fixture
def trace(event_bus):
    """Create DiagnosticTrace bound to the event bus."""
    from memories_client.trace import DiagnosticTrace

    return DiagnosticTrace(event_bus)


@pytest.fixture
def mock_transport():
    """Create mock transport; tests set return values per call."""
    transport = Mock()
    transport.post_json = AsyncMock()
    transport.put_bytes = AsyncMock()
    transport.aclose = AsyncMock()
    return transport


@pytest.fixture
def gateway(mock_transport, trace):
    """Create RpcGateway over the mock transport with a fixed clock."""
    from memories_client.gateway import RpcGateway

    return RpcGateway(mock_transport, trace, base_url=BASE_URL, clock=lambda: 1000)


@pytest.fixture
def fixture_transport():
    """Create FixtureTransport with an empty route table."""
    from memories_client.transport import FixtureTransport

    return FixtureTransport(BASE_URL, routes={})


@pytest.fixture
def fixture_gateway(fixture_transport, trace):
    """Create RpcGateway over the fixture transport."""
    from memories_client.gateway import RpcGateway

    return RpcGateway(fixture_transport, trace, base_url=BASE_URL)


@pytest.fixture
def orchestrator(fixture_gateway, fixture_transport, event_bus):
    """Create UploadOrchestrator on the fixture stack."""
    from memories_client.services import ImageService
    from memories_client.uploads import UploadOrchestrator

    return UploadOrchestrator(ImageService(fixture_gateway), fixture_transport, event_bus)


@pytest_asyncio.fixture
async def application():
    """Create and start an Application on canned responses."""
    from memories_client.app import Application
    from memories_client.config import ClientSettings

    app = Application(ClientSettings(base_url=BASE_URL, transport="fixture"))
    await app.start()
    yield app
    await app.stop()
