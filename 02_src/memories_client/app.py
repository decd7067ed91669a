"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .config import TRANSPORT_FIXTURE, ClientSettings
from .event_bus import EventBus
from .gateway import RpcGateway
from .logging_config import get_logger
from .services import AuthService, GroupService, ImageService, MemoryService
from .trace import DiagnosticTrace
from .transport import FixtureTransport, HttpTransport, ITransport
from .uploads import UploadOrchestrator

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Release the transport."""
        ...


class Application:
    """Wires settings, transport, trace, gateway, façades and uploads."""

    def __init__(
        self,
        settings: ClientSettings | None = None,
        transport: ITransport | None = None,
    ):
        self._settings = settings if settings is not None else ClientSettings.from_env()
        self._injected_transport = transport

        # Components (will be initialized in start())
        self._transport: ITransport | None = None
        self._event_bus: EventBus | None = None
        self._trace: DiagnosticTrace | None = None
        self._gateway: RpcGateway | None = None
        self._auth: AuthService | None = None
        self._groups: GroupService | None = None
        self._memories: MemoryService | None = None
        self._images: ImageService | None = None
        self._uploads: UploadOrchestrator | None = None

    def _build_transport(self) -> ITransport:
        if self._injected_transport is not None:
            return self._injected_transport
        if self._settings.transport == TRANSPORT_FIXTURE:
            return FixtureTransport(self._settings.base_url)
        return HttpTransport(
            with_credentials=self._settings.with_credentials,
            timeout=self._settings.timeout,
        )

    async def start(self) -> None:
        """Initialize components in dependency order."""
        if self._gateway is not None:
            return

        # 1. Transport (no dependencies)
        self._transport = self._build_transport()
        logger.info(
            "Transport initialized",
            extra={
                "context": {
                    "transport": type(self._transport).__name__,
                    "with_credentials": self._settings.with_credentials,
                }
            },
        )

        # 2. EventBus + DiagnosticTrace
        self._event_bus = EventBus()
        self._trace = DiagnosticTrace(self._event_bus)

        # 3. Gateway (depends on Transport + Trace)
        self._gateway = RpcGateway(self._transport, self._trace, base_url=self._settings.base_url)
        logger.info("API client configured with base URL: %s", self._settings.base_url)

        # 4. Façades (depend on Gateway)
        self._auth = AuthService(self._gateway)
        self._groups = GroupService(self._gateway)
        self._memories = MemoryService(self._gateway)
        self._images = ImageService(self._gateway)

        # 5. Uploads (depend on ImageService, Transport, EventBus)
        self._uploads = UploadOrchestrator(self._images, self._transport, self._event_bus)
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Release the transport."""
        if self._transport:
            await self._transport.aclose()
            logger.info("Transport closed")
        self._transport = None
        self._gateway = None

    def _started(self, component):
        if component is None or self._gateway is None:
            raise RuntimeError("Application not started")
        return component

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def trace(self) -> DiagnosticTrace:
        """Get diagnostic trace instance."""
        return self._started(self._trace)

    @property
    def gateway(self) -> RpcGateway:
        """Get gateway instance."""
        return self._started(self._gateway)

    @property
    def auth(self) -> AuthService:
        return self._started(self._auth)

    @property
    def groups(self) -> GroupService:
        return self._started(self._groups)

    @property
    def memories(self) -> MemoryService:
        return self._started(self._memories)

    @property
    def images(self) -> ImageService:
        return self._started(self._images)

    @property
    def uploads(self) -> UploadOrchestrator:
        """Get upload orchestrator instance."""
        return self._started(self._uploads)
