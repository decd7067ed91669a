"""FastAPI application setup for the local debug panel."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..app import Application
from ..sim import Sim
from .routes import control, observability


def create_fastapi_app(
    application: Application | None = None,
    sim: Sim | None = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    application = application if application is not None else Application()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        yield
        if sim is not None:
            await sim.stop()
        await application.stop()

    fastapi_app = FastAPI(
        title="memories-client debug API",
        description="Diagnostic trace and control surface for the backend client",
        version="0.1.0",
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173", "http://localhost:5174"],  # Vite default
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(observability.create_observability_router(application))
    fastapi_app.include_router(control.create_control_router(application, sim))

    return fastapi_app
