"""Control API routes: one-off RPC calls and the smoke scenario."""

from typing import Any

from pydantic import BaseModel, Field
from fastapi import APIRouter, HTTPException

from ...app import Application
from ...errors import ClientError


class InvokeRequest(BaseModel):
    """Request model for a one-off RPC call."""

    endpoint: str = Field(pattern=r"^/[A-Za-z]\w*/\w+$")
    payload: dict[str, Any] = Field(default_factory=dict)


class InvokeResponse(BaseModel):
    """Response model for a one-off RPC call."""

    result: Any


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


def create_control_router(app: Application, sim: Any = None) -> APIRouter:
    """Create control router."""
    router = APIRouter(prefix="/api/control", tags=["control"])

    @router.post("/invoke", response_model=InvokeResponse)
    async def invoke(request: InvokeRequest) -> dict:
        """Send a single RPC through the gateway."""
        try:
            result = await app.gateway.invoke(request.endpoint, request.payload)
        except ClientError as e:
            raise HTTPException(status_code=502, detail=e.to_dict())
        return {"result": result}

    @router.post("/sim/start", response_model=StatusResponse)
    async def start_sim() -> dict:
        """Start the smoke scenario."""
        if sim is None:
            raise HTTPException(status_code=404, detail="SIM not configured")
        await sim.start()
        return {"status": "ok"}

    @router.post("/sim/stop", response_model=StatusResponse)
    async def stop_sim() -> dict:
        """Stop the smoke scenario."""
        if sim is None:
            raise HTTPException(status_code=404, detail="SIM not configured")
        await sim.stop()
        return {"status": "ok"}

    return router
