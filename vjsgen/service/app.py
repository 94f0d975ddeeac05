"""FastAPI application entrypoint for vjsgen service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .. import __version__
from ..models import Manifest
from ..orchestrator import Orchestrator


class PackageJsonRequest(BaseModel):
    current: Optional[Dict[str, Any]] = None
    options: Dict[str, Any] = Field(default_factory=dict)


class PackageJsonResponse(BaseModel):
    manifest: Dict[str, Any]


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing the package.json pipeline."""

    app = FastAPI(title="vjsgen Service", version=__version__)

    async def get_orchestrator() -> Orchestrator:
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/package-json", response_model=PackageJsonResponse)
    async def generate_package_json(
        payload: PackageJsonRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> PackageJsonResponse:
        def _run() -> Manifest:
            return orchestrator.generate(payload.current, payload.options)

        loop = asyncio.get_running_loop()
        manifest = await loop.run_in_executor(None, _run)
        return PackageJsonResponse(manifest=manifest)

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(
        _: Any, exc: RuntimeError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "0.0.0.0", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
