"""
FastAPI application for the graduate Record Store.

Routes:
- GET    /api/graduates       - all graduates, newest first
- POST   /api/graduates       - register a graduate
- DELETE /api/graduates/{id}  - delete a graduate
- GET    /health              - health check

Error bodies are always {"message": ...}.
"""

import logging
import traceback
from typing import Any, Optional

from fastapi import APIRouter, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .repository import GraduateRepository


logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "All fields are required"


class GraduateIn(BaseModel):
    """Request body for POST /api/graduates."""

    name: Optional[str] = None
    faculty: Optional[str] = None
    graduationYear: Optional[Any] = None
    telephone: Optional[str] = None


def _build_router(repository: GraduateRepository) -> APIRouter:
    router = APIRouter()

    @router.get("/graduates")
    def list_graduates() -> list[dict[str, Any]]:
        return [record.to_dict() for record in repository.list()]

    @router.post("/graduates", status_code=status.HTTP_201_CREATED)
    def create_graduate(body: GraduateIn) -> dict[str, Any]:
        fields = body.model_dump()
        if any(value in (None, "") for value in fields.values()):
            raise HTTPException(status_code=400, detail=MISSING_FIELDS_MESSAGE)

        try:
            fields["graduationYear"] = int(fields["graduationYear"])
        except (TypeError, ValueError):
            raise HTTPException(status_code=400, detail="graduationYear must be an integer")

        return repository.create(fields).to_dict()

    @router.delete("/graduates/{graduate_id}")
    def delete_graduate(graduate_id: str) -> dict[str, str]:
        if not repository.delete(graduate_id):
            raise HTTPException(status_code=404, detail="Graduate not found")
        return {"message": "Graduate deleted successfully"}

    return router


def create_app(repository: Optional[GraduateRepository] = None) -> FastAPI:
    """
    Create the Record Store application.

    Args:
        repository: Backing collection (a fresh empty one if omitted)
    """
    repository = repository or GraduateRepository()

    app = FastAPI(
        title="Graduate Record Store",
        description="REST API for graduate registrations",
        version="1.0.0",
    )
    app.state.repository = repository

    # Browsers on any origin may call the store
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(_build_router(repository), prefix="/api", tags=["graduates"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "HTTP %d on %s %s: %s",
                exc.status_code, request.method, request.url.path, exc.detail,
            )
        else:
            logger.info(
                "HTTP %d on %s %s: %s",
                exc.status_code, request.method, request.url.path, exc.detail,
            )
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Malformed bodies are reported like missing fields
        logger.warning(
            "Validation error on %s %s: %s", request.method, request.url.path, exc.errors()
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": MISSING_FIELDS_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s %s: %s\n%s",
            request.method, request.url.path, exc, traceback.format_exc(),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc)},
        )

    return app


def run_server(host: str = "127.0.0.1", port: int = 5000) -> None:
    """Serve the Record Store with uvicorn until interrupted."""
    import uvicorn

    logger.info(f"Record Store listening on http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port)
