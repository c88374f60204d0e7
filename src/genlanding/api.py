from __future__ import annotations

import asyncio
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from .design_engine import DesignEngine
from .logging_config import TRACE_HEADER, set_trace_id, trace_from_header
from .models.requests import ErrorResponse, GenerateFullPageRequest, RegenerateSectionRequest

logger = logging.getLogger(__name__)

FULL_PAGE_ERROR = "Failed to generate layout."
SECTION_ERROR = "Failed to regenerate section."

_ROUTE_ERRORS = {
    "/generateFullPage": FULL_PAGE_ERROR,
    "/regenerateSection": SECTION_ERROR,
}


def get_design_engine(request: Request) -> DesignEngine:
    return request.app.state.design_engine


def create_app(*, engine: DesignEngine, project_id: str | None = None) -> FastAPI:
    app = FastAPI(title="GenLanding API", version="0.1.0")
    app.state.design_engine = engine

    @app.middleware("http")
    async def trace_requests(request: Request, call_next):
        set_trace_id(trace_from_header(request.headers.get(TRACE_HEADER), project_id))
        return await call_next(request)

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(
            "Rejected request body",
            extra={"path": request.url.path, "errors": exc.errors()},
        )
        message = _ROUTE_ERRORS.get(request.url.path, "Invalid request.")
        return _error(message)

    @app.post(
        "/generateFullPage",
        responses={500: {"model": ErrorResponse}},
    )
    async def generate_full_page(
        body: GenerateFullPageRequest,
        engine: DesignEngine = Depends(get_design_engine),
    ) -> Response:
        try:
            text = await asyncio.to_thread(engine.full_page, body.prompt)
        except Exception as exc:
            logger.error(
                "Full page generation failed",
                exc_info=True,
                extra={"error": str(exc)},
            )
            return _error(FULL_PAGE_ERROR)
        return Response(content=text, media_type="application/json")

    @app.post(
        "/regenerateSection",
        responses={500: {"model": ErrorResponse}},
    )
    async def regenerate_section(
        body: RegenerateSectionRequest,
        engine: DesignEngine = Depends(get_design_engine),
    ) -> Response:
        try:
            text = await asyncio.to_thread(
                engine.section,
                prompt=body.prompt,
                section_type=body.section_type,
                brand=body.brand,
                theme=body.theme,
            )
        except Exception as exc:
            logger.error(
                "Section regeneration failed",
                exc_info=True,
                extra={"section_type": body.section_type.value, "error": str(exc)},
            )
            return _error(SECTION_ERROR)
        return Response(content=text, media_type="application/json")

    @app.get("/health")
    async def healthcheck() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return app


def _error(message: str) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=500)


__all__ = ["FULL_PAGE_ERROR", "SECTION_ERROR", "create_app", "get_design_engine"]
