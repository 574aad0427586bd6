"""FastAPI routes that serve the descriptor document and the documentation page."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from fastapi import APIRouter, Response
from fastapi.responses import HTMLResponse, JSONResponse

from service_docs.configuration import DocsSettings
from service_docs.docs import (
    DocumentationBuilder,
    ProcedureSet,
    build_descriptor,
    render_documentation_page,
)
from service_docs.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocsRoute:
    """One JSON-RPC endpoint whose service classes should be documented."""

    path: str
    procedures: Sequence[type]
    delimiter: Optional[str] = None
    colors: Dict[str, str] = field(default_factory=dict)

    def procedure_set(self, settings: DocsSettings) -> ProcedureSet:
        return ProcedureSet(
            procedures=self.procedures,
            delimiter=self.delimiter or settings.delimiter,
        )


def _configuration_error_response(route: DocsRoute, exc: ConfigurationError) -> JSONResponse:
    logger.error("Cannot document route %s: %s", route.path, exc.message)
    return JSONResponse(status_code=500, content={"detail": exc.message})


def create_docs_router(routes: Sequence[DocsRoute], settings: DocsSettings) -> APIRouter:
    """Register ``<path>/smd`` and ``<path>/docs`` for every route."""
    router = APIRouter(tags=["docs"])

    for route in routes:
        _register_route(router, route, settings)

    return router


def _register_route(router: APIRouter, route: DocsRoute, settings: DocsSettings) -> None:
    base = route.path.rstrip("/")

    async def service_descriptor() -> Response:
        try:
            document = build_descriptor(route.procedure_set(settings), target=route.path)
        except ConfigurationError as exc:
            return _configuration_error_response(route, exc)
        return JSONResponse(content=document)

    async def documentation_page() -> Response:
        try:
            entries = DocumentationBuilder().build(route.procedure_set(settings))
        except ConfigurationError as exc:
            return _configuration_error_response(route, exc)

        page = render_documentation_page(
            title=settings.app_name,
            uri=settings.public_uri(route.path),
            entries=entries,
            colors=route.colors,
        )
        return HTMLResponse(content=page)

    router.add_api_route(
        f"{base}/smd",
        service_descriptor,
        methods=["GET"],
        name=f"smd:{route.path}",
    )
    router.add_api_route(
        f"{base}/docs",
        documentation_page,
        methods=["GET"],
        response_class=HTMLResponse,
        name=f"docs:{route.path}",
    )
