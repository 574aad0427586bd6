# service_docs/fastapi_server.py

import importlib
import logging
from typing import List, Optional, Sequence

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from service_docs import __version__
from service_docs.configuration import DocsSettings
from service_docs.docs_router import DocsRoute, create_docs_router
from service_docs.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

health_router = APIRouter(tags=["health"])


@health_router.get("/health")
async def health_check() -> dict:
    """Liveness check."""
    return {"status": "healthy"}


def load_service(import_path: str) -> type:
    """Import a service class from ``package.module:ClassName``."""
    module_name, _, class_name = import_path.partition(":")
    if not module_name or not class_name:
        raise ConfigurationError(import_path, "expected 'package.module:ClassName'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(import_path, f"cannot import module: {exc}") from exc

    try:
        return getattr(module, class_name)
    except AttributeError as exc:
        raise ConfigurationError(import_path, "class not found in module") from exc


def routes_from_settings(settings: DocsSettings) -> List[DocsRoute]:
    if not settings.services:
        logger.warning("RPC_SERVICES is empty, no routes will be documented")
        return []

    procedures = [load_service(path) for path in settings.services]
    return [DocsRoute(path=settings.rpc_path, procedures=procedures)]


def create_app(
    routes: Optional[Sequence[DocsRoute]] = None,
    settings: Optional[DocsSettings] = None,
) -> FastAPI:
    """Create the FastAPI application serving descriptors and documentation."""
    settings = settings or DocsSettings.from_environment()
    if routes is None:
        routes = routes_from_settings(settings)

    app = FastAPI(title=settings.app_name, version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(health_router)
    app.include_router(create_docs_router(routes, settings))
    app.state.settings = settings

    for route in routes:
        logger.info(
            "Documenting %s (%d service classes)", route.path, len(route.procedures)
        )
    return app


if __name__ == "__main__":
    import uvicorn

    from service_docs.logging_config import get_uvicorn_log_config

    settings = DocsSettings.from_environment()
    uvicorn.run(
        create_app(settings=settings),
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level,
        log_config=get_uvicorn_log_config(settings.log_level),
        access_log=True,
    )
