#!/usr/bin/env python
"""
ASGI entry point for the documentation server.
"""

import os

from service_docs.configuration import DocsSettings
from service_docs.fastapi_server import create_app

settings = DocsSettings.from_environment()

application = create_app(settings=settings)

if __name__ == "__main__":
    import uvicorn

    from service_docs.logging_config import get_uvicorn_log_config

    # Enable reload in development mode
    is_debug = os.getenv("BACKEND_BUILD_TARGET") == "debug"

    uvicorn.run(
        "asgi:application",
        host="0.0.0.0",
        port=settings.port,
        workers=1 if is_debug else int(os.getenv("WEB_CONCURRENCY", "1")),
        log_level=settings.log_level,
        log_config=get_uvicorn_log_config(settings.log_level),
        reload=is_debug,
        reload_dirs=["service_docs"] if is_debug else None,
        access_log=True,
    )
