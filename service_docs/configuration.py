"""Runtime settings for the documentation service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from service_docs.docs.scanner import DEFAULT_DELIMITER


@dataclass(frozen=True)
class DocsSettings:
    """Settings read from the environment (and a ``.env`` file when present)."""

    app_name: str = "JSON-RPC API"
    app_url: str = ""
    delimiter: str = DEFAULT_DELIMITER
    log_level: str = "info"
    port: int = 4000
    rpc_path: str = "/api"
    services: Tuple[str, ...] = ()

    @classmethod
    def from_environment(
        cls, load_env_file: bool = True, env_file: Optional[str] = None
    ) -> "DocsSettings":
        if load_env_file:
            load_dotenv(env_file)

        return cls(
            app_name=os.environ.get("APP_NAME", cls.app_name),
            app_url=os.environ.get("APP_URL", cls.app_url).rstrip("/"),
            delimiter=os.environ.get("RPC_DELIMITER") or DEFAULT_DELIMITER,
            log_level=os.getenv("LOG_LEVEL", cls.log_level).lower(),
            port=int(os.getenv("RPCPORT", str(cls.port))),
            rpc_path=os.environ.get("RPC_PATH", cls.rpc_path),
            services=_split_services(os.environ.get("RPC_SERVICES", "")),
        )

    def public_uri(self, path: str) -> str:
        """Absolute URI shown on the documentation page for a route path."""
        return f"{self.app_url}{path}"


def _split_services(value: str) -> Tuple[str, ...]:
    # "package.module:ServiceClass, other.module:Other"
    return tuple(item.strip() for item in value.split(",") if item.strip())
