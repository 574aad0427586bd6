"""JSON-RPC envelope models used to build example payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

JSONRPC_VERSION = "2.0"


class JSONRPCRequest(BaseModel):
    jsonrpc: str = JSONRPC_VERSION
    id: Any | None = None
    method: str
    params: Any | None = None


class JSONRPCResponse(BaseModel):
    jsonrpc: str = JSONRPC_VERSION
    id: Any | None = None
    result: Any | None = None
