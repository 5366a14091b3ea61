"""JSON-RPC 2.0 endpoint for sat range queries.

Path: POST /

Methods:
    getHealth     → "OK"
    getSatRanges  → {"results": [...]} for params {"references": [...]}

Every domain failure is reported as a single invalid-params error whose
message names the offending value.  No partial payload is ever returned.
A body that is not JSON at all gets a -32700 parse error.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal, Optional, Union

from fastapi import APIRouter, Request
from pydantic import BaseModel, ValidationError

from sat_rarity.core.range_query import RangeQueryHandler
from sat_rarity.domain.errors import SatRarityError
from sat_rarity.domain.report import RangeQueryRequest

logger = logging.getLogger(__name__)

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602

RequestId = Optional[Union[int, str]]


class JsonRpcRequest(BaseModel):
    jsonrpc: Literal["2.0"] = "2.0"
    id: RequestId = None
    method: str
    params: Any = None


def rpc_success(request_id: RequestId, result: Any) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def rpc_error(request_id: RequestId, code: int, message: str) -> dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "error": {"code": code, "message": message},
    }


def invalid_params(request_id: RequestId, message: str) -> dict[str, Any]:
    return rpc_error(request_id, INVALID_PARAMS, message)


def create_rpc_router(handler: RangeQueryHandler) -> APIRouter:
    """Factory that wires the JSON-RPC endpoint to a range query handler."""

    router = APIRouter(tags=["rpc"])

    async def get_health(request: JsonRpcRequest) -> dict[str, Any]:
        return rpc_success(request.id, "OK")

    async def get_sat_ranges(request: JsonRpcRequest) -> dict[str, Any]:
        try:
            params = RangeQueryRequest.model_validate(request.params)
        except ValidationError as exc:
            return invalid_params(request.id, f"invalid getSatRanges params: {exc.errors()[0]['msg']}")

        try:
            response = await handler.handle(params.references)
        except SatRarityError as exc:
            logger.warning("getSatRanges rejected: %s", exc)
            return invalid_params(request.id, str(exc))

        return rpc_success(request.id, response.model_dump(mode="json"))

    methods = {
        "getHealth": get_health,
        "getSatRanges": get_sat_ranges,
    }

    @router.post("/")
    async def rpc(http_request: Request) -> dict[str, Any]:
        try:
            payload = json.loads(await http_request.body())
        except ValueError:
            return rpc_error(None, PARSE_ERROR, "Parse error")

        request_id = payload.get("id") if isinstance(payload, dict) else None
        try:
            request = JsonRpcRequest.model_validate(payload)
        except ValidationError:
            return rpc_error(request_id, INVALID_REQUEST, "Invalid request")

        method = methods.get(request.method)
        if method is None:
            return rpc_error(request.id, METHOD_NOT_FOUND, f"Method not found: {request.method}")

        logger.debug("RPC %s (id=%s)", request.method, request.id)
        return await method(request)

    return router
