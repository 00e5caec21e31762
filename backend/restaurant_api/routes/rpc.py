"""
Restaurant API — RPC Route Handlers
====================================

What:  The single HTTP surface for every procedure.
How:   GET  {prefix}/{procedure}?input=<json>  → query
       POST {prefix}/{procedure}  (JSON body)  → mutation
       GET  {prefix}                           → procedure listing
Who:   The restaurant site frontend.

Input decoding:
    Query input is JSON in the `input` parameter. A value that is not valid
    JSON is passed through as a plain string, so ?input=food and
    ?input="food" are the same call; string-typed procedures always get the
    literal text. Mutation bodies must be valid JSON; an empty body means no
    input. Validation is strict: true is not an id and "12.50" is not a
    price.

Responses:
    200 {"result": {"data": ...}}. Errors use the shared error body built
    by the handlers in main.py.
"""

import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.database import get_db_session
from restaurant_api.exceptions import ValidationError
from restaurant_api.rpc.procedures import app_router
from restaurant_api.rpc.registry import MUTATION, QUERY
from restaurant_api.schemas.common import ErrorResponse, RpcResponse

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
# Prefix is applied in main.py from settings.rpc_prefix
router = APIRouter(tags=["RPC"])

_ERROR_RESPONSES = {
    400: {"description": "Invalid input", "model": ErrorResponse},
    404: {"description": "Unknown procedure", "model": ErrorResponse},
    405: {"description": "Wrong HTTP method for this procedure", "model": ErrorResponse},
    422: {"description": "Order references missing menu items", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}


def query_input_json(raw: Optional[str], takes_text: bool = False) -> Optional[str]:
    """
    Normalize a query `input` value to JSON text.

    Text that is not valid JSON is re-encoded as a JSON string. For
    procedures whose input is a string, valid JSON that is not a string
    (?input=20240601) is also taken as the literal text.
    """
    if raw is None:
        return None
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError:
        return json.dumps(raw)
    if takes_text and not isinstance(decoded, str):
        return json.dumps(raw)
    return raw


def _envelope(data: Any) -> JSONResponse:
    return JSONResponse(content={"result": {"data": jsonable_encoder(data)}})


@router.get(
    "",
    summary="List procedures",
    description="Every registered procedure with its kind (query or mutation).",
)
async def list_procedures() -> dict:
    return {"procedures": app_router.describe()}


@router.get(
    "/{procedure}",
    response_model=RpcResponse,
    responses=_ERROR_RESPONSES,
    summary="Call a query procedure",
)
async def call_query(
    procedure: str,
    input: Optional[str] = Query(
        default=None,
        description="JSON-encoded procedure input; omit for no-argument queries",
    ),
    db: AsyncSession = Depends(get_db_session),
) -> JSONResponse:
    target = app_router.get(procedure)
    takes_text = target is not None and target.takes_text
    raw_input = query_input_json(input, takes_text)
    data = await app_router.call(db, procedure, QUERY, raw_input)
    return _envelope(data)


@router.post(
    "/{procedure}",
    response_model=RpcResponse,
    responses=_ERROR_RESPONSES,
    summary="Call a mutation procedure",
)
async def call_mutation(
    procedure: str,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> JSONResponse:
    body = await request.body()
    raw_input = None
    if body.strip():
        try:
            json.loads(body)
        except ValueError as e:  # JSONDecodeError or undecodable bytes
            raise ValidationError(
                message="Request body is not valid JSON",
                context={"procedure": procedure, "position": getattr(e, "pos", None)},
            ) from e
        raw_input = body

    data = await app_router.call(db, procedure, MUTATION, raw_input)
    return _envelope(data)
