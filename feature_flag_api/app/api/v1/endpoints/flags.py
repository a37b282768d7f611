"""
Feature flag endpoints.

CRUD over the application's ``FlagStore``.  Creation and update are
strict: ``PUT`` on an unknown flag is a 404 and ``POST`` with an
existing name is a 409.  Flag names may contain ``/`` (sent as
``%2F``), so the per-flag routes take the rest of the path as the
name.  Request bodies are read as raw JSON and
decoded into the schemas from ``schemas.flag`` so that malformed
bodies produce a 400 with the documented message.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status

from feature_flag_api.app.core.errors import FLAG_ALREADY_EXISTS, FLAG_NOT_FOUND
from feature_flag_api.app.schemas.flag import (
    ErrorResponse,
    FlagCreate,
    FlagUpdate,
    MessageResponse,
    decode_body,
    request_body_schema,
)
from feature_flag_api.app.services.flag_store import FlagStore

router = APIRouter()

INVALID_IS_ENABLED = "Invalid isEnabled value"
INVALID_CREATE_BODY = "Invalid flag name or isEnabled value"

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": FLAG_NOT_FOUND}}


def get_store(request: Request) -> FlagStore:
    """Return the store owned by the running application."""
    return request.app.state.store


async def read_json(request: Request) -> Any:
    """Return the parsed JSON body.

    Returns ``None`` when the request is not sent as
    ``application/json`` or the body is not valid JSON.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != "application/json":
        return None
    try:
        return await request.json()
    except ValueError:
        return None


@router.get(
    "",
    response_model=Dict[str, bool],
    summary="Get all feature flags",
    description="Returns a list of all feature flags and their current values.",
)
async def list_flags(store: FlagStore = Depends(get_store)) -> Dict[str, bool]:
    return store.get_all()


@router.get(
    "/{name:path}",
    response_model=Dict[str, bool],
    responses=NOT_FOUND_RESPONSE,
    summary="Get a specific feature flag",
    description="Returns the value of a specific feature flag.",
)
async def get_flag(name: str, store: FlagStore = Depends(get_store)) -> Dict[str, bool]:
    return {name: store.get(name)}


@router.put(
    "/{name:path}",
    response_model=MessageResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid isEnabled value (not a boolean)."},
        **NOT_FOUND_RESPONSE,
    },
    openapi_extra=request_body_schema(FlagUpdate),
    summary="Update a feature flag",
    description="Updates the value of an existing feature flag.",
)
async def update_flag(name: str, request: Request, store: FlagStore = Depends(get_store)) -> MessageResponse:
    # The body is checked before the flag's existence, so a bad body on
    # an unknown flag is a 400.
    body = decode_body(FlagUpdate, await read_json(request), INVALID_IS_ENABLED)
    store.set(name, body.is_enabled)
    return MessageResponse(message=f"Feature flag '{name}' updated successfully")


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid input (missing or incorrect parameters)."},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": FLAG_ALREADY_EXISTS},
    },
    openapi_extra=request_body_schema(FlagCreate),
    summary="Create a new feature flag",
    description="Creates a new feature flag with the specified name and initial value.",
)
async def create_flag(request: Request, store: FlagStore = Depends(get_store)) -> MessageResponse:
    body = decode_body(FlagCreate, await read_json(request), INVALID_CREATE_BODY)
    store.create(body.name, body.is_enabled)
    return MessageResponse(message=f"Feature flag '{body.name}' created successfully")


@router.delete(
    "/{name:path}",
    response_model=MessageResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a feature flag",
    description="Deletes an existing feature flag.",
)
async def delete_flag(name: str, store: FlagStore = Depends(get_store)) -> MessageResponse:
    store.delete(name)
    return MessageResponse(message=f"Feature flag '{name}' deleted successfully")
