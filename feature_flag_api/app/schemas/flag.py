"""
Pydantic schemas for feature flag payloads.

Request bodies are decoded explicitly with ``decode_body`` rather than
through FastAPI's automatic body parsing: the service answers malformed
bodies with HTTP 400 and an endpoint-specific ``error`` message instead
of FastAPI's default 422 response.  Booleans are strict, so ``"yes"``,
``1`` or ``null`` are rejected.
"""

from typing import Any, Type, TypeVar

from pydantic import BaseModel, Field, StrictBool, StrictStr
from pydantic import ValidationError as PydanticValidationError

from feature_flag_api.app.core.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class FlagUpdate(BaseModel):
    """Body of ``PUT /flags/{name}``."""

    is_enabled: StrictBool = Field(..., alias="isEnabled", description="The new value for the feature flag.")


class FlagCreate(BaseModel):
    """Body of ``POST /flags``."""

    name: StrictStr = Field(..., min_length=1, description="The name of the new feature flag.")
    is_enabled: StrictBool = Field(..., alias="isEnabled", description="The initial value for the feature flag.")


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


def decode_body(model: Type[ModelT], payload: Any, message: str) -> ModelT:
    """Validate ``payload`` against ``model``.

    Raises ``ValidationError`` carrying ``message`` when the payload is
    not an object or any field is missing or of the wrong type.
    """
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(message) from exc


def request_body_schema(model: Type[BaseModel]) -> dict:
    """Return an ``openapi_extra`` fragment documenting ``model`` as the JSON body."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
