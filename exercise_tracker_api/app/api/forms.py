"""
Request body parsing shared by the POST endpoints.

Clients send either JSON objects or HTML form submissions
(``application/x-www-form-urlencoded`` or ``multipart/form-data``).
``read_body`` flattens both into a plain dict, and ``body_as`` then
validates that dict against a pydantic schema, reporting failures as
``ValidationError`` so they share the ``{"error": ...}`` shape.
``parse_body`` does both for handlers that must look something up
before the body is allowed to fail.
"""

import json
from typing import Any, Callable, Dict, Type, TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from ..core.errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


async def read_body(request: Request) -> Dict[str, Any]:
    content_type = request.headers.get("content-type", "").lower()
    if "form" in content_type:
        form = await request.form()
        # File uploads carry no meaning for this API.
        return {key: value for key, value in form.items() if isinstance(value, str)}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise ValidationError("Malformed JSON body") from e
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def validate_body(body: Dict[str, Any], schema: Type[SchemaT]) -> SchemaT:
    try:
        return schema.model_validate(body)
    except SchemaValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "Invalid value")
        raise ValidationError(f"{field}: {message}" if field else message) from e


async def parse_body(request: Request, schema: Type[SchemaT]) -> SchemaT:
    """Read and validate the body of ``request`` in one step."""
    return validate_body(await read_body(request), schema)


def body_as(schema: Type[SchemaT]) -> Callable[..., Any]:
    """Build a dependency that parses the request body into ``schema``."""

    async def dependency(body: Dict[str, Any] = Depends(read_body)) -> SchemaT:
        return validate_body(body, schema)

    return dependency
