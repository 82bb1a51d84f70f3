"""
Pydantic models for user data.

Users are serialized with their identifier under the ``_id`` key, which
pydantic cannot use as a field name, so the field is called ``id`` and
aliased.  ``populate_by_name`` lets services build the model with
``id=...``.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictStr


class UserCreate(BaseModel):
    """Schema for registering a user.

    ``username`` is optional here so that a missing value reaches the
    service and is reported as a validation error with a readable
    message instead of a schema error.
    """

    username: Optional[StrictStr] = Field(None, examples=["alice"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str = Field(..., alias="_id", examples=["5f0c4c6e-0a4e-4a5f-9a62-3b1f0b8f4a2d"])
    username: str = Field(..., examples=["alice"])

    model_config = {
        "populate_by_name": True,
    }
