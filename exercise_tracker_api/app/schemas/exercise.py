"""
Pydantic models for exercises and exercise logs.

Dates are always calendar-date strings (``Sun Jan 15 2023``); they
are formatted by the service layer, so the schemas treat them as
plain strings.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, StrictInt, StrictStr


class ExerciseCreate(BaseModel):
    """Schema for logging an exercise.

    ``duration`` may arrive as a JSON number or, from HTML forms, as a
    string; the service parses and validates it.
    """

    description: Optional[StrictStr] = Field(None, examples=["run"])
    duration: Optional[Union[StrictInt, StrictStr]] = Field(None, examples=[30])
    date: Optional[StrictStr] = Field(None, examples=["2023-01-15"])


class ExerciseRead(BaseModel):
    """An exercise as returned right after it is logged."""

    id: str = Field(..., alias="_id")
    username: str
    date: str = Field(..., examples=["Sun Jan 15 2023"])
    duration: int = Field(..., examples=[30])
    description: str = Field(..., examples=["run"])

    model_config = {
        "populate_by_name": True,
    }


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class ExerciseLog(BaseModel):
    """A user's filtered exercise log."""

    id: str = Field(..., alias="_id")
    username: str
    count: int
    log: List[LogEntry]

    model_config = {
        "populate_by_name": True,
    }
