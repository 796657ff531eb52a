"""
Pydantic schemas for student records.

Input schemas are deliberately loose: both fields are optional
strings so that missing or malformed values reach the service layer,
which reports every problem at once with user‑facing messages
instead of a generic 422.
"""

from typing import Optional

from pydantic import BaseModel, Field


class StudentCreate(BaseModel):
    """Schema for creating a student."""

    name: Optional[str] = Field(None, examples=["Alice"], description="Full name, 2 to 50 characters")
    birth: Optional[str] = Field(None, examples=["1990-09-14"], description="Birth date as YYYY-MM-DD")


class StudentUpdate(StudentCreate):
    """Schema for updating a student.

    Both fields are replaced, as in the edit form of the web client.
    """


class StudentRead(BaseModel):
    """Schema for reading a student."""

    id: str
    name: str
    birth: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class StudentListItem(StudentRead):
    """Student as shown in the list, with display fields."""

    formatted_birth: str = Field(..., examples=["14/09/1990"])
    age: int
