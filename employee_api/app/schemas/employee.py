"""
Pydantic models for employee data.

``EmployeeBase`` carries the ``name`` and ``age`` fields shared by
create and update payloads; ``EmployeeCreate`` adds an optional
client-supplied ``id``.  Field checks raise ``PydanticCustomError``
so that the error message reaching the client is exactly the text
defined here.  Unknown properties in a payload are ignored.

``EmployeeRead`` is the stored and returned representation.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

AGE_MIN = 5
AGE_MAX = 95
AGE_ERROR = f"Age must be between {AGE_MIN} and {AGE_MAX} years"
ID_MIN = 1


def _is_number(value: Any) -> bool:
    # bool is a subclass of int but JSON true/false are not numbers
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_whole(value: Any) -> bool:
    return isinstance(value, int) or value.is_integer()


class EmployeeBase(BaseModel):
    name: str = Field(..., examples=["John Doe"])
    age: int = Field(..., examples=[30], description=f"Age in years, {AGE_MIN} to {AGE_MAX}")

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise PydanticCustomError("name_type", "name must be a string")
        if not value:
            raise PydanticCustomError("name_empty", "name cannot be empty")
        return value

    @field_validator("age", mode="before")
    @classmethod
    def validate_age(cls, value: Any) -> int:
        # Strings such as "30" are rejected rather than coerced.
        if not _is_number(value) or not _is_whole(value):
            raise PydanticCustomError("age_range", AGE_ERROR)
        if not AGE_MIN <= value <= AGE_MAX:
            raise PydanticCustomError("age_range", AGE_ERROR)
        return int(value)


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee.

    When ``id`` is omitted the store assigns the next auto id.
    """

    id: Optional[int] = Field(None, examples=[5], description="Optional explicit id, at least 1")

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, value: Any) -> int:
        if not _is_number(value):
            raise PydanticCustomError("id_type", "id must be a number")
        if value < ID_MIN:
            raise PydanticCustomError("id_minimum", "ID must be at least {limit}", {"limit": ID_MIN})
        if not _is_whole(value):
            raise PydanticCustomError("id_whole", "id must be a whole number")
        return int(value)


class EmployeeUpdate(EmployeeBase):
    """Schema for updating an employee.

    Only ``name`` and ``age`` change; an ``id`` in the body is ignored.
    """


class EmployeeRead(BaseModel):
    """Schema for an employee record as stored and returned."""

    id: int
    name: str
    age: int

    model_config = {
        "from_attributes": True,
    }


class EmployeeResponse(BaseModel):
    """Envelope for a single employee."""

    success: bool = True
    message: str
    data: EmployeeRead


class EmployeeListResponse(BaseModel):
    """Envelope for the full employee list."""

    success: bool = True
    message: str
    data: List[EmployeeRead]
    count: int
