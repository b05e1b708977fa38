"""
Pydantic schemas for employee records.

A record consists of a store‑assigned integer ``id``, a ``name`` and
an ``age``.  Names are not unique.  The API never accepts an ``id``
from the client: any ``id`` key in a request body is ignored and the
identifier from the path (or the one allocated by the store) is used
instead.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationInfo, field_validator


class EmployeeBase(BaseModel):
    # Missing or ``null`` fields decode to their zero values.  Values are
    # type checked strictly (``"30"`` is not an age) but otherwise not validated.
    name: StrictStr = Field("", examples=["Bob"])
    age: StrictInt = Field(0, examples=[30])

    @field_validator("name", "age", mode="before")
    @classmethod
    def null_as_zero_value(cls, v: Any, info: ValidationInfo) -> Any:
        # ``null`` decodes to the field's zero value, like an absent key.
        if v is None:
            return "" if info.field_name == "name" else 0
        return v


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee or replacing one in full."""


class EmployeeUpdate(BaseModel):
    """Schema for a partial update.

    All fields are optional; only fields present in the request body
    are applied.  ``null`` leaves the stored value untouched, while an
    explicit ``0`` or ``""`` overwrites it.
    """

    name: Optional[StrictStr] = None
    age: Optional[StrictInt] = None


class EmployeeRead(EmployeeBase):
    """Schema for reading an employee."""

    id: int
