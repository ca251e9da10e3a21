"""Person Schemas — request and response bodies for the /users endpoints.

Invariants:
    - PersonWrite never carries an id: unknown keys (including "id") are dropped
    - PersonWrite is used for both create and update (whole-record replace)
    - age/height fit a signed 32-bit integer: larger values are rejected here (400),
      never handed to the driver
    - PersonResponse exposes the store-assigned id and audit timestamps, never deleted_at

Design Decisions:
    - name length not validated here: the 24-char size is a convention, not a constraint
    - from_attributes=True: responses built straight from ORM rows
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class PersonWrite(BaseModel):
    """Client-supplied fields of a person record."""
    model_config = ConfigDict(extra="ignore")

    name: str
    age: Int32
    height: Int32


class PersonResponse(BaseModel):
    """Person as stored."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    age: int
    height: int
    created_at: datetime
    updated_at: datetime
