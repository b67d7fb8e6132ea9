# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.

Employee serializes with the ``employee_*`` wire names; the creation
payload uses the short names (``name``, ``salary``, ...).
"""

import uuid
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

INT32_MIN = -2_147_483_648
INT32_MAX = 2_147_483_647

# Wire integers are 32-bit signed; larger values are rejected at decode time.
Int32 = Annotated[StrictInt, Field(ge=INT32_MIN, le=INT32_MAX)]


class EmployeeCreationInput(BaseModel):
    """Inbound payload for creating an employee (structural checks only)."""

    name: str = Field(..., description="Employee full name")
    salary: Int32 = Field(..., description="Yearly salary")
    age: Int32 = Field(..., description="Age in years")
    title: str = Field(..., description="Job title")
    email: str = Field(..., description="Contact email")

    @field_validator("name", "title")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class Employee(BaseModel):
    """An immutable employee record owned by the store."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str = Field(..., min_length=1, alias="employee_name")
    salary: int = Field(..., alias="employee_salary")
    age: int = Field(..., alias="employee_age")
    title: str = Field(..., min_length=1, alias="employee_title")
    email: str = Field(..., min_length=1, alias="employee_email")

    @classmethod
    def from_creation_input(cls, payload: EmployeeCreationInput) -> "Employee":
        return cls(
            id=str(uuid.uuid4()),
            name=payload.name,
            salary=payload.salary,
            age=payload.age,
            title=payload.title,
            email=payload.email,
        )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
