from __future__ import annotations

from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field, field_validator


EmployeeSortBy = Literal["name", "code", "designation", "department", "joining_date"]


class Employee(BaseModel):
    id: Optional[str] = None
    name: str
    code: str = ""
    designation: str = ""
    pan: str = ""
    bank_account: str = ""
    bank_name: str = ""
    cheque_number: str = ""
    pf_number: Optional[str] = None
    esi_number: Optional[str] = None
    joining_date: Optional[str] = None  # YYYY-MM-DD
    email: Optional[str] = None
    mobile: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    dob: Optional[str] = None
    gov_id: Optional[str] = None
    marital_status: Optional[str] = None
    spouse_name: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    emergency_contact_relation: Optional[str] = None
    department: Optional[str] = None
    supervisor: Optional[str] = None
    work_location: Optional[str] = None
    salary: Optional[str] = None
    education: Optional[str] = None
    tax_info: Optional[str] = None
    health_conditions: Optional[str] = None


class EmployeeIn(Employee):
    """Payload for creating or updating an employee; the name must be filled."""

    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Employee name is required")
        return v.strip()


class EmployeeFilter(BaseModel):
    search: str = ""
    department: str = ""
    designation: str = ""


class EmployeeStats(BaseModel):
    total_employees: int = 0
    active_employees: int = 0
    department_counts: Dict[str, int] = Field(default_factory=dict)
    recently_added: int = 0
