from __future__ import annotations

import re
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


CompanySortBy = Literal["name", "gstin", "created_at"]

_PINCODE_RE = re.compile(r"^\d{6}$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_RE = re.compile(r"^[0-9]{10}$")
_GSTIN_RE = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z]{1}[1-9A-Z]{1}Z[0-9A-Z]{1}$")
_PAN_RE = re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]{1}$")


class CompanyAddress(BaseModel):
    line1: str
    line2: Optional[str] = None
    city: str
    state: str
    pincode: str
    country: str = "India"
    is_primary: bool = False

    @field_validator("line1", "city", "state")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("pincode")
    @classmethod
    def _pincode(cls, v: str) -> str:
        if not _PINCODE_RE.match(v):
            raise ValueError("Invalid pincode format")
        return v


class CompanyBankDetails(BaseModel):
    bank_name: str = ""
    account_number: str = ""
    ifsc: str = ""
    branch: Optional[str] = None


class Company(BaseModel):
    id: Optional[str] = None
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    gstin: Optional[str] = None
    pan: Optional[str] = None
    tan: Optional[str] = None
    cin: Optional[str] = None
    addresses: List[CompanyAddress] = Field(min_length=1)
    bank_details: Optional[CompanyBankDetails] = None
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Company name is required")
        return v.strip()

    @field_validator("email")
    @classmethod
    def _email(cls, v: Optional[str]) -> Optional[str]:
        if v and not _EMAIL_RE.match(v):
            raise ValueError("Invalid email format")
        return v

    @field_validator("phone")
    @classmethod
    def _phone(cls, v: Optional[str]) -> Optional[str]:
        if v and not _PHONE_RE.match(v):
            raise ValueError("Invalid phone number format")
        return v

    @field_validator("gstin")
    @classmethod
    def _gstin(cls, v: Optional[str]) -> Optional[str]:
        if v and not _GSTIN_RE.match(v):
            raise ValueError("Invalid GSTIN format")
        return v

    @field_validator("pan")
    @classmethod
    def _pan(cls, v: Optional[str]) -> Optional[str]:
        if v and not _PAN_RE.match(v):
            raise ValueError("Invalid PAN format")
        return v

    @property
    def primary_address(self) -> CompanyAddress:
        return next((a for a in self.addresses if a.is_primary), self.addresses[0])


class CompanyFilter(BaseModel):
    search: str = ""
    is_active: Optional[bool] = None  # None = all


class CompanyStats(BaseModel):
    total_companies: int = 0
    active_companies: int = 0
    recently_added: int = 0
