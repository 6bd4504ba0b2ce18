from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from payslip.models.employee import Employee


Currency = Literal["INR", "USD", "EUR"]
TitleAlign = Literal["left", "center", "right"]


class LineItem(BaseModel):
    particular: str
    amount: float = Field(default=0, allow_inf_nan=False)


class WorkingDays(BaseModel):
    total_working_days: int = 30
    days_attended: int = 0
    leaves_taken: int = 0
    balance_leaves: int = 0


class SlipCompany(BaseModel):
    """Company as printed on a slip: a flat snapshot, not the managed record."""

    name: str
    address: List[str] = Field(default_factory=list)
    email: Optional[str] = None
    mobile: Optional[str] = None
    gstin: Optional[str] = None
    website: Optional[str] = None


class TemplateSettings(BaseModel):
    title_text: str = "PAYSLIP"
    title_align: TitleAlign = "right"
    show_company_address: bool = True
    show_company_name: bool = True


DEFAULT_INCOME = (
    "Basic Salary",
    "Dearness Allowance",
    "HRA",
    "Tiffin Allowance",
    "City Compensatory Allowance",
    "Assistant Allowance",
    "Medical Allowance",
)

DEFAULT_DEDUCTIONS = ("PF", "Professional Tax", "TDS")


def default_income() -> List[LineItem]:
    return [LineItem(particular=p, amount=0) for p in DEFAULT_INCOME]


def default_deductions() -> List[LineItem]:
    return [LineItem(particular=p, amount=0) for p in DEFAULT_DEDUCTIONS]


def default_company() -> SlipCompany:
    return SlipCompany(
        name="NUMERIC LABS",
        address=["abc, street, anand - 388001"],
        email="@gmail.com",
        mobile="9999999999",
        gstin="",
        website="",
    )


class SalaryDraft(BaseModel):
    id: Optional[str] = None
    company: SlipCompany = Field(default_factory=default_company)
    employee: Employee = Field(default_factory=lambda: Employee(name=""))
    month: str = "Apr-25"
    currency: Currency = "INR"
    working_days: WorkingDays = Field(default_factory=WorkingDays)
    income: List[LineItem] = Field(default_factory=default_income)
    deductions: List[LineItem] = Field(default_factory=default_deductions)
    total_income: float = 0
    total_deductions: float = 0
    net_salary: float = 0
    template: TemplateSettings = Field(default_factory=TemplateSettings)


class Slip(SalaryDraft):
    id: str
    created_at: str


class SalaryState(BaseModel):
    current: SalaryDraft = Field(default_factory=SalaryDraft)
    slips: List[Slip] = Field(default_factory=list)
