"""
Process-wide stores shared by the API routes.
"""
from typing import Optional

from payslip.config import settings
from payslip.core.drafts import DraftStore
from payslip.core.ledger import SalaryLedger
from payslip.core.registry import CompanyRepository, EmployeeRepository


employees = EmployeeRepository()
companies = CompanyRepository()
ledger = SalaryLedger(DraftStore(settings.drafts_dir) if settings.DRAFT_AUTOSAVE else None)


def reset(drafts: Optional[DraftStore] = None) -> None:
    global employees, companies, ledger
    employees = EmployeeRepository()
    companies = CompanyRepository()
    ledger = SalaryLedger(drafts)
