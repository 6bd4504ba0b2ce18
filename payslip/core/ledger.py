"""
Payslip — salary slip ledger.
Holds the slip being edited plus the register of saved slips. Totals are
recomputed after every change to the income or deduction lines.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from loguru import logger

from payslip.core.drafts import DraftStore
from payslip.core.errors import NotFoundError
from payslip.models.company import Company
from payslip.models.employee import Employee
from payslip.models.salary import (
    Currency,
    LineItem,
    SalaryDraft,
    SalaryState,
    SlipCompany,
    Slip,
    TemplateSettings,
    WorkingDays,
)
from payslip.tax_engine.tds import TdsInputs, TdsResult, apply_statutory_deductions, compute_statutory_deductions
from payslip.utils.currency import sum_line_items


DRAFT_KEY = "salary_state"


def compute_totals(draft: SalaryDraft) -> SalaryDraft:
    draft.total_income = sum_line_items(draft.income)
    draft.total_deductions = sum_line_items(draft.deductions)
    draft.net_salary = draft.total_income - draft.total_deductions
    return draft


def clamp_working_days(w: WorkingDays) -> WorkingDays:
    total = max(0, w.total_working_days)
    return WorkingDays(
        total_working_days=total,
        days_attended=max(0, min(w.days_attended, total)),
        leaves_taken=max(0, w.leaves_taken),
        balance_leaves=max(0, w.balance_leaves),
    )


def company_to_slip_company(company: Company) -> SlipCompany:
    addr = company.primary_address
    lines = [addr.line1]
    if addr.line2:
        lines.append(addr.line2)
    lines.append(f"{addr.city}, {addr.state} - {addr.pincode}")
    if addr.country != "India":
        lines.append(addr.country)
    return SlipCompany(
        name=company.name,
        address=lines,
        email=company.email,
        mobile=company.phone,
        gstin=company.gstin,
        website=company.website,
    )


class SalaryLedger:
    def __init__(self, drafts: Optional[DraftStore] = None) -> None:
        self.drafts = drafts
        self.state = SalaryState()
        if drafts is not None:
            saved = drafts.get_json(DRAFT_KEY)
            if saved is not None:
                try:
                    self.state = SalaryState.model_validate(saved)
                    logger.info("Restored salary draft with {} saved slips", len(self.state.slips))
                except ValueError as e:
                    logger.warning("Stored salary draft rejected, starting fresh: {}", str(e))

    @property
    def current(self) -> SalaryDraft:
        return self.state.current

    def _changed(self) -> SalaryDraft:
        compute_totals(self.state.current)
        if self.drafts is not None:
            self.drafts.set_json(DRAFT_KEY, self.state.model_dump(mode="json"))
        return self.state.current

    # ── current slip ────────────────────────────────────
    def replace_current(self, draft: SalaryDraft) -> SalaryDraft:
        draft.working_days = clamp_working_days(draft.working_days)
        self.state.current = draft
        return self._changed()

    def set_company(self, company: SlipCompany) -> SalaryDraft:
        self.state.current.company = company
        return self._changed()

    def set_employee(self, employee: Employee) -> SalaryDraft:
        self.state.current.employee = employee
        return self._changed()

    def set_month(self, month: str) -> SalaryDraft:
        self.state.current.month = month
        return self._changed()

    def set_currency(self, currency: Currency) -> SalaryDraft:
        self.state.current.currency = currency
        return self._changed()

    def set_template(self, template: TemplateSettings) -> SalaryDraft:
        self.state.current.template = template
        return self._changed()

    def set_working_days(self, working_days: WorkingDays) -> SalaryDraft:
        self.state.current.working_days = clamp_working_days(working_days)
        return self._changed()

    def set_income(self, items: List[LineItem]) -> SalaryDraft:
        self.state.current.income = list(items)
        return self._changed()

    def set_deductions(self, items: List[LineItem]) -> SalaryDraft:
        self.state.current.deductions = list(items)
        return self._changed()

    def add_income(self, item: LineItem) -> SalaryDraft:
        self.state.current.income.append(item)
        return self._changed()

    def remove_income(self, index: int) -> SalaryDraft:
        items = self.state.current.income
        if not 0 <= index < len(items):
            raise NotFoundError("Income line", index)
        del items[index]
        return self._changed()

    def add_deduction(self, item: LineItem) -> SalaryDraft:
        self.state.current.deductions.append(item)
        return self._changed()

    def remove_deduction(self, index: int) -> SalaryDraft:
        items = self.state.current.deductions
        if not 0 <= index < len(items):
            raise NotFoundError("Deduction line", index)
        del items[index]
        return self._changed()

    def recalc(self) -> SalaryDraft:
        return self._changed()

    def apply_tds(self, inputs: TdsInputs) -> TdsResult:
        result = compute_statutory_deductions(self.state.current.income, inputs)
        self.state.current.deductions = apply_statutory_deductions(self.state.current.deductions, result)
        self._changed()
        return result

    def reset(self) -> SalaryDraft:
        self.state.current = SalaryDraft()
        return self._changed()

    # ── saved slips ─────────────────────────────────────
    def save_slip(self) -> Slip:
        compute_totals(self.state.current)
        slip = Slip(
            **self.state.current.model_dump(exclude={"id"}),
            id=uuid.uuid4().hex,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        self.state.slips.insert(0, slip)
        self.state.current.id = slip.id
        self._changed()
        logger.info("Saved slip {} for {} ({})", slip.id, slip.employee.name or "-", slip.month)
        return slip

    def get_slip(self, slip_id: str) -> Slip:
        for s in self.state.slips:
            if s.id == slip_id:
                return s
        raise NotFoundError("Slip", slip_id)

    def list_slips(self) -> List[Slip]:
        return list(self.state.slips)

    def load_slip(self, slip_id: str) -> SalaryDraft:
        slip = self.get_slip(slip_id)
        self.state.current = SalaryDraft.model_validate(slip.model_dump(exclude={"created_at"}))
        return self._changed()

    def delete_slip(self, slip_id: str) -> None:
        before = len(self.state.slips)
        self.state.slips = [s for s in self.state.slips if s.id != slip_id]
        if len(self.state.slips) == before:
            raise NotFoundError("Slip", slip_id)
        self._changed()

    def export_state(self) -> SalaryState:
        return self.state.model_copy(deep=True)

    def import_state(self, state: SalaryState) -> SalaryState:
        self.state = state.model_copy(deep=True)
        self._changed()
        return self.state
