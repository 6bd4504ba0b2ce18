"""
Payslip — salary slip API routes
The slip being edited (ledger), TDS auto-fill, saved slips and PDF export.
"""
from __future__ import annotations

import os
import tempfile
from typing import List

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from loguru import logger

from payslip.core import store
from payslip.core.errors import NotFoundError
from payslip.core.ledger import company_to_slip_company
from payslip.models.salary import LineItem, SalaryDraft, SalaryState, TemplateSettings, WorkingDays
from payslip.tax_engine.tds import TdsInputs
from payslip.utils.pdf_generator import generate_salary_slip_pdf

router = APIRouter(prefix="/api/salary", tags=["salary"])


def _pdf_response(slip: SalaryDraft, filename: str) -> Response:
    with tempfile.TemporaryDirectory() as td:
        pdf_path = os.path.join(td, filename)
        try:
            generate_salary_slip_pdf(pdf_path, slip)
        except Exception as e:
            logger.exception("Salary slip PDF generation failed")
            raise HTTPException(status_code=500, detail=f"PDF generation failed: {e}")
        with open(pdf_path, "rb") as fh:
            pdf_bytes = fh.read()
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def _slug(text: str) -> str:
    return "".join(ch if ch.isalnum() else "_" for ch in text).strip("_") or "slip"


# ── current slip ────────────────────────────────────────
@router.get("/current")
async def get_current() -> SalaryDraft:
    return store.ledger.current


@router.put("/current")
async def replace_current(req: SalaryDraft) -> SalaryDraft:
    return store.ledger.replace_current(req)


@router.put("/current/income")
async def set_income(items: List[LineItem]) -> SalaryDraft:
    return store.ledger.set_income(items)


@router.post("/current/income")
async def add_income(item: LineItem) -> SalaryDraft:
    return store.ledger.add_income(item)


@router.delete("/current/income/{index}")
async def remove_income(index: int) -> SalaryDraft:
    try:
        return store.ledger.remove_income(index)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/current/deductions")
async def set_deductions(items: List[LineItem]) -> SalaryDraft:
    return store.ledger.set_deductions(items)


@router.post("/current/deductions")
async def add_deduction(item: LineItem) -> SalaryDraft:
    return store.ledger.add_deduction(item)


@router.delete("/current/deductions/{index}")
async def remove_deduction(index: int) -> SalaryDraft:
    try:
        return store.ledger.remove_deduction(index)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/current/working-days")
async def set_working_days(req: WorkingDays) -> SalaryDraft:
    return store.ledger.set_working_days(req)


@router.put("/current/template")
async def set_template(req: TemplateSettings) -> SalaryDraft:
    return store.ledger.set_template(req)


@router.post("/current/tds")
async def apply_tds(req: TdsInputs):
    """Compute TDS / professional tax / ESI from the income lines and write them into deductions."""
    result = store.ledger.apply_tds(req)
    return {"calculation": result.model_dump(), "current": store.ledger.current.model_dump(mode="json")}


@router.post("/current/company/{company_id}")
async def use_company(company_id: str) -> SalaryDraft:
    try:
        company = store.companies.get(company_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return store.ledger.set_company(company_to_slip_company(company))


@router.post("/current/employee/{employee_id}")
async def use_employee(employee_id: str) -> SalaryDraft:
    try:
        employee = store.employees.get(employee_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return store.ledger.set_employee(employee)


@router.post("/current/reset")
async def reset_current() -> SalaryDraft:
    return store.ledger.reset()


@router.post("/current/pdf")
async def current_pdf() -> Response:
    store.ledger.recalc()
    slip = store.ledger.current
    return _pdf_response(slip, f"salary_slip_{_slug(slip.month)}.pdf")


# ── saved slips ─────────────────────────────────────────
@router.post("/slips", status_code=201)
async def save_slip():
    return store.ledger.save_slip().model_dump(mode="json")


@router.get("/slips")
async def list_slips():
    slips = store.ledger.list_slips()
    return {"slips": [s.model_dump(mode="json") for s in slips], "total": len(slips)}


@router.post("/slips/{slip_id}/load")
async def load_slip(slip_id: str) -> SalaryDraft:
    try:
        return store.ledger.load_slip(slip_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/slips/{slip_id}", status_code=204)
async def delete_slip(slip_id: str) -> None:
    try:
        store.ledger.delete_slip(slip_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/slips/{slip_id}/pdf")
async def slip_pdf(slip_id: str) -> Response:
    try:
        slip = store.ledger.get_slip(slip_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    name = _slug(f"{slip.employee.name}_{slip.month}")
    return _pdf_response(slip, f"salary_slip_{name}.pdf")


# ── export / import ─────────────────────────────────────
@router.get("/export")
async def export_state() -> SalaryState:
    return store.ledger.export_state()


@router.post("/import")
async def import_state(req: SalaryState) -> SalaryState:
    return store.ledger.import_state(req)
