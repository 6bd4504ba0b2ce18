"""
Payslip — monthly TDS / statutory deduction calculator.

Turns a slip's income lines into the TDS, professional tax and ESI amounts
for one month and writes them back into the deduction lines.
"""
from __future__ import annotations

import re
from typing import List, Sequence

from pydantic import BaseModel, Field

from payslip.models.salary import LineItem
from payslip.tax_engine.income_tax import annual_to_monthly, estimate_annual_tax
from payslip.tax_engine.professional_tax import FALLBACK_JURISDICTION, compute_professional_tax
from payslip.tax_engine.slabs import TaxRegime, round_half_up


STANDARD_DEDUCTION = 50000
EMPLOYEE_PF_RATE = 0.12
ESI_EMPLOYEE_RATE = 0.0075
ESI_GROSS_CEILING = 21000

_BASIC_RE = re.compile(r"basic", re.IGNORECASE)
# whole words only, so "Profit Share" or "Resignation Recovery" are left alone
_TDS_RE = re.compile(r"\btds\b", re.IGNORECASE)
_PROF_TAX_RE = re.compile(r"\bprof(?:essional|\.)?\s*tax\b", re.IGNORECASE)
_ESI_RE = re.compile(r"\besi\b", re.IGNORECASE)


class TdsInputs(BaseModel):
    regime: TaxRegime = TaxRegime.OLD
    annual_80c: float = Field(default=0, ge=0, allow_inf_nan=False)
    annual_80d: float = Field(default=0, ge=0, allow_inf_nan=False)
    hra_exemption: float = Field(default=0, ge=0, allow_inf_nan=False)
    jurisdiction: str = FALLBACK_JURISDICTION
    apply_esi: bool = False


class TdsResult(BaseModel):
    monthly_gross: float
    basic: float
    employee_pf: int
    annual_taxable: float
    annual_tax: int
    monthly_tds: int
    professional_tax: int
    esi: int


def _amount(item: LineItem) -> float:
    try:
        return float(item.amount or 0)
    except (TypeError, ValueError):
        return 0.0


def monthly_gross(income: Sequence[LineItem]) -> float:
    return sum(_amount(i) for i in income)


def compute_statutory_deductions(income: Sequence[LineItem], inputs: TdsInputs) -> TdsResult:
    gross = monthly_gross(income)
    basic_item = next((i for i in income if _BASIC_RE.search(i.particular)), None)
    basic = _amount(basic_item) if basic_item is not None else round_half_up(gross * 0.5)
    employee_pf = round_half_up(basic * EMPLOYEE_PF_RATE)

    annual_taxable = max(
        0.0,
        gross * 12
        - STANDARD_DEDUCTION
        - inputs.annual_80c
        - inputs.annual_80d
        - inputs.hra_exemption
        # twelve months of employee PF against an annual figure
        - employee_pf * 12,
    )
    annual_tax = estimate_annual_tax(annual_taxable, inputs.regime)

    esi = round_half_up(gross * ESI_EMPLOYEE_RATE) if inputs.apply_esi and gross <= ESI_GROSS_CEILING else 0

    return TdsResult(
        monthly_gross=gross,
        basic=basic,
        employee_pf=employee_pf,
        annual_taxable=annual_taxable,
        annual_tax=annual_tax,
        monthly_tds=annual_to_monthly(annual_tax),
        professional_tax=compute_professional_tax(inputs.jurisdiction, gross),
        esi=esi,
    )


def apply_statutory_deductions(deductions: Sequence[LineItem], result: TdsResult) -> List[LineItem]:
    """
    Replace the TDS / professional tax / ESI lines with computed amounts,
    keeping every other line and the original order. Missing TDS and
    professional tax lines are appended; ESI only when it is non-zero.
    """
    out: List[LineItem] = []
    for d in deductions:
        key = d.particular
        if _TDS_RE.search(key):
            out.append(LineItem(particular="TDS", amount=result.monthly_tds))
        elif _PROF_TAX_RE.search(key):
            out.append(LineItem(particular="Professional Tax", amount=result.professional_tax))
        elif _ESI_RE.search(key):
            out.append(LineItem(particular="ESI", amount=result.esi))
        else:
            out.append(d.model_copy())

    particulars = [d.particular for d in out]
    if not any(_TDS_RE.search(p) for p in particulars):
        out.append(LineItem(particular="TDS", amount=result.monthly_tds))
    if not any(_PROF_TAX_RE.search(p) for p in particulars):
        out.append(LineItem(particular="Professional Tax", amount=result.professional_tax))
    if result.esi and not any(_ESI_RE.search(p) for p in particulars):
        out.append(LineItem(particular="ESI", amount=result.esi))
    return out
