"""
Payslip — tax API routes
Annual estimate with slab breakdown, regime comparison, professional tax lookup.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from payslip.config import settings
from payslip.tax_engine.income_tax import CESS_RATE, annual_to_monthly, compare_regimes, estimate_annual_tax
from payslip.tax_engine.professional_tax import (
    FALLBACK_JURISDICTION,
    PROFESSIONAL_TAX_RULES,
    SELECTABLE_JURISDICTIONS,
    compute_professional_tax,
)
from payslip.tax_engine.slabs import TaxRegime, slab_breakdown

router = APIRouter(prefix="/api/tax", tags=["tax"])


class EstimateRequest(BaseModel):
    annual_taxable_income: float = Field(allow_inf_nan=False)
    regime: TaxRegime = TaxRegime.OLD


class CompareRequest(BaseModel):
    annual_taxable_income: float = Field(allow_inf_nan=False)


@router.post("/estimate")
async def estimate(req: EstimateRequest):
    annual = estimate_annual_tax(req.annual_taxable_income, req.regime)
    steps = slab_breakdown(req.annual_taxable_income, req.regime)
    return {
        "regime": req.regime.value,
        "annual_taxable_income": req.annual_taxable_income,
        "base_tax": sum(s.tax for s in steps),
        "cess_rate": CESS_RATE,
        "annual_tax": annual,
        "monthly_tds": annual_to_monthly(annual),
        "steps": [s._asdict() for s in steps],
    }


@router.post("/compare")
async def compare(req: CompareRequest):
    return compare_regimes(req.annual_taxable_income).model_dump(mode="json")


@router.get("/professional-tax")
async def professional_tax(
    monthly_gross: float = Query(allow_inf_nan=False),
    jurisdiction: Optional[str] = Query(default=None),
):
    name = settings.DEFAULT_JURISDICTION if jurisdiction is None else jurisdiction
    return {
        "jurisdiction": name,
        "uses_fallback": name not in PROFESSIONAL_TAX_RULES,
        "monthly_gross": monthly_gross,
        "professional_tax": compute_professional_tax(name, monthly_gross),
    }


@router.get("/jurisdictions")
async def jurisdictions():
    return {
        "selectable": list(SELECTABLE_JURISDICTIONS),
        "with_rules": sorted(PROFESSIONAL_TAX_RULES),
        "fallback": FALLBACK_JURISDICTION,
    }
