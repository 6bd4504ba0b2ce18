from __future__ import annotations

from pydantic import BaseModel

from payslip.tax_engine.slabs import REGIME_SLABS, RegimeLike, TaxRegime, as_regime, round_half_up, tax_on_slabs


CESS_RATE = 0.04


class RegimeComparison(BaseModel):
    annual_taxable_income: float
    old_regime_tax: int
    new_regime_tax: int
    best_regime: TaxRegime
    savings: int


def _cess(tax: float) -> float:
    return tax * CESS_RATE


def estimate_annual_tax(annual_taxable_income: float, regime: RegimeLike = TaxRegime.OLD) -> int:
    """
    Annual income tax for the given regime, 4% cess included, rounded to the
    nearest whole unit. Non-positive income pays nothing.

      old: 0-2.5L 0% | 2.5-5L 5% | 5-10L 20% | 10L+ 30%
      new: 0-2.5L 0% | 2.5-5L 5% | 5-7.5L 10% | 7.5-10L 15% | 10-12.5L 20% | 12.5-15L 25% | 15L+ 30%
    """
    slabs = REGIME_SLABS[as_regime(regime)]
    if annual_taxable_income <= 0:
        return 0
    tax = tax_on_slabs(annual_taxable_income, slabs)
    return max(0, round_half_up(tax + _cess(tax)))


def annual_to_monthly(annual_amount: float) -> int:
    return round_half_up(annual_amount / 12)


def compare_regimes(annual_taxable_income: float) -> RegimeComparison:
    old_tax = estimate_annual_tax(annual_taxable_income, TaxRegime.OLD)
    new_tax = estimate_annual_tax(annual_taxable_income, TaxRegime.NEW)
    return RegimeComparison(
        annual_taxable_income=annual_taxable_income,
        old_regime_tax=old_tax,
        new_regime_tax=new_tax,
        best_regime=TaxRegime.OLD if old_tax <= new_tax else TaxRegime.NEW,
        savings=abs(old_tax - new_tax),
    )
