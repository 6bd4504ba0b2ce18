"""
Payslip — state professional tax.

Monthly flat amounts keyed by state. Every state listed shares the same four
brackets today; a name that is not an exact (case-sensitive) key falls back
to the Gujarat table.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple


FALLBACK_JURISDICTION = "Gujarat"

# (monthly gross threshold, flat tax), ascending
_STANDARD_BRACKETS: Tuple[Tuple[float, int], ...] = (
    (0, 0),
    (10000, 0),
    (15000, 150),
    (25000, 200),
)

PROFESSIONAL_TAX_RULES: Mapping[str, Tuple[Tuple[float, int], ...]] = MappingProxyType(
    {
        "Gujarat": _STANDARD_BRACKETS,
        "Maharashtra": _STANDARD_BRACKETS,
        "Karnataka": _STANDARD_BRACKETS,
    }
)

# States offered by the slip form; those without a table use the fallback.
SELECTABLE_JURISDICTIONS: Tuple[str, ...] = ("Gujarat", "Maharashtra", "Karnataka", "Delhi", "Tamil Nadu")


def brackets_for(jurisdiction_name: str) -> Tuple[Tuple[float, int], ...]:
    return PROFESSIONAL_TAX_RULES.get(jurisdiction_name, PROFESSIONAL_TAX_RULES[FALLBACK_JURISDICTION])


def compute_professional_tax(jurisdiction_name: str, monthly_gross_income: float) -> int:
    brackets = brackets_for(jurisdiction_name)
    for threshold, amount in reversed(brackets):
        if monthly_gross_income >= threshold:
            return amount
    return brackets[0][1]
