"""
Payslip — income-tax slab tables and the slab-walking accumulator.

A slab is (upper_bound_inclusive, marginal_rate). An upper bound of 0 marks the
final, unbounded slab.
"""
from __future__ import annotations

import math
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union


class TaxRegime(str, Enum):
    OLD = "old"
    NEW = "new"


RegimeLike = Union[TaxRegime, str]


class Slab(NamedTuple):
    upper: float
    rate: float


class SlabStep(NamedTuple):
    lower: float
    upper: Optional[float]
    amount: float
    rate: float
    tax: float


OLD_REGIME_SLABS: Tuple[Slab, ...] = (
    Slab(250000, 0.0),
    Slab(500000, 0.05),
    Slab(1000000, 0.20),
    Slab(0, 0.30),
)

NEW_REGIME_SLABS: Tuple[Slab, ...] = (
    Slab(250000, 0.0),
    Slab(500000, 0.05),
    Slab(750000, 0.10),
    Slab(1000000, 0.15),
    Slab(1250000, 0.20),
    Slab(1500000, 0.25),
    Slab(0, 0.30),
)

REGIME_SLABS: Mapping[TaxRegime, Tuple[Slab, ...]] = MappingProxyType(
    {
        TaxRegime.OLD: OLD_REGIME_SLABS,
        TaxRegime.NEW: NEW_REGIME_SLABS,
    }
)


def as_regime(regime: RegimeLike) -> TaxRegime:
    """Coerce 'old' / 'new' (or a TaxRegime) to TaxRegime; anything else raises ValueError."""
    if isinstance(regime, TaxRegime):
        return regime
    return TaxRegime(regime)


def round_half_up(value: float) -> int:
    # -0.5 rounds to 0, 2.5 rounds to 3
    return int(math.floor(value + 0.5))


def _walk(income: float, slabs: Sequence[Slab]):
    remaining = income
    lower = 0.0
    for upper, rate in slabs:
        cap = math.inf if upper == 0 else upper - lower
        taxable = max(0.0, min(remaining, cap))
        yield lower, (None if upper == 0 else upper), taxable, rate
        remaining -= taxable
        lower = upper
        if remaining <= 0:
            break


def tax_on_slabs(income: float, slabs: Sequence[Slab]) -> float:
    """
    Marginal tax on `income`: each slab's rate applies only to the part of
    income inside that slab. Returns the un-rounded base tax (no cess).
    """
    return sum(taxable * rate for _, _, taxable, rate in _walk(income, slabs))


def slab_breakdown(income: float, regime: RegimeLike = TaxRegime.OLD) -> List[SlabStep]:
    """Per-slab contribution for the preview table; slabs with nothing taxable are left out."""
    if income <= 0:
        return []
    steps: List[SlabStep] = []
    for lower, upper, taxable, rate in _walk(income, REGIME_SLABS[as_regime(regime)]):
        if taxable > 0:
            steps.append(SlabStep(lower=lower, upper=upper, amount=taxable, rate=rate, tax=taxable * rate))
    return steps
