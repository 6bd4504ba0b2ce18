import pytest
from pydantic import ValidationError

from payslip.models.salary import LineItem, default_deductions
from payslip.tax_engine.tds import (
    TdsInputs,
    apply_statutory_deductions,
    compute_statutory_deductions,
    monthly_gross,
)


def _items(*pairs):
    return [LineItem(particular=p, amount=a) for p, a in pairs]


def test_monthly_tds_from_basic_salary():
    income = _items(("Basic Salary", 20000), ("HRA", 8000), ("Medical Allowance", 2000))
    r = compute_statutory_deductions(income, TdsInputs())
    assert r.monthly_gross == 30000
    assert r.basic == 20000
    assert r.employee_pf == 2400
    # 3.6L - 50k standard - 12 * 2400 PF
    assert r.annual_taxable == pytest.approx(281200)
    assert r.annual_tax == 1622
    assert r.monthly_tds == 135
    assert r.professional_tax == 200
    assert r.esi == 0


def test_basic_defaults_to_half_of_gross():
    r = compute_statutory_deductions(_items(("Consolidated Pay", 18000)), TdsInputs(apply_esi=True))
    assert r.basic == 9000
    assert r.employee_pf == 1080
    assert r.annual_tax == 0
    assert r.professional_tax == 150
    assert r.esi == 135


def test_esi_only_up_to_ceiling():
    r = compute_statutory_deductions(_items(("Basic", 21001)), TdsInputs(apply_esi=True))
    assert r.esi == 0


def test_investments_reduce_taxable_income():
    income = _items(("Basic Salary", 60000), ("HRA", 30000))
    plain = compute_statutory_deductions(income, TdsInputs())
    invested = compute_statutory_deductions(income, TdsInputs(annual_80c=150000, annual_80d=25000))
    assert invested.annual_taxable == pytest.approx(plain.annual_taxable - 175000)
    assert invested.monthly_tds < plain.monthly_tds


def test_new_regime_and_jurisdiction_are_passed_through():
    income = _items(("Basic Salary", 60000), ("HRA", 40000))
    old = compute_statutory_deductions(income, TdsInputs(regime="old"))
    new = compute_statutory_deductions(income, TdsInputs(regime="new", jurisdiction="Delhi"))
    assert new.annual_tax < old.annual_tax
    assert new.professional_tax == 200


def test_taxable_never_negative():
    r = compute_statutory_deductions(_items(("Basic", 1000)), TdsInputs(annual_80c=150000))
    assert r.annual_taxable == 0
    assert r.monthly_tds == 0


def test_negative_investments_rejected():
    with pytest.raises(ValidationError):
        TdsInputs(annual_80c=-1)


def test_monthly_gross_sums_income():
    assert monthly_gross(_items(("a", 1.5), ("b", 2))) == pytest.approx(3.5)
    assert monthly_gross([]) == 0


class TestApplyStatutoryDeductions:
    def _result(self, **inputs):
        income = _items(("Basic Salary", 20000), ("HRA", 8000), ("Medical Allowance", 2000))
        return compute_statutory_deductions(income, TdsInputs(**inputs))

    def test_default_lines_are_filled_in_place(self):
        out = apply_statutory_deductions(default_deductions(), self._result())
        assert [(d.particular, d.amount) for d in out] == [("PF", 0), ("Professional Tax", 200), ("TDS", 135)]

    def test_missing_lines_are_appended(self):
        out = apply_statutory_deductions(_items(("Loan Recovery", 500)), self._result())
        assert [d.particular for d in out] == ["Loan Recovery", "TDS", "Professional Tax"]
        assert out[0].amount == 500

    def test_renames_matching_lines(self):
        out = apply_statutory_deductions(_items(("Prof. Tax", 0), ("tds (monthly)", 0)), self._result())
        assert [(d.particular, d.amount) for d in out] == [("Professional Tax", 200), ("TDS", 135)]

    def test_esi_line_added_only_when_due(self):
        income = _items(("Basic", 15000), ("Allowance", 3000))
        due = compute_statutory_deductions(income, TdsInputs(apply_esi=True))
        not_due = compute_statutory_deductions(income, TdsInputs(apply_esi=False))
        assert any(d.particular == "ESI" for d in apply_statutory_deductions(default_deductions(), due))
        assert not any(d.particular == "ESI" for d in apply_statutory_deductions(default_deductions(), not_due))

    def test_existing_esi_line_is_zeroed_when_not_due(self):
        out = apply_statutory_deductions(_items(("ESI", 120)), self._result())
        assert out[0].particular == "ESI"
        assert out[0].amount == 0

    def test_unrelated_lines_sharing_letters_are_kept(self):
        lines = _items(("Profit Share Recovery", 999), ("Resignation Notice Recovery", 500), ("Desi Canteen", 50))
        out = apply_statutory_deductions(lines, self._result())
        assert [(d.particular, d.amount) for d in out] == [
            ("Profit Share Recovery", 999),
            ("Resignation Notice Recovery", 500),
            ("Desi Canteen", 50),
            ("TDS", 135),
            ("Professional Tax", 200),
        ]

    def test_input_lines_are_not_mutated(self):
        original = _items(("PF", 1800), ("TDS", 999))
        apply_statutory_deductions(original, self._result())
        assert original[1].amount == 999
