from __future__ import annotations

from datetime import datetime
from itertools import zip_longest
from pathlib import Path
from typing import List

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from payslip.models.salary import LineItem, SalaryDraft
from payslip.utils.currency import amount_in_words, format_amount


_ALIGN = {"left": "L", "center": "C", "right": "R"}
_NL = {"new_x": XPos.LMARGIN, "new_y": YPos.NEXT}


def _t(value: object) -> str:
    # core PDF fonts are latin-1 only
    return str(value if value is not None else "").encode("latin-1", "replace").decode("latin-1")


class SalarySlipPDF(FPDF):
    def footer(self) -> None:
        self.set_y(-12)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(120, 120, 120)
        self.cell(0, 6, f"Generated {datetime.now().strftime('%Y-%m-%d %H:%M')} - computer generated, no signature required", align="C")
        self.set_text_color(0, 0, 0)


def _header(pdf: FPDF, slip: SalaryDraft) -> None:
    tpl = slip.template
    if tpl.show_company_name:
        pdf.set_font("Helvetica", "B", 16)
        pdf.cell(0, 9, _t(slip.company.name), **_NL)
    if tpl.show_company_address:
        pdf.set_font("Helvetica", "", 9)
        for line in slip.company.address:
            pdf.cell(0, 5, _t(line), **_NL)
        contact = " | ".join(x for x in (slip.company.email, slip.company.mobile, slip.company.website) if x)
        if contact:
            pdf.cell(0, 5, _t(contact), **_NL)
        if slip.company.gstin:
            pdf.cell(0, 5, _t(f"GSTIN: {slip.company.gstin}"), **_NL)
    pdf.ln(2)
    pdf.set_font("Helvetica", "B", 14)
    pdf.cell(0, 9, _t(f"{tpl.title_text} - {slip.month}"), align=_ALIGN[tpl.title_align], **_NL)
    pdf.ln(2)


def _employee_block(pdf: FPDF, slip: SalaryDraft) -> None:
    e = slip.employee
    rows = [
        ("Employee Name", e.name, "Employee Code", e.code),
        ("Designation", e.designation, "PAN", e.pan),
        ("Bank Name", e.bank_name, "Bank A/C", e.bank_account),
        ("Cheque No.", e.cheque_number, "Department", e.department or ""),
    ]
    pdf.set_font("Helvetica", "", 9)
    for l1, v1, l2, v2 in rows:
        pdf.set_font("Helvetica", "B", 9)
        pdf.cell(35, 6, _t(l1), border=1)
        pdf.set_font("Helvetica", "", 9)
        pdf.cell(60, 6, _t(v1), border=1)
        pdf.set_font("Helvetica", "B", 9)
        pdf.cell(35, 6, _t(l2), border=1)
        pdf.set_font("Helvetica", "", 9)
        pdf.cell(0, 6, _t(v2), border=1, **_NL)
    pdf.ln(3)

    w = slip.working_days
    pdf.set_font("Helvetica", "B", 9)
    for label in ("Working Days", "Days Attended", "Leaves Taken", "Balance Leaves"):
        pdf.cell(47.5, 6, label, border=1, align="C")
    pdf.ln()
    pdf.set_font("Helvetica", "", 9)
    for v in (w.total_working_days, w.days_attended, w.leaves_taken, w.balance_leaves):
        pdf.cell(47.5, 6, str(v), border=1, align="C")
    pdf.ln(9)


def _ledger_table(pdf: FPDF, income: List[LineItem], deductions: List[LineItem], currency: str) -> None:
    pdf.set_fill_color(235, 235, 235)
    pdf.set_font("Helvetica", "B", 9)
    pdf.cell(60, 7, "Earnings", border=1, fill=True)
    pdf.cell(35, 7, f"Amount ({currency})", border=1, fill=True, align="R")
    pdf.cell(60, 7, "Deductions", border=1, fill=True)
    pdf.cell(0, 7, f"Amount ({currency})", border=1, fill=True, align="R", **_NL)

    pdf.set_font("Helvetica", "", 9)
    for inc, ded in zip_longest(income, deductions):
        pdf.cell(60, 6, _t(inc.particular) if inc else "", border=1)
        pdf.cell(35, 6, format_amount(inc.amount, currency) if inc else "", border=1, align="R")
        pdf.cell(60, 6, _t(ded.particular) if ded else "", border=1)
        pdf.cell(0, 6, format_amount(ded.amount, currency) if ded else "", border=1, align="R", **_NL)


def generate_salary_slip_pdf(output_path: str, slip: SalaryDraft) -> str:
    """
    Render one salary slip:
    - company header (template flags decide name/address visibility)
    - employee details and working days
    - earnings vs deductions table with totals
    - net salary in figures and words
    """
    pdf = SalarySlipPDF()
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.set_title(_t(f"Salary slip {slip.employee.name} {slip.month}".replace("  ", " ")))
    pdf.add_page()

    _header(pdf, slip)
    _employee_block(pdf, slip)
    _ledger_table(pdf, slip.income, slip.deductions, slip.currency)

    pdf.set_font("Helvetica", "B", 9)
    pdf.cell(60, 7, "Total Earnings", border=1)
    pdf.cell(35, 7, format_amount(slip.total_income, slip.currency), border=1, align="R")
    pdf.cell(60, 7, "Total Deductions", border=1)
    pdf.cell(0, 7, format_amount(slip.total_deductions, slip.currency), border=1, align="R", **_NL)
    pdf.ln(6)

    pdf.set_font("Helvetica", "B", 13)
    pdf.cell(0, 9, f"Net Salary: {slip.currency} {format_amount(slip.net_salary, slip.currency)}", align="C", **_NL)
    pdf.set_font("Helvetica", "I", 9)
    unit = "Rupees" if slip.currency == "INR" else slip.currency
    pdf.multi_cell(0, 5, _t(f"{unit} {amount_in_words(slip.net_salary)} Only"), align="C")

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    pdf.output(output_path)
    return output_path
