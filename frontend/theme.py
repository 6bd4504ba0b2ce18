"""
Payslip — shared Streamlit helpers: CSS, INR formatting, backend calls.
"""
import os

import httpx
import streamlit as st

BACKEND_URL = os.getenv("PAYSLIP_BACKEND_URL", "http://localhost:8000")


# ── Indian Rupee formatter ──────────────────────────────
def inr(x: float) -> str:
    try:
        n = int(round(float(x)))
    except Exception:
        return f"₹{x}"
    s = str(abs(n))
    if len(s) <= 3:
        out = s
    else:
        out = s[-3:]
        s = s[:-3]
        while s:
            out = s[-2:] + "," + out
            s = s[:-2]
    return ("-₹" if n < 0 else "₹") + out


# ── API helpers ─────────────────────────────────────────
def api_get(path: str, params=None, timeout: int = 30):
    with httpx.Client(timeout=timeout) as c:
        return c.get(f"{BACKEND_URL}{path}", params=params)


def api_post(path: str, json_body=None, timeout: int = 60):
    with httpx.Client(timeout=timeout) as c:
        return c.post(f"{BACKEND_URL}{path}", json=json_body)


def api_put(path: str, json_body=None, timeout: int = 30):
    with httpx.Client(timeout=timeout) as c:
        return c.put(f"{BACKEND_URL}{path}", json=json_body)


def api_delete(path: str, timeout: int = 30):
    with httpx.Client(timeout=timeout) as c:
        return c.delete(f"{BACKEND_URL}{path}")


def editor_lines(rows) -> list:
    """Rows from st.data_editor as line-item payloads; blank rows dropped, empty amounts sent as 0."""
    return [
        {"particular": str(r["particular"]).strip(), "amount": r.get("amount") or 0}
        for r in rows or []
        if str(r.get("particular") or "").strip()
    ]


PAYSLIP_CSS = """
<style>
:root {
    --accent: #1F4E79;
    --muted:  #6B7785;
    --border: #DDE3EA;
}
.page-title    { font-size: 28px; font-weight: 700; color: var(--accent); margin-bottom: 2px; }
.page-subtitle { color: var(--muted); margin-bottom: 18px; }
.net-box {
    text-align: center; padding: 22px; border: 1px solid var(--border);
    border-radius: 8px; box-shadow: 0 2px 12px rgba(0,0,0,0.08);
}
.net-box .label  { color: var(--muted); font-size: 15px; letter-spacing: .5px; }
.net-box .amount { font-size: 40px; font-weight: 600; }
</style>
"""


def inject_css() -> None:
    st.markdown(PAYSLIP_CSS, unsafe_allow_html=True)


def page_header(title: str, subtitle: str = "") -> None:
    st.markdown(f'<div class="page-title">{title}</div>', unsafe_allow_html=True)
    if subtitle:
        st.markdown(f'<div class="page-subtitle">{subtitle}</div>', unsafe_allow_html=True)
