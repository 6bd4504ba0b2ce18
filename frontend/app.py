import httpx
import streamlit as st

from theme import BACKEND_URL, inject_css, inr, page_header


st.set_page_config(page_title="Payslip | Salary Slip Generator", page_icon="🧾", layout="wide")
inject_css()

page_header("Payslip", "Manage employees and companies, compose a salary slip, export it as PDF")

try:
    with httpx.Client(timeout=5) as c:
        h = c.get(f"{BACKEND_URL}/health").json()
except Exception:
    h = None

if h is None:
    st.error(f"Backend not reachable at {BACKEND_URL}. Start it with `uvicorn payslip.main:app`.")
    st.stop()

cols = st.columns(3)
with cols[0]:
    st.metric("Employees", h.get("employees", 0))
with cols[1]:
    st.metric("Companies", h.get("companies", 0))
with cols[2]:
    st.metric("Saved Slips", h.get("saved_slips", 0))

st.divider()

if hasattr(st, "page_link"):
    row = st.columns(3)
    with row[0]:
        st.page_link("pages/1_👥_Employees.py", label="👥 Employees", use_container_width=True)
    with row[1]:
        st.page_link("pages/2_🏢_Companies.py", label="🏢 Companies", use_container_width=True)
    with row[2]:
        st.page_link("pages/3_🧾_Salary_Slip.py", label="🧾 Salary Slip", use_container_width=True)
else:
    st.info("Use the left sidebar to navigate.")

try:
    with httpx.Client(timeout=5) as c:
        slips = c.get(f"{BACKEND_URL}/api/salary/slips").json().get("slips", [])
except Exception:
    slips = []

if slips:
    st.markdown("### Recent slips")
    st.dataframe(
        [
            {"Month": s["month"], "Employee": s["employee"]["name"], "Net Salary": inr(s["net_salary"]), "Saved": s["created_at"][:16]}
            for s in slips[:10]
        ],
        use_container_width=True,
    )
