import pytest


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["ok"] is True
    assert body["draft_autosave"] is False


class TestTaxRoutes:
    def test_estimate(self, client):
        res = client.post("/api/tax/estimate", json={"annual_taxable_income": 750000})
        assert res.status_code == 200
        body = res.json()
        assert body["regime"] == "old"
        assert body["annual_tax"] == 65000
        assert body["monthly_tds"] == 5417
        assert body["base_tax"] == 62500
        assert [s["rate"] for s in body["steps"]] == [0.0, 0.05, 0.20]

    def test_estimate_new_regime(self, client):
        res = client.post("/api/tax/estimate", json={"annual_taxable_income": 2000000, "regime": "new"})
        assert res.json()["annual_tax"] == 351000

    def test_estimate_rejects_unknown_regime(self, client):
        res = client.post("/api/tax/estimate", json={"annual_taxable_income": 1, "regime": "flat"})
        assert res.status_code == 422

    def test_compare(self, client):
        body = client.post("/api/tax/compare", json={"annual_taxable_income": 1500000}).json()
        assert body["best_regime"] == "new"
        assert body["savings"] == 78000

    def test_professional_tax(self, client):
        body = client.get("/api/tax/professional-tax", params={"jurisdiction": "gujarat", "monthly_gross": 15000}).json()
        assert body["professional_tax"] == 150
        assert body["uses_fallback"] is True
        body = client.get("/api/tax/professional-tax", params={"monthly_gross": 30000}).json()
        assert body["jurisdiction"] == "Gujarat"
        assert body["uses_fallback"] is False
        assert body["professional_tax"] == 200

    def test_jurisdictions(self, client):
        body = client.get("/api/tax/jurisdictions").json()
        assert body["fallback"] == "Gujarat"
        assert "Delhi" in body["selectable"]
        assert body["with_rules"] == ["Gujarat", "Karnataka", "Maharashtra"]

    @pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
    def test_professional_tax_rejects_non_finite_gross(self, client, value):
        res = client.get("/api/tax/professional-tax", params={"monthly_gross": value})
        assert res.status_code == 422

    @pytest.mark.parametrize("path", ["/api/tax/estimate", "/api/tax/compare"])
    @pytest.mark.parametrize("literal", ["Infinity", "-Infinity", "NaN"])
    def test_annual_income_must_be_finite(self, client, path, literal):
        res = client.post(path, content=f'{{"annual_taxable_income": {literal}}}', headers={"content-type": "application/json"})
        assert res.status_code == 422
        assert res.json()["detail"][0]["loc"] == ["body", "annual_taxable_income"]

    def test_line_amount_must_be_finite(self, client):
        res = client.post("/api/salary/current/income", content='{"particular": "Bonus", "amount": Infinity}', headers={"content-type": "application/json"})
        assert res.status_code == 422
        assert client.get("/api/salary/current").json()["total_income"] == 0


class TestEmployeeRoutes:
    def test_crud(self, client):
        res = client.post("/api/employees", json={"name": "Asha Patel", "code": "E002", "department": "R&D"})
        assert res.status_code == 201
        emp = res.json()

        assert client.get(f"/api/employees/{emp['id']}").json()["name"] == "Asha Patel"
        res = client.put(f"/api/employees/{emp['id']}", json={**emp, "designation": "Engineer"})
        assert res.json()["designation"] == "Engineer"

        listing = client.get("/api/employees", params={"search": "asha"}).json()
        assert listing["total"] == 1
        assert client.get("/api/employees/stats").json()["department_counts"] == {"R&D": 1}

        assert client.delete(f"/api/employees/{emp['id']}").status_code == 204
        assert client.get(f"/api/employees/{emp['id']}").status_code == 404

    def test_validation(self, client):
        assert client.post("/api/employees", json={"name": " "}).status_code == 422
        assert client.post("/api/employees", json={}).status_code == 422

    def test_bulk_delete(self, client):
        ids = [client.post("/api/employees", json={"name": n}).json()["id"] for n in ("A", "B", "C")]
        assert client.post("/api/employees/bulk-delete", json={"ids": ids[:2]}).json() == {"deleted": 2}
        assert client.get("/api/employees").json()["total"] == 1


class TestCompanyRoutes:
    def test_crud(self, client, company_payload):
        res = client.post("/api/companies", json=company_payload)
        assert res.status_code == 201
        company = res.json()
        assert company["created_at"]

        res = client.put(f"/api/companies/{company['id']}", json={**company_payload, "is_active": False})
        assert res.json()["is_active"] is False
        assert client.get("/api/companies", params={"is_active": True}).json()["total"] == 0
        assert client.get("/api/companies/stats").json()["total_companies"] == 1

        assert client.delete(f"/api/companies/{company['id']}").status_code == 204
        assert client.delete(f"/api/companies/{company['id']}").status_code == 404

    def test_invalid_gstin(self, client, company_payload):
        res = client.post("/api/companies", json={**company_payload, "gstin": "bad"})
        assert res.status_code == 422


class TestSalaryRoutes:
    def test_ledger_flow(self, client):
        cur = client.get("/api/salary/current").json()
        assert cur["month"] == "Apr-25"

        cur = client.put(
            "/api/salary/current/income",
            json=[{"particular": "Basic Salary", "amount": 20000}, {"particular": "HRA", "amount": 10000}],
        ).json()
        assert cur["total_income"] == 30000

        cur = client.post("/api/salary/current/deductions", json={"particular": "Loan", "amount": 1000}).json()
        assert cur["net_salary"] == 29000

        assert client.delete("/api/salary/current/deductions/42").status_code == 404
        cur = client.delete("/api/salary/current/deductions/3").json()
        assert cur["total_deductions"] == 0

    def test_tds_autofill(self, client):
        client.put(
            "/api/salary/current/income",
            json=[{"particular": "Basic Salary", "amount": 20000}, {"particular": "HRA", "amount": 8000}, {"particular": "Medical", "amount": 2000}],
        )
        body = client.post("/api/salary/current/tds", json={"regime": "old", "jurisdiction": "Karnataka"}).json()
        assert body["calculation"]["monthly_tds"] == 135
        lines = {d["particular"]: d["amount"] for d in body["current"]["deductions"]}
        assert lines == {"PF": 0, "Professional Tax": 200, "TDS": 135}
        assert body["current"]["net_salary"] == 30000 - 335

    def test_working_days_clamped(self, client):
        cur = client.put(
            "/api/salary/current/working-days",
            json={"total_working_days": 26, "days_attended": 31, "leaves_taken": 1, "balance_leaves": 3},
        ).json()
        assert cur["working_days"]["days_attended"] == 26

    def test_pick_employee_and_company(self, client, company_payload):
        emp = client.post("/api/employees", json={"name": "Ravi Shah", "code": "E001"}).json()
        company = client.post("/api/companies", json=company_payload).json()
        cur = client.post(f"/api/salary/current/employee/{emp['id']}").json()
        assert cur["employee"]["name"] == "Ravi Shah"
        cur = client.post(f"/api/salary/current/company/{company['id']}").json()
        assert cur["company"]["address"] == ["12, Station Road", "Anand, Gujarat - 388001"]
        assert client.post("/api/salary/current/company/missing").status_code == 404

    def test_save_load_delete_and_pdf(self, client):
        client.put("/api/salary/current/income", json=[{"particular": "Basic Salary", "amount": 25000}])
        saved = client.post("/api/salary/slips")
        assert saved.status_code == 201
        slip_id = saved.json()["id"]

        client.post("/api/salary/current/reset")
        assert client.get("/api/salary/current").json()["total_income"] == 0

        loaded = client.post(f"/api/salary/slips/{slip_id}/load").json()
        assert loaded["total_income"] == 25000

        pdf = client.get(f"/api/salary/slips/{slip_id}/pdf")
        assert pdf.status_code == 200
        assert pdf.headers["content-type"] == "application/pdf"
        assert pdf.content.startswith(b"%PDF")

        current_pdf = client.post("/api/salary/current/pdf")
        assert current_pdf.content.startswith(b"%PDF")

        assert client.get("/api/salary/slips").json()["total"] == 1
        assert client.delete(f"/api/salary/slips/{slip_id}").status_code == 204
        assert client.get(f"/api/salary/slips/{slip_id}/pdf").status_code == 404

    def test_export_import(self, client):
        client.post("/api/salary/slips")
        exported = client.get("/api/salary/export").json()
        assert len(exported["slips"]) == 1

        client.post("/api/salary/import", json={"current": exported["current"], "slips": []})
        assert client.get("/api/salary/slips").json()["total"] == 0
        client.post("/api/salary/import", json=exported)
        assert client.get("/api/salary/slips").json()["total"] == 1
