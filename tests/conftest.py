import os

os.environ.setdefault("DRAFT_AUTOSAVE", "false")

import pytest
from fastapi.testclient import TestClient

from payslip.core import store
from payslip.main import app


@pytest.fixture
def client():
    store.reset()
    with TestClient(app) as c:
        yield c


@pytest.fixture
def company_payload():
    return {
        "name": "Numeric Labs",
        "email": "hr@numericlabs.in",
        "phone": "9876543210",
        "gstin": "24AABCN1234F1Z5",
        "pan": "AABCN1234F",
        "addresses": [
            {"line1": "12, Station Road", "city": "Anand", "state": "Gujarat", "pincode": "388001", "is_primary": True}
        ],
    }
