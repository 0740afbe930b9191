"""
Tests for the report web API
"""

import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi.testclient import TestClient

from web.app import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


class TestHealth:

    def test_root(self, client):
        assert client.get("/").json() == {"status": "ok"}

    def test_api_health(self, client):
        data = client.get("/api/health").json()
        assert data["status"] == "healthy"


class TestReportEndpoint:

    def test_report(self, client):
        response = client.post("/api/report", json={
            "lines": [
                "REALESTATE#Budapest#2500#100#4#CONDOMINIUM",
                "PANEL#Budapest#abc#70#3#CONDOMINIUM#4#false",
                "REALESTATE#Debrecen#2200#120#5#FAMILYHOUSE",
            ],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["lines"][0] == "Average square meter price: 2350.00"
        assert data["summary"]["cheapest_total_price"] == 316800
        assert data["load"]["stored"] == 2
        assert data["load"]["rejected"] == 1
        assert data["diagnostics"][0]["code"] == "MALFORMED_RECORD"
        assert data["text"] == "\n".join(data["lines"]) + "\n"

    def test_report_with_discount_and_city(self, client):
        response = client.post("/api/report", json={
            "lines": ["REALESTATE#Debrecen#2200#120#5#FAMILYHOUSE"],
            "city": "Debrecen",
            "discount": 10,
        })

        data = response.json()
        assert data["summary"]["average_price_per_sqm"] == 1980.0
        assert data["summary"]["most_expensive_in_city"]["city"] == "Debrecen"

    def test_empty_lines(self, client):
        data = client.post("/api/report", json={"lines": []}).json()
        assert data["summary"]["property_count"] == 0
        assert data["summary"]["most_expensive_in_city"] is None

    def test_invalid_body(self, client):
        assert client.post("/api/report", json={"lines": "oops"}).status_code == 422

    def test_zero_rooms_in_diagnostics(self, client):
        response = client.post("/api/report", json={
            "lines": ["REALESTATE#Budapest#2500#100#0#CONDOMINIUM"],
        })

        codes = [d["code"] for d in response.json()["diagnostics"]]
        assert "DEGENERATE_ARITHMETIC" in codes

    def test_sample_report(self, client):
        data = client.get("/api/report/sample").json()
        assert data["summary"]["property_count"] == 9
        assert data["load"]["source"] == "built-in sample data"

    def test_pdf_report(self, client):
        response = client.post("/api/report/pdf", json={
            "lines": ["REALESTATE#Budapest#2500#100#4#CONDOMINIUM"],
        })
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")
