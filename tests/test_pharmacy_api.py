# tests/test_pharmacy_api.py
from uuid import uuid4

import pytest


@pytest.fixture
def prescription(client) -> dict:
    response = client.post(
        "/api/pharmacy/prescription",
        json={
            "patientName": "Ali Khan",
            "patientEmail": "ali@example.com",
            "doctorName": "Dr. Rivera",
            "doctorPhone": "555-222-3333",
            "medications": "Lisinopril 10mg, once daily",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def consultation(client) -> dict:
    response = client.post(
        "/api/pharmacy/consultation",
        json={
            "patientName": "Ali Khan",
            "patientEmail": "ali@example.com",
            "patientPhone": "555-222-4444",
            "consultationType": "drug-interaction",
            "preferredDate": "2026-10-21",
            "preferredTime": "14:00",
            "questions": "Can I take ibuprofen with lisinopril?",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestPrescriptions:
    def test_submit(self, prescription):
        assert prescription["status"] == "pending"
        assert prescription["notes"] is None

    def test_list_by_email(self, client, prescription):
        response = client.get(
            "/api/pharmacy/prescriptions", params={"email": "ali@example.com"}
        )
        assert [p["id"] for p in response.json()] == [prescription["id"]]

        response = client.get(
            "/api/pharmacy/prescriptions", params={"email": "nobody@example.com"}
        )
        assert response.json() == []

    def test_verify(self, client, prescription):
        response = client.patch(
            f"/api/pharmacy/prescriptions/{prescription['id']}",
            json={"status": "verified", "notes": "Confirmed with prescriber"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "verified"
        assert body["notes"] == "Confirmed with prescriber"

    def test_unknown_status(self, client, prescription):
        response = client.patch(
            f"/api/pharmacy/prescriptions/{prescription['id']}",
            json={"status": "shipped"},
        )
        assert response.status_code == 400

    def test_unknown_prescription(self, client):
        response = client.patch(
            f"/api/pharmacy/prescriptions/{uuid4()}", json={"status": "verified"}
        )
        assert response.status_code == 404
        assert response.json() == {"message": "Prescription not found"}

    def test_medications_required(self, client):
        response = client.post(
            "/api/pharmacy/prescription",
            json={
                "patientName": "Ali Khan",
                "patientEmail": "ali@example.com",
                "doctorName": "Dr. Rivera",
                "doctorPhone": "555-222-3333",
                "medications": "short",
            },
        )
        assert response.status_code == 400


class TestConsultations:
    def test_request(self, consultation):
        assert consultation["status"] == "scheduled"
        assert consultation["consultationType"] == "drug-interaction"

    def test_list_by_email(self, client, consultation):
        response = client.get(
            "/api/pharmacy/consultations", params={"email": "ali@example.com"}
        )
        assert [c["id"] for c in response.json()] == [consultation["id"]]

    def test_complete(self, client, consultation):
        response = client.patch(
            f"/api/pharmacy/consultations/{consultation['id']}",
            json={"status": "completed", "pharmacistNotes": "Avoid NSAIDs."},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "completed"
        assert body["pharmacistNotes"] == "Avoid NSAIDs."

    def test_unknown_type(self, client):
        response = client.post(
            "/api/pharmacy/consultation",
            json={
                "patientName": "Ali Khan",
                "patientEmail": "ali@example.com",
                "patientPhone": "555-222-4444",
                "consultationType": "surgery",
                "preferredDate": "2026-10-21",
                "preferredTime": "14:00",
                "questions": "Is this covered by insurance?",
            },
        )
        assert response.status_code == 400
