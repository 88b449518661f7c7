# tests/test_catalog_api.py
from uuid import uuid4


class TestMedicines:
    def test_list_all(self, client):
        response = client.get("/api/medicines")
        assert response.status_code == 200
        names = [m["name"] for m in response.json()]
        assert len(names) == 6
        assert names == sorted(names)

    def test_all_category_means_no_filter(self, client):
        assert len(client.get("/api/medicines", params={"category": "all"}).json()) == 6

    def test_filter_by_category(self, client):
        response = client.get("/api/medicines", params={"category": "vitamins"})
        assert {m["name"] for m in response.json()} == {
            "Omega-3 Fish Oil",
            "Vitamin D3 2000 IU",
        }

    def test_search_is_case_insensitive(self, client):
        response = client.get("/api/medicines", params={"search": "HEART"})
        assert {m["name"] for m in response.json()} == {
            "Lisinopril 10mg",
            "Omega-3 Fish Oil",
        }

    def test_search_matches_brand(self, client):
        response = client.get("/api/medicines", params={"search": "nordic"})
        assert [m["name"] for m in response.json()] == ["Omega-3 Fish Oil"]

    def test_category_and_search_combine(self, client):
        response = client.get(
            "/api/medicines", params={"category": "cardiovascular", "search": "omega"}
        )
        assert response.json() == []

    def test_get_medicine(self, client, medicines):
        lisinopril = medicines["Lisinopril 10mg"]
        body = client.get(f"/api/medicines/{lisinopril.id}").json()

        assert body["name"] == "Lisinopril 10mg"
        assert body["price"] == "24.99"
        assert body["prescriptionRequired"] is True
        assert body["inStock"] is True
        assert body["stockCount"] == 75

    def test_get_unknown_medicine(self, client):
        missing = uuid4()
        response = client.get(f"/api/medicines/{missing}")
        assert response.status_code == 404
        assert response.json() == {"message": f"Medicine not found: {missing}"}

    def test_malformed_id(self, client):
        response = client.get("/api/medicines/not-a-uuid")
        assert response.status_code == 400


class TestClinicServices:
    def test_list_services(self, client):
        response = client.get("/api/services")
        assert response.status_code == 200
        assert [s["name"] for s in response.json()] == [
            "Cardiology Consultation",
            "General Medicine",
            "Mental Health Counseling",
            "Pediatric Care",
        ]

    def test_unavailable_services_are_hidden(self, client, db):
        from app.models.clinic_service import ClinicService

        service = db.query(ClinicService).filter_by(name="Pediatric Care").one()
        service.available = False
        db.commit()

        names = [s["name"] for s in client.get("/api/services").json()]
        assert "Pediatric Care" not in names
