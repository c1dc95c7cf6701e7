"""
Lead API: storing and reading reservation call-back requests.
"""
from fastapi.testclient import TestClient

LEAD = {
    "full_name": "Ayşe Yılmaz",
    "phone": "+90 555 000 00 00",
    "hotel_name": "Hotel 1",
    "room_type": "Standard",
    "rate_plan": "All Inclusive",
    "room_count": 2,
    "total_price": "4.500 TL",
    "date_range": "10 Temmuz Cuma - 13 Temmuz Pazartesi",
    "party_summary": "3 Yetişkin 1 Çocuk (5 Yaş)",
    "nights_days": "3 Gece 4 Gün",
}


class TestLeads:

    def test_create_lead(self, client: TestClient):
        response = client.post("/api/leads", json=LEAD)

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "not_called"
        assert data["room_count"] == 2
        assert data["reservation_no"]

    def test_get_lead(self, client: TestClient):
        created = client.post("/api/leads", json=LEAD).json()

        response = client.get(f"/api/leads/{created['reservation_no']}")

        assert response.status_code == 200
        assert response.json()["full_name"] == "Ayşe Yılmaz"

    def test_unknown_lead(self, client: TestClient):
        assert client.get("/api/leads/does-not-exist").status_code == 404

    def test_name_and_phone_required(self, client: TestClient):
        response = client.post("/api/leads", json={**LEAD, "full_name": "", "phone": ""})

        assert response.status_code == 422
