# tests/test_orders_api.py
from uuid import uuid4

from app.payments.base import SUCCEEDED


def place_order(client, order_payload, lines, **kwargs):
    response = client.post("/api/orders", json=order_payload(lines, **kwargs))
    assert response.status_code == 201, response.text
    return response.json()


def confirm(client, body):
    return client.post(
        "/api/orders/confirm",
        json={
            "paymentIntentId": body["order"]["paymentIntentId"],
            "orderNumber": body["orderNumber"],
        },
    )


class TestCheckoutFlow:
    def test_checkout_pay_and_track(self, client, gateway, medicines, order_payload):
        acetaminophen = medicines["Acetaminophen 500mg"]
        vitamin_d = medicines["Vitamin D3 2000 IU"]

        body = place_order(client, order_payload, [(acetaminophen, 2), (vitamin_d, 1)])
        order_number = body["orderNumber"]
        assert body["order"]["total"] == "41.97"
        assert body["order"]["status"] == "pending"
        assert body["clientSecret"]
        assert len(body["order"]["items"]) == 2

        gateway.set_status(body["order"]["paymentIntentId"], SUCCEEDED)
        response = confirm(client, body)
        assert response.status_code == 200
        confirmed = response.json()
        assert confirmed["success"] is True
        assert confirmed["trackingNumber"].startswith("TRK")

        stock = client.get(f"/api/medicines/{acetaminophen.id}").json()["stockCount"]
        assert stock == 148
        stock = client.get(f"/api/medicines/{vitamin_d.id}").json()["stockCount"]
        assert stock == 199

        tracking = client.get(f"/api/orders/track/{order_number}")
        assert tracking.status_code == 200
        view = tracking.json()
        assert view["orderNumber"] == order_number
        assert view["status"] == "confirmed"
        assert view["trackingNumber"] == confirmed["trackingNumber"]
        assert view["orderTotal"] == "41.97"
        assert view["customerInfo"]["email"] == "jane@example.com"
        assert [s["status"] for s in view["progressSteps"]] == [
            "Order Placed",
            "Processing",
            "Shipped",
            "In Transit",
            "Out for Delivery",
            "Delivered",
        ]
        assert [s["completed"] for s in view["progressSteps"]] == [
            True, True, False, False, False, False,
        ]

        again = client.get(f"/api/orders/track/{order_number}").json()
        assert again["progressSteps"] == view["progressSteps"]
        assert again["trackingNumber"] == view["trackingNumber"]

    def test_confirm_is_repeatable(self, client, gateway, medicines, order_payload):
        acetaminophen = medicines["Acetaminophen 500mg"]
        body = place_order(client, order_payload, [(acetaminophen, 1)])
        gateway.set_status(body["order"]["paymentIntentId"], SUCCEEDED)

        first = confirm(client, body).json()
        second = confirm(client, body).json()

        assert first["trackingNumber"] == second["trackingNumber"]
        stock = client.get(f"/api/medicines/{acetaminophen.id}").json()["stockCount"]
        assert stock == 149

    def test_pending_order_can_be_tracked(self, client, medicines, order_payload):
        body = place_order(client, order_payload, [(medicines["Metformin 500mg"], 1)])

        view = client.get(f"/api/orders/track/{body['orderNumber']}").json()
        assert view["status"] == "pending"
        assert [s["completed"] for s in view["progressSteps"]][:2] == [True, False]


class TestCheckoutErrors:
    def test_empty_cart(self, client, order_payload):
        response = client.post("/api/orders", json=order_payload([]))
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation error"
        assert body["errors"]

    def test_invalid_email(self, client, medicines, order_payload):
        payload = order_payload([(medicines["Metformin 500mg"], 1)], email="not-an-email")
        response = client.post("/api/orders", json=payload)
        assert response.status_code == 400

    def test_insufficient_stock(self, client, medicines, order_payload):
        response = client.post(
            "/api/orders",
            json=order_payload([(medicines["Amoxicillin 500mg"], 50)]),
        )
        assert response.status_code == 400
        assert response.json() == {
            "message": "Insufficient stock for 'Amoxicillin 500mg'. Available: 45, Requested: 50"
        }

    def test_unknown_medicine(self, client, gateway):
        medicine_id = str(uuid4())
        payload = {
            "items": [{"medicineId": medicine_id, "quantity": 1}],
            "customerInfo": {"email": "jane@example.com", "name": "Jane Doe"},
            "shippingAddress": "12 Elm Street, Springfield",
        }
        response = client.post("/api/orders", json=payload)
        assert response.status_code == 400
        assert response.json() == {"message": f"Medicine not found: {medicine_id}"}
        assert gateway.intents == {}

    def test_payment_provider_down(self, client, gateway, medicines, order_payload):
        gateway.fail_requests = True
        response = client.post(
            "/api/orders",
            json=order_payload([(medicines["Metformin 500mg"], 1)]),
        )
        assert response.status_code == 502
        assert response.json() == {"message": "Payment provider unavailable"}

    def test_unpaid_confirm(self, client, medicines, order_payload):
        body = place_order(client, order_payload, [(medicines["Metformin 500mg"], 1)])

        response = confirm(client, body)
        assert response.status_code == 400
        assert response.json() == {"message": "Payment not successful"}

        order = client.get(f"/api/orders/{body['orderNumber']}").json()
        assert order["status"] == "pending"
        assert order["trackingNumber"] is None


class TestOrderLookup:
    def test_track_unknown_order(self, client):
        response = client.get("/api/orders/track/ORD-2026-000000")
        assert response.status_code == 404
        assert response.json() == {"message": "Order not found: ORD-2026-000000"}

    def test_get_order(self, client, medicines, order_payload):
        body = place_order(client, order_payload, [(medicines["Metformin 500mg"], 2)])

        response = client.get(f"/api/orders/{body['orderNumber']}")
        assert response.status_code == 200
        order = response.json()
        assert order["total"] == "37.00"
        assert order["items"][0]["medicineName"] == "Metformin 500mg"
        assert order["items"][0]["price"] == "18.50"

    def test_list_orders_by_email(self, client, medicines, order_payload):
        metformin = medicines["Metformin 500mg"]
        place_order(client, order_payload, [(metformin, 1)], email="sam@example.com")
        place_order(client, order_payload, [(metformin, 1)], email="sam@example.com")
        place_order(client, order_payload, [(metformin, 1)], email="kim@example.com")

        response = client.get("/api/orders", params={"email": "sam@example.com"})
        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_list_orders_requires_email(self, client):
        response = client.get("/api/orders")
        assert response.status_code == 400
        assert response.json()["message"] == "Validation error"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_unknown_route(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}
