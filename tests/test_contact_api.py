# tests/test_contact_api.py


def test_send_and_list_messages(client):
    response = client.post(
        "/api/contact",
        json={
            "name": "Lee Park",
            "email": "lee@example.com",
            "subject": "Parking",
            "message": "Is there parking near the clinic entrance?",
        },
    )
    assert response.status_code == 201
    created = response.json()
    assert created["status"] == "unread"
    assert created["preferredLanguage"] == "english"

    listed = client.get("/api/contact").json()
    assert [m["id"] for m in listed] == [created["id"]]


def test_message_too_short(client):
    response = client.post(
        "/api/contact",
        json={"name": "Lee Park", "email": "lee@example.com", "message": "Hi"},
    )
    assert response.status_code == 400
    errors = response.json()["errors"]
    assert [e["field"] for e in errors] == ["message"]
