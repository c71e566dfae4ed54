from datetime import datetime

import pytest

from app.core.exceptions import InvalidFieldException, MissingFieldsException
from app.repositories.donation_repo import DonationRepository
from app.services.donation_service import DonationService


def _login(client, phone="9990001111", password="pw123"):
    return client.post("/api/login", json={"phone": phone, "password": password}).json()


def test_full_donation_scenario(client):
    response = client.post(
        "/api/register",
        json={"name": "Alice", "phone": "9990001111", "password": "pw123", "address": "Addr"},
    )
    assert response.status_code == 201

    login = client.post("/api/login", json={"phone": "9990001111", "password": "pw123"})
    assert login.status_code == 200
    assert login.json()["user"]["name"] == "Alice"

    created = client.post(
        "/api/donations",
        json={
            "phone": "9990001111",
            "items": "2 shirts",
            "condition": "good",
            "pickup_date": "2025-01-01",
            "pickup_slot": "morning",
        },
    )
    assert created.status_code == 201
    assert created.json()["success"] is True
    assert created.json()["donationId"] == 1

    listed = client.get("/api/donations/9990001111")
    assert listed.status_code == 200
    donations = listed.json()["donations"]
    assert len(donations) == 1
    assert donations[0]["items"] == "2 shirts"
    assert donations[0]["condition"] == "good"
    assert donations[0]["pickup_date"] == "2025-01-01"
    assert donations[0]["pickup_slot"] == "morning"
    assert donations[0]["phone"] == "9990001111"


def test_camel_case_fields_from_web_client(client, registered_user):
    response = client.post(
        "/api/donations",
        json={
            "phone": "9990001111",
            "items": "1 saree",
            "condition": "new",
            "pickupDate": "2031-05-04",
            "pickupSlot": "evening",
        },
    )
    assert response.status_code == 201
    donation = client.get("/api/donations/9990001111").json()["donations"][0]
    assert donation["pickup_date"] == "2031-05-04"
    assert donation["pickup_slot"] == "evening"


def test_pickup_date_and_slot_are_optional(client):
    response = client.post(
        "/api/donations", json={"phone": "9990001111", "items": "3 jeans", "condition": "fair"}
    )
    assert response.status_code == 201
    donation = client.get("/api/donations/9990001111").json()["donations"][0]
    assert donation["pickup_date"] is None
    assert donation["pickup_slot"] is None


def test_list_is_newest_first(client):
    for n in range(5):
        client.post(
            "/api/donations",
            json={"phone": "9990001111", "items": f"{n} shirts", "condition": "good"},
        )
    donations = client.get("/api/donations/9990001111").json()["donations"]
    assert len(donations) == 5
    stamps = [datetime.fromisoformat(d["created_at"]) for d in donations]
    assert stamps == sorted(stamps, reverse=True)
    assert [d["items"] for d in donations] == [f"{n} shirts" for n in reversed(range(5))]


def test_list_only_returns_own_donations(client):
    client.post("/api/donations", json={"phone": "1111111111", "items": "a", "condition": "new"})
    client.post("/api/donations", json={"phone": "2222222222", "items": "b", "condition": "new"})
    donations = client.get("/api/donations/1111111111").json()["donations"]
    assert [d["items"] for d in donations] == ["a"]


def test_list_for_unknown_phone_is_empty(client):
    response = client.get("/api/donations/5555555555")
    assert response.status_code == 200
    assert response.json() == {"success": True, "donations": []}


@pytest.mark.parametrize("missing", ["phone", "items", "condition"])
def test_schedule_missing_required_field(client, missing):
    body = {"phone": "9990001111", "items": "2 shirts", "condition": "good"}
    body.pop(missing)
    response = client.post("/api/donations", json=body)
    assert response.status_code == 400
    assert response.json()["success"] is False
    assert client.get("/api/donations/9990001111").json()["donations"] == []


def test_schedule_unknown_condition(client):
    response = client.post(
        "/api/donations", json={"phone": "9990001111", "items": "2 shirts", "condition": "excellent"}
    )
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_schedule_with_own_token(client, registered_user):
    token = _login(client)["access_token"]
    response = client.post(
        "/api/donations",
        json={"phone": "9990001111", "items": "2 shirts", "condition": "good"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == 201


def test_token_for_another_user_is_forbidden(client, registered_user):
    token = _login(client)["access_token"]
    headers = {"Authorization": f"Bearer {token}"}
    response = client.post(
        "/api/donations",
        json={"phone": "8887776666", "items": "2 shirts", "condition": "good"},
        headers=headers,
    )
    assert response.status_code == 403
    assert client.get("/api/donations/8887776666", headers=headers).status_code == 403


def test_invalid_token_is_rejected(client):
    response = client.get("/api/donations/9990001111", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401


def test_service_n_schedules_are_listed(run_with_session):
    async def scenario(session):
        svc = DonationService(DonationRepository(session))
        ids = [await svc.schedule("9990001111", f"{n} kurtas", "good") for n in range(4)]
        return ids, await svc.list_for_user("9990001111")

    ids, donations = run_with_session(scenario)
    assert len(donations) == 4
    assert [d["id"] for d in donations] == list(reversed(ids))
    stamps = [d["created_at"] for d in donations]
    assert all(a >= b for a, b in zip(stamps, stamps[1:]))


def test_service_rejects_missing_fields_without_persisting(run_with_session):
    async def scenario(session):
        svc = DonationService(DonationRepository(session))
        with pytest.raises(MissingFieldsException):
            await svc.schedule("9990001111", None, "good")
        with pytest.raises(MissingFieldsException):
            await svc.schedule("9990001111", "2 shirts", None)
        with pytest.raises(MissingFieldsException):
            await svc.schedule("9990001111", "   ", "good")
        with pytest.raises(InvalidFieldException):
            await svc.schedule("9990001111", "2 shirts", "mint")
        return await svc.list_for_user("9990001111")

    assert run_with_session(scenario) == []
