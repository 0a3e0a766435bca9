"""Donor profile and donor search integration tests."""
import pytest

from bloodlink.models.donor_profile import DonorProfile

from tests.conftest import registration_form


async def _register_user(async_client, email="dana@example.com", location="Sunnyvale"):
    r = await async_client.post("/api/register", data=registration_form(email=email, location=location))
    assert r.status_code == 201, r.text
    return r.json()["userId"]


def _profile_payload(user_id, **overrides):
    payload = {
        "userId": user_id,
        "age": "29",
        "bloodType": "O+",
        "lastDonation": "2024-01-15",
        "sickness": "none",
        "medication": "none",
        "donationType": "unpaid",
        "contactPhone": "555-0100",
        "donationNumber": 3,
    }
    payload.update(overrides)
    return payload


async def test_create_profile_defaults(async_client):
    user_id = await _register_user(async_client)

    r = await async_client.post("/api/donor-profile", json=_profile_payload(user_id))
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["message"] == "Profile created successfully"
    profile = body["profile"]
    assert profile["id"]
    assert profile["userId"] == user_id
    assert profile["available"] is True
    assert profile["bloodType"] == "O+"
    # Copied from the registration when not given
    assert profile["location"] == "Sunnyvale"


async def test_create_profile_twice_is_rejected(async_client, db_session):
    user_id = await _register_user(async_client)
    r = await async_client.post("/api/donor-profile", json=_profile_payload(user_id))
    assert r.status_code == 201

    r = await async_client.post(
        "/api/donor-profile",
        json=_profile_payload(user_id, bloodType="AB-", available=False),
    )
    assert r.status_code == 400
    assert r.json()["error"] == "ProfileAlreadyExists"

    profiles = db_session.query(DonorProfile).filter(DonorProfile.user_id == user_id).all()
    assert len(profiles) == 1
    assert profiles[0].blood_type == "O+"
    assert profiles[0].available is True


async def test_create_profile_validation(async_client):
    user_id = await _register_user(async_client)

    r = await async_client.post("/api/donor-profile", json=_profile_payload(user_id, donationType="free"))
    assert r.status_code == 400
    body = r.json()
    assert body["error"] == "ValidationError"
    assert "donationType" in body["errors"]

    payload = _profile_payload(user_id)
    del payload["userId"]
    r = await async_client.post("/api/donor-profile", json=payload)
    assert r.status_code == 400
    assert "userId" in r.json()["errors"]


async def test_update_profile(async_client):
    user_id = await _register_user(async_client)
    r = await async_client.post("/api/donor-profile", json=_profile_payload(user_id))
    profile_id = r.json()["profile"]["id"]

    r = await async_client.put(
        f"/api/donor-profile/{profile_id}",
        json={"available": False, "medication": "iron supplements", "userId": 999},
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["message"] == "Profile updated successfully"
    updated = body["profile"]
    assert updated["available"] is False
    assert updated["medication"] == "iron supplements"
    # Untouched fields and ownership survive
    assert updated["bloodType"] == "O+"
    assert updated["userId"] == user_id

    r = await async_client.put(f"/api/donor-profile/{profile_id}", json={"donationType": "sometimes"})
    assert r.status_code == 400
    assert "donationType" in r.json()["errors"]


async def test_profile_fields_longer_than_columns_are_rejected(async_client):
    user_id = await _register_user(async_client)
    r = await async_client.post(
        "/api/donor-profile",
        json=_profile_payload(user_id, bloodType="AB+ or O-", contactPhone="x" * 21),
    )
    assert r.status_code == 400
    assert set(r.json()["errors"]) == {"bloodType", "contactPhone"}

    r = await async_client.post("/api/donor-profile", json=_profile_payload(user_id))
    profile_id = r.json()["profile"]["id"]
    r = await async_client.put(
        f"/api/donor-profile/{profile_id}",
        json={"age": "twenty-nine years", "lastDonation": "y" * 51},
    )
    assert r.status_code == 400
    assert set(r.json()["errors"]) == {"age", "lastDonation"}


async def test_update_unknown_profile(async_client):
    r = await async_client.put("/api/donor-profile/4242", json={"available": False})
    assert r.status_code == 404
    assert r.json()["error"] == "ProfileNotFound"


async def test_get_profile_by_user(async_client):
    user_id = await _register_user(async_client)

    r = await async_client.get(f"/api/donor-profile/{user_id}")
    assert r.status_code == 404
    assert r.json()["error"] == "ProfileNotFound"

    await async_client.post("/api/donor-profile", json=_profile_payload(user_id))
    r = await async_client.get(f"/api/donor-profile/{user_id}")
    assert r.status_code == 200
    assert r.json()["userId"] == user_id


@pytest.fixture
async def donors(async_client):
    """Three donors: O+ in Albany (available), O+ in Boston (unavailable), A- in Sunnyvale."""
    rows = [
        ("albany@example.com", "Albany", "O+", True),
        ("boston@example.com", "Boston", "O+", False),
        ("sunny@example.com", "Sunnyvale", "A-", True),
    ]
    created = {}
    for email, location, blood_type, available in rows:
        user_id = await _register_user(async_client, email=email, location=location)
        r = await async_client.post(
            "/api/donor-profile",
            json=_profile_payload(user_id, bloodType=blood_type, available=available),
        )
        assert r.status_code == 201, r.text
        created[location] = r.json()["profile"]
    return created


async def test_list_all_donors(async_client, donors):
    r = await async_client.get("/api/donors")
    assert r.status_code == 200
    assert [d["location"] for d in r.json()] == ["Albany", "Boston", "Sunnyvale"]

    r = await async_client.get("/api/donors", params={"bloodType": "all"})
    assert len(r.json()) == 3


async def test_filter_by_blood_type(async_client, donors):
    r = await async_client.get("/api/donors", params={"bloodType": "O+"})
    assert r.status_code == 200
    result = r.json()
    assert len(result) == 2
    assert all(d["bloodType"] == "O+" for d in result)


async def test_filter_available_only(async_client, donors):
    r = await async_client.get("/api/donors", params={"availableOnly": "true"})
    result = r.json()
    assert {d["location"] for d in result} == {"Albany", "Sunnyvale"}
    assert all(d["available"] is True for d in result)

    r = await async_client.get("/api/donors", params={"availableOnly": "false"})
    assert len(r.json()) == 3


async def test_filter_search_term(async_client, donors):
    r = await async_client.get("/api/donors", params={"searchTerm": "ny"})
    assert {d["location"] for d in r.json()} == {"Albany", "Sunnyvale"}

    r = await async_client.get("/api/donors", params={"searchTerm": "BOS"})
    assert [d["location"] for d in r.json()] == ["Boston"]

    # Matches blood type too
    r = await async_client.get("/api/donors", params={"searchTerm": "a-"})
    assert [d["location"] for d in r.json()] == ["Sunnyvale"]


async def test_filters_combine(async_client, donors):
    r = await async_client.get(
        "/api/donors",
        params={"bloodType": "O+", "availableOnly": "true", "searchTerm": "alb"},
    )
    assert [d["location"] for d in r.json()] == ["Albany"]
