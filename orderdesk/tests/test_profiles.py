import pytest

from ..core.exceptions import NotFoundError
from ..profile import crud
from ..user.models import User
from .conftest import auth_header, signup


def test_get_own_profile(client):
    user_id, token = signup(client, "a@x.com", "p1", address="1 Main St")

    response = client.get(f"/api/profiles/{user_id}", headers=auth_header(token))
    assert response.status_code == 200
    profile = response.json()
    assert profile["user_id"] == user_id
    assert profile["address"] == "1 Main St"
    assert profile["created_at"]


def test_other_users_profile_is_forbidden(client):
    _, token_a = signup(client, "a@x.com", "p1")
    user_b, _ = signup(client, "b@x.com", "p2")

    assert client.get(f"/api/profiles/{user_b}", headers=auth_header(token_a)).status_code == 403
    assert client.get("/api/profiles/does-not-exist", headers=auth_header(token_a)).status_code == 403
    response = client.put(f"/api/profiles/{user_b}", json={"address": "x"}, headers=auth_header(token_a))
    assert response.status_code == 403


def test_profile_requires_token(client):
    user_id, _ = signup(client)
    assert client.get(f"/api/profiles/{user_id}").status_code == 401


def test_partial_update_keeps_other_fields(client):
    user_id, token = signup(client, "a@x.com", "p1", full_name="Ann", address="1 Main St", gender="f")

    response = client.put(f"/api/profiles/{user_id}", json={"phone_number": "555"}, headers=auth_header(token))
    assert response.status_code == 200

    profile = client.get(f"/api/profiles/{user_id}", headers=auth_header(token)).json()
    assert profile["phone_number"] == "555"
    assert profile["full_name"] == "Ann"
    assert profile["address"] == "1 Main St"
    assert profile["gender"] == "f"


def test_update_ignores_explicit_nulls(client):
    user_id, token = signup(client, "a@x.com", "p1", address="1 Main St")

    client.put(f"/api/profiles/{user_id}", json={"address": None, "gender": "m"}, headers=auth_header(token))

    profile = client.get(f"/api/profiles/{user_id}", headers=auth_header(token)).json()
    assert profile["address"] == "1 Main St"
    assert profile["gender"] == "m"


def test_update_prefers_snake_case_spelling(client):
    user_id, token = signup(client)

    client.put(
        f"/api/profiles/{user_id}",
        json={"full_name": "Snake", "fullName": "Camel", "phoneNumber": "777"},
        headers=auth_header(token),
    )

    profile = client.get(f"/api/profiles/{user_id}", headers=auth_header(token)).json()
    assert profile["full_name"] == "Snake"
    assert profile["phone_number"] == "777"


def test_referral_id_is_immutable(client):
    user_id, token = signup(client)
    before = client.get(f"/api/profiles/{user_id}", headers=auth_header(token)).json()["referral_id"]

    client.put(f"/api/profiles/{user_id}", json={"referral_id": "REF-HACKED"}, headers=auth_header(token))

    after = client.get(f"/api/profiles/{user_id}", headers=auth_header(token)).json()["referral_id"]
    assert after == before


def test_missing_profile_raises_not_found(db_session):
    user = User(email="lonely@x.com", password_hash="x")
    db_session.add(user)
    db_session.commit()

    with pytest.raises(NotFoundError):
        crud.get_profile(db_session, user.id)
    with pytest.raises(NotFoundError):
        crud.update_profile(db_session, user.id, {"address": "x"})


def test_build_profile_defaults():
    profile = crud.build_profile("user-1", "bob@x.com", {"gender": "m", "unknown": "ignored"})
    assert profile.user_id == "user-1"
    assert profile.full_name == "bob"
    assert profile.gender == "m"
    assert profile.address is None
    assert profile.referral_id.startswith(crud.REFERRAL_PREFIX)


def test_blank_snake_case_falls_back_to_camel_case(client):
    user_id, token = signup(client, "a@x.com", "p1", full_name="Ann")

    client.put(f"/api/profiles/{user_id}", json={"full_name": "", "fullName": "Camel"}, headers=auth_header(token))

    profile = client.get(f"/api/profiles/{user_id}", headers=auth_header(token)).json()
    assert profile["full_name"] == "Camel"


def test_blank_update_keeps_stored_value(client):
    user_id, token = signup(client, "a@x.com", "p1", address="1 Main St")

    response = client.put(f"/api/profiles/{user_id}", json={"address": "", "phoneNumber": ""}, headers=auth_header(token))
    assert response.status_code == 200

    profile = client.get(f"/api/profiles/{user_id}", headers=auth_header(token)).json()
    assert profile["address"] == "1 Main St"
    assert profile["phone_number"] is None


def test_blank_signup_fields_are_stored_as_null(client):
    user_id, token = signup(client, "jane@x.com", "p1", full_name="", address="", gender="")

    profile = client.get(f"/api/profiles/{user_id}", headers=auth_header(token)).json()
    assert profile["full_name"] == "jane"
    assert profile["address"] is None
    assert profile["gender"] is None


def test_build_profile_treats_blank_as_null():
    profile = crud.build_profile("user-1", "bob@x.com", {"full_name": "", "address": ""})
    assert profile.full_name == "bob"
    assert profile.address is None
