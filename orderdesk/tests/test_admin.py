from .conftest import auth_header, signup


def test_admin_profiles_lists_every_user(client):
    user_a, token_a = signup(client, "a@x.com", "p1")
    user_b, _ = signup(client, "b@x.com", "p2")

    response = client.get("/api/admin/profiles", headers=auth_header(token_a))
    assert response.status_code == 200
    profiles = {p["user_id"]: p for p in response.json()}
    assert set(profiles) == {user_a, user_b}
    assert profiles[user_b]["email"] == "b@x.com"
    assert profiles[user_b]["joined_at"]


def test_admin_orders_lists_all_orders(client):
    _, token_a = signup(client, "a@x.com", "p1")
    _, token_b = signup(client, "b@x.com", "p2")
    for token in (token_a, token_b):
        client.post(
            "/api/orders", json={"product_id": "sku", "quantity": 1, "total_price": 2}, headers=auth_header(token)
        )

    response = client.get("/api/admin/orders", headers=auth_header(token_a))
    assert response.status_code == 200
    assert len(response.json()) == 2


def test_admin_endpoints_require_token(client):
    assert client.get("/api/admin/profiles").status_code == 401
    assert client.get("/api/admin/orders", headers=auth_header("bad")).status_code == 403
