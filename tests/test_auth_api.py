"""
Sign-up, sign-in and sign-out
"""
import pytest

from tests import factories


def test_sign_up(client):
    response = client.post("/auth/sign-up", json={"email": "New.Guest@Example.com", "password": "secret123"})

    assert response.status_code == 201
    assert response.get_json()["email"] == "new.guest@example.com"


def test_sign_up_duplicate_email(client, user):
    response = client.post("/auth/sign-up", json={"email": user.email, "password": "secret123"})

    assert response.status_code == 409


def test_sign_up_invalid_data(client):
    assert client.post("/auth/sign-up", json={"email": "not-an-email", "password": "secret123"}).status_code == 400
    assert client.post("/auth/sign-up", json={"email": "ok@example.com", "password": "123"}).status_code == 400
    assert client.post("/auth/sign-up", data="nope").status_code == 400


def test_sign_in_wrong_password(client, user):
    response = client.post("/auth/sign-in", json={"email": user.email, "password": "wrong-password"})

    assert response.status_code == 401


def test_sign_in_missing_fields(client):
    response = client.post("/auth/sign-in", json={"email": "someone@example.com"})

    assert response.status_code == 400


def test_sign_in_token_opens_hotels(client, eligible_user):
    factories.create_hotel()

    response = client.post("/auth/sign-in", json={"email": eligible_user.email, "password": "password123"})
    assert response.status_code == 200
    body = response.get_json()
    assert body["user"]["id"] == eligible_user.id

    headers = {"Authorization": f"Bearer {body['token']}"}
    assert client.get("/hotels", headers=headers).status_code == 200


def test_sign_out_closes_session(client, eligible_user, auth_headers):
    factories.create_hotel()

    assert client.post("/auth/sign-out", headers=auth_headers).status_code == 200
    assert client.get("/hotels", headers=auth_headers).status_code == 401
    assert client.post("/auth/sign-out", headers=auth_headers).status_code == 401


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json()["database"] == "working"


@pytest.mark.parametrize("path", ["/auth/sign-up", "/auth/sign-in"])
def test_non_object_body(client, path):
    response = client.post(path, json=[1, 2])

    assert response.status_code == 400


@pytest.mark.parametrize("body", [
    {"email": 5, "password": "secret123"},
    {"email": "guest@example.com", "password": 123456},
])
def test_sign_in_non_text_credentials(client, user, body):
    response = client.post("/auth/sign-in", json=body)

    assert response.status_code == 400


def test_sign_up_non_text_password(client):
    response = client.post("/auth/sign-up", json={"email": "guest@example.com", "password": 1234567})

    assert response.status_code == 400
