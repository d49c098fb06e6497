from bookstore_api.core.security import create_access_token, create_refresh_token

from tests.conftest import create_account, login


def test_register_assigns_customer_role(db_client):
    response = db_client.post("/api/auth/register", json={"email": "reader@gmail.com", "password": "secret1"})
    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "reader@gmail.com"
    assert body["roles"] == ["Customer"]
    assert body["is_active"] is True


def test_register_duplicate_email(db_client):
    payload = {"email": "reader@gmail.com", "password": "secret1"}
    assert db_client.post("/api/auth/register", json=payload).status_code == 201
    response = db_client.post("/api/auth/register", json=payload)
    assert response.status_code == 400


def test_register_short_password(db_client):
    response = db_client.post("/api/auth/register", json={"email": "reader@gmail.com", "password": "123"})
    assert response.status_code == 400
    assert response.json()["error"]["type"] == "validation_error"


def test_login_wrong_password(db_client):
    create_account(db_client, "reader@gmail.com", "secret1")
    response = db_client.post("/api/auth/login", data={"username": "reader@gmail.com", "password": "nope"})
    assert response.status_code == 401


def test_me_returns_roles(db_client, admin_headers):
    response = db_client.get("/api/auth/me", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["roles"] == ["Administrator"]


def test_me_requires_token(db_client):
    response = db_client.get("/api/auth/me")
    assert response.status_code == 401
    assert "X-Correlation-ID" in response.headers


def test_refresh_token_cannot_authenticate_requests(db_client):
    user_id = create_account(db_client, "reader@gmail.com", "secret1")
    headers = {"Authorization": f"Bearer {create_refresh_token(str(user_id))}"}
    assert db_client.get("/api/auth/me", headers=headers).status_code == 401


def test_token_for_unknown_user(db_client):
    headers = {"Authorization": f"Bearer {create_access_token('999')}"}
    assert db_client.get("/api/auth/me", headers=headers).status_code == 401


def test_refresh_issues_new_pair(db_client):
    create_account(db_client, "reader@gmail.com", "secret1", "Customer")
    tokens = db_client.post(
        "/api/auth/login", data={"username": "reader@gmail.com", "password": "secret1"}
    ).json()

    response = db_client.post("/api/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert response.status_code == 200
    assert response.json()["token_type"] == "bearer"

    rejected = db_client.post("/api/auth/refresh", json={"refresh_token": tokens["access_token"]})
    assert rejected.status_code == 401


def test_customer_is_forbidden_from_author_catalog(db_client, customer_headers):
    assert db_client.get("/api/authors", headers=customer_headers).status_code == 403
    assert db_client.get("/api/books", headers=customer_headers).status_code == 200


def test_login_helper_yields_bearer_header(db_client):
    create_account(db_client, "staff@bookstore.com", "P@ssword1", "Administrator")
    headers = login(db_client, "staff@bookstore.com", "P@ssword1")
    assert headers["Authorization"].startswith("Bearer ")
