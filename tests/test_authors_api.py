import logging

from bookstore_api.api.main import app
from bookstore_api.core.deps import get_current_active_user
from bookstore_api.core.settings import AppSettings, get_app_settings
from bookstore_api.db.models.catalog import Author

from tests.conftest import make_user

INTERNAL_ERROR_TEXT = "Something failed. Please contact IT Support"


def _add_author(repo, first_name="Jane", last_name="Doe", bio=None):
    author = Author(first_name=first_name, last_name=last_name, bio=bio)
    author.id = repo._next_id
    repo._next_id += 1
    repo.items[author.id] = author
    return author


def test_list_authors_empty(api_client):
    response = api_client.get("/api/authors")
    assert response.status_code == 200
    assert response.json() == []


def test_create_author_returns_created_entity(api_client, author_repo):
    response = api_client.post("/api/authors", json={"firstName": "Jane", "lastName": "Doe", "bio": "Novelist"})
    assert response.status_code == 201
    body = response.json()
    assert body == {"id": 1, "firstName": "Jane", "lastName": "Doe", "bio": "Novelist", "books": []}
    assert author_repo.items[1].first_name == "Jane"


def test_create_author_without_body(api_client, author_repo):
    response = api_client.post("/api/authors")
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Empty request was submitted"
    assert author_repo.calls == []


def test_create_author_invalid_body(api_client, author_repo):
    response = api_client.post("/api/authors", json={"firstName": "Jane"})
    assert response.status_code == 400
    assert response.json()["error"]["details"]
    assert "create" not in author_repo.calls


def test_create_author_storage_failure_is_plain_text(api_client, author_repo):
    author_repo.create_result = False
    response = api_client.post("/api/authors", json={"firstName": "Jane", "lastName": "Doe"})
    assert response.status_code == 500
    assert response.text == INTERNAL_ERROR_TEXT


def test_get_author(api_client, author_repo):
    _add_author(author_repo)
    response = api_client.get("/api/authors/1")
    assert response.status_code == 200
    assert response.json()["lastName"] == "Doe"


def test_get_missing_author(api_client):
    response = api_client.get("/api/authors/99")
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Not Found"


def test_get_author_with_non_numeric_id(api_client):
    response = api_client.get("/api/authors/abc")
    assert response.status_code == 400


def test_update_author(api_client, author_repo):
    _add_author(author_repo)
    response = api_client.put("/api/authors/1", json={"id": 1, "firstName": "Janet", "lastName": "Doe"})
    assert response.status_code == 204
    assert response.content == b""
    assert author_repo.items[1].first_name == "Janet"


def test_update_author_id_mismatch(api_client, author_repo):
    _add_author(author_repo)
    response = api_client.put("/api/authors/1", json={"id": 2, "firstName": "Janet", "lastName": "Doe"})
    assert response.status_code == 400
    assert author_repo.calls == []


def test_update_missing_author(api_client, author_repo):
    response = api_client.put("/api/authors/7", json={"id": 7, "firstName": "Janet", "lastName": "Doe"})
    assert response.status_code == 404
    assert "update" not in author_repo.calls


def test_delete_author(api_client, author_repo):
    _add_author(author_repo)
    response = api_client.delete("/api/authors/1")
    assert response.status_code == 204
    assert author_repo.items == {}


def test_delete_author_bad_id(api_client, author_repo):
    response = api_client.delete("/api/authors/0")
    assert response.status_code == 400
    assert author_repo.calls == []


def test_delete_missing_author(api_client):
    response = api_client.delete("/api/authors/5")
    assert response.status_code == 404


def test_reads_require_admin_by_default(api_client):
    app.dependency_overrides[get_current_active_user] = lambda: make_user("Customer")
    response = api_client.get("/api/authors")
    assert response.status_code == 403


def test_reads_open_when_flag_disabled(api_client):
    app.dependency_overrides[get_current_active_user] = lambda: make_user("Customer")
    app.dependency_overrides[get_app_settings] = lambda: AppSettings(AUTHORS_READ_REQUIRES_ROLE=False)
    assert api_client.get("/api/authors").status_code == 200
    # writes stay restricted
    assert api_client.delete("/api/authors/1").status_code == 403


def test_create_open_when_flag_disabled(api_client):
    app.dependency_overrides[get_current_active_user] = lambda: make_user("Customer")
    app.dependency_overrides[get_app_settings] = lambda: AppSettings(AUTHORS_CREATE_REQUIRES_ROLE=False)
    response = api_client.post("/api/authors", json={"firstName": "Jane", "lastName": "Doe"})
    assert response.status_code == 201


def test_anonymous_request_is_unauthorized(db_client):
    response = db_client.get("/api/authors")
    assert response.status_code == 401


def test_author_roundtrip_against_database(db_client, admin_headers):
    created = db_client.post(
        "/api/authors", json={"firstName": "Jane", "lastName": "Doe"}, headers=admin_headers
    )
    assert created.status_code == 201
    author_id = created.json()["id"]

    fetched = db_client.get(f"/api/authors/{author_id}", headers=admin_headers)
    assert fetched.status_code == 200
    assert fetched.json() == {"id": author_id, "firstName": "Jane", "lastName": "Doe", "bio": None, "books": []}

    updated = db_client.put(
        f"/api/authors/{author_id}",
        json={"id": author_id, "firstName": "Jane", "lastName": "Smith", "bio": "Poet"},
        headers=admin_headers,
    )
    assert updated.status_code == 204
    assert db_client.get(f"/api/authors/{author_id}", headers=admin_headers).json()["lastName"] == "Smith"

    assert db_client.delete(f"/api/authors/{author_id}", headers=admin_headers).status_code == 204
    assert db_client.get(f"/api/authors/{author_id}", headers=admin_headers).status_code == 404


def test_array_body_reaches_handler_and_is_logged(api_client, author_repo, caplog):
    _add_author(author_repo)
    with caplog.at_level(logging.INFO):
        updated = api_client.put("/api/authors/1", json=[1])
        created = api_client.post("/api/authors", json=[{"firstName": "Jane", "lastName": "Doe"}])

    assert updated.status_code == 400
    assert created.status_code == 400
    assert author_repo.calls == []
    operations = {getattr(r, "operation", None) for r in caplog.records}
    assert {"AuthorsService - Update", "AuthorsService - Create"} <= operations
