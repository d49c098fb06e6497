from bookstore_api.api.main import app
from bookstore_api.core.deps import get_current_active_user
from bookstore_api.core.settings import AppSettings, get_app_settings
from bookstore_api.db.models.catalog import Book

from tests.conftest import make_user

BOOK = {
    "title": "The Long Road",
    "year": 2019,
    "isbn": "978-3-16-148410-0",
    "summary": "A journey.",
    "image": "long-road.png",
    "price": 12.5,
    "authorId": 1,
}


def _add_book(repo, **overrides):
    fields = {
        "title": "The Long Road",
        "isbn": "978-3-16-148410-0",
        "price": 12.5,
        "author_id": 1,
    }
    fields.update(overrides)
    book = Book(**fields)
    book.id = repo._next_id
    repo._next_id += 1
    repo.items[book.id] = book
    return book


def test_create_book(api_client, book_repo):
    response = api_client.post("/api/books", json=BOOK)
    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["authorId"] == 1
    assert body["isbn"] == BOOK["isbn"]
    assert book_repo.calls == ["create"]


def test_create_book_rejects_negative_price(api_client, book_repo):
    response = api_client.post("/api/books", json={**BOOK, "price": -1})
    assert response.status_code == 400
    assert book_repo.calls == []


def test_create_book_rejects_long_summary(api_client):
    response = api_client.post("/api/books", json={**BOOK, "summary": "x" * 501})
    assert response.status_code == 400


def test_list_books(api_client, book_repo):
    _add_book(book_repo)
    _add_book(book_repo, title="Second")
    response = api_client.get("/api/books")
    assert response.status_code == 200
    assert [b["title"] for b in response.json()] == ["The Long Road", "Second"]


def test_get_book_missing(api_client):
    assert api_client.get("/api/books/3").status_code == 404


def test_update_book(api_client, book_repo):
    _add_book(book_repo)
    response = api_client.put("/api/books/1", json={**BOOK, "id": 1, "title": "Renamed"})
    assert response.status_code == 204
    assert book_repo.items[1].title == "Renamed"


def test_update_book_without_body(api_client, book_repo):
    _add_book(book_repo)
    response = api_client.put("/api/books/1")
    assert response.status_code == 400
    assert book_repo.calls == []


def test_update_book_storage_failure(api_client, book_repo):
    _add_book(book_repo)
    book_repo.update_result = False
    response = api_client.put("/api/books/1", json={**BOOK, "id": 1})
    assert response.status_code == 500
    assert response.text == "Something failed. Please contact IT Support"


def test_delete_book(api_client, book_repo):
    _add_book(book_repo)
    assert api_client.delete("/api/books/1").status_code == 204
    assert book_repo.calls == ["exists", "find_by_id", "delete"]


def test_customer_can_read_and_create_books_by_default(api_client):
    app.dependency_overrides[get_current_active_user] = lambda: make_user("Customer")
    assert api_client.get("/api/books").status_code == 200
    assert api_client.post("/api/books", json=BOOK).status_code == 201


def test_customer_cannot_update_or_delete_books(api_client, book_repo):
    _add_book(book_repo)
    app.dependency_overrides[get_current_active_user] = lambda: make_user("Customer")
    assert api_client.put("/api/books/1", json={**BOOK, "id": 1}).status_code == 403
    assert api_client.delete("/api/books/1").status_code == 403
    assert book_repo.calls == []


def test_book_reads_restricted_when_flag_enabled(api_client):
    app.dependency_overrides[get_current_active_user] = lambda: make_user("Customer")
    app.dependency_overrides[get_app_settings] = lambda: AppSettings(BOOKS_READ_REQUIRES_ROLE=True)
    assert api_client.get("/api/books").status_code == 403


def test_book_with_author_against_database(db_client, admin_headers, customer_headers):
    author = db_client.post(
        "/api/authors", json={"firstName": "Jane", "lastName": "Doe"}, headers=admin_headers
    ).json()

    created = db_client.post("/api/books", json={**BOOK, "authorId": author["id"]}, headers=customer_headers)
    assert created.status_code == 201
    book = created.json()
    assert book["author"]["lastName"] == "Doe"

    listed = db_client.get("/api/books", headers=customer_headers)
    assert listed.status_code == 200
    assert [b["id"] for b in listed.json()] == [book["id"]]

    author_view = db_client.get(f"/api/authors/{author['id']}", headers=admin_headers).json()
    assert [b["title"] for b in author_view["books"]] == [BOOK["title"]]


def test_update_book_with_array_body(api_client, book_repo):
    _add_book(book_repo)
    response = api_client.put("/api/books/1", json=[BOOK])
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Failed with bad data"
    assert book_repo.calls == []
