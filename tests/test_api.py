"""
Testes de integração dos endpoints de Authors e Books.
"""

import pytest
from httpx import AsyncClient


# ==========================================
# Helper functions
# ==========================================

async def create_author(client: AsyncClient, first_name: str = "George", last_name: str = "Orwell") -> dict:
    response = await client.post(
        "/api/v1/authors",
        json={"first_name": first_name, "last_name": last_name, "dob": "1903-06-25"},
    )
    assert response.status_code == 201
    return response.json()


async def create_book(client: AsyncClient, title: str = "1984") -> dict:
    response = await client.post(
        "/api/v1/books",
        json={"title": title, "description": "Dystopia", "published": "1949"},
    )
    assert response.status_code == 201
    return response.json()


# ==========================================
# Test: Authors
# ==========================================

class TestAuthors:
    """Testes para /authors."""

    @pytest.mark.anyio
    async def test_create_author_returns_full_name(self, client: AsyncClient):
        author = await create_author(client)

        assert isinstance(author["id"], int)
        assert author["full_name"] == "Orwell, George"
        assert author["image_url"] is None

    @pytest.mark.anyio
    async def test_create_author_too_long_name(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/authors",
            json={"first_name": "x" * 56, "last_name": "Orwell"},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_FAILURE"
        assert data["details"]["errors"][0]["field"] == "first_name"

    @pytest.mark.anyio
    async def test_create_author_empty_last_name(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/authors",
            json={"first_name": "George", "last_name": ""},
        )

        assert response.status_code == 422
        list_response = await client.get("/api/v1/authors")
        assert list_response.json()["total"] == 0

    @pytest.mark.anyio
    async def test_get_author_not_found(self, client: AsyncClient):
        response = await client.get("/api/v1/authors/999")
        assert response.status_code == 404

    @pytest.mark.anyio
    async def test_list_authors_with_search(self, client: AsyncClient):
        await create_author(client)
        await create_author(client, "Aldous", "Huxley")

        response = await client.get("/api/v1/authors", params={"search": "hux"})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["full_name"] == "Huxley, Aldous"

    @pytest.mark.anyio
    async def test_replace_author(self, client: AsyncClient):
        author = await create_author(client)

        response = await client.put(
            f"/api/v1/authors/{author['id']}",
            json={"id": 999, "first_name": "Eric", "last_name": "Blair"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == author["id"]
        assert data["full_name"] == "Blair, Eric"
        # Substituição completa: campo omitido volta a None
        assert data["dob"] is None

    @pytest.mark.anyio
    async def test_delete_author_removes_links(self, client: AsyncClient):
        author = await create_author(client)
        book = await create_book(client)
        await client.put(f"/api/v1/books/{book['id']}/authors/{author['id']}")

        response = await client.delete(f"/api/v1/authors/{author['id']}")
        assert response.status_code == 200

        book_response = await client.get(f"/api/v1/books/{book['id']}")
        assert book_response.status_code == 200
        assert book_response.json()["authors"] == []


# ==========================================
# Test: Books
# ==========================================

class TestBooks:
    """Testes para /books."""

    @pytest.mark.anyio
    async def test_create_book_requires_description(self, client: AsyncClient):
        response = await client.post("/api/v1/books", json={"title": "1984"})

        assert response.status_code == 422
        assert response.json()["details"]["errors"][0]["field"] == "description"

    @pytest.mark.anyio
    async def test_link_author_to_book(self, client: AsyncClient):
        author = await create_author(client)
        book = await create_book(client)

        response = await client.put(f"/api/v1/books/{book['id']}/authors/{author['id']}")

        assert response.status_code == 200
        assert [a["full_name"] for a in response.json()["authors"]] == ["Orwell, George"]

        author_response = await client.get(f"/api/v1/authors/{author['id']}")
        assert [b["title"] for b in author_response.json()["books"]] == ["1984"]

        books_response = await client.get(f"/api/v1/authors/{author['id']}/books")
        assert [b["id"] for b in books_response.json()] == [book["id"]]

    @pytest.mark.anyio
    async def test_link_is_idempotent(self, client: AsyncClient):
        author = await create_author(client)
        book = await create_book(client)

        await client.put(f"/api/v1/books/{book['id']}/authors/{author['id']}")
        response = await client.put(f"/api/v1/books/{book['id']}/authors/{author['id']}")

        assert response.status_code == 200
        assert len(response.json()["authors"]) == 1

    @pytest.mark.anyio
    async def test_link_unknown_author(self, client: AsyncClient):
        book = await create_book(client)

        response = await client.put(f"/api/v1/books/{book['id']}/authors/999")

        assert response.status_code == 404

    @pytest.mark.anyio
    async def test_unlink_author(self, client: AsyncClient):
        author = await create_author(client)
        book = await create_book(client)
        await client.put(f"/api/v1/books/{book['id']}/authors/{author['id']}")

        response = await client.delete(f"/api/v1/books/{book['id']}/authors/{author['id']}")
        assert response.status_code == 200
        assert response.json()["authors"] == []

        again = await client.delete(f"/api/v1/books/{book['id']}/authors/{author['id']}")
        assert again.status_code == 404

    @pytest.mark.anyio
    async def test_delete_book_keeps_author(self, client: AsyncClient):
        author = await create_author(client)
        book = await create_book(client)
        await client.put(f"/api/v1/books/{book['id']}/authors/{author['id']}")

        response = await client.delete(f"/api/v1/books/{book['id']}")
        assert response.status_code == 200

        assert (await client.get(f"/api/v1/books/{book['id']}")).status_code == 404
        author_response = await client.get(f"/api/v1/authors/{author['id']}")
        assert author_response.json()["books"] == []

    @pytest.mark.anyio
    async def test_list_books_paginated(self, client: AsyncClient):
        for title in ["Animal Farm", "1984", "Homage to Catalonia"]:
            await create_book(client, title)

        response = await client.get("/api/v1/books", params={"page": 2, "page_size": 2})

        data = response.json()
        assert data["total"] == 3
        assert data["pages"] == 2
        assert [b["title"] for b in data["items"]] == ["Homage to Catalonia"]
