from typing import List, Optional

import pytest

from aladin_mcp_server.core.category_store import CategoryStore
from aladin_mcp_server.core.models import Book, BookDetail
from aladin_mcp_server.core.service import BookCatalogService

LIT_FOREST = {
    "Lit": {
        "categories": [{"cid": "1", "name": "Fiction", "mall": "Book"}],
        "children": {
            "Novel": {
                "categories": [{"cid": "2", "name": "Historical Fiction", "mall": "Book"}],
            },
        },
    },
}

SCIENCE_FOREST = {
    "Books": {
        "name": "Books",
        "level": 7,
        "categories": [
            {"cid": "10", "name": "Science", "mall": "B"},
            {"cid": "11", "name": "Art", "mall": "B"},
        ],
        "children": {
            "Science": {
                "categories": [
                    {"cid": "20", "name": "Popular Science", "mall": "B"},
                    {"cid": "21", "name": "Applied science", "mall": "B"},
                ],
                "children": {
                    "Physics": {
                        "categories": [{"cid": "30", "name": "Science of Light", "mall": "B"}],
                    },
                },
            },
            "Art": {
                "categories": [{"cid": "22", "name": "Art History", "mall": "B"}],
            },
        },
    },
    "Foreign": {
        "categories": [{"cid": "12", "name": "Computer Science", "mall": "F"}],
        "children": {"Misc": {}},
    },
}


def make_book(title: str = "Book", **overrides) -> Book:
    fields = dict(
        title=title,
        author="Author",
        publisher="Publisher",
        pub_date="2024-01-01",
        isbn="8900000000",
        isbn13="9788900000000",
        cover="",
        category_name="국내도서>소설",
        description="",
        price_standard=15000,
        price_sales=13500,
        link="https://www.aladin.co.kr/",
        pages=320,
    )
    fields.update(overrides)
    return Book(**fields)


class FakeAladinClient(object):
    """Stand-in for AladinClient that records calls."""

    def __init__(self, books: Optional[List[Book]] = None, detail: Optional[BookDetail] = None):
        self.books = books if books is not None else [make_book()]
        self.detail = detail
        self.calls = []

    def search_books(self, query, search_type="Title", max_results=10, start=1):
        self.calls.append(("search_books", query, search_type, max_results, start))
        return self.books

    def lookup_book(self, isbn):
        self.calls.append(("lookup_book", isbn))
        return self.detail

    def list_items(self, query_type="Bestseller", max_results=10, start=1, category_id=None):
        self.calls.append(("list_items", query_type, max_results, start, category_id))
        return self.books


@pytest.fixture
def lit_store() -> CategoryStore:
    return CategoryStore.from_mapping(LIT_FOREST)


@pytest.fixture
def science_store() -> CategoryStore:
    return CategoryStore.from_mapping(SCIENCE_FOREST)


@pytest.fixture
def fake_client() -> FakeAladinClient:
    return FakeAladinClient()


@pytest.fixture
def service(fake_client, science_store) -> BookCatalogService:
    return BookCatalogService(fake_client, science_store)


@pytest.fixture(scope="session")
def bundled_store() -> CategoryStore:
    from aladin_mcp_server.config_loader import DEFAULT_CATEGORY_FILE

    return CategoryStore.from_file(DEFAULT_CATEGORY_FILE)
