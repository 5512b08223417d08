from typing import List, Optional, Tuple

from .category_search import list_all_categories, search_categories, select_popular_categories
from .category_store import CategoryStore
from .models import Book, BookDetail, CategoryLeaf, PopularCategoryGroup
from ..infra.aladin_api import AladinClient


class BookCatalogService(object):
    """Provide the operations behind the MCP tools.

    Book lookups go to the Aladin API through AladinClient. Category
    lookups are answered from the in-memory CategoryStore and never
    perform I/O.
    """

    def __init__(self, client: AladinClient, categories: CategoryStore):
        self._client = client
        self._categories = categories

    @property
    def categories(self) -> CategoryStore:
        return self._categories

    def search_books(
        self,
        query: str,
        search_type: str = "Title",
        max_results: int = 10,
        start: int = 1,
    ) -> List[Book]:
        if not query:
            raise ValueError("A search query is required.")
        return self._client.search_books(
            query=query,
            search_type=search_type,
            max_results=max_results,
            start=start,
        )

    def get_book_detail(self, isbn: str) -> BookDetail:
        """Return full details for one ISBN; raise LookupError if Aladin has none."""
        if not isbn:
            raise ValueError("An ISBN is required.")
        detail = self._client.lookup_book(isbn)
        if detail is None:
            raise LookupError(f"No book found for ISBN {isbn}.")
        return detail

    def get_bestsellers(
        self,
        query_type: str = "Bestseller",
        max_results: int = 10,
        start: int = 1,
        category_id: Optional[str] = None,
    ) -> List[Book]:
        return self._client.list_items(
            query_type=query_type,
            max_results=max_results,
            start=start,
            category_id=category_id,
        )

    def books_for_table(
        self,
        kind: str,
        query: Optional[str] = None,
        isbn: Optional[str] = None,
        search_type: str = "Title",
        query_type: str = "Bestseller",
        max_results: int = 10,
        category_id: Optional[str] = None,
    ) -> List[Book]:
        """Collect books for table rendering from one of three sources."""
        if kind == "search":
            return self.search_books(query or "", search_type=search_type, max_results=max_results, start=1)
        if kind == "isbn":
            return [self.get_book_detail(isbn or "")]
        if kind == "bestseller":
            return self.get_bestsellers(
                query_type=query_type,
                max_results=max_results,
                start=1,
                category_id=category_id,
            )
        raise ValueError(f"Unsupported table type '{kind}'.")

    def search_categories(self, term: str, max_results: Optional[int] = None) -> Tuple[List[CategoryLeaf], int]:
        """Return the top ``max_results`` ranked categories and the total match count."""
        found = search_categories(term, self._categories.roots)
        return found[:max_results], len(found)

    def popular_categories(self, limit: Optional[int] = None) -> List[PopularCategoryGroup]:
        return select_popular_categories(self._categories.roots, limit=limit)

    def all_categories(self) -> List[CategoryLeaf]:
        return list_all_categories(self._categories.roots)
