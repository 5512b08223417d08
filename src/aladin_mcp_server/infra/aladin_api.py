import json
import logging
from typing import Any, Dict, List, Optional

import requests

from ..core.models import Book, BookDetail

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.aladin.co.kr/ttb/api"
API_VERSION = "20131101"
LOOKUP_OPT_RESULT = "description,fulldescription,ratingInfo,subInfo"


class AladinApiError(RuntimeError):
    """Raised when the Aladin TTB API cannot serve a request."""


def _book_fields(item: Dict[str, Any]) -> Dict[str, Any]:
    sub_info = item.get("subInfo") or {}
    return {
        "title": item.get("title") or "",
        "author": item.get("author") or "",
        "publisher": item.get("publisher") or "",
        "pub_date": item.get("pubDate") or "",
        "isbn": item.get("isbn") or "",
        "isbn13": item.get("isbn13") or "",
        "cover": item.get("cover") or "",
        "category_name": item.get("categoryName") or "",
        "description": item.get("description") or "",
        "price_standard": item.get("priceStandard") or 0,
        "price_sales": item.get("priceSales") or 0,
        "link": item.get("link") or "",
        "pages": sub_info.get("itemPage") or None,
    }


def parse_book(item: Dict[str, Any]) -> Book:
    """Map one entry of an Aladin ``item`` list to a Book."""
    return Book(**_book_fields(item))


def parse_book_detail(item: Dict[str, Any]) -> BookDetail:
    return BookDetail(
        full_description=item.get("fullDescription") or "",
        customer_review_rank=item.get("customerReviewRank"),
        **_book_fields(item),
    )


class AladinClient(object):
    """Thin wrapper around the Aladin TTB open API.

    Every call adds the TTB key, JSON output and the API version to the
    query string. Retries are left to the caller.
    """

    def __init__(self, ttb_key: Optional[str], base_url: str = DEFAULT_BASE_URL, timeout: float = 10.0):
        self._ttb_key = (ttb_key or "").strip()
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def _call(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        if not self._ttb_key:
            raise AladinApiError(
                "Aladin API key is not configured. Set the ALADIN_TTB_KEY environment variable."
            )

        query = {"ttbkey": self._ttb_key, "output": "js", "version": API_VERSION}
        query.update(params)
        url = f"{self._base_url}/{endpoint}"

        log.debug("GET %s params=%s", url, params)
        try:
            response = requests.get(url, params=query, timeout=self._timeout)
        except requests.RequestException as exc:
            log.error("Aladin API request to %s failed: %s", endpoint, exc)
            raise AladinApiError(f"Request to {endpoint} failed: {exc}") from exc

        if response.status_code >= 400:
            raise AladinApiError(f"HTTP {response.status_code} from {endpoint}")
        try:
            payload = response.json()
        except (json.JSONDecodeError, ValueError) as exc:
            raise AladinApiError(f"Response from {endpoint} is not valid JSON") from exc

        if not isinstance(payload, dict):
            raise AladinApiError(f"Unexpected response shape from {endpoint}")
        if payload.get("errorCode"):
            raise AladinApiError(
                f"Aladin error {payload.get('errorCode')}: {payload.get('errorMessage') or 'unknown'}"
            )
        return payload

    @staticmethod
    def _items(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        return payload.get("item") or []

    def search_books(
        self,
        query: str,
        search_type: str = "Title",
        max_results: int = 10,
        start: int = 1,
    ) -> List[Book]:
        """Search books by title, author, publisher or keyword."""
        payload = self._call(
            "ItemSearch.aspx",
            {
                "Query": query,
                "QueryType": search_type,
                "MaxResults": max_results,
                "start": start,
                "SearchTarget": "Book",
                "Cover": "Big",
            },
        )
        return [parse_book(item) for item in self._items(payload)]

    def lookup_book(self, isbn: str) -> Optional[BookDetail]:
        """Look up a single book by ISBN; return None if Aladin has none."""
        payload = self._call(
            "ItemLookUp.aspx",
            {
                "ItemId": isbn,
                "ItemIdType": "ISBN",
                "Cover": "Big",
                "OptResult": LOOKUP_OPT_RESULT,
            },
        )
        items = self._items(payload)
        if not items:
            return None
        return parse_book_detail(items[0])

    def list_items(
        self,
        query_type: str = "Bestseller",
        max_results: int = 10,
        start: int = 1,
        category_id: Optional[str] = None,
    ) -> List[Book]:
        """Fetch a curated list such as bestsellers or new releases."""
        params: Dict[str, Any] = {
            "QueryType": query_type,
            "MaxResults": max_results,
            "start": start,
            "SearchTarget": "Book",
            "Cover": "Big",
        }
        if category_id:
            params["CategoryId"] = category_id
        payload = self._call("ItemList.aspx", params)
        return [parse_book(item) for item in self._items(payload)]
