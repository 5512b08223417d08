import logging
from typing import Literal

from fastmcp import FastMCP
from pydantic import BaseModel, Field

from ..core.formatting import format_book_list
from ..core.service import BookCatalogService

logger = logging.getLogger(__name__)

SearchType = Literal["Title", "Author", "Publisher", "Keyword"]


class SearchBooksInput(BaseModel):
    query: str = Field(..., description="Search query.")
    search_type: SearchType = Field("Title", description="Field the query is matched against.")
    max_results: int = Field(10, ge=1, le=100, description="Maximum number of books.")
    start: int = Field(1, ge=1, description="1-based index of the first result.")


def register_search_books_tool(mcp: FastMCP, service: BookCatalogService) -> None:
    """Register the Aladin book search MCP tool."""

    @mcp.tool()
    def search_books(input: SearchBooksInput) -> str:
        """Search books on Aladin by title, author, publisher or keyword."""
        logger.info(
            "Book search request: query=%r type=%s max_results=%s start=%s",
            input.query,
            input.search_type,
            input.max_results,
            input.start,
        )
        try:
            books = service.search_books(
                query=input.query,
                search_type=input.search_type,
                max_results=input.max_results,
                start=input.start,
            )
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Book search failed for query %r", input.query)
            raise RuntimeError(
                f"Book search failed: {type(exc).__name__}: {exc}"
            ) from exc

        return format_book_list(books)
