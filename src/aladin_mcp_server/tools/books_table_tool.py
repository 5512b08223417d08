import logging
from typing import Literal, Optional

from fastmcp import FastMCP
from pydantic import BaseModel, Field

from ..core.formatting import books_table_title, format_books_table as render_books_table
from ..core.service import BookCatalogService
from .bestseller_tool import ListType
from .search_books_tool import SearchType

logger = logging.getLogger(__name__)


class BooksTableInput(BaseModel):
    type: Literal["search", "isbn", "bestseller"] = Field(
        ...,
        description="Source of the books: search, isbn or bestseller.",
    )
    query: Optional[str] = Field(None, description="Search query (required for type=search).")
    isbn: Optional[str] = Field(None, description="ISBN (required for type=isbn).")
    search_type: SearchType = Field("Title", description="Search field for type=search.")
    query_type: ListType = Field("Bestseller", description="List type for type=bestseller.")
    max_results: int = Field(10, ge=1, le=50, description="Maximum number of books.")
    category_id: Optional[str] = Field(None, description="Category ID for type=bestseller.")


def register_books_table_tool(mcp: FastMCP, service: BookCatalogService) -> None:
    """Register the Markdown table MCP tool."""

    @mcp.tool()
    def format_books_table(input: BooksTableInput) -> str:
        """Show books from a search, an ISBN lookup or a bestseller list as a table."""
        try:
            books = service.books_for_table(
                kind=input.type,
                query=input.query,
                isbn=input.isbn,
                search_type=input.search_type,
                query_type=input.query_type,
                max_results=input.max_results,
                category_id=input.category_id,
            )
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Books table failed for type=%s", input.type)
            raise RuntimeError(
                f"Books table failed: {type(exc).__name__}: {exc}"
            ) from exc

        title = books_table_title(
            input.type,
            query=input.query,
            isbn=input.isbn,
            query_type=input.query_type,
            category_id=input.category_id,
        )
        return f"{title}\n\n{render_books_table(books)}"
