import logging

from fastmcp import FastMCP
from pydantic import BaseModel, Field

from ..core.formatting import format_book_detail
from ..core.service import BookCatalogService

logger = logging.getLogger(__name__)


class BookDetailInput(BaseModel):
    isbn: str = Field(..., description="ISBN of the book (10 or 13 digits).")


def register_book_detail_tool(mcp: FastMCP, service: BookCatalogService) -> None:
    """Register the ISBN lookup MCP tool."""

    @mcp.tool()
    def get_book_detail(input: BookDetailInput) -> str:
        """Return detailed information for a book identified by ISBN."""
        try:
            detail = service.get_book_detail(input.isbn)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Book detail lookup failed for ISBN %r", input.isbn)
            raise RuntimeError(
                f"Book detail lookup failed: {type(exc).__name__}: {exc}"
            ) from exc

        return format_book_detail(detail)
