import logging
from typing import Literal, Optional

from fastmcp import FastMCP
from pydantic import BaseModel, Field

from ..core.formatting import format_bestsellers
from ..core.service import BookCatalogService

logger = logging.getLogger(__name__)

ListType = Literal["Bestseller", "ItemNewAll", "ItemNewSpecial", "ItemEditorChoice", "BlogBest"]


class BestsellerInput(BaseModel):
    query_type: ListType = Field("Bestseller", description="Which Aladin list to fetch.")
    max_results: int = Field(10, ge=1, le=100, description="Maximum number of books.")
    start: int = Field(1, ge=1, description="1-based index of the first result.")
    category_id: Optional[str] = Field(
        None,
        description="Category ID (CID) restricting the list to one category.",
    )


def register_bestseller_tool(mcp: FastMCP, service: BookCatalogService) -> None:
    """Register the bestseller / curated list MCP tool."""

    @mcp.tool()
    def get_bestsellers(input: BestsellerInput) -> str:
        """List Aladin bestsellers or new releases, optionally for one category."""
        try:
            books = service.get_bestsellers(
                query_type=input.query_type,
                max_results=input.max_results,
                start=input.start,
                category_id=input.category_id,
            )
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Bestseller lookup failed: type=%s category=%r", input.query_type, input.category_id)
            raise RuntimeError(
                f"Bestseller lookup failed: {type(exc).__name__}: {exc}"
            ) from exc

        return format_bestsellers(books, input.query_type, input.category_id)
