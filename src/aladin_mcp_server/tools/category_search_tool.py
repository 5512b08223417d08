import logging

from fastmcp import FastMCP
from pydantic import BaseModel, Field

from ..core.formatting import format_category_search
from ..core.service import BookCatalogService

logger = logging.getLogger(__name__)


class CategorySearchInput(BaseModel):
    search_term: str = Field(..., description="Category name or part of it.")
    max_results: int = Field(20, ge=1, le=50, description="Maximum number of categories.")


def register_category_search_tool(mcp: FastMCP, service: BookCatalogService) -> None:
    """Register the category search MCP tool."""

    @mcp.tool()
    def search_categories(input: CategorySearchInput) -> str:
        """Search Aladin book categories; broader categories are listed first."""
        logger.info("Category search request: term=%r max_results=%s", input.search_term, input.max_results)
        try:
            categories, total = service.search_categories(input.search_term, input.max_results)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Category search failed for term %r", input.search_term)
            raise RuntimeError(
                f"Category search failed: {type(exc).__name__}: {exc}"
            ) from exc

        return format_category_search(input.search_term, categories, total, input.max_results)
