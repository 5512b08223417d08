import logging

from fastmcp import FastMCP
from pydantic import BaseModel, Field

from ..core.formatting import format_popular_categories
from ..core.service import BookCatalogService

logger = logging.getLogger(__name__)


class PopularCategoriesInput(BaseModel):
    limit: int = Field(20, ge=1, le=50, description="Number of topics to show.")


def register_popular_categories_tool(mcp: FastMCP, service: BookCatalogService) -> None:
    """Register the popular categories MCP tool."""

    @mcp.tool()
    def get_popular_categories(input: PopularCategoriesInput) -> str:
        """List frequently used categories, three per topic, broader ones first."""
        try:
            groups = service.popular_categories(input.limit)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Popular category lookup failed")
            raise RuntimeError(
                f"Popular category lookup failed: {type(exc).__name__}: {exc}"
            ) from exc

        return format_popular_categories(groups)
