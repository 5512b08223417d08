#!/usr/bin/env python
import logging

import anyio

from fastmcp import FastMCP

from .config_loader import ServerConfig, configure_logging, load_config_from_env
from .core.category_store import CategoryDataError, CategoryStore
from .core.service import BookCatalogService
from .infra.aladin_api import AladinClient
from .tools.bestseller_tool import register_bestseller_tool
from .tools.book_detail_tool import register_book_detail_tool
from .tools.books_table_tool import register_books_table_tool
from .tools.category_search_tool import register_category_search_tool
from .tools.popular_categories_tool import register_popular_categories_tool
from .tools.search_books_tool import register_search_books_tool

log = logging.getLogger(__name__)

SERVER_NAME = "Aladin Book Search"


def create_service(config: ServerConfig) -> BookCatalogService:
    """Load the category tree and wire up the Aladin client.

    A missing or broken category file raises CategoryDataError; the server
    must not start without it.
    """
    categories = CategoryStore.from_file(config.category_file)
    client = AladinClient(config.ttb_key, base_url=config.base_url, timeout=config.timeout)
    if not config.ttb_key:
        log.warning("ALADIN_TTB_KEY is not set; book lookups will fail until it is configured")
    return BookCatalogService(client, categories)


def build_mcp(service: BookCatalogService) -> FastMCP:
    """Register all tools on a new FastMCP instance."""
    mcp = FastMCP(SERVER_NAME)

    register_search_books_tool(mcp, service)
    register_book_detail_tool(mcp, service)
    register_bestseller_tool(mcp, service)
    register_category_search_tool(mcp, service)
    register_popular_categories_tool(mcp, service)
    register_books_table_tool(mcp, service)

    return mcp


def create_mcp_server(config: ServerConfig | None = None) -> FastMCP:
    """Create MCP server with all registered tools."""
    cfg = config or load_config_from_env()
    return build_mcp(create_service(cfg))


def run(config: ServerConfig | None = None) -> None:
    """Run MCP server using stdio transport (MCP clients connect via pipes)."""

    cfg = config or load_config_from_env()
    configure_logging(cfg.log_level)
    try:
        server = create_mcp_server(cfg)
    except CategoryDataError:
        log.exception("Cannot start server without category data")
        raise

    async def _serve():
        await server.run_async(transport="stdio")

    anyio.run(_serve)


if __name__ == "__main__":
    run()
