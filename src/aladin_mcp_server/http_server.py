#!/usr/bin/env python
from __future__ import annotations

import os

from starlette.applications import Starlette
from starlette.routing import Mount
import uvicorn

from .config_loader import ServerConfig, configure_logging, load_config_from_env
from .main import create_mcp_server


def create_app(config: ServerConfig | None = None) -> Starlette:
    # Create MCP server and mount the Streamable HTTP app under Starlette.
    cfg = config or load_config_from_env()
    mcp = create_mcp_server(cfg)
    mcp_app = mcp.http_app(path="/mcp")

    return Starlette(
        routes=[Mount("/", app=mcp_app)],
        lifespan=mcp_app.lifespan,
    )


def run_from_env() -> None:
    # Read host/port from environment and serve via Uvicorn.
    host = (os.environ.get("MCP_HTTP_HOST") or "127.0.0.1").strip()
    port = int((os.environ.get("MCP_HTTP_PORT") or "8000").strip())
    cfg = load_config_from_env()
    configure_logging(cfg.log_level)

    app = create_app(cfg)
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    run_from_env()
