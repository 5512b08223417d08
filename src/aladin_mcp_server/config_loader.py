#!/usr/bin/env python
# vim:fileencoding=UTF-8:ts=4:sw=4:sta:et:sts=4:ai

"""Environment based configuration for the Aladin MCP server."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from .infra.aladin_api import DEFAULT_BASE_URL

DEFAULT_CATEGORY_FILE = Path(__file__).resolve().parent / "data" / "aladin_book_categories.json"


@dataclass
class ServerConfig:
    ttb_key: str
    category_file: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    log_level: str = "INFO"


def load_config_from_env() -> ServerConfig:
    ttb_key = (os.environ.get("ALADIN_TTB_KEY") or "").strip()
    category_file = (os.environ.get("ALADIN_CATEGORY_FILE") or "").strip() or str(DEFAULT_CATEGORY_FILE)
    base_url = (os.environ.get("ALADIN_BASE_URL") or "").strip() or DEFAULT_BASE_URL
    timeout = float((os.environ.get("ALADIN_TIMEOUT") or "").strip() or "10")
    log_level = (os.environ.get("MCP_LOG_LEVEL") or "INFO").strip().upper()
    return ServerConfig(
        ttb_key=ttb_key,
        category_file=category_file,
        base_url=base_url,
        timeout=timeout,
        log_level=log_level,
    )


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr; stdout is reserved for JSON-RPC frames."""
    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers:
        if isinstance(handler, logging.StreamHandler) and getattr(handler, "stream", None) is sys.stderr:
            return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(name)s - %(message)s"))
    root.addHandler(handler)
