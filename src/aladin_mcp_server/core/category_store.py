import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Union

from .category_search import count_categories
from .models import CategoryLeaf, CategoryNode

logger = logging.getLogger(__name__)


class CategoryDataError(RuntimeError):
    """Raised when the category data file cannot be loaded."""


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _parse_leaf(raw: Any, where: str) -> CategoryLeaf:
    if not isinstance(raw, dict):
        raise CategoryDataError(f"Category entry at {where} is not an object")
    return CategoryLeaf(
        cid=_text(raw.get("cid")),
        name=_text(raw.get("name")),
        mall=_text(raw.get("mall")),
    )


def _parse_node(raw: Any, where: str) -> CategoryNode:
    if not isinstance(raw, dict):
        raise CategoryDataError(f"Category node at {where} is not an object")

    raw_categories = raw.get("categories") or []
    if not isinstance(raw_categories, list):
        raise CategoryDataError(f"'categories' at {where} is not a list")

    raw_children = raw.get("children") or {}
    if not isinstance(raw_children, dict):
        raise CategoryDataError(f"'children' at {where} is not an object")

    level = raw.get("level")
    return CategoryNode(
        name=str(raw.get("name") or ""),
        categories=tuple(
            _parse_leaf(item, f"{where}[{index}]")
            for index, item in enumerate(raw_categories)
        ),
        children=MappingProxyType({
            str(child_name): _parse_node(child, f"{where} > {child_name}")
            for child_name, child in raw_children.items()
        }),
        level=level if isinstance(level, int) else None,
    )


class CategoryStore(object):
    """Hold the immutable forest of Aladin categories.

    The store is built once at startup and only read afterwards.
    """

    def __init__(self, roots: Dict[str, CategoryNode]):
        self._roots = MappingProxyType(dict(roots))
        self._leaf_count = count_categories(self._roots)

    @classmethod
    def from_mapping(cls, data: Any) -> "CategoryStore":
        """Build the store from already decoded JSON data."""
        if not isinstance(data, dict):
            raise CategoryDataError("Category data must be a JSON object keyed by root name")
        return cls({str(name): _parse_node(node, str(name)) for name, node in data.items()})

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CategoryStore":
        """Load the category tree from a JSON file.

        Any problem reading or parsing the file is reported as
        CategoryDataError; callers treat it as fatal.
        """
        data_path = Path(path)
        try:
            with data_path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except FileNotFoundError as exc:
            raise CategoryDataError(f"Category file not found: {data_path}") from exc
        except (OSError, ValueError) as exc:
            raise CategoryDataError(f"Category file could not be read ({data_path}): {exc}") from exc

        store = cls.from_mapping(data)
        logger.info(
            "Loaded category tree from %s: roots=%d leaves=%d",
            data_path,
            len(store.roots),
            store.leaf_count,
        )
        return store

    @property
    def roots(self) -> Mapping[str, CategoryNode]:
        """Return the read-only mapping of root name to root node."""
        return self._roots

    @property
    def leaf_count(self) -> int:
        return self._leaf_count
