from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class CategoryLeaf(object):
    """Represent a single addressable Aladin category."""

    cid: str
    name: str
    mall: str


@dataclass(frozen=True)
class CategoryNode(object):
    """Represent one level of the category hierarchy.

    ``level`` is kept as found in the data file only; the search engine
    derives the level from traversal depth.
    """

    name: str = ""
    children: Mapping[str, "CategoryNode"] = field(default_factory=lambda: MappingProxyType({}))
    categories: Tuple[CategoryLeaf, ...] = ()
    level: Optional[int] = None


@dataclass(frozen=True)
class CategoryMatch(object):
    """A matched leaf annotated with its depth and hierarchical path."""

    leaf: CategoryLeaf
    level: int
    full_path: str


@dataclass(frozen=True)
class PopularTopic(object):
    label: str
    search_term: str


@dataclass
class PopularCategoryGroup(object):
    """Top ranked categories for one curated topic."""

    label: str
    categories: List[CategoryLeaf]


@dataclass
class Book(object):
    """Represent a book as returned by the Aladin item APIs."""

    title: str
    author: str
    publisher: str
    pub_date: str
    isbn: str
    isbn13: str
    cover: str
    category_name: str
    description: str
    price_standard: int
    price_sales: int
    link: str
    pages: Optional[int] = None


@dataclass
class BookDetail(Book):
    full_description: str = ""
    customer_review_rank: Optional[float] = None
