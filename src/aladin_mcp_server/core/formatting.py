"""Render tool results as plain text for MCP clients."""

from typing import Dict, List, Optional, Sequence

from .category_search import leaf_name, path_level
from .models import Book, BookDetail, CategoryLeaf, PopularCategoryGroup

TITLE_WIDTH = 30

LEVEL_LABELS = {1: "Top-level", 2: "Mid-level"}
LEVEL_MARKERS = {1: "📚", 2: "📖"}


def format_price(amount: int) -> str:
    return f"{amount:,}원"


def _display_price(book: Book) -> str:
    if book.price_standard > 0:
        return format_price(book.price_standard)
    return format_price(book.price_sales)


def _book_block(index: int, book: Book, price_label: str = "Price", price: Optional[str] = None) -> str:
    return (
        f"{index}. {book.title}\n"
        f"   Author: {book.author}\n"
        f"   Publisher: {book.publisher}\n"
        f"   Published: {book.pub_date}\n"
        f"   {price_label}: {price if price is not None else _display_price(book)}\n"
        f"   ISBN: {book.isbn13}\n"
        f"   Category: {book.category_name}\n"
        f"   Description: {book.description}\n"
    )


def format_book_list(books: Sequence[Book]) -> str:
    blocks = "\n".join(_book_block(index, book) for index, book in enumerate(books, start=1))
    return f"Search results: found {len(books)} book(s).\n\n{blocks}"


def format_book_detail(book: BookDetail) -> str:
    rank = book.customer_review_rank if book.customer_review_rank else "N/A"
    return (
        "Book details:\n\n"
        f"Title: {book.title}\n"
        f"Author: {book.author}\n"
        f"Publisher: {book.publisher}\n"
        f"Published: {book.pub_date}\n"
        f"ISBN: {book.isbn13}\n"
        f"Category: {book.category_name}\n"
        f"Price: {_display_price(book)}\n"
        f"Customer rating: {rank}\n\n"
        f"Description: {book.description}\n\n"
        f"Full description: {book.full_description}\n\n"
        f"Link: {book.link}"
    )


def _category_suffix(category_id: Optional[str]) -> str:
    return f" (category: {category_id})" if category_id else ""


def format_bestsellers(books: Sequence[Book], query_type: str, category_id: Optional[str] = None) -> str:
    # Bestseller lists show the list price only.
    blocks = "\n".join(
        _book_block(index, book, price_label="List price", price=format_price(book.price_standard))
        for index, book in enumerate(books, start=1)
    )
    return f"Bestseller list ({query_type}){_category_suffix(category_id)}:\n\n{blocks}"


def format_books_table(books: Sequence[Book]) -> str:
    """Render books as a Markdown table."""
    if not books:
        return "No results found."

    lines = [
        "| Title | Publisher | Published | Price | Pages |",
        "|------|--------|--------|------|------|",
    ]
    for book in books:
        title = book.title if len(book.title) <= TITLE_WIDTH else book.title[:TITLE_WIDTH] + "..."
        if book.price_standard > 0:
            price = format_price(book.price_standard)
        elif book.price_sales > 0:
            price = format_price(book.price_sales)
        else:
            price = "N/A"
        pages = f"{book.pages}p" if book.pages else "N/A"
        lines.append(
            f"| {title} | {book.publisher or 'N/A'} | {book.pub_date or 'N/A'} | {price} | {pages} |"
        )
    return "\n".join(lines) + "\n"


def books_table_title(
    kind: str,
    query: Optional[str] = None,
    isbn: Optional[str] = None,
    query_type: str = "Bestseller",
    category_id: Optional[str] = None,
) -> str:
    if kind == "search":
        return f"📚 Book search results ({query})"
    if kind == "isbn":
        return f"📚 Book details (ISBN: {isbn})"
    return f"📚 Bestseller list ({query_type}){_category_suffix(category_id)}"


def format_category_search(term: str, categories: Sequence[CategoryLeaf], total: int, max_results: int) -> str:
    """Render category search results grouped by level."""
    if not categories:
        return f"No categories found for '{term}'."

    groups: Dict[int, List[CategoryLeaf]] = {}
    for category in categories:
        groups.setdefault(path_level(category.name), []).append(category)

    note = f", top {max_results} of {total} shown" if total > max_results else ""
    text = f"Results for '{term}' ({len(categories)}{note}):\n\n"
    for level in sorted(groups):
        text += f"📚 {LEVEL_LABELS.get(level, 'Detailed')} (Level {level}):\n"
        for index, category in enumerate(groups[level], start=1):
            text += f"{index}. {category.name}\n"
            text += f"   CID: {category.cid} | Mall: {category.mall}\n"
        text += "\n"
    return text


def format_popular_categories(groups: Sequence[PopularCategoryGroup]) -> str:
    text = "Popular categories (broader levels first):\n\n"
    for index, group in enumerate(groups, start=1):
        text += f"🔥 {index}. {group.label}\n"
        for category in group.categories:
            marker = LEVEL_MARKERS.get(path_level(category.name), "📄")
            text += f"   {marker} {leaf_name(category.name)} (CID: {category.cid})\n"
        text += "\n"
    return text
