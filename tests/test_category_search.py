from pyuca import Collator

from aladin_mcp_server.core.category_search import (
    PATH_SEPARATOR,
    find_category_matches,
    leaf_name,
    list_all_categories,
    path_level,
    search_categories,
)
from aladin_mcp_server.core.category_store import CategoryStore
from aladin_mcp_server.core.models import CategoryLeaf

COLLATOR = Collator()


def test_fiction_search_ranks_shallow_leaf_first(lit_store):
    found = search_categories("FICTION", lit_store.roots)

    assert found == [
        CategoryLeaf(cid="1", name="Lit > Fiction", mall="Book"),
        CategoryLeaf(cid="2", name="Lit > Novel > Historical Fiction", mall="Book"),
    ]


def test_no_match_returns_empty_list(lit_store):
    assert search_categories("zzz", lit_store.roots) == []


def test_orders_by_level_then_leaf_name(science_store):
    found = search_categories("science", science_store.roots)

    assert [leaf.cid for leaf in found] == ["12", "10", "21", "20", "30"]
    assert [leaf.name for leaf in found] == [
        "Foreign > Computer Science",
        "Books > Science",
        "Books > Science > Applied science",
        "Books > Science > Popular Science",
        "Books > Science > Physics > Science of Light",
    ]


def test_match_levels_are_non_decreasing(science_store):
    matches = find_category_matches("", science_store.roots)
    levels = [match.level for match in matches]

    assert levels == sorted(levels)
    for first, second in zip(matches, matches[1:]):
        if first.level == second.level:
            assert COLLATOR.sort_key(first.leaf.name) <= COLLATOR.sort_key(second.leaf.name)


def test_full_path_length_matches_level(science_store):
    for match in find_category_matches("", science_store.roots):
        segments = match.full_path.split(PATH_SEPARATOR)
        assert len(segments) == match.level + 1
        assert segments[-1] == match.leaf.name
        assert path_level(match.full_path) == match.level


def test_every_result_contains_term(science_store):
    all_names = {leaf.cid: leaf_name(leaf.name) for leaf in list_all_categories(science_store.roots)}
    found = search_categories("aRt", science_store.roots)

    assert {leaf.cid for leaf in found} == {"11", "22"}
    for leaf in found:
        assert "art" in leaf_name(leaf.name).lower()
    missing = {cid for cid, name in all_names.items() if "art" in name.lower()} - {leaf.cid for leaf in found}
    assert not missing


def test_empty_term_returns_every_leaf(science_store):
    found = search_categories("", science_store.roots)

    assert len(found) == len(list_all_categories(science_store.roots)) == 7


def test_search_is_deterministic(science_store):
    assert search_categories("s", science_store.roots) == search_categories("s", science_store.roots)


def test_equal_keys_keep_traversal_order():
    store = CategoryStore.from_mapping(
        {
            "A": {"categories": [{"cid": "1", "name": "Poetry", "mall": "X"}]},
            "B": {"categories": [{"cid": "2", "name": "Poetry", "mall": "Y"}]},
        }
    )

    found = search_categories("poetry", store.roots)

    assert [leaf.cid for leaf in found] == ["1", "2"]


def test_leaf_without_name_only_matches_empty_term():
    store = CategoryStore.from_mapping({"Root": {"categories": [{"cid": "9", "mall": "X"}]}})

    assert search_categories("a", store.roots) == []
    assert search_categories("", store.roots) == [CategoryLeaf(cid="9", name="Root > ", mall="X")]


def test_search_does_not_modify_store(science_store):
    search_categories("science", science_store.roots)

    assert science_store.roots["Books"].categories[0].name == "Science"


def test_list_all_categories_uses_traversal_order(science_store):
    names = [leaf.name for leaf in list_all_categories(science_store.roots)]

    assert names == [
        "Books > Science",
        "Books > Art",
        "Books > Science > Popular Science",
        "Books > Science > Applied science",
        "Books > Science > Physics > Science of Light",
        "Books > Art > Art History",
        "Foreign > Computer Science",
    ]


def test_korean_terms_match_bundled_categories():
    store = CategoryStore.from_mapping(
        {
            "국내도서": {
                "categories": [{"cid": "1", "name": "소설/시/희곡", "mall": "국내도서"}],
                "children": {
                    "소설/시/희곡": {
                        "categories": [
                            {"cid": "50993", "name": "한국소설", "mall": "국내도서"},
                            {"cid": "50998", "name": "영미소설", "mall": "국내도서"},
                        ],
                    },
                },
            },
        }
    )

    found = search_categories("소설", store.roots)

    assert found[0].name == "국내도서 > 소설/시/희곡"
    assert [leaf.cid for leaf in found[1:]] == ["50998", "50993"]


def test_same_level_names_use_unicode_collation():
    store = CategoryStore.from_mapping(
        {
            "Food": {
                "categories": [
                    {"cid": "1", "name": "Banana", "mall": "X"},
                    {"cid": "2", "name": "apple", "mall": "X"},
                    {"cid": "3", "name": "zebra", "mall": "X"},
                    {"cid": "4", "name": "éclair", "mall": "X"},
                ],
            },
        }
    )

    found = search_categories("", store.roots)

    assert [leaf_name(leaf.name) for leaf in found] == ["apple", "Banana", "éclair", "zebra"]
