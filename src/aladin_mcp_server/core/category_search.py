"""Search, enumerate and rank categories in the Aladin category tree.

All functions here are pure: they take the read-only root mapping of a
CategoryStore and return freshly built lists.
"""

from dataclasses import replace
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple

from pyuca import Collator

from .models import CategoryLeaf, CategoryMatch, CategoryNode, PopularCategoryGroup, PopularTopic

PATH_SEPARATOR = " > "

# Unicode Collation Algorithm with the default table (root locale ordering).
_COLLATOR = Collator()

POPULAR_TOPICS: Tuple[PopularTopic, ...] = (
    PopularTopic("소설", "소설"),
    PopularTopic("에세이", "에세이"),
    PopularTopic("자기계발", "자기계발"),
    PopularTopic("경제경영", "경제경영"),
    PopularTopic("시/에세이", "시"),
    PopularTopic("인문학", "인문학"),
    PopularTopic("역사", "역사"),
    PopularTopic("철학", "철학"),
    PopularTopic("과학", "과학"),
    PopularTopic("건강", "건강"),
    PopularTopic("요리", "요리"),
    PopularTopic("육아", "육아"),
    PopularTopic("교육", "교육"),
    PopularTopic("컴퓨터", "컴퓨터"),
    PopularTopic("외국어", "외국어"),
    PopularTopic("여행", "여행"),
    PopularTopic("예술", "예술"),
    PopularTopic("종교", "종교"),
    PopularTopic("만화", "만화"),
    PopularTopic("아동", "아동"),
)


def _walk(
    node: CategoryNode,
    path: List[str],
    level: int,
) -> Iterator[Tuple[CategoryLeaf, int, List[str]]]:
    # Leaves attached to a node come before anything below it.
    for leaf in node.categories:
        yield leaf, level, path
    for child_name, child in node.children.items():
        yield from _walk(child, path + [child_name], level + 1)


def _walk_forest(roots: Mapping[str, CategoryNode]) -> Iterator[Tuple[CategoryLeaf, int, List[str]]]:
    for root_name, root in roots.items():
        yield from _walk(root, [root_name], 1)


def _full_path(path: Sequence[str], leaf: CategoryLeaf) -> str:
    return PATH_SEPARATOR.join(list(path) + [leaf.name])


def _rank_key(match: CategoryMatch) -> Tuple[int, Tuple[int, ...]]:
    return match.level, _COLLATOR.sort_key(match.leaf.name)


def find_category_matches(term: str, roots: Mapping[str, CategoryNode]) -> List[CategoryMatch]:
    """Return ranked matches for ``term`` with level and original leaf kept.

    A leaf matches when its own name contains ``term`` ignoring case. The
    result is ordered by level (root = 1) and then by leaf name under the
    Unicode Collation Algorithm, where case and accents only break ties.
    The sort is stable, so leaves with equal level and name stay in
    traversal order.
    """
    needle = term.lower()
    matches = [
        CategoryMatch(leaf=leaf, level=level, full_path=_full_path(path, leaf))
        for leaf, level, path in _walk_forest(roots)
        if needle in leaf.name.lower()
    ]
    matches.sort(key=_rank_key)
    return matches


def search_categories(term: str, roots: Mapping[str, CategoryNode]) -> List[CategoryLeaf]:
    """Search the category tree and return leaves named by their full path.

    An empty term matches every leaf. No cap is applied; callers slice.
    """
    return [
        replace(match.leaf, name=match.full_path)
        for match in find_category_matches(term, roots)
    ]


def count_categories(roots: Mapping[str, CategoryNode]) -> int:
    return sum(1 for _ in _walk_forest(roots))


def list_all_categories(roots: Mapping[str, CategoryNode]) -> List[CategoryLeaf]:
    """Return every leaf in traversal order, named by its full path."""
    return [
        replace(leaf, name=_full_path(path, leaf))
        for leaf, _level, path in _walk_forest(roots)
    ]


def path_level(full_path: str) -> int:
    """Return the level encoded in a full path such as ``A > B > leaf``."""
    return len(full_path.split(PATH_SEPARATOR)) - 1


def leaf_name(full_path: str) -> str:
    return full_path.split(PATH_SEPARATOR)[-1]


def select_popular_categories(
    roots: Mapping[str, CategoryNode],
    limit: Optional[int] = None,
    topics: Sequence[PopularTopic] = POPULAR_TOPICS,
    per_topic: int = 3,
) -> List[PopularCategoryGroup]:
    """Build the popular category view.

    The first ``limit`` topics are searched in order and each keeps its
    ``per_topic`` best ranked categories. Topics without any match are
    left out.
    """
    groups: List[PopularCategoryGroup] = []
    for topic in topics[:limit]:
        found = search_categories(topic.search_term, roots)
        if not found:
            continue
        groups.append(PopularCategoryGroup(label=topic.label, categories=found[:per_topic]))
    return groups
