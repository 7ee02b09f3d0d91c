"""Browsing helpers over the group tree: flat listings, membership index, pagination"""

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

from writings.core.models import GroupNode


T = TypeVar("T")


@dataclass(frozen=True)
class FlatGroup:
    slug: str
    label: str
    depth: int
    count: int


def flatten_groups(groups: list[GroupNode]) -> tuple[list[FlatGroup], dict[str, GroupNode]]:
    """Depth-first listing of every node plus a slug -> node lookup."""
    flattened: list[FlatGroup] = []
    lookup: dict[str, GroupNode] = {}

    def walk(nodes: list[GroupNode]) -> None:
        for node in nodes:
            lookup[node.slug] = node
            flattened.append(FlatGroup(node.slug, node.label, node.depth, len(node.posts)))
            walk(node.children)

    walk(groups)
    return flattened, lookup


def build_group_index(groups: list[GroupNode]) -> dict[str, frozenset[str]]:
    """Map each group slug to the post slugs of the node and all its descendants."""
    index: dict[str, frozenset[str]] = {}

    def walk(node: GroupNode) -> frozenset[str]:
        collected = {post.slug for post in node.posts}
        for child in node.children:
            collected |= walk(child)
        index[node.slug] = frozenset(collected)
        return index[node.slug]

    for group in groups:
        walk(group)
    return index


def page_count(total_items: int, page_size: int) -> int:
    return max(1, math.ceil(total_items / page_size))


def paginate(items: Sequence[T], page: int, page_size: int = 10) -> tuple[list[T], int, int]:
    """Return (slice, page, total_pages) with page clamped into range."""
    total = page_count(len(items), page_size)
    page = min(max(1, page), total)
    offset = (page - 1) * page_size
    return list(items[offset:offset + page_size]), page, total


def page_list(total: int, current: int) -> list[int | None]:
    """Page numbers to show in a pager; None marks an ellipsis gap.

    Every page is listed up to 7 pages. Beyond that: the first two, the last
    two, and the neighbours of the current page.
    """
    if total <= 7:
        return list(range(1, total + 1))
    wanted = {1, 2, current - 1, current, current + 1, total - 1, total}
    pages = sorted(p for p in wanted if 1 <= p <= total)
    result: list[int | None] = []
    previous = 0
    for p in pages:
        if p - previous > 1:
            result.append(None)
        result.append(p)
        previous = p
    return result
