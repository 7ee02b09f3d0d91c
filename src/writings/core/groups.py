"""Hierarchical tag-group tree built from slash-delimited tag paths.

The build runs in two phases. Phase one walks every tag path of every post and
records nodes in a flat arena keyed by the node's path slug (``science``,
``science/physics``), appending the post to each node the path passes through.
Phase two freezes the arena into GroupNode models: children sorted by label,
posts deduplicated by slug and sorted newest first.
"""

from dataclasses import dataclass, field
from typing import Iterable

from writings.core.models import GroupNode, PostSummary
from writings.core.utils.dates import timestamp, to_iso, parse_date
from writings.core.utils.slug import slugify


UNGROUPED_ID = "group-ungrouped"
UNGROUPED_SLUG = "ungrouped"
UNGROUPED_LABEL = "Ungrouped"
UNTITLED_LABEL = "Untitled"

# Arena key for the catch-all node; no tag path can produce it.
_UNGROUPED_KEY = ":ungrouped"


@dataclass
class _Segment:
    label: str
    key: str


@dataclass
class _MutableNode:
    id: str
    slug: str
    label: str
    depth: int
    posts: list[PostSummary] = field(default_factory=list)
    children: list[str] = field(default_factory=list)   # arena keys, insertion order


def post_sort_key(post: PostSummary) -> tuple:
    """Newest first; equal or missing dates fall back to title order."""
    return (-timestamp(post.date), post.title.casefold(), post.title)


def sort_posts(posts: Iterable[PostSummary]) -> list[PostSummary]:
    return sorted(posts, key=post_sort_key)


def split_tag_path(tag: str) -> list[_Segment]:
    """'Science / Physics' -> segments keyed 'science', 'physics'. Empty segments are dropped."""
    segments = []
    for part in tag.split('/'):
        label = part.strip()
        if not label:
            continue
        key = slugify(label) or '-'.join(label.lower().split())
        segments.append(_Segment(label=label, key=key))
    return segments


def format_group_label(value: str) -> str:
    clean = value.strip()
    return clean or UNTITLED_LABEL


def _insert_path(
    arena: dict[str, _MutableNode],
    roots: list[str],
    segments: list[_Segment],
    post: PostSummary,
    ) -> None:
    parent: _MutableNode | None = None
    for depth, segment in enumerate(segments):
        slug = f"{parent.slug}/{segment.key}" if parent else segment.key
        node = arena.get(slug)
        if node is None:
            node = _MutableNode(id=slug, slug=slug, label=format_group_label(segment.label), depth=depth)
            arena[slug] = node
            (parent.children if parent else roots).append(slug)
        node.posts.append(post)
        parent = node


def _dedupe(posts: list[PostSummary]) -> list[PostSummary]:
    seen: set[str] = set()
    unique = []
    for post in posts:
        if post.slug in seen:
            continue
        seen.add(post.slug)
        unique.append(post)
    return unique


def _label_key(node: _MutableNode) -> tuple:
    return (node.label.casefold(), node.label, node.slug)


def _freeze(arena: dict[str, _MutableNode], keys: list[str]) -> list[GroupNode]:
    nodes = sorted((arena[k] for k in keys), key=_label_key)
    return [
        GroupNode(
            id=node.id,
            slug=node.slug,
            label=node.label,
            depth=node.depth,
            posts=sort_posts(_dedupe(node.posts)),
            children=_freeze(arena, node.children),
        )
        for node in nodes
    ]


def build_group_tree(posts: Iterable[PostSummary]) -> list[GroupNode]:
    """Build the sorted group forest. Posts without a usable tag land in 'Ungrouped'."""
    arena: dict[str, _MutableNode] = {}
    roots: list[str] = []
    ungrouped: list[PostSummary] = []

    for post in posts:
        if not post.tags:
            ungrouped.append(post)
            continue
        for tag in post.tags:
            segments = split_tag_path(tag)
            if not segments:
                ungrouped.append(post)
                continue
            _insert_path(arena, roots, segments, post)

    if ungrouped:
        arena[_UNGROUPED_KEY] = _MutableNode(
            id=UNGROUPED_ID, slug=UNGROUPED_SLUG, label=UNGROUPED_LABEL, depth=0, posts=ungrouped,
        )
        roots.append(_UNGROUPED_KEY)

    return _freeze(arena, roots)


def derive_latest_date(posts: Iterable[PostSummary]) -> str | None:
    """ISO date of the most recent post, or None if no post carries a valid date."""
    latest = None
    for post in posts:
        parsed = parse_date(post.date) if post.date else None
        if parsed and (latest is None or parsed > latest):
            latest = parsed
    return to_iso(latest) if latest else None
