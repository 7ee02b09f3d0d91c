"""Related-post and free-text search scoring"""

from typing import Iterable, Mapping

from writings.core.groups import post_sort_key
from writings.core.models import PostSummary
from writings.core.utils.dates import timestamp


SHARED_TAG_WEIGHT = 2
SHARED_SERIES_BONUS = 3

# Substring hit weights for search, per field.
TITLE_WEIGHT = 6
SUMMARY_WEIGHT = 4
TAGS_WEIGHT = 3
BODY_WEIGHT = 1

ALL_GROUPS = "all"


def related_score(current: PostSummary, candidate: PostSummary) -> int:
    """+2 per tag both posts carry, +3 when both belong to the same series."""
    shared = sum(1 for tag in current.tags if tag in candidate.tags)
    score = shared * SHARED_TAG_WEIGHT
    if current.series and candidate.series and current.series == candidate.series:
        score += SHARED_SERIES_BONUS
    return score


def related_posts(
    current: PostSummary,
    candidates: Iterable[PostSummary],
    limit: int = 3,
    ) -> list[PostSummary]:
    """Top `limit` candidates by related_score, newest first on ties. Zero scores are dropped."""
    scored = [
        (related_score(current, post), post)
        for post in candidates
        if post.slug != current.slug
    ]
    scored = [entry for entry in scored if entry[0] > 0]
    scored.sort(key=lambda entry: (-entry[0], -timestamp(entry[1].date)))
    return [post for _, post in scored[:limit]]


def normalize_query(query: str | None) -> str:
    return (query or "").strip().lower()


def match_score(post: PostSummary, query: str) -> int:
    """Additive field weights for a lowercased, trimmed query."""
    score = 0
    if query in post.title.lower():
        score += TITLE_WEIGHT
    if query in (post.summary or "").lower():
        score += SUMMARY_WEIGHT
    if query in " ".join(post.tags).lower():
        score += TAGS_WEIGHT
    if query in post.body_text.lower():
        score += BODY_WEIGHT
    return score


def search_posts(
    posts: Iterable[PostSummary],
    query: str | None,
    group: str | None = None,
    group_index: Mapping[str, frozenset[str]] | None = None,
    ) -> list[PostSummary]:
    """Filter posts to the active group and rank them against query.

    group is a group slug, or None/'all' for every post; membership comes from
    group_index (see browse.build_group_index), so a group matches the posts of
    all its descendants too. An unknown group matches nothing. With an empty
    query the input order is kept; otherwise results are ordered by score,
    then newest first, then title.
    """
    needle = normalize_query(query)
    scoped = group not in (None, ALL_GROUPS)
    members = (group_index or {}).get(group, frozenset()) if scoped else None

    matches: list[tuple[int, PostSummary]] = []
    for post in posts:
        if members is not None and post.slug not in members:
            continue
        if not needle:
            matches.append((0, post))
            continue
        score = match_score(post, needle)
        if score > 0:
            matches.append((score, post))

    if needle:
        matches.sort(key=lambda entry: (-entry[0], *post_sort_key(entry[1])))
    return [post for _, post in matches]
