"""Frontmatter normalization: loosely-typed YAML fields to NormalizedFrontmatter"""

from typing import Any, Mapping

from writings.core.models import NormalizedFrontmatter
from writings.core.utils.dates import sanitize_date
from writings.core.utils.slug import slugify


def _text(value: Any) -> str | None:
    """Stringify and trim a scalar field; empty or missing becomes None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    """Value of the first key present with a non-None value."""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def normalize_tags(value: Any) -> list[str]:
    """Accept a list or a comma-separated string; trim, drop empties, dedupe case-insensitively.

    Any other shape (number, mapping, None) normalizes to an empty list.
    """
    if isinstance(value, (list, tuple)):
        raw = [entry for entry in value if entry is not None]
    elif isinstance(value, str):
        raw = value.split(",")
    else:
        return []

    tags: list[str] = []
    seen: set[str] = set()
    for entry in raw:
        label = str(entry).strip()
        if not label:
            continue
        key = label.lower()
        if key in seen:
            continue
        seen.add(key)
        tags.append(label)
    return tags


def normalize_frontmatter(data: Mapping[str, Any]) -> NormalizedFrontmatter:
    """Reduce raw frontmatter to its canonical shape. Bad values become absent, never errors."""
    slug = slugify(_text(data.get("slug")) or "")
    return NormalizedFrontmatter(
        title=_text(data.get("title")) or "",
        summary=_text(data.get("summary")),
        date=sanitize_date(data.get("date")),
        tags=normalize_tags(data.get("tags")),
        cosmetic_tags=normalize_tags(_first(data, "cosmeticTags", "cosmetic-tags", "cosmetic_tags")),
        series=_text(data.get("series")),
        slug=slug or None,
        hero_image=_text(_first(data, "heroImage", "hero_image")),
    )
