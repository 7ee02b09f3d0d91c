"""Data models for posts, headings, and the tag-group tree"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Frozen(BaseModel):
    """Immutable model serialized with camelCase keys for the presentation layer."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Heading(_Frozen):
    id: str
    title: str
    level: int


class NormalizedFrontmatter(_Frozen):
    """Canonical frontmatter: every loosely-typed field reduced to one shape."""
    title: str = ""
    summary: Optional[str] = None
    date: Optional[str] = None          # ISO-8601 UTC, e.g. 2024-01-05T00:00:00.000Z
    tags: list[str] = Field(default_factory=list)
    cosmetic_tags: list[str] = Field(default_factory=list)
    series: Optional[str] = None
    slug: Optional[str] = None
    hero_image: Optional[str] = None


class PostSummary(_Frozen):
    """Listing metadata for a post (no rendered html or headings)."""
    slug: str
    title: str
    summary: Optional[str] = None
    date: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    cosmetic_tags: list[str] = Field(default_factory=list)
    series: Optional[str] = None
    reading_time: str
    excerpt: str
    hero_image: Optional[str] = None
    body_text: str = ""


class Post(PostSummary):
    """A fully materialized post; owned by the PostStore."""
    html: str
    headings: list[Heading] = Field(default_factory=list)

    def to_summary(self) -> PostSummary:
        return PostSummary(**self.model_dump(exclude={"html", "headings"}))


class GroupNode(_Frozen):
    """One segment of a slash-delimited tag path."""
    id: str
    slug: str
    label: str
    depth: int
    posts: list[PostSummary] = Field(default_factory=list)
    children: list["GroupNode"] = Field(default_factory=list)


class GroupSummary(_Frozen):
    groups: list[GroupNode]
    flat_posts: list[PostSummary]
    updated_at: Optional[str] = None    # most recent post date; None if no post has one


class RenderResult(_Frozen):
    """Rendered html plus heading outline. issues lists non-fatal problems hit while rendering."""
    html: str
    headings: list[Heading] = Field(default_factory=list)
    issues: list[str] = Field(default_factory=list)

    @property
    def partial(self) -> bool:
        return bool(self.issues)


@dataclass
class ParsedDoc:
    """Internal parse result for a single source file; not exported."""
    path:        Path
    stem:        str            # filename without extension, source of fallback title/slug
    raw:         str            # full file content (includes frontmatter)
    body:        str            # markdown with frontmatter stripped
    frontmatter: dict[str, Any]
