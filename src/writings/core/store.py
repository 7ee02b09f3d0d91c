"""PostStore: loads every post once and serves read-only views over them"""

from pathlib import Path

from loguru import logger
from markdown_it import MarkdownIt

from writings.config import Settings
from writings.core.errors import SkippedDocument
from writings.core.frontmatter import normalize_frontmatter
from writings.core.groups import build_group_tree, derive_latest_date, sort_posts
from writings.core.models import GroupSummary, ParsedDoc, Post, PostSummary
from writings.core.parse import discover_files, parse_file
from writings.core.render import make_parser, render_markdown
from writings.core.scoring import related_posts
from writings.core.utils.slug import slugify, title_from_filename
from writings.core.utils.text import build_excerpt, estimate_reading_time, strip_formatting


def build_post(parsed: ParsedDoc, parser: MarkdownIt, settings: Settings) -> Post:
    """Turn one parsed document into a Post. Raises SkippedDocument when no title can be derived."""
    fm = normalize_frontmatter(parsed.frontmatter)
    title = fm.title or title_from_filename(parsed.stem)
    if not title:
        raise SkippedDocument(parsed.path, "it has no title")

    rendered = render_markdown(parsed.body, parser, settings.heading_max_level)
    for issue in rendered.issues:
        logger.warning("Rendered {} partially: {}", parsed.path, issue)

    return Post(
        slug=fm.slug or slugify(parsed.stem),
        title=title,
        summary=fm.summary,
        date=fm.date,
        tags=fm.tags,
        cosmetic_tags=fm.cosmetic_tags,
        series=fm.series,
        reading_time=estimate_reading_time(parsed.body, settings.words_per_minute),
        excerpt=build_excerpt(fm.summary, parsed.body, settings.excerpt_length),
        hero_image=fm.hero_image,
        body_text=strip_formatting(parsed.body),
        html=rendered.html,
        headings=rendered.headings,
    )


def _unique_slug(slug: str, taken: set[str]) -> str:
    candidate, n = slug, 0
    while candidate in taken:
        n += 1
        candidate = f"{slug}-{n}"
    return candidate


class PostStore:
    """Every post under content_dir, loaded on first use and immutable afterwards.

    Construct one per process (or build) and pass it to whatever needs posts.
    """

    def __init__(self, content_dir: Path | str, settings: Settings | None = None):
        self.content_dir = Path(content_dir)
        self.settings = settings or Settings()
        self._posts: list[Post] | None = None
        self._summaries: list[PostSummary] = []
        self._by_slug: dict[str, Post] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "PostStore":
        return cls(settings.content_dir, settings)

    # --- loading ---

    def load(self) -> list[Post]:
        """Read and build all posts on the first call; return the cached list afterwards."""
        if self._posts is None:
            self._posts = self._load_posts()
            self._summaries = [post.to_summary() for post in self._posts]
            self._by_slug = {post.slug: post for post in self._posts}
        return self._posts

    def _load_posts(self) -> list[Post]:
        if not self.content_dir.exists():
            logger.warning("Content directory {} does not exist; no posts loaded", self.content_dir)
            return []

        parser = make_parser(self.settings.parser_config, self.settings.linkify, self.settings.allow_html)
        posts: list[Post] = []
        taken: set[str] = set()
        skipped = 0
        for path in discover_files(self.content_dir):
            try:
                post = build_post(parse_file(path), parser, self.settings)
            except SkippedDocument as e:
                logger.warning(str(e))
                skipped += 1
                continue
            except (OSError, ValueError) as e:
                logger.warning("Skipping {}: {}", path, e)
                skipped += 1
                continue

            slug = _unique_slug(post.slug, taken)
            if slug != post.slug:
                logger.warning("Slug {!r} from {} is already taken; using {!r}", post.slug, path, slug)
                post = post.model_copy(update={"slug": slug})
            taken.add(slug)
            posts.append(post)
            logger.debug("Loaded {} as {}", path, slug)

        logger.info("Loaded {} post(s) from {} ({} skipped)", len(posts), self.content_dir, skipped)
        return sort_posts(posts)

    # --- read operations ---

    def list_summaries(self) -> list[PostSummary]:
        """All posts, newest first."""
        self.load()
        return list(self._summaries)

    def get_by_slug(self, slug: str) -> Post | None:
        self.load()
        return self._by_slug.get(slug)

    def latest(self, limit: int | None = None) -> list[PostSummary]:
        limit = self.settings.latest_limit if limit is None else limit
        return self.list_summaries()[:limit]

    def related(self, slug: str, limit: int | None = None) -> list[PostSummary]:
        """Posts sharing tags or series with slug; empty for an unknown slug."""
        limit = self.settings.related_limit if limit is None else limit
        current = self.get_by_slug(slug)
        if current is None:
            return []
        return related_posts(current.to_summary(), self._summaries, limit)

    def group_tree(self) -> GroupSummary:
        summaries = self.list_summaries()
        return GroupSummary(
            groups=build_group_tree(summaries),
            flat_posts=summaries,
            updated_at=derive_latest_date(summaries),
        )

    def all_tags(self) -> list[str]:
        """Distinct tags as written, sorted."""
        return sorted({tag for post in self.list_summaries() for tag in post.tags})
