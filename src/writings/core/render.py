"""Markdown to HTML rendering with stable heading anchors"""

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

from writings.core.models import Heading, RenderResult
from writings.core.utils.slug import slugify
from writings.core.utils.tokens import heading_level, inline_text


MAX_HEADING_LEVEL = 4


def make_parser(preset: str = 'gfm-like', linkify: bool = True, allow_html: bool = False) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": linkify, "html": allow_html})


def annotate_headings(tokens: list, max_level: int = MAX_HEADING_LEVEL) -> list[Heading]:
    """Attach a unique id to each heading up to max_level and return the outline.

    Repeated ids get -1, -2, ... in document order, skipping any id already
    emitted, so every id in the document is unique. A heading whose text yields
    no slug is named section-<n>, n counting the headings recorded so far.
    """
    headings: list[Heading] = []
    seen: dict[str, int] = {}
    for i, tok in enumerate(tokens):
        level = heading_level(tok)
        if level is None or level > max_level:
            continue
        inline = tokens[i + 1] if i + 1 < len(tokens) and tokens[i + 1].type == 'inline' else None
        title = inline_text(inline).strip() if inline else ''
        base = slugify(title) or f"section-{len(headings) + 1}"
        count = seen.get(base, 0)
        anchor = base if count == 0 else f"{base}-{count}"
        while anchor != base and anchor in seen:
            count += 1
            anchor = f"{base}-{count}"
        seen[base] = count + 1
        seen.setdefault(anchor, 1)
        tok.attrSet('id', anchor)
        headings.append(Heading(id=anchor, title=title, level=level))
    return headings


def render_markdown(
    body: str,
    parser: MarkdownIt | None = None,
    max_level: int = MAX_HEADING_LEVEL,
    ) -> RenderResult:
    """Render body to html and collect its heading outline. Never raises.

    If the parser fails, the body is returned as escaped preformatted text and
    the failure is reported in RenderResult.issues.
    """
    md = parser or make_parser()
    env: dict = {}
    try:
        tokens = md.parse(body, env)
        headings = annotate_headings(tokens, max_level)
        html = md.renderer.render(tokens, md.options, env)
    except Exception as e:
        return RenderResult(
            html=f"<pre>{escapeHtml(body)}</pre>\n",
            headings=[],
            issues=[f"{type(e).__name__}: {e}"],
        )
    return RenderResult(html=html, headings=headings)
