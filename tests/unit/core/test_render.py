"""Unit tests for core/render.py"""

from writings.core.render import annotate_headings, make_parser, render_markdown


def test_render_supports_gfm(parser, sample_md):
    """Tables, strikethrough, links, and fenced code all render."""
    html = render_markdown(sample_md, parser).html
    assert "<table>" in html
    assert "<s>item two</s>" in html
    assert '<a href="https://example.com">link</a>' in html
    assert '<code class="language-python">' in html
    assert "<strong>bold</strong>" in html


def test_duplicate_headings_get_suffixes(parser):
    """Repeated heading text yields intro, intro-1, intro-2 in document order."""
    result = render_markdown("## Intro\n\n## Intro\n\n## Intro\n", parser)
    assert [h.id for h in result.headings] == ["intro", "intro-1", "intro-2"]
    assert '<h2 id="intro-1">Intro</h2>' in result.html


def test_heading_outline(parser, sample_md):
    """Levels 1-4 are recorded with id, title, and level; h5/h6 are left alone."""
    result = render_markdown(sample_md, parser)
    assert [(h.id, h.title, h.level) for h in result.headings] == [
        ("heading-1", "Heading 1", 1),
        ("intro", "Intro", 2),
        ("intro-1", "Intro", 2),
    ]
    assert "<h5>Too deep</h5>" in result.html


def test_heading_text_is_flattened(parser):
    result = render_markdown("## Using `yaml` *safely*\n", parser)
    assert result.headings[0].title == "Using yaml safely"
    assert result.headings[0].id == "using-yaml-safely"


def test_empty_heading_falls_back_to_section(parser):
    """A heading with no sluggable text is named section-<n>."""
    result = render_markdown("## First\n\n## !!!\n\n#\n", parser)
    assert [h.id for h in result.headings] == ["first", "section-2", "section-3"]
    assert result.headings[2].title == ""


def test_max_level_configurable(parser):
    result = render_markdown("# A\n\n## B\n", parser, max_level=1)
    assert [h.id for h in result.headings] == ["a"]


def test_ids_are_reproducible(parser, sample_md):
    assert render_markdown(sample_md, parser) == render_markdown(sample_md, make_parser())


def test_raw_html_is_escaped(parser):
    html = render_markdown("<script>alert(1)</script>\n", parser).html
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_bare_urls_are_linked(parser):
    html = render_markdown("Visit https://example.com today.\n", parser).html
    assert '<a href="https://example.com">https://example.com</a>' in html


def test_unbalanced_markup_renders_literally(parser):
    """Malformed spans degrade to literal text instead of failing."""
    result = render_markdown("An [unclosed link( and **bold\n\n| a |\n", parser)
    assert result.issues == []
    assert "[unclosed link(" in result.html
    assert "**bold" in result.html


def test_parser_failure_is_reported_not_raised(parser):
    def boom(*args, **kwargs):
        raise RuntimeError("parser exploded")

    parser.parse = boom
    result = render_markdown("# Title\n\n<b>x</b>\n", parser)
    assert result.partial
    assert result.issues == ["RuntimeError: parser exploded"]
    assert result.headings == []
    assert "&lt;b&gt;x&lt;/b&gt;" in result.html


def test_annotate_headings_sets_id_attr(parser):
    tokens = parser.parse("## Hello World\n")
    headings = annotate_headings(tokens)
    assert tokens[0].attrGet("id") == "hello-world"
    assert headings[0].id == "hello-world"


def test_suffixed_id_does_not_clash_with_later_heading(parser):
    """A heading whose own text slugs to an already emitted suffixed id gets a fresh one."""
    result = render_markdown("## Intro\n\n## Intro\n\n## Intro 1\n", parser)
    assert [h.id for h in result.headings] == ["intro", "intro-1", "intro-1-1"]


def test_suffix_skips_id_taken_by_earlier_heading(parser):
    result = render_markdown("## Intro 1\n\n## Intro\n\n## Intro\n", parser)
    assert [h.id for h in result.headings] == ["intro-1", "intro", "intro-2"]
