"""Unit tests for core/utils/slug.py"""

import re

import pytest

from writings.core.utils.slug import slugify, title_from_filename


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-chrs"),
    ("my_file_name", "myfilename"),
    ("Tabs\tand\nnewlines", "tabs-and-newlines"),
    ("", ""),
])
def test_slugify_basic(text, expected):
    """slugify lowercases, drops disallowed characters, and hyphenates whitespace."""
    assert slugify(text) == expected


def test_slugify_preserves_hyphens():
    """slugify keeps existing hyphens intact."""
    assert slugify("already-slugified") == "already-slugified"


@pytest.mark.parametrize("text", [
    "!leading", "- dash first", "trailing -", "a - - b", "Ünïcödé  Tëxt", "--", "Café au lait!",
])
def test_slugify_idempotent_and_clean(text):
    """slugify(slugify(x)) == slugify(x); output is [a-z0-9-] with no edge or doubled hyphens."""
    once = slugify(text)
    assert slugify(once) == once
    assert re.fullmatch(r'[a-z0-9-]*', once)
    assert not once.startswith('-') and not once.endswith('-')
    assert '--' not in once


@pytest.mark.parametrize("stem,expected", [
    ("my-first_post", "My First Post"),
    ("hello", "Hello"),
    ("  spaced--out__name ", "Spaced Out Name"),
    ("2024-review", "2024 Review"),
    ("-__-", ""),
])
def test_title_from_filename(stem, expected):
    """title_from_filename turns separators into spaces and capitalizes each word."""
    assert title_from_filename(stem) == expected
