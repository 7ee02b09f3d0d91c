"""Slug and title generation for post identifiers"""

import re


_INVALID = re.compile(r'[^a-z0-9\s-]')
_SPACES = re.compile(r'\s+')
_HYPHENS = re.compile(r'-+')
_WORD_START = re.compile(r'\b\w', re.ASCII)


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower().strip()
    text = _INVALID.sub('', text)
    text = _SPACES.sub('-', text)
    return _HYPHENS.sub('-', text).strip('-')


def title_from_filename(stem: str) -> str:
    """'my-first_post' -> 'My First Post'."""
    text = re.sub(r'[-_]', ' ', stem)
    text = _SPACES.sub(' ', text).strip()
    return _WORD_START.sub(lambda m: m.group(0).upper(), text)
