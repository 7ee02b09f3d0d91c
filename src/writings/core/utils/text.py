"""Plain-text helpers: formatting removal, excerpts, and reading time"""

import math
import re


ELLIPSIS = "…"

# Applied in order; code and image syntax must go before link text is unwrapped.
_STRIP_RULES: list[tuple[re.Pattern, str]] = [
    (re.compile(r'```[\s\S]*?```'), ' '),
    (re.compile(r'`[^`]+`'), ' '),
    (re.compile(r'!\[[^\]]*\]\([^)]*\)'), ' '),
    (re.compile(r'\[([^\]]+)\]\([^)]*\)'), r'\1'),
    (re.compile(r'[#>*_~\-]'), ' '),
    (re.compile(r'\s+'), ' '),
]


def strip_formatting(markdown: str) -> str:
    """Best-effort markdown to plain text for search and excerpts."""
    text = markdown
    for pattern, repl in _STRIP_RULES:
        text = pattern.sub(repl, text)
    return text.strip()


def word_count(text: str) -> int:
    return len(text.split())


def estimate_reading_time(text: str, words_per_minute: int = 200) -> str:
    """Return e.g. '3 min read'; never less than one minute."""
    minutes = max(1, math.floor(word_count(text) / words_per_minute + 0.5))
    return f"{minutes} min read"


def truncate(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return f"{text[:max_len - 1].rstrip()}{ELLIPSIS}"


def build_excerpt(summary: str | None, body: str, max_len: int = 180) -> str:
    """Use the summary when present, else the truncated plain-text body."""
    if summary:
        return summary
    return truncate(strip_formatting(body), max_len)
