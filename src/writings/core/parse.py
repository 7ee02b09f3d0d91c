"""File discovery and frontmatter extraction"""

import re
from pathlib import Path
from typing import Any

import yaml

from writings.core.models import ParsedDoc


FRONTMATTER_RE = re.compile(r'\A---[ \t]*\n(.*?)^---[ \t]*(?:\n|\Z)', re.DOTALL | re.MULTILINE)
MD_EXTENSIONS = {'.md', '.markdown'}


class FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamps as plain strings for parse_date to judge."""


FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != 'tag:yaml.org,2002:timestamp']
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.load(m.group(1), Loader=FrontmatterLoader) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted markdown files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in MD_EXTENSIONS)


def parse_file(path: Path) -> ParsedDoc:
    """Read a single markdown file and split off its frontmatter."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = strip_frontmatter(raw.lstrip('\ufeff'))
    return ParsedDoc(
        path=path,
        stem=path.stem,
        raw=raw,
        body=body,
        frontmatter=frontmatter,
    )
