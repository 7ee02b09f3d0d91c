"""Shared fixtures for core unit tests"""

import pytest

from writings.core.models import PostSummary
from writings.core.render import make_parser


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text and a [link](https://example.com).

## Intro

| a | b |
|---|---|
| 1 | 2 |

## Intro

- item one
- ~~item two~~

```python
print("hello")
```

##### Too deep
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="parser")
def parser_fixture():
    return make_parser()


@pytest.fixture(name="make_summary")
def make_summary_fixture():
    """Factory for PostSummary objects with sensible defaults."""
    def _make(slug: str, **fields) -> PostSummary:
        data = {
            "title": slug.replace("-", " ").title(),
            "reading_time": "1 min read",
            "excerpt": "",
        }
        data.update(fields)
        return PostSummary(slug=slug, **data)
    return _make
