"""Root test configuration: isolate tests from local config and env settings"""

import os
from pathlib import Path

import pytest
from loguru import logger

from writings.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Drop WRITINGS_* env vars and run each test away from any project config.yaml."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(name="log_messages")
def log_messages_fixture():
    """Collect loguru WARNING+ messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(name="write_post")
def write_post_fixture(tmp_path):
    """Write a markdown file into tmp_path/posts and return its path."""
    posts_dir = tmp_path / "posts"
    posts_dir.mkdir(exist_ok=True)

    def _write(name: str, body: str = "Body text.\n", **frontmatter) -> Path:
        lines = []
        for key, value in frontmatter.items():
            if isinstance(value, list):
                lines.append(f"{key}: [{', '.join(value)}]")
            else:
                lines.append(f"{key}: {value}")
        header = "---\n" + "\n".join(lines) + "\n---\n" if lines else ""
        path = posts_dir / name
        path.write_text(header + body, encoding="utf-8")
        return path

    return _write
