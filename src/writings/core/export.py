"""Export pipeline: write the post store as JSON for the site front end"""

import json
from pathlib import Path

from pydantic import BaseModel

from writings.core.models import Post
from writings.core.store import PostStore


def _dump(model: BaseModel) -> dict:
    return model.model_dump(mode="json", by_alias=True)


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding='utf-8')
    return path


def write_post(post: Post, output_dir: Path) -> Path:
    """Write output_dir/posts/<slug>.json holding the full post (html and headings included)."""
    return write_json(output_dir / "posts" / f"{post.slug}.json", _dump(post))


def export_site(store: PostStore, output_dir: Path) -> list[Path]:
    """Write index.json (group tree + flat list), tags.json, and one file per post.

    Returns the written paths, index first.
    """
    written = [
        write_json(output_dir / "index.json", _dump(store.group_tree())),
        write_json(output_dir / "tags.json", store.all_tags()),
    ]
    for post in store.load():
        written.append(write_post(post, output_dir))
    return written
